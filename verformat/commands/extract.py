"""Extract command implementation for verformat.

Prints the first valid version found in a piece of text, e.g. a file name
or a log line. Pass ``-`` to read the text from stdin.

Typical usage::

    $ verformat extract "opendaq-v3.10.2-rc-linux-x86_64.tar.gz"
    v3.10.2-rc
    $ git describe --tags | verformat extract -
"""

from __future__ import annotations

import sys

import click

from verformat.core import extract_version
from verformat.exceptions import VersionNotFoundError
from verformat.utils import get_logger, print_error, print_value

logger = get_logger("commands.extract")


@click.command()
@click.argument("text")
def extract(text: str) -> None:
    """Extract the first version found in TEXT (use - for stdin)."""
    if text == "-":
        with click.open_file("-") as stream:
            text = stream.read()

    try:
        version = extract_version(text)
    except VersionNotFoundError as exc:
        print_error(exc.message)
        sys.exit(1)

    print_value(version)
