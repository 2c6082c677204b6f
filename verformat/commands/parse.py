"""Parse command implementation for verformat.

Splits a version string into its components and prints them.

Output depends on how many fields were requested:

- none      - every field, as ``VERFORMAT_PARSED_<FIELD>=value`` lines
- one       - the bare value, suitable for ``$(verformat parse ...)``
- several   - the requested fields, in the same ``KEY=VALUE`` form

``--output json`` and ``--output table`` change the multi-field rendering.

Typical usage::

    $ verformat parse v1.2.3-rc-abc123f
    $ verformat parse v1.2.3-rc --suffix
    $ eval "$(verformat parse "$TAG")"
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, List

import click

from verformat.constants import PARSED_ENV_PREFIX
from verformat.core import parse_version
from verformat.exceptions import VerFormatError
from verformat.utils import (
    get_logger,
    print_error,
    print_key_values,
    print_table,
    print_value,
)

logger = get_logger("commands.parse")

FIELDS = ("major", "minor", "patch", "prefix", "suffix", "hash", "type", "format")


@click.command()
@click.argument("version")
@click.option("--major", is_flag=True, help="Output the major version.")
@click.option("--minor", is_flag=True, help="Output the minor version.")
@click.option("--patch", is_flag=True, help="Output the patch version.")
@click.option("--prefix", is_flag=True, help="Output the prefix (empty if none).")
@click.option("--suffix", is_flag=True, help="Output the suffix (empty if none).")
@click.option("--hash", "hash_", is_flag=True, help="Output the hash (empty if none).")
@click.option("--type", "type_", is_flag=True, help="Output the release type.")
@click.option("--format", "format_", is_flag=True, help="Output the format template.")
@click.option(
    "--output",
    "-o",
    type=click.Choice(["env", "json", "table"], case_sensitive=False),
    default="env",
    help="Rendering for multi-field output.",
)
def parse(
    version: str,
    major: bool,
    minor: bool,
    patch: bool,
    prefix: bool,
    suffix: bool,
    hash_: bool,
    type_: bool,
    format_: bool,
    output: str,
) -> None:
    """Parse VERSION into its components.

    \b
    Examples:
      verformat parse v1.2.3-rc-abc123f
      verformat parse v1.2.3 --major
      verformat parse 1.2.3-beta --type --format
    """
    flags = (major, minor, patch, prefix, suffix, hash_, type_, format_)
    requested: List[str] = [name for name, wanted in zip(FIELDS, flags) if wanted]

    try:
        components = parse_version(version)
    except VerFormatError as exc:
        print_error(str(exc))
        sys.exit(1)

    values = components.to_dict()
    logger.info(
        "Parsed version: %s -> type=%s, format=%s",
        version,
        values["type"],
        values["format"],
    )

    if len(requested) == 1:
        print_value(values[requested[0]])
        return

    selected = {name: values[name] for name in (requested or FIELDS)}
    _render(selected, output.lower())


def _render(values: Dict[str, Any], output: str) -> None:
    if output == "json":
        click.echo(json.dumps(values, indent=2))
    elif output == "table":
        print_table(
            [{"Field": name, "Value": value} for name, value in values.items()],
            title="Version components",
        )
    else:
        print_key_values(values, key_prefix=PARSED_ENV_PREFIX)
