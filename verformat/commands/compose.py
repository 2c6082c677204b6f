"""Compose command implementation for verformat.

Builds a version string from components. The output format is chosen by
``--format``, then ``--type``, then the component flags, then the
configured default (see :mod:`verformat.core.composer`).

With ``--from-env`` the components are read from ``VERFORMAT_COMPOSED_*``
variables (``MAJOR``, ``MINOR``, ``PATCH``, ``PREFIX``, ``SUFFIX``,
``HASH``, ``FORMAT``, ``TYPE``). Values given on the command line take
precedence over the environment.

Typical usage::

    $ verformat compose --major 1 --minor 2 --patch 3
    v1.2.3
    $ verformat compose --major 1 --minor 2 --patch 3 --hash abc1234
    v1.2.3-abc1234
    $ verformat compose --major 1 --minor 2 --patch 3 --suffix rc --no-prefix
    1.2.3-rc
    $ VERFORMAT_COMPOSED_MAJOR=1 VERFORMAT_COMPOSED_MINOR=2 \\
      VERFORMAT_COMPOSED_PATCH=3 verformat compose --from-env
    v1.2.3
"""

from __future__ import annotations

import os
import sys
from typing import Dict, Mapping, Optional

import click

from verformat.constants import COMPOSED_ENV_PREFIX
from verformat.context import VerFormatContext, pass_context
from verformat.core import compose_version
from verformat.exceptions import MissingEnvironmentError, VerFormatError
from verformat.models import FormatTemplate, ReleaseType
from verformat.utils import get_logger, print_error, print_value

logger = get_logger("commands.compose")

#: Component names readable from ``VERFORMAT_COMPOSED_<NAME>``.
ENV_FIELDS = ("major", "minor", "patch", "prefix", "suffix", "hash", "format", "type")

_REQUIRED_FIELDS = ("major", "minor", "patch")


def env_name(field: str) -> str:
    """Return the environment variable holding ``field``."""
    return f"{COMPOSED_ENV_PREFIX}{field.upper()}"


def merge_from_env(
    given: Mapping[str, Optional[str]],
    environ: Mapping[str, str],
) -> Dict[str, Optional[str]]:
    """Fill components missing from ``given`` with ``VERFORMAT_COMPOSED_*``.

    Empty variables count as unset.

    Raises:
        MissingEnvironmentError: A number is neither given nor set, naming
            every missing variable.
    """
    merged: Dict[str, Optional[str]] = {}
    for field in ENV_FIELDS:
        value = given.get(field) or None
        if value is None:
            value = environ.get(env_name(field)) or None
            if value is not None:
                logger.debug("Read %s from %s", field, env_name(field))
        merged[field] = value

    missing = [env_name(f) for f in _REQUIRED_FIELDS if merged[f] is None]
    if missing:
        raise MissingEnvironmentError(
            "Missing required environment variables for compose --from-env",
            variables=missing,
        )
    return merged


@click.command()
@click.option("--major", metavar="X", help="Major version number (required).")
@click.option("--minor", metavar="YY", help="Minor version number (required).")
@click.option("--patch", metavar="Z", help="Patch version number (required).")
@click.option("--prefix", metavar="PREFIX", help="Prefix to use (default: v).")
@click.option(
    "--no-prefix",
    "--exclude-prefix",
    "exclude_prefix",
    is_flag=True,
    help="Leave the prefix out.",
)
@click.option("--suffix", metavar="SUFFIX", help="Suffix, e.g. rc or beta.")
@click.option(
    "--no-suffix",
    "--exclude-suffix",
    "exclude_suffix",
    is_flag=True,
    help="Leave the suffix out.",
)
@click.option("--hash", "hash_", metavar="HASH", help="Lowercase hex commit hash.")
@click.option(
    "--format",
    "-f",
    "format_name",
    type=click.Choice([t.name for t in FormatTemplate.all()]),
    help="Explicit format template (highest priority).",
)
@click.option(
    "--type",
    "-t",
    "type_name",
    type=click.Choice([t.value for t in ReleaseType]),
    help="Release type (used when --format is not given).",
)
@click.option(
    "--from-env",
    is_flag=True,
    help=f"Read missing components from {COMPOSED_ENV_PREFIX}* variables.",
)
@pass_context
def compose(
    ctx: VerFormatContext,
    major: Optional[str],
    minor: Optional[str],
    patch: Optional[str],
    prefix: Optional[str],
    exclude_prefix: bool,
    suffix: Optional[str],
    exclude_suffix: bool,
    hash_: Optional[str],
    format_name: Optional[str],
    type_name: Optional[str],
    from_env: bool,
) -> None:
    """Compose a version string from components.

    \b
    Examples:
      verformat compose --major 1 --minor 2 --patch 3
      verformat compose --major 1 --minor 2 --patch 3 --suffix rc
      verformat compose --major 1 --minor 2 --patch 3 --suffix beta --hash abc1234
      verformat compose --major 1 --minor 2 --patch 3 --format X.YY.Z-rc
      verformat compose --from-env
    """
    values: Dict[str, Optional[str]] = {
        "major": major,
        "minor": minor,
        "patch": patch,
        "prefix": prefix,
        "suffix": suffix,
        "hash": hash_,
        "format": format_name,
        "type": type_name,
    }

    try:
        if from_env:
            values = merge_from_env(values, os.environ)

        version = compose_version(
            values["major"],
            values["minor"],
            values["patch"],
            prefix=values["prefix"],
            suffix=values["suffix"],
            hash=values["hash"],
            template=values["format"],
            release_type=values["type"],
            exclude_prefix=exclude_prefix,
            exclude_suffix=exclude_suffix,
            config=ctx.config,
        )
    except MissingEnvironmentError as exc:
        print_error(exc.message)
        for variable in exc.variables:
            print_error(variable, prefix="  missing:")
        sys.exit(1)
    except VerFormatError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_value(version)
