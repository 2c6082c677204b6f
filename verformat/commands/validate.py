"""Validate command implementation for verformat.

Checks a version string and reports the result through the exit code:
``0`` when the check passes, ``1`` when it fails. At most one check can be
requested per invocation; without one, the string only has to parse.

Typical usage::

    $ verformat validate v1.2.3
    $ verformat validate v1.2.3-rc --format vX.YY.Z-rc
    $ verformat validate v1.2.3-abc123f --type dev
    $ verformat validate v1.2.3-rc --is-rc && echo "release candidate"
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from verformat.core import (
    Predicate,
    check,
    validate as validate_version,
    validate_against_template,
    validate_against_type,
)
from verformat.exceptions import ParseError, VerFormatError
from verformat.models import FormatTemplate, ReleaseType
from verformat.utils import get_logger, print_error

logger = get_logger("commands.validate")

TEMPLATE_NAMES = [t.name for t in FormatTemplate.all()]
TYPE_NAMES = [t.value for t in ReleaseType]


def _predicate_option(predicate: Predicate, help_text: str):
    return click.option(
        f"--{predicate.value}",
        predicate.value.replace("-", "_"),
        is_flag=True,
        help=help_text,
    )


@click.command()
@click.argument("version")
@click.option(
    "--format",
    "-f",
    "format_name",
    type=click.Choice(TEMPLATE_NAMES),
    help="Require this format template.",
)
@click.option(
    "--type",
    "-t",
    "type_name",
    type=click.Choice(TYPE_NAMES),
    help="Require this release type.",
)
@_predicate_option(Predicate.IS_RELEASE, "Check for a release (X.YY.Z).")
@_predicate_option(Predicate.IS_RC, "Check for a release candidate (-rc).")
@_predicate_option(Predicate.IS_DEV, "Check for a development version (-HASH).")
@_predicate_option(Predicate.IS_RC_DEV, "Check for an RC with commits (-rc-HASH).")
@_predicate_option(Predicate.IS_CUSTOM, "Check for a custom suffix (-<suffix>).")
@_predicate_option(Predicate.IS_CUSTOM_DEV, "Check for a custom suffix with hash.")
@_predicate_option(Predicate.HAS_PREFIX, "Check that a prefix is present.")
@_predicate_option(Predicate.HAS_SUFFIX, "Check that a suffix is present.")
@_predicate_option(Predicate.HAS_HASH, "Check that a hash is present.")
def validate(
    version: str,
    format_name: Optional[str],
    type_name: Optional[str],
    **checks: bool,
) -> None:
    """Validate VERSION, optionally against a format, type or predicate.

    \b
    Examples:
      verformat validate v1.2.3
      verformat validate v1.2.3-rc --format vX.YY.Z-rc
      verformat validate 1.2.3-beta-abc123 --type custom-dev
      verformat validate v1.2.3 --has-prefix
    """
    predicates = [
        Predicate.from_name(name.replace("_", "-"))
        for name, enabled in checks.items()
        if enabled
    ]
    requested = [x for x in (format_name, type_name) if x] + predicates
    if len(requested) > 1:
        raise click.UsageError(
            "Use at most one of --format, --type or a single --is-*/--has-* check."
        )

    if predicates:
        predicate = predicates[0].value
        if not check(version, predicate):
            logger.info("Check %s failed for %s", predicate, version)
            sys.exit(1)
        logger.info("Check %s passed for %s", predicate, version)
        return

    try:
        if format_name:
            validate_against_template(version, format_name)
        elif type_name:
            validate_against_type(version, type_name)
        else:
            validate_version(version)
    except ParseError as exc:
        print_error(f"Invalid version: {exc}")
        sys.exit(1)
    except VerFormatError as exc:
        print_error(str(exc))
        sys.exit(1)

    logger.info("Version is valid: %s", version)
