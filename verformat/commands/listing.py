"""Listing commands for verformat: ``formats``, ``types`` and ``defaults``.

These print the closed sets the engine works with, so scripts can discover
valid ``--format`` / ``--type`` values instead of hard-coding them.
"""

from __future__ import annotations

from typing import Optional

import click

from verformat.context import VerFormatContext, pass_context
from verformat.core import list_templates
from verformat.core.templates import PREFIX_EXCLUDE, PREFIX_ONLY
from verformat.models import ReleaseType
from verformat.utils import print_table, print_value


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


@click.command()
@click.option("--verbose", "detailed", is_flag=True, help="Show axes and descriptions.")
@click.option("--prefix-only", is_flag=True, help="Only formats with a prefix.")
@click.option("--prefix-exclude", is_flag=True, help="Only formats without a prefix.")
def formats(detailed: bool, prefix_only: bool, prefix_exclude: bool) -> None:
    """List the supported format templates."""
    if prefix_only and prefix_exclude:
        raise click.UsageError("--prefix-only and --prefix-exclude are mutually exclusive.")

    prefix_filter: Optional[str] = None
    if prefix_only:
        prefix_filter = PREFIX_ONLY
    elif prefix_exclude:
        prefix_filter = PREFIX_EXCLUDE
    templates = list_templates(prefix_filter)

    if not detailed:
        for template in templates:
            print_value(template.name)
        return

    print_table(
        [
            {
                "Format": t.name,
                "Prefix": _yes_no(t.has_prefix),
                "Suffix": t.suffix_kind.value if t.has_suffix else "no",
                "Hash": _yes_no(t.has_hash),
                "Type": t.release_type.value,
                "Description": t.description,
            }
            for t in templates
        ],
        title="Supported formats",
    )


@click.command()
@click.option("--verbose", "detailed", is_flag=True, help="Show descriptions and examples.")
def types(detailed: bool) -> None:
    """List the supported release types."""
    if not detailed:
        for release_type in ReleaseType:
            print_value(release_type.value)
        return

    print_table(
        [
            {
                "Type": t.value,
                "Description": t.description,
                "Example": t.example,
            }
            for t in ReleaseType
        ],
        title="Release types",
    )


@click.command()
@click.option("--prefix", "show_prefix", is_flag=True, help="Only the default prefix.")
@click.option("--suffix", "show_suffix", is_flag=True, help="Only the default suffix.")
@click.option("--format", "show_format", is_flag=True, help="Only the default format.")
@pass_context
def defaults(
    ctx: VerFormatContext,
    show_prefix: bool,
    show_suffix: bool,
    show_format: bool,
) -> None:
    """Show the defaults used when composing.

    With one flag only that value is printed; otherwise ``name=value``
    lines are printed for the requested (or all) defaults.
    """
    config = ctx.config
    values = {
        "prefix": config.default_prefix,
        "suffix": config.default_suffix,
        "format": config.default_format.name,
    }

    requested = [
        name
        for name, wanted in (
            ("prefix", show_prefix),
            ("suffix", show_suffix),
            ("format", show_format),
        )
        if wanted
    ]

    if len(requested) == 1:
        print_value(values[requested[0]])
        return

    for name in requested or values:
        print_value(f"{name}={values[name]}")
