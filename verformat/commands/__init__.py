"""CLI subcommands for verformat."""

from __future__ import annotations

from verformat.commands.parse import parse
from verformat.commands.compose import compose
from verformat.commands.extract import extract
from verformat.commands.validate import validate
from verformat.commands.listing import defaults, formats, types

#: Commands registered on the top-level ``verformat`` group, in help order.
COMMANDS = (parse, validate, compose, extract, formats, types, defaults)

__all__ = [
    "COMMANDS",
    "parse",
    "validate",
    "compose",
    "extract",
    "formats",
    "types",
    "defaults",
]
