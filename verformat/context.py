"""
Shared context object for verformat CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from verformat.config import DEFAULT_CONFIG, VerFormatConfig


class VerFormatContext:
    """Per-invocation state shared by the CLI commands.

    Attributes:
        config_path: Path to the configuration file, if one was loaded.
        config: Loaded defaults (immutable).
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
    """

    __slots__ = ("config_path", "config", "verbose", "color")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.config: VerFormatConfig = DEFAULT_CONFIG
        self.verbose: int = 0
        self.color: bool = True


#: Click decorator for injecting :class:`VerFormatContext` into commands.
pass_context = click.make_pass_decorator(VerFormatContext, ensure=True)
