"""
Utility helpers for verformat.

- Console output helpers (Rich-based)
- Logging configuration and retrieval

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from verformat.utils.logger import (
    disable_logging,
    get_logger,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from verformat.utils.console import (
    print_error,
    print_key_values,
    print_table,
    print_value,
    print_warning,
    reconfigure_console,
)

__all__ = [
    # Console
    "print_error",
    "print_key_values",
    "print_table",
    "print_value",
    "print_warning",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "level_for_verbosity",
]
