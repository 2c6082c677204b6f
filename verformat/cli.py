"""
Command-line interface for verformat.

The ``verformat`` group owns the options shared by every subcommand
(config file, verbosity, color) and builds the context they read defaults
from. ``main`` turns the outcome into a process exit code.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from verformat.config import load_config
from verformat.__version__ import __version__
from verformat.context import VerFormatContext
from verformat.constants import CONFIG_ENVVAR
from verformat.exceptions import ConfigError, VerFormatError
from verformat.utils.logger import (
    disable_logging,
    get_logger,
    level_for_verbosity,
    setup_logging,
)
from verformat.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar=CONFIG_ENVVAR,
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="VERFORMAT_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="verformat",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """verformat - parse, validate, compose and extract build versions.

    \b
    Versions look like [prefix]X.YY.Z[-suffix][-hash], for example
    v3.10.2, v3.10.2-rc, v3.10.2-a1b2c3f or 3.10.2-beta-a1b2c3f.

    \b
    Examples:
      verformat parse v1.2.3-rc-abc123f
      verformat validate v1.2.3-rc --is-rc
      verformat compose --major 1 --minor 2 --patch 3 --type rc
      verformat extract "opendaq-v1.2.3-linux.tar.gz"
      verformat formats --verbose

    Use ``verformat COMMAND --help`` for command-specific options.
    """
    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    level = level_for_verbosity(verbose)
    setup_logging(level=level)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    verformat_ctx = VerFormatContext()
    verformat_ctx.config_path = config or loaded_config.source_path
    verformat_ctx.color = color
    verformat_ctx.verbose = verbose
    verformat_ctx.config = loaded_config
    ctx.obj = verformat_ctx

    logger.debug("verformat v%s", __version__)
    logger.debug("Config path: %s", verformat_ctx.config_path)
    if loaded_config.source_path:
        logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


# Register CLI subcommands
try:
    from verformat.commands import COMMANDS

    for command in COMMANDS:
        cli.add_command(command)

except ImportError as exc:
    sys.stderr.write(f"FATAL: Failed to import CLI commands: {exc}\n")
    sys.exit(1)


def main() -> int:
    """Main entry point for the verformat CLI.

    Returns:
        Exit code:
            0   Success
            1   Failed check or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except VerFormatError as exc:
        print_error(str(exc))
        logger.debug(
            "VerFormatError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    except (KeyboardInterrupt, click.Abort):
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1

    finally:
        disable_logging()


if __name__ == "__main__":
    sys.exit(main())
