"""
Centralized constants for verformat.

This module defines immutable values used across verformat, including the
identifier grammar, the built-in defaults, environment variable names and
logging formats. All values are intended to be treated as read-only.
"""

from typing import Final

# ---------------------------------------------------------------------------
# Built-in defaults
# ---------------------------------------------------------------------------

#: Prefix emitted when a template requires one and none was supplied.
DEFAULT_PREFIX: Final[str] = "v"

#: The distinguished release-candidate suffix.
DEFAULT_SUFFIX: Final[str] = "rc"

#: Template used by ``compose`` when no format signal is present.
DEFAULT_FORMAT: Final[str] = "vX.YY.Z"

#: Literal suffix marking a release candidate.
RC_SUFFIX: Final[str] = "rc"

# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

#: Whole-string shape: prefix, major.minor.patch and an optional dash tail.
VERSION_PATTERN: Final[str] = (
    r"(?P<prefix>[^0-9.]*)"
    r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"
    r"(?:-(?P<tail>[A-Za-z0-9-]+))?"
)

#: Character class of a prefix (non-numeric, non-dot run).
VALID_PREFIX_PATTERN: Final[str] = r"^[^0-9.]+$"

#: Character class of a suffix.
VALID_SUFFIX_PATTERN: Final[str] = r"^[A-Za-z0-9-]+$"

#: Character class of a hash (lowercase hex only).
VALID_HASH_PATTERN: Final[str] = r"^[0-9a-f]+$"

#: Character class of a numeric component.
VALID_NUMBER_PATTERN: Final[str] = r"^[0-9]+$"

#: Shortest hex run treated as a hash rather than a suffix.
MIN_HASH_LENGTH: Final[int] = 6

# ---------------------------------------------------------------------------
# Listing examples
# ---------------------------------------------------------------------------

EXAMPLE_VERSION: Final[str] = "1.40.9"
EXAMPLE_HASH: Final[str] = "a1b2c3f4"

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

#: Environment variable naming an explicit configuration file.
CONFIG_ENVVAR: Final[str] = "VERFORMAT_CONFIG"

#: Prefix for ``KEY=VALUE`` lines printed by ``verformat parse``.
PARSED_ENV_PREFIX: Final[str] = "VERFORMAT_PARSED_"

#: Prefix of the variables read by ``verformat compose --from-env``.
COMPOSED_ENV_PREFIX: Final[str] = "VERFORMAT_COMPOSED_"

#: Configuration file looked up in the current directory.
CONFIG_FILE_NAME: Final[str] = "verformat.toml"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
