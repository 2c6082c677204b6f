"""Configuration file loader for verformat.

The only configurable values are the process-wide defaults used when
composing versions. They are loaded once into an immutable
:class:`VerFormatConfig` and passed explicitly to the code that needs them.

Supported formats:

- ``verformat.toml`` - settings under a ``[verformat]`` table
- ``pyproject.toml`` - settings under a ``[tool.verformat]`` table

Discovery order:

1. Explicit path from ``--config`` or ``VERFORMAT_CONFIG``
2. ``verformat.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.verformat]`` section

Example (``verformat.toml``)::

    [verformat]
    default_prefix = "v"
    default_suffix = "rc"
    default_format = "vX.YY.Z"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, replace

from verformat.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_FORMAT,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
)
from verformat.exceptions import ConfigError, UnknownFormatError
from verformat.models import FormatTemplate
from verformat.models.components import is_valid_prefix, is_valid_suffix
from verformat.utils.logger import get_logger

logger = get_logger("config")

_SECTION = "verformat"
_KNOWN_KEYS = ("default_prefix", "default_suffix", "default_format")


@dataclass(frozen=True)
class VerFormatConfig:
    """Immutable verformat defaults.

    Attributes:
        default_prefix: Prefix emitted when a template needs one and none
            was supplied.
        default_suffix: The suffix reported by ``verformat defaults``
            (``rc``). Informational only: composition never emits it,
            since rc templates always emit ``rc`` and custom-suffix templates
            require an explicit suffix.
        default_format: Template used by ``compose`` when no explicit
            format, type or component flag is given.
        source_path: Path to the loaded config file, or ``None``.
    """

    default_prefix: str = DEFAULT_PREFIX
    default_suffix: str = DEFAULT_SUFFIX
    default_format: FormatTemplate = field(
        default_factory=lambda: FormatTemplate.from_name(DEFAULT_FORMAT)
    )

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False, compare=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return the options as a dictionary for debug logging."""
        return {
            "default_prefix": self.default_prefix,
            "default_suffix": self.default_suffix,
            "default_format": self.default_format.name,
        }


#: Built-in defaults.
DEFAULT_CONFIG = VerFormatConfig()


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    local = cwd / CONFIG_FILE_NAME
    if local.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, local)
        return local

    pyproject = cwd / "pyproject.toml"
    if pyproject.is_file() and _pyproject_has_section(pyproject):
        logger.debug("Found [tool.%s] in pyproject.toml: %s", _SECTION, pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Return True if ``path`` has a ``[tool.verformat]`` table.

    An unreadable or invalid pyproject.toml is treated as having none, so
    discovery falls back to defaults instead of failing on a file that may
    not be ours.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring %s: %s", path, exc)
        return False
    return _SECTION in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> VerFormatConfig:
    """Load and validate verformat configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated configuration, or :data:`DEFAULT_CONFIG` when no file
        was found.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return DEFAULT_CONFIG

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get(_SECTION, {})
    else:
        section = raw.get(_SECTION, {})

    if not section:
        logger.debug("Config file found but no %s section, using defaults", _SECTION)
        return replace(DEFAULT_CONFIG, source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return replace(config, source_path=resolved)


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _require_str(section: Dict[str, Any], key: str, config_path: str) -> str:
    value = section[key]
    if not isinstance(value, str):
        raise ConfigError(
            f"{key} must be a string, got {type(value).__name__}",
            config_path=config_path,
            option=key,
        )
    return value


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> VerFormatConfig:
    """Validate a ``[verformat]`` / ``[tool.verformat]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types, or values that violate
            the identifier grammar.
    """
    unknown = set(section.keys()) - set(_KNOWN_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    options: Dict[str, Any] = {}

    if "default_prefix" in section:
        prefix = _require_str(section, "default_prefix", config_path)
        if not is_valid_prefix(prefix):
            raise ConfigError(
                f"default_prefix must not be empty or contain digits or dots: {prefix!r}",
                config_path=config_path,
                option="default_prefix",
            )
        options["default_prefix"] = prefix

    if "default_suffix" in section:
        suffix = _require_str(section, "default_suffix", config_path)
        if not is_valid_suffix(suffix):
            raise ConfigError(
                f"default_suffix may only contain letters, digits and hyphens: {suffix!r}",
                config_path=config_path,
                option="default_suffix",
            )
        options["default_suffix"] = suffix

    if "default_format" in section:
        name = _require_str(section, "default_format", config_path)
        try:
            options["default_format"] = FormatTemplate.from_name(name)
        except UnknownFormatError as exc:
            raise ConfigError(
                f"default_format is not a known format: {name!r}",
                config_path=config_path,
                option="default_format",
            ) from exc

    return VerFormatConfig(**options)
