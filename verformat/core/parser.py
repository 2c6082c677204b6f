"""
Version string parser for verformat.

Turns a raw string such as ``v1.2.3-rc-a1b2c3f`` into an immutable
:class:`~verformat.models.VersionComponents`, or raises a typed
:class:`~verformat.exceptions.ParseError`:

- :class:`~verformat.exceptions.MalformedVersionError` when the string does
  not have the ``prefix?major.minor.patch(-tail)?`` shape at all;
- :class:`~verformat.exceptions.InvalidComponentError` when the shape
  matches but a component fails its character class.

Parsing is deterministic and has no side effects beyond DEBUG logging.
"""

from __future__ import annotations

import re
from typing import Optional

from verformat.constants import VERSION_PATTERN
from verformat.core.disambiguator import split_tail
from verformat.models import VersionComponents
from verformat.models.components import (
    is_valid_hash,
    is_valid_prefix,
    is_valid_suffix,
)
from verformat.exceptions import (
    InvalidComponentError,
    MalformedVersionError,
    ParseError,
)
from verformat.utils.logger import get_logger

logger = get_logger("core.parser")

_VERSION_RE = re.compile(VERSION_PATTERN)


def parse_version(text: str) -> VersionComponents:
    """Parse a version string into its components.

    Args:
        text: The complete version string. Trailing whitespace is not
            tolerated; a leading non-digit run is read as the prefix.

    Returns:
        The parsed components. An empty prefix is reported as ``None``.

    Raises:
        MalformedVersionError: ``text`` does not match the overall shape.
        InvalidComponentError: A prefix, suffix or hash fails its rule.

    Examples:
        >>> parse_version("v1.2.3-rc-abc123f").release_type.value
        'rc-dev'
        >>> parse_version("1.2.3-beta-2").suffix
        'beta-2'
    """
    match = _VERSION_RE.fullmatch(text)
    if match is None:
        logger.debug("Version string does not match expected format: %r", text)
        raise MalformedVersionError(
            "Version string does not match expected format",
            version=text,
        )

    prefix = match.group("prefix") or None
    suffix, hash_value = split_tail(match.group("tail") or "")

    _check_component(text, "prefix", prefix, is_valid_prefix)
    _check_component(text, "suffix", suffix, is_valid_suffix)
    _check_component(text, "hash", hash_value, is_valid_hash)

    components = VersionComponents(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prefix=prefix,
        suffix=suffix,
        hash=hash_value,
    )
    logger.debug("Parsed %r -> %r", text, components)
    return components


def _check_component(text, name, value, predicate) -> None:
    if value is not None and not predicate(value):
        logger.debug("Invalid %s %r in %r", name, value, text)
        raise InvalidComponentError(
            f"Invalid {name}",
            component=name,
            value=value,
            version=text,
        )


def try_parse_version(text: str) -> Optional[VersionComponents]:
    """Parse ``text``, returning ``None`` instead of raising on bad input."""
    try:
        return parse_version(text)
    except ParseError:
        return None
