"""
Version component model for verformat.

This module defines the typed, immutable representation of a decomposed
build identifier together with the character-class checks every component
must satisfy.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from verformat.constants import (
    RC_SUFFIX,
    VALID_HASH_PATTERN,
    VALID_NUMBER_PATTERN,
    VALID_PREFIX_PATTERN,
    VALID_SUFFIX_PATTERN,
)
from verformat.models.release_type import ReleaseType
from verformat.models.template import FormatTemplate, SuffixKind

_PREFIX_RE = re.compile(VALID_PREFIX_PATTERN)
_SUFFIX_RE = re.compile(VALID_SUFFIX_PATTERN)
_HASH_RE = re.compile(VALID_HASH_PATTERN)
_NUMBER_RE = re.compile(VALID_NUMBER_PATTERN)


def is_valid_prefix(value: str) -> bool:
    """Return True if ``value`` is a non-empty run without digits or dots."""
    return _PREFIX_RE.fullmatch(value) is not None


def is_valid_suffix(value: str) -> bool:
    """Return True if ``value`` consists of letters, digits and hyphens."""
    return _SUFFIX_RE.fullmatch(value) is not None


def is_valid_hash(value: str) -> bool:
    """Return True if ``value`` is lowercase hexadecimal."""
    return _HASH_RE.fullmatch(value) is not None


def is_valid_number(value: str) -> bool:
    return _NUMBER_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class VersionComponents:
    """
    A parsed build identifier.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prefix: Leading marker such as ``v``, or ``None``.
        suffix: Human-chosen tag such as ``rc`` or ``beta-2``, or ``None``.
        hash: Lowercase hexadecimal commit identifier, or ``None``.
    """

    major: int
    minor: int
    patch: int
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    hash: Optional[str] = None

    @property
    def has_prefix(self) -> bool:
        return self.prefix is not None

    @property
    def has_suffix(self) -> bool:
        return self.suffix is not None

    @property
    def has_hash(self) -> bool:
        return self.hash is not None

    @property
    def is_rc_suffix(self) -> bool:
        return self.suffix == RC_SUFFIX

    @property
    def release_type(self) -> ReleaseType:
        """Release type derived from suffix and hash."""
        return ReleaseType.from_components(self.suffix, self.hash)

    @property
    def template(self) -> FormatTemplate:
        """The format template this version has."""
        return FormatTemplate(
            has_prefix=self.has_prefix,
            suffix_kind=SuffixKind.for_suffix(self.suffix),
            has_hash=self.has_hash,
        )

    @property
    def version(self) -> str:
        """Render the identifier left to right."""
        parts = [f"{self.prefix or ''}{self.major}.{self.minor}.{self.patch}"]
        if self.suffix is not None:
            parts.append(self.suffix)
        if self.hash is not None:
            parts.append(self.hash)
        return "-".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Return every field plus the derived type and format.

        Absent optional fields are rendered as empty strings so the result
        can be printed as ``KEY=VALUE`` lines without special-casing.
        """
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prefix": self.prefix or "",
            "suffix": self.suffix or "",
            "hash": self.hash or "",
            "type": self.release_type.value,
            "format": self.template.name,
        }

    def __str__(self) -> str:
        return self.version
