"""
Format template model for verformat.

A template is an abstract shape a version string either satisfies or does
not. It is a value over three independent axes (prefix present, suffix kind,
hash present) rather than a string; the string names such as
``vX.YY.Z-rc-HASH`` are only its rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from verformat.constants import RC_SUFFIX
from verformat.exceptions import UnknownFormatError
from verformat.models.release_type import ReleaseType

_BASE = "X.YY.Z"
_PREFIX_MARK = "v"
_HASH_MARK = "HASH"


class SuffixKind(str, Enum):
    """Suffix requirement of a template."""

    NONE = "none"
    RC = "rc"
    CUSTOM = "<suffix>"

    @classmethod
    def for_suffix(cls, suffix: Optional[str]) -> SuffixKind:
        """Return the kind a concrete suffix belongs to.

        Empty strings count as absent.

        Examples:
            >>> SuffixKind.for_suffix("rc")
            <SuffixKind.RC: 'rc'>
            >>> SuffixKind.for_suffix("beta-2")
            <SuffixKind.CUSTOM: '<suffix>'>
        """
        if not suffix:
            return cls.NONE
        return cls.RC if suffix == RC_SUFFIX else cls.CUSTOM


@dataclass(frozen=True)
class FormatTemplate:
    """
    Abstract format description a parsed version is checked against.

    Attributes:
        has_prefix: Whether the version must carry a prefix.
        suffix_kind: ``NONE`` (no suffix), ``RC`` (exactly ``rc``) or
            ``CUSTOM`` (any suffix other than ``rc``).
        has_hash: Whether the version must carry a hash.
    """

    has_prefix: bool = True
    suffix_kind: SuffixKind = SuffixKind.NONE
    has_hash: bool = False

    @property
    def has_suffix(self) -> bool:
        return self.suffix_kind is not SuffixKind.NONE

    @property
    def name(self) -> str:
        """Canonical template name, e.g. ``vX.YY.Z-<suffix>-HASH``."""
        parts = [(_PREFIX_MARK if self.has_prefix else "") + _BASE]
        if self.has_suffix:
            parts.append(self.suffix_kind.value)
        if self.has_hash:
            parts.append(_HASH_MARK)
        return "-".join(parts)

    @property
    def release_type(self) -> ReleaseType:
        """Release type shared by every version satisfying this template."""
        if self.suffix_kind is SuffixKind.RC:
            return ReleaseType.RC_DEV if self.has_hash else ReleaseType.RC
        if self.suffix_kind is SuffixKind.CUSTOM:
            return ReleaseType.CUSTOM_DEV if self.has_hash else ReleaseType.CUSTOM
        return ReleaseType.DEV if self.has_hash else ReleaseType.RELEASE

    @property
    def description(self) -> str:
        """Human-readable description used by format listings."""
        return _DESCRIPTIONS[(self.suffix_kind, self.has_hash)][self.has_prefix]

    @classmethod
    def from_name(cls, name: str) -> FormatTemplate:
        """Look up a template by its canonical name.

        Raises:
            UnknownFormatError: ``name`` is not one of the twelve templates.
        """
        try:
            return _BY_NAME[name]
        except KeyError:
            raise UnknownFormatError(
                f"Unknown format: {name!r}",
                name=name,
            ) from None

    @classmethod
    def all(cls) -> Tuple[FormatTemplate, ...]:
        """Return every template in canonical order."""
        return ALL_TEMPLATES

    def __str__(self) -> str:
        return self.name


# (suffix kind, has hash) -> {has_prefix: description}
_DESCRIPTIONS: Dict[Tuple[SuffixKind, bool], Dict[bool, str]] = {
    (SuffixKind.NONE, False): {
        False: "Release without prefix",
        True: "Release with prefix (default)",
    },
    (SuffixKind.RC, False): {
        False: "Release candidate without prefix",
        True: "Release candidate with prefix",
    },
    (SuffixKind.NONE, True): {
        False: "Development version without prefix",
        True: "Development version with prefix",
    },
    (SuffixKind.RC, True): {
        False: "RC with commits, no prefix",
        True: "RC with commits, with prefix",
    },
    (SuffixKind.CUSTOM, False): {
        False: "Custom suffix without prefix",
        True: "Custom suffix with prefix",
    },
    (SuffixKind.CUSTOM, True): {
        False: "Custom suffix with hash, no prefix",
        True: "Custom suffix with hash, with prefix",
    },
}

ALL_TEMPLATES: Tuple[FormatTemplate, ...] = tuple(
    FormatTemplate(has_prefix=has_prefix, suffix_kind=kind, has_hash=has_hash)
    for kind, has_hash in _DESCRIPTIONS
    for has_prefix in (False, True)
)

_BY_NAME: Dict[str, FormatTemplate] = {t.name: t for t in ALL_TEMPLATES}
