"""
Release type model for verformat.

A release type is a closed category derived purely from whether a version
carries a suffix, whether that suffix is ``rc``, and whether it carries a
hash.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from verformat.constants import EXAMPLE_HASH, EXAMPLE_VERSION, RC_SUFFIX
from verformat.exceptions import UnknownTypeError


class ReleaseType(str, Enum):
    """The six release categories.

    ====================  ==============  ======  ==============
    suffix present        suffix == rc    hash    type
    ====================  ==============  ======  ==============
    no                    -               no      ``release``
    yes                   yes             no      ``rc``
    no                    -               yes     ``dev``
    yes                   yes             yes     ``rc-dev``
    yes                   no              no      ``custom``
    yes                   no              yes     ``custom-dev``
    ====================  ==============  ======  ==============
    """

    RELEASE = "release"
    RC = "rc"
    DEV = "dev"
    RC_DEV = "rc-dev"
    CUSTOM = "custom"
    CUSTOM_DEV = "custom-dev"

    @classmethod
    def from_value(cls, value: Union[ReleaseType, str]) -> ReleaseType:
        """Look up a release type by its value (``"rc-dev"``).

        Raises:
            UnknownTypeError: ``value`` is not one of the six types.
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownTypeError(
                f"Unknown release type: {value!r}",
                name=str(value),
            ) from None

    @classmethod
    def from_components(
        cls,
        suffix: Optional[str],
        hash: Optional[str],
    ) -> ReleaseType:
        """Derive the release type from a suffix and hash.

        Empty strings count as absent.

        Examples:
            >>> ReleaseType.from_components("rc", "abc123f")
            <ReleaseType.RC_DEV: 'rc-dev'>
            >>> ReleaseType.from_components(None, None)
            <ReleaseType.RELEASE: 'release'>
        """
        if hash:
            if not suffix:
                return cls.DEV
            return cls.RC_DEV if suffix == RC_SUFFIX else cls.CUSTOM_DEV

        if not suffix:
            return cls.RELEASE
        return cls.RC if suffix == RC_SUFFIX else cls.CUSTOM

    @property
    def has_hash(self) -> bool:
        return self in (ReleaseType.DEV, ReleaseType.RC_DEV, ReleaseType.CUSTOM_DEV)

    @property
    def description(self) -> str:
        """Human-readable description used by type listings."""
        return _DESCRIPTIONS[self]

    @property
    def example(self) -> str:
        """Example identifier of this type."""
        return _EXAMPLES[self]

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    ReleaseType.RELEASE: "Release version (no suffix, no hash)",
    ReleaseType.RC: "Release candidate (suffix='rc', no hash)",
    ReleaseType.DEV: "Development version (no suffix, has hash)",
    ReleaseType.RC_DEV: "RC with commits (suffix='rc', has hash)",
    ReleaseType.CUSTOM: "Custom suffix (suffix!='rc', no hash)",
    ReleaseType.CUSTOM_DEV: "Custom suffix with hash (suffix!='rc', has hash)",
}

_EXAMPLES = {
    ReleaseType.RELEASE: f"v{EXAMPLE_VERSION}",
    ReleaseType.RC: f"v{EXAMPLE_VERSION}-rc",
    ReleaseType.DEV: f"v{EXAMPLE_VERSION}-{EXAMPLE_HASH}",
    ReleaseType.RC_DEV: f"v{EXAMPLE_VERSION}-rc-{EXAMPLE_HASH}",
    ReleaseType.CUSTOM: f"v{EXAMPLE_VERSION}-beta",
    ReleaseType.CUSTOM_DEV: f"v{EXAMPLE_VERSION}-beta-{EXAMPLE_HASH}",
}
