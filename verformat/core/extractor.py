"""
Version extraction from free text.

Scans text left to right for the first substring shaped like a version.
At any position the longest variant is tried first:

1. ``v1.2.3-rc-<hash>``
2. ``v1.2.3-<hash>``
3. ``v1.2.3-rc``
4. ``v1.2.3``

Hashes must be at least six lowercase hex characters, and the ``rc`` and
hash variants must end at a non-alphanumeric boundary, so
``build-v1.2.3-rc-artifact.tar`` yields ``v1.2.3-rc`` rather than a
fragment of ``artifact``. Each candidate is round-tripped through the
parser; a textual match that does not parse is skipped, never returned.
"""

from __future__ import annotations

import re
from typing import Iterator

from verformat.constants import MIN_HASH_LENGTH
from verformat.core.parser import try_parse_version
from verformat.exceptions import VersionNotFoundError
from verformat.utils.logger import get_logger

logger = get_logger("core.extractor")

_CORE = r"v?[0-9]+\.[0-9]+\.[0-9]+"
_HASH = rf"[0-9a-f]{{{MIN_HASH_LENGTH},}}"
_END = r"(?![A-Za-z0-9])"

_CANDIDATE_RE = re.compile(
    "|".join(
        (
            rf"{_CORE}-rc-{_HASH}{_END}",
            rf"{_CORE}-{_HASH}{_END}",
            rf"{_CORE}-rc{_END}",
            _CORE,
        )
    )
)


def find_versions(text: str) -> Iterator[str]:
    """Yield every parseable version in ``text``, in order of appearance."""
    for match in _CANDIDATE_RE.finditer(text):
        candidate = match.group(0)
        if try_parse_version(candidate) is None:
            logger.debug("Found text matching pattern but not a valid version: %r", candidate)
            continue
        yield candidate


def extract_version(text: str) -> str:
    """Return the first parseable version in ``text``.

    Raises:
        VersionNotFoundError: No candidate in ``text`` parses.

    Examples:
        >>> extract_version("Release v1.2.3-rc is ready")
        'v1.2.3-rc'
        >>> extract_version("commit-v1.2.3-a1b2c3d.log")
        'v1.2.3-a1b2c3d'
    """
    for candidate in find_versions(text):
        logger.debug("Extracted version: %s", candidate)
        return candidate

    logger.debug("No version found in text: %.100r", text)
    raise VersionNotFoundError("No version found in text", text=text)
