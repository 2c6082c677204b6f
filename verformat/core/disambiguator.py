"""
Trailing-segment resolution for version strings.

The text after ``major.minor.patch`` is ambiguous: ``-rc`` is a suffix,
``-a1b2c3f`` is a hash and ``-beta-a1b2c3f`` is both. :func:`split_tail`
decides, using these rules in order (first match wins):

1. empty tail                                -> no suffix, no hash
2. lowercase hex, at least 6 characters      -> hash
3. lowercase hex, shorter than 6 characters  -> suffix
4. contains ``-``: split at the last ``-``; if the right-hand part is
   lowercase hex of at least 6 characters it is the hash and the left-hand
   part the suffix, otherwise the whole tail is the suffix
5. anything else                             -> suffix

The 6-character threshold is a heuristic: real commit hashes are
practically never shorter, while short hex runs (``ab12``, the ``1`` in
``rc-1``) are ordinary suffix material.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from verformat.constants import MIN_HASH_LENGTH
from verformat.utils.logger import get_logger

logger = get_logger("core.disambiguator")

_HEX_RE = re.compile(r"[0-9a-f]+")

#: ``(suffix, hash)`` as resolved from a tail.
TailParts = Tuple[Optional[str], Optional[str]]


def is_hash_candidate(token: str) -> bool:
    """Return True if ``token`` is lowercase hex long enough to be a hash."""
    return len(token) >= MIN_HASH_LENGTH and _HEX_RE.fullmatch(token) is not None


def split_tail(tail: str) -> TailParts:
    """Resolve a dash-stripped tail into ``(suffix, hash)``.

    Total over its input: never raises. The returned suffix may be an empty
    string for degenerate input such as ``-abcdef`` (a tail starting with
    ``-``); rejecting it is the caller's job.

    Examples:
        >>> split_tail("rc")
        ('rc', None)
        >>> split_tail("abcdef")
        (None, 'abcdef')
        >>> split_tail("abcde")
        ('abcde', None)
        >>> split_tail("rc-1")
        ('rc-1', None)
        >>> split_tail("beta-abc123")
        ('beta', 'abc123')
    """
    if not tail:
        return None, None

    if _HEX_RE.fullmatch(tail):
        if len(tail) >= MIN_HASH_LENGTH:
            logger.debug("Tail %r resolved as hash", tail)
            return None, tail
        logger.debug("Short hex tail %r treated as suffix", tail)
        return tail, None

    if "-" in tail:
        head, _, candidate = tail.rpartition("-")
        if is_hash_candidate(candidate):
            logger.debug("Tail %r split into suffix=%r hash=%r", tail, head, candidate)
            return head, candidate
        logger.debug("Composite suffix without hash: %r", tail)

    return tail, None
