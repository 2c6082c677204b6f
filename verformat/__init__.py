"""
verformat - build identifier formatting toolkit

verformat understands structured build identifiers such as
``v1.2.3-rc-a1b2c3f`` and provides four operations over them:

    • parse      - split a string into prefix, numbers, suffix and hash
    • validate   - check a string against a format template, a release
                   type, or a single predicate
    • compose    - build a string from components and a format policy
    • extract    - find the first identifier in free text

Example:
    >>> from verformat import parse_version, compose_version
    >>> parse_version("v1.2.3-beta-abc123").suffix
    'beta'
    >>> compose_version(1, 2, 3, suffix="rc")
    'v1.2.3-rc'
"""

from __future__ import annotations

from verformat.__version__ import __version__

from verformat.config import DEFAULT_CONFIG, VerFormatConfig
from verformat.core import (
    check,
    compose_version,
    extract_version,
    parse_version,
    validate,
    validate_against_template,
    validate_against_type,
)
from verformat.exceptions import VerFormatError
from verformat.models import FormatTemplate, ReleaseType, VersionComponents

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "verformat Contributors"
__license__ = "Apache-2.0"
__description__ = "Parse, validate, compose and extract structured build identifiers."

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "VerFormatConfig",
    "FormatTemplate",
    "ReleaseType",
    "VersionComponents",
    "VerFormatError",
    "check",
    "compose_version",
    "extract_version",
    "parse_version",
    "validate",
    "validate_against_template",
    "validate_against_type",
]
