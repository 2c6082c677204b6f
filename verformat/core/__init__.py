"""
Core functionality exports for verformat.

The engine is a set of pure functions over immutable values:

    from verformat.core import parse_version, compose_version

Control flow between the pieces: the extractor verifies candidates with the
parser; the validator uses the parser and the template engine; the composer
uses the template engine; the parser delegates trailing segments to the
disambiguator.
"""

from __future__ import annotations

from verformat.core.disambiguator import is_hash_candidate, split_tail
from verformat.core.parser import parse_version, try_parse_version
from verformat.core.templates import (
    detect_template,
    infer_template,
    list_templates,
    matches,
    mismatches,
    template_for_type,
)
from verformat.core.validator import (
    Predicate,
    check,
    has_hash,
    has_prefix,
    has_suffix,
    is_custom,
    is_custom_dev,
    is_dev,
    is_rc,
    is_rc_dev,
    is_release,
    validate,
    validate_against_template,
    validate_against_type,
)
from verformat.core.composer import (
    FormatSource,
    ResolvedFormat,
    compose_version,
    resolve_template,
)
from verformat.core.extractor import extract_version, find_versions

__all__ = [
    # Disambiguation
    "split_tail",
    "is_hash_candidate",
    # Parsing
    "parse_version",
    "try_parse_version",
    # Templates
    "matches",
    "mismatches",
    "template_for_type",
    "infer_template",
    "detect_template",
    "list_templates",
    # Validation
    "Predicate",
    "check",
    "validate",
    "validate_against_template",
    "validate_against_type",
    "has_prefix",
    "has_suffix",
    "has_hash",
    "is_release",
    "is_rc",
    "is_dev",
    "is_rc_dev",
    "is_custom",
    "is_custom_dev",
    # Composition
    "FormatSource",
    "ResolvedFormat",
    "compose_version",
    "resolve_template",
    # Extraction
    "extract_version",
    "find_versions",
]
