"""
Unified data model exports for verformat.

This module re-exports all core data models to provide a stable and
convenient public API.

Example:
    >>> from verformat.models import FormatTemplate, ReleaseType, VersionComponents
"""

from __future__ import annotations

from verformat.models.release_type import ReleaseType
from verformat.models.template import ALL_TEMPLATES, FormatTemplate, SuffixKind
from verformat.models.components import VersionComponents

__all__ = [
    "ALL_TEMPLATES",
    "FormatTemplate",
    "ReleaseType",
    "SuffixKind",
    "VersionComponents",
]
