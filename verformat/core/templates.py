"""
Format template engine for verformat.

Matches parsed components against :class:`~verformat.models.FormatTemplate`
values and maps release types and compose flags onto templates. Templates
are structured values, so every decision here is a comparison over three
axes (prefix, suffix kind, hash) rather than string inspection.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from verformat.constants import RC_SUFFIX
from verformat.models import FormatTemplate, ReleaseType, SuffixKind, VersionComponents
from verformat.utils.logger import get_logger

logger = get_logger("core.templates")

PREFIX_ONLY = "prefix-only"
PREFIX_EXCLUDE = "prefix-exclude"

_TYPE_TEMPLATES: Dict[ReleaseType, FormatTemplate] = {
    ReleaseType.RELEASE: FormatTemplate(True, SuffixKind.NONE, False),
    ReleaseType.RC: FormatTemplate(True, SuffixKind.RC, False),
    ReleaseType.DEV: FormatTemplate(True, SuffixKind.NONE, True),
    ReleaseType.RC_DEV: FormatTemplate(True, SuffixKind.RC, True),
    ReleaseType.CUSTOM: FormatTemplate(True, SuffixKind.CUSTOM, False),
    ReleaseType.CUSTOM_DEV: FormatTemplate(True, SuffixKind.CUSTOM, True),
}


def _suffix_satisfies(kind: SuffixKind, suffix: Optional[str]) -> bool:
    if kind is SuffixKind.NONE:
        return suffix is None
    if kind is SuffixKind.RC:
        return suffix == RC_SUFFIX
    return suffix is not None and suffix != RC_SUFFIX


def mismatches(template: FormatTemplate, components: VersionComponents) -> List[str]:
    """Return the axes (``prefix``, ``suffix``, ``hash``) that disagree.

    An empty list means ``components`` satisfies ``template``.
    """
    failed: List[str] = []
    if template.has_prefix != components.has_prefix:
        failed.append("prefix")
    if not _suffix_satisfies(template.suffix_kind, components.suffix):
        failed.append("suffix")
    if template.has_hash != components.has_hash:
        failed.append("hash")
    return failed


def matches(template: FormatTemplate, components: VersionComponents) -> bool:
    """Return True if ``components`` satisfies ``template`` on every axis.

    A mismatch is a plain ``False``, never an error.
    """
    failed = mismatches(template, components)
    if failed:
        logger.debug(
            "Format mismatch against %s on %s: %r",
            template.name,
            ", ".join(failed),
            components,
        )
    return not failed


def template_for_type(release_type: ReleaseType) -> FormatTemplate:
    """Return the canonical (prefixed) template for a release type."""
    return _TYPE_TEMPLATES[release_type]


def infer_template(
    has_prefix: bool,
    suffix: Optional[str],
    hash: Optional[str],
) -> FormatTemplate:
    """Build a template from the presence of a prefix, suffix and hash.

    Empty strings count as absent. A suffix of ``rc`` selects the literal
    rc kind; any other suffix selects the custom kind.
    """
    template = FormatTemplate(
        has_prefix=has_prefix,
        suffix_kind=SuffixKind.for_suffix(suffix),
        has_hash=bool(hash),
    )
    logger.debug(
        "Inferred format from prefix=%s suffix=%r hash=%r -> %s",
        has_prefix,
        suffix,
        hash,
        template.name,
    )
    return template


def detect_template(components: VersionComponents) -> FormatTemplate:
    """Return the template a parsed version has."""
    return infer_template(components.has_prefix, components.suffix, components.hash)


def list_templates(prefix_filter: Optional[str] = None) -> Tuple[FormatTemplate, ...]:
    """Return the known templates, optionally filtered on the prefix axis.

    Args:
        prefix_filter: ``"prefix-only"`` keeps templates with a prefix,
            ``"prefix-exclude"`` keeps those without; ``None`` keeps all.
    """
    if prefix_filter is None:
        return FormatTemplate.all()
    if prefix_filter == PREFIX_ONLY:
        return tuple(t for t in FormatTemplate.all() if t.has_prefix)
    if prefix_filter == PREFIX_EXCLUDE:
        return tuple(t for t in FormatTemplate.all() if not t.has_prefix)
    raise ValueError(f"Unknown prefix filter: {prefix_filter!r}")
