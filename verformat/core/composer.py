"""
Version composition for verformat.

Builds a version string from explicit components. The output format is
chosen by the first applicable rule:

1. an explicit template (``--format``);
2. an explicit release type (``--type``), via its canonical template;
3. a template inferred from the supplied prefix/suffix/hash and the
   exclude flags (the prefix axis is on unless excluded);
4. the configured default template (``vX.YY.Z``) when nothing was supplied.

Once the template is fixed the string is emitted left to right. A
template's requirements always win over supplied values: a prefix the
template does not want is dropped, a literal ``rc`` template forces ``rc``.
Values the template needs but that were not supplied are errors, except
the prefix, which falls back to the configured default.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from verformat.config import DEFAULT_CONFIG, VerFormatConfig
from verformat.constants import RC_SUFFIX
from verformat.core.parser import parse_version
from verformat.core.templates import infer_template, template_for_type
from verformat.exceptions import CompositionError, CompositionFailure, ParseError
from verformat.models import FormatTemplate, ReleaseType, SuffixKind, VersionComponents
from verformat.models.components import (
    is_valid_hash,
    is_valid_number,
    is_valid_prefix,
    is_valid_suffix,
)
from verformat.utils.logger import get_logger

logger = get_logger("core.composer")

Number = Union[int, str]


class FormatSource(str, Enum):
    """Which priority rule selected the output template."""

    EXPLICIT = "explicit-format"
    TYPE = "type"
    INFERRED = "inferred"
    DEFAULT = "default"


@dataclass(frozen=True)
class ResolvedFormat:
    template: FormatTemplate
    source: FormatSource


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    return value if value else None


def resolve_template(
    *,
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    hash: Optional[str] = None,
    template: Union[FormatTemplate, str, None] = None,
    release_type: Union[ReleaseType, str, None] = None,
    exclude_prefix: bool = False,
    exclude_suffix: bool = False,
    config: VerFormatConfig = DEFAULT_CONFIG,
) -> ResolvedFormat:
    """Pick the output template using the four-level priority policy.

    Raises:
        UnknownFormatError: ``template`` is an unknown name.
        UnknownTypeError: ``release_type`` is not a known type value.
    """
    if template is not None:
        if isinstance(template, str):
            template = FormatTemplate.from_name(template)
        logger.debug("Using explicit format: %s", template.name)
        return ResolvedFormat(template, FormatSource.EXPLICIT)

    if release_type is not None:
        release_type = ReleaseType.from_value(release_type)
        resolved = template_for_type(release_type)
        logger.debug("Using format from type %s: %s", release_type.value, resolved.name)
        return ResolvedFormat(resolved, FormatSource.TYPE)

    prefix = _blank_to_none(prefix)
    suffix = _blank_to_none(suffix)
    hash = _blank_to_none(hash)

    has_signal = (
        prefix is not None
        or suffix is not None
        or hash is not None
        or exclude_prefix
        or exclude_suffix
    )
    if not has_signal:
        logger.debug("No format signal, using default: %s", config.default_format.name)
        return ResolvedFormat(config.default_format, FormatSource.DEFAULT)

    inferred = infer_template(
        not exclude_prefix,
        None if exclude_suffix else suffix,
        hash,
    )
    return ResolvedFormat(inferred, FormatSource.INFERRED)


def _require_number(name: str, value: Optional[Number]) -> int:
    if value is None or value == "":
        raise CompositionError(
            f"Missing required component: {name}",
            reason=CompositionFailure.MISSING_COMPONENT,
            field=name,
        )
    if isinstance(value, bool) or not is_valid_number(str(value)):
        raise CompositionError(
            f"Invalid {name} version: {value!r} (must be a non-negative integer)",
            reason=CompositionFailure.INVALID_VALUE,
            field=name,
        )
    return int(value)


def _check_value(name: str, value: Optional[str], predicate) -> None:
    if value is not None and not predicate(value):
        raise CompositionError(
            f"Invalid {name}: {value!r}",
            reason=CompositionFailure.INVALID_VALUE,
            field=name,
        )


def compose_version(
    major: Optional[Number],
    minor: Optional[Number],
    patch: Optional[Number],
    *,
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    hash: Optional[str] = None,
    template: Union[FormatTemplate, str, None] = None,
    release_type: Union[ReleaseType, str, None] = None,
    exclude_prefix: bool = False,
    exclude_suffix: bool = False,
    config: VerFormatConfig = DEFAULT_CONFIG,
) -> str:
    """Compose a version string.

    Args:
        major: Major version (int or digit string). Required.
        minor: Minor version. Required.
        patch: Patch version. Required.
        prefix: Prefix to use when the template wants one.
        suffix: Suffix; required by custom-suffix templates.
        hash: Lowercase hex hash; required by ``-HASH`` templates.
        template: Explicit template (or its name). Highest priority.
        release_type: Explicit release type. Used when no template is given.
        exclude_prefix: Treat ``prefix`` as absent.
        exclude_suffix: Treat ``suffix`` as absent.
        config: Defaults for the prefix and the fallback template.

    Returns:
        The composed string, guaranteed to parse back to the same components.

    Raises:
        CompositionError: See :class:`~verformat.exceptions.CompositionFailure`
            for the reasons.
        UnknownFormatError: ``template`` is an unknown name.
        UnknownTypeError: ``release_type`` is an unknown type value.

    Examples:
        >>> compose_version(1, 2, 3)
        'v1.2.3'
        >>> compose_version(1, 2, 3, hash="abc1234")
        'v1.2.3-abc1234'
        >>> compose_version(1, 2, 3, suffix="rc", exclude_prefix=True)
        '1.2.3-rc'
    """
    major_num = _require_number("major", major)
    minor_num = _require_number("minor", minor)
    patch_num = _require_number("patch", patch)

    prefix = None if exclude_prefix else _blank_to_none(prefix)
    suffix = None if exclude_suffix else _blank_to_none(suffix)
    hash = _blank_to_none(hash)

    _check_value("prefix", prefix, is_valid_prefix)
    _check_value("suffix", suffix, is_valid_suffix)
    _check_value("hash", hash, is_valid_hash)

    resolved = resolve_template(
        prefix=prefix,
        suffix=suffix,
        hash=hash,
        template=template,
        release_type=release_type,
        exclude_prefix=exclude_prefix,
        exclude_suffix=exclude_suffix,
        config=config,
    )
    fmt = resolved.template

    out_prefix: Optional[str] = None
    if fmt.has_prefix:
        out_prefix = prefix or config.default_prefix

    out_suffix: Optional[str] = None
    if fmt.suffix_kind is SuffixKind.RC:
        if suffix is not None and suffix != RC_SUFFIX:
            if resolved.source is FormatSource.TYPE:
                raise CompositionError(
                    f"Suffix {suffix!r} conflicts with type {fmt.release_type.value}",
                    reason=CompositionFailure.CONFLICT,
                    field="suffix",
                )
            logger.debug("Format %s forces suffix 'rc', ignoring %r", fmt.name, suffix)
        out_suffix = RC_SUFFIX
    elif fmt.suffix_kind is SuffixKind.CUSTOM:
        if suffix is None:
            raise CompositionError(
                f"Format {fmt.name} requires a custom suffix but none was provided",
                reason=CompositionFailure.MISSING_VALUE,
                field="suffix",
            )
        if suffix == RC_SUFFIX:
            raise CompositionError(
                f"Format {fmt.name} requires a suffix other than 'rc'",
                reason=CompositionFailure.CONFLICT,
                field="suffix",
            )
        out_suffix = suffix

    out_hash: Optional[str] = None
    if fmt.has_hash:
        if hash is None:
            raise CompositionError(
                f"Format {fmt.name} requires a hash but none was provided",
                reason=CompositionFailure.MISSING_VALUE,
                field="hash",
            )
        out_hash = hash

    _check_value("prefix", out_prefix, is_valid_prefix)

    components = VersionComponents(
        major=major_num,
        minor=minor_num,
        patch=patch_num,
        prefix=out_prefix,
        suffix=out_suffix,
        hash=out_hash,
    )
    version = components.version
    _ensure_round_trip(version, components)

    logger.debug("Composed %s using %s format %s", version, resolved.source.value, fmt.name)
    return version


def _ensure_round_trip(version: str, expected: VersionComponents) -> None:
    """Reject output that would parse back to different components.

    This catches suffixes that read as hashes, e.g. a hex-only custom
    suffix of six or more characters, or a short hash after a suffix.
    """
    try:
        parsed = parse_version(version)
    except ParseError as exc:
        raise CompositionError(
            f"Composed version {version!r} does not parse: {exc.message}",
            reason=CompositionFailure.AMBIGUOUS,
            field=getattr(exc, "component", None),
        ) from exc

    if parsed != expected:
        if expected.hash is not None and parsed.hash != expected.hash:
            field = "hash"
        else:
            field = "suffix"
        raise CompositionError(
            f"Composed version {version!r} would be read back with "
            f"suffix={parsed.suffix!r} hash={parsed.hash!r}",
            reason=CompositionFailure.AMBIGUOUS,
            field=field,
        )
