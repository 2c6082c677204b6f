"""
Version validation for verformat.

Every check parses the input first, so an unparseable string always fails
regardless of what was asked. The three raising checks report *why*:

- :class:`~verformat.exceptions.ParseError` - the string did not parse;
- :class:`~verformat.exceptions.TemplateMismatchError` - it parsed but has
  a different format;
- :class:`~verformat.exceptions.TypeMismatchError` - it parsed but has a
  different release type.

Predicates (:func:`check` and the ``has_*`` / ``is_*`` helpers) answer a
single yes/no question and never raise on a bad version string.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Union

from verformat.core.parser import parse_version
from verformat.core.templates import mismatches
from verformat.exceptions import (
    ParseError,
    TemplateMismatchError,
    TypeMismatchError,
    UnknownPredicateError,
)
from verformat.models import FormatTemplate, ReleaseType, VersionComponents
from verformat.utils.logger import get_logger

logger = get_logger("core.validator")


class Predicate(str, Enum):
    """Single-fact checks available on a version string."""

    HAS_PREFIX = "has-prefix"
    HAS_SUFFIX = "has-suffix"
    HAS_HASH = "has-hash"
    IS_RELEASE = "is-release"
    IS_RC = "is-rc"
    IS_DEV = "is-dev"
    IS_RC_DEV = "is-rc-dev"
    IS_CUSTOM = "is-custom"
    IS_CUSTOM_DEV = "is-custom-dev"

    @classmethod
    def from_name(cls, name: Union[Predicate, str]) -> Predicate:
        """Look up a check by its name (``"has-hash"``).

        Raises:
            UnknownPredicateError: ``name`` is not a known check.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownPredicateError(
                f"Unknown check: {name!r}",
                name=str(name),
            ) from None


def _is_type(release_type: ReleaseType) -> Callable[[VersionComponents], bool]:
    return lambda components: components.release_type is release_type


_PREDICATES: Dict[Predicate, Callable[[VersionComponents], bool]] = {
    Predicate.HAS_PREFIX: lambda c: c.has_prefix,
    Predicate.HAS_SUFFIX: lambda c: c.has_suffix,
    Predicate.HAS_HASH: lambda c: c.has_hash,
    Predicate.IS_RELEASE: _is_type(ReleaseType.RELEASE),
    Predicate.IS_RC: _is_type(ReleaseType.RC),
    Predicate.IS_DEV: _is_type(ReleaseType.DEV),
    Predicate.IS_RC_DEV: _is_type(ReleaseType.RC_DEV),
    Predicate.IS_CUSTOM: _is_type(ReleaseType.CUSTOM),
    Predicate.IS_CUSTOM_DEV: _is_type(ReleaseType.CUSTOM_DEV),
}


def validate(text: str) -> VersionComponents:
    """Check that ``text`` parses.

    Returns:
        The parsed components.

    Raises:
        ParseError: ``text`` is not a valid version string.
    """
    components = parse_version(text)
    logger.debug("Version is valid: %s", text)
    return components


def validate_against_template(
    text: str,
    template: Union[FormatTemplate, str],
) -> VersionComponents:
    """Check that ``text`` parses and satisfies ``template``.

    Args:
        text: Version string.
        template: A template or its canonical name (``"vX.YY.Z-rc"``).

    Raises:
        ParseError: ``text`` is not a valid version string.
        TemplateMismatchError: ``text`` parsed but has another format.
        UnknownFormatError: ``template`` is an unknown name.
    """
    if isinstance(template, str):
        template = FormatTemplate.from_name(template)

    components = parse_version(text)
    failed = mismatches(template, components)
    if failed:
        raise TemplateMismatchError(
            f"Version does not match format {template.name} "
            f"({', '.join(failed)} differ)",
            template=template.name,
            actual=components.template.name,
            version=text,
        )
    return components


def validate_against_type(
    text: str,
    release_type: Union[ReleaseType, str],
) -> VersionComponents:
    """Check that ``text`` parses and has the given release type.

    Args:
        text: Version string.
        release_type: A :class:`ReleaseType` or its value (``"rc-dev"``).

    Raises:
        ParseError: ``text`` is not a valid version string.
        TypeMismatchError: ``text`` parsed but has another type.
        UnknownTypeError: ``release_type`` is not a known type value.
    """
    expected = ReleaseType.from_value(release_type)
    components = parse_version(text)
    actual = components.release_type

    if actual is not expected:
        raise TypeMismatchError(
            f"Version does not match type {expected.value}",
            expected=expected.value,
            actual=actual.value,
            version=text,
        )
    return components


def check(text: str, predicate: Union[Predicate, str]) -> bool:
    """Answer a single predicate about ``text``.

    Unparseable input is always ``False``.

    Raises:
        UnknownPredicateError: ``predicate`` is not a known check.
    """
    predicate = Predicate.from_name(predicate)
    try:
        components = parse_version(text)
    except ParseError as exc:
        logger.debug("%s on unparseable %r: %s", predicate.value, text, exc)
        return False
    return _PREDICATES[predicate](components)


def has_prefix(text: str) -> bool:
    return check(text, Predicate.HAS_PREFIX)


def has_suffix(text: str) -> bool:
    return check(text, Predicate.HAS_SUFFIX)


def has_hash(text: str) -> bool:
    return check(text, Predicate.HAS_HASH)


def is_release(text: str) -> bool:
    return check(text, Predicate.IS_RELEASE)


def is_rc(text: str) -> bool:
    return check(text, Predicate.IS_RC)


def is_dev(text: str) -> bool:
    return check(text, Predicate.IS_DEV)


def is_rc_dev(text: str) -> bool:
    return check(text, Predicate.IS_RC_DEV)


def is_custom(text: str) -> bool:
    return check(text, Predicate.IS_CUSTOM)


def is_custom_dev(text: str) -> bool:
    return check(text, Predicate.IS_CUSTOM_DEV)
