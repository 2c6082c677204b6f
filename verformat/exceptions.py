"""
Custom exception hierarchy for verformat.

This module defines structured exception types used across verformat.
All exceptions inherit from :class:`VerFormatError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Every error the engine reports on bad *input* carries a ``kind`` naming its
category (``MalformedShape``, ``InvalidComponent``, ``TemplateMismatch``,
``TypeMismatch``, ``CompositionError``, ``NotFound``). The engine raises;
translating errors into exit codes is left to the CLI layer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, MutableMapping, Optional, Sequence


class VerFormatError(Exception):
    """Base exception for all verformat errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    kind: Optional[str] = None

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 100) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class ParseError(VerFormatError):
    """Raised when a version string cannot be parsed.

    Args:
        message: Error description.
        version: The offending input string.
    """

    __slots__ = ("version",)

    def __init__(
        self,
        message: str,
        *,
        version: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        merged: MutableMapping[str, Any] = {}
        _add_if(merged, "version", version)
        if details:
            merged.update(details)

        super().__init__(message, merged)

        self.version = version


class MalformedVersionError(ParseError):
    """The input does not have the ``prefix?major.minor.patch(-tail)?`` shape."""

    kind = "MalformedShape"


class InvalidComponentError(ParseError):
    """The shape matched but one component fails its character-class rule.

    Args:
        message: Error description.
        component: Which component failed (``prefix``, ``suffix``, ``hash``,
            ``major``, ``minor`` or ``patch``).
        value: The rejected component value.
        version: The offending input string.
    """

    __slots__ = ("component", "value")

    kind = "InvalidComponent"

    def __init__(
        self,
        message: str,
        *,
        component: str,
        value: Optional[str] = None,
        version: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {"component": component}
        _add_if(details, "value", value)

        super().__init__(message, version=version, details=details)

        self.component = component
        self.value = value


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationError(VerFormatError):
    """Base class for a parseable version that fails a requested check."""

    __slots__ = ("version",)

    def __init__(
        self,
        message: str,
        *,
        version: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        merged: MutableMapping[str, Any] = {}
        _add_if(merged, "version", version)
        if details:
            merged.update(details)

        super().__init__(message, merged)

        self.version = version


class TemplateMismatchError(ValidationError):
    """The version parsed but does not satisfy the requested template.

    Args:
        message: Error description.
        template: Name of the requested template.
        actual: Name of the template the version actually has.
        version: The validated string.
    """

    __slots__ = ("template", "actual")

    kind = "TemplateMismatch"

    def __init__(
        self,
        message: str,
        *,
        template: str,
        actual: Optional[str] = None,
        version: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {"expected": template}
        _add_if(details, "actual", actual)

        super().__init__(message, version=version, details=details)

        self.template = template
        self.actual = actual


class TypeMismatchError(ValidationError):
    """The version parsed but its release type differs from the requested one."""

    __slots__ = ("expected", "actual")

    kind = "TypeMismatch"

    def __init__(
        self,
        message: str,
        *,
        expected: str,
        actual: str,
        version: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            version=version,
            details={"expected": expected, "actual": actual},
        )

        self.expected = expected
        self.actual = actual


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class CompositionFailure(str, Enum):
    """Reason a version string could not be composed."""

    MISSING_COMPONENT = "missing-component"
    MISSING_VALUE = "missing-value"
    INVALID_VALUE = "invalid-value"
    CONFLICT = "conflict"
    AMBIGUOUS = "ambiguous"


class CompositionError(VerFormatError):
    """Raised when a version string cannot be composed.

    Args:
        message: Error description.
        reason: Category of the failure.
        field: Component at fault (``major``, ``suffix``, ``hash``...).
    """

    __slots__ = ("reason", "field")

    kind = "CompositionError"

    def __init__(
        self,
        message: str,
        *,
        reason: CompositionFailure,
        field: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {"reason": reason.value}
        _add_if(details, "field", field)

        super().__init__(message, details)

        self.reason = reason
        self.field = field


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


class VersionNotFoundError(VerFormatError):
    """Raised when free text contains no parseable version string."""

    __slots__ = ("text",)

    kind = "NotFound"

    def __init__(self, message: str, *, text: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        if text is not None:
            details["text"] = _truncate(text)

        super().__init__(message, details)

        self.text = text


# ---------------------------------------------------------------------------
# Lookups and configuration
# ---------------------------------------------------------------------------


class UnknownNameError(VerFormatError):
    """Raised when a format, release type or check is looked up by an unknown name.

    Args:
        message: Error description.
        name: The name that was not recognised.
    """

    __slots__ = ("name",)

    def __init__(self, message: str, *, name: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "name", name)

        super().__init__(message, details)

        self.name = name


class UnknownFormatError(UnknownNameError):
    """Raised when a format template name is not one of the known templates."""


class UnknownTypeError(UnknownNameError):
    """Raised when a release type value is not one of the six types."""


class UnknownPredicateError(UnknownNameError):
    """Raised when a check name is not one of the ``has-*`` / ``is-*`` checks."""


class MissingEnvironmentError(VerFormatError):
    """Raised when required ``VERFORMAT_COMPOSED_*`` variables are unset.

    Args:
        message: Error description.
        variables: Names of the missing environment variables.
    """

    __slots__ = ("variables",)

    def __init__(self, message: str, *, variables: Sequence[str]) -> None:
        super().__init__(message, {"variables": ", ".join(variables)})

        self.variables = tuple(variables)


class ConfigError(VerFormatError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Configuration option at fault, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
