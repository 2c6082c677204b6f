from __future__ import annotations

import pytest

from verformat.config import VerFormatConfig
from verformat.core.composer import FormatSource, compose_version, resolve_template
from verformat.core.parser import parse_version
from verformat.exceptions import (
    CompositionError,
    CompositionFailure,
    UnknownFormatError,
    UnknownTypeError,
    VerFormatError,
)
from verformat.models import FormatTemplate, SuffixKind, VersionComponents


@pytest.mark.unit
class TestResolveTemplate:
    """Tests for the four-level format priority."""

    def test_default_when_no_signal(self) -> None:
        """Test the default template is used when nothing was supplied."""
        resolved = resolve_template()

        assert resolved.source is FormatSource.DEFAULT
        assert resolved.template.name == "vX.YY.Z"

    def test_explicit_format_beats_type(self) -> None:
        """Test an explicit template wins over an explicit type."""
        resolved = resolve_template(template="X.YY.Z-HASH", release_type="rc")

        assert resolved.source is FormatSource.EXPLICIT
        assert resolved.template.name == "X.YY.Z-HASH"

    def test_type_beats_inferred(self) -> None:
        """Test an explicit type wins over values supplied for inference."""
        resolved = resolve_template(hash="abcdef", release_type="rc")

        assert resolved.source is FormatSource.TYPE
        assert resolved.template.name == "vX.YY.Z-rc"

    def test_inferred_beats_default(self) -> None:
        """Test any supplied value switches from the default to inference."""
        resolved = resolve_template(hash="abc1234")

        assert resolved.source is FormatSource.INFERRED
        assert resolved.template.name == "vX.YY.Z-HASH"

    def test_exclude_flag_is_a_signal(self) -> None:
        """Test an exclude flag alone is enough to infer."""
        resolved = resolve_template(exclude_prefix=True)

        assert resolved.source is FormatSource.INFERRED
        assert resolved.template.name == "X.YY.Z"

    def test_configured_default(self) -> None:
        """Test the default template comes from the configuration."""
        config = VerFormatConfig(default_format=FormatTemplate.from_name("X.YY.Z"))
        assert resolve_template(config=config).template.name == "X.YY.Z"

    def test_unknown_format_name(self) -> None:
        """Test an unknown template name raises UnknownFormatError."""
        with pytest.raises(UnknownFormatError):
            resolve_template(template="vX.Y.Z")

    def test_unknown_type_name(self) -> None:
        """Test an unknown release type raises UnknownTypeError."""
        with pytest.raises(UnknownTypeError) as exc_info:
            compose_version(1, 2, 3, release_type="beta")

        assert isinstance(exc_info.value, VerFormatError)
        assert exc_info.value.name == "beta"


@pytest.mark.unit
class TestComposeVersion:
    """Tests for composing version strings."""

    def test_default(self) -> None:
        """Test plain numbers compose to the prefixed default."""
        assert compose_version(1, 2, 3) == "v1.2.3"

    def test_hash_only_infers_dev_format(self) -> None:
        """Test a lone hash yields the prefixed development version."""
        assert compose_version(1, 2, 3, hash="abc1234") == "v1.2.3-abc1234"

    def test_numbers_as_strings(self) -> None:
        """Test numbers may be given as digit strings."""
        assert compose_version("1", "40", "9", suffix="rc") == "v1.40.9-rc"

    def test_exclude_prefix(self) -> None:
        """Test excluding the prefix drops it even when supplied."""
        assert compose_version(1, 2, 3, prefix="v", exclude_prefix=True) == "1.2.3"

    def test_exclude_suffix(self) -> None:
        """Test excluding the suffix drops a supplied value."""
        assert (
            compose_version(1, 2, 3, suffix="beta", hash="abcdef", exclude_suffix=True)
            == "v1.2.3-abcdef"
        )

    def test_exclude_prefix_does_not_override_type(self) -> None:
        """Test a type template that needs a prefix falls back to the default."""
        assert compose_version(1, 2, 3, release_type="rc", exclude_prefix=True) == "v1.2.3-rc"

    def test_custom_prefix(self) -> None:
        """Test a supplied prefix replaces the default."""
        assert compose_version(1, 2, 3, prefix="release-") == "release-1.2.3"

    def test_configured_prefix(self) -> None:
        """Test the configured default prefix is used when none is supplied."""
        config = VerFormatConfig(default_prefix="ver")
        assert compose_version(1, 2, 3, config=config) == "ver1.2.3"

    def test_custom_suffix_with_hash(self) -> None:
        """Test suffix and hash compose into a custom-dev version."""
        assert (
            compose_version(1, 2, 3, suffix="beta", hash="abc1234")
            == "v1.2.3-beta-abc1234"
        )

    def test_explicit_format_drops_unwanted_values(self) -> None:
        """Test the template decides which supplied values are emitted."""
        assert (
            compose_version(1, 2, 3, suffix="beta", hash="abcdef", template="X.YY.Z")
            == "1.2.3"
        )

    def test_rc_format_forces_rc(self) -> None:
        """Test an explicit rc template emits rc regardless of the suffix."""
        assert compose_version(1, 2, 3, suffix="beta", template="vX.YY.Z-rc") == "v1.2.3-rc"

    @pytest.mark.parametrize(
        "release_type, expected",
        [
            ("release", "v1.2.3"),
            ("rc", "v1.2.3-rc"),
            ("dev", "v1.2.3-abcdef"),
            ("rc-dev", "v1.2.3-rc-abcdef"),
            ("custom", "v1.2.3-beta"),
            ("custom-dev", "v1.2.3-beta-abcdef"),
        ],
    )
    def test_by_type(self, release_type: str, expected: str) -> None:
        """Test each type composes to its canonical template."""
        suffix = "beta" if release_type.startswith("custom") else None
        result = compose_version(
            1, 2, 3, suffix=suffix, hash="abcdef", release_type=release_type
        )
        assert result == expected

    @pytest.mark.parametrize(
        "kwargs",
        [
            {},
            {"suffix": "rc"},
            {"hash": "abc1234", "exclude_prefix": True},
            {"suffix": "beta-2", "hash": "abc1234", "prefix": "ver"},
            {"release_type": "rc-dev", "hash": "deadbeef"},
        ],
    )
    def test_output_parses_back(self, kwargs) -> None:
        """Test composed strings parse back to the same numbers."""
        version = compose_version(4, 5, 6, **kwargs)
        components = parse_version(version)

        assert (components.major, components.minor, components.patch) == (4, 5, 6)
        assert components.version == version

    @pytest.mark.parametrize("template", FormatTemplate.all(), ids=lambda t: t.name)
    @pytest.mark.parametrize("prefix", ["v", "release-"])
    def test_round_trip_every_template(self, template: FormatTemplate, prefix: str) -> None:
        """Test parsing a composed string gives back the same components."""
        suffix = {
            SuffixKind.NONE: None,
            SuffixKind.RC: "rc",
            SuffixKind.CUSTOM: "beta-2",
        }[template.suffix_kind]
        expected = VersionComponents(
            major=10,
            minor=40,
            patch=0,
            prefix=prefix if template.has_prefix else None,
            suffix=suffix,
            hash="a1b2c3f" if template.has_hash else None,
        )

        version = compose_version(
            expected.major,
            expected.minor,
            expected.patch,
            prefix=expected.prefix,
            suffix=expected.suffix,
            hash=expected.hash,
            template=template,
        )

        assert parse_version(version) == expected
        assert parse_version(version).template == template

    def test_configured_suffix_is_not_emitted(self) -> None:
        """Test default_suffix never stands in for a missing custom suffix."""
        config = VerFormatConfig(default_suffix="beta")

        assert compose_version(1, 2, 3, release_type="rc", config=config) == "v1.2.3-rc"
        with pytest.raises(CompositionError) as exc_info:
            compose_version(1, 2, 3, template="vX.YY.Z-<suffix>", config=config)
        assert exc_info.value.reason is CompositionFailure.MISSING_VALUE


@pytest.mark.unit
class TestComposeErrors:
    """Tests for composition failures."""

    def _fail(self, *args, **kwargs) -> CompositionError:
        with pytest.raises(CompositionError) as exc_info:
            compose_version(*args, **kwargs)
        return exc_info.value

    @pytest.mark.parametrize("missing", ["major", "minor", "patch"])
    def test_missing_number(self, missing: str) -> None:
        """Test each number is required."""
        numbers = {"major": 1, "minor": 2, "patch": 3}
        numbers[missing] = None

        error = self._fail(numbers["major"], numbers["minor"], numbers["patch"])
        assert error.reason is CompositionFailure.MISSING_COMPONENT
        assert error.field == missing

    def test_empty_number_is_missing(self) -> None:
        """Test an empty string counts as a missing number."""
        error = self._fail("", 2, 3)
        assert error.reason is CompositionFailure.MISSING_COMPONENT

    @pytest.mark.parametrize("value", [-1, "1.0", "x", True])
    def test_invalid_number(self, value) -> None:
        """Test negative, non-digit and boolean numbers are rejected."""
        error = self._fail(value, 2, 3)
        assert error.reason is CompositionFailure.INVALID_VALUE
        assert error.field == "major"

    def test_custom_format_requires_suffix(self) -> None:
        """Test a custom suffix template without a suffix is an error."""
        error = self._fail(1, 2, 3, template="vX.YY.Z-<suffix>")
        assert error.reason is CompositionFailure.MISSING_VALUE
        assert error.field == "suffix"

    def test_hash_format_requires_hash(self) -> None:
        """Test a hash template without a hash is an error."""
        error = self._fail(1, 2, 3, release_type="dev")
        assert error.reason is CompositionFailure.MISSING_VALUE
        assert error.field == "hash"

    def test_uppercase_hash_rejected(self) -> None:
        """Test invalid hashes are rejected before emission."""
        error = self._fail(1, 2, 3, hash="ABC1234")
        assert error.reason is CompositionFailure.INVALID_VALUE
        assert error.field == "hash"

    def test_invalid_prefix_rejected(self) -> None:
        """Test a prefix containing digits is rejected."""
        error = self._fail(1, 2, 3, prefix="v1")
        assert error.reason is CompositionFailure.INVALID_VALUE
        assert error.field == "prefix"

    def test_invalid_suffix_rejected(self) -> None:
        """Test a suffix with disallowed characters is rejected."""
        error = self._fail(1, 2, 3, suffix="rc.1")
        assert error.reason is CompositionFailure.INVALID_VALUE
        assert error.field == "suffix"

    def test_rc_type_with_custom_suffix_conflicts(self) -> None:
        """Test an rc type cannot carry a different suffix."""
        error = self._fail(1, 2, 3, suffix="beta", release_type="rc")
        assert error.reason is CompositionFailure.CONFLICT
        assert error.field == "suffix"

    def test_custom_format_with_rc_conflicts(self) -> None:
        """Test the custom suffix template refuses the literal rc."""
        error = self._fail(1, 2, 3, suffix="rc", template="vX.YY.Z-<suffix>")
        assert error.reason is CompositionFailure.CONFLICT

    def test_hex_suffix_is_ambiguous(self) -> None:
        """Test a suffix that would read back as a hash is refused."""
        error = self._fail(1, 2, 3, suffix="abcdef")
        assert error.reason is CompositionFailure.AMBIGUOUS
        assert error.field == "suffix"

    def test_short_hash_is_ambiguous(self) -> None:
        """Test a hash too short to read back as a hash is refused."""
        error = self._fail(1, 2, 3, hash="abc12")
        assert error.reason is CompositionFailure.AMBIGUOUS
        assert error.field == "hash"

    def test_error_details(self) -> None:
        """Test the reason and field are exposed in details."""
        error = self._fail(None, 2, 3)
        assert error.kind == "CompositionError"
        assert error.details == {"reason": "missing-component", "field": "major"}
