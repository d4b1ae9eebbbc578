"""Tests for string-to-type coercion.

Parsers return a tagged ``Coercion`` so the accessors can fall back to
a default without raising.
"""

import pytest

from py_env.coerce import Coercion, format_boolean, parse_boolean, parse_number


class TestCoercion:
    """Verify the tagged result."""

    def test_success_value_or(self) -> None:
        """A success should return its own value."""
        assert Coercion.success(5).value_or(9) == 5  # noqa: PLR2004

    def test_failure_value_or(self) -> None:
        """A failure should return the default."""
        assert Coercion[int].failure().value_or(9) == 9  # noqa: PLR2004

    def test_falsy_success_is_kept(self) -> None:
        """Zero and False are real values, not failures."""
        assert Coercion.success(0).value_or(9) == 0
        assert Coercion.success(value=False).value_or(default=True) is False


class TestParseNumber:
    """Verify number parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("42", 42),
            ("-7", -7),
            ("+3", 3),
            ("  12  ", 12),
            ("0x1F", 31),
            ("0o17", 15),
            ("0b101", 5),
            ("1.5", 1.5),
            (".5", 0.5),
            ("2.", 2.0),
            ("1e3", 1000.0),
            ("", 0),
            ("   ", 0),
        ],
    )
    def test_valid_numbers(self, raw: str, expected: float) -> None:
        """Numeric text should parse to its value."""
        result = parse_number(raw)
        assert result.ok
        assert result.value == expected

    def test_integers_stay_int(self) -> None:
        """Integer literals should come back as int."""
        assert isinstance(parse_number("42").value, int)

    @pytest.mark.parametrize(
        "raw", ["abc", "12abc", "inf", "-Infinity", "nan", "1e999", "1_000", "-0x10", "1,5"]
    )
    def test_invalid_numbers(self, raw: str) -> None:
        """Non-numeric or non-finite text should fail."""
        assert not parse_number(raw).ok

    @pytest.mark.parametrize(
        "raw",
        ["1" * 5000, "-" + "9" * 400, "0x" + "f" * 300, "0b1" + "0" * 1024],
        ids=["5000-digits", "400-digits", "huge-hex", "huge-binary"],
    )
    def test_too_large_numbers_fail(self, raw: str) -> None:
        """Integers beyond the float range should fail, not raise."""
        assert not parse_number(raw).ok

    def test_large_finite_integer(self) -> None:
        """A long integer inside the float range should still parse."""
        assert parse_number("9" * 300).value == int("9" * 300)

    @pytest.mark.parametrize("raw", ["١٢٣", "１２", "٣.٥", "0x١"])
    def test_non_ascii_digits_fail(self, raw: str) -> None:
        """Only ASCII digits count as numbers."""
        assert not parse_number(raw).ok


class TestParseBoolean:
    """Verify boolean parsing."""

    @pytest.mark.parametrize("raw", ["true", "TRUE", "True", "1"])
    def test_true_values(self, raw: str) -> None:
        """'true' in any case and '1' should be true."""
        assert parse_boolean(raw).value is True

    @pytest.mark.parametrize("raw", ["false", "0", "yes", "on", "", " true"])
    def test_everything_else_is_false(self, raw: str) -> None:
        """Any other text should be false, never a failure."""
        result = parse_boolean(raw)
        assert result.ok
        assert result.value is False

    def test_format_boolean(self) -> None:
        """Booleans should render as lower-case words."""
        assert format_boolean(value=True) == "true"
        assert format_boolean(value=False) == "false"
