"""Tests for number and text rendering."""

import math

import pytest

from svg2librepcb.core.formatting import format_bool, format_float, quote
from svg2librepcb.exceptions import GeometryError, MetadataError


class TestFormatFloat:
    """Tests for format_float."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (-0.0, "0.0"),
            (0.0, "0.0"),
            (3.14456, "3.145"),
            (-7.0, "-7.0"),
            (7.0, "7.0"),
            (0.4, "0.4"),
            (1.25, "1.25"),
            (-1.27, "-1.27"),
            (10.0, "10.0"),
            (100.5, "100.5"),
            (0.0004, "0.0"),
            (-0.0004, "0.0"),
            (123456.789, "123456.789"),
        ],
    )
    def test_canonical_cases(self, value: float, expected: str) -> None:
        """Test canonical rendering of known values."""
        assert format_float(value) == expected

    @pytest.mark.parametrize("value", [1e-9, 1e12, -3.5e7, 0.1 + 0.2, 2 / 3, -1 / 3])
    def test_no_exponent_and_minimal_digits(self, value: float) -> None:
        """Test output shape for arbitrary finite values."""
        text = format_float(value)
        assert "e" not in text.lower()
        assert text.count(".") == 1
        assert not text.endswith(".")
        integral, fractional = text.split(".")
        assert 1 <= len(fractional) <= 3
        if len(fractional) > 1:
            assert not fractional.endswith("0")

    def test_negative_sign_kept(self) -> None:
        """Test that negative non-zero values keep their sign."""
        assert format_float(-0.002) == "-0.002"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, value: float) -> None:
        """Test that NaN and infinities are rejected."""
        with pytest.raises(GeometryError):
            format_float(value)


class TestFormatBool:
    """Tests for format_bool."""

    def test_literals(self) -> None:
        """Test boolean literals."""
        assert format_bool(True) == "true"
        assert format_bool(False) == "false"


class TestQuote:
    """Tests for quote."""

    def test_plain_text(self) -> None:
        """Test that plain text is wrapped in quotes."""
        assert quote("Top Copper") == '"Top Copper"'

    def test_empty(self) -> None:
        """Test empty string."""
        assert quote("") == '""'

    def test_double_quote_escaped(self) -> None:
        """Test embedded double quotes."""
        assert quote('12" ruler') == '"12\\" ruler"'

    def test_backslash_escaped(self) -> None:
        """Test embedded backslashes."""
        assert quote("a\\b") == '"a\\\\b"'

    def test_whitespace_controls_escaped(self) -> None:
        """Test newline, carriage return and tab escapes."""
        assert quote("a\nb\rc\td") == '"a\\nb\\rc\\td"'

    def test_unicode_kept(self) -> None:
        """Test that non-ASCII text is passed through."""
        assert quote("Widerstand Ω") == '"Widerstand Ω"'

    def test_other_control_rejected(self) -> None:
        """Test that other control characters raise MetadataError."""
        with pytest.raises(MetadataError) as exc_info:
            quote("bell\x07", field="description")
        assert exc_info.value.field == "description"
        assert "U+0007" in str(exc_info.value)
