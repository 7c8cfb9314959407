"""Tests for Slate tokens and locations."""

import dataclasses

import pytest

from slate import SlateLocation, SlateToken, SlateTokenType


class TestSlateLocation:
    """Test the location value type."""

    def test_str_format(self):
        """Locations render as name:line:column."""
        assert str(SlateLocation(4, 12, "lib/util.sl")) == "lib/util.sl:4:12"

    def test_start(self):
        """start() is the first character of a source."""
        assert SlateLocation.start("a.sl") == SlateLocation(1, 1, "a.sl")

    def test_immutable(self):
        """Locations cannot be changed once created."""
        location = SlateLocation(1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            location.line = 2  # type: ignore[misc]


class TestSlateToken:
    """Test token helpers."""

    def _token(self, kind, text):
        return SlateToken(kind, SlateLocation.start(), text)

    def test_immutable(self):
        """Tokens cannot be changed once created."""
        token = self._token(SlateTokenType.IDENTIFIER, "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "y"  # type: ignore[misc]

    def test_default_newline_flag(self):
        """Tokens default to no preceding newline."""
        assert self._token(SlateTokenType.PLUS, "+").newline_before is False

    @pytest.mark.parametrize("kind, text, expected", [
        (SlateTokenType.STRING, "hi there", '"hi there"'),
        (SlateTokenType.INTEGER_BIN, "1010", "0b1010"),
        (SlateTokenType.INTEGER_OCT, "17", "0o17"),
        (SlateTokenType.INTEGER_HEX, "FF", "0xFF"),
        (SlateTokenType.INTEGER_DEC, "1000", "1000"),
        (SlateTokenType.FLOAT, "3.14", "3.14"),
        (SlateTokenType.FAT_ARROW, "=>", "=>"),
        (SlateTokenType.LET, "let", "let"),
    ])
    def test_spelling(self, kind, text, expected):
        """spelling() restores quotes and base prefixes."""
        assert self._token(kind, text).spelling() == expected

    def test_predicates(self):
        """is_integer and is_literal classify tokens."""
        assert self._token(SlateTokenType.INTEGER_HEX, "f").is_integer()
        assert not self._token(SlateTokenType.FLOAT, "1.0").is_integer()
        assert self._token(SlateTokenType.FLOAT, "1.0").is_literal()
        assert self._token(SlateTokenType.STRING, "").is_literal()
        assert not self._token(SlateTokenType.IDENTIFIER, "x").is_literal()

    def test_value_conversion_rejects_wrong_kind(self):
        """Numeric conversions only apply to numeric literals."""
        with pytest.raises(ValueError):
            self._token(SlateTokenType.STRING, "12").integer_value()

        with pytest.raises(ValueError):
            self._token(SlateTokenType.INTEGER_DEC, "12").float_value()

    def test_classify_identifier(self):
        """Keyword classification is exact."""
        assert SlateTokenType.classify_identifier("while") == SlateTokenType.WHILE
        assert SlateTokenType.classify_identifier("While") == SlateTokenType.IDENTIFIER
        assert SlateTokenType.classify_identifier("+") == SlateTokenType.IDENTIFIER
