"""Shared fixtures and utilities for Slate tests."""

from typing import List

import pytest

from slate import Slate, SlateLexer, SlateLocation, SlateOperators, SlateToken, SlateTokenType


@pytest.fixture
def slate():
    """Create a fresh Slate instance for each test."""
    return Slate()


@pytest.fixture
def lexer():
    """Create a fresh lexer for each test."""
    return SlateLexer()


@pytest.fixture
def operators():
    """Create the value operators."""
    return SlateOperators()


@pytest.fixture
def loc():
    """A location to attribute value errors to."""
    return SlateLocation(3, 7, "test.sl")


class SlateTestHelpers:
    """Helper utilities for Slate testing."""

    @staticmethod
    def kinds(tokens: List[SlateToken]) -> List[SlateTokenType]:
        """Token kinds, without the trailing EOF."""
        assert tokens[-1].kind == SlateTokenType.EOF, "Token list must end with EOF"
        return [token.kind for token in tokens[:-1]]

    @staticmethod
    def texts(tokens: List[SlateToken]) -> List[str]:
        """Token texts, without the trailing EOF."""
        return [token.text for token in tokens[:-1]]

    @staticmethod
    def single(tokens: List[SlateToken]) -> SlateToken:
        """Return the only non-EOF token."""
        assert len(tokens) == 2, f"Expected one token plus EOF, got {tokens!r}"
        return tokens[0]


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return SlateTestHelpers
