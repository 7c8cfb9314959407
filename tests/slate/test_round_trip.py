"""Tests that token spellings rebuild an equivalent program."""

import pytest

from slate import tokenize


PROGRAMS = [
    "let x = 1_000 + 0xFF * 0b1010 - 0o17 / 3.14",
    'fn greet(name) => "hello " + name\ngreet("world")',
    "for i in 1..10 { if i >= 5 and i != 7 { return i } else { x = [i, i.y] } }",
    "a|b:c;d,@e == !f <= g > h < i",
    "// leading comment\nlet s = \"a // not a comment\" // trailing\nnothing",
    "5. + 1_0.0_1 .. 2",
]


class TestRoundTrip:
    """Re-lexing the spelled-out tokens gives the same tokens."""

    @pytest.mark.parametrize("source", PROGRAMS)
    def test_round_trip(self, source):
        """Kinds and texts survive a spell-and-relex round trip."""
        tokens = tokenize(source)
        rebuilt = " ".join(token.spelling() for token in tokens[:-1])
        relexed = tokenize(rebuilt)

        assert [(token.kind, token.text) for token in relexed] == [(token.kind, token.text) for token in tokens]
