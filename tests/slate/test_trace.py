"""Tests for Slate token watchers."""

import logging

import pytest

from slate import (
    SlateBufferingTokenWatcher, SlateLexError, SlateLexer, SlateLoggingTokenWatcher, SlateTokenType
)


class TestBufferingTokenWatcher:
    """Test the buffering watcher."""

    def test_sees_every_token(self):
        """The watcher receives each token in order, including EOF."""
        watcher = SlateBufferingTokenWatcher()
        tokens = SlateLexer(watcher).lex("a + 1")
        assert watcher.get_tokens() == tokens
        assert watcher.get_tokens()[-1].kind == SlateTokenType.EOF
        assert not watcher.is_clipped()

    def test_clipping(self):
        """The oldest tokens are dropped and counted once the limit is reached."""
        watcher = SlateBufferingTokenWatcher(max_tokens=2)
        SlateLexer(watcher).lex("a b c")
        assert [token.text for token in watcher.get_tokens()] == ["c", ""]
        assert watcher.dropped_count() == 2
        assert watcher.is_clipped()

    def test_clear(self):
        """clear() empties the buffer and resets the drop count."""
        watcher = SlateBufferingTokenWatcher(max_tokens=1)
        SlateLexer(watcher).lex("a b")
        watcher.clear()
        assert watcher.get_tokens() == []
        assert watcher.dropped_count() == 0
        assert not watcher.is_clipped()

    def test_no_tokens_reported_after_error(self):
        """Tokens before an error are reported, nothing after it."""
        watcher = SlateBufferingTokenWatcher()
        with pytest.raises(SlateLexError):
            SlateLexer(watcher).lex("a $ b")

        assert [token.text for token in watcher.get_tokens()] == ["a"]


class TestLoggingTokenWatcher:
    """Test the logging watcher."""

    def test_logs_tokens(self, caplog):
        """Each token is logged at debug level with its location."""
        caplog.set_level(logging.DEBUG, logger="SlateTokenTrace")
        SlateLexer(SlateLoggingTokenWatcher()).lex("x => 1", "t.sl")
        messages = [record.getMessage() for record in caplog.records if record.name == "SlateTokenTrace"]
        assert messages == [
            "t.sl:1:1 IDENTIFIER 'x'",
            "t.sl:1:3 FAT_ARROW '=>'",
            "t.sl:1:6 INTEGER_DEC '1'",
            "t.sl:1:7 EOF ''",
        ]


class TestLexerLogging:
    """Test the lexer's own logging."""

    def test_run_summary(self, caplog):
        """The lexer logs how many tokens it produced."""
        caplog.set_level(logging.DEBUG, logger="SlateLexer")
        SlateLexer().lex("a b", "s.sl")
        assert "Lexed 3 tokens from s.sl" in caplog.text
