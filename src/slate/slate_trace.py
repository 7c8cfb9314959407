"""Slate token watcher implementations.

Token watchers are told about every token the lexer emits, which is useful
when debugging how a piece of source was split up.
"""

import logging
from collections import deque
from typing import Deque, List, Protocol

from slate.slate_token import SlateToken


class SlateTokenWatcher(Protocol):
    """Interface for objects that observe emitted tokens."""

    def on_token(self, token: SlateToken) -> None:
        """Called once for each token, in emission order."""


class SlateLoggingTokenWatcher:
    """Watcher that writes each token to a logger at debug level."""

    def __init__(self, logger_name: str = "SlateTokenTrace") -> None:
        self._logger = logging.getLogger(logger_name)

    def on_token(self, token: SlateToken) -> None:
        """
        Log a token.

        Args:
            token: The emitted token
        """
        self._logger.debug("%s %s %r", token.location, token.kind.name, token.text)


class SlateBufferingTokenWatcher:
    """
    Watcher that keeps the most recent tokens in memory.

    At most `max_tokens` are held; once full, each new token pushes out the
    oldest one and the drop is counted.
    """

    def __init__(self, max_tokens: int = 10000) -> None:
        self._tokens: Deque[SlateToken] = deque(maxlen=max_tokens)
        self._dropped = 0

    def on_token(self, token: SlateToken) -> None:
        if len(self._tokens) == self._tokens.maxlen:
            self._dropped += 1

        self._tokens.append(token)

    def get_tokens(self) -> List[SlateToken]:
        """Return the retained tokens, oldest first."""
        return list(self._tokens)

    def dropped_count(self) -> int:
        """Return how many tokens were pushed out by the size limit."""
        return self._dropped

    def is_clipped(self) -> bool:
        return self._dropped > 0

    def clear(self) -> None:
        self._tokens.clear()
        self._dropped = 0
