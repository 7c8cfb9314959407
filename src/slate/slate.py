"""Main Slate class tying the lexer and the value operators together."""

import logging
from typing import List

from slate.slate_lexer import SlateLexer
from slate.slate_location import SlateLocation
from slate.slate_operators import SlateOperators
from slate.slate_token import SlateToken
from slate.slate_trace import SlateTokenWatcher
from slate.slate_value import SlateValue


class Slate:
    """
    Entry point to the Slate lexical and value core.

    The parser and evaluator that sit on top of this core use it to turn source
    text into tokens and to combine runtime values.
    """

    def __init__(self, default_source_name: str = "<stdin>", token_watcher: SlateTokenWatcher | None = None):
        """
        Initialize Slate.

        Args:
            default_source_name: Source name used when tokenize() is not given one
            token_watcher: Optional watcher told about every token emitted
        """
        self.default_source_name = default_source_name
        self.token_watcher = token_watcher
        self._operators = SlateOperators()
        self._logger = logging.getLogger("Slate")

    def tokenize(self, source: str, source_name: str | None = None) -> List[SlateToken]:
        """
        Tokenize Slate source code.

        Args:
            source: The source text
            source_name: Name echoed into token locations; defaults to default_source_name

        Returns:
            List of tokens ending with an EOF token

        Raises:
            SlateLexError: If the source cannot be tokenized
        """
        name = source_name if source_name is not None else self.default_source_name
        self._logger.debug("Tokenizing %s (%d characters)", name, len(source))
        return SlateLexer(self.token_watcher).lex(source, name)

    def apply_operator(self, op: str, left: SlateValue, right: SlateValue, location: SlateLocation) -> SlateValue:
        """
        Combine two values with a binary operator (+, -, * or /).

        Raises:
            SlateEvalError: If the operation is not supported for the operands
        """
        return self._operators.apply(op, left, right, location)

    def slice(
        self,
        subject: SlateValue,
        start: SlateValue | None,
        end: SlateValue | None,
        step: SlateValue | None,
        location: SlateLocation
    ) -> SlateValue:
        """
        Slice a value.

        Raises:
            SlateEvalError: If the slice is not valid
        """
        return self._operators.slice(subject, start, end, step, location)
