"""Slate scripting language: lexical analysis and runtime values."""

# Main API
from slate.slate import Slate

# Exceptions
from slate.slate_error import (
    SlateError, SlateLexError, SlateUnterminatedStringError, SlateEvalError, SlateTypeError
)

# Value types
from slate.slate_value import (
    SlateValue, SlateInteger, SlateFloat, SlateString, SlateBoolean,
    SlateBuiltinFunction, SlateFunction, SlateNothing, SLATE_NOTHING
)

# Lower-level components
from slate.slate_location import SlateLocation
from slate.slate_token import SlateToken, SlateTokenType
from slate.slate_lexer import SlateLexer, tokenize
from slate.slate_operators import SlateOperators

# Token watchers (for debugging)
from slate.slate_trace import SlateTokenWatcher, SlateLoggingTokenWatcher, SlateBufferingTokenWatcher


__all__ = [
    # Main API
    "Slate",

    # Exceptions
    "SlateError", "SlateLexError", "SlateUnterminatedStringError", "SlateEvalError", "SlateTypeError",

    # Value types
    "SlateValue", "SlateInteger", "SlateFloat", "SlateString", "SlateBoolean",
    "SlateBuiltinFunction", "SlateFunction", "SlateNothing", "SLATE_NOTHING",

    # Lower-level components
    "SlateLocation", "SlateToken", "SlateTokenType", "SlateLexer", "tokenize", "SlateOperators",

    # Token watchers
    "SlateTokenWatcher", "SlateLoggingTokenWatcher", "SlateBufferingTokenWatcher",
]
