"""Token types and token representation for Slate source code."""

from dataclasses import dataclass
from enum import Enum

from slate.slate_location import SlateLocation


class SlateTokenType(Enum):
    """Token types for Slate source code."""
    EOF = "EOF"

    # Literals
    INTEGER_BIN = "INTEGER_BIN"
    INTEGER_OCT = "INTEGER_OCT"
    INTEGER_DEC = "INTEGER_DEC"
    INTEGER_HEX = "INTEGER_HEX"
    FLOAT = "FLOAT"
    STRING = "STRING"

    IDENTIFIER = "IDENTIFIER"

    # Keywords
    LET = "let"
    FN = "fn"
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    FOR = "for"
    IN = "in"
    RETURN = "return"
    TRUE = "true"
    FALSE = "false"
    NOTHING = "nothing"
    AND = "and"
    OR = "or"

    # Operators and punctuation
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"
    PIPE = "|"
    COLON = ":"
    SEMICOLON = ";"
    COMMA = ","
    AT = "@"
    DOT = "."
    DOT_DOT = ".."
    EQUALS = "="
    EQUALS_EQUALS = "=="
    FAT_ARROW = "=>"
    LESS_THAN = "<"
    LESS_THAN_EQUALS = "<="
    GREATER_THAN = ">"
    GREATER_THAN_EQUALS = ">="
    BANG = "!"
    BANG_EQUALS = "!="

    @classmethod
    def classify_identifier(cls, text: str) -> 'SlateTokenType':
        """
        Classify identifier text as a keyword or a plain identifier.

        Args:
            text: The identifier text as it appeared in the source

        Returns:
            The keyword token type, or IDENTIFIER
        """
        return _KEYWORDS.get(text, cls.IDENTIFIER)


_KEYWORDS = {
    kind.value: kind for kind in (
        SlateTokenType.LET, SlateTokenType.FN, SlateTokenType.IF, SlateTokenType.ELSE,
        SlateTokenType.WHILE, SlateTokenType.FOR, SlateTokenType.IN, SlateTokenType.RETURN,
        SlateTokenType.TRUE, SlateTokenType.FALSE, SlateTokenType.NOTHING,
        SlateTokenType.AND, SlateTokenType.OR,
    )
}

# Radix and source prefix for each integer literal kind
INTEGER_BASES = {
    SlateTokenType.INTEGER_BIN: (2, "0b"),
    SlateTokenType.INTEGER_OCT: (8, "0o"),
    SlateTokenType.INTEGER_DEC: (10, ""),
    SlateTokenType.INTEGER_HEX: (16, "0x"),
}


@dataclass(frozen=True)
class SlateToken:
    """
    Represents a single token in Slate source code.

    Attributes:
        kind: The token type
        location: Where the token starts
        text: The literal body (no quotes, no base prefix, no `_` separators) or the
            operator/identifier spelling
        newline_before: True if a newline was skipped since the previous token
    """
    kind: SlateTokenType
    location: SlateLocation
    text: str
    newline_before: bool = False

    def is_integer(self) -> bool:
        """Check if this token is an integer literal of any base."""
        return self.kind in INTEGER_BASES

    def is_literal(self) -> bool:
        """Check if this token is a numeric or string literal."""
        return self.is_integer() or self.kind in (SlateTokenType.FLOAT, SlateTokenType.STRING)

    def integer_value(self) -> int:
        """
        Convert an integer literal token to its numeric value.

        Raises:
            ValueError: If this is not an integer literal token
        """
        if not self.is_integer():
            raise ValueError(f"{self.kind.name} token is not an integer literal")

        base, _prefix = INTEGER_BASES[self.kind]
        return int(self.text, base)

    def float_value(self) -> float:
        """
        Convert a float literal token to its numeric value.

        Raises:
            ValueError: If this is not a float literal token
        """
        if self.kind != SlateTokenType.FLOAT:
            raise ValueError(f"{self.kind.name} token is not a float literal")

        return float(self.text)

    def spelling(self) -> str:
        """
        Rebuild source text that lexes back to an equivalent token.

        Returns:
            The token as it could appear in source code
        """
        if self.kind == SlateTokenType.STRING:
            return f'"{self.text}"'

        if self.is_integer():
            _base, prefix = INTEGER_BASES[self.kind]
            return prefix + self.text

        return self.text

    def __repr__(self) -> str:
        return f"SlateToken({self.kind.name}, {self.text!r}, {self.location})"
