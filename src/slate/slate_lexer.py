"""Lexer for Slate source code with detailed error messages."""

import logging
from typing import Callable, ClassVar, Dict, List, Set

from slate.slate_error import SlateLexError, SlateUnterminatedStringError
from slate.slate_location import SlateLocation
from slate.slate_token import SlateToken, SlateTokenType
from slate.slate_trace import SlateTokenWatcher


def build_operator_map(operators: List[str]) -> Dict[str, List[str]]:
    """
    Build an operator map from a list of operators.

    Args:
        operators: List of operator strings

    Returns:
        A dictionary mapping first characters to lists of operators
        starting with that character, sorted by length (longest first)
    """
    operator_map: Dict[str, List[str]] = {}
    for op in operators:
        operator_map.setdefault(op[0], []).append(op)

    for operators_list in operator_map.values():
        operators_list.sort(key=len, reverse=True)

    return operator_map


class SlateLexer:
    """
    Lexes Slate source code into a list of located tokens.

    The lexer makes a single forward pass over the input, looking ahead at most
    two characters.  Whitespace and `//` comments produce no tokens, but crossing
    a newline while skipping them marks the next token with `newline_before`.
    The token list always ends with exactly one EOF token.
    """

    _LETTER_UNDERSCORE_CHARS: ClassVar[Set[str]] = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
    _LETTER_DIGIT_UNDERSCORE_CHARS: ClassVar[Set[str]] = set(
        "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
    )
    _DIGIT_CHARS: ClassVar[Set[str]] = set("0123456789")

    # Any character in here is a digit in at least one base, so seeing one that
    # is not valid for the current base is an error rather than the end of the literal
    _ANY_BASE_DIGIT_CHARS: ClassVar[Set[str]] = set("0123456789abcdefABCDEF")

    _BASE_DIGIT_CHARS: ClassVar[Dict[int, Set[str]]] = {
        2: set("01"),
        8: set("01234567"),
        10: set("0123456789"),
        16: set("0123456789abcdefABCDEF"),
    }

    _BASE_DIGIT_NAMES: ClassVar[Dict[int, str]] = {2: "0-1", 8: "0-7", 10: "0-9", 16: "0-9, a-f"}

    _BASE_PREFIXES: ClassVar[Dict[str, tuple[int, SlateTokenType]]] = {
        'b': (2, SlateTokenType.INTEGER_BIN),
        'o': (8, SlateTokenType.INTEGER_OCT),
        'x': (16, SlateTokenType.INTEGER_HEX),
    }

    _OPERATORS: ClassVar[List[str]] = [
        '==', '!=', '<=', '>=', '=>', '..',
        '+', '-', '*', '/', '(', ')', '[', ']', '{', '}',
        '|', ':', ';', ',', '@', '.', '=', '<', '>', '!'
    ]

    _OPERATORS_MAP: ClassVar[Dict[str, List[str]]] = build_operator_map(_OPERATORS)

    def __init__(self, token_watcher: SlateTokenWatcher | None = None) -> None:
        """
        Initialize the lexer.

        Args:
            token_watcher: Optional watcher told about every emitted token
        """
        self._logger = logging.getLogger("SlateLexer")
        self._token_watcher = token_watcher

        self._input = ""
        self._input_len = 0
        self._position = 0
        self._line = 1
        self._column = 1
        self._source_name = "<stdin>"
        self._seen_newline = False
        self._tokens: List[SlateToken] = []

    def lex(self, source: str, source_name: str = "<stdin>") -> List[SlateToken]:
        """
        Lex Slate source code.

        Args:
            source: The source text to lex
            source_name: Name echoed into every token location, e.g. a file path

        Returns:
            List of tokens, terminated by a single EOF token

        Raises:
            SlateLexError: On an unexpected character or a digit that is invalid
                for the literal's base
            SlateUnterminatedStringError: If a string literal is not closed before
                a newline or the end of the source
        """
        self._input = source
        self._input_len = len(source)
        self._position = 0
        self._line = 1
        self._column = 1
        self._source_name = source_name
        self._seen_newline = False
        self._tokens = []

        while self._position < self._input_len:
            ch = self._input[self._position]
            self._get_lexing_function(ch)()

        self._emit(SlateTokenType.EOF, self._location(), "")
        self._logger.debug("Lexed %d tokens from %s", len(self._tokens), source_name)

        tokens = self._tokens
        self._tokens = []
        return tokens

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """
        if ch.isspace():
            return self._read_whitespace

        if ch == '0' and self._peek(1) in self._BASE_PREFIXES:
            return self._read_based_number

        if ch in self._DIGIT_CHARS:
            return self._read_decimal_number

        if ch == '"':
            return self._read_string

        if ch == '/':
            return self._read_forward_slash

        if ch in self._LETTER_UNDERSCORE_CHARS:
            return self._read_identifier_or_keyword

        if ch in self._OPERATORS_MAP:
            return self._read_operator

        return self._read_unexpected_character

    def _location(self) -> SlateLocation:
        """Snapshot the current location."""
        return SlateLocation(self._line, self._column, self._source_name)

    def _peek(self, offset: int = 0) -> str:
        """Look ahead without consuming; returns an empty string past the end."""
        index = self._position + offset
        return self._input[index] if index < self._input_len else ""

    def _advance(self) -> None:
        """Consume one character, keeping the line and column counters in step."""
        if self._position >= self._input_len:
            return

        if self._input[self._position] == '\n':
            self._line += 1
            self._column = 1
            self._seen_newline = True

        else:
            self._column += 1

        self._position += 1

    def _emit(self, kind: SlateTokenType, location: SlateLocation, text: str) -> None:
        """Append a token, attaching and then clearing the newline flag."""
        token = SlateToken(kind, location, text, self._seen_newline)
        self._tokens.append(token)
        self._seen_newline = False

        if self._token_watcher is not None:
            self._token_watcher.on_token(token)

    def _read_whitespace(self) -> None:
        """
        Skip whitespace in the input.
        """
        while self._position < self._input_len and self._input[self._position].isspace():
            self._advance()

    def _read_forward_slash(self) -> None:
        """
        Read a forward slash, which could be the start of a comment or an operator.
        """
        if self._peek(1) == '/':
            self._read_comment()
            return

        self._read_operator()

    def _read_comment(self) -> None:
        """
        Skip a line comment, including the newline that ends it.
        """
        while self._position < self._input_len:
            ch = self._input[self._position]
            self._advance()
            if ch == '\n':
                break

    def _read_digits(self, base: int) -> str:
        """
        Read a run of digits in the given base, dropping `_` separators.

        Args:
            base: The radix of the literal (2, 8, 10 or 16)

        Returns:
            The digits read, in their original case

        Raises:
            SlateLexError: If a digit is not valid for the base
        """
        valid_digits = self._BASE_DIGIT_CHARS[base]
        digits: List[str] = []

        while self._position < self._input_len:
            ch = self._input[self._position]
            if ch in valid_digits:
                digits.append(ch)
                self._advance()
                continue

            if ch == '_':
                self._advance()
                continue

            if ch in self._ANY_BASE_DIGIT_CHARS:
                raise SlateLexError(
                    message=f"Invalid digit '{ch}' in base {base} literal",
                    location=self._location(),
                    received=f"Digit: {ch}",
                    expected=f"Base {base} digits: {self._BASE_DIGIT_NAMES[base]}",
                    example="Valid: 0b1010, 0o17, 42, 0xFF, 1_000",
                    source=self._input
                )

            break

        return ''.join(digits)

    def _read_based_number(self) -> None:
        """
        Read a binary, octal or hexadecimal integer literal (0b..., 0o..., 0x...).
        """
        location = self._location()
        prefix = self._peek(1)
        base, kind = self._BASE_PREFIXES[prefix]
        self._advance()
        self._advance()

        digits = self._read_digits(base)
        if not digits:
            raise SlateLexError(
                message=f"Missing digits after '0{prefix}' prefix",
                location=location,
                expected=f"At least one base {base} digit",
                example="Valid: 0b1010, 0o17, 0xFF",
                source=self._input
            )

        self._emit(kind, location, digits)

    def _read_decimal_number(self) -> None:
        """
        Read a decimal integer or float literal.

        A single `.` makes the literal a float; `..` is left alone so that
        `1..5` lexes as a range.
        """
        location = self._location()
        digits = self._read_digits(10)

        if self._peek() == '.' and self._peek(1) != '.':
            self._advance()
            fraction = self._read_digits(10)
            self._emit(SlateTokenType.FLOAT, location, f"{digits}.{fraction}")
            return

        self._emit(SlateTokenType.INTEGER_DEC, location, digits)

    def _read_string(self) -> None:
        """
        Read a string literal.  Characters are copied verbatim; there are no escapes.
        """
        location = self._location()
        self._advance()
        start = self._position

        while self._position < self._input_len:
            ch = self._input[self._position]
            if ch == '"':
                text = self._input[start:self._position]
                self._advance()
                self._emit(SlateTokenType.STRING, location, text)
                return

            if ch == '\n':
                raise SlateUnterminatedStringError(
                    message="Unterminated string literal: newline before closing quote",
                    location=location,
                    received=f"String starting with: {self._input[start - 1:start + 10]}...",
                    expected="Closing quote \" on the same line",
                    suggestion="Add a closing quote \" before the end of the line",
                    source=self._input
                )

            self._advance()

        raise SlateUnterminatedStringError(
            message="Unterminated string literal: end of input before closing quote",
            location=location,
            received=f"String starting with: {self._input[start - 1:start + 10]}...",
            expected="Closing quote \" at end of string",
            suggestion="Add a closing quote \" at the end of the string",
            source=self._input
        )

    def _read_identifier_or_keyword(self) -> None:
        """
        Read an identifier and classify it as a keyword where it is one.
        """
        location = self._location()
        start = self._position
        while (self._position < self._input_len and
               self._input[self._position] in self._LETTER_DIGIT_UNDERSCORE_CHARS):
            self._advance()

        text = self._input[start:self._position]
        self._emit(SlateTokenType.classify_identifier(text), location, text)

    def _read_operator(self) -> None:
        """
        Read an operator or punctuation token, trying the longest spelling first.
        """
        first_char = self._input[self._position]
        for op in self._OPERATORS_MAP[first_char]:
            if self._input.startswith(op, self._position):
                location = self._location()
                for _ in op:
                    self._advance()

                self._emit(SlateTokenType(op), location, op)
                return

    def _read_unexpected_character(self) -> None:
        """
        Report a character that cannot start any token.
        """
        ch = self._input[self._position]
        suggestions = {
            "'": "Use double quotes for strings: \"text\"",
            '#': "Comments start with //",
            '%': "There is no modulo operator",
            '&': "Use 'and' for boolean operations, not &",
            '\\': "Backslashes are only allowed inside string literals",
        }

        raise SlateLexError(
            message=f"Unexpected character: {ch!r}",
            location=self._location(),
            received=f"Character: {ch!r} (code {ord(ch)})",
            suggestion=suggestions.get(ch, f"{ch!r} is not a valid character in Slate source"),
            source=self._input
        )


def tokenize(source: str, source_name: str = "<stdin>") -> List[SlateToken]:
    """
    Tokenize Slate source code.

    Args:
        source: The source text
        source_name: Name echoed into every token location

    Returns:
        List of tokens ending with an EOF token

    Raises:
        SlateLexError: If the source cannot be tokenized
    """
    return SlateLexer().lex(source, source_name)
