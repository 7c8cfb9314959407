"""Exception classes for Slate with detailed context."""

from slate.slate_location import SlateLocation


class SlateError(Exception):
    """Base exception for Slate errors with detailed context information."""

    def __init__(
        self,
        message: str,
        location: SlateLocation | None = None,
        context: str | None = None,
        expected: str | None = None,
        received: str | None = None,
        suggestion: str | None = None,
        example: str | None = None,
        source: str | None = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            location: Where in the source the error occurred
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
            source: Source code for context display
        """
        self.message = message
        self.location = location
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example
        self.source = source

        super().__init__(self._format_detailed_message())

    def _format_context_with_marker(self, source: str, line_num: int, column: int, before: int = 2) -> str:
        """
        Format source context with a marker pointing to the error location.

        Args:
            source: The source code string
            line_num: Line number (1-indexed)
            column: Column number (1-indexed)
            before: Number of lines before to include

        Returns:
            Formatted string with context and marker
        """
        lines = source.split('\n')
        if not 1 <= line_num <= len(lines):
            return "(no context available)"

        start_line = max(1, line_num - before)
        line_num_width = len(str(line_num))

        result_lines = []
        for ln in range(start_line, line_num + 1):
            indicator = ">" if ln == line_num else " "
            result_lines.append(f"  {indicator} {ln:>{line_num_width}}: {lines[ln - 1]}")

        # "  " + indicator + " " + line number + ": " puts column 1 under the first character
        padding = 2 + 1 + 1 + line_num_width + 2 + (column - 1)
        result_lines.append(" " * padding + "^")
        return "\n".join(result_lines)

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.location is not None:
            parts.append(f"Location: {self.location}")

            if self.source is not None:
                context_str = self._format_context_with_marker(
                    self.source, self.location.line, self.location.column
                )
                parts.append(f"\nSource Context:\n{context_str}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        if self.example:
            parts.append(f"Example: {self.example}")

        return "\n".join(parts)


class SlateLexError(SlateError):
    """Tokenization errors with detailed context."""


class SlateUnterminatedStringError(SlateLexError):
    """A string literal ran into a newline or the end of the source before its closing quote."""


class SlateEvalError(SlateError):
    """Value-level errors raised by arithmetic and slicing."""


class SlateTypeError(SlateEvalError):
    """Operands of an unsupported type combination."""
