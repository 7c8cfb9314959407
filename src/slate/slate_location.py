"""Source locations for Slate tokens and diagnostics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SlateLocation:
    """
    A point in a Slate source file.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        source_name: Name of the source, e.g. a file path or "<stdin>"
    """
    line: int
    column: int
    source_name: str = "<stdin>"

    @classmethod
    def start(cls, source_name: str = "<stdin>") -> 'SlateLocation':
        """Return the location of the first character of a source."""
        return cls(1, 1, source_name)

    def __str__(self) -> str:
        return f"{self.source_name}:{self.line}:{self.column}"
