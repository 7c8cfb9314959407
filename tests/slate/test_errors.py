"""Tests for Slate error formatting."""

from slate import SlateError, SlateEvalError, SlateLexError, SlateLocation, SlateTypeError


class TestErrorFormatting:
    """Test the detailed error message layout."""

    def test_message_only(self):
        """A bare error just carries its message."""
        error = SlateError("Something broke")
        assert str(error) == "Error: Something broke"
        assert error.location is None

    def test_all_fields(self):
        """Every supplied detail appears in order."""
        error = SlateError(
            message="Bad thing",
            location=SlateLocation(2, 4, "f.sl"),
            context="While testing",
            expected="A good thing",
            received="A bad thing",
            suggestion="Do better",
            example="good"
        )
        assert str(error).split("\n") == [
            "Error: Bad thing",
            "Location: f.sl:2:4",
            "Received: A bad thing",
            "Expected: A good thing",
            "Context: While testing",
            "Suggestion: Do better",
            "Example: good",
        ]

    def test_source_context_marker(self):
        """With source text the offending line is shown with a caret under the column."""
        error = SlateError("Oops", location=SlateLocation(2, 3, "f.sl"), source="ab\ncdef")
        lines = str(error).split("\n")
        assert "    1: ab" in lines
        assert "  > 2: cdef" in lines
        marker = lines[lines.index("  > 2: cdef") + 1]
        assert marker == " " * 9 + "^"
        assert "  > 2: cdef"[marker.index("^")] == "e"

    def test_source_context_out_of_range(self):
        """A location beyond the source does not break formatting."""
        error = SlateError("Oops", location=SlateLocation(9, 1), source="one line")
        assert "(no context available)" in str(error)

    def test_hierarchy(self):
        """All Slate errors share one base class."""
        assert issubclass(SlateLexError, SlateError)
        assert issubclass(SlateEvalError, SlateError)
        assert issubclass(SlateTypeError, SlateEvalError)
        assert not issubclass(SlateEvalError, SlateLexError)
