"""Arithmetic and slicing operators over Slate values."""

from typing import Callable, Dict, List

from slate.slate_error import SlateEvalError, SlateTypeError
from slate.slate_location import SlateLocation
from slate.slate_value import (
    INTEGER_MAX, INTEGER_MIN, STRING_MAX_LENGTH, SlateFloat, SlateInteger, SlateString, SlateValue
)


BinaryOperator = Callable[[SlateValue, SlateValue, SlateLocation], SlateValue]


class SlateOperators:
    """
    Binary arithmetic and slicing over Slate values.

    Every operation takes its operands and the location of the expression being
    evaluated, and returns a new value.  Unsupported operand combinations raise
    SlateTypeError; other faults (zero divisors, bad counts, bad slice steps)
    raise SlateEvalError.  Both carry the location.

    Mixed integer/float arithmetic promotes the integer to a float.
    """

    def get_operators(self) -> Dict[str, BinaryOperator]:
        """Return dictionary of binary operator implementations, keyed by spelling."""
        return {
            '+': self.add,
            '-': self.subtract,
            '*': self.multiply,
            '/': self.divide,
        }

    def apply(self, op: str, left: SlateValue, right: SlateValue, location: SlateLocation) -> SlateValue:
        """
        Apply a binary operator by its spelling.

        Args:
            op: Operator spelling, e.g. "+"
            left: Left operand
            right: Right operand
            location: Location of the expression, for error reporting

        Returns:
            The result value

        Raises:
            SlateEvalError: If the operator is unknown or the operation fails
        """
        operators = self.get_operators()
        if op not in operators:
            raise SlateEvalError(
                message=f"Unknown binary operator: {op}",
                location=location,
                expected=f"One of: {', '.join(operators)}"
            )

        return operators[op](left, right, location)

    def add(self, left: SlateValue, right: SlateValue, location: SlateLocation) -> SlateValue:
        """Implement + (numeric addition or string concatenation)."""
        if isinstance(left, SlateString) and isinstance(right, SlateString):
            return SlateString(left.value + right.value)

        if isinstance(left, SlateInteger) and isinstance(right, SlateInteger):
            return self._wrap_integer(left.value + right.value, "addition", location)

        if self._is_number(left) and self._is_number(right):
            return SlateFloat(float(left.to_python()) + float(right.to_python()))

        raise self._invalid_types("addition", left, right, location)

    def subtract(self, left: SlateValue, right: SlateValue, location: SlateLocation) -> SlateValue:
        """Implement - (numeric subtraction)."""
        if isinstance(left, SlateInteger) and isinstance(right, SlateInteger):
            return self._wrap_integer(left.value - right.value, "subtraction", location)

        if self._is_number(left) and self._is_number(right):
            return SlateFloat(float(left.to_python()) - float(right.to_python()))

        raise self._invalid_types("subtraction", left, right, location)

    def multiply(self, left: SlateValue, right: SlateValue, location: SlateLocation) -> SlateValue:
        """Implement * (numeric multiplication or string repetition)."""
        if isinstance(left, SlateString) and isinstance(right, SlateInteger):
            if right.value < 0:
                raise SlateEvalError(
                    message=f"{right.value} is not a non-negative integer",
                    location=location,
                    received=f"Repetition count: {right.value}",
                    expected="Non-negative integer count",
                    example='"ab" * 3 gives "ababab"'
                )

            if len(left.value) * right.value > STRING_MAX_LENGTH:
                raise SlateEvalError(
                    message="String repetition result is too long",
                    location=location,
                    received=f"Length {len(left.value)} repeated {right.value} times",
                    expected=f"Result of at most {STRING_MAX_LENGTH} characters"
                )

            return SlateString(left.value * right.value)

        if isinstance(left, SlateInteger) and isinstance(right, SlateInteger):
            return self._wrap_integer(left.value * right.value, "multiplication", location)

        if self._is_number(left) and self._is_number(right):
            return SlateFloat(float(left.to_python()) * float(right.to_python()))

        raise self._invalid_types("multiplication", left, right, location)

    def divide(self, left: SlateValue, right: SlateValue, location: SlateLocation) -> SlateValue:
        """
        Implement / (numeric division).

        Integer division truncates toward zero.  A zero divisor is an error for
        both integers and floats.
        """
        if not (self._is_number(left) and self._is_number(right)):
            raise self._invalid_types("division", left, right, location)

        if right.to_python() == 0:
            raise SlateEvalError(
                message="Division by zero",
                location=location,
                received=f"Divisor: {right.describe()}",
                expected="Non-zero divisor"
            )

        if isinstance(left, SlateInteger) and isinstance(right, SlateInteger):
            quotient = abs(left.value) // abs(right.value)
            if (left.value < 0) != (right.value < 0):
                quotient = -quotient

            return self._wrap_integer(quotient, "division", location)

        return SlateFloat(float(left.to_python()) / float(right.to_python()))

    def slice(
        self,
        subject: SlateValue,
        start: SlateValue | None,
        end: SlateValue | None,
        step: SlateValue | None,
        location: SlateLocation
    ) -> SlateValue:
        """
        Extract every step'th character from start up to (but excluding) end.

        Args:
            subject: The value to slice (only strings can be sliced)
            start: First index, defaulting to 0
            end: Index to stop before, defaulting to the string length
            step: Distance between indices, defaulting to 1; must be positive
            location: Location of the slice expression

        Returns:
            A new string value

        Raises:
            SlateTypeError: If the subject is not a string or a bound is not an integer
            SlateEvalError: If the step is not positive or an index falls outside the string
        """
        if not isinstance(subject, SlateString):
            raise SlateTypeError(
                message="Can only slice strings",
                location=location,
                received=f"Slice subject: {subject.type_name()}",
                expected="string"
            )

        bounds = [
            SlateInteger(0) if start is None else start,
            SlateInteger(subject.length()) if end is None else end,
            SlateInteger(1) if step is None else step,
        ]
        for name, bound in zip(("start", "end", "step"), bounds):
            if not isinstance(bound, SlateInteger):
                raise SlateTypeError(
                    message="Invalid types for slice",
                    location=location,
                    received=f"Slice {name}: {bound.type_name()}",
                    expected="Integer start, end and step"
                )

        start_index, end_index, step_size = (bound.to_python() for bound in bounds)

        if step_size == 0:
            raise SlateEvalError(message="Slice step cannot be 0", location=location)

        if step_size < 0:
            raise SlateEvalError(
                message=f"Slice step must be positive, got {step_size}",
                location=location,
                expected="Step of 1 or more"
            )

        text = subject.value
        result: List[str] = []
        i = start_index
        while i < end_index:
            if not 0 <= i < len(text):
                raise SlateEvalError(
                    message=f"Slice index out of range: {i} (string length: {len(text)})",
                    location=location,
                    expected=f"Indices between 0 and {len(text) - 1}"
                )

            result.append(text[i])
            i += step_size

        return SlateString(''.join(result))

    def _is_number(self, value: SlateValue) -> bool:
        """Check if a value is an integer or a float."""
        return isinstance(value, (SlateInteger, SlateFloat))

    def _wrap_integer(self, result: int, operation: str, location: SlateLocation) -> SlateInteger:
        """Wrap an integer result, rejecting anything outside the 64-bit range."""
        if not INTEGER_MIN <= result <= INTEGER_MAX:
            raise SlateEvalError(
                message=f"Integer overflow in {operation}",
                location=location,
                received=f"Result: {result}",
                expected=f"Integer between {INTEGER_MIN} and {INTEGER_MAX}"
            )

        return SlateInteger(result)

    def _invalid_types(
        self,
        operation: str,
        left: SlateValue,
        right: SlateValue,
        location: SlateLocation
    ) -> SlateTypeError:
        """Build the error for an unsupported operand combination."""
        return SlateTypeError(
            message=f"Invalid types for {operation}",
            location=location,
            received=f"{left.type_name()} and {right.type_name()}",
            context="Numbers combine with numbers; strings concatenate with + and repeat with * integer"
        )
