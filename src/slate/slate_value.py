"""Slate Value hierarchy - immutable runtime value types.

Values do not carry source locations; operations that can fail take the
location of the expression being evaluated so errors stay attributable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Tuple

from slate.slate_error import SlateEvalError


# Integers are signed 64-bit
INTEGER_MIN = -(2 ** 63)
INTEGER_MAX = 2 ** 63 - 1

# Longest string an operation may build, in characters
STRING_MAX_LENGTH = 2 ** 30


class SlateValue(ABC):
    """
    Abstract base class for all Slate runtime values.

    All values are immutable.
    """

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to Python value for operations."""

    @abstractmethod
    def type_name(self) -> str:
        """Return Slate type name for error messages."""

    @abstractmethod
    def describe(self) -> str:
        """Describe the value the way it would be displayed to a Slate user."""

    @staticmethod
    def from_python(value: Any) -> 'SlateValue':
        """
        Wrap a Python scalar in the matching Slate value.

        Args:
            value: A bool, int, float, str or None

        Returns:
            The equivalent Slate value

        Raises:
            SlateEvalError: If the Python value has no Slate equivalent
        """
        # bool is a subclass of int so it has to be checked first
        if isinstance(value, bool):
            return SlateBoolean(value)

        if isinstance(value, int):
            return SlateInteger(value)

        if isinstance(value, float):
            return SlateFloat(value)

        if isinstance(value, str):
            return SlateString(value)

        if value is None:
            return SLATE_NOTHING

        raise SlateEvalError(f"Cannot convert Python {type(value).__name__} to a Slate value")


@dataclass(frozen=True)
class SlateInteger(SlateValue):
    """Represents signed 64-bit integer values."""
    value: int

    def __post_init__(self) -> None:
        if not INTEGER_MIN <= self.value <= INTEGER_MAX:
            raise SlateEvalError(
                f"Integer overflow: {self.value} does not fit in a signed 64-bit integer",
                expected=f"Integer between {INTEGER_MIN} and {INTEGER_MAX}"
            )

    def to_python(self) -> int:
        return self.value

    def type_name(self) -> str:
        return "integer"

    def describe(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SlateFloat(SlateValue):
    """Represents 64-bit floating-point values."""
    value: float

    def to_python(self) -> float:
        return self.value

    def type_name(self) -> str:
        return "float"

    def describe(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class SlateString(SlateValue):
    """Represents string values."""
    value: str

    def to_python(self) -> str:
        return self.value

    def type_name(self) -> str:
        return "string"

    def describe(self) -> str:
        return f'"{self.value}"'

    def length(self) -> int:
        """Return the number of characters in the string."""
        return len(self.value)


@dataclass(frozen=True)
class SlateBoolean(SlateValue):
    """Represents boolean values."""
    value: bool

    def to_python(self) -> bool:
        return self.value

    def type_name(self) -> str:
        return "boolean"

    def describe(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class SlateBuiltinFunction(SlateValue):
    """
    Represents a host-provided function.

    Only the name is held; the evaluator looks the implementation up by name.
    """
    name: str

    def to_python(self) -> str:
        return self.name

    def type_name(self) -> str:
        return "builtin-function"

    def describe(self) -> str:
        return f"<builtin {self.name}>"


@dataclass(frozen=True, eq=False)
class SlateFunction(SlateValue):
    """
    Represents a user-defined function (closure).

    The body and the closure scope are held by reference.  Every function created
    in the same lexical environment shares that one scope object, and the scope
    lives as long as any function or call frame still refers to it.  Nothing here
    mutates the scope.

    Functions compare equal only when they share the same body and the same scope.
    """
    body: Any  # AST node, owned by the parser
    parameters: Tuple[str, ...] = ()
    closure_scope: Any = field(default=None, repr=False)  # Scope, owned by the evaluator

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlateFunction):
            return False

        return (self.body is other.body and
                self.closure_scope is other.closure_scope and
                self.parameters == other.parameters)

    def __hash__(self) -> int:
        return hash((id(self.body), id(self.closure_scope), self.parameters))

    def to_python(self) -> 'SlateFunction':
        """Functions return themselves as Python values."""
        return self

    def type_name(self) -> str:
        return "function"

    def describe(self) -> str:
        return f"<fn ({', '.join(self.parameters)})>"


@dataclass(frozen=True)
class SlateNothing(SlateValue):
    """Represents the absence of a value."""

    def to_python(self) -> None:
        return None

    def type_name(self) -> str:
        return "nothing"

    def describe(self) -> str:
        return "nothing"


# Module-level singleton - there is only one nothing value.
SLATE_NOTHING = SlateNothing()
