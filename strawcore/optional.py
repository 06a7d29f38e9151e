"""An optional value container and integers that reserve one value to mean "empty"."""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_EMPTY: Any = object()


class EmptyOptionalError(ValueError):
    """Raised when the value of an empty Optional is requested."""


class NullType:
    """A type with no state; every instance is equal to every other."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NullType)

    def __hash__(self) -> int:
        return hash(NullType)

    def __repr__(self) -> str:
        return "NullType()"


@functools.total_ordering
class NullValue:
    """An integer in which one chosen value stands for "no value"."""

    __slots__ = ("null", "value")

    def __init__(self, null: int, value: int | None = None) -> None:
        self.null = int(null)
        self.value = self.null if value is None else int(value)

    def is_null(self) -> bool:
        """Whether the held integer is the reserved null value."""
        return self.value == self.null

    def __bool__(self) -> bool:
        return not self.is_null()

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def increment(self) -> NullValue:
        """Add one to the held integer in place and return self."""
        self.value += 1
        return self

    def decrement(self) -> NullValue:
        """Subtract one from the held integer in place and return self."""
        self.value -= 1
        return self

    @staticmethod
    def _raw(other: object) -> Any:
        if isinstance(other, NullValue):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value == raw

    def __lt__(self, other: object) -> bool:
        raw = self._raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value < raw

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"NullValue(null={self.null}, value={self.value})"


def non_zero(value: int = 0) -> NullValue:
    """A NullValue whose null is zero."""
    return NullValue(0, value)


def non_max(value: int | None = None, bits: int = 64) -> NullValue:
    """A NullValue whose null is the largest unsigned integer of the given width."""
    if bits <= 0:
        raise ValueError("bits must be positive")
    return NullValue((1 << bits) - 1, value)


class Optional(Generic[T]):
    """A container that holds either one value or nothing.

    ``None`` and a null :class:`NullValue` are treated as absent; a non-null
    NullValue is stored as its plain integer.
    """

    __slots__ = ("_value",)

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"Optional takes at most one value, got {len(args)}")
        self._value: Any = _EMPTY
        if args:
            self.emplace(args[0])

    # -- state -----------------------------------------------------------------

    def has_value(self) -> bool:
        return self._value is not _EMPTY

    def __bool__(self) -> bool:
        return self.has_value()

    def emplace(self, value: Any) -> None:
        """Replace the contents with ``value``."""
        if isinstance(value, NullValue):
            self._value = _EMPTY if value.is_null() else value.value
        elif value is None:
            self._value = _EMPTY
        else:
            self._value = value

    def reset(self) -> None:
        self._value = _EMPTY

    # -- access ----------------------------------------------------------------

    def value(self) -> T:
        """Return the held value without removing it."""
        if not self.has_value():
            raise EmptyOptionalError("Optional has no value")
        return self._value

    def unwrap(self) -> T:
        """Remove and return the held value, leaving this Optional empty."""
        result = self.value()
        self._value = _EMPTY
        return result

    def unwrap_or(self, default: Any) -> T:
        """Return the held value, or ``default`` when empty; self is left untouched."""
        return self._value if self.has_value() else default

    def value_or(self, default: Any) -> T:
        return self._value if self.has_value() else default

    # -- monadic operations ----------------------------------------------------

    def map(self, func: Callable[[T], U]) -> Optional[U]:
        if not self.has_value():
            return Optional()
        return Optional(func(self._value))

    def and_then(self, func: Callable[[T], Optional[U]]) -> Optional[U]:
        if not self.has_value():
            return Optional()
        result = func(self._value)
        if not isinstance(result, Optional):
            raise TypeError("and_then requires a function returning an Optional")
        return result

    def flatten(self) -> Optional[Any]:
        """Turn an Optional holding an Optional into the inner Optional."""
        if not self.has_value():
            return Optional()
        if not isinstance(self._value, Optional):
            raise TypeError("flatten requires an Optional holding an Optional")
        return self._value

    def cast(self, target: Callable[[T], U]) -> Optional[U]:
        """Convert the held value with ``target`` (usually a type)."""
        if not self.has_value():
            return Optional()
        return Optional(target(self._value))

    # -- comparison ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Optional):
            if self.has_value() and other.has_value():
                return self._value == other._value
            return self.has_value() == other.has_value()
        if not self.has_value():
            return False
        return self._value == other

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def _order(self, other: object, op: Callable[[Any, Any], bool],
               empty_vs_value: bool, value_vs_empty: bool, both_empty: bool) -> bool:
        if isinstance(other, Optional):
            if self.has_value() and other.has_value():
                return op(self._value, other._value)
            if self.has_value():
                return value_vs_empty
            if other.has_value():
                return empty_vs_value
            return both_empty
        if self.has_value():
            return op(self._value, other)
        return empty_vs_value

    def __lt__(self, other: object) -> bool:
        return self._order(other, lambda a, b: a < b, True, False, False)

    def __le__(self, other: object) -> bool:
        return self._order(other, lambda a, b: a <= b, True, False, True)

    def __gt__(self, other: object) -> bool:
        return self._order(other, lambda a, b: a > b, False, True, False)

    def __ge__(self, other: object) -> bool:
        if isinstance(other, Optional):
            return self._order(other, lambda a, b: a >= b, False, True, True)
        return self._order(other, lambda a, b: a >= b, False, True, False)

    def __repr__(self) -> str:
        if self.has_value():
            return f"Optional({self._value!r})"
        return "Optional()"