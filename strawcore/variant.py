"""A tagged union over a fixed, ordered list of types."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from strawcore.optional import Optional

R = TypeVar("R")


class Variant:
    """Holds one value whose type is one of a fixed tuple of alternatives.

    The alternative is chosen by exact type first; failing that, the first
    alternative the value is an instance of is used.
    """

    __slots__ = ("_types", "_index", "_value")

    def __init__(self, types: Iterable[type], value: Any) -> None:
        alternatives = tuple(types)
        if not alternatives:
            raise ValueError("a Variant needs at least one alternative type")
        for kind in alternatives:
            if not isinstance(kind, type):
                raise TypeError(f"{kind!r} is not a type")
        if len(set(alternatives)) != len(alternatives):
            raise ValueError("Variant alternatives must be distinct")
        self._types = alternatives
        self._index = self._select(alternatives, value)
        self._value = value

    @staticmethod
    def _select(types: tuple[type, ...], value: Any) -> int:
        exact = type(value)
        if exact in types:
            return types.index(exact)
        for position, kind in enumerate(types):
            if isinstance(value, kind):
                return position
        names = ", ".join(kind.__name__ for kind in types)
        raise TypeError(f"{exact.__name__} is not one of the alternatives ({names})")

    @property
    def types(self) -> tuple[type, ...]:
        return self._types

    @property
    def index(self) -> int:
        """Position of the held value's alternative in ``types``."""
        return self._index

    @property
    def value(self) -> Any:
        return self._value

    def is_type(self, kind: type) -> bool:
        """Whether the held alternative is exactly ``kind``."""
        return kind in self._types and self._types.index(kind) == self._index

    def take(self, kind: type) -> Optional[Any]:
        """The held value wrapped in an Optional if it is of ``kind``, else an empty Optional."""
        if self.is_type(kind):
            return Optional(self._value)
        return Optional()

    def ref(self, kind: type) -> Any:
        """The held value, which must be of alternative ``kind``."""
        if not self.is_type(kind):
            held = self._types[self._index].__name__
            raise TypeError(f"Variant holds {held}, not {getattr(kind, '__name__', kind)!s}")
        return self._value

    def visit(self, func: Callable[[Any], R]) -> R:
        """Call ``func`` with the held value and return its result."""
        return func(self._value)

    def union(self, *args: type | Variant) -> Variant:
        """A Variant with further alternatives appended, holding the same value.

        Each argument is either a type or a Variant whose alternatives are added.
        """
        extended = list(self._types)
        for arg in args:
            additions = arg.types if isinstance(arg, Variant) else (arg,)
            for kind in additions:
                if kind not in extended:
                    extended.append(kind)
        return Variant(extended, self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Variant):
            return bool(self._value == other._value)
        try:
            return bool(self._value == other)
        except TypeError:
            return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = ", ".join(kind.__name__ for kind in self._types)
        return f"Variant[{names}]({self._value!r})"