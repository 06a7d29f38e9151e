"""Ordered sets of types with set operations."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, TypeVar

R = TypeVar("R")


def _flatten(args: Iterable[Any]) -> Iterator[Any]:
    for arg in args:
        if isinstance(arg, TypeSet):
            yield from arg
        else:
            yield arg


class TypeSet:
    """An immutable, insertion-ordered set of types."""

    __slots__ = ("_types",)

    def __init__(self, *args: type) -> None:
        unique: list[Any] = []
        for kind in args:
            if kind not in unique:
                unique.append(kind)
        self._types: tuple[Any, ...] = tuple(unique)

    @property
    def size(self) -> int:
        return len(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._types)

    def __contains__(self, kind: object) -> bool:
        return kind in self._types

    def into(self, constructor: Callable[[tuple[Any, ...]], R]) -> R:
        """Pass the member types, as a tuple, to ``constructor``."""
        return constructor(self._types)

    def contains(self, *args: type) -> bool:
        """Whether every given type is a member; false when none is given."""
        return bool(args) and all(kind in self._types for kind in args)

    def equals(self, other: object) -> bool:
        """Whether ``other`` is a TypeSet with the same members, in any order."""
        if not isinstance(other, TypeSet):
            return False
        return len(other) == len(self) and all(kind in self._types for kind in other)

    def head(self) -> TypeSet:
        """A set holding only the first member, or an empty set."""
        return TypeSet(*self._types[:1])

    def tail(self) -> TypeSet:
        """A set holding every member but the first."""
        return TypeSet(*self._types[1:])

    def union(self, *args: type | TypeSet) -> TypeSet:
        """Members of this set followed by the new types among ``args``."""
        return TypeSet(*self._types, *_flatten(args))

    def intersection(self, *args: type | TypeSet) -> TypeSet:
        """The types among ``args`` that are members, in the order given."""
        return TypeSet(*(kind for kind in _flatten(args) if kind in self._types))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeSet):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(frozenset(self._types))

    def __repr__(self) -> str:
        names = ", ".join(getattr(kind, "__name__", repr(kind)) for kind in self._types)
        return f"TypeSet({names})"