"""Checked references that notice when the object they point to is released or moved."""

from __future__ import annotations

import copy
import weakref
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound="EnableReflexivePointer")


class DanglingPointerError(RuntimeError):
    """Raised when a ReflexivePointer whose target is gone is dereferenced."""


class _Cell:
    """Shared slot through which every pointer reaches its target."""

    __slots__ = ("ref",)

    def __init__(self, target: Any) -> None:
        self.ref: weakref.ref[Any] | None = weakref.ref(target)

    def load(self) -> Any:
        return None if self.ref is None else self.ref()


class EnableReflexivePointer:
    """Base class for objects that ReflexivePointers can be made to.

    A copy of such an object gets its own, fresh set of pointers.
    """

    def __init__(self) -> None:
        self._reflexive_cell = _Cell(self)

    def reflexive_pointer(self: T) -> ReflexivePointer[T]:
        """A new pointer to this object."""
        return ReflexivePointer(self)

    def transfer_to(self, other: EnableReflexivePointer) -> None:
        """Hand every pointer to this object over to ``other``.

        Pointers made before the call now reach ``other``; this object starts
        over with no pointers to it.
        """
        if other is self:
            return
        if not isinstance(other, EnableReflexivePointer):
            raise TypeError(f"{other!r} cannot receive reflexive pointers")
        cell = self._reflexive_cell
        cell.ref = weakref.ref(other)
        other._reflexive_cell = cell
        self._reflexive_cell = _Cell(self)

    def release(self) -> None:
        """Invalidate every pointer made to this object so far."""
        self._reflexive_cell.ref = None
        self._reflexive_cell = _Cell(self)

    def __enter__(self: T) -> T:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __copy__(self: T) -> T:
        duplicate = type(self).__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        duplicate._reflexive_cell = _Cell(duplicate)
        return duplicate

    def __deepcopy__(self: T, memo: dict[int, Any]) -> T:
        duplicate = type(self).__new__(type(self))
        memo[id(self)] = duplicate
        for name, value in self.__dict__.items():
            if name != "_reflexive_cell":
                duplicate.__dict__[name] = copy.deepcopy(value, memo)
        duplicate._reflexive_cell = _Cell(duplicate)
        return duplicate


class ReflexivePointer(Generic[T]):
    """A non-owning reference that becomes invalid when its target is released or collected."""

    __slots__ = ("_cell",)

    def __init__(self, target: T | None = None) -> None:
        if target is None:
            self._cell: _Cell | None = None
        elif isinstance(target, EnableReflexivePointer):
            self._cell = target._reflexive_cell
        else:
            raise TypeError(f"{type(target).__name__} does not support reflexive pointers")

    def is_valid(self) -> bool:
        return self._cell is not None and self._cell.load() is not None

    def __bool__(self) -> bool:
        return self.is_valid()

    def get(self) -> T | None:
        """The target, or None when it is gone."""
        return None if self._cell is None else self._cell.load()

    def deref(self) -> T:
        """The target; raises DanglingPointerError when it is gone."""
        target = self.get()
        if target is None:
            raise DanglingPointerError("the pointed-to object no longer exists")
        return target

    def __eq__(self, other: object) -> bool:
        if other is None:
            return self._cell is None
        if not isinstance(other, ReflexivePointer):
            return NotImplemented
        return self._cell is other._cell

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return id(self._cell)

    def __repr__(self) -> str:
        target = self.get()
        if target is None:
            return "ReflexivePointer(<invalid>)"
        return f"ReflexivePointer({type(target).__name__})"