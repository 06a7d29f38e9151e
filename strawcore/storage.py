"""Holders for values built after the holder itself, and a copy-on-write wrapper."""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_EMPTY: object = object()


class StorageError(RuntimeError):
    """Raised when a storage slot is used in a state that does not allow it."""


class Delayed(Generic[T]):
    """A slot whose value is built later by calling ``factory``.

    Constructing again replaces the value; destructing an empty slot does nothing.
    """

    __slots__ = ("_factory", "_payload")

    def __init__(self, factory: Callable[..., T]) -> None:
        if not callable(factory):
            raise TypeError(f"{factory!r} is not callable")
        self._factory = factory
        self._payload: object = _EMPTY

    def construct(self, *args: Any, **kwargs: Any) -> None:
        self._payload = self._factory(*args, **kwargs)

    def destruct(self) -> None:
        self._payload = _EMPTY

    def get(self) -> T:
        if self._payload is _EMPTY:
            raise StorageError("Delayed value has not been constructed")
        return self._payload  # type: ignore[return-value]


class Uninitialised(Generic[T]):
    """A slot that must be constructed exactly once before each destruct."""

    __slots__ = ("_factory", "_payload")

    def __init__(self, factory: Callable[..., T]) -> None:
        if not callable(factory):
            raise TypeError(f"{factory!r} is not callable")
        self._factory = factory
        self._payload: object = _EMPTY

    def is_initialised(self) -> bool:
        return self._payload is not _EMPTY

    def construct(self, *args: Any, **kwargs: Any) -> None:
        if self.is_initialised():
            raise StorageError("Uninitialised slot is already constructed")
        self._payload = self._factory(*args, **kwargs)

    def destruct(self) -> None:
        if not self.is_initialised():
            raise StorageError("Uninitialised slot is not constructed")
        self._payload = _EMPTY

    def get(self) -> T:
        if not self.is_initialised():
            raise StorageError("Uninitialised slot is not constructed")
        return self._payload  # type: ignore[return-value]


class CopyOnWrite(Generic[T]):
    """Shares a value between copies; asking for a mutable view gives this holder its own copy."""

    __slots__ = ("_payload",)

    def __init__(self, value: T) -> None:
        self._payload = value

    def get(self) -> T:
        """The shared value; do not modify it."""
        return self._payload

    def get_mutable(self) -> T:
        """Replace the value with a private deep copy and return it."""
        self._payload = copy.deepcopy(self._payload)
        return self._payload

    def __copy__(self) -> CopyOnWrite[T]:
        return CopyOnWrite(self._payload)

    def __repr__(self) -> str:
        return f"CopyOnWrite({self._payload!r})"