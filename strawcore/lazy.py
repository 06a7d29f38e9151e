"""Values computed on first use, once or until invalidated."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET: object = object()


class Lazy(Generic[T]):
    """Calls its initialiser on the first ``get`` and keeps the result for good."""

    __slots__ = ("_initialiser", "_value")

    def __init__(self, initialiser: Callable[[], T]) -> None:
        if not callable(initialiser):
            raise TypeError(f"{initialiser!r} is not callable")
        self._initialiser: Callable[[], T] | None = initialiser
        self._value: object = _UNSET

    @property
    def initialised(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        if self._value is _UNSET:
            assert self._initialiser is not None
            self._value = self._initialiser()
            self._initialiser = None
        return self._value  # type: ignore[return-value]

    def __copy__(self) -> Lazy[T]:
        duplicate = object.__new__(Lazy)
        duplicate._initialiser = self._initialiser
        duplicate._value = self._value
        return duplicate

    def __repr__(self) -> str:
        if self.initialised:
            return f"Lazy({self._value!r})"
        return "Lazy(<pending>)"


class DynamicValue(Generic[T]):
    """Caches the result of its initialiser until :meth:`invalidate` is called."""

    __slots__ = ("_initialiser", "_value")

    def __init__(self, initialiser: Callable[[], T]) -> None:
        if not callable(initialiser):
            raise TypeError(f"{initialiser!r} is not callable")
        self._initialiser = initialiser
        self._value: object = _UNSET

    def get(self) -> T:
        if self._value is _UNSET:
            self._value = self._initialiser()
        return self._value  # type: ignore[return-value]

    def invalidate(self) -> None:
        """Drop the cached value so the next ``get`` recomputes it."""
        self._value = _UNSET

    def __repr__(self) -> str:
        if self._value is _UNSET:
            return "DynamicValue(<stale>)"
        return f"DynamicValue({self._value!r})"