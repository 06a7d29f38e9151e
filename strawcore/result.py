"""A value that is either a success payload or an error."""

from __future__ import annotations

from typing import Any, Callable

from strawcore.optional import Optional


class ResultError(ValueError):
    """Raised when the wrong side of a Result is accessed."""


class Result:
    """Either an ok value or an error; build one with :meth:`ok` or :meth:`err`."""

    __slots__ = ("_is_ok", "_payload")

    def __init__(self) -> None:
        raise TypeError("construct a Result with Result.ok(...) or Result.err(...)")

    @classmethod
    def _make(cls, is_ok: bool, payload: Any) -> Result:
        result = object.__new__(cls)
        result._is_ok = is_ok
        result._payload = payload
        return result

    @classmethod
    def ok(cls, value: Any = None) -> Result:
        """A successful Result; with no value it stands for plain success."""
        return cls._make(True, value)

    @classmethod
    def err(cls, error: Any) -> Result:
        return cls._make(False, error)

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    def __bool__(self) -> bool:
        return self._is_ok

    def value(self) -> Any:
        """The ok value; raises ResultError when this is an error."""
        if not self._is_ok:
            raise ResultError(f"Result holds an error: {self._payload!r}")
        return self._payload

    def unwrap(self) -> Any:
        return self.value()

    def unwrap_or(self, default: Any) -> Any:
        return self._payload if self._is_ok else default

    def error(self) -> Any:
        """The error; raises ResultError when this is ok."""
        if self._is_ok:
            raise ResultError("Result holds no error")
        return self._payload

    def into_optional(self) -> Optional[Any]:
        return Optional(self._payload) if self._is_ok else Optional()

    def map(self, func: Callable[[Any], Any]) -> Result:
        """Apply ``func`` to an ok value; an error passes through unchanged."""
        if self._is_ok:
            return Result.ok(func(self._payload))
        return Result.err(self._payload)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Result):
            return self._is_ok == other._is_ok and bool(self._payload == other._payload)
        try:
            return bool(self._payload == other)
        except TypeError:
            return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = "ok" if self._is_ok else "err"
        return f"Result.{kind}({self._payload!r})"