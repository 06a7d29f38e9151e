"""A callable that dispatches to one of several functions by argument types."""

from __future__ import annotations

from typing import Any, Callable

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08
_BUILTIN_TYPES: dict[str, type] = {
    kind.__name__: kind
    for kind in (
        bool, int, float, complex, str, bytes, bytearray, memoryview,
        list, tuple, dict, set, frozenset, range, slice, object, type,
        BaseException, Exception, ValueError, TypeError, KeyError,
        IndexError, LookupError, ArithmeticError, RuntimeError,
    )
}


def _resolve(annotation: Any, namespace: dict[str, Any]) -> type | None:
    if isinstance(annotation, str):
        annotation = namespace.get(annotation, _BUILTIN_TYPES.get(annotation))
    return annotation if isinstance(annotation, type) else None


def _code_target(function: Callable[..., Any]) -> tuple[Any, int] | None:
    """The plain function behind a callable and how many leading parameters are pre-bound."""
    target: Any = function
    if not hasattr(target, "__code__") and not isinstance(target, type):
        call = getattr(target, "__call__", None)
        if call is not None and hasattr(getattr(call, "__func__", None), "__code__"):
            target = call
    underlying = getattr(target, "__func__", target)
    if getattr(underlying, "__code__", None) is None:
        return None
    skip = 1 if underlying is not target and getattr(target, "__self__", None) is not None else 0
    return underlying, skip


class _Layout:
    """The parameter shape and annotated types of a plain function."""

    __slots__ = ("positional", "positional_only", "keyword_only", "varargs",
                 "varkw", "required_positional", "required_keyword", "hints")

    def __init__(self, func: Any, skip: int) -> None:
        code = func.__code__
        names = code.co_varnames
        argcount = code.co_argcount
        kwonly = code.co_kwonlyargcount
        defaults = func.__defaults__ or ()
        kwdefaults = func.__kwdefaults__ or {}

        self.positional: tuple[str, ...] = names[skip:argcount]
        self.positional_only = max(0, code.co_posonlyargcount - skip)
        self.keyword_only: tuple[str, ...] = names[argcount:argcount + kwonly]
        index = argcount + kwonly
        self.varargs: str | None = None
        if code.co_flags & _CO_VARARGS:
            self.varargs = names[index]
            index += 1
        self.varkw: str | None = names[index] if code.co_flags & _CO_VARKEYWORDS else None
        self.required_positional = self.positional[:max(0, len(self.positional) - len(defaults))]
        self.required_keyword = [name for name in self.keyword_only if name not in kwdefaults]

        namespace = getattr(func, "__globals__", {})
        annotations = getattr(func, "__annotations__", None) or {}
        self.hints: dict[str, type] = {}
        for name, annotation in annotations.items():
            resolved = _resolve(annotation, namespace)
            if resolved is not None:
                self.hints[name] = resolved


class _Candidate:
    __slots__ = ("function", "layout")

    def __init__(self, function: Callable[..., Any]) -> None:
        self.function = function
        found = _code_target(function)
        self.layout = None if found is None else _Layout(*found)

    def _check(self, name: str | None, values: Any) -> int | None:
        annotation = self.layout.hints.get(name) if name is not None else None
        if annotation is None:
            return 0
        total = 0
        for item in values:
            if not isinstance(item, annotation):
                return None
            if type(item) is annotation:
                total += 1
        return total

    def score(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> int | None:
        """How well the arguments fit: None if they do not fit at all."""
        layout = self.layout
        if layout is None:
            return 0
        if len(args) > len(layout.positional) and layout.varargs is None:
            return None

        bound = dict(zip(layout.positional, args))
        extra_args = args[len(layout.positional):]
        extra_kwargs: dict[str, Any] = {}
        named = layout.positional[layout.positional_only:]
        for key, value in kwargs.items():
            if key in bound:
                return None
            if key in named or key in layout.keyword_only:
                bound[key] = value
            elif layout.varkw is not None:
                extra_kwargs[key] = value
            else:
                return None

        if any(name not in bound for name in layout.required_positional):
            return None
        if any(name not in bound for name in layout.required_keyword):
            return None

        total = 0
        groups = [(name, [value]) for name, value in bound.items()]
        groups.append((layout.varargs, extra_args))
        groups.append((layout.varkw, list(extra_kwargs.values())))
        for name, values in groups:
            fit = self._check(name, values)
            if fit is None:
                return None
            total += fit
        return total


class Overload:
    """Combine functions into one callable.

    A call goes to the function whose signature accepts the arguments and
    whose annotated parameter types they satisfy; when several fit, the one
    with most exact type matches wins, then the earliest given.
    """

    __slots__ = ("_candidates",)

    def __init__(self, *args: Callable[..., Any]) -> None:
        if not args:
            raise TypeError("Overload needs at least one function")
        for function in args:
            if not callable(function):
                raise TypeError(f"{function!r} is not callable")
        self._candidates = [_Candidate(function) for function in args]

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        best: _Candidate | None = None
        best_score = -1
        for candidate in self._candidates:
            fit = candidate.score(args, kwargs)
            if fit is not None and fit > best_score:
                best, best_score = candidate, fit
        if best is None:
            kinds = ", ".join(type(arg).__name__ for arg in args)
            raise TypeError(f"no overload accepts arguments ({kinds})")
        return best.function(*args, **kwargs)

    def __repr__(self) -> str:
        names = ", ".join(getattr(c.function, "__name__", repr(c.function)) for c in self._candidates)
        return f"Overload({names})"