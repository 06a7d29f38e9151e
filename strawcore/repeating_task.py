"""A background thread that calls a function over and over until stopped."""

from __future__ import annotations

import functools
import threading
from typing import Any, Callable


def _takes_argument(func: Callable[..., Any]) -> bool:
    """Whether calling ``func`` needs at least one positional argument."""
    target: Any = func
    if not hasattr(target, "__code__") and not isinstance(target, type):
        call = getattr(target, "__call__", None)
        if call is not None and hasattr(getattr(call, "__func__", None), "__code__"):
            target = call
    underlying = getattr(target, "__func__", target)
    code = getattr(underlying, "__code__", None)
    if code is None:
        return False
    skip = 1 if underlying is not target and getattr(target, "__self__", None) is not None else 0
    defaults = len(getattr(underlying, "__defaults__", None) or ())
    return code.co_argcount - skip - defaults > 0


class RepeatingTask:
    """Runs ``startup`` once, then ``function`` repeatedly, on its own thread.

    Either callable may take the task itself as its single argument. The task
    starts on construction. An exception raised on the worker thread ends the
    loop and is raised again by :meth:`stop`.
    """

    def __init__(self, function: Callable[..., Any],
                 startup: Callable[..., Any] | None = None) -> None:
        self._function = self._bind(function)
        self._startup = None if startup is None else self._bind(startup)
        self._should_run = threading.Event()
        self._thread: threading.Thread | None = None
        self._error: Exception | None = None
        self.start()

    def _bind(self, func: Callable[..., Any]) -> Callable[[], Any]:
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        if _takes_argument(func):
            return functools.partial(func, self)
        return func

    def is_running(self) -> bool:
        """Whether a worker thread has been started and not yet stopped."""
        return self._thread is not None

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("task is already running")
        self._should_run.set()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            if self._startup is not None:
                self._startup()
                self._startup = None
            while self._should_run.is_set():
                self._function()
        except Exception as exc:
            self._error = exc

    def stop(self) -> None:
        """Ask the loop to end and wait for it; called from the task itself it only asks."""
        thread = self._thread
        if thread is None:
            return
        self._should_run.clear()
        if thread is threading.current_thread():
            return
        thread.join()
        self._thread = None
        error, self._error = self._error, None
        if error is not None:
            raise error

    def __enter__(self) -> RepeatingTask:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __repr__(self) -> str:
        state = "running" if self.is_running() else "stopped"
        return f"RepeatingTask({state})"