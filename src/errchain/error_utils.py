from __future__ import annotations

import asyncio
import functools
import inspect
import traceback
from collections.abc import Callable
from typing import Any, NoReturn, ParamSpec, TypeVar

from loguru import logger

from .adaptor import error_stack
from .errors import _add_stack, annotate

P = ParamSpec("P")
R = TypeVar("R")


def _format_tail(exc: BaseException, *, limit: int = 6) -> str:
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(tb[-limit:])


def log_error(err: BaseException | None) -> None:
    """Log *err* with its full chain rendering; ``None`` is ignored.

    Errors without a stack get the stack of the caller.
    """
    if err is not None:
        logger.opt(depth=1).error(
            "encountered error: {}", error_stack(_add_stack(err, 1))
        )


def call(fn: Callable[P, Any], *args: P.args, **kwargs: P.kwargs) -> Exception | None:
    """Run *fn* and log instead of propagating the error it raises.

    The error is returned so callers can still inspect it.
    """
    try:
        fn(*args, **kwargs)
    except Exception as exc:
        err = _add_stack(exc, 1)
        logger.opt(depth=1).error("function call errored: {}", error_stack(err))
        return exc
    return None


def must_nil(err: BaseException | None, *closers: Callable[[], Any]) -> None:
    """Run *closers* and exit the process if *err* is set."""
    if err is None:
        return
    for close in closers:
        close()
    logger.opt(depth=1).critical("unexpected error: {}", error_stack(err))
    raise SystemExit(1)


def _log_and_annotate(exc: Exception, message: str) -> NoReturn:
    logger.opt(exception=exc).error("{}: {}", message, _format_tail(exc))
    raise annotate(exc, message) from exc  # type: ignore[misc]


def wrap_exceptions(message: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to log a short traceback and re-raise errors annotated with *message*."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    _log_and_annotate(exc, message)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                _log_and_annotate(exc, message)

        return sync_wrapper  # type: ignore[return-value]

    return decorator
