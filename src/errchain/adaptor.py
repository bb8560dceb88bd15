"""Helpers kept for code written against the juju-style errors API."""

from __future__ import annotations

from typing import Any

from loguru import logger

from .errors import Fundamental, _add_stack, _fundamental, _interpolate
from .format import VERBOSE, format_error


def trace(err: BaseException | None) -> BaseException | None:
    """Annotate *err* with the caller's stack unless it already has one."""
    return _add_stack(err, 1)


def error_stack(err: BaseException | None) -> str:
    """Return the verbose rendering of *err*, ``""`` for ``None``."""
    if err is None:
        return ""
    return format_error(err, VERBOSE)


def wrap(old_err: BaseException | None, new_err: BaseException | None) -> BaseException | None:
    """Replace *old_err* by *new_err*; the old stack still goes to the log."""
    logger.opt(depth=1).error("{}", error_stack(old_err))
    return _add_stack(new_err, 1)


def not_foundf(fmt: str, *args: Any) -> Fundamental:
    return _fundamental(_interpolate(fmt + " not found", args), 1)


def bad_requestf(fmt: str, *args: Any) -> Fundamental:
    return _fundamental(_interpolate(fmt + " bad request", args), 1)


def not_supportedf(fmt: str, *args: Any) -> Fundamental:
    return _fundamental(_interpolate(fmt + " not supported", args), 1)
