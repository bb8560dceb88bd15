"""Capabilities an error may expose to the traversal and rendering code."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .stack import StackTrace


@runtime_checkable
class Causer(Protocol):
    def cause(self) -> BaseException | None:  # pragma: no cover - protocol definition
        """Return the error directly wrapped by this one."""


@runtime_checkable
class Unwrapper(Protocol):
    def unwrap(self) -> BaseException | None:  # pragma: no cover - protocol definition
        """Return the error directly wrapped by this one."""


@runtime_checkable
class ErrorGroup(Protocol):
    """Several sibling errors that do not form a chain.

    This happens for example when executing multiple operations in parallel.
    """

    def errors(self) -> Sequence[BaseException]: ...


@runtime_checkable
class StackTracer(Protocol):
    def stack_trace(self) -> StackTrace: ...


@runtime_checkable
class HasStack(Protocol):
    def has_stack(self) -> bool:  # pragma: no cover - protocol definition
        """Return ``True`` if a stack was already recorded for this error."""
