from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .format import QUOTED, VERBOSE, check_spec, format_error, quote
from .protocols import HasStack
from .stack import StackTrace, callers, format_stack_trace
from .walk import get_stack_tracer


@dataclass(slots=True, eq=False)
class ChainError(Exception):
    """Base for every node of an error chain.

    Nodes are never mutated once built; the wrapped cause is shared between
    wrappers and must stay read-only.
    """

    def __format__(self, spec: str) -> str:
        check_spec(spec, self)
        if spec == VERBOSE:
            return self.format_verbose()
        if spec == QUOTED:
            return quote(str(self))
        return str(self)

    def format_verbose(self) -> str:
        return str(self)


@dataclass(slots=True, eq=False)
class Fundamental(ChainError):
    """Leaf error: a message and the stack of the place it was created."""

    msg: str
    stack: StackTrace = field(repr=False, default_factory=StackTrace)

    def __str__(self) -> str:
        return self.msg

    def has_stack(self) -> bool:
        return True

    def stack_trace(self) -> StackTrace:
        return self.stack

    def format_verbose(self) -> str:
        return self.msg + format_stack_trace(self.stack, VERBOSE)


@dataclass(slots=True, eq=False)
class WithStack(ChainError):
    """Records a stack without changing the message of *error*."""

    error: BaseException
    stack: StackTrace = field(repr=False, default_factory=StackTrace)

    def __str__(self) -> str:
        return str(self.error)

    def cause(self) -> BaseException:
        return self.error

    def unwrap(self) -> BaseException:
        return self.error

    def has_stack(self) -> bool:
        return True

    def stack_trace(self) -> StackTrace:
        return self.stack

    def format_verbose(self) -> str:
        return format_error(self.error, VERBOSE) + format_stack_trace(
            self.stack, VERBOSE
        )


@dataclass(slots=True, eq=False)
class WithMessage(ChainError):
    """Prefixes the message of *error* without recording a stack."""

    error: BaseException
    msg: str

    def __str__(self) -> str:
        return f"{self.msg}: {self.error}"

    def cause(self) -> BaseException:
        return self.error

    def unwrap(self) -> BaseException:
        return self.error

    def has_stack(self) -> bool:
        return has_stack(self.error)

    def format_verbose(self) -> str:
        return f"{format_error(self.error, VERBOSE)}\n{self.msg}"


@dataclass(slots=True, eq=False)
class ChainLink(ChainError):
    """Displays *tail* as the continuation of *head*.

    The two errors need not be related by unwrapping; the link itself unwraps
    to *tail*.
    """

    head: BaseException
    tail: BaseException

    def __str__(self) -> str:
        return f"{self.tail}\n{self.head}"

    def __format__(self, spec: str) -> str:
        check_spec(spec, self)
        return f"{format_error(self.tail, spec)}\n{format_error(self.head, spec)}"

    def cause(self) -> BaseException:
        return self.tail

    def unwrap(self) -> BaseException:
        return self.tail

    def has_stack(self) -> bool:
        return has_stack(self.head) or has_stack(self.tail)

    def stack_trace(self) -> StackTrace:
        for side in (self.head, self.tail):
            tracer = get_stack_tracer(side)
            if tracer is not None:
                return tracer.stack_trace()
        return StackTrace()


def has_stack(err: BaseException | None) -> bool:
    """Return ``True`` if *err* already records a stack."""
    if isinstance(err, HasStack) and callable(err.has_stack):
        return err.has_stack()
    return False


def _interpolate(fmt: str, args: tuple[Any, ...]) -> str:
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError):
        return f"{fmt} (bad format args: {', '.join(map(repr, args))})"


def _fundamental(msg: str, skip: int) -> Fundamental:
    return Fundamental(msg, callers(skip + 1))


def _add_stack(err: BaseException | None, skip: int) -> BaseException | None:
    if err is None:
        return None
    if has_stack(err):
        return err
    return WithStack(err, callers(skip + 1))


def new(msg: str) -> Fundamental:
    """Return an error with *msg* and the stack of the caller."""
    return _fundamental(msg, 1)


def errorf(fmt: str, *args: Any) -> Fundamental:
    """Like :func:`new`, with ``%``-style interpolation of *args*.

    Arguments that do not fit *fmt* are appended to it instead of raising.
    """
    return _fundamental(_interpolate(fmt, args), 1)


def add_stack(err: BaseException | None) -> BaseException | None:
    """Record the caller's stack unless *err* already carries one."""
    return _add_stack(err, 1)


def with_stack(err: BaseException | None) -> WithStack | None:
    """Always record the caller's stack as a new layer around *err*."""
    if err is None:
        return None
    return WithStack(err, callers(1))


def suspend_stack(err: BaseException | None) -> BaseException | None:
    """Mark *err* as stack-carrying without capturing anything.

    Later :func:`add_stack` calls become no-ops for the result.
    """
    if err is None or has_stack(err):
        return err
    return WithStack(err, StackTrace())


def with_message(err: BaseException | None, msg: str) -> WithMessage | None:
    if err is None:
        return None
    return WithMessage(err, msg)


def with_messagef(err: BaseException | None, fmt: str, *args: Any) -> WithMessage | None:
    if err is None:
        return None
    return WithMessage(err, _interpolate(fmt, args))


def annotate(err: BaseException | None, msg: str) -> BaseException | None:
    """Prefix *err* with *msg* and make sure the result carries a stack."""
    if err is None:
        return None
    return _add_stack(WithMessage(err, msg), 1)


def annotatef(err: BaseException | None, fmt: str, *args: Any) -> BaseException | None:
    if err is None:
        return None
    return _add_stack(WithMessage(err, _interpolate(fmt, args)), 1)


def build_chain(
    head: BaseException | None, tail: BaseException | None
) -> BaseException | None:
    """Render *tail* below *head* as if it were its cause."""
    if head is None:
        return tail
    if tail is None:
        return head
    return ChainLink(head, tail)
