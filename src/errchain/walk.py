"""Traversal over cause chains and error groups."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .protocols import Causer, ErrorGroup, HasStack, StackTracer, Unwrapper

Visitor = Callable[[BaseException], bool]


def unwrap(err: BaseException | None) -> BaseException | None:
    """Return the error directly wrapped by *err*, or ``None``.

    ``cause()`` and ``unwrap()`` methods are honoured first; other exceptions
    fall back to the ``raise ... from`` cause.
    """
    if err is None:
        return None
    for capability, attr in ((Causer, "cause"), (Unwrapper, "unwrap")):
        if isinstance(err, capability) and callable(getattr(err, attr)):
            inner = getattr(err, attr)()
            # multi-error unwrap is not a single cause
            return inner if isinstance(inner, BaseException) else None
    return err.__cause__


def cause(err: BaseException | None) -> BaseException | None:
    """Return the innermost error of *err*'s chain."""
    while (inner := unwrap(err)) is not None:
        err = inner
    return err


def find(
    err: BaseException | None, predicate: Callable[[BaseException], bool]
) -> BaseException | None:
    """Return the first error of the linear chain satisfying *predicate*.

    Error groups are not descended into, see :func:`walk_deep` for that.
    """
    while err is not None:
        if predicate(err):
            return err
        err = unwrap(err)
    return None


def group_errors(err: BaseException | None) -> Sequence[BaseException]:
    if isinstance(err, ErrorGroup) and callable(err.errors):
        return err.errors()
    if isinstance(err, BaseExceptionGroup):
        return err.exceptions
    return ()


def walk_deep(err: BaseException | None, visitor: Visitor) -> bool:
    """Depth-first traversal of all errors reachable from *err*.

    The cause chain is followed first. Afterwards the siblings of every error
    group found on that chain, outermost group first, are walked the same
    way. *visitor* returns ``True`` to end the traversal early, in which case
    ``True`` is returned.
    """
    chain: list[BaseException] = []
    node = err
    while node is not None:
        if visitor(node):
            return True
        chain.append(node)
        node = unwrap(node)

    for node in chain:
        for sibling in group_errors(node):
            if walk_deep(sibling, visitor):
                return True
    return False


def get_stack_tracer(err: BaseException | None) -> StackTracer | None:
    """Return the outermost error in *err* that carries a stack trace.

    Tracers reporting ``has_stack() is False`` are skipped.
    """
    found: list[StackTracer] = []

    def visit(node: BaseException) -> bool:
        if isinstance(node, StackTracer) and (
            not isinstance(node, HasStack) or node.has_stack()
        ):
            found.append(node)
            return True
        return False

    walk_deep(err, visit)
    return found[0] if found else None
