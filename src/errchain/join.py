from __future__ import annotations

from collections.abc import Sequence

from .format import QUOTED, VERBOSE, check_spec, format_error

JOIN_MESSAGE = "joined errors"


class BaseJoinError(BaseExceptionGroup):
    """Aggregate of sibling errors built by :func:`join`.

    ``exceptions`` holds a private copy of the members, in order. Aggregates
    whose members are all ``Exception`` instances are :class:`JoinError`.
    """

    def __new__(cls, errors: Sequence[BaseException]) -> BaseJoinError:
        return super().__new__(cls, JOIN_MESSAGE, errors)

    def __init__(self, errors: Sequence[BaseException]) -> None:
        super().__init__(JOIN_MESSAGE, errors)

    def __str__(self) -> str:
        return "\n".join(str(err) for err in self.exceptions)

    def __format__(self, spec: str) -> str:
        check_spec(spec, self)
        if spec in (VERBOSE, QUOTED):
            return "\n".join(format_error(err, spec) for err in self.exceptions)
        return str(self)

    def errors(self) -> list[BaseException]:
        return list(self.exceptions)

    def derive(self, excs: Sequence[BaseException]) -> BaseJoinError:
        return _join_type(excs)(excs)


class JoinError(BaseJoinError, ExceptionGroup):
    """A :class:`BaseJoinError` that can be caught with ``except Exception``."""


def _join_type(members: Sequence[BaseException]) -> type[BaseJoinError]:
    if all(isinstance(err, Exception) for err in members):
        return JoinError
    return BaseJoinError


def join(*errs: BaseException | None) -> BaseJoinError | None:
    """Combine *errs* into one error, dropping ``None`` members.

    Returns ``None`` when nothing is left. A single member is still wrapped.
    """
    members = [err for err in errs if err is not None]
    if not members:
        return None
    return _join_type(members)(members)
