"""Error chains with call-stack provenance."""

from .adaptor import bad_requestf, error_stack, not_foundf, not_supportedf, trace, wrap
from .errors import (
    ChainError,
    ChainLink,
    Fundamental,
    WithMessage,
    WithStack,
    add_stack,
    annotate,
    annotatef,
    build_chain,
    errorf,
    has_stack,
    new,
    suspend_stack,
    with_message,
    with_messagef,
    with_stack,
)
from .format import format_error
from .join import BaseJoinError, JoinError, join
from .protocols import Causer, ErrorGroup, HasStack, StackTracer, Unwrapper
from .redact import (
    RedactMode,
    get_redact_mode,
    need_redact,
    redact_error_args,
    redact_key,
    redact_key_bytes,
    set_redact_mode,
)
from .stack import Frame, StackTrace, callers, format_stack_trace
from .walk import cause, find, get_stack_tracer, group_errors, unwrap, walk_deep

__all__ = [
    "BaseJoinError",
    "Causer",
    "ChainError",
    "ChainLink",
    "ErrorGroup",
    "Frame",
    "Fundamental",
    "HasStack",
    "JoinError",
    "RedactMode",
    "StackTrace",
    "StackTracer",
    "Unwrapper",
    "WithMessage",
    "WithStack",
    "add_stack",
    "annotate",
    "annotatef",
    "bad_requestf",
    "build_chain",
    "callers",
    "cause",
    "error_stack",
    "errorf",
    "find",
    "format_error",
    "format_stack_trace",
    "get_redact_mode",
    "get_stack_tracer",
    "group_errors",
    "has_stack",
    "join",
    "need_redact",
    "new",
    "not_foundf",
    "not_supportedf",
    "redact_error_args",
    "redact_key",
    "redact_key_bytes",
    "set_redact_mode",
    "suspend_stack",
    "trace",
    "unwrap",
    "walk_deep",
    "with_message",
    "with_messagef",
    "with_stack",
    "wrap",
]
