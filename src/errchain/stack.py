"""Call-site capture for error chains.

A :class:`Frame` keeps only the code object, the line and the module name of a
call site; names and paths are resolved when the frame is printed.
"""

from __future__ import annotations

import os
import sys
import traceback
from dataclasses import dataclass
from types import CodeType, FrameType, TracebackType

MAX_DEPTH = 32

UNKNOWN = "unknown"


def shorten(name: str, module: str = "") -> str:
    """Strip the module path from a qualified function name.

    ``pkg.mod.Type.method`` with module ``pkg.mod`` becomes ``Type.method``.
    Without a module only the last dotted segment is kept.
    """
    if module and name.startswith(module + "."):
        return name[len(module) + 1 :]
    return name.rsplit(".", 1)[-1]


@dataclass(frozen=True, slots=True)
class Frame:
    """A single call site of a captured stack."""

    code: CodeType | None = None
    lineno: int = 0
    module: str = ""

    @classmethod
    def from_frame(cls, frame: FrameType, lineno: int | None = None) -> Frame:
        return cls(
            code=frame.f_code,
            lineno=frame.f_lineno if lineno is None else lineno,
            module=frame.f_globals.get("__name__", ""),
        )

    @property
    def file(self) -> str:
        if self.code is None:
            return UNKNOWN
        return self.code.co_filename

    @property
    def line(self) -> int:
        if self.code is None:
            return 0
        return self.lineno or 0

    @property
    def name(self) -> str:
        """Module-qualified function name, ``unknown`` if unresolved."""
        if self.code is None:
            return UNKNOWN
        if self.module:
            return f"{self.module}.{self.code.co_qualname}"
        return self.code.co_qualname

    @property
    def funcname(self) -> str:
        if self.code is None:
            return ""
        return shorten(self.name, self.module)

    def __format__(self, spec: str) -> str:
        match spec:
            case "s":
                return os.path.basename(self.file)
            case "+s":
                return f"{self.name}\n\t{self.file}"
            case "d":
                return str(self.line)
            case "n":
                return self.funcname
            case "" | "v":
                return f"{format(self, 's')}:{self.line}"
            case "+v":
                return f"{format(self, '+s')}:{self.line}"
        raise ValueError(f"Unknown format code {spec!r} for Frame")

    def __str__(self) -> str:
        return format(self, "v")


class StackTrace(tuple[Frame, ...]):
    """Frames of one capture, innermost first."""

    __slots__ = ()

    @classmethod
    def from_traceback(cls, tb: TracebackType | None) -> StackTrace:
        frames = [Frame.from_frame(f, lineno) for f, lineno in traceback.walk_tb(tb)]
        frames.reverse()
        return cls(frames)

    def __getitem__(self, index):  # type: ignore[override]
        item = tuple.__getitem__(self, index)
        if isinstance(index, slice):
            return StackTrace(item)
        return item

    def __format__(self, spec: str) -> str:
        return format_stack_trace(self, spec)

    def __str__(self) -> str:
        return format_stack_trace(self, "v")


def format_stack_trace(stack: StackTrace | None, spec: str = "v") -> str:
    """Render *stack*; an absent stack renders like an empty one."""
    frames = stack or ()
    match spec:
        case "+v":
            return "".join("\n" + format(frame, "+v") for frame in frames)
        case "" | "v" | "s":
            verb = spec or "v"
            return "[" + " ".join(format(frame, verb) for frame in frames) + "]"
    raise ValueError(f"Unknown format code {spec!r} for StackTrace")


def callers(skip: int = 0) -> StackTrace:
    """Capture the stack of the function calling ``callers``.

    *skip* drops that many additional innermost frames, so a constructor can
    pass ``1`` to start the trace at its own caller.
    """
    try:
        frame: FrameType | None = sys._getframe(skip + 1)
    except ValueError:
        return StackTrace()
    frames: list[Frame] = []
    for f, lineno in traceback.walk_stack(frame):
        frames.append(Frame.from_frame(f, lineno))
        if len(frames) >= MAX_DEPTH:
            break
    return StackTrace(frames)
