"""Text rendering shared by every error kind.

Supported format specs mirror the ``%v``/``%s``/``%q``/``%+v`` verbs of the
chain renderer:

* ``""``, ``"v"``, ``"s"`` - the message, as ``str(err)``;
* ``"q"``   - the message quoted, one quoted line per chained block;
* ``"+v"``  - messages interleaved with ``function\\n\\tfile:line`` frames.
"""

from __future__ import annotations

from .stack import StackTrace, format_stack_trace

PLAIN_SPECS = frozenset({"", "v", "s"})
VERBOSE = "+v"
QUOTED = "q"

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _escape(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if ch.isprintable():
        return ch
    code = ord(ch)
    if code < 0x80:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(text: str) -> str:
    """Return *text* double-quoted, escaping every non-printable character."""
    return '"' + "".join(_escape(ch) for ch in text) + '"'


def check_spec(spec: str, owner: object) -> None:
    if spec not in PLAIN_SPECS and spec not in (VERBOSE, QUOTED):
        raise ValueError(
            f"Unknown format code {spec!r} for object of type {type(owner).__name__!r}"
        )


def format_error(err: BaseException | None, spec: str = "v") -> str:
    """Render *err* under *spec*, whatever its type."""
    if err is None:
        return ""
    if type(err).__format__ is not object.__format__:
        return format(err, spec)
    check_spec(spec, err)
    if spec == QUOTED:
        return quote(str(err))
    if spec == VERBOSE and err.__traceback__ is not None:
        stack = StackTrace.from_traceback(err.__traceback__)
        return str(err) + format_stack_trace(stack, VERBOSE)
    return str(err)
