from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import Any

import typer

from .config import configure
from .errors import annotate
from .format import PLAIN_SPECS, QUOTED, VERBOSE, format_error
from .redact import RedactMode, redact_error_args

app = typer.Typer(
    name="errchain",
    help="Render error chains with their stack traces and check redaction settings",
)

VERBS = PLAIN_SPECS | {QUOTED, VERBOSE}


def validate_verb(value: str) -> str:
    if value not in VERBS:
        typer.echo(f"Unknown verb {value!r}, expected one of v, s, q, +v", err=True)
        raise typer.Exit(2)
    return value


def resolve_target(target: str) -> Callable[..., Any]:
    """Import ``module:function`` or exit with code 2."""
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        typer.echo("Target must look like 'module:function'", err=True)
        raise typer.Exit(2)
    try:
        obj: Any = importlib.import_module(module_name)
        for part in attr.split("."):
            obj = getattr(obj, part)
    except (ImportError, AttributeError) as exc:
        typer.echo(f"Cannot load {target}: {exc}", err=True)
        raise typer.Exit(2) from exc
    if not callable(obj):
        typer.echo(f"{target} is not callable", err=True)
        raise typer.Exit(2)
    return obj


@app.command("run", help="Call MODULE:FUNCTION with ARGS and render the error it raises")
def run(
    target: str,
    args: list[str] | None = typer.Argument(None),
    verb: str = typer.Option(
        VERBOSE, "--verb", help="Format spec: v, s, q or +v", callback=validate_verb
    ),
) -> None:
    func = resolve_target(target)
    try:
        result = func(*(args or []))
    except Exception as exc:
        typer.echo(format_error(annotate(exc, f"{target} failed"), verb), err=True)
        raise typer.Exit(1) from exc
    if isinstance(result, BaseException):
        typer.echo(format_error(result, verb), err=True)
        raise typer.Exit(1)
    typer.echo(repr(result))


@app.command("redact", help="Interpolate TEMPLATE with ARGS, redacting the given positions")
def redact(
    template: str,
    args: list[str] | None = typer.Argument(None),
    position: list[int] | None = typer.Option(
        None, "--position", "-p", help="Zero-based argument position to redact"
    ),
    mode: RedactMode | None = typer.Option(
        None, "--mode", case_sensitive=False, help="Override ERRCHAIN_REDACT_LOG"
    ),
) -> None:
    values = redact_error_args(args or [], position or [], mode)
    try:
        typer.echo(template % tuple(values))
    except (TypeError, ValueError) as exc:
        typer.echo(f"Cannot interpolate template: {exc}", err=True)
        raise typer.Exit(2) from exc


@app.callback()
def root() -> None:
    """Root command for errchain."""
    configure()


def main() -> None:  # pragma: no cover - CLI entry point
    """Entrypoint for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
