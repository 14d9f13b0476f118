"""Small Typer helpers shared by the CLI commands."""

from __future__ import annotations

from typing import Any, NoReturn, Optional

import typer


def bad_parameter(
    message: str,
    *,
    ctx: Optional[typer.Context] = None,
    param: Any = None,
    param_hint: Optional[str] = None,
) -> NoReturn:
    """Raise :class:`typer.BadParameter`, forwarding only the given hints.

    Typer exits with status 2 and prints the usage line, which is what a
    malformed option deserves.
    """

    kwargs: dict[str, Any] = {}
    if ctx is not None:
        kwargs["ctx"] = ctx
    if param is not None:
        kwargs["param"] = param
    if param_hint is not None:
        kwargs["param_hint"] = param_hint
    raise typer.BadParameter(message, **kwargs)


def reject(file_name: str, reason: Optional[str]) -> NoReturn:
    """Report a rejected pitch file on stderr and exit with status 1.

    Rejections are user-facing outcomes (wrong extension, no valid rows),
    so no usage text or traceback is printed.
    """

    typer.secho(f"{file_name}: {reason or 'rejected'}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)
