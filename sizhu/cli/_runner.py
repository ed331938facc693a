"""Entry-point helpers wrapping the Typer application."""

from __future__ import annotations

from collections.abc import Sequence

import click
from typer.main import get_command

from .app import app


def build_command() -> click.Command:
    """Return the Click command representing the Typer app."""

    return get_command(app)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI with ``argv`` and return its exit code."""

    command = build_command()
    args = list(argv) if argv is not None else None
    try:
        outcome = command.main(args=args, prog_name="sizhu", standalone_mode=False)
    except click.exceptions.Exit as exc:
        return int(exc.exit_code or 0)
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return outcome if isinstance(outcome, int) else 0


def console_main() -> None:
    """Invoke :func:`main` and terminate with its exit code."""

    raise SystemExit(main())


__all__ = ["build_command", "main", "console_main"]
