"""Primary Typer application for the Sizhu CLI."""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from sizhu.boot import configure_logging
from sizhu.config import Settings, config_path, ensure_default_config, load_settings
from sizhu.errors import BaziError, BaziInputError, SettingsError
from sizhu.four_pillars import PILLAR_NAMES, compute_four_pillars_from_strings
from sizhu.sexagenary import SEXAGENARY_CYCLE
from sizhu.solar_terms import SOLAR_TERMS, terms_for_years

LOG = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 2
EXIT_INTERNAL_ERROR = 3

app = typer.Typer(help="Four Pillars (BaZi) calculator.")
config_app = typer.Typer(help="Inspect and initialise the settings file.")
app.add_typer(config_app, name="config")

_PILLAR_TITLES = {"year": "年柱", "month": "月柱", "day": "日柱", "hour": "时柱"}


def _check_style(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in ("hanzi", "pinyin"):
        raise typer.BadParameter("Style must be 'hanzi' or 'pinyin'.")
    return value


def _fail(exc: BaziError) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    if isinstance(exc, BaziInputError):
        return typer.Exit(code=EXIT_INPUT_ERROR)
    LOG.error("internal calculation error: %s (%s)", exc, exc.error_code)
    return typer.Exit(code=EXIT_INTERNAL_ERROR)


def _settings(ctx: typer.Context) -> Settings:
    settings = ctx.obj if isinstance(ctx.obj, Settings) else None
    if settings is None:
        try:
            settings = load_settings()
        except SettingsError as exc:
            raise _fail(exc) from exc
        ctx.obj = settings
    return settings


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to SIZHU_LOG_LEVEL, then the settings file).",
    ),
) -> None:
    """Load settings and configure logging before any command runs."""

    settings = _settings(ctx)
    configure_logging(level=log_level, default=settings.logging.level)


@app.command("pillars")
def cli_pillars(
    ctx: typer.Context,
    date_text: str = typer.Argument(..., metavar="YYYY-MM-DD", help="Gregorian birth date."),
    time_text: Optional[str] = typer.Argument(
        None, metavar="HH:MM", help="Local clock time (defaults to the configured default time)."
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit the Four Pillars as JSON."),
    style: Optional[str] = typer.Option(
        None, "--style", callback=_check_style, help="Label style: hanzi or pinyin."
    ),
) -> None:
    """Compute the Four Pillars for the supplied birth date and time."""

    settings = _settings(ctx)
    style = style or settings.display.label_style
    if time_text is None:
        time_text = settings.display.default_time

    try:
        result = compute_four_pillars_from_strings(date_text, time_text)
    except BaziError as exc:
        raise _fail(exc) from exc

    if json_output:
        typer.echo(
            json.dumps(result.as_dict(style), ensure_ascii=False, indent=settings.display.json_indent or None)
        )
        return

    typer.echo(f"出生日期 (公历): {result.gregorian_date()}")
    typer.echo(f"出生时辰: {result.display_time()}")
    for name in PILLAR_NAMES:
        pillar = result.pillars[name]
        title = _PILLAR_TITLES[name] if style == "hanzi" else name.title()
        typer.echo(f"{title:<5}: {pillar.render(style)}")


@app.command("cycle")
def cli_cycle(
    ctx: typer.Context,
    style: Optional[str] = typer.Option(
        None, "--style", callback=_check_style, help="Label style: hanzi or pinyin."
    ),
) -> None:
    """List the sixty Jia-Zi combinations."""

    style = style or _settings(ctx).display.label_style
    for entry in SEXAGENARY_CYCLE:
        label = entry.pinyin() if style == "pinyin" else entry.label()
        typer.echo(f"{entry.index:>2} {label}")


@app.command("solar-terms")
def cli_solar_terms(
    year: Optional[int] = typer.Argument(None, help="Show concrete dates for this civil year."),
) -> None:
    """List the approximate month-governing solar terms."""

    if year is None:
        for term in SOLAR_TERMS:
            typer.echo(f"{term.month:02d}-{term.day:02d} {term.hanzi} {term.name:<10} {term.branch.hanzi}")
        return

    try:
        dated = terms_for_years([year])
    except ValueError as exc:
        raise typer.BadParameter(f"Year {year} is outside the supported range.") from exc
    for item in dated:
        typer.echo(f"{item.date.isoformat()} {item.term.hanzi} {item.term.name:<10} {item.branch.hanzi}")


@config_app.command("path")
def cli_config_path() -> None:
    """Print the settings file location."""

    typer.echo(str(config_path()))


@config_app.command("init")
def cli_config_init() -> None:
    """Write the default settings file when it does not exist yet."""

    typer.echo(str(ensure_default_config()))


@config_app.command("show")
def cli_config_show(ctx: typer.Context) -> None:
    """Print the effective settings as JSON."""

    typer.echo(json.dumps(_settings(ctx).model_dump(), ensure_ascii=False, indent=2))


__all__ = ["app", "EXIT_INPUT_ERROR", "EXIT_INTERNAL_ERROR"]
