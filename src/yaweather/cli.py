from __future__ import annotations

import logging

import click

from .config import FORECAST_DAYS, VERSION, load_settings
from .pipeline import ExtractionError, extract
from .report.json import render_json
from .report.text import render_text
from .util.logging import setup_logging

LOGGER = logging.getLogger(__name__)

EPILOG = """\b
examples:
  yaweather moscow
  yaweather -json london
  yaweather -days 3 -no-today kiev
"""


@click.command(context_settings={"help_option_names": ["-h", "--help"]}, epilog=EPILOG)
@click.argument("city", required=False, default="")
@click.option("-json", "--json", "as_json", is_flag=True, help="Print a JSON document instead of tables")
@click.option("-no-color", "--no-color", "no_color", is_flag=True, help="Disable colored output")
@click.option("-no-today", "--no-today", "no_today", is_flag=True, help="Skip the hourly forecast for today")
@click.option("-days", "--days", type=click.IntRange(min=0), default=FORECAST_DAYS, show_default=True, help="Max days in the next-days table")
@click.option("--logs-dir", type=click.Path(path_type=str), help="Also write logs to this directory")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr")
@click.version_option(VERSION, "-version", "--version", prog_name="yaweather")
def main(**kwargs):
    """Weather forecast from Yandex for CITY (a slug from the site URL)."""
    settings = load_settings(kwargs)
    setup_logging(settings.log_level, settings.logs_dir)

    try:
        forecast = extract(settings)
    except ExtractionError as exc:
        LOGGER.debug("Extraction failed", exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)

    if not forecast.now.found:
        click.echo(f'City "{settings.city}" not found', err=True)
        raise SystemExit(1)

    if settings.as_json:
        click.echo(render_json(forecast))
    else:
        click.echo(render_text(forecast, settings), color=settings.color)


if __name__ == "__main__":  # pragma: no cover
    main()
