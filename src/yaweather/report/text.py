from __future__ import annotations

from typing import List

from ..config import AppSettings
from ..models import DayRecord, Forecast, HourRecord
from ..processing.icons import icon_glyph
from .ansi import colorize

RULE = "─" * 63


def format_temp(value: int) -> str:
    return f"{value:+d}" if value else "0"


def _temp_cell(value: int, width: int) -> str:
    cell = format_temp(value).rjust(width)
    if value > 0:
        return f"<red>{cell}</>"
    if value < 0:
        return f"<cyan>{cell}</>"
    return cell


def _hours_block(hours: List[HourRecord]) -> List[str]:
    width = max(3, max(len(format_temp(row.temp)) for row in hours))
    hour_line = "<blue>час </>" + " ".join(f"{row.hour:02d}".rjust(width) for row in hours)
    temp_line = "<blue>°C  </>" + " ".join(_temp_cell(row.temp, width) for row in hours)
    lines = [RULE, hour_line, temp_line]
    if any(row.icon for row in hours):
        lines.append("    " + " ".join(icon_glyph(row.icon).rjust(width) for row in hours))
    return lines


def _days_block(days: List[DayRecord]) -> List[str]:
    desc_width = max(len("погода"), max(len(row.desc) for row in days))
    lines = [
        RULE,
        "<blue>{:>12}</> <blue>{:>5}</> <blue>{:<{w}}</> <blue>{:>8}</>".format(
            "дата", "°C", "погода", "°C ночью", w=desc_width
        ),
        RULE,
    ]
    for row in days:
        lines.append(
            f"{row.date:>12} {_temp_cell(row.term, 5)} {row.desc:<{desc_width}} {_temp_cell(row.term_night, 8)}"
        )
    return lines


def render_text(forecast: Forecast, settings: AppSettings) -> str:
    now = forecast.now
    lines = [
        f"{now.city} (<yellow>{settings.url}</>)",
        f"Сейчас: <green>{format_temp(now.term_now)} °C</>, <green>{now.desc_now}</>, "
        f"ночью: <green>{format_temp(now.term_night)} °C</>",
        f"Давление: {now.pressure}",
        f"Влажность: {now.humidity}",
        f"Ветер: {now.wind}",
    ]
    if forecast.hours:
        lines.extend(_hours_block(forecast.hours))
    if forecast.days:
        lines.extend(_days_block(forecast.days))
    return colorize("\n".join(lines), settings.color)
