from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping

from bs4 import BeautifulSoup


def _frozen(mapping: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


NOW_SELECTORS = _frozen(
    {
        "city": "h1.title.title_level_1",
        "term_now": "div.fact div.fact__temp span.temp__value",
        "term_night": "div.fact div.fact__night span.temp__value",
        "desc_now": "div.fact div.fact__condition",
        "wind": "div.fact div.fact__wind-speed",
        "humidity": "div.fact div.fact__humidity",
        "pressure": "div.fact div.fact__pressure",
    }
)

NEXT_DAYS_SELECTORS = _frozen(
    {
        "date": "div.forecast-briefly li.forecast-briefly__day time.forecast-briefly__date",
        "desc": "div.forecast-briefly li.forecast-briefly__day div.forecast-briefly__condition",
        "term": "div.forecast-briefly li.forecast-briefly__day div.forecast-briefly__temp_day span.temp__value",
        "term_night": "div.forecast-briefly li.forecast-briefly__day div.forecast-briefly__temp_night span.temp__value",
    }
)

# "root" and "item" locate the strip, the rest are relative to each item
HOURS_SELECTORS = _frozen(
    {
        "root": "div.fact__hourly",
        "item": "div.fact__hour",
        "hour": "div.fact__hour-label",
        "temp": "div.fact__hour-temp",
        "icon": "i.icon",
    }
)


@dataclass(frozen=True)
class SelectorSet:
    now: Mapping[str, str] = field(default_factory=lambda: NOW_SELECTORS)
    next_days: Mapping[str, str] = field(default_factory=lambda: NEXT_DAYS_SELECTORS)
    hours: Mapping[str, str] = field(default_factory=lambda: HOURS_SELECTORS)


DEFAULT_SELECTORS = SelectorSet()


def query_fields(doc: BeautifulSoup, selectors: Mapping[str, str]) -> Dict[str, str]:
    """Text of the last node matched by each selector; absent fields are omitted."""
    result: Dict[str, str] = {}
    for name, selector in selectors.items():
        nodes = doc.select(selector)
        if nodes:
            result[name] = nodes[-1].get_text()
    return result


def query_rows(doc: BeautifulSoup, selectors: Mapping[str, str]) -> List[Dict[str, str]]:
    """Zip per-field node lists into rows aligned by index."""
    rows: List[Dict[str, str]] = []
    for name, selector in selectors.items():
        for idx, node in enumerate(doc.select(selector)):
            if len(rows) <= idx:
                rows.append({})
            rows[idx][name] = node.get_text()
    return rows


def query_hours(doc: BeautifulSoup, selectors: Mapping[str, str]) -> List[Dict[str, str]]:
    root = doc.select_one(selectors["root"])
    if root is None:
        return []
    items: List[Dict[str, str]] = []
    for item in root.select(selectors["item"]):
        hour = item.select_one(selectors["hour"])
        temp = item.select_one(selectors["temp"])
        icon = item.select_one(selectors["icon"])
        items.append(
            {
                "hour": hour.get_text() if hour is not None else "",
                "temp": temp.get_text() if temp is not None else "",
                "icon": " ".join(icon.get("class", [])) if icon is not None else "",
            }
        )
    return items
