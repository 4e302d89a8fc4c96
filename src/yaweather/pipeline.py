from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Dict, List, Optional, Tuple

import requests
from soupsieve import SelectorSyntaxError

from .config import AppSettings
from .ingest.page import DocumentSource, PageClient
from .ingest.selectors import DEFAULT_SELECTORS, SelectorSet, query_fields, query_hours, query_rows
from .models import DEFAULT_WIND, CurrentConditions, DayRecord, Forecast, HourRecord
from .processing.icons import parse_icon
from .util.http import create_session
from .util.text import clean_nonprintable, strip_label, strip_multiline, to_int
from .util.time import is_after, resolve_date, today_local

LOGGER = logging.getLogger(__name__)


class ExtractionError(RuntimeError):
    """The main weather page could not be fetched or queried."""


def build_now(fields: Dict[str, str]) -> CurrentConditions:
    wind = strip_label(clean_nonprintable(fields.get("wind", "")))
    return CurrentConditions(
        city=strip_multiline(fields.get("city", "")),
        term_now=to_int(fields.get("term_now", "")),
        term_night=to_int(fields.get("term_night", "")),
        desc_now=fields.get("desc_now", "").strip(),
        wind=wind or DEFAULT_WIND,
        humidity=strip_label(clean_nonprintable(fields.get("humidity", ""))),
        pressure=strip_label(clean_nonprintable(fields.get("pressure", ""))),
    )


def build_days(rows: List[Dict[str, str]], limit: int, today: Optional[date] = None) -> List[DayRecord]:
    """Turn aligned next-days rows into records.

    The table starts at tomorrow, so row ``i`` is resolved with offset
    ``i + 1``. The first row that does not land strictly after ``today``
    ends the table, as does reaching ``limit``.
    """
    today = today or today_local()
    days: List[DayRecord] = []
    for idx, row in enumerate(rows):
        if len(days) >= limit:
            break
        display, iso = resolve_date(row.get("date", ""), idx + 1, today)
        if not is_after(iso, today):
            LOGGER.debug("Next-days table cut at row %d (date %r)", idx, row.get("date"))
            break
        days.append(
            DayRecord(
                date=display,
                json_date=iso,
                desc=clean_nonprintable(row.get("desc", "")).strip().lower(),
                term=to_int(row.get("term", "")),
                term_night=to_int(row.get("term_night", "")),
            )
        )
    return days


def build_hours(items: List[Dict[str, str]]) -> List[HourRecord]:
    return [
        HourRecord(hour=to_int(item["hour"]), temp=to_int(item["temp"]), icon=parse_icon(item["icon"]))
        for item in items
    ]


def _fetch_now(
    client: DocumentSource, settings: AppSettings, selectors: SelectorSet, today: Optional[date]
) -> Tuple[CurrentConditions, List[DayRecord]]:
    try:
        doc = client.get_document(settings.url)
        fields = query_fields(doc, selectors.now)
        rows = query_rows(doc, selectors.next_days)
    except (requests.RequestException, SelectorSyntaxError) as exc:
        raise ExtractionError(f"{settings.url}: {exc}") from exc
    return build_now(fields), build_days(rows, settings.days, today)


def _fetch_hours(client: DocumentSource, settings: AppSettings, selectors: SelectorSet) -> List[HourRecord]:
    if not settings.show_hours:
        return []
    try:
        doc = client.get_document(settings.mobile_url)
        return build_hours(query_hours(doc, selectors.hours))
    except Exception as exc:
        LOGGER.warning("Hourly forecast unavailable (%s): %s", settings.mobile_url, exc)
        return []


def extract(
    settings: AppSettings,
    client: Optional[DocumentSource] = None,
    selectors: SelectorSet = DEFAULT_SELECTORS,
    today: Optional[date] = None,
) -> Forecast:
    """Fetch both pages concurrently and wait for both before returning."""
    session = None
    if client is None:
        session = create_session(settings.user_agent, settings.timeout)
        client = PageClient(session)

    try:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="yaweather") as pool:
            now_future = pool.submit(_fetch_now, client, settings, selectors, today)
            hours_future = pool.submit(_fetch_hours, client, settings, selectors)
            hours = hours_future.result()
            now, days = now_future.result()
    finally:
        if session is not None:
            session.close()

    LOGGER.info("Extracted %d hours and %d days for %r", len(hours), len(days), now.city)
    return Forecast(now=now, hours=hours, days=days)
