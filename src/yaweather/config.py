from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

VERSION = "1.0.0"
BASE_URL = "https://yandex.ru/pogoda/"
BASE_URL_MOBILE = "https://yandex.ru/pogoda/touch/"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_10_1) AppleWebKit/600.1.25 "
    "(KHTML, like Gecko) Version/8.0 Safari/600.1.25"
)
FORECAST_DAYS = 10

# consoles that can't render the hourly strip glyphs
NO_HOURS_PLATFORMS = {"win32"}


class AppSettings(BaseModel):
    city: str = Field(default="")
    base_url: str = Field(default=BASE_URL)
    base_url_mobile: str = Field(default=BASE_URL_MOBILE)
    days: int = Field(default=FORECAST_DAYS, ge=0)
    as_json: bool = Field(default=False)
    color: bool = Field(default=True)
    show_hours: bool = Field(default=True)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    timeout: float = Field(default=30, gt=0)
    logs_dir: Optional[Path] = Field(default=None)
    log_level: int = Field(default=logging.WARNING)

    model_config = {
        "frozen": True,
    }

    @property
    def url(self) -> str:
        return self.base_url + self.city

    @property
    def mobile_url(self) -> str:
        return self.base_url_mobile + self.city


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return float(value)


def _stdout_is_tty() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def load_settings(cli_args: dict[str, Any] | None = None) -> AppSettings:
    load_dotenv()
    cli_args = cli_args or {}

    logs_dir = cli_args.get("logs_dir") or os.getenv("YAWEATHER_LOGS_DIR")
    days = cli_args.get("days")

    data: dict[str, Any] = {
        "city": cli_args.get("city") or "",
        "base_url": os.getenv("YAWEATHER_BASE_URL", BASE_URL),
        "base_url_mobile": os.getenv("YAWEATHER_BASE_URL_MOBILE", BASE_URL_MOBILE),
        "days": days if days is not None else int(os.getenv("YAWEATHER_DAYS", FORECAST_DAYS)),
        "as_json": bool(cli_args.get("as_json")),
        "color": not cli_args.get("no_color") and _stdout_is_tty(),
        "show_hours": not cli_args.get("no_today") and sys.platform not in NO_HOURS_PLATFORMS,
        "user_agent": os.getenv("YAWEATHER_USER_AGENT", DEFAULT_USER_AGENT),
        "timeout": _env_float("YAWEATHER_TIMEOUT", 30),
        "logs_dir": Path(logs_dir).expanduser() if logs_dir else None,
        "log_level": logging.DEBUG if cli_args.get("verbose") else logging.WARNING,
    }

    try:
        return AppSettings(**data)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid configuration: {exc}")
