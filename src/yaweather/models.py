from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List

DEFAULT_WIND = "0 м/с"


@dataclass(frozen=True, slots=True)
class CurrentConditions:
    city: str = ""
    term_now: int = 0
    term_night: int = 0
    desc_now: str = ""
    wind: str = DEFAULT_WIND
    humidity: str = ""
    pressure: str = ""

    @property
    def found(self) -> bool:
        return bool(self.city)


@dataclass(frozen=True, slots=True)
class HourRecord:
    hour: int
    temp: int
    icon: str = ""


@dataclass(frozen=True, slots=True)
class DayRecord:
    date: str
    json_date: str
    desc: str
    term: int
    term_night: int


@dataclass(slots=True)
class Forecast:
    now: CurrentConditions
    hours: List[HourRecord] = field(default_factory=list)
    days: List[DayRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        payload = asdict(self.now)
        if self.hours:
            payload["by_hours"] = [asdict(row) for row in self.hours]
        if self.days:
            payload["next_days"] = [asdict(row) for row in self.days]
        return payload
