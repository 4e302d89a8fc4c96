from __future__ import annotations

import json

from ..models import Forecast


def render_json(forecast: Forecast) -> str:
    return json.dumps(forecast.to_dict(), ensure_ascii=False)
