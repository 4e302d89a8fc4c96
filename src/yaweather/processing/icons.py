from __future__ import annotations

# token (css class on the site) -> glyph shown in the hourly strip
ICONS = {
    "icon_snow": "☃",
    "icon_rain": "☂",
    "icon_thunderstorm": "⚡",
    "icon_sleet": "☔",
    "icon_clear": "☀",
    "icon_cloudy": "⛅",
    "icon_overcast": "☁",
    "icon_fog": "≡",
}


def parse_icon(class_attr: str) -> str:
    """Return the first recognized icon class in ``class_attr`` or ''."""
    for token in class_attr.split():
        if token in ICONS:
            return token
    return ""


def icon_glyph(token: str) -> str:
    return ICONS.get(token, "")
