from __future__ import annotations

import re

MINUS_SIGN = "\u2212"
THIN_SPACE = "\u2009"

_NON_NUMERIC_RE = re.compile(r"[^\d-]+")
_LABEL_RE = re.compile(r"^[^:]*:\s*")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_integer(raw: str) -> str:
    """Keep only digits and '-' (typographic minus is folded into '-')."""
    out = raw.replace(MINUS_SIGN, "-")
    return _NON_NUMERIC_RE.sub("", out)


def to_int(raw: str) -> int:
    try:
        return int(clean_integer(raw))
    except ValueError:
        return 0


def clean_nonprintable(raw: str) -> str:
    return raw.replace(THIN_SPACE, " ")


def strip_label(raw: str) -> str:
    """'Влажность: 63%' -> '63%'."""
    return _LABEL_RE.sub("", raw.strip(), count=1).strip()


def strip_multiline(raw: str) -> str:
    return _WHITESPACE_RE.sub(" ", raw).strip()
