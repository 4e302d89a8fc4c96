from __future__ import annotations

import re
from typing import Optional, Union

import click

_COLOR = r"(?:black|red|green|yellow|blue|magenta|cyan|white|grey|\d{1,3})(?:\+[bBuih]+)?"
TAG_RE = re.compile(rf"<({_COLOR}(?::{_COLOR})?|/\w*)>")

RESET = click.style("", reset=True)


def _color_value(name: str, bright: bool) -> Union[str, int]:
    if name.isdigit():
        return int(name) % 256
    if name == "grey":
        return "bright_black"
    return f"bright_{name}" if bright else name


def _split(spec: str) -> tuple[str, str]:
    name, _, mods = spec.partition("+")
    return name, mods


def tag_code(tag: str) -> str:
    """ANSI prefix for 'red', 'red+bu', 'yellow:blue', '208' ..."""
    if tag.startswith("/"):
        return RESET
    fg_spec, _, bg_spec = tag.partition(":")
    fg_name, mods = _split(fg_spec)
    bg: Optional[Union[str, int]] = None
    if bg_spec:
        bg_name, bg_mods = _split(bg_spec)
        bg = _color_value(bg_name, "h" in bg_mods)
    return click.style(
        "",
        fg=_color_value(fg_name, "h" in mods),
        bg=bg,
        bold="b" in mods or None,
        blink="B" in mods or None,
        underline="u" in mods or None,
        reverse="i" in mods or None,
        reset=False,
    )


def colorize(text: str, color: bool = True) -> str:
    """Replace <color>..</> tags with ANSI codes, or drop them when color is off."""
    if not color:
        return TAG_RE.sub("", text)
    return TAG_RE.sub(lambda match: tag_code(match.group(1)), text)
