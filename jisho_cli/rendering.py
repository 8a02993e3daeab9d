"""Formats parsed entries for the terminal."""

from __future__ import annotations

import json
import sys
from typing import Iterable, List, Optional, Sequence, TextIO
from urllib.parse import urljoin

from termcolor import colored

from .config import DEFAULT_BASE_URL
from .models import Entry, ResultItem, SupplementalInfo


class Painter:
    """Applies termcolor styles, or nothing when color is disabled."""

    def __init__(self, enabled: bool):
        self.enabled = enabled

    def __call__(self, text: str, color: Optional[str] = None, attrs: Sequence[str] = ()) -> str:
        if not self.enabled:
            return text
        # The caller has already decided; stop termcolor from second-guessing the TTY.
        return colored(text, color, attrs=list(attrs) or None, force_color=True)


def hyperlink(text: str, href: str) -> str:
    """Wrap text in an OSC 8 terminal hyperlink."""
    return f"\x1b]8;;{href}\x1b\\{text}\x1b]8;;\x1b\\"


def render_supplemental_info(infos: Iterable[SupplementalInfo], base_url: str = DEFAULT_BASE_URL) -> str:
    parts: List[str] = []
    for info in infos:
        if info.type == "tag":
            parts.append(info.text)
        elif info.type == "see-also":
            target = urljoin(base_url + "/", info.href) if info.href else ""
            link = hyperlink(info.text, target) if target else info.text
            parts.append(f"see also {link}")
    return ", ".join(parts)


def render_item(item: ResultItem, paint: Painter, base_url: str = DEFAULT_BASE_URL) -> str:
    if item.type == "tag":
        return "\t" + paint(item.text, "cyan")

    prefix = "" if item.number is None else paint(item.number, attrs=("dark",)) + " "
    suffix = ""
    if item.supplemental_info:
        suffix = paint(" - " + render_supplemental_info(item.supplemental_info, base_url), attrs=("dark",))
    return f"\t{prefix}{item.text}{suffix}"


def render_entry(entry: Entry, paint: Painter, base_url: str = DEFAULT_BASE_URL) -> str:
    header = "{} [{}]:".format(
        paint(entry.text, "light_green", attrs=("bold",)),
        paint(entry.reading, "light_magenta"),
    )
    lines = [header]
    lines.extend(render_item(item, paint, base_url) for item in entry.items)
    lines.append("")
    return "\n".join(lines)


def render_entries(
    entries: Sequence[Entry],
    *,
    top_to_bottom: bool = False,
    color: bool = False,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Render entries as text.

    By default the best match is printed last so it ends up next to the
    prompt; ``top_to_bottom`` keeps page order.
    """
    paint = Painter(color)
    ordered = list(entries) if top_to_bottom else list(reversed(entries))
    return "".join(render_entry(entry, paint, base_url) + "\n" for entry in ordered)


def render_json(entries: Sequence[Entry], *, top_to_bottom: bool = True) -> str:
    ordered = list(entries) if top_to_bottom else list(reversed(entries))
    return json.dumps([entry.to_dict() for entry in ordered], ensure_ascii=False, indent=2)


def print_entries(
    entries: Sequence[Entry],
    *,
    top_to_bottom: bool = False,
    color: bool = False,
    base_url: str = DEFAULT_BASE_URL,
    stream: Optional[TextIO] = None,
) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(render_entries(entries, top_to_bottom=top_to_bottom, color=color, base_url=base_url))
    out.flush()
