"""Page title and download filename helpers."""

from __future__ import annotations

import datetime as _dt
import re

PLACEHOLDER = "%s"
UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]+')


def format_title(template: str, now: _dt.datetime | None = None) -> str:
    """Fill the template's first placeholder with the locale's date and time."""
    if now is None:
        now = _dt.datetime.now()
    return template.replace(PLACEHOLDER, now.strftime("%c"), 1)


def safe_filename(title: str, *, fallback: str = "tabs") -> str:
    name = UNSAFE_FILENAME_CHARS.sub("-", title or "")
    name = re.sub(r"\s+", " ", name).strip(" .")
    return name or fallback


def download_filename(title: str) -> str:
    return f"{safe_filename(title)}.html"
