"""Normalization of raw tab snapshot records into Tab models."""

from __future__ import annotations

import json
import re
from typing import List, Optional

from .models import Tab


def _normalize_tabs(tabs_raw: List[dict]) -> List[Tab]:
    """Coerce browser tab records (camelCase or snake_case keys) into Tabs.

    Records that are not objects are skipped. Missing positions fall back to the
    record's place in the snapshot so ordering stays stable.
    """
    normalized: List[Tab] = []
    for position, raw in enumerate(tabs_raw):
        if not isinstance(raw, dict):
            continue
        url = str(raw.get("url") or "").strip()
        # Titles are whitespace-collapsed; an untitled tab shows its URL as link text.
        title = _normalize_title(str(raw.get("title") or "")) or url
        window_id = _as_int(_first(raw, "windowId", "window_id"), default=0)
        index = _as_int(raw.get("index"), default=position)
        ext_data = _ext_data(_first(raw, "extData", "ext_data"))
        normalized.append(Tab(url=url, title=title, window_id=window_id, index=index, ext_data=ext_data))
    return normalized


def _first(raw: dict, *keys: str):
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _normalize_title(title: str) -> str:
    title = title.replace("\r\n", "\n").replace("\r", "\n")
    return re.sub(r"\s+", " ", title).strip()


def _as_int(value, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _ext_data(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # Some exporters hand over the metadata already decoded.
    return json.dumps(value)
