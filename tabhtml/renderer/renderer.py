"""Tab HTML exporter — window/stack/host grouped snapshot page."""

from __future__ import annotations

import datetime as _dt
from typing import Dict, List, Tuple

from tabhtml.i18n import download_filename, format_title, get_message

from .buckets import partition
from .config import DEFAULT_CFG, enabled_dimensions, merge_cfg
from .models import Tab
from .normalize import _normalize_tabs
from .rendering import render
from .serialize import to_html
from .validate import _validate_coverage, _validate_rendered


def render_html(
    tabs_raw: List[dict],
    cfg_override: Dict | None = None,
    stored_cfg: Dict | None = None,
    now: _dt.datetime | None = None,
) -> Tuple[str, str]:
    """Render a tab snapshot into `(download filename, HTML page)`."""
    state = build_state(tabs_raw, cfg_override, stored_cfg=stored_cfg, now=now)
    return page_for_state(state)


def page_for_state(state: Dict) -> Tuple[str, str]:
    return download_filename(state["title"]), to_html(state["document"], lang=state["cfg"]["locale"])


def build_state(
    tabs_raw: List[dict],
    cfg_override: Dict | None = None,
    stored_cfg: Dict | None = None,
    now: _dt.datetime | None = None,
) -> Dict:
    """Build exporter state (useful for tests)."""
    if tabs_raw is None:
        raise ValueError("tabs are required")

    cfg = merge_cfg(stored_cfg, cfg_override)
    tabs = _normalize_tabs(tabs_raw)
    stacks_available = stack_supported(tabs, cfg)
    enabled = enabled_dimensions(cfg, stacks_available)

    grouped = partition(tabs, enabled)
    _validate_coverage(tabs, grouped)

    title = format_title(get_message("mytabs", cfg["locale"]), now)
    document = render(grouped, title, indent_style=cfg["indentStyle"], locale=cfg["locale"])
    _validate_rendered(document, grouped)

    return {
        "cfg": cfg,
        "tabs": tabs,
        "enabled": enabled,
        "stacks_available": stacks_available,
        "grouped": grouped,
        "title": title,
        "document": document,
    }


def stack_supported(tabs: List[Tab], cfg: Dict) -> bool:
    """Stacks exist only in browsers that tag tabs with extData metadata."""
    configured = cfg.get("stackSupported")
    if configured is not None:
        return bool(configured)
    return any(tab.ext_data is not None for tab in tabs)


__all__ = [
    "DEFAULT_CFG",
    "render_html",
    "build_state",
    "page_for_state",
    "stack_supported",
]
