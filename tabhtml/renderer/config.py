"""Export configuration and shared constants."""

from __future__ import annotations

from typing import Dict

DEFAULT_CFG: Dict = {
    "groupByWindow": False,
    "groupByStack": False,
    "groupByHost": False,
    "indentStyle": False,
    # None means "detect from the snapshot" (see stack_supported).
    "stackSupported": None,
    "locale": "en",
    "outputDir": ".",
}

TOGGLE_KEYS = ("groupByWindow", "groupByStack", "groupByHost", "indentStyle")

WINDOW_ALL = "all"
STACK_NONE = "none"
HOST_ALL = "all"
HOST_OTHER = "other"

# Keys that mean "ungrouped" at each level; never announced with a label.
WINDOW_UNLABELLED = {WINDOW_ALL}
STACK_UNLABELLED = {STACK_NONE}
HOST_UNLABELLED = {HOST_ALL, HOST_OTHER}

FIRST_GROUP_HEADING_LEVEL = 2
MAX_HEADING_LEVEL = 6

INDENT_CSS = ".window, .stack, .host { border-left: 2px solid #ccc; margin-left: 4px; padding-left: 8px; }"


def merge_cfg(stored_cfg: Dict | None, override_cfg: Dict | None) -> Dict:
    merged = dict(DEFAULT_CFG)
    if stored_cfg:
        merged.update(stored_cfg)
    if override_cfg:
        merged.update(override_cfg)
    for key in TOGGLE_KEYS:
        merged[key] = _as_flag(merged.get(key))
    return merged


def _as_flag(value) -> bool:
    # Hand-edited preference files may hold "false" or "0" as strings.
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on", "y"}
    return bool(value)


def enabled_dimensions(cfg: Dict, stacks_available: bool = True) -> Dict[str, bool]:
    """Grouping dimensions for the partitioner; stacks only where the browser has them."""
    return {
        "window": bool(cfg.get("groupByWindow")),
        "stack": bool(cfg.get("groupByStack")) and stacks_available,
        "host": bool(cfg.get("groupByHost")),
    }
