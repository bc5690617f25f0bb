"""Bucket assignment: window -> stack -> host -> tabs."""

from __future__ import annotations

import json
from typing import Dict, List, Mapping
from urllib.parse import urlparse

from .config import HOST_ALL, HOST_OTHER, STACK_NONE, WINDOW_ALL
from .models import GroupedTabs, HostBuckets, Tab

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def partition(tabs: List[Tab], enabled: Mapping[str, bool]) -> GroupedTabs:
    """Nest tabs by window, then stack, then host.

    `enabled` holds the `window`, `stack` and `host` switches; a disabled
    dimension collapses into its sentinel bucket. Tabs keep snapshot order
    inside each bucket; sorting by index happens at render time.
    """
    if not tabs:
        return {}
    windows = _assign_windows(tabs, bool(enabled.get("window")))
    grouped: GroupedTabs = {}
    for window_key, window_tabs in windows.items():
        stacks = _assign_stacks(window_tabs, bool(enabled.get("stack")))
        grouped[window_key] = {
            stack_key: _assign_hosts(stack_tabs, bool(enabled.get("host")))
            for stack_key, stack_tabs in stacks.items()
        }
    return grouped


def _assign_windows(tabs: List[Tab], enabled: bool) -> Dict[str, List[Tab]]:
    if not enabled:
        return {WINDOW_ALL: list(tabs)}
    windows: Dict[str, List[Tab]] = {}
    for tab in tabs:
        windows.setdefault(str(tab.window_id), []).append(tab)
    return windows


def _assign_stacks(tabs: List[Tab], enabled: bool) -> Dict[str, List[Tab]]:
    if not enabled:
        return {STACK_NONE: list(tabs)}
    stacks: Dict[str, List[Tab]] = {STACK_NONE: []}
    for tab in tabs:
        stacks.setdefault(_stack_for_tab(tab), []).append(tab)
    return stacks


def _assign_hosts(tabs: List[Tab], enabled: bool) -> HostBuckets:
    if not enabled:
        return {HOST_ALL: list(tabs)}
    hosts: HostBuckets = {HOST_OTHER: []}
    for tab in tabs:
        hosts.setdefault(_host_for_tab(tab), []).append(tab)
    return hosts


def _stack_for_tab(tab: Tab) -> str:
    if not tab.ext_data:
        return STACK_NONE
    try:
        parsed = json.loads(tab.ext_data)
    except ValueError:
        return STACK_NONE
    group = parsed.get("group") if isinstance(parsed, dict) else None
    # Stack names are strings; numeric ids are accepted, anything else is unnamed.
    if isinstance(group, bool) or not isinstance(group, (str, int)) or not group:
        return STACK_NONE
    return str(group)


def _host_for_tab(tab: Tab) -> str:
    host = _url_host(tab.url)
    return host or HOST_OTHER


def _url_host(url: str) -> str:
    """Host of an absolute URL with a non-default port kept; "" when there is none."""
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname or ""
        port = parsed.port
    except ValueError:
        return ""
    if not parsed.scheme or not hostname:
        return ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    if port is not None and DEFAULT_PORTS.get(parsed.scheme.lower()) != port:
        return f"{hostname}:{port}"
    return hostname


def _iter_leaves(grouped: GroupedTabs):
    for window_key, stacks in grouped.items():
        for stack_key, hosts in stacks.items():
            for host_key, tabs in hosts.items():
                yield (window_key, stack_key, host_key), tabs


def count_tabs(grouped: GroupedTabs) -> int:
    return sum(len(tabs) for _, tabs in _iter_leaves(grouped))
