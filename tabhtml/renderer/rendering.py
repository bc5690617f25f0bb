"""Document tree rendering for grouped tabs."""

from __future__ import annotations

from typing import List

from tabhtml.i18n import get_message

from .config import (
    FIRST_GROUP_HEADING_LEVEL,
    HOST_UNLABELLED,
    INDENT_CSS,
    MAX_HEADING_LEVEL,
    STACK_UNLABELLED,
    WINDOW_UNLABELLED,
)
from .models import GroupedTabs, HostBuckets, Node, StackBuckets, Tab


def render(grouped: GroupedTabs, page_title: str, indent_style: bool = False, locale: str = "en") -> Node:
    """Build the page tree: title heading, then windows > stacks > hosts > tabs.

    A level gets label headings only when it holds more than one bucket, and
    sentinel buckets are never labelled. Every labelled level pushes the
    headings below it one level deeper.
    """
    document = Node("document", text=page_title)
    document.append(Node("meta", attrs={"charset": "utf-8"}))
    if indent_style:
        document.append(Node("style", text=INDENT_CSS))
    document.append(_heading(page_title, 1))

    window_prefix = get_message("windowLabel", locale)
    stack_prefix = get_message("stackLabel", locale)

    multi_window = len(grouped) > 1
    for window_key, stacks in grouped.items():
        container = document.append(_container("window", window_key))
        level = FIRST_GROUP_HEADING_LEVEL
        if multi_window and window_key not in WINDOW_UNLABELLED:
            container.append(_heading(f"{window_prefix} {window_key}", level))
        _render_stacks(container, stacks, level + 1 if multi_window else level, stack_prefix)
    return document


def _render_stacks(parent: Node, stacks: StackBuckets, level: int, stack_prefix: str) -> None:
    multi_stack = len(stacks) > 1
    for stack_key, hosts in stacks.items():
        container = parent.append(_container("stack", stack_key))
        if multi_stack and stack_key not in STACK_UNLABELLED:
            container.append(_heading(f"{stack_prefix} {stack_key}", level))
        _render_hosts(container, hosts, level + 1 if multi_stack else level)


def _render_hosts(parent: Node, hosts: HostBuckets, level: int) -> None:
    multi_host = len(hosts) > 1
    for host_key, tabs in hosts.items():
        container = parent.append(_container("host", host_key))
        if multi_host and host_key not in HOST_UNLABELLED:
            container.append(_heading(host_key, level))
        for tab in _sorted_tabs(tabs):
            container.append(_tab_item(tab))


def _sorted_tabs(tabs: List[Tab]) -> List[Tab]:
    return sorted(tabs, key=lambda tab: tab.index)


def _tab_item(tab: Tab) -> Node:
    link = Node("link", text=tab.title, attrs={"href": tab.url})
    return Node("paragraph", attrs={"data-index": str(tab.index)}, children=[link])


def _heading(text: str, level: int) -> Node:
    return Node("heading", text=text, attrs={"level": str(min(level, MAX_HEADING_LEVEL))})


def _container(dimension: str, key: str) -> Node:
    return Node("container", attrs={"class": dimension, "data-key": key})
