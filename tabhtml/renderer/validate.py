"""Invariant checks for bucket coverage and the rendered tree."""

from __future__ import annotations

from collections import Counter
from typing import List

from .buckets import _iter_leaves
from .models import GroupedTabs, Node, Tab


def _validate_coverage(tabs: List[Tab], grouped: GroupedTabs) -> None:
    expected = Counter(id(tab) for tab in tabs)
    bucketed: Counter = Counter()
    for path, leaf in _iter_leaves(grouped):
        for tab in leaf:
            bucketed[id(tab)] += 1
            if bucketed[id(tab)] > expected[id(tab)]:
                raise ValueError(f"Duplicate tab across buckets: {tab.url!r} in {'/'.join(path)}")
    missing = [tab.url for tab in tabs if bucketed[id(tab)] < expected[id(tab)]]
    if missing:
        raise ValueError(f"Not all tabs assigned to a bucket: {missing}")


def _validate_rendered(document: Node, grouped: GroupedTabs) -> None:
    links = [node for node in document.walk() if node.kind == "link"]
    total = sum(len(leaf) for _, leaf in _iter_leaves(grouped))
    if len(links) != total:
        raise ValueError(f"Rendered {len(links)} tab links for {total} tabs")

    for node in document.walk():
        if node.kind != "container" or node.attrs.get("class") != "host":
            continue
        indexes = [int(child.attrs["data-index"]) for child in node.children if child.kind == "paragraph"]
        if indexes != sorted(indexes):
            raise ValueError("Tab order incorrect within host group")
