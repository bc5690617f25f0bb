"""Data models for tab export."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Tab:
    url: str
    title: str
    window_id: int
    index: int
    ext_data: Optional[str] = None


HostBuckets = Dict[str, List[Tab]]
StackBuckets = Dict[str, HostBuckets]
GroupedTabs = Dict[str, StackBuckets]


@dataclass
class Node:
    """One element of the output tree, independent of any markup."""

    kind: str
    text: str = ""
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)

    def append(self, child: "Node") -> "Node":
        self.children.append(child)
        return child

    def walk(self):
        yield self
        for child in self.children:
            yield from child.walk()
