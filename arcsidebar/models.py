#!/usr/bin/env python3
"""Data models for the reconstructed Arc sidebar."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class Node:
    """One sidebar entry: a folder, a link, or a link with nested items."""
    id: str
    title: Optional[str]
    url: Optional[str]
    tag: str
    children: List["Node"] = field(default_factory=list)
    # Lookup only, never walked by repr or comparison
    parent: Optional["Node"] = field(default=None, repr=False, compare=False)

    @property
    def is_link(self) -> bool:
        return self.url is not None

    @property
    def is_folder(self) -> bool:
        return bool(self.children) and self.url is None

    def walk(self) -> Iterator["Node"]:
        """Yield this node and every descendant, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class Space:
    """Represents an Arc browser space whose pinned items form one tree."""
    id: str
    title: Optional[str]
    root: Node

    @property
    def pinned_items(self) -> List[Node]:
        return self.root.children


@dataclass
class SidebarModel:
    """
    Result of reading a sidebar document.

    `error` is set when the document could not be interpreted at all, so
    an empty `spaces` list with no error means there are no pinned items.
    """
    spaces: List[Space] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
