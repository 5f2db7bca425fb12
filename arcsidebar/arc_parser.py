#!/usr/bin/env python3
"""Rebuild Arc sidebar spaces from the flat records of StorableSidebar.json."""

import logging
import re
from typing import Dict, FrozenSet, List, Optional

from .models import Node, SidebarModel, Space


class ArcDataError(Exception):
    """Custom exception for Arc data parsing errors."""
    pass


class CyclicItemError(ArcDataError):
    """An item lists one of its own ancestors among its children."""

    def __init__(self, item_id: str):
        super().__init__(f"Item {item_id!r} is its own ancestor")
        self.item_id = item_id


# ASCII-only, so tags stay stable across exports
_NON_WORD = re.compile(r"\W+", re.ASCII)


def normalize_tag(title: Optional[str]) -> str:
    """Lower-case a title and drop every non-word character."""
    return _NON_WORD.sub("", (title or "").lower())


_UNSET = object()


def build_node(
    record: Dict,
    item_lookup: Dict[str, Dict],
    parent: Optional[Node] = None,
    title=_UNSET,
    _ancestors: FrozenSet[str] = frozenset(),
) -> Node:
    """
    Recursively build a node and its whole subtree from an item record.

    `title`, when given (even as None), replaces the record's own title;
    space roots take the space title this way. Child ids missing from
    `item_lookup` are skipped.
    """
    item_id = record["id"]
    if item_id in _ancestors:
        raise CyclicItemError(item_id)

    if title is _UNSET:
        title = record.get("title")
    url = None

    tab = (record.get("data") or {}).get("tab")
    if tab:
        url = tab.get("savedURL")
        if not title:
            title = tab.get("savedTitle")

    parent_tag = parent.tag if parent else "arc"
    node = Node(
        id=item_id,
        title=title,
        url=url,
        tag=f"{parent_tag}-{normalize_tag(title)}",
        parent=parent,
    )

    ancestors = _ancestors | {item_id}
    for child_id in record.get("childrenIds") or []:
        child_record = item_lookup.get(child_id)
        if child_record is None:
            continue
        node.children.append(
            build_node(child_record, item_lookup, node, _ancestors=ancestors)
        )

    return node


class ArcDataParser:
    """Parses Arc sidebar data into one pinned-items tree per space."""

    CONTAINER_INDEX = 1
    PINNED_MARKER = "pinned"

    def __init__(self, data: Dict):
        self.data = data
        self.item_lookup: Dict[str, Dict] = {}

    def parse(self) -> SidebarModel:
        """Parse the document; shape errors are logged and reported, not raised."""
        logging.info("Parsing Arc sidebar data...")

        try:
            container = self.data["sidebar"]["containers"][self.CONTAINER_INDEX]
            groups = container["spaces"]
            self.item_lookup = self._index_items(container["items"])
            spaces = self._build_spaces(groups)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            reason = f"Unexpected sidebar structure: {type(e).__name__}: {e}"
            logging.error(reason)
            return SidebarModel(spaces=[], error=reason)

        logging.debug(f"Found {len(spaces)} spaces with pinned items")
        return SidebarModel(spaces=spaces)

    @staticmethod
    def _index_items(items: List) -> Dict[str, Dict]:
        """Map item ids to records, keeping the first record for duplicate ids."""
        lookup: Dict[str, Dict] = {}
        for item in items:
            # Records are interleaved with bare id strings
            if isinstance(item, dict) and "id" in item:
                lookup.setdefault(item["id"], item)
        return lookup

    @classmethod
    def _pinned_root_id(cls, group: Dict) -> Optional[str]:
        """Return the id that follows the pinned marker, if any."""
        refs = group.get("containerIDs")
        if refs is None:
            refs = group.get("newContainerIDs") or []

        for i, ref in enumerate(refs):
            is_marker = ref == cls.PINNED_MARKER or (
                isinstance(ref, dict) and cls.PINNED_MARKER in ref
            )
            if is_marker:
                return refs[i + 1] if i + 1 < len(refs) else None
        return None

    def _build_spaces(self, groups: List) -> List[Space]:
        spaces = []

        for group in groups:
            if not isinstance(group, dict):
                continue

            try:
                space = self._build_space(group)
            except CyclicItemError as e:
                logging.warning(f"Skipping space '{group.get('title')}': {e}")
                continue
            except RecursionError:
                logging.warning(f"Skipping space '{group.get('title')}': items nested too deeply")
                continue
            except (KeyError, IndexError, TypeError, AttributeError) as e:
                logging.warning(f"Skipping space '{group.get('title')}': {type(e).__name__}: {e}")
                continue

            if space is not None:
                spaces.append(space)

        return spaces

    def _build_space(self, group: Dict) -> Optional[Space]:
        group_id = group.get("id", "unknown")
        root_id = self._pinned_root_id(group)
        if root_id is None:
            logging.debug(f"Skipping space {group_id} - no pinned container")
            return None

        record = self.item_lookup.get(root_id)
        if record is None:
            logging.debug(f"Skipping space {group_id} - pinned container {root_id} not found")
            return None

        root = build_node(record, self.item_lookup, title=group.get("title"))
        return Space(id=group.get("id"), title=group.get("title"), root=root)


def parse_sidebar(data: Dict) -> SidebarModel:
    """Build every space from a parsed sidebar document."""
    return ArcDataParser(data).parse()


def build_spaces(data: Dict) -> List[Space]:
    """
    Build every space from a parsed sidebar document.

    An unreadable document yields an empty list; use `parse_sidebar` to
    tell that apart from a sidebar without pinned items.
    """
    return parse_sidebar(data).spaces
