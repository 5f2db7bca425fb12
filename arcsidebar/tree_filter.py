#!/usr/bin/env python3
"""Search sidebar trees while keeping the path to every match."""

from dataclasses import replace
from typing import Iterable, List, Union

from .models import Node, Space


def _as_queries(query: Union[str, Iterable[str]]) -> List[str]:
    if isinstance(query, str):
        return [query]
    return list(query)


def _matches(node: Node, key: str, queries: List[str], exact: bool) -> bool:
    value = getattr(node, key, None)
    if exact:
        return any(value == q for q in queries)
    if value is None:
        return False
    return any(q in str(value) for q in queries)


def filter_tree(
    nodes: List[Node],
    key: str,
    query: Union[str, Iterable[str]],
    exact: bool = True,
    in_place: bool = True,
) -> List[Node]:
    """
    Return the nodes that match, or contain a match, keeping hierarchy.

    A node whose `key` attribute matches any query value is kept whole and
    its children are not examined. Any other node is kept only if some
    descendant matches, and then its children are cut down to the
    filtered subset.

    With `in_place` (the default) those ancestors are modified directly, so
    the input forest reflects the pruning. Otherwise shallow copies of the
    ancestors carry the pruned children and the input is left as is.
    Directly matched nodes are returned as the same objects in both modes.
    """
    queries = _as_queries(query)

    def visit(items: List[Node]) -> List[Node]:
        result = []
        for node in items:
            if _matches(node, key, queries, exact):
                result.append(node)
                continue

            children = visit(node.children)
            if not children:
                continue
            if in_place:
                node.children = children
            else:
                node = replace(node, children=children)
            result.append(node)
        return result

    return visit(nodes)


def find_pinned_items(spaces: List[Space], space_names: Iterable[str]) -> List[Node]:
    """Collect the pinned items of every space whose title is listed."""
    names = set(space_names)
    items: List[Node] = []
    for space in spaces:
        if space.title in names:
            items.extend(space.pinned_items)
    return items
