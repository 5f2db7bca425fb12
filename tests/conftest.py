"""Shared fixtures: sidebar documents shaped like StorableSidebar.json."""

import json

import pytest


def _item(item_id, title=None, children=(), url=None, saved_title=None):
    record = {"id": item_id, "childrenIds": list(children)}
    if title is not None:
        record["title"] = title
    if url is not None or saved_title is not None:
        tab = {}
        if url is not None:
            tab["savedURL"] = url
        if saved_title is not None:
            tab["savedTitle"] = saved_title
        record["data"] = {"tab": tab}
    return record


def _document(spaces, items):
    return {
        "sidebar": {
            "containers": [
                {"global": {}},
                {"spaces": spaces, "items": items},
            ]
        }
    }


@pytest.fixture
def make_item():
    """Factory for item records."""
    return _item


@pytest.fixture
def make_document():
    """Factory wrapping spaces and items in the sidebar envelope."""
    return _document


@pytest.fixture
def sidebar_document():
    """
    Two spaces with pins and one without.

    Dev Tools!
        React.js
            (React Docs)  https://react.dev
            Blog          https://react.dev/blog
        (MDN Web Docs)    https://developer.mozilla.org
    Reading
        Attention Is All You Need  https://arxiv.org/abs/1706.03762
    """
    spaces = [
        "space-dev",
        {
            "id": "space-dev",
            "title": "Dev Tools!",
            "containerIDs": ["unpinned", "c-dev-unpinned", "pinned", "c-dev-pinned"],
        },
        "space-read",
        {
            "id": "space-read",
            "title": "Reading",
            "containerIDs": ["pinned", "c-read-pinned"],
        },
        "space-empty",
        {
            "id": "space-empty",
            "title": "No Pins",
            "containerIDs": ["unpinned", "c-empty-unpinned"],
        },
    ]
    items = [
        "c-dev-pinned",
        _item("c-dev-pinned", title="Pinned", children=["f-react", "ghost", "l-mdn"]),
        "f-react",
        _item("f-react", title="React.js", children=["l-docs", "l-blog"]),
        "l-docs",
        _item("l-docs", url="https://react.dev", saved_title="React Docs"),
        "l-blog",
        _item("l-blog", title="Blog", url="https://react.dev/blog", saved_title="React Blog"),
        "l-mdn",
        _item("l-mdn", url="https://developer.mozilla.org", saved_title="MDN Web Docs"),
        "c-dev-unpinned",
        _item("c-dev-unpinned"),
        "c-read-pinned",
        _item("c-read-pinned", children=["l-paper"]),
        "l-paper",
        _item(
            "l-paper",
            title="Attention Is All You Need",
            url="https://arxiv.org/abs/1706.03762",
        ),
    ]
    return _document(spaces, items)


@pytest.fixture
def sidebar_file(tmp_path, sidebar_document):
    """The sample document written to StorableSidebar.json."""
    path = tmp_path / "StorableSidebar.json"
    path.write_text(json.dumps(sidebar_document), encoding="utf-8")
    return path
