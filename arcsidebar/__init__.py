"""Rebuild Arc Browser sidebar spaces and export their pinned items."""

from .models import Node, Space, SidebarModel
from .arc_parser import (
    ArcDataError,
    ArcDataParser,
    CyclicItemError,
    build_node,
    build_spaces,
    normalize_tag,
    parse_sidebar,
)
from .tree_filter import filter_tree, find_pinned_items
from .arc_reader import ArcDataReader, get_pinned_items, get_spaces, load_sidebar
from .console import Colors, setup_logging
from .config import ExporterSettings, load_settings
from .exporters import (
    ExportReport,
    HTMLExporter,
    count_items,
    export_spaces,
    export_to_html,
    format_space_note,
)

__all__ = [
    # Models
    "Node",
    "Space",
    "SidebarModel",
    # Tree builder
    "ArcDataError",
    "ArcDataParser",
    "CyclicItemError",
    "build_node",
    "build_spaces",
    "normalize_tag",
    "parse_sidebar",
    # Subtree filter
    "filter_tree",
    "find_pinned_items",
    # Reader
    "ArcDataReader",
    "get_pinned_items",
    "get_spaces",
    "load_sidebar",
    # Console and settings
    "Colors",
    "setup_logging",
    "ExporterSettings",
    "load_settings",
    # Exporters
    "ExportReport",
    "HTMLExporter",
    "count_items",
    "export_spaces",
    "export_to_html",
    "format_space_note",
]
