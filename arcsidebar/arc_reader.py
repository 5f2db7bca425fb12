#!/usr/bin/env python3
"""Read Arc's StorableSidebar.json (or an archived snapshot of it)."""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .arc_parser import ArcDataError, parse_sidebar
from .models import Node, SidebarModel, Space
from .snapshots import decode_lz4_json, is_lz4_json
from .tree_filter import find_pinned_items


class ArcDataReader:
    """Handles locating and reading Arc browser data."""

    FILENAME = "StorableSidebar.json"

    @classmethod
    def get_arc_data_path(cls) -> Path:
        """Get the path to Arc's data file."""
        return Path(os.path.expanduser("~/Library/Application Support/Arc/")) / cls.FILENAME

    @classmethod
    def locate(cls, path: Optional[Path] = None) -> Path:
        """Resolve the sidebar file: explicit path, current directory, Arc's directory."""
        if path is not None:
            path = Path(path)
            if path.exists():
                return path
            raise ArcDataError(f"Arc sidebar file not found: {path}. Ensure Arc is installed.")

        current_file = Path(cls.FILENAME)
        if current_file.exists():
            logging.debug(f"Found {cls.FILENAME} in current directory")
            return current_file

        library_path = cls.get_arc_data_path()
        if library_path.exists():
            logging.debug(f"Found {cls.FILENAME} in Arc's data directory")
            return library_path

        raise ArcDataError(
            f'File not found. Look for "{cls.FILENAME}" '
            f'in the Arc browser data directory: {library_path.parent}'
        )

    @classmethod
    def read_data(cls, path: Path) -> Dict:
        """Read a sidebar document, plain JSON or mozlz4 snapshot."""
        logging.info(f"Reading Arc browser data from {path}...")

        with open(path, "rb") as f:
            raw = f.read()

        if is_lz4_json(raw):
            return decode_lz4_json(raw, path)

        try:
            return json.loads(raw)
        except ValueError as e:
            raise ArcDataError(f"Invalid JSON in {path}: {e}") from e


def load_sidebar(path: Optional[Path] = None) -> SidebarModel:
    """
    Read and parse the sidebar file.

    A missing file raises ArcDataError. A file that cannot be decoded is
    logged and reported through `SidebarModel.error`.
    """
    location = ArcDataReader.locate(path)
    try:
        data = ArcDataReader.read_data(location)
    except ArcDataError as e:
        logging.error(str(e))
        return SidebarModel(spaces=[], error=str(e))
    return parse_sidebar(data)


def get_spaces(path: Optional[Path] = None) -> List[Space]:
    return load_sidebar(path).spaces


def get_pinned_items(space_names: Iterable[str], path: Optional[Path] = None) -> List[Node]:
    """Get the pinned items of the named spaces, in space order."""
    return find_pinned_items(get_spaces(path), space_names)
