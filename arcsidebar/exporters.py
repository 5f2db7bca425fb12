#!/usr/bin/env python3
"""Project sidebar trees into Markdown notes and HTML bookmark files."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .arc_parser import ArcDataError
from .arc_reader import load_sidebar
from .config import ExporterSettings
from .models import Node, Space
from .tree_filter import find_pinned_items


@dataclass
class ExportReport:
    """Outcome of exporting several spaces."""
    written: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def count_items(nodes: Iterable[Node]) -> Tuple[int, int]:
    """Recursively count (links, folders) in a list of nodes."""
    links, folders = 0, 0
    for top in nodes:
        for node in top.walk():
            if node.is_link:
                links += 1
            else:
                folders += 1
    return links, folders


# ============== Markdown ==============

def _format_item(item: Node) -> str:
    return f"### {item.title or 'Untitled'}\n- **Link**: {item.url or ''}"


def format_space_note(
    name: str,
    pinned_items: List[Node],
    export_date: Optional[date] = None,
) -> str:
    """Render the pinned items of one space as a Markdown note."""
    if export_date is None:
        export_date = date.today()
    count = len(pinned_items)

    frontmatter = (
        "---\n"
        f'arc_spaces: "{name}"\n'
        f"pinned_count: {count}\n"
        f"export_date: {export_date.isoformat()}\n"
        "---\n"
        "\n"
        f"# Arc Space: {name}\n"
        "\n"
        f"Pinned items ({count}) from Arc browser space.\n"
        "\n"
    )

    if count == 0:
        return f"{frontmatter}No pinned items found."

    sections = []
    for item in pinned_items:
        if item.children:
            children = "\n".join(_format_item(child) for child in item.children)
            sections.append(f"## {item.title or 'Untitled'}\n{children}")
        else:
            sections.append(_format_item(item))

    return frontmatter + "\n\n".join(sections)


# ============== HTML ==============

class HTMLExporter:
    """Exports spaces to a Netscape bookmark file."""

    def __init__(self, spaces: List[Space]):
        self.spaces = spaces

    def export(self) -> str:
        """Export bookmarks to HTML string."""
        logging.info("Converting bookmarks to HTML...")

        html_parts = [
            '<!DOCTYPE NETSCAPE-Bookmark-file-1>',
            '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">',
            '<TITLE>Bookmarks</TITLE>',
            '<H1>Bookmarks</H1>',
            '<DL><p>'
        ]

        for space in self.spaces:
            html_parts.extend(self._folder_to_html(space.title, space.pinned_items, level=1))

        html_parts.append('</DL><p>')
        return '\n'.join(html_parts)

    def _folder_to_html(self, title: Optional[str], children: List[Node], level: int) -> List[str]:
        indent = '\t' * level
        lines = [
            f'{indent}<DT><H3>{self._escape_html(title)}</H3>',
            f'{indent}<DL><p>'
        ]

        for node in children:
            if node.is_link:
                lines.append(
                    f'{indent}\t<DT><A HREF="{self._escape_html(node.url)}">'
                    f'{self._escape_html(node.title)}</A>'
                )
                # A link with nested items also gets a folder of its own
                if node.children:
                    lines.extend(self._folder_to_html(node.title, node.children, level + 1))
            else:
                lines.extend(self._folder_to_html(node.title, node.children, level + 1))

        lines.append(f'{indent}</DL><p>')
        return lines

    @staticmethod
    def _escape_html(text: Optional[str]) -> str:
        if text is None:
            text = ""
        return (text.replace("&", "&amp;")
                   .replace("<", "&lt;")
                   .replace(">", "&gt;")
                   .replace('"', "&quot;"))


# ============== Files ==============

def get_output_folder(settings: ExporterSettings) -> Path:
    """Resolve the configured output folder, creating it when missing."""
    if not settings.output_folder:
        return Path.cwd()

    folder = Path(settings.output_folder).expanduser()
    if not folder.is_dir():
        logging.info(f"Creating output folder {folder}")
        folder.mkdir(parents=True, exist_ok=True)
    return folder


def create_export_file(folder: Path, filename: str, content: str) -> Path:
    """Write `content` to a new .md file in `folder`, never overwriting."""
    if filename.endswith(".md"):
        filename = filename[:-len(".md")]

    path = folder / f"{filename}.md"
    counter = 1
    while path.exists():
        path = folder / f"{filename} ({counter}).md"
        counter += 1

    with path.open("w", encoding="utf-8") as f:
        f.write(content)
    return path


def _safe_filename(name: str) -> str:
    return name.replace("/", "-").replace("\\", "-").strip() or "Untitled"


def export_spaces(
    space_names: Iterable[str],
    settings: ExporterSettings,
    export_date: Optional[date] = None,
) -> ExportReport:
    """Write one Markdown note per named space."""
    report = ExportReport()
    sidebar = load_sidebar(settings.json_path)
    if not sidebar.ok:
        report.errors.append(f"Sidebar unreadable: {sidebar.error}")
        return report

    folder = get_output_folder(settings)

    for name in space_names:
        pinned_items = find_pinned_items(sidebar.spaces, [name])
        if not pinned_items:
            report.errors.append(f"{name}: No pinned items")
            continue

        content = format_space_note(name, pinned_items, export_date)
        try:
            path = create_export_file(folder, _safe_filename(f"Arc - {name}"), content)
        except OSError as e:
            logging.error(f"Export failed for {name}: {e}")
            report.errors.append(f"{name}: {e}")
            continue

        logging.info(f"Exported '{name}' to {path}")
        report.written.append(path)

    return report


def export_to_html(
    settings: ExporterSettings,
    output_path: Optional[Path] = None,
) -> Tuple[int, int]:
    """
    Export the pinned items of every space to an HTML bookmarks file.

    Raises ArcDataError, before writing anything, when the sidebar
    cannot be read.

    Returns:
        Tuple of (total_links, total_spaces)
    """
    sidebar = load_sidebar(settings.json_path)
    if not sidebar.ok:
        raise ArcDataError(sidebar.error)
    html_content = HTMLExporter(sidebar.spaces).export()

    if output_path is None:
        current_date = datetime.now().strftime("%Y_%m_%d")
        output_path = get_output_folder(settings) / f"arc_bookmarks_{current_date}.html"

    with output_path.open("w", encoding="utf-8") as f:
        f.write(html_content)

    logging.info(f"Export completed: {output_path}")

    links = sum(count_items(space.pinned_items)[0] for space in sidebar.spaces)
    return links, len(sidebar.spaces)
