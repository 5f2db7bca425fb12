#!/usr/bin/env python3
"""
Arc Sidebar Exporter

List Arc Browser spaces, export their pinned items to Markdown notes or an
HTML bookmarks file, and search them.
"""

import sys
from typing import List, Optional

from arcsidebar import (
    ArcDataError,
    ArcDataReader,
    Colors,
    ExporterSettings,
    Node,
    SidebarModel,
    export_spaces,
    export_to_html,
    filter_tree,
    load_settings,
    load_sidebar,
    setup_logging,
)
from arcsidebar.snapshots import delete_snapshots, list_snapshots, write_snapshot


def print_header():
    """Print application header."""
    print()
    print("=" * 60)
    print(f"{Colors.BOLD}Arc Sidebar Exporter{Colors.RESET}")
    print("=" * 60)


def print_menu():
    """Print main menu."""
    print()
    print("Choose an option:")
    print()
    print(f"  {Colors.CYAN}1{Colors.RESET}. List spaces")
    print(f"  {Colors.CYAN}2{Colors.RESET}. Export spaces to Markdown notes")
    print(f"  {Colors.CYAN}3{Colors.RESET}. Export all pinned items to HTML file")
    print(f"  {Colors.CYAN}4{Colors.RESET}. Search pinned items")
    print()
    print(f"  {Colors.YELLOW}5{Colors.RESET}. Archive sidebar snapshot")
    print(f"  {Colors.YELLOW}6{Colors.RESET}. Delete all snapshots")
    print()
    print(f"  {Colors.GREY}0{Colors.RESET}. Exit")
    print()


def print_section(title: str):
    print()
    print("-" * 60)
    print(title)
    print("-" * 60)


def parse_selection(choice: str, count: int) -> Optional[List[int]]:
    """
    Parse "1,3" / "all" into zero-based indexes.
    Returns None when any entry is not a valid number in range.
    """
    choice = choice.strip().lower()
    if choice in ("all", "*"):
        return list(range(count))

    indexes = []
    for part in choice.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            idx = int(part) - 1
        except ValueError:
            return None
        if not 0 <= idx < count:
            return None
        if idx not in indexes:
            indexes.append(idx)
    return indexes or None


def render_tree(nodes: List[Node], depth: int = 0) -> List[str]:
    """Render nodes as indented lines, links with their URL."""
    lines = []
    indent = "  " * depth
    for node in nodes:
        title = node.title or "Untitled"
        if node.url:
            lines.append(f"{indent}- {title} {Colors.GREY}{node.url}{Colors.RESET}")
        else:
            lines.append(f"{indent}+ {Colors.BOLD}{title}{Colors.RESET}")
        lines.extend(render_tree(node.children, depth + 1))
    return lines


def read_sidebar(settings: ExporterSettings) -> SidebarModel:
    """Load the sidebar, raising ArcDataError when it cannot be read."""
    sidebar = load_sidebar(settings.json_path)
    if not sidebar.ok:
        raise ArcDataError(sidebar.error)
    return sidebar


def list_spaces(settings: ExporterSettings):
    """Print every space with its pinned item count."""
    print_section("Spaces")

    sidebar = load_sidebar(settings.json_path)
    if not sidebar.ok:
        print(f"\n{Colors.RED}Could not read sidebar:{Colors.RESET} {sidebar.error}")
        return
    if not sidebar.spaces:
        print(f"\n{Colors.YELLOW}No spaces with pinned items found.{Colors.RESET}")
        return

    for i, space in enumerate(sidebar.spaces, 1):
        print(f"  {Colors.CYAN}{i}{Colors.RESET}. {space.title} "
              f"{Colors.GREY}({len(space.pinned_items)} pinned){Colors.RESET}")


def export_notes(settings: ExporterSettings):
    """Export selected spaces to Markdown notes."""
    print_section("Export to Markdown")

    sidebar = read_sidebar(settings)
    titles = [space.title for space in sidebar.spaces]
    if not titles:
        print(f"\n{Colors.YELLOW}No spaces found in Arc.{Colors.RESET}")
        return

    for i, title in enumerate(titles, 1):
        print(f"  {Colors.CYAN}{i}{Colors.RESET}. {title}")

    choice = input("\nSpaces to export (e.g. 1,3 or all): ")
    indexes = parse_selection(choice, len(titles))
    if indexes is None:
        print(f"{Colors.RED}Invalid selection.{Colors.RESET}")
        return

    report = export_spaces([titles[i] for i in indexes], settings)

    print()
    print(f"{Colors.GREEN}{len(report.written)} spaces exported.{Colors.RESET}")
    for path in report.written:
        print(f"  {path}")
    if report.errors:
        print(f"{Colors.RED}Errors:{Colors.RESET}")
        for error in report.errors:
            print(f"  - {error}")


def export_html(settings: ExporterSettings):
    """Export all pinned items to an HTML bookmarks file."""
    print_section("Export to HTML")

    links, spaces = export_to_html(settings)
    print()
    print(f"{Colors.GREEN}Export completed!{Colors.RESET}")
    print(f"  Links: {links}")
    print(f"  Spaces: {spaces}")


def search_items(settings: ExporterSettings):
    """Search pinned items by title or URL."""
    print_section("Search")

    field = input("Search in (t)itle or (u)rl [t]: ").strip().lower()
    key = "url" if field.startswith("u") else "title"
    query = input("Text to find: ").strip()
    if not query:
        print(f"{Colors.RED}Empty query.{Colors.RESET}")
        return

    sidebar = read_sidebar(settings)
    roots = [space.root for space in sidebar.spaces]
    matches = filter_tree(roots, key, query, exact=False)

    if not matches:
        print(f"\n{Colors.YELLOW}Nothing matches '{query}'.{Colors.RESET}")
        return

    print()
    for line in render_tree(matches):
        print(line)


def archive_snapshot(settings: ExporterSettings):
    """Archive the current sidebar file as a compressed snapshot."""
    print_section("Archive Snapshot")

    location = ArcDataReader.locate(settings.json_path)
    data = ArcDataReader.read_data(location)
    path = write_snapshot(data, settings.snapshot_dir)
    print(f"\n{Colors.GREEN}Snapshot saved:{Colors.RESET} {path}")


def delete_snapshots_menu(settings: ExporterSettings):
    """Delete all snapshot files."""
    print_section("Delete All Snapshots")

    snapshots = list_snapshots(settings.snapshot_dir)
    if not snapshots:
        print(f"\n{Colors.YELLOW}No snapshots found.{Colors.RESET}")
        return

    print(f"\nFound {len(snapshots)} snapshots:")
    for _, ts in snapshots:
        formatted = f"{ts[:4]}-{ts[4:6]}-{ts[6:8]} {ts[9:11]}:{ts[11:13]}:{ts[13:15]}"
        print(f"  - {formatted}")

    print()
    confirm = input(f"{Colors.YELLOW}Delete all snapshots? (yes/no):{Colors.RESET} ").strip().lower()
    if confirm != "yes":
        print("Cancelled.")
        return

    deleted = delete_snapshots(settings.snapshot_dir)
    print(f"\n{Colors.GREEN}Deleted {deleted} snapshot files.{Colors.RESET}")


ACTIONS = {
    "1": list_spaces,
    "2": export_notes,
    "3": export_html,
    "4": search_items,
    "5": archive_snapshot,
    "6": delete_snapshots_menu,
}


def main():
    """Main entry point."""
    setup_logging(verbose="-v" in sys.argv[1:])
    settings = load_settings()
    print_header()

    while True:
        print_menu()

        choice = input("Select option: ").strip()

        if choice == "0" or choice.lower() == "q":
            print("\nBye!")
            sys.exit(0)

        action = ACTIONS.get(choice)
        if action is None:
            print(f"\n{Colors.RED}Invalid option.{Colors.RESET}")
            continue

        try:
            action(settings)
        except ArcDataError as e:
            print(f"\n{Colors.RED}Error:{Colors.RESET} {e}")
        except OSError as e:
            print(f"\n{Colors.RED}File error:{Colors.RESET} {e}")


def run():
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nBye!")
        sys.exit(0)


if __name__ == "__main__":
    run()
