#!/usr/bin/env python3
"""Archive Arc sidebar data as mozlz4 compressed snapshots."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import lz4.block

from .arc_parser import ArcDataError

MAGIC = b"mozLz40\0"
SNAPSHOT_PREFIX = "StorableSidebar.jsonlz4.backup_"


# ============== LZ4 File Operations ==============

def is_lz4_json(raw: bytes) -> bool:
    return raw[:len(MAGIC)] == MAGIC


def decode_lz4_json(raw: bytes, source: Path) -> Dict:
    """Decode mozlz4 compressed JSON bytes."""
    if not is_lz4_json(raw):
        raise ArcDataError(f"Invalid mozlz4 format: {source}")
    try:
        return json.loads(lz4.block.decompress(raw[len(MAGIC):]))
    except (lz4.block.LZ4BlockError, ValueError) as e:
        raise ArcDataError(f"Corrupt snapshot {source}: {e}") from e


def read_snapshot(path: Path) -> Dict:
    """Read a mozlz4 compressed snapshot."""
    with open(path, "rb") as f:
        return decode_lz4_json(f.read(), path)


def write_lz4_json(path: Path, data: Dict):
    """Write mozlz4 compressed JSON file."""
    compressed = lz4.block.compress(json.dumps(data).encode("utf-8"))
    with open(path, "wb") as f:
        f.write(MAGIC)
        f.write(compressed)


# ============== Snapshot Directory ==============

def write_snapshot(data: Dict, directory: Path, timestamp: Optional[str] = None) -> Path:
    """Write `data` as a new snapshot and return its path."""
    if timestamp is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{SNAPSHOT_PREFIX}{timestamp}"
    write_lz4_json(path, data)

    logging.info(f"Snapshot written: {path}")
    return path


def list_snapshots(directory: Path) -> List[Tuple[Path, str]]:
    """
    Get all snapshot files sorted by timestamp (newest first).
    Returns list of (path, timestamp) tuples.
    """
    if not directory.exists():
        return []

    snapshots = [
        (f, f.name.replace(SNAPSHOT_PREFIX, ""))
        for f in directory.glob(f"{SNAPSHOT_PREFIX}*")
    ]
    snapshots.sort(key=lambda x: x[1], reverse=True)
    return snapshots


def delete_snapshots(directory: Path) -> int:
    """
    Delete all snapshot files.
    Returns number of deleted files.
    """
    deleted = 0
    for path, _ in list_snapshots(directory):
        path.unlink()
        deleted += 1
    return deleted
