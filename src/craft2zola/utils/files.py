"""Utility helpers for working with files."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Tuple

from craft2zola.config import SENTINEL_NAME
from craft2zola.exceptions import FileAccessError


def iter_tree(root: Path) -> Iterator[Path]:
    """Yield every entry below ``root``, files before sibling directories.

    Each subdirectory is yielded right before its own contents. Asset
    binding relies on this order: a note must be indexed before the
    ``.assets`` folder next to it is visited.
    """
    try:
        children = sorted(root.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        raise FileAccessError(f"Unable to list directory: {exc}", path=root) from exc

    files = [child for child in children if not child.is_dir()]
    directories = [child for child in children if child.is_dir()]

    for item in files:
        if item.name == SENTINEL_NAME:
            continue
        yield item
    for item in directories:
        yield item
        yield from iter_tree(item)


def _format_timestamp(value: float) -> str:
    stamp = datetime.fromtimestamp(value, tz=timezone.utc)
    return stamp.isoformat(timespec="seconds").replace("+00:00", "Z")


def file_timestamps(path: Path) -> Tuple[str, str]:
    """Return RFC 3339 (created, modified) timestamps for a file."""
    try:
        stat = path.stat()
    except OSError as exc:
        raise FileAccessError(f"Unable to read file metadata: {exc}", path=path) from exc
    created = getattr(stat, "st_birthtime", None)
    if created is None:
        created = stat.st_ctime
    return _format_timestamp(created), _format_timestamp(stat.st_mtime)
