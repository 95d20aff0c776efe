"""Discovery of notes, folders and media in an export tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Tuple

from craft2zola.config import DOCUMENT_SUFFIX
from craft2zola.index.assets import AssetBinder, is_media_dir
from craft2zola.index.storage import DocumentIndex
from craft2zola.models import Document, NoteType
from craft2zola.utils.files import file_timestamps, iter_tree
from craft2zola.utils.paths import relative_key, slug_document_path

LOGGER = logging.getLogger(__name__)

TimestampProvider = Callable[[Path], Tuple[str, str]]


@dataclass(slots=True)
class WalkStats:
    documents: int = 0
    directories: int = 0
    media_dirs: int = 0
    assets: int = 0
    skipped: int = 0


def build_document(path: Path, root: Path, timestamps: TimestampProvider = file_timestamps) -> Document:
    """Create the index record for a note file."""
    display_name = path.with_suffix("").name
    key = relative_key(path, root)
    created_at, modified_at = timestamps(path)
    return Document(
        note_type=NoteType.from_name(display_name),
        source_path=path,
        relative_key=key,
        slug_path=slug_document_path(key),
        display_name=display_name,
        created_at=created_at,
        modified_at=modified_at,
    )


class Walker:
    """Walks an export once and fills a ``DocumentIndex``."""

    def __init__(
        self,
        root: Path,
        index: DocumentIndex | None = None,
        *,
        timestamps: TimestampProvider = file_timestamps,
    ) -> None:
        self.root = Path(root)
        self.index = index if index is not None else DocumentIndex()
        self.binder = AssetBinder(self.index, self.root)
        self.timestamps = timestamps

    def walk(self) -> WalkStats:
        stats = WalkStats()
        for path in iter_tree(self.root):
            if path.is_dir():
                self._visit_directory(path, stats)
            else:
                self._visit_file(path, stats)
        LOGGER.info(
            "Discovered %d notes, %d folders and %d media files in %s",
            stats.documents,
            stats.directories,
            stats.assets,
            self.root,
        )
        return stats

    def _visit_directory(self, path: Path, stats: WalkStats) -> None:
        if is_media_dir(path):
            self.binder.bind_media_dir(path)
            stats.media_dirs += 1
            return
        self.index.add_directory(path.relative_to(self.root).as_posix())
        stats.directories += 1

    def _visit_file(self, path: Path, stats: WalkStats) -> None:
        if path.suffix != DOCUMENT_SUFFIX:
            if self.binder.bind_file(path):
                stats.assets += 1
            else:
                stats.skipped += 1
            return
        self.index.add(build_document(path, self.root, self.timestamps))
        stats.documents += 1
