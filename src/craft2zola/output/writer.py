"""Writing converted notes into a Zola content directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Dict, Set

import frontmatter

from craft2zola.config import (
    DEFAULT_ROOT_TEMPLATE,
    DEFAULT_ROOT_TITLE,
    SECTION_GLYPH,
    SECTION_INDEX_NAME,
)
from craft2zola.exceptions import ExportStructureError, FileAccessError
from craft2zola.index.storage import DocumentIndex
from craft2zola.models import Document
from craft2zola.utils.paths import slugify_path

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class WriteStats:
    documents: int = 0
    assets: int = 0
    sections: int = 0


def render_section(title: str, **extra: str) -> str:
    post = frontmatter.Post(
        "",
        title=f"{SECTION_GLYPH} {title}",
        sort_by="weight",
        **extra,
        insert_anchor_links="left",
    )
    return frontmatter.dumps(post, sort_keys=False) + "\n"


class ZolaWriter:
    """Materialises a finished ``DocumentIndex`` below ``content_root``."""

    def __init__(
        self,
        content_root: Path,
        *,
        root_title: str = DEFAULT_ROOT_TITLE,
        root_template: str = DEFAULT_ROOT_TEMPLATE,
    ) -> None:
        self.content_root = Path(content_root)
        self.root_title = root_title
        self.root_template = root_template

    def write(self, index: DocumentIndex) -> WriteStats:
        stats = WriteStats()
        for document in index:
            self._write_document(document, stats)

        bundles: Set[PurePosixPath] = {doc.slug_path.parent for doc in index if doc.is_index}
        for slug_dir, title in sorted(self._sections(index).items()):
            if slug_dir in bundles:
                continue
            if self._write_section(slug_dir, render_section(title)):
                stats.sections += 1

        root_section = render_section(self.root_title, template=self.root_template)
        self._write_text(self.content_root / SECTION_INDEX_NAME, root_section)
        stats.sections += 1

        LOGGER.info(
            "Wrote %d notes, %d media files and %d section files to %s",
            stats.documents,
            stats.assets,
            stats.sections,
            self.content_root,
        )
        return stats

    def _sections(self, index: DocumentIndex) -> Dict[PurePosixPath, str]:
        sections: Dict[PurePosixPath, str] = {}
        # first name in sorted order titles directories that share a slug
        for relative_dir in sorted(index.directories):
            source = PurePosixPath(relative_dir)
            sections.setdefault(slugify_path(source), source.name)
        return sections

    def _write_document(self, document: Document, stats: WriteStats) -> None:
        output_path = self.content_root / document.slug_path
        self._write_text(output_path, document.body)
        stats.documents += 1

        if not document.assets:
            return
        if document.assets_source_dir is None:
            raise ExportStructureError(
                "Note has media files but no media directory",
                path=document.source_path,
            )
        for asset in document.assets:
            source = document.assets_source_dir / asset
            try:
                shutil.copy2(source, output_path.parent / asset)
            except OSError as exc:
                raise FileAccessError(f"Unable to copy media file: {exc}", path=source) from exc
            stats.assets += 1

    def _write_section(self, slug_dir: PurePosixPath, content: str) -> bool:
        section_path = self.content_root / slug_dir / SECTION_INDEX_NAME
        if section_path.exists():
            return False
        self._write_text(section_path, content)
        return True

    def _write_text(self, path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FileAccessError(f"Unable to write output: {exc}", path=path) from exc
        LOGGER.debug("Wrote %s", path)
