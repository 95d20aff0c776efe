"""In-memory index of exported notes."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Set

from craft2zola.exceptions import IndexSealedError
from craft2zola.models import Document

LOGGER = logging.getLogger(__name__)


class DocumentIndex:
    """Notes keyed by their relative key, plus the plain directories seen.

    The index goes through two phases. While open, discovery and asset
    binding may add notes and change their paths. ``snapshot()`` seals it:
    paths are final from then on and only bodies may be committed.
    """

    def __init__(self) -> None:
        self._documents: Dict[str, Document] = {}
        self.directories: Set[str] = set()
        self._sealed = False

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, key: object) -> bool:
        return key in self._documents

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents.values())

    @property
    def sealed(self) -> bool:
        return self._sealed

    def add(self, document: Document) -> None:
        self._ensure_open(document.relative_key)
        self._documents[document.relative_key] = document
        LOGGER.debug("Indexed %s -> %s", document.relative_key, document.slug_path)

    def add_directory(self, relative_dir: str) -> None:
        self.directories.add(relative_dir)

    def get(self, key: str) -> Document | None:
        return self._documents.get(key)

    def get_for_update(self, key: str) -> Document | None:
        """Return a note whose path or assets are about to change."""
        self._ensure_open(key)
        return self._documents.get(key)

    def snapshot(self) -> Mapping[str, Document]:
        """Seal the index and return a read-only view for link resolution."""
        self._sealed = True
        return MappingProxyType(dict(self._documents))

    def commit_bodies(self, bodies: Mapping[str, str]) -> None:
        """Store rewritten bodies computed against a snapshot."""
        for key, body in bodies.items():
            self._documents[key].body = body
        LOGGER.debug("Committed %d rewritten bodies", len(bodies))

    def _ensure_open(self, key: str) -> None:
        if self._sealed:
            raise IndexSealedError(
                "Document paths cannot change once links have been resolved",
                text=key,
            )
