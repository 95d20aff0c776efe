"""Core craft2zola data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import List, Optional

from craft2zola.config import DOCUMENT_SUFFIX, INDEX_STEM


class NoteType(Enum):
    """Maturity tier of a note, signalled by a glyph in its title."""

    EVERGREEN = "🌲"
    POTTED = "🪴"
    SEEDLING = "🌱"
    NONE = " "

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def weight(self) -> int:
        """Sort weight in the generated site; lower sorts first."""
        return _WEIGHTS[self]

    @classmethod
    def from_name(cls, name: str) -> "NoteType":
        """Classify a display name by the first marker found in priority order.

        Only presence matters, not position: a name carrying both a seedling
        and an evergreen marker is an evergreen note.
        """
        for marker, note_type in NOTE_MARKERS:
            if marker in name:
                return note_type
        return cls.NONE


_WEIGHTS = {
    NoteType.EVERGREEN: 1,
    NoteType.POTTED: 2,
    NoteType.SEEDLING: 3,
    NoteType.NONE: 4,
}

NOTE_MARKERS = (
    (NoteType.EVERGREEN.glyph, NoteType.EVERGREEN),
    (NoteType.POTTED.glyph, NoteType.POTTED),
    (NoteType.SEEDLING.glyph, NoteType.SEEDLING),
)


@dataclass(slots=True)
class Document:
    """One exported note and everything needed to place it in the site."""

    note_type: NoteType
    source_path: Path
    relative_key: str
    slug_path: PurePosixPath
    display_name: str
    created_at: str
    modified_at: str
    body: str = ""
    assets: Optional[List[str]] = None
    assets_source_dir: Optional[Path] = None

    @property
    def is_index(self) -> bool:
        return self.slug_path.stem == INDEX_STEM

    def move_to_index(self, assets_source_dir: Path) -> None:
        """Turn the page into a bundle so it can share a folder with its media.

        ``cryptography/aes.md`` becomes ``cryptography/aes/index.md``.
        """
        self.slug_path = (self.slug_path.with_suffix("") / INDEX_STEM).with_suffix(DOCUMENT_SUFFIX)
        self.assets_source_dir = assets_source_dir

    def add_asset(self, name: str) -> None:
        if self.assets is None:
            self.assets = []
        self.assets.append(name)
