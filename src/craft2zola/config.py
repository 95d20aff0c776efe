"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from slugify import slugify

DOCUMENT_SUFFIX = ".md"
MEDIA_DIR_SUFFIX = ".assets"
BINARY_SUFFIX = ".bin"
PREVIEW_SUFFIX = ".png"
BINARY_PREVIEW_MARKER = "_bin_preview"
# macOS Finder metadata, never part of an export
SENTINEL_NAME = ".DS_Store"

INDEX_STEM = "index"
SECTION_INDEX_NAME = "_index.md"
SECTION_GLYPH = "🌳"

DEFAULT_ROOT_TITLE = "Garden"
DEFAULT_ROOT_TEMPLATE = "garden.html"


@dataclass(slots=True)
class ConvertConfig:
    input_dir: Path
    output_dir: Path
    root_title: str = DEFAULT_ROOT_TITLE
    root_template: str = DEFAULT_ROOT_TEMPLATE

    def __post_init__(self) -> None:
        self.input_dir = Path(self.input_dir)
        self.output_dir = Path(self.output_dir)

    @property
    def root_name(self) -> str:
        """Name of the export's top-level directory."""
        return self.input_dir.name

    @property
    def root_slug(self) -> str:
        """Prefix shared by every internal link in the generated site."""
        return slugify(self.root_name)

    @property
    def content_root(self) -> Path:
        return self.output_dir / self.root_slug
