"""Binding of media files to the note that owns them."""

from __future__ import annotations

import logging
from pathlib import Path

from craft2zola.config import BINARY_PREVIEW_MARKER, BINARY_SUFFIX, MEDIA_DIR_SUFFIX, PREVIEW_SUFFIX
from craft2zola.exceptions import ExportStructureError
from craft2zola.index.storage import DocumentIndex

LOGGER = logging.getLogger(__name__)


def is_media_dir(path: Path) -> bool:
    return path.name.endswith(MEDIA_DIR_SUFFIX)


def owner_key(media_dir: Path, root: Path) -> str:
    """Relative key of the note owning ``media_dir``.

    "Woodworking/Dovetail Joint.assets" -> "Woodworking/Dovetail Joint"
    """
    rel = media_dir.relative_to(root).as_posix()
    return rel[: -len(MEDIA_DIR_SUFFIX)]


class AssetBinder:
    """Attaches ``<note>.assets`` folders and their files to ``<note>``."""

    def __init__(self, index: DocumentIndex, root: Path) -> None:
        self.index = index
        self.root = Path(root)
        self.bound_assets = 0

    def bind_media_dir(self, media_dir: Path) -> None:
        key = owner_key(media_dir, self.root)
        document = self.index.get_for_update(key)
        if document is None:
            raise ExportStructureError(
                "Found a media directory without a matching note",
                path=media_dir,
                text=key,
            )
        # Note and media share one folder in the site, so the note becomes its index page
        document.move_to_index(media_dir)
        LOGGER.debug("Bound media directory %s to %s -> %s", media_dir, key, document.slug_path)

    def bind_file(self, asset_path: Path) -> bool:
        """Attach a loose file to its note. Returns False when it is skipped."""
        suffix = asset_path.suffix.lower()
        # The .bin payload cannot be rendered; its generated preview stands in for it
        if suffix == BINARY_SUFFIX:
            LOGGER.debug("Skipping binary payload %s", asset_path)
            return False
        # Previews of anything but .bin files duplicate an asset we already keep
        if suffix == PREVIEW_SUFFIX and BINARY_PREVIEW_MARKER not in asset_path.name:
            LOGGER.debug("Skipping redundant preview %s", asset_path)
            return False

        container = asset_path.parent
        if not is_media_dir(container):
            raise ExportStructureError(
                "Found a non-note file outside of any media directory",
                path=asset_path,
            )
        key = owner_key(container, self.root)
        document = self.index.get_for_update(key)
        if document is None:
            raise ExportStructureError(
                "Found a media file without a matching note",
                path=asset_path,
                text=key,
            )
        document.add_asset(asset_path.name)
        self.bound_assets += 1
        LOGGER.debug("Bound asset %s to %s", asset_path.name, key)
        return True
