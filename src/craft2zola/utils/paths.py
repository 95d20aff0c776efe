"""Helpers turning export paths into site paths."""

from __future__ import annotations

from pathlib import PurePath, PurePosixPath

import emoji
from slugify import slugify

from craft2zola.config import DOCUMENT_SUFFIX


def strip_emoji(segment: str) -> str:
    """Remove every emoji grapheme from a single path segment.

    slugify would otherwise spell emoji out, so "🚀 Space Ship" would end
    up as "rocket-space-ship".
    """
    return emoji.replace_emoji(segment, replace="")


def slugify_segment(segment: str) -> str:
    # a segment made only of emoji keeps its spelled-out form
    return slugify(strip_emoji(segment)) or slugify(emoji.demojize(segment))


def slugify_path(path: PurePath | str) -> PurePosixPath:
    """Slugify each component of ``path`` on its own, keeping the hierarchy."""
    parts = PurePosixPath(path).parts if isinstance(path, str) else path.parts
    return PurePosixPath(*(slugify_segment(part) for part in parts))


def slug_document_path(relative_key: str) -> PurePosixPath:
    """Destination path of a document given its extension-less relative key.

    Example: "🌲 Woodworking/Joinery Techniques/Dovetail Joint"
    -> "woodworking/joinery-techniques/dovetail-joint.md"
    """
    slug = slugify_path(relative_key)
    return slug.with_name(slug.name + DOCUMENT_SUFFIX)


def slug_anchor(heading: str) -> str:
    return slugify(heading)


def relative_key(path: PurePath, root: PurePath) -> str:
    """Identity of a file below ``root``: its POSIX relative path without extension."""
    rel = PurePosixPath(*path.relative_to(root).parts)
    return str(rel.with_suffix(""))
