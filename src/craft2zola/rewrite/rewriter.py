"""Rewriting of Craft markdown into Zola markdown.

Each note body goes through a fixed sequence of passes, every pass working
on the output of the previous one:

1. reject links into private Craft blocks
2. drop the leading ``# Title`` line
3. prepend front matter (title, dates, weight, note type)
4. resolve ``[[note references]]`` into ``@/`` internal links
5. neutralise ``day://`` daily-note links
6. flatten image links into ``.assets`` folders
7. rename ```` ```other ```` code fences

Any failure aborts the whole conversion.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, Mapping

import frontmatter

from craft2zola.exceptions import (
    ExportStructureError,
    FileAccessError,
    MalformedReferenceError,
    UnresolvedReferenceError,
)
from craft2zola.index.storage import DocumentIndex
from craft2zola.models import Document
from craft2zola.rewrite import patterns
from craft2zola.utils.paths import slug_anchor

LOGGER = logging.getLogger(__name__)

DAY_INPUT_FORMAT = "%Y.%m.%d"
# Daily notes are private and never exported, so their links go nowhere
INERT_TARGET = "javascript:;"
PLAIN_FENCE = "```"
# English labels regardless of the process locale
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def read_body(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(f"Unable to read note: {exc}", path=path) from exc


def format_day(date_text: str) -> str:
    """"2023.12.04" -> "Mon, Dec 4 '23"."""
    day = datetime.strptime(date_text, DAY_INPUT_FORMAT)
    weekday = WEEKDAY_NAMES[day.weekday()]
    month = MONTH_NAMES[day.month - 1]
    return f"{weekday}, {month} {day.day} '{day:%y}"


def build_front_matter(document: Document, content: str) -> str:
    post = frontmatter.Post(
        content,
        title=document.display_name,
        date=document.created_at,
        updated=document.modified_at,
        weight=document.note_type.weight,
        extra={"note_type": document.note_type.glyph},
    )
    return frontmatter.dumps(post, sort_keys=False) + "\n"


def _group(match: re.Match, name: str, document: Document) -> str:
    value = match.group(name)
    if value is None:
        raise MalformedReferenceError(
            f"Matched a reference without a '{name}' part",
            path=document.source_path,
            text=match.group(0),
        )
    return value


class ContentRewriter:
    """Rewrites note bodies against a fixed view of every note."""

    def __init__(self, documents: Mapping[str, Document], root_slug: str) -> None:
        self.documents = documents
        self.root_slug = root_slug
        self.resolved = 0

    def rewrite(self, document: Document, text: str | None = None) -> str:
        if text is None:
            text = read_body(document.source_path)

        self._reject_block_links(document, text)

        stripped = patterns.FIRST_H1.sub("", text, count=1)
        if stripped == text:
            LOGGER.warning("No leading title heading in %s", document.source_path)
        text = build_front_matter(document, stripped.lstrip("\n"))

        text = patterns.WIKI_LINK.sub(lambda m: self._replace_wiki_link(document, m), text)
        text = patterns.DAY_LINK.sub(lambda m: self._replace_day_link(document, m), text)
        text = patterns.IMG_ASSET_LINK.sub(lambda m: self._replace_img_asset_link(document, m), text)
        text = patterns.CODE_BLOCK_OTHER.sub(PLAIN_FENCE, text)
        return text

    def _reject_block_links(self, document: Document, text: str) -> None:
        match = patterns.CRAFTDOCS_LINK.search(text)
        if match is not None:
            raise ExportStructureError(
                "This note links to a private Craft block (craftdocs://open...), "
                "which means the export is incomplete",
                path=document.source_path,
                text=match.group(0),
            )

    def _replace_wiki_link(self, document: Document, match: re.Match) -> str:
        link_name = _group(match, "link_name", document)
        # Block ids only mean something inside Craft
        link_name = patterns.BLOCK_ANCHOR.sub("", link_name, count=1)

        header = ""
        anchor = patterns.HEADER_ANCHOR.fullmatch(link_name)
        if anchor is not None:
            header = "#" + slug_anchor(anchor.group("header"))
            link_name = anchor.group("link_name")

        target = self.documents.get(link_name)
        if target is None:
            raise UnresolvedReferenceError(
                f"No exported note named '{link_name}'; the reference probably "
                "points at a block inside Craft",
                path=document.source_path,
                text=match.group(0),
            )
        self.resolved += 1
        LOGGER.debug("Resolved %s -> %s", match.group(0), target.slug_path)
        return f"[{target.display_name}](@/{self.root_slug}/{target.slug_path}{header})"

    def _replace_day_link(self, document: Document, match: re.Match) -> str:
        date_text = _group(match, "date", document)
        try:
            label = format_day(date_text)
        except ValueError as exc:
            raise MalformedReferenceError(
                f"Unable to parse day link date '{date_text}' as YYYY.MM.DD: {exc}",
                path=document.source_path,
                text=match.group(0),
            ) from exc
        return f"[{label}]({INERT_TARGET})"

    def _replace_img_asset_link(self, document: Document, match: re.Match) -> str:
        name = _group(match, "name", document)
        file_name = _group(match, "file_name", document)
        return f"![{name}]({file_name})"


def rewrite_index(index: DocumentIndex, root_slug: str) -> int:
    """Rewrite every note in ``index`` and return the number of links resolved.

    Bodies are computed against a sealed snapshot and committed together,
    so a failure leaves every body untouched.
    """
    snapshot = index.snapshot()
    rewriter = ContentRewriter(snapshot, root_slug)
    bodies: Dict[str, str] = {}
    for key, document in snapshot.items():
        bodies[key] = rewriter.rewrite(document)
    index.commit_bodies(bodies)
    LOGGER.info("Rewrote %d notes, resolved %d note references", len(bodies), rewriter.resolved)
    return rewriter.resolved
