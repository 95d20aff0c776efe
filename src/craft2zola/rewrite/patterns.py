"""Compiled patterns for the reference syntaxes found in Craft exports."""

from __future__ import annotations

import re

from craft2zola.config import MEDIA_DIR_SUFFIX

# A leading "# Title" ATX heading; the title moves to the front matter instead.
# "#tag" lines are not headings and stay.
FIRST_H1 = re.compile(r"\A#(?:[ \t][^\n]*)?(?:\n|\Z)")

# Only characters other than brackets may sit between [[ and ]], which keeps
# nested list literals in code such as [[1, 2], [3]] from matching.
WIKI_LINK = re.compile(r"\[\[(?P<link_name>[^\[\]]+?)\]\]")

# Craft block id, e.g. "#^2206D341-3D6E-4F31-B7CF-DD7E3D5D7778"
BLOCK_ANCHOR = re.compile(
    r"#\^[0-9A-Za-z]{8}-[0-9A-Za-z]{4}-4[0-9A-Za-z]{3}-[89ABab][0-9A-Za-z]{3}-[0-9A-Za-z]{12}"
)

HEADER_ANCHOR = re.compile(r"(?P<link_name>.+)#(?P<header>.+)")

DAY_LINK = re.compile(
    r"\[(?P<desc>[^\]\n]*)\]\((?P<day_url>day://(?P<date>\d{4}\.\d{2}\.\d{2}))\)"
)

# Folder names may contain parentheses, so the target stops at the next
# link opener rather than at the first ")".
IMG_ASSET_LINK = re.compile(
    r"!\[(?P<name>[^\]\n]*)\]\((?P<asset_dir>(?:(?!\]\()[^\n])*?"
    + re.escape(MEDIA_DIR_SUFFIX)
    + r"/)(?P<file_name>[^/\n]*?)\)"
)

CRAFTDOCS_LINK = re.compile(r"\[[^\]\n]*\]\((?P<url>craftdocs://open[^)\n]*)\)")

CODE_BLOCK_OTHER = re.compile(r"```other\b")
