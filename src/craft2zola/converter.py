"""Conversion pipeline from a Craft export to Zola content."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from craft2zola.config import ConvertConfig
from craft2zola.index.storage import DocumentIndex
from craft2zola.index.walker import TimestampProvider, Walker
from craft2zola.output.writer import ZolaWriter
from craft2zola.rewrite.rewriter import rewrite_index
from craft2zola.utils.files import file_timestamps

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ConversionStats:
    documents: int = 0
    directories: int = 0
    assets: int = 0
    sections: int = 0
    references: int = 0


class Converter:
    """Coordinates discovery, rewriting and output."""

    def __init__(self, config: ConvertConfig, *, timestamps: TimestampProvider = file_timestamps) -> None:
        self.config = config
        self.timestamps = timestamps

    def discover(self) -> DocumentIndex:
        """Index every note under the input directory and bind its media."""
        walker = Walker(self.config.input_dir, timestamps=self.timestamps)
        walker.walk()
        return walker.index

    def rewrite(self, index: DocumentIndex) -> int:
        return rewrite_index(index, self.config.root_slug)

    def check(self) -> ConversionStats:
        """Run discovery and rewriting without writing anything."""
        index = self.discover()
        references = self.rewrite(index)
        return ConversionStats(
            documents=len(index),
            directories=len(index.directories),
            assets=sum(len(doc.assets or ()) for doc in index),
            references=references,
        )

    def convert(self) -> ConversionStats:
        index = self.discover()
        references = self.rewrite(index)

        LOGGER.info("Writing into %s", self.config.content_root)
        writer = ZolaWriter(
            self.config.content_root,
            root_title=self.config.root_title,
            root_template=self.config.root_template,
        )
        written = writer.write(index)
        return ConversionStats(
            documents=written.documents,
            directories=len(index.directories),
            assets=written.assets,
            sections=written.sections,
            references=references,
        )
