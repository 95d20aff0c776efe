"""Tests for ZolaWriter."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from unittest.mock import patch

import frontmatter
import pytest

from craft2zola.exceptions import ExportStructureError, FileAccessError
from craft2zola.index.storage import DocumentIndex
from craft2zola.models import Document, NoteType
from craft2zola.output.writer import ZolaWriter, render_section


def make_document(key: str, slug: str, body: str) -> Document:
    return Document(
        note_type=NoteType.NONE,
        source_path=Path("/exports/Garden") / f"{key}.md",
        relative_key=key,
        slug_path=PurePosixPath(slug),
        display_name=key.rsplit("/", 1)[-1],
        created_at="2023-01-02T03:04:05Z",
        modified_at="2023-02-03T04:05:06Z",
        body=body,
    )


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    media = tmp_path / "source" / "Cryptography" / "AES.assets"
    media.mkdir(parents=True)
    (media / "sbox.jpeg").write_bytes(b"jpeg")
    (media / "rounds_bin_preview.png").write_bytes(b"png")
    return media


@pytest.fixture
def index(media_dir: Path) -> DocumentIndex:
    index = DocumentIndex()
    index.add(make_document("Cryptography/TLS", "cryptography/tls.md", "tls body\n"))
    aes = make_document("Cryptography/AES", "cryptography/aes/index.md", "aes body\n")
    aes.assets = ["sbox.jpeg", "rounds_bin_preview.png"]
    aes.assets_source_dir = media_dir
    index.add(aes)
    index.add(make_document("🌲 Woodworking/Planes", "woodworking/planes.md", "planes body\n"))
    index.add_directory("Cryptography")
    index.add_directory("🌲 Woodworking")
    return index


class TestRenderSection:
    """Test render_section function."""

    def test_section_metadata(self) -> None:
        post = frontmatter.loads(render_section("Cryptography"))

        assert post["title"] == "🌳 Cryptography"
        assert post["sort_by"] == "weight"
        assert post["insert_anchor_links"] == "left"
        assert "template" not in post

    def test_extra_keys(self) -> None:
        post = frontmatter.loads(render_section("Garden", template="garden.html"))

        assert post["template"] == "garden.html"


class TestZolaWriter:
    """Test ZolaWriter output."""

    def test_documents_written(self, tmp_path: Path, index: DocumentIndex) -> None:
        content = tmp_path / "content" / "garden"

        stats = ZolaWriter(content).write(index)

        assert (content / "cryptography" / "tls.md").read_text(encoding="utf-8") == "tls body\n"
        assert (content / "cryptography" / "aes" / "index.md").read_text(encoding="utf-8") == "aes body\n"
        assert (content / "woodworking" / "planes.md").exists()
        assert stats.documents == 3

    def test_assets_copied_next_to_note(self, tmp_path: Path, index: DocumentIndex) -> None:
        content = tmp_path / "content" / "garden"

        stats = ZolaWriter(content).write(index)

        assert (content / "cryptography" / "aes" / "sbox.jpeg").read_bytes() == b"jpeg"
        assert (content / "cryptography" / "aes" / "rounds_bin_preview.png").exists()
        assert stats.assets == 2

    def test_section_files(self, tmp_path: Path, index: DocumentIndex) -> None:
        content = tmp_path / "content" / "garden"

        stats = ZolaWriter(content).write(index)

        crypto = frontmatter.load(content / "cryptography" / "_index.md")
        wood = frontmatter.load(content / "woodworking" / "_index.md")
        assert crypto["title"] == "🌳 Cryptography"
        assert wood["title"] == "🌳 🌲 Woodworking"
        assert not (content / "cryptography" / "aes" / "_index.md").exists()
        assert stats.sections == 3

    def test_root_section(self, tmp_path: Path, index: DocumentIndex) -> None:
        content = tmp_path / "content" / "garden"

        ZolaWriter(content, root_title="Notes", root_template="notes.html").write(index)

        root = frontmatter.load(content / "_index.md")
        assert root["title"] == "🌳 Notes"
        assert root["template"] == "notes.html"
        assert root["sort_by"] == "weight"

    def test_no_section_over_bundle(self, tmp_path: Path, index: DocumentIndex) -> None:
        """A folder that is also a note bundle gets no section file."""
        index.add_directory("Cryptography/AES")
        content = tmp_path / "content" / "garden"

        ZolaWriter(content).write(index)

        assert not (content / "cryptography" / "aes" / "_index.md").exists()

    def test_existing_section_kept(self, tmp_path: Path, index: DocumentIndex) -> None:
        content = tmp_path / "content" / "garden"
        existing = content / "cryptography" / "_index.md"
        existing.parent.mkdir(parents=True)
        existing.write_text("custom", encoding="utf-8")

        stats = ZolaWriter(content).write(index)

        assert existing.read_text(encoding="utf-8") == "custom"
        assert stats.sections == 2

    def test_assets_without_source_dir(self, tmp_path: Path) -> None:
        index = DocumentIndex()
        document = make_document("Broken", "broken.md", "body")
        document.assets = ["image.jpeg"]
        index.add(document)

        with pytest.raises(ExportStructureError):
            ZolaWriter(tmp_path / "content").write(index)

    def test_colliding_section_slugs(self, tmp_path: Path) -> None:
        """Folders sharing a slug are titled by the first name in sorted order."""
        index = DocumentIndex()
        index.add_directory("🌲 Woodworking")
        index.add_directory("Woodworking")
        content = tmp_path / "content" / "garden"

        stats = ZolaWriter(content).write(index)

        assert frontmatter.load(content / "woodworking" / "_index.md")["title"] == "🌳 Woodworking"
        assert stats.sections == 2

    def test_copy_failure(self, tmp_path: Path, index: DocumentIndex, media_dir: Path) -> None:
        with patch("craft2zola.output.writer.shutil.copy2", side_effect=OSError("disk full")):
            with pytest.raises(FileAccessError) as exc_info:
                ZolaWriter(tmp_path / "content").write(index)

        assert exc_info.value.path == media_dir / "sbox.jpeg"
        assert "disk full" in str(exc_info.value)

    def test_write_failure(self, tmp_path: Path, index: DocumentIndex) -> None:
        content = tmp_path / "content"

        with patch.object(Path, "write_text", side_effect=OSError("read-only file system")):
            with pytest.raises(FileAccessError) as exc_info:
                ZolaWriter(content).write(index)

        assert exc_info.value.path == content / "cryptography" / "tls.md"
