"""Tests for source loading and file helpers."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from outline2html.exceptions import SourceNotAvailableError
from outline2html.file_utils import read_text_async, write_text_async
from outline2html.sources import load_source_text


class TestLoadSourceText:
    """Tests for load_source_text."""

    @pytest.mark.asyncio
    async def test_reads_local_file(self, tmp_path: Path) -> None:
        """Local paths are read as UTF-8 text."""
        path = tmp_path / "page.xml"
        path.write_text("<d>Résumé</d>", encoding="utf-8")

        assert await load_source_text(str(path)) == "<d>Résumé</d>"

    @pytest.mark.asyncio
    async def test_accepts_path_objects(self, tmp_path: Path) -> None:
        """A pathlib.Path is accepted as well as a string."""
        path = tmp_path / "page.xml"
        path.write_text("<d/>", encoding="utf-8")

        assert await load_source_text(path) == "<d/>"

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing file is reported as unavailable."""
        with pytest.raises(SourceNotAvailableError, match="Cannot open file"):
            await load_source_text(str(tmp_path / "missing.xml"))

    @pytest.mark.asyncio
    async def test_directory_raises(self, tmp_path: Path) -> None:
        """A directory cannot be read as a source."""
        with pytest.raises(SourceNotAvailableError):
            await load_source_text(tmp_path)

    @pytest.mark.asyncio
    async def test_undecodable_file_raises(self, tmp_path: Path) -> None:
        """Bytes that are not valid UTF-8 are reported as unavailable."""
        path = tmp_path / "page.xml"
        path.write_bytes(b"<d>\xff\xfe</d>")

        with pytest.raises(SourceNotAvailableError):
            await load_source_text(path)

    @pytest.mark.asyncio
    async def test_configured_encoding(self, tmp_path: Path) -> None:
        """The source encoding comes from configuration."""
        path = tmp_path / "page.xml"
        path.write_bytes("<d>Résumé</d>".encode("latin-1"))

        with patch("outline2html.sources.OUTLINE2HTML_SOURCE_ENCODING", "latin-1"):
            assert await load_source_text(path) == "<d>Résumé</d>"


class TestFileUtils:
    """Tests for async file helpers."""

    @pytest.mark.asyncio
    async def test_write_creates_parent_directories(self, tmp_path: Path) -> None:
        """Writing creates missing parent directories."""
        path = tmp_path / "out" / "nested" / "page.html"
        await write_text_async(path, "<html></html>")

        assert path.read_text(encoding="utf-8") == "<html></html>"

    @pytest.mark.asyncio
    async def test_read_round_trip(self, tmp_path: Path) -> None:
        """Text written is read back unchanged."""
        path = tmp_path / "page.html"
        await write_text_async(path, "© 2020")

        assert await read_text_async(path) == "© 2020"
