"""Test setup for outline2html."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from outline2html.schemas import Document, Entry, Link  # noqa: E402


@pytest.fixture
def fixed_year() -> int:
    """Footer year used to keep rendered pages deterministic."""
    return 2024


@pytest.fixture
def nested_entry() -> Entry:
    """An entry exercising every optional field."""
    return Entry(
        level=2,
        indent_num=0,
        title="Website",
        description="This site",
        link=Link(href="https://github.com/larobitrumpet/html", text="Source"),
        youtube="dQw4w9WgXcQ",
        summary="More",
        entry=[
            Entry(level=3, indent_num=3, title="Renderer"),
            Entry(level=3, indent_num=3, title="Styles", description="CSS"),
        ],
        miscellanious="<hr>",
    )


@pytest.fixture
def sample_document(nested_entry: Entry) -> Document:
    """A document with a body and two top-level entries."""
    return Document(
        title="Projects",
        description="Things I have built",
        body="<h1>Projects</h1>",
        entry=[nested_entry, Entry(level=2, indent_num=0, title="Other")],
    )
