"""outline2html: render outline XML documents into HTML pages."""

from outline2html.document_renderer import render_document
from outline2html.entry_renderer import render_entry
from outline2html.exceptions import (
    Outline2htmlError,
    ParseError,
    SourceNotAvailableError,
)
from outline2html.pipeline import build_page, render_source_text, write_page
from outline2html.schemas import Document, Entry, Link
from outline2html.xml_parser import parse_document_xml

__all__ = [
    "Document",
    "Entry",
    "Link",
    "Outline2htmlError",
    "ParseError",
    "SourceNotAvailableError",
    "build_page",
    "parse_document_xml",
    "render_document",
    "render_entry",
    "render_source_text",
    "write_page",
]
