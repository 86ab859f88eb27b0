"""Pipeline for outline source -> HTML page."""

from __future__ import annotations

from pathlib import Path

from outline2html.document_renderer import render_document
from outline2html.file_utils import write_text_async
from outline2html.schemas import Document
from outline2html.sources import load_source_text
from outline2html.utils.logging_config import get_logger
from outline2html.xml_parser import parse_document_xml

logger = get_logger(__name__)


def render_source_text(text: str, *, year: int | None = None) -> str:
    """Parse outline XML text and render it as a page."""
    return _render(parse_document_xml(text), year=year)


async def build_page(source: str | Path, *, year: int | None = None) -> str:
    """Load, parse and render the outline file at ``source``.

    Args:
        source: Path of the outline XML file.
        year: Footer copyright end year. Defaults to the current year.

    Returns:
        The complete page markup.

    Raises:
        SourceNotAvailableError: If the source cannot be read.
        ParseError: If the source is not a valid outline document.
    """
    text = await load_source_text(source)
    document = parse_document_xml(text)
    page = _render(document, year=year)
    logger.info(
        "Rendered %s",
        source,
        extra={"source": str(source), "entries": len(document.entry or ()), "chars": len(page)},
    )
    return page


async def write_page(source: str | Path, output: Path, *, year: int | None = None) -> str:
    """Render ``source`` and write the page to ``output``.

    Returns:
        The markup that was written.
    """
    page = await build_page(source, year=year)
    await write_text_async(output, page)
    logger.info("Wrote %s", output)
    return page


def _render(document: Document, *, year: int | None) -> str:
    if document.body is None:
        logger.warning("Document %r has no body; rendering an empty page", document.title)
    return render_document(document, year=year)
