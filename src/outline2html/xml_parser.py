"""Parse outline XML into a document tree."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from outline2html.exceptions import ParseError
from outline2html.schemas import Document

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
    from lxml import etree
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for XML parsing (pip install beautifulsoup4 lxml)."
    ) from exc


_DOCUMENT_TEXT_FIELDS = ("title", "description")
_ENTRY_TEXT_FIELDS = ("level", "indent_num", "title", "description", "youtube", "summary")
_LINK_FIELDS = ("href", "text")
# Fields that may carry markup instead of plain text.
_RAW_FIELDS = {"body", "miscellanious"}


def parse_document_xml(text: str) -> Document:
    """Parse an outline XML document.

    The root element name is ignored. Every field may be given either as an
    attribute or as a direct child element of the same name; ``<entry>``
    children repeat to form an ordered list.

    Raises:
        ParseError: If the text is not well-formed XML, has no root element
            or the fields do not describe a valid document.
    """
    if not text.strip():
        raise ParseError("Source contains no XML root element")
    _check_well_formed(text)

    soup = BeautifulSoup(text, "xml")
    root = _first_element(soup)
    if root is None:
        raise ParseError("Source contains no XML root element")

    data = _read_fields(root, _DOCUMENT_TEXT_FIELDS)
    body = _read_field(root, "body")
    if body is not None:
        data["body"] = body
    entries = _read_entries(root)
    if entries is not None:
        data["entry"] = entries

    try:
        return Document.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Invalid document: {exc}") from exc


def _check_well_formed(text: str) -> None:
    # Strict parse; the soup builder recovers from broken markup.
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        etree.fromstring(text.encode("utf-8"), parser)
    except etree.XMLSyntaxError as exc:
        raise ParseError(f"Source is not well-formed XML: {exc}") from exc


def _read_entries(tag: Tag) -> list[dict[str, Any]] | None:
    children = tag.find_all("entry", recursive=False)
    if not children:
        return None
    return [_read_entry(child) for child in children]


def _read_entry(tag: Tag) -> dict[str, Any]:
    data = _read_fields(tag, _ENTRY_TEXT_FIELDS)
    link = tag.find("link", recursive=False)
    if link is not None:
        data["link"] = _read_fields(link, _LINK_FIELDS)
    miscellanious = _read_field(tag, "miscellanious")
    if miscellanious is not None:
        data["miscellanious"] = miscellanious
    entries = _read_entries(tag)
    if entries is not None:
        data["entry"] = entries
    return data


def _read_fields(tag: Tag, names: tuple[str, ...]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for name in names:
        value = _read_field(tag, name)
        if value is not None:
            data[name] = value
    return data


def _read_field(tag: Tag, name: str) -> str | None:
    value = tag.get(name)
    if value is not None:
        return str(value).strip()
    child = tag.find(name, recursive=False)
    if child is None:
        return None
    if name in _RAW_FIELDS and child.find(True) is not None:
        return child.decode_contents().strip()
    return child.get_text().strip()


def _first_element(soup: BeautifulSoup) -> Tag | None:
    for child in soup.children:
        if isinstance(child, Tag):
            return child
    return None
