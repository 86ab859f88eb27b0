"""Outline document models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """An outbound reference shown as a paragraph with an anchor."""

    model_config = ConfigDict(frozen=True)

    href: str
    text: str


class Entry(BaseModel):
    """One node of the page outline.

    ``level`` and ``indent_num`` are taken as given; neither is derived from
    how deeply the entry is nested. ``entry=None`` means the entry has no
    child list at all, while an empty tuple still renders an empty list.

    Attributes:
        level: Heading rank, rendered as ``<h{level}>``.
        indent_num: Number of four-space units prefixed to every line.
        title: Heading text.
        description: Optional paragraph text.
        link: Optional outbound link, opened in a new tab.
        youtube: Optional YouTube video id for an embedded player.
        summary: Optional label; children are wrapped in ``<details>``.
        entry: Optional ordered child entries.
        miscellanious: Optional raw markup appended verbatim.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1)
    indent_num: int = Field(..., ge=0)
    title: str
    description: str | None = None
    link: Link | None = None
    youtube: str | None = None
    summary: str | None = None
    entry: tuple["Entry", ...] | None = None
    miscellanious: str | None = None


class Document(BaseModel):
    """A whole page: metadata, free-form intro markup and the outline."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    body: str | None = None
    entry: tuple[Entry, ...] | None = None
