"""Shared schemas for outline2html."""

from outline2html.schemas.document import Document, Entry, Link

__all__ = ["Document", "Entry", "Link"]
