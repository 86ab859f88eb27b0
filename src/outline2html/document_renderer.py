"""Assemble a complete HTML page from a parsed document."""

from __future__ import annotations

from datetime import datetime

from outline2html.entry_renderer import render_entry
from outline2html.schemas import Document

AUTHOR = "Lucy Robillard"
CONTACT_EMAIL = "larobitrumpet@lucyrobillard.xyz"
COPYRIGHT_START_YEAR = 2020
STYLESHEET = "style.css"
SOURCE_REPOSITORY_URL = "https://github.com/larobitrumpet/html"
LICENSE_URL = "http://creativecommons.org/licenses/by/4.0/"
LICENSE_BADGE_URL = "https://i.creativecommons.org/l/by/4.0/88x31.png"

NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("index.html", "Home"),
    ("projects.html", "Projects"),
    ("music.html", "Music"),
    ("notary.html", "Notary"),
    ("resume.html", "Résumé"),
    ("about.html", "About"),
)

_CONTENT_INDENT = "        "


def render_document(document: Document, *, year: int | None = None) -> str:
    """Render the full page for a document.

    Args:
        document: Parsed page description.
        year: End year of the footer copyright notice. Defaults to the
            current local year.

    Returns:
        The page markup, or an empty string when the document has no body.
    """
    if document.body is None:
        return ""

    content = _CONTENT_INDENT + document.body
    if document.entry is not None:
        content += "\n" + "\n".join(render_entry(entry) for entry in document.entry)

    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        f"{render_head(document.title, document.description)}"
        f"{render_body(content, year=year)}\n"
        "</html>"
    )


def render_head(title: str, description: str) -> str:
    """Render the ``<head>`` block; the result ends with a newline."""
    lines = [
        "<head>",
        f"    <title>{title}</title>",
        '    <meta charset="UTF-8">',
        f'    <meta name="description" content="{description}">',
        f'    <meta name="author" content="{AUTHOR}">',
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'    <link rel="stylesheet" href="{STYLESHEET}">',
        "</head>",
    ]
    return "\n".join(lines) + "\n"


def render_nav() -> str:
    lines = ["    <nav>", "        <ul class=menu>"]
    lines.extend(f'            <li><a href="{href}">{label}</a></li>' for href, label in NAV_LINKS)
    lines.extend(["        </ul>", "    </nav>"])
    return "\n".join(lines)


def render_footer(year: int) -> str:
    """Render the footer with a copyright range ending at ``year``."""
    license_block = (
        f'<a rel="license" href="{LICENSE_URL}"><img alt="Creative Commons License" '
        f'style="border-width:0" src="{LICENSE_BADGE_URL}" /></a><br />'
        f'This work is licensed under a <a rel="license" target="_blank" href="{LICENSE_URL}">'
        "Creative Commons Attribution 4.0 International License</a>."
    )
    repository_label = SOURCE_REPOSITORY_URL.removeprefix("https://")
    lines = [
        "    <footer>",
        f"        <p>© {COPYRIGHT_START_YEAR}-{year} {AUTHOR}</p>",
        f'        <p><a href="mailto:{CONTACT_EMAIL}">{CONTACT_EMAIL}</a></p>',
        f"        <p>{license_block}</p>",
        "        <p>The code for this website can be found here: "
        f'<a target="_blank" href="{SOURCE_REPOSITORY_URL}">{repository_label}</a>.</p>',
        "    </footer>",
    ]
    return "\n".join(lines)


def render_body(content: str, *, year: int | None = None) -> str:
    """Wrap already rendered content with navigation and footer."""
    if year is None:
        year = current_year()
    return "\n".join(
        [
            "<body>",
            render_nav(),
            '    <div class="content">',
            content,
            "    </div>",
            render_footer(year),
            "</body>",
        ]
    )


def current_year() -> int:
    return datetime.now().year
