"""Render outline entries into indented HTML fragments."""

from __future__ import annotations

from typing import Callable, Iterable

from outline2html.schemas import Entry

INDENT_UNIT = "    "

YOUTUBE_EMBED_URL = "https://www.youtube-nocookie.com/embed/{video_id}"
_YOUTUBE_ALLOW = "accelerometer; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
_YOUTUBE_WIDTH = 560
_YOUTUBE_HEIGHT = 315


def render_entry(entry: Entry) -> str:
    """Render an entry and all of its descendants into an HTML fragment.

    The heading comes first, followed by the description, link, video,
    the child list (inside ``<details>`` when a summary is set, otherwise a
    ``<div>``) and finally the raw ``miscellanious`` markup. None of the
    field values are escaped.
    """
    indent = INDENT_UNIT * entry.indent_num
    parts = [f"{indent}<h{entry.level}>{entry.title}</h{entry.level}>"]
    for render_part in _PARTS:
        parts.append(render_part(entry, indent))
    return "".join(parts)


def _render_description(entry: Entry, indent: str) -> str:
    if entry.description is None:
        return ""
    return f"\n{indent}<p>{entry.description}</p>"


def _render_link(entry: Entry, indent: str) -> str:
    if entry.link is None:
        return ""
    return f'\n{indent}<p><a target="_blank" href="{entry.link.href}">{entry.link.text}</a></p>'


def _render_youtube(entry: Entry, indent: str) -> str:
    if entry.youtube is None:
        return ""
    src = YOUTUBE_EMBED_URL.format(video_id=entry.youtube)
    return (
        f'\n{indent}<iframe width="{_YOUTUBE_WIDTH}" height="{_YOUTUBE_HEIGHT}" src="{src}" '
        f'frameborder="0" allow="{_YOUTUBE_ALLOW}" allowfullscreen></iframe>'
    )


def _render_children(entry: Entry, indent: str) -> str:
    if entry.summary is not None:
        children = _render_list(entry.entry, indent) if entry.entry is not None else ""
        return (
            f"\n{indent}<details>"
            f"\n{indent}{INDENT_UNIT}<summary>{entry.summary}</summary>"
            f"\n{children}"
            f"\n{indent}</details>"
        )
    if entry.entry is not None:
        return f"\n{indent}<div>\n{_render_list(entry.entry, indent)}\n{indent}</div>"
    return ""


def _render_miscellanious(entry: Entry, indent: str) -> str:
    # Raw markup, emitted as-is.
    return entry.miscellanious or ""


def _render_list(children: Iterable[Entry], indent: str) -> str:
    list_indent = indent + INDENT_UNIT
    item_indent = list_indent + INDENT_UNIT
    items = "\n".join(
        f"{item_indent}<li>\n{render_entry(child)}\n{item_indent}</li>" for child in children
    )
    return f"{list_indent}<ul>\n{items}\n{list_indent}</ul>"


_PARTS: tuple[Callable[[Entry, str], str], ...] = (
    _render_description,
    _render_link,
    _render_youtube,
    _render_children,
    _render_miscellanious,
)
