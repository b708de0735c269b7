"""Render a Markdown VPAT into a standalone, styled HTML document."""
from __future__ import annotations

import html
import re
from pathlib import Path
from typing import Optional, Set, Union
from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.extensions.toc import stashedHTML2text
from markdown.treeprocessors import Treeprocessor
from markdown.util import AMP_SUBSTITUTE

from .errors import StylesheetNotFound

DEFAULT_STYLESHEET = Path(__file__).resolve().parent / "assets" / "markdown-body.css"
BODY_CLASS = "markdown-body"

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

_SLUG_STRIP = re.compile(r"[^\w\- ]", re.UNICODE)
_PLACEHOLDER = re.compile("\x02[^\x03]*\x03")


def github_slug(value: str, separator: str = "-") -> str:
    """Return the GitHub-style anchor for heading text *value*.

    The text is lower-cased, punctuation other than ``-`` and ``_`` is dropped
    and each space becomes *separator*.
    """

    return _SLUG_STRIP.sub("", value.lower()).replace(" ", separator)


def unique_slug(slug: str, seen: Set[str]) -> str:
    """Return *slug*, suffixed ``-1``, ``-2``, ... until it is not in *seen*."""

    candidate = slug
    count = 0
    while candidate in seen:
        count += 1
        candidate = f"{slug}-{count}"
    seen.add(candidate)
    return candidate


class HeadingIdTreeprocessor(Treeprocessor):
    """Give every heading without an explicit id a GitHub-style anchor."""

    def _heading_text(self, element: Element) -> str:
        text = stashedHTML2text("".join(element.itertext()), self.md)
        text = text.replace(AMP_SUBSTITUTE, "&")
        return html.unescape(_PLACEHOLDER.sub("", text)).strip()

    def run(self, root: Element) -> None:
        headings = [element for element in root.iter() if element.tag in HEADING_TAGS]
        seen = {element.get("id") for element in headings if element.get("id")}
        for element in headings:
            if element.get("id"):
                continue
            slug = github_slug(self._heading_text(element))
            element.set("id", unique_slug(slug, seen))


class HeadingIdExtension(Extension):
    """Register :class:`HeadingIdTreeprocessor` after inline processing."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.treeprocessors.register(HeadingIdTreeprocessor(md), "heading_ids", 5)


class MarkdownRenderer:
    """Markdown to HTML converter with its extensions bound at construction.

    ``<user@host>`` autolinks and the bare addresses ``magiclink`` picks up are
    both written as character entities, so addresses in the report never
    appear in plain text.  Nested lists use GitHub's two-space indent.
    """

    def __init__(self) -> None:
        self._md = markdown.Markdown(
            extensions=[
                HeadingIdExtension(),
                "tables",
                "fenced_code",
                "pymdownx.magiclink",
                "mdx_truly_sane_lists",
            ],
            extension_configs={
                "pymdownx.magiclink": {"hide_protocol": False},
                "mdx_truly_sane_lists": {"nested_indent": 2, "truly_sane": True},
            },
            output_format="html5",
        )

    def convert(self, markdown_text: str) -> str:
        """Return the HTML fragment for *markdown_text*."""

        self._md.reset()
        return self._md.convert(markdown_text)


def load_stylesheet(path: Optional[Union[str, Path]] = None) -> str:
    """Return the stylesheet text at *path*, defaulting to the bundled one."""

    location = Path(path) if path is not None else DEFAULT_STYLESHEET
    if not location.is_file():
        raise StylesheetNotFound(str(location))
    return location.read_text(encoding="utf-8")


def render(
    markdown_text: str,
    stylesheet_text: str,
    title: str,
    *,
    renderer: Optional[MarkdownRenderer] = None,
) -> str:
    """Return the complete HTML document for a VPAT titled after *title*.

    The stylesheet is embedded inline and no external resources are referenced.
    """

    body = (renderer or MarkdownRenderer()).convert(markdown_text)
    return (
        "<html>\n"
        "  <head>\n"
        f"    <title>VPAT for {title}</title>\n"
        "    <style>\n"
        f"{stylesheet_text}\n"
        "    </style>\n"
        "  </head>\n"
        f'  <body class="{BODY_CLASS}">\n'
        f"{body}\n"
        "  </body>\n"
        "</html>\n"
    )


__all__ = [
    "BODY_CLASS",
    "DEFAULT_STYLESHEET",
    "HeadingIdExtension",
    "MarkdownRenderer",
    "github_slug",
    "load_stylesheet",
    "render",
    "unique_slug",
]
