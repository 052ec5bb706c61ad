"""Queryable HTML documents.

The extractor only talks to the ``Document`` protocol; ``SoupDocument``
backs it with BeautifulSoup and its CSS selector engine.
"""

from typing import Protocol

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError


class DocumentError(Exception):
    """The document could not be parsed or queried."""


class Document(Protocol):
    def query(self, selector: str, attr: str | None = None) -> list[str]:
        """Text (or ``attr`` value) of every element matching ``selector``."""
        ...

    def items(self, selector: str) -> list["Document"]:
        """Sub-documents rooted at every element matching ``selector``."""
        ...


class SoupDocument:
    def __init__(self, root: Tag):
        self._root = root

    @classmethod
    def from_html(cls, html: str) -> "SoupDocument":
        try:
            return cls(BeautifulSoup(html, "html.parser"))
        except Exception as e:
            raise DocumentError(f"Cannot parse page: {e}") from e

    def query(self, selector: str, attr: str | None = None) -> list[str]:
        nodes = self._select(selector)
        if attr is None:
            return [node.get_text(" ", strip=True) for node in nodes]

        values = []
        for node in nodes:
            value = node.get(attr, "")
            # multi-valued attributes such as class come back as lists
            if isinstance(value, list):
                value = " ".join(value)
            values.append(value)
        return values

    def items(self, selector: str) -> list["SoupDocument"]:
        return [SoupDocument(node) for node in self._select(selector)]

    def _select(self, selector: str) -> list[Tag]:
        try:
            return self._root.select(selector)
        except SelectorSyntaxError as e:
            raise DocumentError(f"Bad selector {selector!r}: {e}") from e
