# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Immutable styled text shared by every handler.

A :class:`Document` is a tuple of spans, each a piece of text with an
optional foreground colour. Handlers never restyle a document; they only
pick how to flatten it:

- :meth:`Document.plain` for files and stored rows
- :meth:`Document.ansi` for the terminal

Flattening is single-layout and non-wrapping. Lines after the first are
indented by ``indent`` spaces (two by default).
"""

import io
from collections.abc import Iterable
from dataclasses import dataclass

from rich.console import Console
from rich.text import Text

DEFAULT_INDENT = 2


@dataclass(frozen=True)
class Span:
    """A run of text with an optional rich colour name."""

    text: str
    color: str | None = None


@dataclass(frozen=True)
class Document:
    """Composable styled text value."""

    spans: tuple[Span, ...] = ()

    @classmethod
    def empty(cls) -> "Document":
        return cls()

    @classmethod
    def text(cls, value: str, color: str | None = None) -> "Document":
        """Create a document holding a single span."""
        if not value:
            return cls()
        return cls((Span(value, color),))

    def __add__(self, other: object) -> "Document":
        if isinstance(other, str):
            other = Document.text(other)
        if not isinstance(other, Document):
            return NotImplemented
        if not self.spans:
            return other
        if not other.spans:
            return self
        head, first = self.spans[:-1], self.spans[-1]
        nxt = other.spans[0]
        # Merge the seam so that equal text builds equal documents
        if first.color == nxt.color:
            seam = (Span(first.text + nxt.text, first.color),)
        else:
            seam = (first, nxt)
        return Document(head + seam + other.spans[1:])

    def __radd__(self, other: object) -> "Document":
        if isinstance(other, str):
            return Document.text(other) + self
        return NotImplemented

    def __bool__(self) -> bool:
        return bool(self.spans)

    def __str__(self) -> str:
        return self.plain()

    def colored(self, color: str) -> "Document":
        """Apply a foreground colour to every span that has none.

        Spans coloured by an inner call keep their colour.
        """
        result = Document()
        for span in self.spans:
            result = result + Document.text(span.text, span.color or color)
        return result

    def to_text(self, indent: int = DEFAULT_INDENT) -> Text:
        """Build the rich Text for this document."""
        text = Text(no_wrap=True, end="")
        continuation = "\n" + " " * indent
        for span in self.spans:
            text.append(span.text.replace("\n", continuation), style=span.color)
        return text

    def plain(self, indent: int = DEFAULT_INDENT) -> str:
        """Flatten to text without escape codes."""
        return self.to_text(indent).plain

    def ansi(self, indent: int = DEFAULT_INDENT) -> str:
        """Flatten to text decorated with ANSI colour codes."""
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            force_terminal=True,
            color_system="standard",
            soft_wrap=True,
            highlight=False,
            markup=False,
            emoji=False,
            no_color=False,
            _environ={},
        )
        console.print(self.to_text(indent), end="")
        return buffer.getvalue()


def concat(documents: Iterable[Document], separator: Document | str = "") -> Document:
    """Join documents with an optional separator."""
    if isinstance(separator, str):
        separator = Document.text(separator)
    result = Document()
    for index, document in enumerate(documents):
        if index:
            result = result + separator
        result = result + document
    return result
