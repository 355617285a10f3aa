"""Linear token stream over page markup.

The parsers never look at a document tree. They consume a flat sequence of
start tags and text fragments, ending with a single end-of-stream marker.
BeautifulSoup does the tokenizing; its tree is only walked once in document
order to produce the stream.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString


@dataclass(frozen=True)
class StartTag:
    """Opening tag with its attributes in source order."""

    name: str
    attrs: tuple[tuple[str, str], ...] = ()

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value of attribute ``key``."""
        for attr_key, value in self.attrs:
            if attr_key == key:
                return value
        return default


@dataclass(frozen=True)
class Text:
    """Text content between tags, entities already decoded."""

    data: str


@dataclass(frozen=True)
class EndOfStream:
    """Marks the end of the markup."""


Token = StartTag | Text | EndOfStream


def _attr_pairs(tag: Tag) -> tuple[tuple[str, str], ...]:
    # Multi-valued attributes such as class come back as lists
    pairs = []
    for key, value in tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        pairs.append((key, value if value is not None else ""))
    return tuple(pairs)


def tokenize(markup: str) -> Iterator[Token]:
    """Yield the tokens of ``markup`` followed by one ``EndOfStream``.

    Comments, doctypes, CDATA and processing instructions are dropped.

    Args:
        markup: Raw page text

    Yields:
        StartTag, Text and finally EndOfStream tokens
    """
    soup = BeautifulSoup(markup, "html.parser")
    for node in soup.descendants:
        if isinstance(node, Tag):
            yield StartTag(node.name, _attr_pairs(node))
        elif isinstance(node, NavigableString) and not isinstance(
            node, PreformattedString
        ):
            yield Text(str(node))
    yield EndOfStream()
