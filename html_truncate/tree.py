"""Tree and position model: thin helpers around BeautifulSoup's element tree.

Elements are bs4 Tags, text nodes are NavigableStrings. A Position points
into a text node's value; a TextUnit is one word or letter found there.

Truncation works on, and returns, the body of a full document; <head> is
not part of the output.
"""

from collections import namedtuple

from bs4 import BeautifulSoup
from bs4.element import (NavigableString, PreformattedString, Script,
                         Stylesheet, TemplateString)

__all__ = ('AVOID_TAGS', 'Position', 'TextUnit', 'parse', 'content_root',
           'serialize', 'is_countable', 'replace_text')

DEFAULT_PARSER = 'html.parser'
DEFAULT_FORMATTER = 'minimal'

# Inline semantic tags an ellipsis must never be appended inside.
AVOID_TAGS = frozenset(['a', 'strong', 'em', 'h1', 'h2', 'h3', 'h4', 'h5'])

# Text inside these is never shown as prose, even if the parser doesn't
# give it a special string class.
RAW_TEXT_TAGS = frozenset(['script', 'style', 'template'])

Position = namedtuple('Position', 'node offset')


class TextUnit(namedtuple('TextUnit', 'index kind node start end')):
    """One word or letter: its ordinal, and where it sits in a text node."""
    __slots__ = ()

    @property
    def text(self):
        return self.node[self.start:self.end]

    @property
    def position(self):
        """Where to cut the node to keep this unit and nothing after it."""
        return Position(self.node, self.end)


def parse(html, parser=None):
    if isinstance(html, bytes):
        # Let UnicodeDammit fall back if the bytes aren't valid UTF-8.
        return BeautifulSoup(
            html, parser or DEFAULT_PARSER, from_encoding='utf-8')

    return BeautifulSoup(html, parser or DEFAULT_PARSER)


def content_root(soup):
    """The body if the parser made one, else the whole fragment.

    Only the root's contents are serialized, so a full document comes back
    as its body content, even when nothing was cut.
    """
    body = soup.body
    return body if body is not None else soup


def serialize(root, formatter=None):
    return root.decode_contents(formatter=formatter or DEFAULT_FORMATTER)


def is_countable(node):
    """True for a text node whose words are visible prose."""
    if not isinstance(node, NavigableString):
        return False

    if isinstance(node, (PreformattedString, Script, Stylesheet,
                         TemplateString)):
        return False

    return node.parent is None or node.parent.name not in RAW_TEXT_TAGS


def replace_text(node, value):
    """Swap a text node for one holding value. Returns the new node.

    NavigableStrings are immutable, so "setting" a text node's value means
    putting a new string in its place.
    """
    new_node = type(node)(value)
    if node.parent is not None:
        node.replace_with(new_node)

    return new_node
