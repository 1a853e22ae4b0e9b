"""Truncate HTML by words or letters without breaking its structure.

Parse and walk the text units. When a unit past the limit shows up, cut the
tree at the end of the limit-th unit, add the ellipsis, and serialize. If
nothing overflows, the tree is serialized untouched.
"""

import logging

from html_truncate.ellipsis import insert_ellipsis
from html_truncate.prune import cut
from html_truncate.tree import content_root, parse, serialize
from html_truncate.units import LETTERS, WORDS, TextUnits

__all__ = ('truncate', 'truncate_words', 'truncate_letters')


def truncate(html, limit, ellipsis='', kind=WORDS, parser=None,
             formatter=None):
    """Keep the first `limit` units of kind WORDS or LETTERS.

    A limit of zero or less returns html unchanged. Tags left open by the
    cut are closed; markup after it is dropped. If content was cut and
    ellipsis is non-empty, it's added once, outside any link or heading the
    cut falls in.
    """
    if limit <= 0:
        return html

    soup = parse(html, parser)
    root = content_root(soup)

    # Only cut once a unit past the limit shows up; content that fits
    # exactly is left alone.
    boundary = None
    units = TextUnits(root, kind)
    for unit in units:
        if unit.index + 1 == limit:
            boundary = units.current_position()
        elif unit.index >= limit:
            node = cut(boundary, root)
            insert_ellipsis(node, ellipsis, root)
            logging.debug('Truncated to %d %s at %r' % (
                limit, kind, boundary.node[:boundary.offset][-20:]))

            break

    try:
        return serialize(root, formatter)
    except Exception:
        # Don't let one bad fragment break a whole page render.
        logging.exception('Could not serialize truncated HTML')
        return ''


def truncate_words(html, limit=0, ellipsis='', parser=None, formatter=None):
    """Safely truncate HTML to `limit` whitespace-separated words."""
    return truncate(html, limit, ellipsis, WORDS, parser, formatter)


def truncate_letters(html, limit=0, ellipsis='', parser=None,
                     formatter=None):
    """Safely truncate HTML to `limit` letters, not counting whitespace."""
    return truncate(html, limit, ellipsis, LETTERS, parser, formatter)
