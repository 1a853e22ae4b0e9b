"""Cut a tree at a position and discard everything after it."""

import logging

from html_truncate.tree import replace_text

__all__ = ('cut', 'remove_following')


def cut(position, root):
    """Truncate position's text node at its offset, then drop all content
    after it in document order, up to the end of root.

    Returns the (new) boundary text node. Ancestors of the boundary are kept
    whole; the boundary itself is shortened, never removed.
    """
    node, offset = position
    node = replace_text(node, node[:offset])
    remove_following(node, root)
    return node


def remove_following(node, root):
    """Remove node's later siblings, then each ancestor's later siblings,
    stopping below root. Returns the number of subtrees removed.
    """
    removed = 0
    while node is not None and node is not root:
        # Snapshot: extract() rewires next_sibling as we go.
        for sibling in list(node.next_siblings):
            sibling.extract()
            removed += 1

        node = node.parent

    logging.debug('Pruned %d subtrees after truncation point' % removed)
    return removed
