"""Walk a tree in document order, yielding words or letters."""

import re

from html_truncate.tree import TextUnit, is_countable

__all__ = ('WORDS', 'LETTERS', 'TextUnits', 'count_units')

WORDS = 'words'
LETTERS = 'letters'

word_pat = re.compile(r'\S+')
letter_pat = re.compile(r'\S')

_patterns = {WORDS: word_pat, LETTERS: letter_pat}


class TextUnits(object):
    """Lazy, single-use iterator over the text units below root.

    Text nodes are visited in document order (preorder, children in order)
    and scanned left to right. Ordinals run from 0 across the whole subtree.
    While iterating, current_position() says where to cut the tree to keep
    everything up to and including the last unit yielded.

    Don't mutate the tree while iterating.
    """
    def __init__(self, root, kind=WORDS):
        if kind not in _patterns:
            raise ValueError('Unknown text unit kind %r' % (kind, ))

        self.root = root
        self.kind = kind
        self.current = None
        self._started = False

    def __iter__(self):
        if self._started:
            raise RuntimeError('TextUnits can only be iterated once')

        self._started = True
        return self._generate()

    def _generate(self):
        pattern = _patterns[self.kind]
        index = 0
        for node in self._text_nodes():
            for match in pattern.finditer(node):
                self.current = TextUnit(
                    index, self.kind, node, match.start(), match.end())

                yield self.current
                index += 1

    def _text_nodes(self):
        # Explicit stack rather than recursion: documents can be deep.
        stack = list(reversed(getattr(self.root, 'contents', [])))
        while stack:
            node = stack.pop()
            if is_countable(node):
                yield node
            else:
                stack.extend(reversed(getattr(node, 'contents', [])))

    def current_position(self):
        """Position(node, offset) at the end of the last unit, or None."""
        if self.current is None:
            return None

        return self.current.position


def count_units(root, kind=WORDS):
    return sum(1 for _ in TextUnits(root, kind))
