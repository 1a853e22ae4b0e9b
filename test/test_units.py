import unittest

from html_truncate.tree import Position, content_root, parse, serialize
from html_truncate.units import LETTERS, WORDS, TextUnits, count_units
import test  # Project's test/__init__.py.


class TextUnitsTest(unittest.TestCase):
    def setUp(self):
        self.root = content_root(parse(
            '<p>one  two <b>three</b></p><!-- four --><ul><li>five\tsix'
            '</li></ul><style>p { seven: 1 }</style>'))

    def test_words(self):
        units = list(TextUnits(self.root, WORDS))
        self.assertEqual(
            ['one', 'two', 'three', 'five', 'six'], [u.text for u in units])

        self.assertEqual(list(range(5)), [u.index for u in units])
        self.assertEqual((5, 8), (units[1].start, units[1].end))
        self.assertEqual('one  two ', units[1].node)
        self.assertEqual('b', units[2].node.parent.name)

    def test_letters(self):
        units = list(TextUnits(self.root, LETTERS))
        self.assertEqual(
            'onetwothreefivesix', ''.join(u.text for u in units))

        self.assertEqual(list(range(18)), [u.index for u in units])
        # 't' of "two" follows two spaces.
        self.assertEqual((5, 6), (units[3].start, units[3].end))

    def test_current_position(self):
        units = TextUnits(self.root, WORDS)
        self.assertIsNone(units.current_position())
        it = iter(units)
        next(it)
        next(it)
        position = units.current_position()
        self.assertIsInstance(position, Position)
        self.assertEqual('one  two ', position.node)
        self.assertEqual(8, position.offset)
        self.assertEqual('one  two', position.node[:position.offset])

    def test_not_restartable(self):
        units = TextUnits(self.root)
        list(units)
        with self.assertRaises(RuntimeError):
            iter(units)

    def test_lazy(self):
        units = TextUnits(self.root, WORDS)
        first = next(iter(units))
        self.assertEqual('one', first.text)
        self.assertEqual(first, units.current)

    def test_does_not_mutate(self):
        before = serialize(self.root)
        list(TextUnits(self.root, LETTERS))
        self.assertEqual(before, serialize(self.root))

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            TextUnits(self.root, 'sentences')

    def test_empty(self):
        root = content_root(parse('<p> </p><br>'))
        self.assertEqual([], list(TextUnits(root)))
        self.assertEqual(0, count_units(root, LETTERS))

    def test_subtree(self):
        li = self.root.find('li')
        self.assertEqual(
            ['five', 'six'], [u.text for u in TextUnits(li, WORDS)])

    def test_deep_document(self):
        depth = 1500
        root = content_root(parse('<div>' * depth + 'deep' + '</div>' * depth))
        self.assertEqual(1, count_units(root, WORDS))

    def test_count_units(self):
        root = test.reparse(test.sample_html)
        self.assertEqual(9, count_units(root, WORDS))


if __name__ == '__main__':
    unittest.main()
