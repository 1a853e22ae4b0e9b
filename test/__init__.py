import unittest

from html_truncate.tree import content_root, parse, serialize
from html_truncate.units import WORDS, count_units

sample_html = """<h1>bar</h1>
<p>baz
   quux, <a href="/fizzle">fizzle, fazzle.</a> <em>hi!</em>
</p>
<ul><li>one</li><li>two <strong>three</strong></li></ul>"""

# Fragments with a mix of nesting, inline tags, and non-prose text.
samples = [
    sample_html,
    '<p>The quick brown fox jumps over the lazy dog</p>',
    '<p>Hello <a href="#">world wide web</a> today</p>',
    '<div><p>One <b>two</b></p><p>three <em>four five</em></p></div>'
    '<p>six</p>',
    '<p><!-- not counted -->alpha beta<br>gamma</p><script>x = 1;</script>',
    '<h2>Heading words here</h2><p>and a paragraph</p>',
    '<p>unclosed <b>bold text and <i>more',
    '<p>caf\xe9 na\xefve r\xe9sum\xe9</p>',
]


def reparse(html):
    return content_root(parse(html))


class TruncateTest(unittest.TestCase):
    def assert_valid_html(self, html):
        """Well-formed output survives a parse/serialize round trip."""
        self.assertEqual(html, serialize(reparse(html)))

    def count(self, html, kind=WORDS):
        return count_units(reparse(html), kind)
