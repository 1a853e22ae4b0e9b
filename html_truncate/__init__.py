from html_truncate.engine import truncate, truncate_letters, truncate_words
from html_truncate.units import LETTERS, WORDS

__all__ = (
    'truncate', 'truncate_words', 'truncate_letters', 'WORDS', 'LETTERS')
