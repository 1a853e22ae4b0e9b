"""Truncate an HTML file, or stdin, by words or letters:

    python -m html_truncate.tools.truncate --words=50 --truncate_ellipsis=... post.html

With neither --words nor --letters the HTML passes through unchanged.
"""

import io
import logging
import sys

from tornado.log import define_logging_options
from tornado.options import OptionParser

from html_truncate import engine
from html_truncate.options import define_options


def parse_args(args=None):
    option_parser = OptionParser()
    define_logging_options(option_parser)
    define_options(option_parser)
    if args is None:
        args = sys.argv

    paths = option_parser.parse_command_line(args)
    return option_parser, paths


def read_input(paths, stdin=None):
    if not paths:
        return (stdin or sys.stdin).read()

    with io.open(paths[0], encoding='utf-8') as f:
        return f.read()


def main(args=None, stdin=None, stdout=None):
    opts, paths = parse_args(args)
    html = read_input(paths, stdin)
    stdout = stdout or sys.stdout

    kwargs = dict(
        ellipsis=opts.truncate_ellipsis,
        parser=opts.truncate_parser,
        formatter=opts.truncate_formatter)

    if opts.letters > 0:
        logging.debug('Truncating to %d letters' % opts.letters)
        stdout.write(engine.truncate_letters(html, opts.letters, **kwargs))
    elif opts.words > 0:
        logging.debug('Truncating to %d words' % opts.words)
        stdout.write(engine.truncate_words(html, opts.words, **kwargs))
    else:
        stdout.write(html)


if __name__ == '__main__':
    main()
