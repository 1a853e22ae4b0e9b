import functools

import tornado.options
from bs4.formatter import HTMLFormatter

from html_truncate.tree import DEFAULT_FORMATTER, DEFAULT_PARSER


def define_options(option_parser):
    # Debugging
    option_parser.define(
        'debug', default=False, type=bool,
        help="Log truncation details to stderr",
        callback=functools.partial(enable_debug, option_parser),
        group='Debugging')

    def config_callback(path):
        option_parser.parse_config_file(path, final=False)

    option_parser.define(
        "config", type=str, help="Path to config file",
        callback=config_callback, group='Config file')

    # Truncation
    option_parser.define(
        'truncate_parser', default=DEFAULT_PARSER, type=str, help=(
            "BeautifulSoup parser: html.parser, lxml or html5lib"),
        group='Truncation')
    option_parser.define(
        'truncate_formatter', default=DEFAULT_FORMATTER, type=str, help=(
            "BeautifulSoup output formatter: minimal, html or html5"),
        group='Truncation')
    option_parser.define(
        'truncate_ellipsis', default='', type=str, help=(
            "Text to append when content is cut, e.g. '...'"),
        group='Truncation')
    option_parser.define('words', default=0, type=int, help=(
        "Keep this many words"), group='Truncation')
    option_parser.define('letters', default=0, type=int, help=(
        "Keep this many letters"), group='Truncation')

    option_parser.add_parse_callback(
        functools.partial(check_options, option_parser))


def check_options(option_parser):
    if option_parser.words > 0 and option_parser.letters > 0:
        raise tornado.options.Error(
            'Pass --words or --letters, not both.')

    formatter = option_parser.truncate_formatter
    if formatter not in HTMLFormatter.REGISTRY:
        raise tornado.options.Error(
            'Unknown formatter %r, expected one of %s' % (
                formatter,
                ', '.join(sorted(
                    name for name in HTMLFormatter.REGISTRY if name))))


def enable_debug(option_parser, debug):
    if debug and 'logging' in option_parser:
        option_parser.logging = 'debug'
