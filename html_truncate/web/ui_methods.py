"""Tornado template helpers. Pass this module as an Application's ui_methods:

    tornado.web.Application(urls, ui_methods=html_truncate.web.ui_methods)

Then in a template:

    {% raw truncate_words(post.body, 50, '...') %}

Output is markup, so use "raw" to keep autoescape from escaping it.
"""

from html_truncate import engine

__all__ = ('truncate_words', 'truncate_letters')


def _settings(handler, ellipsis):
    settings = handler.application.settings
    if ellipsis is None:
        ellipsis = settings.get('truncate_ellipsis') or ''

    return dict(
        ellipsis=ellipsis,
        parser=settings.get('truncate_parser'),
        formatter=settings.get('truncate_formatter'))


def truncate_words(handler, html, limit=0, ellipsis=None):
    return engine.truncate_words(html, limit, **_settings(handler, ellipsis))


def truncate_letters(handler, html, limit=0, ellipsis=None):
    return engine.truncate_letters(html, limit, **_settings(handler, ellipsis))
