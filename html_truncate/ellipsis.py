from bs4.element import NavigableString

from html_truncate.tree import AVOID_TAGS, replace_text

__all__ = ('insert_ellipsis', )


def insert_ellipsis(node, ellipsis, root=None):
    """Mark the end of truncated text that ends with text node `node`.

    Normally the ellipsis is glued onto the node's text, minus trailing
    whitespace. If the node sits inside a link, a heading, or other tag in
    AVOID_TAGS, the ellipsis goes right after that element instead, so it
    doesn't become part of the link text or heading.

    Returns the boundary text node, which may be a new object.
    """
    if not ellipsis:
        return node

    outermost = None
    element = node.parent
    while (element is not None
           and element is not root
           and element.parent is not None
           and element.name in AVOID_TAGS):
        outermost = element
        element = element.parent

    if outermost is not None:
        outermost.insert_after(NavigableString(ellipsis))
        return node

    return replace_text(node, node.rstrip() + ellipsis)
