"""Shared markdown-it token utilities"""


def heading_level(token) -> int | None:
    """Return the heading level for a heading_open/heading_close token, else None."""
    if token.type in ('heading_open', 'heading_close') and token.tag[:1] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None
