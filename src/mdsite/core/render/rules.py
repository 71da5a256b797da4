"""Rendering profile: per-token HTML serialization overrides for markdown-it.

Every rule has the markdown-it render-rule signature
``(renderer, tokens, idx, options, env) -> str``. Container constructs
(blockquote, lists, paragraphs, headings) are split into an ``_open`` and a
``_close`` rule; the renderer emits the children in between, so the pair
together produces ``<tag>{rendered children}</tag>``.

Token types missing from PROFILE (tables, emphasis, links, images, line
breaks, strikethrough, plain text) keep markdown-it's default rendering.
"""

from typing import Callable

from mdsite.core.utils.tokens import heading_level


RenderRule = Callable[..., str]

_HTML_ESCAPES = str.maketrans({
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
})


def escape_html(text: str) -> str:
    """Escape the five HTML special characters."""
    return text.translate(_HTML_ESCAPES)


# --- blocks ---

def code_block(self, tokens, idx, options, env) -> str:
    """Fenced and indented code: escaped, info string ignored."""
    code = tokens[idx].content.rstrip('\n')
    return f'<pre>{escape_html(code)}\n</pre>\n'


def blockquote_open(self, tokens, idx, options, env) -> str:
    return '<blockquote>'


def blockquote_close(self, tokens, idx, options, env) -> str:
    return '</blockquote>\n'


def html_block(self, tokens, idx, options, env) -> str:
    return f'{tokens[idx].content}\n'


def heading_open(self, tokens, idx, options, env) -> str:
    """Demote every heading one level; h1 becomes a title comment, h6 bold text."""
    level = heading_level(tokens[idx])
    if level == 1:
        return '<!-- Title: '
    if level <= 5:
        return f'<h{level - 1}>'
    return '<p><strong>'


def heading_close(self, tokens, idx, options, env) -> str:
    level = heading_level(tokens[idx])
    if level == 1:
        return ' -->\n'
    if level <= 5:
        return f'</h{level - 1}>\n'
    # no newline here
    return '</strong></p>'


def hr(self, tokens, idx, options, env) -> str:
    return '<hr />\n'


def bullet_list_open(self, tokens, idx, options, env) -> str:
    return '<ul>'


def bullet_list_close(self, tokens, idx, options, env) -> str:
    return '</ul>\n'


def ordered_list_open(self, tokens, idx, options, env) -> str:
    return '<ol>'


def ordered_list_close(self, tokens, idx, options, env) -> str:
    return '</ol>\n'


def list_item_open(self, tokens, idx, options, env) -> str:
    return '<li>'


def list_item_close(self, tokens, idx, options, env) -> str:
    return '</li>\n'


def paragraph_open(self, tokens, idx, options, env) -> str:
    # tight list paragraphs are hidden
    return '' if tokens[idx].hidden else '<p>'


def paragraph_close(self, tokens, idx, options, env) -> str:
    return '' if tokens[idx].hidden else '</p>\n'


# --- inline ---

def code_inline(self, tokens, idx, options, env) -> str:
    """Inline code is wrapped in <kbd> and left unescaped."""
    return f'<kbd>{tokens[idx].content}</kbd>'


PROFILE: dict[str, RenderRule] = {
    'fence':              code_block,
    'code_block':         code_block,
    'blockquote_open':    blockquote_open,
    'blockquote_close':   blockquote_close,
    'html_block':         html_block,
    'heading_open':       heading_open,
    'heading_close':      heading_close,
    'hr':                 hr,
    'bullet_list_open':   bullet_list_open,
    'bullet_list_close':  bullet_list_close,
    'ordered_list_open':  ordered_list_open,
    'ordered_list_close': ordered_list_close,
    'list_item_open':     list_item_open,
    'list_item_close':    list_item_close,
    'paragraph_open':     paragraph_open,
    'paragraph_close':    paragraph_close,
    'code_inline':        code_inline,
}
