"""Markdown-to-HTML rendering with the chapter profile injected per call"""

from collections.abc import Mapping

from markdown_it import MarkdownIt

from mdsite.core.models import RenderedDoc, SourceDoc
from mdsite.core.parse import make_parser
from mdsite.core.render.rules import PROFILE, RenderRule
from mdsite.core.utils.tokens import heading_level


def make_renderer(parser_config: str = 'gfm-like', profile: Mapping[str, RenderRule] = PROFILE) -> MarkdownIt:
    """Build a fresh MarkdownIt instance with each profile rule registered on its renderer."""
    md = make_parser(parser_config)
    for token_type, rule in profile.items():
        md.add_render_rule(token_type, rule)
    return md


def first_title(tokens: list) -> str | None:
    """Return the raw inline text of the first level-1 heading, or None."""
    for i, tok in enumerate(tokens):
        if tok.type == 'heading_open' and heading_level(tok) == 1:
            return tokens[i + 1].content
    return None


def render_markdown(
    text: str,
    parser_config: str = 'gfm-like',
    profile: Mapping[str, RenderRule] = PROFILE,
    ) -> RenderedDoc:
    """Parse text and serialize it through the profile."""
    md = make_renderer(parser_config, profile)
    env: dict = {}
    tokens = md.parse(text, env)
    return RenderedDoc(
        body=md.renderer.render(tokens, md.options, env),
        title=first_title(tokens),
    )


def render_doc(doc: SourceDoc, parser_config: str = 'gfm-like') -> RenderedDoc:
    return render_markdown(doc.text, parser_config)
