"""Build orchestration: discover chapters, render each file, publish output"""

from pathlib import Path
from typing import Callable, Optional

from mdsite.core.models import BuildResult
from mdsite.core.page import build_page
from mdsite.core.parse import discover_chapters, discover_files, read_doc
from mdsite.core.publish import ChapterPublisher
from mdsite.core.render.renderer import render_doc


def run_build(
    root: Path,
    chapter_prefix: str = 'Chapter',
    output_dir: str = 'dist',
    assets_dir: str = 'assets',
    stylesheet: str = 'style.css',
    parser_config: str = 'gfm-like',
    on_page: Optional[Callable[[BuildResult], None]] = None,
    ) -> list[BuildResult]:
    """Render every chapter under root into its output directory.

    Chapters without markdown files are skipped. The first failure aborts the
    whole build as a RuntimeError chained to its cause; pages already written
    are left in place. on_page, if given, is called after each page is written.
    """
    css = root / stylesheet
    if not css.is_file():
        raise FileNotFoundError(f"Stylesheet not found: {css}")

    results = []
    for chapter in discover_chapters(root, chapter_prefix):
        files = discover_files(chapter)
        if not files:
            continue

        publisher = ChapterPublisher(chapter, css, output_dir, assets_dir)
        try:
            publisher.prepare()
        except Exception as e:
            raise RuntimeError(f"Failed to publish {chapter}: {e}") from e

        for p in files:
            try:
                doc = read_doc(p)
                rendered = render_doc(doc, parser_config)
                target = publisher.write_page(doc.name, build_page(doc.name, rendered.body, css.name))
            except Exception as e:
                raise RuntimeError(f"Failed to build {p}: {e}") from e
            result = BuildResult(source=p, target=target)
            results.append(result)
            if on_page:
                on_page(result)
    return results
