"""Chapter and file discovery, source reading, and markdown-it parser setup"""

from pathlib import Path

from markdown_it import MarkdownIt

from mdsite.core.models import SourceDoc


MD_EXTENSIONS = {'.md'}


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name, raw HTML enabled."""
    return MarkdownIt(preset, options_update={"linkify": False, "html": True})


def discover_chapters(root: Path, prefix: str = 'Chapter') -> list[Path]:
    """Return sorted directories directly under root whose names start with prefix."""
    return sorted(p for p in root.iterdir() if p.is_dir() and p.name.startswith(prefix))


def discover_files(chapter: Path) -> list[Path]:
    """Return sorted .md files directly inside a chapter directory."""
    return sorted(p for p in chapter.iterdir() if p.is_file() and p.suffix in MD_EXTENSIONS)


def read_doc(path: Path) -> SourceDoc:
    """Read a markdown file into a SourceDoc."""
    return SourceDoc(path=path, text=path.read_text(encoding='utf-8'))
