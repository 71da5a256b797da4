"""Asset publisher: the only place the build touches the output filesystem"""

import shutil
from pathlib import Path


class ChapterPublisher:
    """Populates a chapter's output directory with pages, assets, and the stylesheet.

    Layout written under ``chapter / output_dir``:
      <name>.html     one per rendered page
      assets/         recursive copy of ``chapter / assets_dir``
      style.css       copy of the shared stylesheet
    """

    def __init__(
        self,
        chapter: Path,
        stylesheet: Path,
        output_dir: str = 'dist',
        assets_dir: str = 'assets',
        ):
        self.chapter = chapter
        self.stylesheet = stylesheet
        self.assets_dir = assets_dir
        self.dest = chapter / output_dir

    def prepare(self) -> Path:
        """Create the output directory and copy assets and stylesheet into it."""
        self.dest.mkdir(exist_ok=True)
        self.copy_assets()
        self.copy_stylesheet()
        return self.dest

    def copy_assets(self) -> Path:
        """Copy the chapter assets directory; raises FileNotFoundError if it is missing."""
        src = self.chapter / self.assets_dir
        if not src.is_dir():
            raise FileNotFoundError(f"Assets directory not found: {src}")
        dest = self.dest / self.assets_dir
        # replaces a previous build's copy; links are copied as links
        shutil.rmtree(dest, ignore_errors=True)
        return Path(shutil.copytree(src, dest, symlinks=True))

    def copy_stylesheet(self) -> Path:
        return Path(shutil.copy2(self.stylesheet, self.dest / self.stylesheet.name))

    def write_page(self, name: str, html: str) -> Path:
        target = self.dest / f"{name}.html"
        target.write_text(html, encoding='utf-8')
        return target
