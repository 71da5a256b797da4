"""Root test configuration: a minimal book tree on disk"""

from pathlib import Path

import pytest


CHAPTER_ONE_MD = """\
# Chapter One

Intro with `x < y` inline.

## Section

```
<script>
```
"""


@pytest.fixture(name="book")
def book_fixture(tmp_path) -> Path:
    """tmp_path laid out as a book root: style.css plus two chapters with assets."""
    (tmp_path / "style.css").write_text("body { margin: 0; }\n")

    ch1 = tmp_path / "Chapter 1"
    (ch1 / "assets" / "img").mkdir(parents=True)
    (ch1 / "assets" / "img" / "fig.png").write_bytes(b"\x89PNG")
    (ch1 / "one.md").write_text(CHAPTER_ONE_MD)
    (ch1 / "notes.txt").write_text("not markdown")

    ch2 = tmp_path / "Chapter 2"
    (ch2 / "assets").mkdir(parents=True)
    (ch2 / "two.md").write_text("# Two\n\n* a\n* b\n")

    (tmp_path / "Appendix").mkdir()
    (tmp_path / "Appendix" / "extra.md").write_text("# Extra\n")
    return tmp_path
