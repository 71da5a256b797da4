"""Data models passed between the parse, render, and publish steps"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SourceDoc:
    """A single markdown chapter file as read from disk."""
    path: Path
    text: str               # raw file content, decoded as UTF-8

    @property
    def name(self) -> str:
        """File stem; used as the page title and output file name."""
        return self.path.stem


@dataclass(frozen=True)
class RenderedDoc:
    """Result of running a SourceDoc through the rendering profile.

    title is metadata only: pages are titled by file stem, so the build and
    CLI never read it.
    """
    body:  str              # concatenated HTML of every rendered block
    title: Optional[str]    # raw text of the first level-1 heading, if any


@dataclass(frozen=True)
class BuildResult:
    """One page written by the build."""
    source: Path
    target: Path
