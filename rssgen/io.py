from __future__ import annotations
from pathlib import Path
from typing import Iterable

from .core import FailureKind, RssGenError

def read_sites(path: str | Path) -> list[str]:
    """Lines of *path*, verbatim. Callers drop blanks and ``#`` comments."""
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise RssGenError(FailureKind.IO_ERROR, str(e), e) from e

def write_feeds(path: str | Path, feeds: Iterable[str]) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            for feed in feeds:
                f.write(feed + "\n")
    except OSError as e:
        raise RssGenError(FailureKind.IO_ERROR, str(e), e) from e
