"""Discovery of page files in physical book order."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from .errors import SourceReadError

__all__ = ["natural_sort_key", "discover_pages"]

_NUMERIC_SUFFIX = re.compile(r"(\d*)$")


def natural_sort_key(filename: str) -> tuple[str, int, str]:
    """Sort key comparing a trailing digit run numerically: ``page9`` < ``page10``.

    A name without a numeric suffix sorts before the same prefix with one.
    """
    path = Path(filename)
    suffix = path.suffix
    stem = filename[: len(filename) - len(suffix)] if suffix else filename
    digits = _NUMERIC_SUFFIX.search(stem).group(1)
    prefix = stem[: len(stem) - len(digits)]
    number = int(digits) + 1 if digits else 0
    return (prefix, number, suffix)


def discover_pages(root: Path, extension: str = ".hocr") -> List[Path]:
    try:
        entries = list(root.iterdir())
    except OSError as exc:
        raise SourceReadError(root, exc) from exc

    pages = [entry for entry in entries if entry.is_file() and entry.suffix == extension]
    return sorted(pages, key=lambda entry: natural_sort_key(entry.name))
