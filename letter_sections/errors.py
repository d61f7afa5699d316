"""Exceptions raised across the letter-section pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class UnparseableRegion(ValueError):
    """Raised when a word's hOCR title carries no usable bounding box."""

    def __init__(self, metadata: str, reason: str) -> None:
        super().__init__(f"{reason}: {metadata!r}")
        self.metadata = metadata
        self.reason = reason


class PageOrderError(ValueError):
    """Raised when pages are not fed to the tracker in ascending order."""

    def __init__(self, page_index: int, previous_index: int) -> None:
        super().__init__(
            f"page {page_index} received after page {previous_index}; "
            "pages must be processed in strictly ascending order"
        )
        self.page_index = page_index
        self.previous_index = previous_index


class SourceReadError(RuntimeError):
    """Raised when an input page cannot be read or parsed. Stops the page loop."""

    def __init__(self, path: Path | str, cause: Optional[BaseException] = None) -> None:
        message = f"unable to read page source {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.path = Path(path)
        self.cause = cause
        # Filled in by the pipeline with whatever was reconstructed before the failure.
        self.partial: Any = None
