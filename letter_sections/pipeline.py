"""Page loop: load each page in order and feed it to the letter tracker."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .config import AppConfig
from .errors import SourceReadError
from .hocr import load_page
from .logging import get_logger
from .models import ScanResult
from .reconciler import LetterTracker

logger = get_logger(__name__)


def resolve_bounds(total: int, start_page: int = 0, end_page: Optional[int] = None) -> tuple[int, int]:
    """Return the ``[start, end)`` page range to process.

    ``end_page`` of ``None`` or ``-1``, or one past the collection, means "to the end".
    """
    if start_page < 0:
        raise ValueError("start page must be >= 0")
    end = total if end_page is None or end_page < 0 or end_page > total else end_page
    if start_page > end:
        raise ValueError(f"start page {start_page} is past end page {end}")
    return start_page, end


def scan(paths: Sequence[Path], config: AppConfig) -> ScanResult:
    """Reconstruct letter sections from ``paths``, already sorted in book order.

    A page that cannot be read aborts the run: the ``SourceReadError`` is re-raised
    with the incomplete result attached as ``partial``.
    """
    start, end = resolve_bounds(len(paths), config.start_page, config.end_page)
    tracker = LetterTracker(config.title_region, config.index_region)
    result = ScanResult(sections=tracker.sections, start_page=start, end_page=end)

    logger.info("scan_start", pages=len(paths), start_page=start, end_page=end)
    for page_index in range(start, end):
        try:
            page = load_page(paths[page_index], page_index)
        except SourceReadError as exc:
            logger.error("page_read_failed", page_index=page_index, path=str(exc.path), error=str(exc))
            result.complete = False
            exc.partial = result
            raise

        result.diagnostics.extend(tracker.process_page(page))
        result.pages_processed += 1

    logger.info(
        "scan_done",
        pages_processed=result.pages_processed,
        sections=len(result.sections),
        warnings=len(result.warnings()),
    )
    return result
