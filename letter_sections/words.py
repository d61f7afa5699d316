"""Select the words of a page that fall inside a region."""

from __future__ import annotations

from typing import List

from .errors import UnparseableRegion
from .geometry import contained, parse_region_strict
from .logging import get_logger
from .models import Page, Region, Word

logger = get_logger(__name__)


def words_in(page: Page, region: Region) -> List[Word]:
    """Return the page's words whose bbox lies inside ``region``, in page order."""
    selected: List[Word] = []
    for word in page.words:
        try:
            word_region = parse_region_strict(word.title)
        except UnparseableRegion as exc:
            logger.debug(
                "word_region_unparseable",
                page_index=page.index,
                content=word.content,
                reason=exc.reason,
            )
            continue
        if contained(word_region, region):
            selected.append(word)
    return selected
