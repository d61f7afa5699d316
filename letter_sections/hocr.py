"""hOCR parsing: turn one Tesseract/OCRopus output file into a ``Page``."""

from __future__ import annotations

from pathlib import Path
from typing import List

from lxml import etree

from .errors import SourceReadError
from .logging import get_logger
from .models import Page, Word

logger = get_logger(__name__)

WORD_CLASS = "ocrx_word"

_WORDS_XPATH = etree.XPath(
    f"//*[contains(concat(' ', normalize-space(@class), ' '), ' {WORD_CLASS} ')]"
)


def _parser() -> etree.XMLParser:
    # hOCR is XHTML; broken markup must fail instead of being patched up.
    return etree.XMLParser(recover=False, resolve_entities=False, load_dtd=False, no_network=True)


def parse_hocr(markup: str | bytes, page_index: int, source: str | None = None) -> Page:
    """Parse hOCR markup. Raises ``lxml.etree.XMLSyntaxError`` on malformed input."""
    if isinstance(markup, str):
        markup = markup.encode("utf-8")
    root = etree.fromstring(markup, _parser())

    words: List[Word] = []
    for node in _WORDS_XPATH(root):
        title = node.get("title") or ""
        words.append(Word(content="".join(node.itertext()).strip(), title=title))
    return Page(index=page_index, words=words, source=source)


def load_page(path: Path, page_index: int) -> Page:
    try:
        markup = path.read_bytes()
        page = parse_hocr(markup, page_index, source=str(path))
    except (OSError, etree.XMLSyntaxError) as exc:
        raise SourceReadError(path, exc) from exc

    logger.debug("page_loaded", page_index=page_index, path=str(path), words=len(page.words))
    return page
