"""Domain models for pages, regions and reconstructed letter sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass(frozen=True, slots=True)
class Region:
    """Axis-aligned rectangle in page pixel space."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def is_sentinel(self) -> bool:
        return self == SENTINEL_REGION

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def __str__(self) -> str:
        return f"BBOX {self.min_x} {self.min_y} {self.max_x} {self.max_y}"


SENTINEL_REGION = Region(-1, -1, -1, -1)


@dataclass(frozen=True, slots=True)
class Word:
    """A single ``ocrx_word`` element: its text and raw hOCR ``title`` attribute."""

    content: str
    title: str = ""


@dataclass(slots=True)
class Page:
    index: int
    words: List[Word] = field(default_factory=list)
    source: Optional[str] = None


@dataclass(slots=True)
class ReferenceEntry:
    """Marginal range markers found on one index page."""

    words: List[str]
    page_index: int

    def is_usable(self) -> bool:
        return len(self.words) >= 2


@dataclass(slots=True)
class LetterSection:
    """One letter of the book, with every index page attributed to it.

    ``page_index`` is ``None`` when the section was inferred rather than read
    from a title page.
    """

    label: str
    page_index: Optional[int] = None
    references: List[ReferenceEntry] = field(default_factory=list)

    @property
    def inferred(self) -> bool:
        return self.page_index is None


class DiagnosticKind(str, Enum):
    TITLE_PAGE = "title_page"
    INDEX_PAGE = "index_page"
    ORDERING_ANOMALY = "ordering_anomaly"
    LETTER_MISMATCH = "letter_mismatch"
    UNCLASSIFIED_PAGE = "unclassified_page"

    @property
    def severity(self) -> str:
        if self in (DiagnosticKind.ORDERING_ANOMALY, DiagnosticKind.LETTER_MISMATCH):
            return "warning"
        return "info"


@dataclass(slots=True)
class Diagnostic:
    """Record of a classification or recovery decision taken for one page."""

    page_index: int
    kind: DiagnosticKind
    decision: str
    detail: Dict[str, Any] = field(default_factory=dict)

    @property
    def severity(self) -> str:
        return self.kind.severity


@dataclass(slots=True)
class ScanResult:
    sections: List[LetterSection] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    start_page: int = 0
    end_page: int = 0
    pages_processed: int = 0
    complete: bool = True

    def warnings(self) -> List[Diagnostic]:
        return [diag for diag in self.diagnostics if diag.severity == "warning"]
