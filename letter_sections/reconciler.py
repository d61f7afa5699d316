"""Per-page classification and the running list of letter sections.

Each page is either an *index page* (two or more headword-like tokens in the
index region), a *title page* (exactly one word in the title region) or left
unclassified. Index pages are checked against the current letter, and a
missed title page is recovered by inferring a new section from the reference
words. Every decision is returned as a ``Diagnostic`` and logged.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from .errors import PageOrderError
from .logging import get_logger
from .models import (
    Diagnostic,
    DiagnosticKind,
    LetterSection,
    Page,
    ReferenceEntry,
    Region,
)
from .references import clean_word, extract_references
from .words import words_in

logger = get_logger(__name__)

PLACEHOLDER_LABEL = "-NOT FOUND-"

LetterChangeRule = Callable[[str, Sequence[str]], Optional[str]]


def check_character(word: str) -> str:
    """Lowercase first character, skipping a leading continuation hyphen."""
    lowered = word.lower()
    if lowered.startswith("-") and len(lowered) > 1:
        return lowered[1]
    return lowered[:1]


def infer_letter_change(current_label: str, reference_words: Sequence[str]) -> Optional[str]:
    """Return the label of a new section when the references leave the current letter.

    The current letter is kept when either reference word starts with it. Otherwise
    the first reference word decides the new letter.
    """
    letter = current_label[:1].lower()
    checks = [check_character(word) for word in reference_words[:2]]
    if letter and letter in checks:
        return None
    return checks[0].upper()


class LetterTracker:
    """Owns the letter-section list and advances it one page at a time."""

    def __init__(
        self,
        title_region: Region,
        index_region: Region,
        letter_change_rule: LetterChangeRule = infer_letter_change,
    ) -> None:
        self.title_region = title_region
        self.index_region = index_region
        self.letter_change_rule = letter_change_rule
        self.sections: List[LetterSection] = []
        self._last_page_index: Optional[int] = None

    @property
    def current(self) -> Optional[LetterSection]:
        return self.sections[-1] if self.sections else None

    def process_page(self, page: Page) -> List[Diagnostic]:
        if self._last_page_index is not None and page.index <= self._last_page_index:
            raise PageOrderError(page.index, self._last_page_index)
        self._last_page_index = page.index

        references = extract_references(words_in(page, self.index_region), page.index)
        if references.is_usable():
            diagnostics = self._attach_references(references)
        else:
            diagnostics = [self._classify_title(page, references)]

        for diagnostic in diagnostics:
            _log_diagnostic(diagnostic)
        return diagnostics

    def _classify_title(self, page: Page, references: ReferenceEntry) -> Diagnostic:
        title_words = words_in(page, self.title_region)
        label = clean_word(title_words[0].content) if len(title_words) == 1 else ""
        if not label:
            return Diagnostic(
                page_index=page.index,
                kind=DiagnosticKind.UNCLASSIFIED_PAGE,
                decision="skipped",
                detail={
                    "reference_words": list(references.words),
                    "title_words": [word.content for word in title_words],
                },
            )

        self.sections.append(LetterSection(label=label, page_index=page.index))
        return Diagnostic(
            page_index=page.index,
            kind=DiagnosticKind.TITLE_PAGE,
            decision="started_section",
            detail={"label": label},
        )

    def _attach_references(self, references: ReferenceEntry) -> List[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        page_index = references.page_index

        if not self.sections:
            self.sections.append(LetterSection(label=PLACEHOLDER_LABEL))
            diagnostics.append(
                Diagnostic(
                    page_index=page_index,
                    kind=DiagnosticKind.ORDERING_ANOMALY,
                    decision="inserted_placeholder",
                    detail={"label": PLACEHOLDER_LABEL},
                )
            )

        current = self.sections[-1]
        new_label = self.letter_change_rule(current.label, references.words)
        if new_label is not None:
            previous_label = current.label
            current = LetterSection(label=new_label)
            self.sections.append(current)
            diagnostics.append(
                Diagnostic(
                    page_index=page_index,
                    kind=DiagnosticKind.LETTER_MISMATCH,
                    decision="inferred_section",
                    detail={
                        "previous_label": previous_label,
                        "label": new_label,
                        "reference_words": list(references.words),
                    },
                )
            )

        current.references.append(references)
        diagnostics.append(
            Diagnostic(
                page_index=page_index,
                kind=DiagnosticKind.INDEX_PAGE,
                decision="attached_references",
                detail={"label": current.label, "reference_words": list(references.words)},
            )
        )
        return diagnostics


def _log_diagnostic(diagnostic: Diagnostic) -> None:
    if diagnostic.severity == "warning":
        log = logger.warning
    else:
        log = logger.info
    log(
        diagnostic.kind.value,
        page_index=diagnostic.page_index,
        decision=diagnostic.decision,
        **diagnostic.detail,
    )
