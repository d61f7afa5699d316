from __future__ import annotations

import pytest

from letter_sections.models import Page, Region, Word

TITLE_REGION = Region(0, 300, 3200, 700)
INDEX_REGION = Region(0, 0, 3200, 310)

ENV_KEYS = [
    "LETTER_SECTIONS_TITLE_REGION",
    "LETTER_SECTIONS_INDEX_REGION",
    "LETTER_SECTIONS_START_PAGE",
    "LETTER_SECTIONS_END_PAGE",
    "LETTER_SECTIONS_EXTENSION",
    "LOG_LEVEL",
    "LOG_JSON",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def bbox_word(content: str, x0: int, y0: int, x1: int, y1: int) -> Word:
    return Word(content=content, title=f"bbox {x0} {y0} {x1} {y1}; x_wconf 90")


def title_page(index: int, label: str) -> Page:
    return Page(index=index, words=[bbox_word(label, 1500, 400, 1700, 650)])


def index_page(index: int, *markers: str) -> Page:
    words = [
        bbox_word(marker, 200 + 600 * position, 120, 500 + 600 * position, 260)
        for position, marker in enumerate(markers)
    ]
    return Page(index=index, words=words)
