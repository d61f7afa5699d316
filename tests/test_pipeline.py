import shutil
from pathlib import Path

import pytest

from conftest import INDEX_REGION, TITLE_REGION
from letter_sections.config import AppConfig
from letter_sections.errors import SourceReadError
from letter_sections.models import DiagnosticKind
from letter_sections.pipeline import resolve_bounds, scan

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def book(tmp_path):
    layout = ["title_page", "index_page", "index_page", "blank"]
    paths = []
    for number, kind in enumerate(layout):
        target = tmp_path / f"page{number}.hocr"
        if kind == "blank":
            target.write_text("<html><body></body></html>", encoding="utf-8")
        else:
            shutil.copy(FIXTURES / f"{kind}.hocr", target)
        paths.append(target)
    return paths


def _config(**overrides):
    return AppConfig(title_region=TITLE_REGION, index_region=INDEX_REGION).with_overrides(**overrides)


def test_resolve_bounds():
    assert resolve_bounds(10) == (0, 10)
    assert resolve_bounds(10, 2, -1) == (2, 10)
    assert resolve_bounds(10, 2, 5) == (2, 5)
    assert resolve_bounds(10, 0, 50) == (0, 10)
    assert resolve_bounds(10, 10) == (10, 10)
    with pytest.raises(ValueError):
        resolve_bounds(10, -1)
    with pytest.raises(ValueError):
        resolve_bounds(10, 6, 5)


def test_scan_reconstructs_sections(book):
    result = scan(book, _config())

    assert result.complete
    assert result.pages_processed == 4
    assert len(result.sections) == 1
    section = result.sections[0]
    assert section.label == "B"
    assert section.page_index == 0
    assert [entry.page_index for entry in section.references] == [1, 2]
    assert section.references[0].words == ["Backe", "Bahn"]
    assert result.diagnostics[-1].kind is DiagnosticKind.UNCLASSIFIED_PAGE
    assert result.warnings() == []


def test_scan_respects_page_bounds(book):
    result = scan(book, _config(start_page=1, end_page=3))

    assert (result.start_page, result.end_page) == (1, 3)
    assert result.pages_processed == 2
    assert [section.label for section in result.sections] == ["-NOT FOUND-", "B"]
    assert [diag.page_index for diag in result.warnings()] == [1, 1]


def test_scan_stops_on_unreadable_page(book, tmp_path):
    paths = book[:2] + [tmp_path / "missing.hocr"] + book[3:]

    with pytest.raises(SourceReadError) as excinfo:
        scan(paths, _config())

    partial = excinfo.value.partial
    assert partial is not None
    assert not partial.complete
    assert partial.pages_processed == 2
    assert partial.sections[0].label == "B"
