import pytest

from letter_sections.config import load_config, normalize_extension
from letter_sections.models import Region


def test_load_config_defaults():
    config = load_config()
    assert config.title_region == Region(0, 300, 3200, 700)
    assert config.index_region == Region(0, 0, 3200, 310)
    assert config.start_page == 0
    assert config.end_page is None
    assert config.extension == ".hocr"
    assert config.log_level == "INFO"
    assert config.log_json is False


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("LETTER_SECTIONS_INDEX_REGION", "0,150,3200,310")
    monkeypatch.setenv("LETTER_SECTIONS_START_PAGE", "12")
    monkeypatch.setenv("LETTER_SECTIONS_END_PAGE", "400")
    monkeypatch.setenv("LETTER_SECTIONS_EXTENSION", "html")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON", "yes")

    config = load_config()
    assert config.index_region == Region(0, 150, 3200, 310)
    assert (config.start_page, config.end_page) == (12, 400)
    assert config.extension == ".html"
    assert config.log_level == "DEBUG"
    assert config.log_json is True


@pytest.mark.parametrize(
    "key, value",
    [
        ("LETTER_SECTIONS_TITLE_REGION", "0,700,3200,300"),
        ("LETTER_SECTIONS_START_PAGE", "first"),
        ("LETTER_SECTIONS_START_PAGE", "-3"),
        ("LOG_JSON", "maybe"),
    ],
)
def test_load_config_rejects_bad_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError):
        load_config()


def test_with_overrides_skips_none():
    config = load_config().with_overrides(start_page=None, end_page=7)
    assert config.start_page == 0
    assert config.end_page == 7


def test_normalize_extension():
    assert normalize_extension("hocr") == ".hocr"
    assert normalize_extension(" .html ") == ".html"
    with pytest.raises(ValueError):
        normalize_extension("  ")
