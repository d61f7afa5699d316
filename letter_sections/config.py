"""Configuration loader for letter-section reconstruction runs."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from .geometry import region_from_string
from .models import Region

# Band across the upper-middle of a title page where the letter heading renders.
DEFAULT_TITLE_REGION = "0,300,3200,700"
# Band along the top margin of an index page carrying the range markers.
DEFAULT_INDEX_REGION = "0,0,3200,310"
DEFAULT_EXTENSION = ".hocr"


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_int(key: str, default: Optional[int]) -> Optional[int]:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


def normalize_extension(value: str) -> str:
    """Return a page file extension with its leading dot, e.g. ``hocr`` -> ``.hocr``."""
    value = value.strip()
    if not value:
        raise ValueError("page file extension must not be empty")
    return value if value.startswith(".") else f".{value}"


def _get_region(key: str, default: str) -> Region:
    value = _get_env(key, default)
    try:
        return region_from_string(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key}: {exc}") from exc


@dataclass(slots=True)
class AppConfig:
    title_region: Region
    index_region: Region
    start_page: int = 0
    end_page: Optional[int] = None
    extension: str = DEFAULT_EXTENSION
    log_level: str = "INFO"
    log_json: bool = False

    def with_overrides(self, **overrides: object) -> "AppConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def load_config() -> AppConfig:
    title_region = _get_region("LETTER_SECTIONS_TITLE_REGION", DEFAULT_TITLE_REGION)
    index_region = _get_region("LETTER_SECTIONS_INDEX_REGION", DEFAULT_INDEX_REGION)

    start_page = _get_int("LETTER_SECTIONS_START_PAGE", 0)
    if start_page < 0:
        raise ValueError("LETTER_SECTIONS_START_PAGE must be >= 0")
    end_page = _get_int("LETTER_SECTIONS_END_PAGE", None)

    extension = normalize_extension(_get_env("LETTER_SECTIONS_EXTENSION", DEFAULT_EXTENSION))

    return AppConfig(
        title_region=title_region,
        index_region=index_region,
        start_page=start_page,
        end_page=end_page,
        extension=extension,
        log_level=_get_env("LOG_LEVEL", "INFO").upper(),
        log_json=_get_bool("LOG_JSON", False),
    )
