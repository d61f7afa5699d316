"""Bounding-box parsing and containment for hOCR word regions."""

from __future__ import annotations

import re

from .errors import UnparseableRegion
from .models import SENTINEL_REGION, Region

__all__ = ["parse_region", "parse_region_strict", "contained", "region_from_string"]

_BBOX_PATTERN = re.compile(r"bbox (\S+) (\S+) (\S+) (\S+);")
_INT_PATTERN = re.compile(r"\d+")


def parse_region_strict(metadata: str) -> Region:
    """Parse ``bbox x0 y0 x1 y1;`` out of an hOCR title attribute.

    Raises ``UnparseableRegion`` when the property is missing, a coordinate is
    not a non-negative integer, or the box is inverted.
    """
    if not metadata:
        raise UnparseableRegion(metadata or "", "missing bbox property")
    match = _BBOX_PATTERN.search(metadata)
    if not match:
        raise UnparseableRegion(metadata, "missing bbox property")

    coords = []
    for raw in match.groups():
        if not _INT_PATTERN.fullmatch(raw):
            raise UnparseableRegion(metadata, f"non-integer coordinate {raw!r}")
        coords.append(int(raw))

    return _validated(Region(*coords), metadata)


def parse_region(metadata: str) -> Region:
    """Lenient variant of ``parse_region_strict`` returning the sentinel on failure."""
    try:
        return parse_region_strict(metadata)
    except UnparseableRegion:
        return SENTINEL_REGION


def contained(inner: Region, outer: Region) -> bool:
    if inner.is_sentinel or outer.is_sentinel:
        return False
    return (
        inner.min_x >= outer.min_x
        and inner.max_x <= outer.max_x
        and inner.min_y >= outer.min_y
        and inner.max_y <= outer.max_y
    )


def region_from_string(value: str) -> Region:
    """Parse a ``minX,minY,maxX,maxY`` configuration value."""
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 4:
        raise ValueError(f"region must have four comma-separated integers, got {value!r}")
    try:
        coords = [int(part) for part in parts]
    except ValueError as exc:
        raise ValueError(f"region coordinates must be integers, got {value!r}") from exc
    if any(coord < 0 for coord in coords):
        raise ValueError(f"region coordinates must be non-negative, got {value!r}")
    region = Region(*coords)
    if region.min_x > region.max_x or region.min_y > region.max_y:
        raise ValueError(f"region is inverted: {value!r}")
    return region


def _validated(region: Region, metadata: str) -> Region:
    if region.min_x > region.max_x or region.min_y > region.max_y:
        raise UnparseableRegion(metadata, "inverted bbox")
    return region
