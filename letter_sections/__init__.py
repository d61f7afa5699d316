"""Reconstruct the letter sections of a scanned dictionary from hOCR pages."""

__all__ = [
    "config",
    "models",
    "errors",
    "geometry",
    "words",
    "references",
    "reconciler",
    "hocr",
    "files",
    "pipeline",
    "report",
    "cli",
]
