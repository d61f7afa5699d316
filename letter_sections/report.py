"""Rendering of scan results as JSON documents and summary lines."""

from __future__ import annotations

import json
from collections import Counter
from typing import Any, Dict, List

from .models import Diagnostic, DiagnosticKind, LetterSection, ScanResult


def section_to_dict(section: LetterSection) -> Dict[str, Any]:
    return {
        "label": section.label,
        "page": section.page_index,
        "inferred": section.inferred,
        "references": [
            {"words": list(entry.words), "page": entry.page_index}
            for entry in section.references
        ],
    }


def diagnostic_to_dict(diagnostic: Diagnostic) -> Dict[str, Any]:
    return {
        "page": diagnostic.page_index,
        "kind": diagnostic.kind.value,
        "severity": diagnostic.severity,
        "decision": diagnostic.decision,
        "detail": dict(diagnostic.detail),
    }


def to_dict(result: ScanResult) -> Dict[str, Any]:
    counts = Counter(diagnostic.kind for diagnostic in result.diagnostics)
    return {
        "complete": result.complete,
        "sections": [section_to_dict(section) for section in result.sections],
        "diagnostics": [diagnostic_to_dict(diagnostic) for diagnostic in result.diagnostics],
        "summary": {
            "start_page": result.start_page,
            "end_page": result.end_page,
            "pages_processed": result.pages_processed,
            "sections": len(result.sections),
            "counts": {kind.value: counts.get(kind, 0) for kind in DiagnosticKind},
        },
    }


def to_json(result: ScanResult) -> str:
    return json.dumps(to_dict(result), ensure_ascii=False, indent=2)


def summary_lines(result: ScanResult) -> List[str]:
    lines = [f"{len(result.sections)} section(s)"]
    for section in result.sections:
        page = "?" if section.page_index is None else str(section.page_index)
        lines.append(f"{section.label}, {page} ({len(section.references)} index page(s))")
    warnings = result.warnings()
    if warnings:
        lines.append(f"{len(warnings)} warning(s)")
    return lines
