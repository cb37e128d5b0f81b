"""Side-effect-free fingerprinting and scoring building blocks."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Extractor",
    "Comparer",
    "extract_fingerprint",
    "similarity",
    "structural_similarity",
    "content_similarity",
    "classify_brand_match",
    "BrandMatch",
    "PageTarget",
    "RawElement",
    "ElementFeature",
    "PageFingerprint",
    "ComparisonResult",
    "BatchTimings",
    "BatchResult",
]

_EXTRACTOR_NAMES = {"Extractor", "extract_fingerprint"}
_COMPARER_NAMES = {
    "Comparer",
    "similarity",
    "structural_similarity",
    "content_similarity",
    "classify_brand_match",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in _EXTRACTOR_NAMES:
        module = import_module(".extractor", __name__)
        return getattr(module, name)
    if name in _COMPARER_NAMES:
        module = import_module(".comparer", __name__)
        return getattr(module, name)
    if name in __all__:
        module = import_module(".models", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
