"""Similarity scoring and brand placement checks between fingerprints."""
from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from .models import BrandMatch, ComparisonResult, PageFingerprint

logger = logging.getLogger(__name__)


def similarity(seq_a: Iterable[str], seq_b: Iterable[str]) -> float:
    """Multiset overlap ratio in ``[0, 1]`` (Sorensen-Dice over value counts).

    Two empty sequences are treated as identical and score ``1.0``.
    """
    list_a = list(seq_a)
    list_b = list(seq_b)
    total = len(list_a) + len(list_b)
    if total == 0:
        return 1.0
    counter_a = Counter(list_a)
    counter_b = Counter(list_b)
    common = sum(min(count, counter_b.get(key, 0)) for key, count in counter_a.items())
    return min(1.0, 2 * common / total)


def structural_similarity(fp_a: PageFingerprint, fp_b: PageFingerprint) -> float:
    return similarity(fp_a.structural_keys(), fp_b.structural_keys()) * 100


def content_similarity(fp_a: PageFingerprint, fp_b: PageFingerprint) -> float:
    return similarity(fp_a.texts(), fp_b.texts()) * 100


def classify_brand_match(template: PageFingerprint, candidate: PageFingerprint) -> BrandMatch:
    if template.brand_occurrences != candidate.brand_occurrences:
        return BrandMatch.COUNT_MISMATCH
    if tuple(template.brand_positions) != tuple(candidate.brand_positions):
        return BrandMatch.POSITION_MISMATCH
    return BrandMatch.MATCH


class Comparer:
    """Scores a candidate fingerprint against a template fingerprint."""

    def compare(
        self,
        template: PageFingerprint,
        candidate: PageFingerprint,
        url: Optional[str] = None,
    ) -> ComparisonResult:
        result = ComparisonResult(
            url=url if url is not None else (candidate.url or ""),
            structural_similarity=structural_similarity(template, candidate),
            content_similarity=content_similarity(template, candidate),
            brand_match=classify_brand_match(template, candidate),
        )
        logger.debug(
            "Compared %s: structure=%.2f content=%.2f brand=%s",
            result.url,
            result.structural_similarity,
            result.content_similarity,
            result.brand_match.value,
        )
        return result


__all__ = [
    "Comparer",
    "similarity",
    "structural_similarity",
    "content_similarity",
    "classify_brand_match",
]
