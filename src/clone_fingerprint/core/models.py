"""Core dataclasses representing page fingerprints and comparison rows."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

STRUCTURAL_KEY_SEPARATOR = ","


class BrandMatch(str, Enum):
    MATCH = "MATCH"
    COUNT_MISMATCH = "Count Mismatch"
    POSITION_MISMATCH = "Position Mismatch"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PageTarget:
    url: str
    brand_name: str


@dataclass(frozen=True, slots=True)
class RawElement:
    """Renderer-neutral view of one element under ``body``."""

    tag_name: str
    attributes: tuple[tuple[str, str], ...] = tuple()
    text_content: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ElementFeature:
    tag_name: str
    attrs: str
    text: str

    def structural_key(self) -> str:
        return STRUCTURAL_KEY_SEPARATOR.join((self.tag_name, self.attrs, self.text))


@dataclass(frozen=True, slots=True)
class PageFingerprint:
    features: tuple[ElementFeature, ...] = tuple()
    brand_occurrences: int = 0
    brand_positions: tuple[int, ...] = tuple()
    url: Optional[str] = None
    brand_name: Optional[str] = None

    def structural_keys(self) -> list[str]:
        return [feature.structural_key() for feature in self.features]

    def texts(self) -> list[str]:
        return [feature.text for feature in self.features]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    url: str
    structural_similarity: float
    content_similarity: float
    brand_match: BrandMatch


@dataclass(frozen=True)
class BatchTimings:
    render: dict[str, float] = field(default_factory=dict)
    extract: dict[str, float] = field(default_factory=dict)
    compare: float = 0.0

    @property
    def total(self) -> float:
        return sum(self.render.values()) + sum(self.extract.values()) + self.compare


@dataclass(frozen=True)
class BatchResult:
    template: PageTarget
    results: list[ComparisonResult]
    timings: BatchTimings = field(default_factory=BatchTimings)
