"""Turns a rendered document into a page fingerprint."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..adapters import RenderedDocument, RenderedElement
from .models import ElementFeature, PageFingerprint

ATTRIBUTE_SEPARATOR = ";"

logger = logging.getLogger(__name__)


class Extractor:
    """Builds per-element features and brand-name placement for one page."""

    def extract(
        self,
        document: RenderedDocument,
        brand_name: str,
        *,
        url: Optional[str] = None,
    ) -> PageFingerprint:
        needle = brand_name.lower()
        features: list[ElementFeature] = []
        positions: list[int] = []

        for index, element in enumerate(document.elements() or ()):
            feature = self._feature(element)
            features.append(feature)
            if needle in feature.text:
                positions.append(index)

        logger.debug(
            "Fingerprinted %s: %d elements, brand %r found %d times",
            url or "document",
            len(features),
            brand_name,
            len(positions),
        )
        return PageFingerprint(
            features=tuple(features),
            brand_occurrences=len(positions),
            brand_positions=tuple(positions),
            url=url,
            brand_name=brand_name,
        )

    def _feature(self, element: RenderedElement) -> ElementFeature:
        return ElementFeature(
            tag_name=element.tag_name.lower(),
            attrs=join_attributes(element.attributes),
            text=normalise_text(element.text_content),
        )


def join_attributes(attributes: Iterable[tuple[str, str]]) -> str:
    """Join attributes as ``name=value`` pairs, preserving their DOM order."""
    return ATTRIBUTE_SEPARATOR.join(f"{name}={value}" for name, value in attributes)


def normalise_text(value: Optional[str]) -> str:
    if not value:
        return ""
    return value.strip().lower()


def extract_fingerprint(
    document: RenderedDocument, brand_name: str, *, url: Optional[str] = None
) -> PageFingerprint:
    return Extractor().extract(document, brand_name, url=url)


__all__ = ["Extractor", "extract_fingerprint", "join_attributes", "normalise_text"]
