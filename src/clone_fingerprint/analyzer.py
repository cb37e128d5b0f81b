"""High-level orchestration for comparing a batch of pages to a template."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Callable, Optional, Sequence

from .adapters import Renderer
from .config import RenderConfig
from .core.comparer import Comparer
from .core.extractor import Extractor
from .core.models import (
    BatchResult,
    BatchTimings,
    ComparisonResult,
    PageFingerprint,
    PageTarget,
)
from .renderer import PlaywrightRenderer, session_slot

logger = logging.getLogger(__name__)

RendererFactory = Callable[[RenderConfig], Renderer]


class BatchAnalyzer:
    """Renders each target in turn and scores it against the first one.

    A single rendering session is opened per ``run`` and used sequentially;
    any failure aborts the batch.
    """

    def __init__(
        self,
        render_config: RenderConfig,
        *,
        renderer_factory: Optional[RendererFactory] = None,
        extractor: Optional[Extractor] = None,
        comparer: Optional[Comparer] = None,
    ) -> None:
        self.render_config = render_config
        self._renderer_factory: RendererFactory = renderer_factory or PlaywrightRenderer
        self._extractor = extractor or Extractor()
        self._comparer = comparer or Comparer()

    def run(self, targets: Sequence[PageTarget]) -> BatchResult:
        if not targets:
            raise ValueError("At least one target is required")
        template_target = targets[0]
        logger.info(
            "Comparing %d page(s) against template %s", len(targets), template_target.url
        )
        render_timings: dict[str, float] = {}
        extract_timings: dict[str, float] = {}
        compare_time = 0.0
        results: list[ComparisonResult] = []

        with session_slot(), self._renderer_factory(self.render_config) as renderer:
            template = self._fingerprint(renderer, template_target, render_timings, extract_timings)

            for index, target in enumerate(targets):
                if index == 0:
                    candidate = template
                else:
                    candidate = self._fingerprint(renderer, target, render_timings, extract_timings)
                start = perf_counter()
                result = self._comparer.compare(template, candidate, url=target.url)
                compare_time += perf_counter() - start
                logger.info(
                    "Scored %s: structure=%.2f%% content=%.2f%% brand=%s",
                    target.url,
                    result.structural_similarity,
                    result.content_similarity,
                    result.brand_match.value,
                )
                results.append(result)

        timings = BatchTimings(render=render_timings, extract=extract_timings, compare=compare_time)
        logger.info(
            "Batch timings (s): render=%.2f extract=%.2f compare=%.2f total=%.2f",
            sum(render_timings.values()),
            sum(extract_timings.values()),
            compare_time,
            timings.total,
        )
        return BatchResult(template=template_target, results=results, timings=timings)

    def _fingerprint(
        self,
        renderer: Renderer,
        target: PageTarget,
        render_timings: dict[str, float],
        extract_timings: dict[str, float],
    ) -> PageFingerprint:
        start = perf_counter()
        document = renderer.load(target.url)
        render_timings[target.url] = render_timings.get(target.url, 0.0) + perf_counter() - start

        start = perf_counter()
        fingerprint = self._extractor.extract(document, target.brand_name, url=target.url)
        extract_timings[target.url] = extract_timings.get(target.url, 0.0) + perf_counter() - start
        return fingerprint


__all__ = ["BatchAnalyzer", "RendererFactory"]
