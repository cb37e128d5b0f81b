"""Report generation for template comparison batches."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from .config import ReportConfig
from .core.models import BatchResult, BrandMatch, ComparisonResult
from .utils import format_percentage, truncate

TABLE_SEPARATOR = "-" * 58
TABLE_HEADER = "| URL | Structural Similarity | Content Similarity | Brand Name Match |"

_BRAND_COLOURS = {
    BrandMatch.MATCH: (34, 139, 34),
    BrandMatch.COUNT_MISMATCH: (200, 50, 50),
    BrandMatch.POSITION_MISMATCH: (214, 140, 20),
}


class ReportBuilder:
    def __init__(self, config: ReportConfig) -> None:
        self.config = config

    def build_table(self, batch: BatchResult) -> str:
        lines: List[str] = [
            f"Comparing against template: {batch.template.url}",
            TABLE_SEPARATOR,
            TABLE_HEADER,
            TABLE_SEPARATOR,
        ]
        for result in batch.results:
            structure, content = self._percentages(result)
            lines.append(
                f"| {result.url} | {structure}% | {content}% | {result.brand_match.value} |"
            )
            lines.append(TABLE_SEPARATOR)
        return "\n".join(lines) + "\n"

    def build_markdown(self, batch: BatchResult) -> str:
        lines: List[str] = []
        lines.append("# Template Similarity Report")
        lines.append("")
        lines.append(f"**Template URL:** {batch.template.url}")
        lines.append(f"**Brand name:** {batch.template.brand_name}")
        lines.append("")
        lines.append("## Results")
        lines.append("| URL | Structural Similarity | Content Similarity | Brand Name Match |")
        lines.append("| --- | ---: | ---: | --- |")
        for result in batch.results:
            structure, content = self._percentages(result)
            lines.append(
                f"| {result.url} | {structure}% | {content}% | {result.brand_match.value} |"
            )
        lines.append("")
        lines.extend(self._render_flags(batch.results))
        if self.config.include_timings:
            lines.extend(self._render_timings(batch))
        return "\n".join(lines).strip() + "\n"

    def build_json(self, batch: BatchResult) -> List[Dict[str, Any]]:
        payload: List[Dict[str, Any]] = []
        for result in batch.results:
            structure, content = self._percentages(result)
            payload.append(
                {
                    "url": result.url,
                    "structuralSim": structure,
                    "contentSim": content,
                    "brandNameMatch": result.brand_match.value,
                }
            )
        return payload

    def build_pdf(self, batch: BatchResult, output_path: str) -> None:
        try:  # defer import so PDF support stays optional
            from fpdf import FPDF
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError(
                "PDF output requested but the optional dependency 'fpdf2' is not installed."
            ) from exc

        pdf = FPDF()
        pdf.set_auto_page_break(auto=True, margin=15)
        pdf.add_page()
        pdf.set_title("Template Similarity Report")

        self._pdf_add_header(pdf, batch)
        pdf.ln(3)
        self._pdf_add_results(pdf, batch.results)
        if self.config.include_timings:
            pdf.ln(3)
            self._pdf_add_timings(pdf, batch)

        pdf.output(output_path)

    def _percentages(self, result: ComparisonResult) -> tuple[str, str]:
        return (
            format_percentage(result.structural_similarity, self.config.precision),
            format_percentage(result.content_similarity, self.config.precision),
        )

    def _render_flags(self, results: List[ComparisonResult]) -> List[str]:
        flagged = [result for result in results if result.brand_match is not BrandMatch.MATCH]
        if not flagged:
            return ["## Brand Placement", "- Brand name placement matches the template on every page", ""]
        lines = ["## Brand Placement"]
        for result in flagged:
            lines.append(f"- {result.brand_match.value}: {result.url}")
        lines.append("")
        return lines

    def _render_timings(self, batch: BatchResult) -> List[str]:
        timings = batch.timings
        if not timings.total:
            return []
        return [
            "## Run Time",
            f"- Render: {sum(timings.render.values()):.1f}s",
            f"- Extract: {sum(timings.extract.values()):.1f}s",
            f"- Compare: {timings.compare:.2f}s",
            f"- Total: {timings.total:.1f}s",
            "",
        ]

    def _pdf_add_header(self, pdf, batch: BatchResult) -> None:
        pdf.set_font("Helvetica", "B", 17)
        pdf.cell(0, 10, "Template Similarity Report", new_x="LMARGIN", new_y="NEXT")

        pdf.set_font("Helvetica", size=11)
        self._pdf_text(pdf, f"Template URL: {batch.template.url}", line_height=6)
        self._pdf_text(pdf, f"Brand name: {batch.template.brand_name}", line_height=6)

        generated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        self._pdf_text(pdf, f"Generated: {generated}", line_height=6)

    def _pdf_add_results(self, pdf, results: List[ComparisonResult]) -> None:
        pdf.set_font("Helvetica", "B", 14)
        pdf.cell(0, 8, "Results", new_x="LMARGIN", new_y="NEXT")

        if not results:
            pdf.set_font("Helvetica", size=10)
            self._pdf_text(pdf, "No pages were compared", line_height=6)
            return

        for index, result in enumerate(results, start=1):
            structure, content = self._percentages(result)
            pdf.set_font("Helvetica", "B", 11)
            self._pdf_text(pdf, f"{index}. {truncate(result.url, 90)}", line_height=6)
            pdf.set_font("Helvetica", size=10)
            self._pdf_text(
                pdf,
                f"Structural {structure}% | Content {content}%",
                line_height=5.5,
            )
            pdf.set_text_color(*_BRAND_COLOURS[result.brand_match])
            self._pdf_text(pdf, f"Brand name: {result.brand_match.value}", line_height=5.5)
            pdf.set_text_color(0, 0, 0)
            pdf.ln(2)

    def _pdf_add_timings(self, pdf, batch: BatchResult) -> None:
        timings = batch.timings
        if not timings.total:
            return
        pdf.set_font("Helvetica", "B", 14)
        pdf.cell(0, 8, "Run Time", new_x="LMARGIN", new_y="NEXT")
        pdf.set_font("Helvetica", size=10)
        self._pdf_text(
            pdf,
            "Total {:.1f}s (render {:.1f}s | extract {:.1f}s | compare {:.2f}s)".format(
                timings.total,
                sum(timings.render.values()),
                sum(timings.extract.values()),
                timings.compare,
            ),
            line_height=6,
        )

    def _pdf_text(self, pdf, text: str, line_height: float = 5.0) -> None:
        if not text:
            return
        # Core PDF fonts only cover latin-1
        text = text.encode("latin-1", "replace").decode("latin-1")
        pdf.multi_cell(0, line_height, text, new_x="LMARGIN", new_y="NEXT")


__all__ = ["ReportBuilder", "TABLE_HEADER", "TABLE_SEPARATOR"]
