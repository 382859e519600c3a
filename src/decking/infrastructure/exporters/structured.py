"""JSON quote exporter.

The document mirrors the text quote field for field and in the same
order, with raw numbers instead of formatted strings, plus the joist
layout and plan geometry for renderers.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from decking.application.config import deck_config_to_dict
from decking.domain.services import (
    CLIPS_PER_M2,
    CURRENCY_SYMBOL,
    JOIST_SPACING,
    LAMBOURDES_PER_M2,
    LAMES_PER_M2,
    clip_units_to_order,
)
from decking.infrastructure.exporters.base import ExporterRegistry
from decking.infrastructure.formatters import QUOTE_TITLE

if TYPE_CHECKING:
    from decking.application.dtos import QuoteOutput
    from decking.domain import DeckLayout


logger = logging.getLogger(__name__)


@ExporterRegistry.register("json")  # type: ignore[arg-type]
class JsonQuoteExporter:
    """Writes the quote as an indented JSON document."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: QuoteOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported JSON quote to {path}")

    def export_string(self, output: QuoteOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent, ensure_ascii=False)

    def to_dict(self, output: QuoteOutput) -> dict[str, Any]:
        materials = output.materials
        prices = output.prices
        return {
            "title": QUOTE_TITLE,
            "date": output.generated_at.date().isoformat(),
            "configuration": deck_config_to_dict(output.config),
            "area": materials.area,
            "perimeter": materials.perimeter,
            "materials": {
                "lames": {"quantity": materials.lames, "unit": "m"},
                "lambourdes": {"quantity": materials.lambourdes, "unit": "m"},
                "clips": {
                    "quantity": materials.clips,
                    "to_order": clip_units_to_order(materials),
                    "unit": "unités",
                },
                "edges": {"quantity": materials.edges, "unit": "m"},
            },
            "prices": {
                "currency": CURRENCY_SYMBOL,
                "lames": prices.lames,
                "lambourdes": prices.lambourdes,
                "clips": prices.clips,
                "edges": prices.edges,
            },
            "total": prices.total,
            "joists": {
                "section_counts": list(output.joists.section_counts),
                "line_count": output.joists.line_count,
                "total_length": output.joists.total_length,
                "spacing": output.joists.spacing,
            },
            "layout": self._layout_to_dict(output.layout),
            "technical_notes": {
                "lames_per_m2": LAMES_PER_M2,
                "lambourdes_per_m2": LAMBOURDES_PER_M2,
                "clips_per_m2": CLIPS_PER_M2,
                "joist_spacing": JOIST_SPACING,
                "orientation": "planks perpendicular to joists",
            },
        }

    @staticmethod
    def _layout_to_dict(layout: DeckLayout) -> dict[str, Any]:
        return {
            "panels": [
                {
                    "name": panel.name,
                    "x": panel.x,
                    "y": panel.y,
                    "width": panel.width,
                    "height": panel.height,
                }
                for panel in layout.panels
            ],
            "joist_lines": [
                {
                    "panel": line.panel,
                    "y": line.y,
                    "x_start": line.x_start,
                    "x_end": line.x_end,
                }
                for line in layout.joist_lines
            ],
            "trim_segments": [
                {
                    "side": segment.side.value,
                    "start": list(segment.start),
                    "end": list(segment.end),
                }
                for segment in layout.trim_segments
            ],
        }
