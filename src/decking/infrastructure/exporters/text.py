"""Plain text quote exporter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from decking.infrastructure.exporters.base import ExporterRegistry
from decking.infrastructure.formatters import QuoteFormatter

if TYPE_CHECKING:
    from decking.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("txt")  # type: ignore[arg-type]
class TextQuoteExporter:
    """Writes the quote as a UTF-8 text document."""

    format_name: ClassVar[str] = "txt"
    file_extension: ClassVar[str] = "txt"

    def __init__(self, formatter: QuoteFormatter | None = None) -> None:
        self.formatter = formatter or QuoteFormatter()

    def export(self, output: QuoteOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported text quote to {path}")

    def export_string(self, output: QuoteOutput) -> str:
        return self.formatter.format(output)
