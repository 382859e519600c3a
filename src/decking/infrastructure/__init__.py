"""Infrastructure layer - formatters and exporters."""

from .formatters import (
    JoistLayoutFormatter,
    LayoutFormatter,
    QuoteFormatter,
    format_price,
)
from .exporters import (
    BomGenerator,
    ExportError,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonQuoteExporter,
    PdfQuoteExporter,
    TextQuoteExporter,
)

__all__ = [
    "BomGenerator",
    "ExportError",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JoistLayoutFormatter",
    "JsonQuoteExporter",
    "LayoutFormatter",
    "PdfQuoteExporter",
    "QuoteFormatter",
    "TextQuoteExporter",
    "format_price",
]
