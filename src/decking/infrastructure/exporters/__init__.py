"""Quote export framework.

Importing this package registers every built-in exporter:
- txt: plain text quote
- json: structured quote with joist layout and plan geometry
- csv: itemised bill of materials
- pdf: printable A4 document
"""

from decking.infrastructure.exporters.base import (
    DEFAULT_PROJECT_NAME,
    ExportError,
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from decking.infrastructure.exporters.bom import BillOfMaterials, BomGenerator, BomLine
from decking.infrastructure.exporters.pdf import PdfQuoteExporter
from decking.infrastructure.exporters.structured import JsonQuoteExporter
from decking.infrastructure.exporters.text import TextQuoteExporter

__all__ = [
    "BillOfMaterials",
    "BomGenerator",
    "BomLine",
    "DEFAULT_PROJECT_NAME",
    "ExportError",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonQuoteExporter",
    "PdfQuoteExporter",
    "TextQuoteExporter",
]
