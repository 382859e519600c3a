"""Printable PDF quote exporter built on reportlab's platypus."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from decking.infrastructure.exporters.base import ExporterRegistry
from decking.infrastructure.exporters.bom import BomGenerator
from decking.infrastructure.formatters import (
    QUOTE_TITLE,
    TECHNICAL_NOTES,
    QuoteFormatter,
    format_price,
)

if TYPE_CHECKING:
    from decking.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)

TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
)


@ExporterRegistry.register("pdf")  # type: ignore[arg-type]
class PdfQuoteExporter:
    """Writes the quote as an A4 document.

    Content and order match the text quote; material quantities and
    prices are laid out as tables.
    """

    format_name: ClassVar[str] = "pdf"
    file_extension: ClassVar[str] = "pdf"

    def __init__(self) -> None:
        self.formatter = QuoteFormatter()
        self.bom_generator = BomGenerator()

    def export(self, output: QuoteOutput, path: Path) -> None:
        doc = SimpleDocTemplate(
            str(path),
            pagesize=A4,
            leftMargin=18 * mm,
            rightMargin=18 * mm,
            topMargin=18 * mm,
            bottomMargin=18 * mm,
            title=QUOTE_TITLE,
        )
        doc.build(self.build_story(output))
        logger.info(f"Exported PDF quote to {path}")

    def export_string(self, output: QuoteOutput) -> str:
        raise NotImplementedError("Format 'pdf' does not support string export")

    def build_story(self, output: QuoteOutput) -> list[Any]:
        """Assemble the flowables making up the document."""
        styles = getSampleStyleSheet()
        story: list[Any] = [
            Paragraph(QUOTE_TITLE, styles["Title"]),
            Paragraph(
                f"Date: {self.formatter.format_date(output.generated_at)}",
                styles["Normal"],
            ),
            Spacer(1, 10),
            Paragraph("Configuration", styles["Heading2"]),
        ]

        # Skip the "Configuration:" header line, keep the bullet items
        for line in self.formatter.configuration_lines(output)[1:]:
            story.append(Paragraph(line.removeprefix("- "), styles["Normal"]))
        story.append(Spacer(1, 10))

        bom = self.bom_generator.generate(output)

        story.append(Paragraph("Matériaux nécessaires", styles["Heading2"]))
        material_rows = [["Matériau", "Quantité"]]
        material_rows.extend(
            [line.item, f"{line.quantity_text} {line.unit}"] for line in bom.lines
        )
        materials_table = Table(material_rows, colWidths=[75 * mm, 50 * mm])
        materials_table.setStyle(TABLE_STYLE)
        story.append(materials_table)
        story.append(Spacer(1, 10))

        story.append(Paragraph("Prix détaillé", styles["Heading2"]))
        price_rows = [["Poste", "Prix unitaire", "Montant"]]
        price_rows.extend(
            [
                line.item,
                f"{format_price(line.unit_price)}/{line.price_unit}",
                format_price(line.total),
            ]
            for line in bom.lines
        )
        price_rows.append(["TOTAL", "", format_price(bom.total)])
        price_table = Table(price_rows, colWidths=[60 * mm, 50 * mm, 50 * mm])
        price_table.setStyle(TABLE_STYLE)
        price_table.setStyle(
            TableStyle([("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold")])
        )
        story.append(price_table)
        story.append(Spacer(1, 10))

        story.append(Paragraph("Informations techniques", styles["Heading2"]))
        story.extend(Paragraph(note, styles["Normal"]) for note in TECHNICAL_NOTES)
        return story
