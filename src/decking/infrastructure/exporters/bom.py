"""Bill of Materials (BOM) for deck quotes.

Each material line pairs the quantity to order with the quantity it is
priced on, since the two differ: planks are ordered by length but priced
on deck area, and clips are ordered in whole units but priced on the
exact estimate.

Output format: csv
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from decking.domain.services import (
    CLIPS_PRICE_PER_UNIT,
    LAMBOURDES_PRICE_PER_M,
    LAMES_PRICE_PER_M2,
    clip_units_to_order,
    edge_price_per_meter,
)
from decking.infrastructure.exporters.base import ExporterRegistry
from decking.infrastructure.formatters import edge_label

if TYPE_CHECKING:
    from decking.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BomLine:
    """One material line of the bill.

    Attributes:
        item: Material name.
        quantity: Quantity to order, in ``unit``.
        unit: Unit of the ordered quantity.
        priced_quantity: Quantity the price is based on.
        price_unit: Unit of ``unit_price``.
        unit_price: Price per ``price_unit``.
        total: Line amount.
    """

    item: str
    quantity: int | float
    unit: str
    priced_quantity: float
    price_unit: str
    unit_price: float
    total: float

    @property
    def quantity_text(self) -> str:
        """Quantity to order, as a whole count for unit items."""
        if isinstance(self.quantity, int):
            return f"{self.quantity:d}"
        return f"{self.quantity:.2f}"


@dataclass(frozen=True)
class BillOfMaterials:
    """Material lines in quote order plus the grand total."""

    lines: tuple[BomLine, ...]
    total: float


@ExporterRegistry.register("csv")  # type: ignore[arg-type]
class BomGenerator:
    """Bill of Materials generator for deck quotes."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    HEADER = (
        "Item",
        "Quantity",
        "Unit",
        "Priced Quantity",
        "Price Unit",
        "Unit Price",
        "Total",
    )

    def generate(self, output: QuoteOutput) -> BillOfMaterials:
        """Build the bill from a computed quote."""
        materials = output.materials
        prices = output.prices
        config = output.config

        lines = [
            BomLine(
                item="Lames",
                quantity=round(materials.lames, 2),
                unit="m",
                priced_quantity=materials.area,
                price_unit="m²",
                unit_price=LAMES_PRICE_PER_M2,
                total=prices.lames,
            ),
            BomLine(
                item="Lambourdes",
                quantity=round(materials.lambourdes, 2),
                unit="m",
                priced_quantity=materials.lambourdes,
                price_unit="m",
                unit_price=LAMBOURDES_PRICE_PER_M,
                total=prices.lambourdes,
            ),
            BomLine(
                item="Clips de fixation",
                quantity=clip_units_to_order(materials),
                unit="unités",
                priced_quantity=materials.clips,
                price_unit="unité",
                unit_price=CLIPS_PRICE_PER_UNIT,
                total=prices.clips,
            ),
        ]
        if config.include_edges:
            lines.append(
                BomLine(
                    item=edge_label(config.edge_type),
                    quantity=round(materials.edges, 2),
                    unit="m",
                    priced_quantity=materials.edges,
                    price_unit="m",
                    unit_price=edge_price_per_meter(config.edge_type),
                    total=prices.edges,
                )
            )

        return BillOfMaterials(lines=tuple(lines), total=prices.total)

    def export(self, output: QuoteOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported BOM to {path}")

    def export_string(self, output: QuoteOutput) -> str:
        return self.format_csv(self.generate(output))

    def format_csv(self, bom: BillOfMaterials) -> str:
        """Format the bill as CSV with a trailing TOTAL row."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self.HEADER)
        for line in bom.lines:
            writer.writerow(
                [
                    line.item,
                    line.quantity_text,
                    line.unit,
                    f"{line.priced_quantity:.2f}",
                    line.price_unit,
                    f"{line.unit_price:.2f}",
                    f"{line.total:.2f}",
                ]
            )
        writer.writerow(["TOTAL", "", "", "", "", "", f"{bom.total:.2f}"])
        return buffer.getvalue()
