"""Text formatters for deck quotes and layouts."""

from __future__ import annotations

from datetime import datetime

from decking.application.dtos import QuoteOutput
from decking.domain import DeckConfig, DeckLayout, DeckShape, JoistLayout
from decking.domain.services import (
    CLIPS_PER_M2,
    CURRENCY_SYMBOL,
    JOIST_SPACING,
    LAMBOURDES_PER_M2,
    LAMES_PER_M2,
    clip_units_to_order,
    extension_size,
)
from decking.domain.value_objects import EdgeType, WoodColor, WoodFinish

QUOTE_TITLE = "DEVIS TERRASSE EN BOIS COMPOSITE"

TECHNICAL_NOTES: tuple[str, ...] = (
    f"Lambourdes espacées de {JOIST_SPACING * 100:g} cm",
    "Lames posées perpendiculairement sur les lambourdes",
    (
        f"Consommation par m²: {LAMES_PER_M2:g}m de lames, "
        f"{LAMBOURDES_PER_M2:g}m de lambourdes, {CLIPS_PER_M2:g} clips"
    ),
)


def format_price(amount: float) -> str:
    """Format an amount in the quote currency.

    Uses French grouping with a plain space as thousands separator and a
    comma as decimal mark, e.g. ``93 600,00 DA``.
    """
    grouped = f"{amount:,.2f}".replace(",", " ").replace(".", ",")
    return f"{grouped} {CURRENCY_SYMBOL}"


def format_meters(value: float) -> str:
    """Format a user-entered size the way it was typed (4 -> "4m")."""
    return f"{value:g}m"


def edge_label(edge_type: EdgeType | str) -> str:
    if isinstance(edge_type, EdgeType):
        return edge_type.label
    return str(edge_type).capitalize()


def _shape_label(config: DeckConfig) -> str:
    if isinstance(config.shape, DeckShape):
        return config.shape.label
    return str(config.shape)


def _choice_label(choice: WoodColor | WoodFinish | str) -> str:
    if isinstance(choice, (WoodColor, WoodFinish)):
        return choice.label
    return str(choice).capitalize()


class QuoteFormatter:
    """Formats a quote as plain text.

    Sections always appear in the same order: title, date, configuration,
    surface and perimeter, materials, prices, total, technical notes. The
    output depends only on the quote content and the date, so two quotes
    for the same configuration on the same day are identical.
    """

    def __init__(self, include_date: bool = True) -> None:
        self._include_date = include_date

    def format(self, output: QuoteOutput) -> str:
        lines = [QUOTE_TITLE, "=" * len(QUOTE_TITLE)]
        if self._include_date:
            lines.append(f"Date: {self.format_date(output.generated_at)}")
        lines.append("")

        lines.extend(self.configuration_lines(output))
        lines.append("")
        lines.extend(self.materials_lines(output))
        lines.append("")
        lines.extend(self.price_lines(output))
        lines.append("")
        lines.append(f"TOTAL: {format_price(output.prices.total)}")
        lines.append("")
        lines.append("Informations techniques:")
        lines.extend(f"- {note}" for note in TECHNICAL_NOTES)

        return "\n".join(lines) + "\n"

    @staticmethod
    def format_date(moment: datetime) -> str:
        return moment.strftime("%d/%m/%Y")

    def configuration_lines(self, output: QuoteOutput) -> list[str]:
        config = output.config
        dims = config.dimensions
        lines = [
            "Configuration:",
            f"- Forme: {_shape_label(config)}",
            f"- Dimensions: {format_meters(dims.width)} × {format_meters(dims.height)}",
        ]
        if config.shape in (DeckShape.L_SHAPED, DeckShape.U_SHAPED):
            ext_w, ext_h = extension_size(dims)
            lines.append(f"- Extension: {format_meters(ext_w)} × {format_meters(ext_h)}")
        lines.append(f"- Couleur: {_choice_label(config.color)}")
        lines.append(f"- Finition: {_choice_label(config.finish)}")
        if config.include_edges:
            sides = config.effective_edge_selection.selected_sides
            names = ", ".join(side.label for side in sides) or "aucun"
            lines.append(
                f"- Contours: {edge_label(config.edge_type)} "
                f"sur {len(sides)}/4 côtés ({names})"
            )
        lines.append(f"- Surface totale: {output.materials.area:.2f} m²")
        lines.append(f"- Périmètre: {output.materials.perimeter:.2f} m")
        return lines

    def materials_lines(self, output: QuoteOutput) -> list[str]:
        materials = output.materials
        lines = [
            "Matériaux nécessaires:",
            f"- Lames: {materials.lames:.2f} m",
            f"- Lambourdes: {materials.lambourdes:.2f} m",
            f"- Clips de fixation: {clip_units_to_order(materials)} unités",
        ]
        if output.config.include_edges:
            lines.append(
                f"- {edge_label(output.config.edge_type)}: {materials.edges:.2f} m"
            )
        return lines

    def price_lines(self, output: QuoteOutput) -> list[str]:
        prices = output.prices
        lines = [
            "Prix détaillé:",
            f"- Lames: {format_price(prices.lames)}",
            f"- Lambourdes: {format_price(prices.lambourdes)}",
            f"- Clips: {format_price(prices.clips)}",
        ]
        if output.config.include_edges:
            lines.append(
                f"- {edge_label(output.config.edge_type)}: {format_price(prices.edges)}"
            )
        return lines


class JoistLayoutFormatter:
    """Formats the joist summary shown alongside the joist plan."""

    SECTION_NAMES: dict[int, tuple[str, ...]] = {
        1: ("Section principale",),
        2: ("Section principale", "Extension"),
        3: ("Section principale", "Extension gauche", "Extension droite"),
    }

    def format(self, joists: JoistLayout) -> str:
        lines = [
            "LAMBOURDES",
            "=" * 40,
        ]
        names = self.SECTION_NAMES[len(joists.section_counts)]
        for name, count in zip(names, joists.section_counts):
            lines.append(f"{name:<24} {count:>4} lignes")
        lines.append("-" * 40)
        lines.append(f"{'Lignes de lambourdes':<24} {joists.line_count:>4}")
        lines.append(f"{'Longueur totale':<24} {joists.total_length:>6.1f} m")
        lines.append(f"{'Espacement':<24} {joists.spacing * 100:>4g} cm")
        lines.append("Lames perpendiculaires aux lambourdes")
        return "\n".join(lines)


class LayoutFormatter:
    """Lists panels, joist lines and trim segments of a deck plan."""

    def format(self, layout: DeckLayout) -> str:
        lines = ["PLAN DE LA TERRASSE", "=" * 60]

        lines.append("Panneaux:")
        for panel in layout.panels:
            lines.append(
                f"  {panel.name:<16} x={panel.x:>6.2f} y={panel.y:>6.2f} "
                f"{panel.width:g}m × {panel.height:g}m ({panel.area:.2f} m²)"
            )

        lines.append("Lambourdes:")
        for panel in layout.panels:
            offsets = ", ".join(f"{line.y:g}" for line in layout.lines_for(panel.name))
            lines.append(f"  {panel.name:<16} y = {offsets}")

        lines.append("Contours:")
        if layout.trim_segments:
            for segment in layout.trim_segments:
                lines.append(
                    f"  {segment.side.label:<16} {segment.start} -> {segment.end} "
                    f"({segment.length:g} m)"
                )
        else:
            lines.append("  (aucun)")

        min_x, min_y, max_x, max_y = layout.bounds
        lines.append(f"Emprise: {max_x - min_x:g}m × {max_y - min_y:g}m")
        return "\n".join(lines)
