"""Unit tests for text formatters."""

import pytest

from decking.application import GenerateQuoteCommand, QuoteOutput
from decking.domain import DeckConfig, EdgeSelection, EdgeType
from decking.infrastructure import (
    JoistLayoutFormatter,
    LayoutFormatter,
    QuoteFormatter,
    format_price,
)
from decking.infrastructure.formatters import QUOTE_TITLE, TECHNICAL_NOTES


class TestFormatPrice:
    """Tests for format_price."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (93600.0, "93 600,00 DA"),
            (131560.0, "131 560,00 DA"),
            (0.0, "0,00 DA"),
            (1234567.891, "1 234 567,89 DA"),
            (60.0, "60,00 DA"),
        ],
    )
    def test_format(self, amount: float, expected: str) -> None:
        assert format_price(amount) == expected


class TestQuoteFormatter:
    """Tests for the plain-text quote."""

    def test_header(self, quote_output: QuoteOutput) -> None:
        lines = QuoteFormatter().format(quote_output).splitlines()
        assert lines[0] == QUOTE_TITLE
        assert lines[1] == "=" * len(QUOTE_TITLE)
        assert lines[2] == "Date: 15/03/2024"

    def test_reference_deck_content(self, quote_output: QuoteOutput) -> None:
        text = QuoteFormatter().format(quote_output)
        assert "- Forme: Rectangulaire" in text
        assert "- Dimensions: 4m × 3m" in text
        assert "- Couleur: Chêne" in text
        assert "- Finition: Brossée" in text
        assert "- Contours: Cornières sur 4/4 côtés (Haut, Bas, Gauche, Droite)" in text
        assert "- Surface totale: 12.00 m²" in text
        assert "- Périmètre: 14.00 m" in text
        assert "- Lames: 82.68 m" in text
        assert "- Lambourdes: 36.00 m" in text
        assert "- Clips de fixation: 216 unités" in text
        assert "- Cornières: 14.00 m" in text
        assert "- Lames: 93 600,00 DA" in text
        assert "- Lambourdes: 18 000,00 DA" in text
        assert "- Clips: 12 960,00 DA" in text
        assert "- Cornières: 7 000,00 DA" in text
        assert "TOTAL: 131 560,00 DA" in text

    def test_section_order(self, quote_output: QuoteOutput) -> None:
        text = QuoteFormatter().format(quote_output)
        markers = [
            "Configuration:",
            "Surface totale",
            "Matériaux nécessaires:",
            "Prix détaillé:",
            "TOTAL:",
            "Informations techniques:",
        ]
        positions = [text.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_technical_notes(self, quote_output: QuoteOutput) -> None:
        text = QuoteFormatter().format(quote_output)
        for note in TECHNICAL_NOTES:
            assert f"- {note}" in text
        assert "Lambourdes espacées de 50 cm" in text
        assert text.endswith("\n")

    def test_without_date(self, quote_output: QuoteOutput) -> None:
        text = QuoteFormatter(include_date=False).format(quote_output)
        assert "Date:" not in text

    def test_same_input_same_output(self, quote_output: QuoteOutput) -> None:
        formatter = QuoteFormatter()
        assert formatter.format(quote_output) == formatter.format(quote_output)

    def test_no_edge_lines_when_disabled(
        self, quote_command: GenerateQuoteCommand, rectangular_config: DeckConfig
    ) -> None:
        output = quote_command.execute(rectangular_config.with_updates(include_edges=False))
        text = QuoteFormatter().format(output)
        assert "Contours" not in text
        assert "Cornières" not in text
        assert "TOTAL: 124 560,00 DA" in text

    def test_partial_selection(
        self, quote_command: GenerateQuoteCommand, rectangular_config: DeckConfig
    ) -> None:
        config = rectangular_config.with_updates(
            edge_type=EdgeType.PLINTHES,
            edge_selection=EdgeSelection(top=True, bottom=False, left=True, right=False),
        )
        text = QuoteFormatter().format(quote_command.execute(config))
        assert "- Contours: Plinthes sur 2/4 côtés (Haut, Gauche)" in text
        assert "- Plinthes: 7.00 m" in text
        assert "- Plinthes: 2 100,00 DA" in text

    def test_extension_line_for_l_shape(
        self, quote_command: GenerateQuoteCommand, l_config: DeckConfig
    ) -> None:
        text = QuoteFormatter().format(quote_command.execute(l_config))
        assert "- Forme: Forme L" in text
        assert "- Extension: 2m × 2m" in text
        assert "- Surface totale: 16.00 m²" in text

    def test_no_extension_line_for_rectangle(self, quote_output: QuoteOutput) -> None:
        assert "Extension" not in QuoteFormatter().format(quote_output)


class TestJoistLayoutFormatter:
    """Tests for the joist summary."""

    def test_rectangular(self, quote_output: QuoteOutput) -> None:
        text = JoistLayoutFormatter().format(quote_output.joists)
        assert text.startswith("LAMBOURDES")
        assert "Section principale" in text
        assert "Extension" not in text
        assert "36.0 m" in text
        assert "50 cm" in text

    def test_u_shape_sections(
        self, quote_command: GenerateQuoteCommand, u_config: DeckConfig
    ) -> None:
        text = JoistLayoutFormatter().format(quote_command.execute(u_config).joists)
        assert "Extension gauche" in text
        assert "Extension droite" in text
        assert "Lignes de lambourdes" in text
        assert "  14" in text


class TestLayoutFormatter:
    """Tests for the plan listing."""

    def test_lists_panels_and_trim(
        self, quote_command: GenerateQuoteCommand, l_config: DeckConfig
    ) -> None:
        text = LayoutFormatter().format(quote_command.execute(l_config).layout)
        assert text.startswith("PLAN DE LA TERRASSE")
        assert "main" in text
        assert "extension" in text
        assert "Haut" in text
        assert "Emprise: 6m × 3m" in text

    def test_no_trim(
        self, quote_command: GenerateQuoteCommand, rectangular_config: DeckConfig
    ) -> None:
        output = quote_command.execute(rectangular_config.with_updates(include_edges=False))
        assert "(aucun)" in LayoutFormatter().format(output.layout)
