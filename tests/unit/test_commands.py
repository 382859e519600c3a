"""Unit tests for GenerateQuoteCommand."""

import logging
from datetime import datetime

import pytest

from decking.application import DeckInput, GenerateQuoteCommand
from decking.domain import (
    DeckConfig,
    MaterialCalculation,
    PriceCalculation,
    compute_materials,
)


class TestGenerateQuoteCommand:
    """Tests for GenerateQuoteCommand.execute."""

    def test_execute_reference_deck(
        self, quote_command: GenerateQuoteCommand, rectangular_config: DeckConfig
    ) -> None:
        output = quote_command.execute(rectangular_config)
        assert output.config is rectangular_config
        assert output.materials.area == pytest.approx(12.0)
        assert output.prices.total == pytest.approx(131560.0)
        assert output.joists.section_counts == (6,)
        assert len(output.layout.panels) == 1
        assert output.generated_at == datetime(2024, 3, 15, 10, 30, 0)
        assert output.warnings == []

    def test_recomputes_on_every_call(
        self, quote_command: GenerateQuoteCommand, rectangular_config: DeckConfig
    ) -> None:
        """Nothing is cached between snapshots."""
        first = quote_command.execute(rectangular_config)
        second = quote_command.execute(rectangular_config.with_dimensions(width=8.0))
        assert first.materials.area == pytest.approx(12.0)
        assert second.materials.area == pytest.approx(24.0)

    def test_injected_calculators_are_used(self, rectangular_config: DeckConfig) -> None:
        calls: list[str] = []

        def fake_materials(config: DeckConfig) -> MaterialCalculation:
            calls.append("materials")
            return compute_materials(config)

        def fake_prices(
            materials: MaterialCalculation, config: DeckConfig
        ) -> PriceCalculation:
            calls.append("prices")
            return PriceCalculation(lames=1.0, lambourdes=2.0, clips=3.0, edges=4.0, total=10.0)

        command = GenerateQuoteCommand(
            materials_calculator=fake_materials, price_calculator=fake_prices
        )
        output = command.execute(rectangular_config)
        assert calls == ["materials", "prices"]
        assert output.prices.total == 10.0

    def test_logs_debug_summary(
        self,
        quote_command: GenerateQuoteCommand,
        rectangular_config: DeckConfig,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="decking.application.commands"):
            quote_command.execute(rectangular_config)
        assert "Quote computed: area=12.00 m2, total=131560.00" in caplog.text


class TestExecuteInput:
    """Tests for GenerateQuoteCommand.execute_input."""

    def test_coerces_and_reports_warnings(
        self,
        quote_command: GenerateQuoteCommand,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="decking.application.commands"):
            output = quote_command.execute_input(DeckInput(width=-2, height=3))
        assert output.config.dimensions.width == 1.0
        assert output.materials.area == pytest.approx(3.0)
        assert output.warnings == ["width adjusted to 1.0 m"]
        assert "Input adjusted: width adjusted to 1.0 m" in caplog.text

    def test_valid_input_matches_execute(
        self, quote_command: GenerateQuoteCommand, rectangular_config: DeckConfig
    ) -> None:
        from_input = quote_command.execute_input(DeckInput())
        direct = quote_command.execute(rectangular_config)
        assert from_input.materials == direct.materials
        assert from_input.prices == direct.prices

    def test_small_wing_is_quoted_as_given(
        self, quote_command: GenerateQuoteCommand
    ) -> None:
        """A 1.5 m x 1.5 m wing adds 2.25 m2, not a 2 m x 2 m wing."""
        output = quote_command.execute_input(
            DeckInput(shape="L", width=4, height=3, extension_width=1.5, extension_height=1.5)
        )
        assert output.materials.area == pytest.approx(14.25)
        assert output.warnings == []
