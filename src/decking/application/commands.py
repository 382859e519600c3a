"""Application commands (use cases) for deck quotes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from decking.domain import (
    DeckConfig,
    DeckLayout,
    JoistLayout,
    MaterialCalculation,
    PriceCalculation,
    compute_joist_lines,
    compute_layout,
    compute_materials,
    compute_prices,
)

from .dtos import DeckInput, QuoteOutput

logger = logging.getLogger(__name__)


class GenerateQuoteCommand:
    """Command to compute a complete deck quote.

    Runs the one-way pipeline configuration -> geometry -> joists and
    materials -> prices. Nothing is cached: each call recomputes every
    result from the snapshot it is given, so the command is safe to share
    between callers.
    """

    def __init__(
        self,
        materials_calculator: Callable[[DeckConfig], MaterialCalculation] | None = None,
        price_calculator: Callable[[MaterialCalculation, DeckConfig], PriceCalculation]
        | None = None,
        joist_calculator: Callable[[DeckConfig], JoistLayout] | None = None,
        layout_calculator: Callable[[DeckConfig], DeckLayout] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.materials_calculator = materials_calculator or compute_materials
        self.price_calculator = price_calculator or compute_prices
        self.joist_calculator = joist_calculator or compute_joist_lines
        self.layout_calculator = layout_calculator or compute_layout
        self.clock = clock or datetime.now

    def execute(self, config: DeckConfig) -> QuoteOutput:
        """Compute materials, prices, joists and layout for a configuration.

        Args:
            config: Deck configuration snapshot.

        Returns:
            QuoteOutput holding every derived result.
        """
        materials = self.materials_calculator(config)
        prices = self.price_calculator(materials, config)
        joists = self.joist_calculator(config)
        layout = self.layout_calculator(config)

        logger.debug(
            f"Quote computed: area={materials.area:.2f} m2, total={prices.total:.2f}"
        )

        return QuoteOutput(
            config=config,
            materials=materials,
            prices=prices,
            joists=joists,
            layout=layout,
            generated_at=self.clock(),
        )

    def execute_input(self, deck_input: DeckInput) -> QuoteOutput:
        """Coerce raw input to a configuration and compute its quote.

        Adjustments made during coercion are reported in ``warnings``.
        """
        warnings = deck_input.validate()
        for warning in warnings:
            logger.info(f"Input adjusted: {warning}")
        output = self.execute(deck_input.to_deck_config())
        output.warnings.extend(warnings)
        return output
