"""Consumption, pricing and layout constants for composite decking.

This module provides:
- Per square meter material consumption rates
- Unit prices in the single quote currency
- Joist spacing and extension defaults
"""

from __future__ import annotations

from decking.domain.value_objects import EdgeType


# --- Consumption per square meter of deck ---

LAMES_PER_M2: float = 6.89  # linear meters of plank
LAMBOURDES_PER_M2: float = 3.0  # linear meters of joist
CLIPS_PER_M2: float = 18.0  # fastening clips


# --- Unit prices (DA) ---

LAMES_PRICE_PER_M2: float = 7800.0  # priced on deck area, not plank length
LAMBOURDES_PRICE_PER_M: float = 500.0
CLIPS_PRICE_PER_UNIT: float = 60.0
CORNIERES_PRICE_PER_M: float = 500.0
PLINTHES_PRICE_PER_M: float = 300.0

EDGE_PRICES_PER_M: dict[EdgeType, float] = {
    EdgeType.CORNIERES: CORNIERES_PRICE_PER_M,
    EdgeType.PLINTHES: PLINTHES_PRICE_PER_M,
}

CURRENCY_SYMBOL = "DA"


# --- Layout ---

# Joists run across the width, one line every 50 cm along the height
JOIST_SPACING: float = 0.5

# Used when an L or U deck arrives without extension dimensions
DEFAULT_EXTENSION_SIZE: float = 2.0

# Replace invalid user sizes (missing, non-finite or not above zero)
MIN_MAIN_SIZE: float = 1.0
MIN_EXTENSION_SIZE: float = 2.0

NOMINAL_SIDE_COUNT = 4
