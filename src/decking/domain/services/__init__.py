"""Domain services for deck geometry, joist layout and estimation.

This package provides the pure calculation pipeline:
- Area and perimeter of the deck footprint
- Joist line layout per section
- Plan layout (panels, joist lines, trim segments)
- Material quantities and prices
"""

from .constants import (
    CLIPS_PER_M2,
    CLIPS_PRICE_PER_UNIT,
    CORNIERES_PRICE_PER_M,
    CURRENCY_SYMBOL,
    DEFAULT_EXTENSION_SIZE,
    JOIST_SPACING,
    LAMBOURDES_PER_M2,
    LAMBOURDES_PRICE_PER_M,
    LAMES_PER_M2,
    LAMES_PRICE_PER_M2,
    MIN_EXTENSION_SIZE,
    MIN_MAIN_SIZE,
    PLINTHES_PRICE_PER_M,
)
from .geometry import (
    compute_area,
    compute_full_perimeter,
    compute_perimeter,
    extension_size,
    selected_side_count,
    side_length,
)
from .joists import JoistLayout, compute_joist_lines, joist_line_count
from .layout import DeckLayout, JoistLine, PanelRect, TrimSegment, compute_layout
from .materials import (
    clip_units_to_order,
    compute_materials,
    compute_prices,
    edge_price_per_meter,
)

__all__ = [
    "CLIPS_PER_M2",
    "CLIPS_PRICE_PER_UNIT",
    "CORNIERES_PRICE_PER_M",
    "CURRENCY_SYMBOL",
    "DEFAULT_EXTENSION_SIZE",
    "DeckLayout",
    "JOIST_SPACING",
    "JoistLayout",
    "JoistLine",
    "LAMBOURDES_PER_M2",
    "LAMBOURDES_PRICE_PER_M",
    "LAMES_PER_M2",
    "LAMES_PRICE_PER_M2",
    "MIN_EXTENSION_SIZE",
    "MIN_MAIN_SIZE",
    "PLINTHES_PRICE_PER_M",
    "PanelRect",
    "TrimSegment",
    "clip_units_to_order",
    "compute_area",
    "compute_full_perimeter",
    "compute_joist_lines",
    "compute_layout",
    "compute_materials",
    "compute_perimeter",
    "compute_prices",
    "edge_price_per_meter",
    "extension_size",
    "joist_line_count",
    "selected_side_count",
    "side_length",
]
