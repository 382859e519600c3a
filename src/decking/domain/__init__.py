"""Domain layer - core deck calculations."""

from .services import (
    DeckLayout,
    JoistLayout,
    compute_area,
    compute_joist_lines,
    compute_layout,
    compute_materials,
    compute_perimeter,
    compute_prices,
)
from .value_objects import (
    DeckConfig,
    DeckShape,
    Dimensions,
    EdgeSelection,
    EdgeType,
    MaterialCalculation,
    PriceCalculation,
    Side,
    WoodColor,
    WoodFinish,
)

__all__ = [
    "DeckConfig",
    "DeckLayout",
    "DeckShape",
    "Dimensions",
    "EdgeSelection",
    "EdgeType",
    "JoistLayout",
    "MaterialCalculation",
    "PriceCalculation",
    "Side",
    "WoodColor",
    "WoodFinish",
    "compute_area",
    "compute_joist_lines",
    "compute_layout",
    "compute_materials",
    "compute_perimeter",
    "compute_prices",
]
