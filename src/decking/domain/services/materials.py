"""Material quantity and price estimation."""

from __future__ import annotations

import math

from decking.domain.services.constants import (
    CLIPS_PER_M2,
    CLIPS_PRICE_PER_UNIT,
    EDGE_PRICES_PER_M,
    LAMBOURDES_PER_M2,
    LAMBOURDES_PRICE_PER_M,
    LAMES_PER_M2,
    LAMES_PRICE_PER_M2,
    PLINTHES_PRICE_PER_M,
)
from decking.domain.services.geometry import compute_area, compute_perimeter
from decking.domain.value_objects import (
    DeckConfig,
    EdgeType,
    MaterialCalculation,
    PriceCalculation,
)

__all__ = [
    "clip_units_to_order",
    "compute_materials",
    "compute_prices",
    "edge_price_per_meter",
]


def compute_materials(config: DeckConfig) -> MaterialCalculation:
    """Estimate material quantities for a deck.

    Planks, joists and clips scale linearly with area. Edge trim equals
    the selected perimeter, or 0 when trim is disabled.
    """
    area = compute_area(config)
    perimeter = compute_perimeter(config)
    return MaterialCalculation(
        area=area,
        lames=area * LAMES_PER_M2,
        lambourdes=area * LAMBOURDES_PER_M2,
        clips=area * CLIPS_PER_M2,
        edges=perimeter,
        perimeter=perimeter,
    )


def edge_price_per_meter(edge_type: EdgeType) -> float:
    """Trim price per meter. Unknown styles fall back to the plinthe rate."""
    return EDGE_PRICES_PER_M.get(edge_type, PLINTHES_PRICE_PER_M)


def compute_prices(
    materials: MaterialCalculation, config: DeckConfig
) -> PriceCalculation:
    """Price each material line and sum the total.

    Planks are priced on deck area, joists on their purchasing length,
    clips per unit (unrounded) and trim per meter of the selected style.
    """
    lames = materials.area * LAMES_PRICE_PER_M2
    lambourdes = materials.lambourdes * LAMBOURDES_PRICE_PER_M
    clips = materials.clips * CLIPS_PRICE_PER_UNIT
    edges = (
        materials.edges * edge_price_per_meter(config.edge_type)
        if config.include_edges
        else 0.0
    )
    return PriceCalculation(
        lames=lames,
        lambourdes=lambourdes,
        clips=clips,
        edges=edges,
        total=lames + lambourdes + clips + edges,
    )


def clip_units_to_order(materials: MaterialCalculation) -> int:
    """Whole number of clips to order."""
    return math.ceil(materials.clips)
