"""Area and perimeter calculations for deck footprints.

The L and U perimeters are estimates, not traced outlines: the full
perimeter uses a closed-form approximation and a partial edge selection
scales it by the share of the four nominal sides that are selected.
Quotes depend on these exact figures, so keep the formulas as they are.
"""

from __future__ import annotations

from decking.domain.services.constants import (
    DEFAULT_EXTENSION_SIZE,
    NOMINAL_SIDE_COUNT,
)
from decking.domain.value_objects import DeckConfig, DeckShape, Dimensions, Side

__all__ = [
    "compute_area",
    "compute_full_perimeter",
    "compute_perimeter",
    "extension_size",
    "selected_side_count",
    "side_length",
]


def extension_size(dimensions: Dimensions) -> tuple[float, float]:
    """Return (extension_width, extension_height) with defaults applied."""
    ext_w = dimensions.extension_width or DEFAULT_EXTENSION_SIZE
    ext_h = dimensions.extension_height or DEFAULT_EXTENSION_SIZE
    return ext_w, ext_h


def side_length(dimensions: Dimensions, side: Side) -> float:
    """Length of one side of the main rectangle."""
    if side in (Side.TOP, Side.BOTTOM):
        return dimensions.width
    return dimensions.height


def selected_side_count(config: DeckConfig) -> int:
    """Number of main-rectangle sides receiving trim (0 when trim is off)."""
    if not config.include_edges:
        return 0
    return config.effective_edge_selection.selected_count


def compute_area(config: DeckConfig) -> float:
    """Total deck surface in square meters."""
    dims = config.dimensions
    main_area = dims.main_area

    match config.shape:
        case DeckShape.L_SHAPED:
            ext_w, ext_h = extension_size(dims)
            return main_area + ext_w * ext_h
        case DeckShape.U_SHAPED:
            ext_w, ext_h = extension_size(dims)
            return main_area + 2 * (ext_w * ext_h)
        case _:
            return main_area


def compute_full_perimeter(config: DeckConfig) -> float:
    """Perimeter of the whole footprint, ignoring edge selection."""
    dims = config.dimensions
    base = 2 * (dims.width + dims.height)

    match config.shape:
        case DeckShape.L_SHAPED:
            k = 2
        case DeckShape.U_SHAPED:
            k = 4
        case _:
            return base

    ext_w, ext_h = extension_size(dims)
    return base + k * (ext_w + ext_h) - k * min(ext_w, dims.width)


def compute_perimeter(config: DeckConfig) -> float:
    """Length of edge trim needed in meters.

    Returns 0 when edge trim is disabled. Without an explicit edge
    selection every side is trimmed.
    """
    if not config.include_edges:
        return 0.0

    if config.edge_selection is None:
        return compute_full_perimeter(config)

    selection = config.edge_selection
    match config.shape:
        case DeckShape.L_SHAPED | DeckShape.U_SHAPED:
            ratio = selected_side_count(config) / NOMINAL_SIDE_COUNT
            return compute_full_perimeter(config) * ratio
        case _:
            # Sides accumulate independently for the plain rectangle
            return sum(
                (side_length(config.dimensions, side) for side in selection.selected_sides),
                0.0,
            )
