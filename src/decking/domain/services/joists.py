"""Joist (lambourde) layout calculation.

Planks always run across the width, so joists are laid across the
width too and repeat every 50 cm along the height of each section. The
line count drives the structural layout, while the purchasing length is
an independent per-area estimate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from decking.domain.services.constants import JOIST_SPACING, LAMBOURDES_PER_M2
from decking.domain.services.geometry import compute_area, extension_size
from decking.domain.value_objects import DeckConfig, DeckShape

__all__ = ["JoistLayout", "compute_joist_lines", "joist_line_count"]


@dataclass(frozen=True)
class JoistLayout:
    """Joist lines for each deck section.

    Attributes:
        section_counts: Line count per section, main section first.
        total_length: Purchasing quantity in meters (area based).
        spacing: Distance between lines in meters.
    """

    section_counts: tuple[int, ...]
    total_length: float
    spacing: float = JOIST_SPACING

    @property
    def line_count(self) -> int:
        """Total number of joist lines across all sections."""
        return sum(self.section_counts)


def joist_line_count(section_height: float, spacing: float = JOIST_SPACING) -> int:
    """Number of joist lines needed to cover a section's height."""
    return math.ceil(section_height / spacing)


def compute_joist_lines(config: DeckConfig) -> JoistLayout:
    """Compute joist lines per section and total joist length."""
    dims = config.dimensions
    main = joist_line_count(dims.height)
    _, ext_h = extension_size(dims)

    match config.shape:
        case DeckShape.L_SHAPED:
            counts: tuple[int, ...] = (main, joist_line_count(ext_h))
        case DeckShape.U_SHAPED:
            # Both wings share the same height
            wing = joist_line_count(ext_h)
            counts = (main, wing, wing)
        case _:
            counts = (main,)

    return JoistLayout(
        section_counts=counts,
        total_length=compute_area(config) * LAMBOURDES_PER_M2,
    )
