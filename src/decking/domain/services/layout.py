"""Plan layout of a deck: panel boundaries, joist lines and trim segments.

Coordinates are in meters in a plan view with the origin at the top-left
corner of the main panel, x increasing to the right and y increasing
downward. Extension wings hang from the top edge: the L wing sits against
the right side of the main panel, the U wings against both sides.

Trim segments describe where trim goes on the main footprint. The trim
quantity to order comes from ``compute_perimeter``, which for L and U
shapes is an estimate and does not equal the sum of these segments.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from decking.domain.services.geometry import extension_size
from decking.domain.services.joists import joist_line_count
from decking.domain.services.constants import JOIST_SPACING
from decking.domain.value_objects import DeckConfig, DeckShape, Side

__all__ = [
    "DeckLayout",
    "JoistLine",
    "PanelRect",
    "TrimSegment",
    "compute_layout",
]


@dataclass(frozen=True)
class PanelRect:
    """Axis-aligned rectangular deck section.

    Unlike board dimensions, the origin may be negative: the left wing of
    a U deck lies left of the main panel.
    """

    name: str
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class JoistLine:
    """A single joist line spanning a panel's width at a fixed y."""

    panel: str
    y: float
    x_start: float
    x_end: float

    @property
    def length(self) -> float:
        return self.x_end - self.x_start


@dataclass(frozen=True)
class TrimSegment:
    """Edge trim along one side of the main panel."""

    side: Side
    start: tuple[float, float]
    end: tuple[float, float]

    @property
    def length(self) -> float:
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        return abs(dx) + abs(dy)


@dataclass(frozen=True)
class DeckLayout:
    """Geometric description of a deck plan."""

    panels: tuple[PanelRect, ...]
    joist_lines: tuple[JoistLine, ...] = field(default_factory=tuple)
    trim_segments: tuple[TrimSegment, ...] = field(default_factory=tuple)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box as (min_x, min_y, max_x, max_y)."""
        return (
            min(p.x for p in self.panels),
            min(p.y for p in self.panels),
            max(p.right for p in self.panels),
            max(p.bottom for p in self.panels),
        )

    def lines_for(self, panel_name: str) -> tuple[JoistLine, ...]:
        return tuple(line for line in self.joist_lines if line.panel == panel_name)


def _panels(config: DeckConfig) -> tuple[PanelRect, ...]:
    dims = config.dimensions
    main = PanelRect("main", 0.0, 0.0, dims.width, dims.height)
    ext_w, ext_h = extension_size(dims)

    match config.shape:
        case DeckShape.L_SHAPED:
            return (main, PanelRect("extension", dims.width, 0.0, ext_w, ext_h))
        case DeckShape.U_SHAPED:
            return (
                main,
                PanelRect("extension_left", -ext_w, 0.0, ext_w, ext_h),
                PanelRect("extension_right", dims.width, 0.0, ext_w, ext_h),
            )
        case _:
            return (main,)


def _joist_lines(panel: PanelRect) -> list[JoistLine]:
    return [
        JoistLine(
            panel=panel.name,
            y=panel.y + i * JOIST_SPACING,
            x_start=panel.x,
            x_end=panel.right,
        )
        for i in range(joist_line_count(panel.height))
    ]


def _trim_segments(config: DeckConfig, main: PanelRect) -> list[TrimSegment]:
    if not config.include_edges:
        return []

    corners = {
        Side.TOP: ((main.x, main.y), (main.right, main.y)),
        Side.BOTTOM: ((main.x, main.bottom), (main.right, main.bottom)),
        Side.LEFT: ((main.x, main.y), (main.x, main.bottom)),
        Side.RIGHT: ((main.right, main.y), (main.right, main.bottom)),
    }
    return [
        TrimSegment(side, *corners[side])
        for side in config.effective_edge_selection.selected_sides
    ]


def compute_layout(config: DeckConfig) -> DeckLayout:
    """Build the plan layout for a deck configuration."""
    panels = _panels(config)
    joist_lines = [line for panel in panels for line in _joist_lines(panel)]
    return DeckLayout(
        panels=panels,
        joist_lines=tuple(joist_lines),
        trim_segments=tuple(_trim_segments(config, panels[0])),
    )
