"""Value objects for the decking domain.

This module provides the immutable data types that flow through the
calculation pipeline: the deck configuration a user builds up, and the
material and price results derived from it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class DeckShape(str, Enum):
    """Deck footprint archetypes.

    Each shape is made of one, two or three rectangular panels: the main
    rectangle plus zero, one or two extension wings.
    """

    RECTANGULAR = "rectangulaire"
    L_SHAPED = "L"
    U_SHAPED = "U"

    @property
    def extension_count(self) -> int:
        """Number of extension wings appended to the main rectangle."""
        return {
            DeckShape.RECTANGULAR: 0,
            DeckShape.L_SHAPED: 1,
            DeckShape.U_SHAPED: 2,
        }[self]

    @property
    def label(self) -> str:
        return {
            DeckShape.RECTANGULAR: "Rectangulaire",
            DeckShape.L_SHAPED: "Forme L",
            DeckShape.U_SHAPED: "Forme U",
        }[self]


class WoodColor(str, Enum):
    """Composite board colors."""

    GRIS = "gris"
    ACAJOU = "acajou"
    CHENE = "chene"
    MARRON = "marron"

    @property
    def label(self) -> str:
        return {
            WoodColor.GRIS: "Gris",
            WoodColor.ACAJOU: "Acajou",
            WoodColor.CHENE: "Chêne",
            WoodColor.MARRON: "Marron",
        }[self]


class WoodFinish(str, Enum):
    """Composite board surface finishes."""

    BROSSEE = "brossée"
    STRUCTUREE = "structurée"
    PONCEE = "poncée"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class EdgeType(str, Enum):
    """Edge trim styles. Only one style is applied to a given deck."""

    CORNIERES = "cornières"
    PLINTHES = "plinthes"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Side(str, Enum):
    """Sides of the main rectangle's footprint."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def label(self) -> str:
        return {
            Side.TOP: "Haut",
            Side.BOTTOM: "Bas",
            Side.LEFT: "Gauche",
            Side.RIGHT: "Droite",
        }[self]


@dataclass(frozen=True)
class Dimensions:
    """Immutable deck dimensions in meters.

    ``width`` and ``height`` describe the main rectangle. Extension fields
    only matter for L and U shapes and may be left as None otherwise.
    """

    width: float
    height: float
    extension_width: float | None = None
    extension_height: float | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "extension_width", "extension_height"):
            value = getattr(self, name)
            if value is None:
                continue
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number")

    @property
    def main_area(self) -> float:
        """Area of the main rectangle in square meters."""
        return self.width * self.height


@dataclass(frozen=True)
class EdgeSelection:
    """Which sides of the main footprint receive edge trim."""

    top: bool = True
    bottom: bool = True
    left: bool = True
    right: bool = True

    @classmethod
    def all_sides(cls) -> EdgeSelection:
        return cls()

    @property
    def selected_sides(self) -> tuple[Side, ...]:
        """Selected sides in top, bottom, left, right order."""
        return tuple(side for side in Side if getattr(self, side.value))

    @property
    def selected_count(self) -> int:
        return len(self.selected_sides)

    def with_side(self, side: Side, selected: bool) -> EdgeSelection:
        """Return a copy with one side toggled."""
        return replace(self, **{side.value: selected})


@dataclass(frozen=True)
class DeckConfig:
    """Aggregate root describing one deck design.

    A DeckConfig is never mutated: each user edit produces a new snapshot
    through ``with_updates`` or ``with_dimensions``, and every derived
    result is a pure function of a single snapshot.

    Attributes:
        shape: Footprint archetype.
        dimensions: Main rectangle and extension sizes in meters.
        color: Board color.
        finish: Board surface finish.
        edge_type: Edge trim style used when ``include_edges`` is set.
        include_edges: Whether edge trim is part of the order.
        edge_selection: Sides receiving trim; None means all four sides.
    """

    shape: DeckShape = DeckShape.RECTANGULAR
    dimensions: Dimensions = field(
        default_factory=lambda: Dimensions(width=4.0, height=3.0)
    )
    color: WoodColor = WoodColor.CHENE
    finish: WoodFinish = WoodFinish.BROSSEE
    edge_type: EdgeType = EdgeType.CORNIERES
    include_edges: bool = True
    edge_selection: EdgeSelection | None = None

    def with_updates(self, **changes: Any) -> DeckConfig:
        """Return a new snapshot with the given top-level fields replaced."""
        return replace(self, **changes)

    def with_dimensions(self, **changes: Any) -> DeckConfig:
        """Return a new snapshot with the given dimension fields replaced."""
        return replace(self, dimensions=replace(self.dimensions, **changes))

    @property
    def effective_edge_selection(self) -> EdgeSelection:
        """Edge selection with the all-sides fallback applied."""
        return self.edge_selection or EdgeSelection.all_sides()


@dataclass(frozen=True)
class MaterialCalculation:
    """Material quantities derived from a deck configuration.

    All lengths are in meters and the area in square meters. ``clips`` is a
    fractional unit count; round it up before ordering.
    """

    area: float
    lames: float
    lambourdes: float
    clips: float
    edges: float
    perimeter: float


@dataclass(frozen=True)
class PriceCalculation:
    """Monetary amounts for each material line, in the quote currency."""

    lames: float
    lambourdes: float
    clips: float
    edges: float
    total: float
