"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TypeVar

from decking.domain import (
    DeckConfig,
    DeckLayout,
    DeckShape,
    Dimensions,
    EdgeSelection,
    EdgeType,
    JoistLayout,
    MaterialCalculation,
    PriceCalculation,
    WoodColor,
    WoodFinish,
)
from decking.domain.services import MIN_EXTENSION_SIZE, MIN_MAIN_SIZE

E = TypeVar("E", bound=Enum)


def _coerce_size(value: float | str | None, floor: float) -> float:
    """Turn raw user input into a valid size.

    Unparseable, non-finite or non-positive values become ``floor``.
    """
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return floor
    if not math.isfinite(number) or number <= 0:
        return floor
    return number


def _choice_value(choice: Enum | str) -> str:
    if isinstance(choice, Enum):
        return choice.value
    return str(choice)


def _coerce_choice(value: str | E | None, enum_type: type[E], default: E) -> E:
    """Map a raw choice onto a closed enum, falling back to ``default``."""
    try:
        return enum_type(value)
    except ValueError:
        return default


@dataclass
class DeckInput:
    """Input DTO holding raw values from a form or command line.

    Values may be invalid; ``to_deck_config`` coerces them into a valid
    DeckConfig snapshot so the engine never sees out-of-range input.
    """

    shape: str = DeckShape.RECTANGULAR.value
    width: float | str | None = 4.0
    height: float | str | None = 3.0
    extension_width: float | str | None = None
    extension_height: float | str | None = None
    color: str = WoodColor.CHENE.value
    finish: str = WoodFinish.BROSSEE.value
    edge_type: str = EdgeType.CORNIERES.value
    include_edges: bool = True
    edges: list[str] | None = None

    @classmethod
    def from_deck_config(cls, config: DeckConfig) -> DeckInput:
        """Seed raw input from an existing configuration snapshot."""
        dims = config.dimensions
        edges = None
        if config.edge_selection is not None:
            edges = [side.value for side in config.edge_selection.selected_sides]
        return cls(
            shape=_choice_value(config.shape),
            width=dims.width,
            height=dims.height,
            extension_width=dims.extension_width,
            extension_height=dims.extension_height,
            color=_choice_value(config.color),
            finish=_choice_value(config.finish),
            edge_type=_choice_value(config.edge_type),
            include_edges=config.include_edges,
            edges=edges,
        )

    def validate(self) -> list[str]:
        """Report problems that coercion will silently fix."""
        warnings: list[str] = []
        for name in ("width", "height"):
            raw = getattr(self, name)
            if _coerce_size(raw, MIN_MAIN_SIZE) != _as_float(raw):
                warnings.append(f"{name} adjusted to {_coerce_size(raw, MIN_MAIN_SIZE)} m")
        if self._shape() is not DeckShape.RECTANGULAR:
            for name in ("extension_width", "extension_height"):
                raw = getattr(self, name)
                coerced = _coerce_size(raw, MIN_EXTENSION_SIZE)
                if raw is not None and coerced != _as_float(raw):
                    warnings.append(f"{name} adjusted to {coerced} m")
        choices = (
            ("shape", self.shape, DeckShape),
            ("color", self.color, WoodColor),
            ("finish", self.finish, WoodFinish),
            ("edge_type", self.edge_type, EdgeType),
        )
        for name, raw, enum_type in choices:
            if raw not in {member.value for member in enum_type}:
                valid = ", ".join(member.value for member in enum_type)
                warnings.append(f"Unknown {name} {raw!r}; expected one of: {valid}")
        if self.edges is not None:
            valid_sides = {"top", "bottom", "left", "right"}
            for side in self.edges:
                normalized = side.strip().lower()
                if normalized not in valid_sides:
                    warnings.append(f"Unknown side {side!r} ignored")
        return warnings

    def _shape(self) -> DeckShape:
        return _coerce_choice(self.shape, DeckShape, DeckShape.RECTANGULAR)

    def to_edge_selection(self) -> EdgeSelection | None:
        """Convert a list of side names to an EdgeSelection."""
        if self.edges is None:
            return None
        chosen = {side.strip().lower() for side in self.edges}
        return EdgeSelection(
            top="top" in chosen,
            bottom="bottom" in chosen,
            left="left" in chosen,
            right="right" in chosen,
        )

    def to_deck_config(self) -> DeckConfig:
        """Convert to a validated DeckConfig value object."""
        shape = self._shape()
        if shape is DeckShape.RECTANGULAR:
            dimensions = Dimensions(
                width=_coerce_size(self.width, MIN_MAIN_SIZE),
                height=_coerce_size(self.height, MIN_MAIN_SIZE),
            )
        else:
            dimensions = Dimensions(
                width=_coerce_size(self.width, MIN_MAIN_SIZE),
                height=_coerce_size(self.height, MIN_MAIN_SIZE),
                extension_width=_coerce_size(self.extension_width, MIN_EXTENSION_SIZE),
                extension_height=_coerce_size(self.extension_height, MIN_EXTENSION_SIZE),
            )
        return DeckConfig(
            shape=shape,
            dimensions=dimensions,
            color=_coerce_choice(self.color, WoodColor, WoodColor.CHENE),
            finish=_coerce_choice(self.finish, WoodFinish, WoodFinish.BROSSEE),
            edge_type=_coerce_choice(self.edge_type, EdgeType, EdgeType.CORNIERES),
            include_edges=self.include_edges,
            edge_selection=self.to_edge_selection(),
        )


def _as_float(value: float | str | None) -> float | None:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


@dataclass
class QuoteOutput:
    """Output DTO containing every result derived from one configuration.

    Attributes:
        config: The configuration snapshot the results were computed from.
        materials: Material quantities.
        prices: Price per material line and total.
        joists: Joist line counts and total joist length.
        layout: Plan layout with panels, joist lines and trim segments.
        generated_at: When the quote was computed; used only for the
            export date and artifact name.
    """

    config: DeckConfig
    materials: MaterialCalculation
    prices: PriceCalculation
    joists: JoistLayout
    layout: DeckLayout
    generated_at: datetime = field(default_factory=datetime.now)
    warnings: list[str] = field(default_factory=list)
