"""Adapters from configuration schemas to domain value objects."""

from __future__ import annotations

from enum import Enum

from decking.application.config.schema import DeckConfiguration, DeckSchema
from decking.domain import DeckConfig, DeckShape, Dimensions, EdgeSelection
from decking.domain.services import DEFAULT_EXTENSION_SIZE


def deck_schema_to_config(deck: DeckSchema) -> DeckConfig:
    """Convert a validated deck schema to a DeckConfig.

    L and U decks without extension sizes get the 2 m default, and
    rectangular decks drop any extension sizes given.
    """
    dims = deck.dimensions
    if deck.shape is DeckShape.RECTANGULAR:
        dimensions = Dimensions(width=dims.width, height=dims.height)
    else:
        dimensions = Dimensions(
            width=dims.width,
            height=dims.height,
            extension_width=dims.extension_width or DEFAULT_EXTENSION_SIZE,
            extension_height=dims.extension_height or DEFAULT_EXTENSION_SIZE,
        )

    edge_selection = None
    if deck.edge_selection is not None:
        edge_selection = EdgeSelection(**deck.edge_selection.model_dump())

    return DeckConfig(
        shape=deck.shape,
        dimensions=dimensions,
        color=deck.color,
        finish=deck.finish,
        edge_type=deck.edge_type,
        include_edges=deck.include_edges,
        edge_selection=edge_selection,
    )


def config_to_deck_config(config: DeckConfiguration) -> DeckConfig:
    """Convert a loaded configuration file to a DeckConfig."""
    return deck_schema_to_config(config.deck)


def _choice_value(choice: Enum | str) -> str:
    if isinstance(choice, Enum):
        return choice.value
    return str(choice)


def deck_config_to_dict(config: DeckConfig) -> dict:
    """Serialize a DeckConfig to the ``deck`` section of a configuration.

    The result round-trips through ``load_config_from_dict``. Choices
    outside their enum are written as given.
    """
    dims = config.dimensions
    dimensions: dict[str, float] = {"width": dims.width, "height": dims.height}
    if dims.extension_width is not None:
        dimensions["extension_width"] = dims.extension_width
    if dims.extension_height is not None:
        dimensions["extension_height"] = dims.extension_height

    data: dict = {
        "shape": _choice_value(config.shape),
        "dimensions": dimensions,
        "color": _choice_value(config.color),
        "finish": _choice_value(config.finish),
        "edge_type": _choice_value(config.edge_type),
        "include_edges": config.include_edges,
    }
    if config.edge_selection is not None:
        selection = config.edge_selection
        data["edge_selection"] = {
            "top": selection.top,
            "bottom": selection.bottom,
            "left": selection.left,
            "right": selection.right,
        }
    return data
