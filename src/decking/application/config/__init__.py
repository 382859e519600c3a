"""Configuration schema and loading for deck designs.

Public API:
    - DeckConfiguration: Root configuration model
    - DeckSchema: Deck design model
    - DimensionsConfig: Deck dimensions model
    - EdgeSelectionConfig: Per-side edge trim model
    - OutputConfig: Export settings model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_deck_config: Convert a configuration to a DeckConfig

Example:
    >>> from pathlib import Path
    >>> from decking.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-deck.json"))
    ...     print(f"Deck: {config.deck.dimensions.width}x{config.deck.dimensions.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from decking.application.config.adapter import (
    config_to_deck_config,
    deck_config_to_dict,
    deck_schema_to_config,
)
from decking.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from decking.application.config.schema import (
    OUTPUT_FORMATS,
    SUPPORTED_VERSIONS,
    DeckConfiguration,
    DeckSchema,
    DimensionsConfig,
    EdgeSelectionConfig,
    OutputConfig,
)

__all__ = [
    "ConfigError",
    "DeckConfiguration",
    "DeckSchema",
    "DimensionsConfig",
    "EdgeSelectionConfig",
    "OUTPUT_FORMATS",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "config_to_deck_config",
    "deck_config_to_dict",
    "deck_schema_to_config",
    "load_config",
    "load_config_from_dict",
]
