"""Pydantic models for deck configuration files.

A configuration file describes one deck design plus optional export
settings:

    {
      "schema_version": "1.1",
      "deck": {
        "shape": "L",
        "dimensions": {"width": 4, "height": 3,
                       "extension_width": 2, "extension_height": 2},
        "color": "chene",
        "finish": "brossée",
        "edge_type": "cornières",
        "include_edges": true,
        "edge_selection": {"top": true, "bottom": true,
                           "left": false, "right": true}
      },
      "output": {"formats": ["txt", "pdf"], "output_dir": "quotes"}
    }
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from decking.domain.value_objects import DeckShape, EdgeType, WoodColor, WoodFinish

# Version 1.0: Initial schema with shape, dimensions, finish and edge trim
# Version 1.1: Added per-side edge selection and output settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

OUTPUT_FORMATS: frozenset[str] = frozenset({"txt", "json", "csv", "pdf"})


class DimensionsConfig(BaseModel):
    """Deck dimensions in meters.

    Attributes:
        width: Main rectangle width (plank direction).
        height: Main rectangle length (joist spacing direction).
        extension_width: Wing width for L and U shapes.
        extension_height: Wing length for L and U shapes.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=100.0)
    height: float = Field(..., gt=0, le=100.0)
    extension_width: float | None = Field(default=None, gt=0, le=100.0)
    extension_height: float | None = Field(default=None, gt=0, le=100.0)


class EdgeSelectionConfig(BaseModel):
    """Sides of the main rectangle that receive edge trim."""

    model_config = ConfigDict(extra="forbid")

    top: bool = True
    bottom: bool = True
    left: bool = True
    right: bool = True


class DeckSchema(BaseModel):
    """Configuration for a single deck design."""

    model_config = ConfigDict(extra="forbid")

    shape: DeckShape = DeckShape.RECTANGULAR
    dimensions: DimensionsConfig
    color: WoodColor = WoodColor.CHENE
    finish: WoodFinish = WoodFinish.BROSSEE
    edge_type: EdgeType = EdgeType.CORNIERES
    include_edges: bool = True
    edge_selection: EdgeSelectionConfig | None = None


class OutputConfig(BaseModel):
    """Export settings.

    Attributes:
        formats: Export formats to produce (txt, json, csv, pdf).
        output_dir: Directory for exported quotes.
        project_name: Optional file name prefix replacing the default.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=lambda: ["txt"])
    output_dir: str | None = None
    project_name: str | None = None

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        normalized = [fmt.strip().lower() for fmt in v]
        unknown = [fmt for fmt in normalized if fmt not in OUTPUT_FORMATS]
        if unknown:
            raise ValueError(
                f"Unknown output format(s): {', '.join(unknown)}. "
                f"Available: {', '.join(sorted(OUTPUT_FORMATS))}"
            )
        return normalized


class DeckConfiguration(BaseModel):
    """Root model for a deck configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    deck: DeckSchema
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version: {v}. "
                f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v

    @model_validator(mode="after")
    def check_edge_selection_version(self) -> "DeckConfiguration":
        """Per-side edge selection requires schema 1.1."""
        if self.deck.edge_selection is not None and self.schema_version == "1.0":
            raise ValueError("edge_selection requires schema_version 1.1")
        return self
