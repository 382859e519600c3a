"""Pytest configuration and shared fixtures for deck tests."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from decking.application import GenerateQuoteCommand, QuoteOutput
from decking.domain import DeckConfig, DeckShape, Dimensions, EdgeType

FIXED_NOW = datetime(2024, 3, 15, 10, 30, 0)


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def rectangular_config() -> DeckConfig:
    """4m x 3m rectangular deck, all sides trimmed with cornieres."""
    return DeckConfig(
        shape=DeckShape.RECTANGULAR,
        dimensions=Dimensions(width=4.0, height=3.0),
        edge_type=EdgeType.CORNIERES,
        include_edges=True,
    )


@pytest.fixture
def l_config() -> DeckConfig:
    """4m x 3m main rectangle with a 2m x 2m wing."""
    return DeckConfig(
        shape=DeckShape.L_SHAPED,
        dimensions=Dimensions(
            width=4.0, height=3.0, extension_width=2.0, extension_height=2.0
        ),
    )


@pytest.fixture
def u_config() -> DeckConfig:
    """4m x 3m main rectangle with two 2m x 2m wings."""
    return DeckConfig(
        shape=DeckShape.U_SHAPED,
        dimensions=Dimensions(
            width=4.0, height=3.0, extension_width=2.0, extension_height=2.0
        ),
    )


# =============================================================================
# Quote fixtures
# =============================================================================


@pytest.fixture
def quote_command() -> GenerateQuoteCommand:
    """GenerateQuoteCommand with a fixed clock."""
    return GenerateQuoteCommand(clock=lambda: FIXED_NOW)


@pytest.fixture
def quote_output(
    quote_command: GenerateQuoteCommand, rectangular_config: DeckConfig
) -> QuoteOutput:
    """Quote for the 4m x 3m rectangular reference deck."""
    return quote_command.execute(rectangular_config)


# =============================================================================
# Configuration file fixtures
# =============================================================================


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory writing a configuration dictionary to a JSON file."""

    def _write(data: dict[str, Any], name: str = "deck.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
