"""Application layer - use cases and DTOs."""

from .commands import GenerateQuoteCommand
from .dtos import DeckInput, QuoteOutput

__all__ = [
    "DeckInput",
    "GenerateQuoteCommand",
    "QuoteOutput",
]
