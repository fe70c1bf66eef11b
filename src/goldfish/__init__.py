"""Solitaire goldfishing for trading-card game decks."""

__version__ = "0.3.0"
