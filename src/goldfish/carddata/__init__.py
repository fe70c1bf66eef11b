"""Deck lists and card-data providers."""

from goldfish.carddata.provider import CardDataProvider, StaticCardTable
from goldfish.carddata.scryfall import ScryfallCard, ScryfallProvider
from goldfish.carddata.cache import CardCache
from goldfish.carddata.decklist import DeckEntry, build_deck, load_deck, parse_deck_list

__all__ = [
    "CardDataProvider",
    "StaticCardTable",
    "ScryfallCard",
    "ScryfallProvider",
    "CardCache",
    "DeckEntry",
    "build_deck",
    "load_deck",
    "parse_deck_list",
]
