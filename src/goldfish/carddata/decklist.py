"""Deck-list loading.

Accepts the common export format::

    // Burn
    Deck
    20 Mountain
    4x Lightning Bolt
    4 Monastery Swiftspear (KTK) 118

    Sideboard
    3 Smash to Smithereens

Only the main deck is loaded; sideboard and maybeboard cards are ignored.
"""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from goldfish.carddata.provider import CardDataProvider
from goldfish.errors import IoFailure, LoadFailure
from goldfish.model.schema import CardClassification, normalize_name

logger = logging.getLogger(__name__)

# Sections whose cards go into the library, and sections that are skipped.
MAIN_SECTIONS = frozenset({"deck", "commander", "companion"})
SIDE_SECTIONS = frozenset({"sideboard", "maybeboard", "sb"})

_COUNT = re.compile(r"([0-9]+)x?")
# Set code and collector number exported by some clients: "(KTK) 118"
_PRINTING_SUFFIX = re.compile(r"\s+\([A-Za-z0-9]+\)(\s+\S+)?$")


@dataclass(frozen=True)
class DeckEntry:
    """One deck-list line."""

    count: int
    name: str


def _section(line: str) -> str | None:
    """Section a marker line opens, or None for a card line."""
    lowered = line.lower().rstrip(":").strip()
    if lowered in MAIN_SECTIONS or lowered in SIDE_SECTIONS:
        return lowered
    return None


def parse_deck_list(lines: Iterable[str], source: str = "<deck list>") -> list[DeckEntry]:
    """Parse the main-deck lines into entries, in order.

    Cards after a `Sideboard` or `Maybeboard` marker are skipped until a
    `Deck`, `Commander` or `Companion` marker. `SB: 2 Name` lines are
    sideboard cards and are skipped too.

    Raises:
        LoadFailure: a main-deck line has no positive count or no card name
    """
    entries: list[DeckEntry] = []
    in_main = True

    for line_no, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or stripped.startswith("//"):
            continue

        section = _section(stripped)
        if section is not None:
            in_main = section in MAIN_SECTIONS
            continue
        if not in_main or stripped.upper().startswith("SB:"):
            continue

        parts = stripped.split(None, 1)
        match = _COUNT.fullmatch(parts[0])
        if match is None or int(match.group(1)) <= 0:
            raise LoadFailure(f"{source}:{line_no}: `{stripped}` does not start with a positive count")
        if len(parts) < 2:
            raise LoadFailure(f"{source}:{line_no}: `{stripped}` has no card name")

        name = _PRINTING_SUFFIX.sub("", parts[1]).strip()
        entries.append(DeckEntry(count=int(match.group(1)), name=name))

    return entries


def read_deck_list(source: str | Path) -> list[DeckEntry]:
    """Read and parse a deck-list file."""
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise IoFailure(f"cannot read deck list {path}: {e}") from e
    return parse_deck_list(text.splitlines(), source=str(path))


def build_deck(entries: Iterable[DeckEntry], provider: CardDataProvider) -> list[CardClassification]:
    """Resolve entries into cards, one value per copy, in deck-list order.

    Each distinct name is resolved once; every copy is its own card value.
    """
    resolved: dict[str, CardClassification] = {}
    cards: list[CardClassification] = []

    for entry in entries:
        key = normalize_name(entry.name)
        if key not in resolved:
            resolved[key] = provider.resolve(entry.name)
        cards.extend(copy.copy(resolved[key]) for _ in range(entry.count))

    logger.info(f"Built deck of {len(cards)} cards ({len(resolved)} distinct)")
    return cards


def load_deck(source: str | Path, provider: CardDataProvider) -> list[CardClassification]:
    return build_deck(read_deck_list(source), provider)
