"""Card classification from the Scryfall API, memoized in the card cache."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from goldfish import __version__
from goldfish.carddata.cache import CardCache
from goldfish.carddata.provider import CardDataProvider
from goldfish.errors import IoFailure, LoadFailure
from goldfish.model.schema import CARD_TYPES_BY_NAME, CardClassification, CardType, normalize_name

logger = logging.getLogger(__name__)

SCRYFALL_NAMED_URL = "https://api.scryfall.com/cards/named"

# Scryfall asks clients to wait 50-100 ms between requests.
MIN_REQUEST_INTERVAL = 0.1


@dataclass(frozen=True)
class ScryfallCard(CardClassification):
    """Card classified by its printed type line.

    Only the front face counts for split and modal double-faced cards,
    e.g. "Creature — Human Wizard // Sorcery" is a creature.
    """

    name: str
    type_line: str

    @property
    def front_types(self) -> str:
        front = self.type_line.split("//")[0]
        # Supertypes and card types come before the dash, subtypes after.
        return front.split("—")[0].lower()

    @property
    def types(self) -> frozenset[CardType]:
        words = self.front_types.split()
        return frozenset(CARD_TYPES_BY_NAME[w] for w in words if w in CARD_TYPES_BY_NAME)

    def is_permanent(self) -> bool:
        return any(t.is_permanent for t in self.types)

    def is_creature(self) -> bool:
        return CardType.CREATURE in self.types

    def is_land(self) -> bool:
        return CardType.LAND in self.types

    def __str__(self) -> str:
        return self.name


def _type_line(data: dict) -> str:
    type_line = data.get("type_line")
    if type_line:
        return type_line
    # Reversible cards only carry type lines on their faces.
    faces = data.get("card_faces") or []
    if faces and faces[0].get("type_line"):
        return faces[0]["type_line"]
    return ""


class ScryfallProvider(CardDataProvider):
    """Resolves names through Scryfall's exact-name lookup."""

    def __init__(
        self,
        cache: Optional[CardCache] = None,
        http: Optional[requests.Session] = None,
        offline: bool = False,
        timeout: float = 10.0,
        min_interval: float = MIN_REQUEST_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.cache = cache
        self.offline = offline
        self.timeout = timeout
        self.min_interval = min_interval
        self._sleep = sleep
        self._clock = clock
        self._last_request: Optional[float] = None
        self._resolved: dict[str, ScryfallCard] = {}

        if http is None:
            http = requests.Session()
            http.headers.update({
                "User-Agent": f"goldfish/{__version__}",
                "Accept": "application/json",
            })
        self.http = http

    def resolve(self, name: str) -> CardClassification:
        key = normalize_name(name)
        if key in self._resolved:
            return self._resolved[key]

        card = self._from_cache(name)
        if card is None:
            if self.offline:
                raise LoadFailure(f"`{name}` is not in the card cache (offline)")
            card = self._fetch(name)
            if self.cache is not None:
                self.cache.put(card.name, card.type_line, requested_as=name)

        self._resolved[key] = card
        return card

    def _from_cache(self, name: str) -> Optional[ScryfallCard]:
        if self.cache is None:
            return None
        entry = self.cache.get(name)
        if entry is None:
            logger.debug(f"Cache miss: {name}")
            return None
        logger.debug(f"Cache hit: {name}")
        return ScryfallCard(name=entry.name, type_line=entry.type_line)

    def _throttle(self) -> None:
        if self._last_request is not None:
            wait = self.min_interval - (self._clock() - self._last_request)
            if wait > 0:
                self._sleep(wait)
        self._last_request = self._clock()

    def _fetch(self, name: str) -> ScryfallCard:
        self._throttle()
        logger.info(f"Fetching card data for {name} from Scryfall...")

        try:
            response = self.http.get(
                SCRYFALL_NAMED_URL, params={"exact": name}, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise IoFailure(f"failed to fetch card data for `{name}`: {e}") from e

        if response.status_code == 404:
            raise LoadFailure(f"`{name}` is not a known card")

        try:
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise IoFailure(f"failed to fetch card data for `{name}`: {e}") from e
        except ValueError as e:
            raise IoFailure(f"invalid response from Scryfall for `{name}`: {e}") from e

        type_line = _type_line(data)
        if not type_line:
            logger.warning(f"No type line for {name}")
        return ScryfallCard(name=data.get("name", name), type_line=type_line)
