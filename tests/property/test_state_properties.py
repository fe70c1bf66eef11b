"""Property-based tests for the game state engine."""

import random

from hypothesis import given, settings, strategies as st
from goldfish.errors import GoldfishError
from goldfish.model.commands import ByIndex, ByName
from goldfish.model.parser import CommandParser
from goldfish.model.schema import Card, CardType, ZoneType
from goldfish.playtest.session import GoldfishSession, SessionConfig
from goldfish.simulation.state import GameState

POOL = [
    Card.of("Forest", CardType.LAND),
    Card.of("Llanowar Elves", CardType.CREATURE),
    Card.of("Giant Growth", CardType.INSTANT),
    Card.of("Rancor", CardType.ENCHANTMENT),
    Card.of("Sol Ring", CardType.ARTIFACT),
]

zones = st.sampled_from(list(ZoneType))
names = st.sampled_from([c.name for c in POOL] + ["Island"])
specifiers = st.one_of(st.builds(ByIndex, st.integers(min_value=0, max_value=12)), st.builds(ByName, names))

command_lines = st.one_of(
    st.builds(lambda n: f"draw {n}", st.integers(0, 5)),
    st.builds(lambda n: f"mill {n}", st.integers(0, 5)),
    st.builds(lambda i: f"play ${i}", st.integers(0, 8)),
    st.builds(lambda i: f"sac ${i}", st.integers(0, 4)),
    st.builds(lambda i: f"bounce ${i}", st.integers(0, 4)),
    st.builds(lambda i: f"discard ${i}", st.integers(0, 8)),
    st.builds(lambda n: f"fetch {n}", names),
    st.builds(lambda n: f"tutor {n}", names),
    st.builds(lambda i, z: f"exile ${i} from {z.value}", st.integers(0, 8), zones),
    st.builds(lambda i, z: f"tuck ${i} from {z.value}", st.integers(0, 8), zones),
    st.builds(lambda i, a, b: f"move ${i} from {a.value} to {b.value}", st.integers(0, 8), zones, zones),
    st.sampled_from(["shuffle", "restart", "inspect 3", "print", "print exile", "help", ""]),
)


def make_state(seed: int, size: int = 15) -> GameState:
    rng = random.Random(seed)
    return GameState([rng.choice(POOL) for _ in range(size)], rng=rng)


@given(seed=st.integers(0, 10000), lines=st.lists(command_lines, max_size=30))
@settings(max_examples=100)
def test_card_count_is_conserved(seed: int, lines: list[str]) -> None:
    """Property: no command creates or destroys cards."""
    session = GoldfishSession(SessionConfig(seed=seed), output_fn=lambda s: None)
    session.state = make_state(seed)
    total = session.state.total_cards()

    for line in lines:
        try:
            session.exec(line)
        except GoldfishError:
            pass
        assert session.state.total_cards() == total


@given(seed=st.integers(0, 10000), spec=specifiers, zone=zones.filter(lambda z: z != ZoneType.DECK))
def test_self_move_is_noop(seed: int, spec, zone: ZoneType) -> None:
    """Property: moving a card to the zone it is in changes nothing (outside the deck)."""
    state = make_state(seed)
    state.draw_n(5)
    state.mill(2)
    before = state.snapshot()

    state.move_card(spec, zone, zone)

    assert state.snapshot() == before


@given(seed=st.integers(0, 10000), spec=specifiers, source=zones, destination=zones)
def test_move_is_atomic(seed: int, spec, source: ZoneType, destination: ZoneType) -> None:
    """Property: a move either lands at the tail of the destination or changes nothing."""
    state = make_state(seed)
    state.draw_n(6)
    state.mill(2)
    before = state.snapshot()

    try:
        moved = state.move_card(spec, source, destination)
    except GoldfishError:
        assert state.snapshot() == before
        return

    if moved is None:
        assert state.snapshot() == before
        return

    assert state.zone(destination)[-1] is moved
    if source != destination:
        assert len(state.zone(source)) == len(before[source]) - 1
        assert len(state.zone(destination)) == len(before[destination]) + 1


@given(line=st.text(max_size=40))
def test_parser_never_crashes(line: str) -> None:
    """Property: any text parses to a command or raises a goldfish error."""
    try:
        CommandParser().parse(line)
    except GoldfishError:
        pass
