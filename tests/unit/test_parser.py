"""Tests for the command parser."""

import pytest
from goldfish.errors import (
    InvalidCount,
    InvalidIndex,
    MalformedClause,
    ParseError,
    UnknownVerb,
    UnknownZone,
)
from goldfish.model.commands import (
    Bounce, ByIndex, ByName, Discard, Draw, Exile, Fetch, Help, Inspect, Load,
    Mill, Move, Nop, Play, Print, PrintTarget, Restart, Sacrifice, Shuffle,
    Tuck, Tutor,
)
from goldfish.model.parser import CommandParser, parse_command
from goldfish.model.schema import ZoneType


@pytest.fixture
def parser() -> CommandParser:
    return CommandParser()


class TestVerbs:
    """Verb lookup and empty input."""

    def test_empty_line_is_nop(self, parser):
        assert parser.parse("") == Nop()
        assert parser.parse("   \t ") == Nop()

    def test_unknown_verb(self, parser):
        with pytest.raises(UnknownVerb) as exc:
            parser.parse("cast Opt")
        assert exc.value.verb == "cast"

    def test_verbs_are_case_sensitive(self, parser):
        with pytest.raises(UnknownVerb):
            parser.parse("Draw")

    def test_sac_and_sacrifice(self, parser):
        assert parser.parse("sac $0") == Sacrifice(ByIndex(0))
        assert parser.parse("sacrifice Forest") == Sacrifice(ByName("Forest"))

    def test_module_level_helper(self):
        assert parse_command("draw 2") == Draw(2)

    def test_all_errors_are_parse_errors(self, parser):
        for line in ["nope", "draw x", "play $x", "move a to nowhere", "help me"]:
            with pytest.raises(ParseError):
                parser.parse(line)


class TestSpecifier:
    """Card specifier sub-grammar."""

    def test_multi_word_name(self, parser):
        assert parser.parse("play Lightning   Bolt") == Play(ByName("Lightning Bolt"))

    def test_index(self, parser):
        assert parser.parse("discard $3") == Discard(ByIndex(3))

    def test_index_requires_digits(self, parser):
        with pytest.raises(InvalidIndex):
            parser.parse("play $abc")

    def test_bare_dollar(self, parser):
        with pytest.raises(InvalidIndex):
            parser.parse("play $")

    def test_negative_index(self, parser):
        with pytest.raises(InvalidIndex):
            parser.parse("play $-1")

    def test_index_with_trailing_words(self, parser):
        with pytest.raises(InvalidIndex):
            parser.parse("play $1 Forest")

    def test_dollar_only_counts_at_start(self, parser):
        assert parser.parse("play Forest $1") == Play(ByName("Forest $1"))

    def test_missing_specifier(self, parser):
        with pytest.raises(MalformedClause):
            parser.parse("bounce")


class TestZoneClauses:
    """`to` / `from` handling for move, exile and tuck."""

    def test_move(self, parser):
        command = parser.parse("move $0 from hand to battlefield")
        assert command == Move(ByIndex(0), ZoneType.HAND, ZoneType.BATTLEFIELD)

    def test_move_named_card(self, parser):
        command = parser.parse("move Llanowar Elves from graveyard to hand")
        assert command == Move(ByName("Llanowar Elves"), ZoneType.GRAVEYARD, ZoneType.HAND)

    def test_rightmost_keywords_win(self, parser):
        command = parser.parse("move Journey to Nowhere from battlefield to exile")
        assert command == Move(ByName("Journey to Nowhere"), ZoneType.BATTLEFIELD, ZoneType.EXILE)

    def test_name_containing_from(self, parser):
        command = parser.parse("exile Return from the Ranks from graveyard")
        assert command == Exile(ByName("Return from the Ranks"), ZoneType.GRAVEYARD)

    def test_missing_from(self, parser):
        with pytest.raises(MalformedClause) as exc:
            parser.parse("move $1 to hand")
        assert exc.value.keyword == "from"
        assert "`from`" in str(exc.value)

    def test_missing_to(self, parser):
        with pytest.raises(MalformedClause) as exc:
            parser.parse("move $1 from hand")
        assert exc.value.keyword == "to"

    def test_nothing_after_keyword(self, parser):
        with pytest.raises(MalformedClause):
            parser.parse("move $1 from hand to")

    def test_two_words_after_keyword(self, parser):
        with pytest.raises(MalformedClause):
            parser.parse("tuck $1 from hand deck")

    def test_to_before_from_is_rejected(self, parser):
        with pytest.raises(MalformedClause):
            parser.parse("move $0 to hand from deck")

    def test_unknown_zone(self, parser):
        with pytest.raises(UnknownZone) as exc:
            parser.parse("move $0 from hand to library")
        assert exc.value.zone == "library"

    def test_zone_names_are_case_sensitive(self, parser):
        with pytest.raises(UnknownZone):
            parser.parse("exile $0 from Hand")

    def test_exile_and_tuck(self, parser):
        assert parser.parse("exile $2 from deck") == Exile(ByIndex(2), ZoneType.DECK)
        assert parser.parse("tuck Opt from hand") == Tuck(ByName("Opt"), ZoneType.HAND)

    def test_exile_needs_from(self, parser):
        with pytest.raises(MalformedClause) as exc:
            parser.parse("exile Opt")
        assert exc.value.keyword == "from"


class TestCounts:
    """Numeric arguments."""

    def test_draw_defaults_to_one(self, parser):
        assert parser.parse("draw") == Draw(1)
        assert parser.parse("inspect") == Inspect(1)

    def test_explicit_counts(self, parser):
        assert parser.parse("draw 3") == Draw(3)
        assert parser.parse("inspect 0") == Inspect(0)
        assert parser.parse("mill 4") == Mill(4)

    def test_mill_requires_count(self, parser):
        with pytest.raises(MalformedClause):
            parser.parse("mill")

    def test_too_many_tokens(self, parser):
        with pytest.raises(MalformedClause):
            parser.parse("draw 1 2")

    def test_non_numeric(self, parser):
        with pytest.raises(InvalidCount) as exc:
            parser.parse("draw two")
        assert exc.value.verb == "draw"
        assert exc.value.text == "two"

    def test_negative_count(self, parser):
        with pytest.raises(InvalidCount):
            parser.parse("mill -2")


class TestFreeTextAndBareVerbs:
    """fetch/load/tutor text and zero-argument verbs."""

    def test_free_text_is_rejoined(self, parser):
        assert parser.parse("fetch  Arid   Mesa") == Fetch("Arid Mesa")
        assert parser.parse("tutor $1") == Tutor("$1")
        assert parser.parse("load decks/burn.txt") == Load("decks/burn.txt")

    def test_free_text_needs_a_name(self, parser):
        with pytest.raises(MalformedClause):
            parser.parse("fetch")

    def test_bare_verbs(self, parser):
        assert parser.parse("help") == Help()
        assert parser.parse("restart") == Restart()
        assert parser.parse("shuffle") == Shuffle()

    def test_bare_verbs_reject_arguments(self, parser):
        for line in ["help me", "restart now", "shuffle deck"]:
            with pytest.raises(MalformedClause):
                parser.parse(line)

    def test_print_targets(self, parser):
        assert parser.parse("print") == Print(PrintTarget.DEFAULT)
        assert parser.parse("print exile") == Print(PrintTarget.EXILE)
        assert parser.parse("print graveyard") == Print(PrintTarget.GRAVEYARD)

    def test_print_rejects_other_zones(self, parser):
        with pytest.raises(UnknownZone):
            parser.parse("print hand")
        with pytest.raises(MalformedClause):
            parser.parse("print exile graveyard")

    def test_bounce(self, parser):
        assert parser.parse("bounce $0") == Bounce(ByIndex(0))
