"""Tests for HelpText."""

from goldfish.model.parser import CommandParser
from goldfish.playtest.help import COMMAND_HELP, HelpText


class TestHelpText:
    def test_lists_every_verb(self):
        output = HelpText().render()
        documented = {usage.split()[0] for usage, _ in COMMAND_HELP}

        # `sacrifice` is documented through its `sac` alias
        assert set(CommandParser().verbs) - {"sacrifice"} == documented
        for verb in documented:
            assert verb in output

    def test_mentions_zones_and_index_syntax(self):
        output = HelpText().render()
        assert "$N" in output
        assert "graveyard" in output
