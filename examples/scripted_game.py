#!/usr/bin/env python3
"""Play a few scripted turns of the burn list without a terminal.

Uses the local card table, so no network access is needed.

Usage:
    python examples/scripted_game.py [SEED]
"""

import sys
from pathlib import Path

from goldfish.errors import GoldfishError
from goldfish.playtest.session import GoldfishSession, SessionConfig

HERE = Path(__file__).parent

TURNS = [
    ["play Mountain", "play Goblin Guide"],
    ["draw", "play Mountain", "play Lightning Bolt", "print graveyard"],
    ["draw", "play Mountain", "fetch Eidolon of the Great Revel", "inspect 3"],
]


def main() -> None:
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 7
    config = SessionConfig(seed=seed, card_table=HERE / "cards.txt")
    session = GoldfishSession.new(str(HERE / "burn.txt"), config)

    print(session.render())
    for turn, commands in enumerate(TURNS, start=1):
        print(f"\n=== Turn {turn} ===")
        for line in commands:
            print(f"##> {line}")
            try:
                if session.exec(line):
                    print(session.render())
            except GoldfishError as e:
                print(f"Error: {e}")


if __name__ == "__main__":
    main()
