"""A party of players fighting a boss goblin until one side falls."""

from __future__ import annotations

import argparse
import random
import sys

from skirmish.creatures import Archer, BossGoblin, Knight, Mage

TOP_DEALERS = 4
SEPARATOR = "-" * 28

_CLASSES = (
    ("knight", Knight, 350, 150, 0.5),
    ("mage", Mage, 150, 300, 0.2),
    ("archer", Archer, 100, 300, 0.8),
)


def make_party(rng, size=10):
    """Create ``size`` players, each of a randomly chosen class."""
    party = []
    for number in range(1, size + 1):
        label, cls, hp, atk, crit_rate = _CLASSES[rng.randrange(len(_CLASSES))]
        party.append(cls(f"{label}{number}", hp, atk, crit_rate, rng))
    return party


def run_battle(players, boss, out=None):
    """Fight rounds until every player or the boss is dead; return the final ranking."""
    if out is None:
        out = sys.stdout

    def say(text=""):
        print(text, file=out)

    while True:
        for player in players:
            if player.is_dead():
                boss.forget(player)
                continue
            hit = player.attack(boss)
            if hit.critical:
                say(f"{player.name}'s critical attack!!")
            else:
                say(f"{player.name}'s attack!")
            say(f"{boss.name}'s remain Hp : {boss.hp}")
            say()

        for place, (name, total) in enumerate(boss.ranking()[:TOP_DEALERS], start=1):
            say(f"No.{place} Dealer : {name}, Total Deal : {total}")

        say(f"{boss.name}'s attack!")
        for player in players:
            say(player.info())
        say(SEPARATOR)

        if all(player.is_dead() for player in players) or boss.is_dead():
            break

    for player in players:
        say(player.info())
    say(boss.info())
    return boss.ranking()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a raid against a boss goblin.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--size", type=int, default=10, help="number of players")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    players = make_party(rng, args.size)
    boss = BossGoblin("bobo", 13000, 100, 0.0, rng)
    run_battle(players, boss)
    return 0


if __name__ == "__main__":
    sys.exit(main())