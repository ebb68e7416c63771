"""Creatures taking part in a raid: players, monsters and the boss that tracks aggro."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Hit:
    """The outcome of one attack."""

    damage: int
    critical: bool = False


class Creature:
    """A named combatant with hit points, attack power and a critical rate."""

    def __init__(self, name="", hp=0, atk=0, crit_rate=0.0, rng=None):
        self.name = name
        self.hp = hp
        self.max_hp = hp
        self.atk = atk
        self.crit_rate = crit_rate
        self.rng = rng if rng is not None else random.Random()

    def take_damage(self, amount):
        """Lose ``amount`` hit points, never dropping below zero."""
        self.hp = max(self.hp - amount, 0)

    def attack(self, target):
        """Strike ``target`` with plain attack power."""
        target.take_damage(self.atk)
        return Hit(self.atk)

    def damage_range(self):
        """A random damage multiplier between 0.95 and 1.05 in steps of 0.01."""
        return (self.rng.randrange(11) + 5) / 100 + 0.9

    def check_critical(self):
        """Roll for a critical hit against the creature's critical rate."""
        return self.crit_rate >= self.rng.randrange(11) / 10

    def is_half_hp(self):
        """True when at most half of the maximum hit points remain."""
        if self.max_hp == 0:
            return False
        return self.hp / self.max_hp <= 0.5

    def is_dead(self):
        return self.hp <= 0

    def info(self):
        """A one-line summary of the creature's stats."""
        return (
            f"Name : {self.name}, Hp : {self.hp}, MaxHp : {self.max_hp}, "
            f"Atk : {self.atk}, CriRate : {self.crit_rate:g}"
        )

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, hp={self.hp}/{self.max_hp}, atk={self.atk})"


class Player(Creature):
    """A player character whose hits vary, can be critical and grow when wounded."""

    def attack(self, target):
        damage = int(self.atk * self.damage_range())
        critical = self.check_critical()
        if critical:
            damage *= 2
        if self.is_half_hp():
            damage *= 2
        target.take_damage(damage)
        if isinstance(target, BossGoblin):
            target.record_damage(self.name, damage)
        return Hit(damage, critical)


class Knight(Player):
    """A sturdy melee player."""


class Mage(Player):
    """A fragile spell-casting player."""


class Archer(Player):
    """A ranged player with a high critical rate."""


class Monster(Creature):
    """A hostile creature."""


class Goblin(Monster):
    """A common goblin."""


class BossGoblin(Goblin):
    """A goblin boss that remembers how much damage each attacker dealt."""

    def __init__(self, name="", hp=0, atk=0, crit_rate=0.0, rng=None):
        super().__init__(name, hp, atk, crit_rate, rng)
        self._deal_amounts: dict[str, int] = {}

    @property
    def deal_amounts(self):
        """A copy of the damage dealt so far, keyed by attacker name."""
        return dict(self._deal_amounts)

    def record_damage(self, name, amount):
        """Add ``amount`` to the total damage credited to ``name``."""
        self._deal_amounts[name] = self._deal_amounts.get(name, 0) + amount

    def forget(self, creature):
        """Drop a dead creature from the damage table."""
        if creature.is_dead():
            self._deal_amounts.pop(creature.name, None)

    def ranking(self):
        """Attackers and their damage totals, highest first."""
        return sorted(self._deal_amounts.items(), key=lambda item: item[1], reverse=True)