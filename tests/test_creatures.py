import itertools
import random

import pytest

from skirmish.creatures import (
    Archer,
    BossGoblin,
    Creature,
    Goblin,
    Hit,
    Knight,
    Mage,
    Player,
)


class SequenceRng:
    def __init__(self, *values):
        self._values = itertools.cycle(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop
        return value


def test_take_damage_reduces_hp():
    c = Creature("c", 100, 10, 0.0, SequenceRng(0))
    c.take_damage(30)
    assert c.hp == 70
    assert c.max_hp == 100


def test_take_damage_clamps_at_zero():
    c = Creature("c", 100, 10, 0.0, SequenceRng(0))
    c.take_damage(150)
    assert c.hp == 0
    assert c.is_dead()


def test_is_half_hp_boundary():
    c = Creature("c", 100, 10, 0.0, SequenceRng(0))
    c.take_damage(49)
    assert not c.is_half_hp()
    c.take_damage(1)
    assert c.is_half_hp()


def test_is_half_hp_with_zero_max():
    assert Creature().is_half_hp() is False


def test_base_attack_uses_atk():
    a = Creature("a", 100, 25, 0.0, SequenceRng(0))
    b = Creature("b", 100, 10, 0.0, SequenceRng(0))
    hit = a.attack(b)
    assert hit == Hit(25, False)
    assert b.hp == 100 - 25


def test_damage_range_bounds():
    low = Creature("c", 1, 1, 0.0, SequenceRng(0))
    high = Creature("c", 1, 1, 0.0, SequenceRng(10))
    assert low.damage_range() == pytest.approx(0.95)
    assert high.damage_range() == pytest.approx(1.05)


def test_damage_range_random_invariant():
    c = Creature("c", 1, 1, 0.0, random.Random(3))
    values = [c.damage_range() for _ in range(200)]
    assert min(values) >= low_bound() and max(values) <= high_bound()


def low_bound():
    return Creature("x", 1, 1, 0.0, SequenceRng(0)).damage_range()


def high_bound():
    return Creature("x", 1, 1, 0.0, SequenceRng(10)).damage_range()


def test_check_critical():
    assert Creature("c", 1, 1, 0.5, SequenceRng(5)).check_critical()
    assert not Creature("c", 1, 1, 0.5, SequenceRng(6)).check_critical()
    assert Creature("c", 1, 1, 0.0, SequenceRng(0)).check_critical()


def test_info_format():
    k = Knight("knight1", 350, 150, 0.5, SequenceRng(0))
    assert k.info() == "Name : knight1, Hp : 350, MaxHp : 350, Atk : 150, CriRate : 0.5"


def test_player_normal_attack_records_damage():
    boss = BossGoblin("bobo", 13000, 100, 0.0, SequenceRng(0))
    knight = Knight("knight1", 350, 150, 0.5, SequenceRng(5, 10))
    hit = knight.attack(boss)
    assert hit == Hit(150, False)
    assert boss.hp == 13000 - 150
    assert boss.deal_amounts == {"knight1": 150}


def test_player_critical_doubles():
    boss = BossGoblin("bobo", 13000, 100, 0.0, SequenceRng(0))
    mage = Mage("mage1", 150, 300, 0.2, SequenceRng(5, 0))
    hit = mage.attack(boss)
    assert hit.critical
    assert hit.damage == 300 * 2


def test_player_half_hp_and_critical_stack():
    boss = BossGoblin("bobo", 13000, 100, 0.0, SequenceRng(0))
    archer = Archer("archer1", 100, 300, 0.8, SequenceRng(5, 0))
    archer.take_damage(60)
    hit = archer.attack(boss)
    assert hit.damage == 300 * 2 * 2
    assert boss.deal_amounts["archer1"] == hit.damage


def test_player_attack_on_plain_creature():
    target = Goblin("g", 1000, 10, 0.0, SequenceRng(0))
    knight = Knight("k", 350, 150, 0.5, SequenceRng(5, 10))
    knight.attack(target)
    assert target.hp == 1000 - 150


def test_monster_attack_deals_plain_atk():
    goblin = Goblin("g", 100, 20, 0.9, SequenceRng(0))
    knight = Knight("k", 350, 150, 0.5, SequenceRng(0))
    hit = goblin.attack(knight)
    assert hit == Hit(20, False)
    assert knight.hp == 350 - 20


def test_plain_player_attack_records_on_boss():
    boss = BossGoblin("bobo", 13000, 100, 0.0, SequenceRng(0))
    player = Player("p", 100, 40, 0.5, SequenceRng(5, 10))
    hit = player.attack(boss)
    assert hit == Hit(40, False)
    assert boss.deal_amounts == {"p": 40}


def test_record_damage_accumulates():
    boss = BossGoblin("bobo", 100, 1, 0.0, SequenceRng(0))
    boss.record_damage("a", 10)
    boss.record_damage("a", 5)
    boss.record_damage("b", 7)
    assert boss.deal_amounts == {"a": 15, "b": 7}


def test_ranking_sorted_descending():
    boss = BossGoblin("bobo", 100, 1, 0.0, SequenceRng(0))
    for name, amount in [("a", 3), ("b", 9), ("c", 5)]:
        boss.record_damage(name, amount)
    assert boss.ranking() == [("b", 9), ("c", 5), ("a", 3)]


def test_forget_only_dead():
    boss = BossGoblin("bobo", 100, 1, 0.0, SequenceRng(0))
    alive = Knight("alive", 10, 1, 0.0, SequenceRng(0))
    dead = Knight("dead", 10, 1, 0.0, SequenceRng(0))
    dead.take_damage(10)
    boss.record_damage("alive", 4)
    boss.record_damage("dead", 8)
    boss.forget(alive)
    boss.forget(dead)
    assert boss.deal_amounts == {"alive": 4}


def test_deal_amounts_is_a_copy():
    boss = BossGoblin("bobo", 100, 1, 0.0, SequenceRng(0))
    boss.record_damage("a", 1)
    boss.deal_amounts["a"] = 99
    assert boss.deal_amounts == {"a": 1}