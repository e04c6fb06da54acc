from __future__ import annotations

import pytest

from skirmish.engine.errors import DiceNotRolledError
from skirmish.engine.force import attack_force, defend_force, group_bonus, heal_force
from skirmish.engine.types import Card, Fight


def test_empty_group_has_no_force() -> None:
    assert attack_force([]) == 0
    assert defend_force([]) == 0
    assert group_bonus([]) == 0


def test_single_card_forces_follow_rank() -> None:
    assert attack_force([Card(1, "dwarf", "soldier")]) == 2
    assert attack_force([Card(1, "dwarf", "veteran")]) == 3
    assert attack_force([Card(1, "dwarf", "commander")]) == 4
    assert attack_force([Card(1, "dwarf", "lord")]) == 5

    assert defend_force([Card(1, "dwarf", "soldier")]) == 3
    assert defend_force([Card(1, "dwarf", "lord")]) == 6

    assert attack_force([Card(1, "orc", "soldier")]) == 3
    assert attack_force([Card(1, "orc", "veteran")]) == 4
    assert defend_force([Card(1, "orc", "soldier")]) == 2
    assert defend_force([Card(1, "orc", "veteran")]) == 3


def test_lone_goblin_gets_no_bonus() -> None:
    cards = [Card(1, "orc", "veteran"), Card(1, "goblin", "commander")]
    # 3 + 1 orc, 4, group bonus 1
    assert attack_force(cards) == 9
    # 3, 4, group bonus 1
    assert defend_force(cards) == 8


def test_goblin_pair_triggers_bonus_for_each_goblin() -> None:
    cards = [
        Card(1, "orc", "veteran"),
        Card(1, "goblin", "commander"),
        Card(2, "goblin", "commander"),
    ]
    # 3 + 1, 4 + 1, 4 + 1, group bonus 2
    assert attack_force(cards) == 16
    # 3, 4 + 1, 4 + 1, group bonus 2
    assert defend_force(cards) == 15


def test_force_is_order_independent() -> None:
    cards = [
        Card(2, "goblin", "soldier"),
        Card(1, "dwarf", "lord"),
        Card(1, "goblin", "veteran"),
        Card(3, "orc", "soldier"),
    ]
    assert attack_force(cards) == attack_force(list(reversed(cards)))
    assert defend_force(cards) == defend_force(cards[2:] + cards[:2])


def test_elves_only_heal() -> None:
    elves = [Card(1, "elf", "soldier"), Card(2, "elf", "veteran")]
    assert heal_force(elves) == 2
    assert heal_force([Card(1, "orc", "lord")]) == 0
    # heal bonus is not part of the fighting forces
    assert attack_force(elves) == 2 + 3 + 1
    assert defend_force(elves) == 2 + 3 + 1


def test_fight_makes_damages() -> None:
    fight = Fight("player 1", "player 2", (Card(1, "orc", "soldier"),), (Card(1, "dwarf", "soldier"),))
    assert fight.roll_attack(4).roll_defend(2).damages() == 2


def test_fight_damages_never_negative() -> None:
    fight = Fight("player 1", "player 2", (Card(1, "orc", "soldier"),), (Card(1, "dwarf", "soldier"),))
    assert fight.roll_attack(2).roll_defend(4).damages() == 0


def test_fight_requires_both_dice() -> None:
    fight = Fight("player 1", "player 2", (Card(1, "orc", "soldier"),), ())
    with pytest.raises(DiceNotRolledError):
        fight.damages()
    with pytest.raises(DiceNotRolledError):
        fight.roll_attack(3).damages()
    with pytest.raises(DiceNotRolledError):
        fight.roll_defend(3).damages()


def test_rolls_stay_on_a_six_sided_die() -> None:
    fight = Fight("a", "b", (), ())
    with pytest.raises(ValueError):
        fight.roll_attack(7)
    with pytest.raises(ValueError):
        fight.roll_defend(0)


def test_random_rolls_use_injected_generator() -> None:
    import random

    fight = Fight("a", "b", (), ())
    first = fight.roll_attack(rng=random.Random(7)).roll_defend(rng=random.Random(8))
    second = fight.roll_attack(rng=random.Random(7)).roll_defend(rng=random.Random(8))
    assert first == second
    assert 1 <= first.attack_roll <= 6
    assert 1 <= first.defend_roll <= 6
