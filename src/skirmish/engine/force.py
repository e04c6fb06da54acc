"""Force computation over a played group of cards.

Racial bonuses are looked up by race and receive the whole group the card
was played in, so a bonus may depend on the other cards (Goblins only
get theirs in pairs).
"""

from __future__ import annotations

from typing import Callable, Sequence

from .types import Card

Bonus = Callable[[Sequence[Card]], int]

GOBLIN_THRESHOLD = 2


def _none(cards: Sequence[Card]) -> int:
    return 0


def _flat(cards: Sequence[Card]) -> int:
    return 1


def _goblin_pack(cards: Sequence[Card]) -> int:
    goblins = sum(1 for c in cards if c.race == "goblin")
    return 1 if goblins >= GOBLIN_THRESHOLD else 0


ATTACK_BONUS: dict[str, Bonus] = {
    "orc": _flat,
    "goblin": _goblin_pack,
}

DEFEND_BONUS: dict[str, Bonus] = {
    "dwarf": _flat,
    "goblin": _goblin_pack,
}

# Elves heal; nothing consumes heal_force yet.
HEAL_BONUS: dict[str, Bonus] = {
    "elf": _flat,
}


def attack_bonus(card: Card, cards: Sequence[Card]) -> int:
    return ATTACK_BONUS.get(card.race, _none)(cards)


def defend_bonus(card: Card, cards: Sequence[Card]) -> int:
    return DEFEND_BONUS.get(card.race, _none)(cards)


def heal_bonus(card: Card, cards: Sequence[Card]) -> int:
    return HEAL_BONUS.get(card.race, _none)(cards)


def group_bonus(cards: Sequence[Card]) -> int:
    return max(len(cards) - 1, 0)


def attack_force(cards: Sequence[Card]) -> int:
    return sum(c.force + attack_bonus(c, cards) for c in cards) + group_bonus(cards)


def defend_force(cards: Sequence[Card]) -> int:
    return sum(c.force + defend_bonus(c, cards) for c in cards) + group_bonus(cards)


def heal_force(cards: Sequence[Card]) -> int:
    return sum(heal_bonus(c, cards) for c in cards)
