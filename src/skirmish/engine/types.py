from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Literal

from .errors import DiceNotRolledError

Race = Literal["dwarf", "elf", "goblin", "orc"]
Rank = Literal["soldier", "veteran", "commander", "lord"]
Phase = Literal["not_ready", "attack", "defend", "wait_for_battle"]

RACES: tuple[Race, ...] = ("dwarf", "elf", "goblin", "orc")
RANKS: tuple[Rank, ...] = ("soldier", "veteran", "commander", "lord")

RANK_FORCE: dict[str, int] = {
    "soldier": 2,
    "veteran": 3,
    "commander": 4,
    "lord": 5,
}

NOT_READY: Phase = "not_ready"
ATTACK: Phase = "attack"
DEFEND: Phase = "defend"
WAIT_FOR_BATTLE: Phase = "wait_for_battle"

DIE_FACES = 6
UNROLLED = 0


@dataclass(frozen=True)
class Card:
    number: int
    race: Race
    rank: Rank

    @property
    def force(self) -> int:
        return RANK_FORCE[self.rank]

    @property
    def id(self) -> str:
        return f"{self.race}-{self.rank}-{self.number}"

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class PlayerAction:
    player_name: str
    phase: Phase


def _roll(value: int | None, rng: random.Random | None) -> int:
    if value is None:
        return (rng or random.Random()).randint(1, DIE_FACES)
    if not 1 <= value <= DIE_FACES:
        raise ValueError(f"Dice roll must be between 1 and {DIE_FACES}, got {value}")
    return value


@dataclass(frozen=True)
class Fight:
    """One combat between an attacking and a defending player.

    Dice default to UNROLLED; `damages()` refuses to compute until both
    are rolled.
    """

    attacking_player_name: str
    defending_player_name: str
    attack: tuple[Card, ...]
    defense: tuple[Card, ...]
    attack_roll: int = UNROLLED
    defend_roll: int = UNROLLED

    def roll_attack(self, value: int | None = None, rng: random.Random | None = None) -> "Fight":
        return replace(self, attack_roll=_roll(value, rng))

    def roll_defend(self, value: int | None = None, rng: random.Random | None = None) -> "Fight":
        return replace(self, defend_roll=_roll(value, rng))

    @property
    def is_rolled(self) -> bool:
        return self.attack_roll != UNROLLED and self.defend_roll != UNROLLED

    def damages(self) -> int:
        # local import: force depends on Card
        from .force import attack_force, defend_force

        if self.attack_roll == UNROLLED:
            raise DiceNotRolledError("You must roll the attack dice before a fight.")
        if self.defend_roll == UNROLLED:
            raise DiceNotRolledError("You must roll the defend dice before a fight.")
        attack_total = attack_force(self.attack) + self.attack_roll
        defend_total = defend_force(self.defense) + self.defend_roll
        return max(attack_total - defend_total, 0)
