from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence

from .errors import IllegalPlayError, OutOfTurnError
from .types import NOT_READY, Card, Phase

DEFAULT_LIFE = 20


def _without(hand: Sequence[Card], cards: Iterable[Card]) -> tuple[Card, ...]:
    to_remove = Counter(cards)
    kept: list[Card] = []
    for c in hand:
        if to_remove[c] > 0:
            to_remove[c] -= 1
            continue
        kept.append(c)
    return tuple(kept)


@dataclass(frozen=True)
class PlayerCards:
    hand: tuple[Card, ...] = ()
    attack: tuple[Card, ...] = ()
    defense: tuple[Card, ...] = ()

    def take_cards(self, cards: Iterable[Card]) -> "PlayerCards":
        return replace(self, hand=self.hand + tuple(cards))

    def prepare_attack(self, cards: Sequence[Card]) -> "PlayerCards":
        return replace(self, hand=_without(self.hand, cards), attack=self.attack + tuple(cards))

    def prepare_defend(self, cards: Sequence[Card]) -> "PlayerCards":
        return replace(self, hand=_without(self.hand, cards), defense=self.defense + tuple(cards))

    def clear_zones(self) -> tuple["PlayerCards", list[Card]]:
        """Empty both zones; returns the spent cards (attack first)."""
        spent = list(self.attack) + list(self.defense)
        return PlayerCards(hand=self.hand), spent


@dataclass(frozen=True)
class Player:
    name: str
    life: int = DEFAULT_LIFE
    cards: PlayerCards = field(default_factory=PlayerCards)
    ready_to_play: Phase = NOT_READY

    @property
    def is_defeated(self) -> bool:
        return self.life <= 0

    def take_cards(self, cards: Iterable[Card]) -> "Player":
        return replace(self, cards=self.cards.take_cards(cards))

    def with_phase(self, phase: Phase) -> "Player":
        return replace(self, ready_to_play=phase)

    def prepare_attack(self, cards: Sequence[Card]) -> "Player":
        return replace(self, cards=self.cards.prepare_attack(cards))

    def prepare_defend(self, cards: Sequence[Card]) -> "Player":
        return replace(self, cards=self.cards.prepare_defend(cards))

    def clear_zones(self) -> tuple["Player", list[Card]]:
        cards, spent = self.cards.clear_zones()
        return replace(self, cards=cards), spent

    def check_can_play_cards(self, cards: Sequence[Card]) -> "Player":
        missing = Counter(cards) - Counter(self.cards.hand)
        if missing:
            names = ", ".join(str(c) for c in missing.elements())
            raise IllegalPlayError(f"Player {self.name} can't play cards which are not in hand: {names}")
        return self

    def check_turn(self, phase: Phase) -> "Player":
        if self.ready_to_play != phase:
            raise OutOfTurnError(
                f"Player {self.name} can't play {phase} now (currently {self.ready_to_play})."
            )
        return self

    def damages(self, amount: int) -> "Player":
        if amount < 0:
            raise ValueError(f"Damage can't be negative: {amount}")
        return replace(self, life=self.life - amount)
