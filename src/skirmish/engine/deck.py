from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from .types import RACES, RANKS, Card, Race

# Copies of each rank per race: weakest rank is the most common.
DEFAULT_COPIES: dict[str, int] = {
    "soldier": 5,
    "veteran": 4,
    "commander": 3,
    "lord": 1,
}


def build_card_set(
    races: Sequence[Race] = RACES,
    copies: Mapping[str, int] = DEFAULT_COPIES,
) -> list[Card]:
    cards: list[Card] = []
    for race in races:
        for rank in RANKS:
            for number in range(1, copies.get(rank, 0) + 1):
                cards.append(Card(number=number, race=race, rank=rank))
    return cards


@dataclass(frozen=True)
class Deck:
    cards: tuple[Card, ...] = ()

    @staticmethod
    def shuffled(cards: Iterable[Card], rng: random.Random) -> "Deck":
        pool = list(cards)
        rng.shuffle(pool)
        return Deck(cards=tuple(pool))

    def draw_cards(self, count: int) -> tuple["Deck", list[Card]]:
        """Return the remaining deck and the first `count` cards.

        Drawing more than what is left hands out whatever remains.
        """
        if count < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {count}")
        return Deck(cards=self.cards[count:]), list(self.cards[:count])

    def __len__(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class Discard:
    cards: tuple[Card, ...] = ()

    def add(self, cards: Iterable[Card]) -> "Discard":
        return Discard(cards=self.cards + tuple(cards))

    def __len__(self) -> int:
        return len(self.cards)


