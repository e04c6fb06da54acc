"""Turn sequencing inside a single round.

Within a round players alternate: the attacker hands over to the next
player's defense, who then attacks in turn. Once every player has both
attacked and defended the round is prepared for battle and the fights
are resolved one by one, each player attacking the next one by index.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Callable, Sequence

from .errors import InvalidRoundStateError, UnknownPlayerError
from .player import Player
from .types import ATTACK, DEFEND, NOT_READY, WAIT_FOR_BATTLE, Card, Fight, Phase, PlayerAction

DiceStrategy = Callable[[Fight], Fight]


def roll_dice(rng: random.Random | None = None) -> DiceStrategy:
    """Two independent uniform rolls, drawn from `rng` (or a private one)."""
    source = rng or random.Random()

    def _roll(fight: Fight) -> Fight:
        return fight.roll_attack(rng=source).roll_defend(rng=source)

    return _roll


def fixed_dice(attack: int, defend: int) -> DiceStrategy:
    def _roll(fight: Fight) -> Fight:
        return fight.roll_attack(attack).roll_defend(defend)

    return _roll


@dataclass(frozen=True)
class Round:
    players: tuple[Player, ...]
    actions: tuple[PlayerAction, ...] = ()
    fights: tuple[Fight, ...] = ()

    def start(self) -> "Round":
        return self._select_player(self.players[0].name, ATTACK)

    def play_attack(self, player: Player | str, cards: Sequence[Card]) -> "Round":
        actor = self.player_in_round(_name(player)).check_turn(ATTACK).check_can_play_cards(cards)
        return (
            self._with_player(actor.prepare_attack(cards))
            ._played(actor.name, ATTACK)
            ._select_player(self._next_player(actor.name).name, DEFEND)
        )

    def play_defend(self, player: Player | str, cards: Sequence[Card]) -> "Round":
        actor = self.player_in_round(_name(player)).check_turn(DEFEND).check_can_play_cards(cards)
        rnd = self._with_player(actor.prepare_defend(cards))._played(actor.name, DEFEND)
        if rnd.is_prepared_for_battle:
            return rnd._with_players(p.with_phase(WAIT_FOR_BATTLE) for p in rnd.players)
        return rnd._select_player(actor.name, ATTACK)

    def fight(self, dice: DiceStrategy | None = None) -> "Round":
        if not self.is_prepared_for_battle:
            raise InvalidRoundStateError("Can't start a fight when the battle is not prepared.")
        if self.is_over:
            raise InvalidRoundStateError("Can't start a fight when the battle is over.")
        attacker, defender = self.next_opponents()
        fight = Fight(
            attacking_player_name=attacker.name,
            defending_player_name=defender.name,
            attack=attacker.cards.attack,
            defense=defender.cards.defense,
        )
        fight = (dice or roll_dice())(fight)
        return replace(self, fights=self.fights + (fight,))._with_player(
            defender.damages(fight.damages())
        )

    @property
    def is_prepared_for_battle(self) -> bool:
        for p in self.players:
            played = {a.phase for a in self.actions if a.player_name == p.name}
            if not {ATTACK, DEFEND} <= played:
                return False
        return True

    @property
    def is_over(self) -> bool:
        attackers = {f.attacking_player_name for f in self.fights}
        return all(p.name in attackers for p in self.players)

    def next_opponents(self) -> tuple[Player, Player]:
        attackers = {f.attacking_player_name for f in self.fights}
        for p in self.players:
            if p.name not in attackers:
                return p, self._next_player(p.name)
        raise InvalidRoundStateError("Every player has already fought this round.")

    def player_in_round(self, name: str) -> Player:
        for p in self.players:
            if p.name == name:
                return p
        raise UnknownPlayerError(f"Unknown player {name}")

    def _next_player(self, name: str) -> Player:
        names = [p.name for p in self.players]
        return self.players[(names.index(name) + 1) % len(self.players)]

    def _select_player(self, name: str, phase: Phase) -> "Round":
        return self._with_players(
            p.with_phase(phase if p.name == name else NOT_READY) for p in self.players
        )

    def _with_player(self, player: Player) -> "Round":
        return self._with_players(player if p.name == player.name else p for p in self.players)

    def _with_players(self, players) -> "Round":
        return replace(self, players=tuple(players))

    def _played(self, name: str, phase: Phase) -> "Round":
        return replace(self, actions=self.actions + (PlayerAction(name, phase),))


def _name(player: Player | str) -> str:
    return player if isinstance(player, str) else player.name
