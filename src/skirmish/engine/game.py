from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Callable, Sequence

from .deck import DEFAULT_COPIES, Deck, Discard, build_card_set
from .errors import InvalidRoundStateError, NoCurrentRoundError, UnknownPlayerError
from .player import DEFAULT_LIFE, Player
from .round import DiceStrategy, Round, roll_dice
from .types import RACES, Card, Fight, Race

Event = dict[str, object]


@dataclass(frozen=True)
class GameConfig:
    player_names: tuple[str, ...] = ("player 1", "player 2")
    starting_life: int = DEFAULT_LIFE
    hand_size: int = 5
    races: tuple[Race, ...] = RACES
    copies: tuple[tuple[str, int], ...] = tuple(DEFAULT_COPIES.items())

    @property
    def copies_by_rank(self) -> dict[str, int]:
        return dict(self.copies)

    def validate(self) -> "GameConfig":
        if len(self.player_names) < 2:
            raise ValueError("A game needs at least two players.")
        if len(set(self.player_names)) != len(self.player_names):
            raise ValueError(f"Player names must be unique: {list(self.player_names)}")
        if self.hand_size <= 0:
            raise ValueError(f"Hand size must be positive, got {self.hand_size}")
        if self.starting_life <= 0:
            raise ValueError(f"Starting life must be positive, got {self.starting_life}")
        return self


@dataclass(frozen=True)
class GameRounds:
    """Round history; only the last round is still in play."""

    rounds: tuple[Round, ...] = ()

    def start_new_round(self, players: Sequence[Player]) -> "GameRounds":
        return GameRounds(rounds=self.rounds + (Round(players=tuple(players)).start(),))

    def current_round(self) -> Round:
        if not self.rounds:
            raise NoCurrentRoundError("No current round - game not started.")
        return self.rounds[-1]

    def on_current_round(self, action: Callable[[Round], Round]) -> "GameRounds":
        return GameRounds(rounds=self.rounds[:-1] + (action(self.current_round()),))

    @property
    def closed_rounds(self) -> tuple[Round, ...]:
        return self.rounds[:-1]

    def __len__(self) -> int:
        return len(self.rounds)


@dataclass(frozen=True)
class Game:
    players: tuple[Player, ...]
    deck: Deck
    discard: Discard
    rounds: GameRounds
    config: GameConfig
    seed: int
    events: tuple[Event, ...] = ()

    @staticmethod
    def init(config: GameConfig | None = None, seed: int | None = None) -> "Game":
        cfg = (config or GameConfig()).validate()
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        rng = random.Random(seed)
        players = tuple(Player(name=n, life=cfg.starting_life) for n in cfg.player_names)
        deck = Deck.shuffled(build_card_set(cfg.races, cfg.copies_by_rank), rng)
        return Game(
            players=players,
            deck=deck,
            discard=Discard(),
            rounds=GameRounds(),
            config=cfg,
            seed=seed,
        )

    # -- orchestration --------------------------------------------------------

    def start(self) -> "Game":
        return self.start_new_round()

    def start_new_round(self) -> "Game":
        if self.is_over:
            raise InvalidRoundStateError("Can't start a new round, the game is over.")
        if self.rounds.rounds and not self.rounds.current_round().is_over:
            raise InvalidRoundStateError("Can't start a new round before the current one is over.")
        return self._discard_spent()._deal()._new_round()

    def play_attack(self, player: Player | str, cards: Sequence[Card]) -> "Game":
        name = _name(player)
        rounds = self.rounds.on_current_round(lambda r: r.play_attack(name, cards))
        return self._with_rounds(
            rounds, {"type": "ATTACK_PLAYED", "player": name, "cards": [c.id for c in cards]}
        )

    def play_defend(self, player: Player | str, cards: Sequence[Card]) -> "Game":
        name = _name(player)
        rounds = self.rounds.on_current_round(lambda r: r.play_defend(name, cards))
        event: Event = {"type": "DEFENSE_PLAYED", "player": name, "cards": [c.id for c in cards]}
        return self._with_rounds(rounds, event)

    def fight(self, dice: DiceStrategy | None = None) -> "Game":
        """Resolve the next fight of the current round.

        Without explicit dice the rolls come from a generator seeded by the
        game seed and the fight's position, so replays roll the same dice.
        """
        current = self.rounds.current_round()
        if dice is None:
            rng = random.Random(f"{self.seed}:{len(self.rounds)}:{len(current.fights)}")
            dice = roll_dice(rng)
        rounds = self.rounds.on_current_round(lambda r: r.fight(dice))
        fight = rounds.current_round().fights[-1]
        return self._with_rounds(rounds, _fight_event(fight))

    # -- queries --------------------------------------------------------------

    def player_in_game(self, player: Player | str) -> Player:
        name = _name(player)
        for p in self.players:
            if p.name == name:
                return p
        raise UnknownPlayerError(f"Unknown player {name}")

    @property
    def current_round(self) -> Round:
        return self.rounds.current_round()

    @property
    def fights(self) -> tuple[Fight, ...]:
        return self.rounds.current_round().fights

    def lives(self) -> dict[str, int]:
        return {p.name: p.life for p in self.players}

    @property
    def is_over(self) -> bool:
        return sum(1 for p in self.players if not p.is_defeated) <= 1

    @property
    def winner(self) -> str | None:
        alive = [p.name for p in self.players if not p.is_defeated]
        return alive[0] if len(alive) == 1 else None

    # -- internals ------------------------------------------------------------

    def _discard_spent(self) -> "Game":
        game = self
        players: list[Player] = []
        for p in self.players:
            cleared, spent = p.clear_zones()
            players.append(cleared)
            if spent:
                game = game._log(
                    {"type": "CARDS_DISCARDED", "player": p.name, "cards": [c.id for c in spent]}
                )
                game = replace(game, discard=game.discard.add(spent))
        return replace(game, players=tuple(players))

    def _deal(self) -> "Game":
        deck = self.deck
        game = self
        players: list[Player] = []
        for p in self.players:
            deck, drawn = deck.draw_cards(max(self.config.hand_size - len(p.cards.hand), 0))
            players.append(p.take_cards(drawn))
            if drawn:
                game = game._log({"type": "CARDS_DEALT", "player": p.name, "count": len(drawn)})
        return replace(game, players=tuple(players), deck=deck)

    def _new_round(self) -> "Game":
        rounds = self.rounds.start_new_round(self.players)
        return self._with_rounds(rounds, {"type": "ROUND_STARTED", "round": len(rounds)})

    def _with_rounds(self, rounds: GameRounds, event: Event) -> "Game":
        game = replace(self, rounds=rounds, players=rounds.current_round().players)
        return game._log(event)

    def _log(self, event: Event) -> "Game":
        return replace(self, events=self.events + (event,))


def _fight_event(fight: Fight) -> Event:
    return {
        "type": "FIGHT_RESOLVED",
        "attacker": fight.attacking_player_name,
        "defender": fight.defending_player_name,
        "attack_roll": fight.attack_roll,
        "defend_roll": fight.defend_roll,
        "damage": fight.damages(),
    }


def _name(player: Player | str) -> str:
    return player if isinstance(player, str) else player.name
