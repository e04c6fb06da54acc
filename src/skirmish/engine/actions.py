from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .errors import RulesError
from .game import Event, Game, GameConfig
from .round import fixed_dice
from .types import Card


@dataclass(frozen=True)
class StartRoundAction:
    pass


@dataclass(frozen=True)
class AttackAction:
    player: str
    cards: tuple[Card, ...]


@dataclass(frozen=True)
class DefendAction:
    player: str
    cards: tuple[Card, ...]


@dataclass(frozen=True)
class FightAction:
    """Resolve the next fight; omitted rolls come from the game seed."""

    attack_roll: int | None = None
    defend_roll: int | None = None


Action = StartRoundAction | AttackAction | DefendAction | FightAction


@dataclass(frozen=True)
class StepResult:
    ok: bool
    game: Game
    events: list[Event] = field(default_factory=list)
    error: str | None = None


def _apply(game: Game, action: Action) -> Game:
    if isinstance(action, StartRoundAction):
        return game.start_new_round()
    if isinstance(action, AttackAction):
        return game.play_attack(action.player, action.cards)
    if isinstance(action, DefendAction):
        return game.play_defend(action.player, action.cards)
    if isinstance(action, FightAction):
        if action.attack_roll is None and action.defend_roll is None:
            return game.fight()
        if action.attack_roll is None or action.defend_roll is None:
            raise ValueError("Give both dice rolls or neither.")
        return game.fight(fixed_dice(action.attack_roll, action.defend_roll))
    raise ValueError(f"Unknown action: {action!r}")


def step(game: Game, action: Action) -> StepResult:
    """Apply a single action to a game snapshot.

    Rejected actions leave the snapshot untouched and report the reason
    instead of raising.
    """
    try:
        after = _apply(game, action)
    except (RulesError, ValueError) as e:
        return StepResult(ok=False, game=game, error=str(e))
    return StepResult(ok=True, game=after, events=list(after.events[len(game.events):]))


def replay(
    actions: Iterable[Action],
    seed: int,
    config: GameConfig | None = None,
) -> Game:
    game = Game.init(config=config, seed=seed)
    for a in actions:
        game = step(game, a).game
    return game
