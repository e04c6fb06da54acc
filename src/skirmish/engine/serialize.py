from __future__ import annotations

from typing import Sequence

from .actions import Action, AttackAction, DefendAction, FightAction, StartRoundAction
from .game import Game
from .player import Player
from .round import Round
from .types import Card, Fight


def card_to_dict(c: Card) -> dict[str, object]:
    return {"number": c.number, "race": c.race, "rank": c.rank}


def _cards(cards: Sequence[Card]) -> list[str]:
    return [c.id for c in cards]


def fight_to_dict(f: Fight) -> dict[str, object]:
    return {
        "attacker": f.attacking_player_name,
        "defender": f.defending_player_name,
        "attack": _cards(f.attack),
        "defense": _cards(f.defense),
        "attack_roll": f.attack_roll,
        "defend_roll": f.defend_roll,
        "damage": f.damages() if f.is_rolled else None,
    }


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, StartRoundAction):
        return {"type": "start_round"}
    if isinstance(a, AttackAction):
        return {"type": "attack", "player": a.player, "cards": _cards(a.cards)}
    if isinstance(a, DefendAction):
        return {"type": "defend", "player": a.player, "cards": _cards(a.cards)}
    if isinstance(a, FightAction):
        return {"type": "fight", "attack_roll": a.attack_roll, "defend_roll": a.defend_roll}
    # should be unreachable
    return {"type": "unknown"}


def _player_to_dict(p: Player) -> dict[str, object]:
    return {
        "name": p.name,
        "life": p.life,
        "ready_to_play": p.ready_to_play,
        "hand": _cards(p.cards.hand),
        "attack": _cards(p.cards.attack),
        "defense": _cards(p.cards.defense),
    }


def _round_to_dict(r: Round) -> dict[str, object]:
    return {
        "players": [_player_to_dict(p) for p in r.players],
        "actions": [{"player": a.player_name, "phase": a.phase} for a in r.actions],
        "fights": [fight_to_dict(f) for f in r.fights],
        "prepared_for_battle": r.is_prepared_for_battle,
        "over": r.is_over,
    }


def snapshot(game: Game) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the game."""
    return {
        "seed": game.seed,
        "deck": _cards(game.deck.cards),
        "discard": _cards(game.discard.cards),
        "players": [_player_to_dict(p) for p in game.players],
        "rounds": [_round_to_dict(r) for r in game.rounds.rounds],
        "winner": game.winner,
    }
