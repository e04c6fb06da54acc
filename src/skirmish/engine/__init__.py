"""Deterministic, headless rules engine for skirmish.

IMPORTANT: This package performs no I/O; see skirmish.services for that.
"""

from .actions import AttackAction, DefendAction, FightAction, StartRoundAction, StepResult, replay, step
from .deck import Deck, Discard, build_card_set
from .errors import (
    DiceNotRolledError,
    IllegalPlayError,
    InvalidRoundStateError,
    NoCurrentRoundError,
    OutOfTurnError,
    RulesError,
    UnknownPlayerError,
)
from .force import attack_force, defend_force, group_bonus, heal_force
from .game import Game, GameConfig, GameRounds
from .player import Player, PlayerCards
from .round import Round, fixed_dice, roll_dice
from .types import Card, Fight, Phase, PlayerAction, Race, Rank

__all__ = [
    "AttackAction",
    "Card",
    "Deck",
    "DefendAction",
    "DiceNotRolledError",
    "Discard",
    "Fight",
    "FightAction",
    "Game",
    "GameConfig",
    "GameRounds",
    "IllegalPlayError",
    "InvalidRoundStateError",
    "NoCurrentRoundError",
    "OutOfTurnError",
    "Phase",
    "Player",
    "PlayerAction",
    "PlayerCards",
    "Race",
    "Rank",
    "Round",
    "RulesError",
    "StartRoundAction",
    "StepResult",
    "UnknownPlayerError",
    "attack_force",
    "build_card_set",
    "defend_force",
    "fixed_dice",
    "group_bonus",
    "heal_force",
    "replay",
    "roll_dice",
    "step",
]
