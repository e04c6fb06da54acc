from __future__ import annotations


class RulesError(RuntimeError):
    """Base class for every rejected game operation."""


class UnknownPlayerError(RulesError):
    pass


class IllegalPlayError(RulesError):
    pass


class OutOfTurnError(RulesError):
    pass


class InvalidRoundStateError(RulesError):
    pass


class DiceNotRolledError(RulesError):
    pass


class NoCurrentRoundError(RulesError):
    pass
