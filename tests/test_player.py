from __future__ import annotations

import pytest

from skirmish.engine.errors import IllegalPlayError, OutOfTurnError
from skirmish.engine.player import Player, PlayerCards
from skirmish.engine.types import Card

ORC = Card(1, "orc", "soldier")
ELF = Card(1, "elf", "veteran")
DWARF = Card(1, "dwarf", "lord")


def _player(*hand: Card) -> Player:
    return Player(name="player 1", cards=PlayerCards(hand=tuple(hand)))


def test_new_player_defaults() -> None:
    p = Player(name="player 1")
    assert p.life == 20
    assert p.cards == PlayerCards()
    assert p.ready_to_play == "not_ready"


def test_cannot_play_cards_outside_hand() -> None:
    p = _player(ORC, ELF)
    with pytest.raises(IllegalPlayError) as exc:
        p.check_can_play_cards([ORC, DWARF])
    assert "player 1" in str(exc.value)
    assert DWARF.id in str(exc.value)


def test_cannot_play_same_card_twice() -> None:
    p = _player(ORC, ELF)
    with pytest.raises(IllegalPlayError):
        p.check_can_play_cards([ORC, ORC])


def test_check_turn() -> None:
    p = _player(ORC).with_phase("attack")
    assert p.check_turn("attack") is p
    with pytest.raises(OutOfTurnError):
        p.check_turn("defend")


def test_prepare_moves_cards_out_of_hand() -> None:
    p = _player(ORC, ELF, DWARF).prepare_attack([DWARF, ORC]).prepare_defend([ELF])
    assert p.cards.hand == ()
    assert p.cards.attack == (DWARF, ORC)
    assert p.cards.defense == (ELF,)


def test_clear_zones_returns_spent_cards() -> None:
    p = _player(ORC, ELF, DWARF).prepare_attack([ORC]).prepare_defend([DWARF])
    cleared, spent = p.clear_zones()
    assert spent == [ORC, DWARF]
    assert cleared.cards == PlayerCards(hand=(ELF,))


def test_damages_is_pure() -> None:
    p = Player(name="player 1")
    hurt = p.damages(7)
    assert hurt.life == 13
    assert p.life == 20
    assert p.damages(0) == p
    assert hurt.damages(20).is_defeated
    with pytest.raises(ValueError):
        p.damages(-1)
