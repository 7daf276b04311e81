"""Pure logic helpers for the rock/paper/scissors game.

Kept free of console I/O so it can be tested without a terminal.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Move(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def token(self) -> str:
        return self.name.lower()

    def beats(self, other: "Move") -> bool:
        return (self, other) in _WINS

    def __str__(self) -> str:
        return self.name


class Outcome(Enum):
    PLAYER_WINS = "win"
    COMPUTER_WINS = "lose"
    TIE = "tie"


_WINS = {
    (Move.ROCK, Move.SCISSORS),
    (Move.SCISSORS, Move.PAPER),
    (Move.PAPER, Move.ROCK),
}

_MOVE_TOKENS: dict[str, Move] = {}
for _m in Move:
    _MOVE_TOKENS[str(_m.value)] = _m
    _MOVE_TOKENS[_m.token] = _m
    _MOVE_TOKENS[_m.token[0]] = _m

_DECISIONS = {
    "y": True,
    "yes": True,
    "n": False,
    "no": False,
}


def parse_move(raw: Optional[str]) -> Optional[Move]:
    """Map a selection code (1-3), word or initial to a Move, or None."""
    return _MOVE_TOKENS.get((raw or "").strip().lower())


def parse_decision(raw: Optional[str]) -> Optional[bool]:
    return _DECISIONS.get((raw or "").strip().lower())


def resolve(player_move: Move, computer_move: Move) -> Outcome:
    """Return the outcome of a round from the player's point of view."""

    if player_move == computer_move:
        return Outcome.TIE
    if player_move.beats(computer_move):
        return Outcome.PLAYER_WINS
    return Outcome.COMPUTER_WINS
