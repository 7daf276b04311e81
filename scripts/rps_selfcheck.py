"""Quick self-check for RPS logic and the round loop.

Run:
  python scripts/rps_selfcheck.py

This doesn't require pytest.
"""

from __future__ import annotations

import os
import sys

# Allow running from repo root without installing as a package.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
  sys.path.insert(0, REPO_ROOT)

from src.rps_logic import Move, Outcome, resolve
from src.session import GameSession


def main() -> int:
    for m in Move:
        assert resolve(m, m) is Outcome.TIE
        assert not m.beats(m)

    assert resolve(Move.ROCK, Move.SCISSORS) is Outcome.PLAYER_WINS
    assert resolve(Move.SCISSORS, Move.PAPER) is Outcome.PLAYER_WINS
    assert resolve(Move.PAPER, Move.ROCK) is Outcome.PLAYER_WINS

    assert resolve(Move.SCISSORS, Move.ROCK) is Outcome.COMPUTER_WINS
    assert resolve(Move.PAPER, Move.SCISSORS) is Outcome.COMPUTER_WINS
    assert resolve(Move.ROCK, Move.PAPER) is Outcome.COMPUTER_WINS

    inputs = iter(["1", "y", "3", "n"])
    computer = iter([Move.SCISSORS, Move.ROCK])
    session = GameSession(
        read_line=lambda _prompt: next(inputs),
        write_line=lambda _text: None,
        choose_move=lambda: next(computer),
    )
    board = session.run()
    assert (board.player_wins, board.computer_wins, board.ties) == (1, 1, 0)

    print("RPS self-check OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
