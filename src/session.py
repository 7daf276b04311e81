"""Round loop and score keeping for one rock/paper/scissors session.

The session never reads the console or the random module directly: it is
given a line reader, a line writer and a computer-move chooser, so tests can
drive it with scripted input and fixed opponent moves.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from src.rps_logic import Move, Outcome, parse_decision, parse_move, resolve


logger = logging.getLogger(__name__)


class SessionState(Enum):
    AWAITING_MOVE = "awaiting_move"
    ROUND_RESOLVED = "round_resolved"
    AWAITING_CONTINUE_DECISION = "awaiting_continue_decision"
    TERMINATED = "terminated"


@dataclass
class ScoreBoard:
    player_wins: int = 0
    computer_wins: int = 0
    ties: int = 0

    @property
    def rounds(self) -> int:
        return self.player_wins + self.computer_wins + self.ties

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.PLAYER_WINS:
            self.player_wins += 1
        elif outcome is Outcome.COMPUTER_WINS:
            self.computer_wins += 1
        else:
            self.ties += 1


@dataclass(frozen=True)
class RoundResult:
    player_move: Move
    computer_move: Move
    outcome: Outcome


@dataclass(frozen=True)
class Messages:
    move_prompt: str = "Enter your choice (1: Rock, 2: Paper, 3: Scissors): "
    invalid_move: str = "Invalid input. Please enter 1, 2, or 3 (or rock, paper, scissors)."
    continue_prompt: str = "Do you want to play again? (y/n): "
    invalid_decision: str = "Invalid input. Please enter 'y' or 'n'."
    player_choice: str = "You chose: {move}"
    computer_choice: str = "Computer chose: {move}"
    results: tuple[tuple[Outcome, str], ...] = (
        (Outcome.PLAYER_WINS, "You win this round!"),
        (Outcome.COMPUTER_WINS, "You lose this round!"),
        (Outcome.TIE, "This round is a tie!"),
    )
    summary: tuple[str, ...] = (
        "",
        "Game Summary:",
        "Player Wins: {player_wins}",
        "Computer Wins: {computer_wins}",
        "Ties: {ties}",
        "Thanks for playing Rock-Paper-Scissors! Goodbye!",
    )

    def result_text(self, outcome: Outcome) -> str:
        return dict(self.results)[outcome]


def random_move(rng: random.Random | None = None) -> Move:
    return (rng or random).choice(list(Move))


class GameSession:
    def __init__(
        self,
        read_line: Callable[[str], str],
        write_line: Callable[[str], None],
        choose_move: Callable[[], Move] = random_move,
        messages: Messages | None = None,
    ) -> None:
        self._read_line = read_line
        self._write_line = write_line
        self._choose_move = choose_move
        self._messages = messages or Messages()
        self.scoreboard = ScoreBoard()
        self.state = SessionState.AWAITING_MOVE

    def ask_move(self) -> Move:
        self.state = SessionState.AWAITING_MOVE
        while True:
            move = parse_move(self._read_line(self._messages.move_prompt))
            if move is not None:
                return move
            self._write_line(self._messages.invalid_move)

    def ask_continue(self) -> bool:
        self.state = SessionState.AWAITING_CONTINUE_DECISION
        while True:
            decision = parse_decision(self._read_line(self._messages.continue_prompt))
            if decision is not None:
                return decision
            self._write_line(self._messages.invalid_decision)

    def play_round(self) -> RoundResult:
        player_move = self.ask_move()
        computer_move = self._choose_move()
        outcome = resolve(player_move, computer_move)
        self.state = SessionState.ROUND_RESOLVED

        m = self._messages
        self._write_line(m.player_choice.format(move=player_move))
        self._write_line(m.computer_choice.format(move=computer_move))
        self._write_line(m.result_text(outcome))

        self.scoreboard.record(outcome)
        logger.debug(
            "Round %d: player=%s computer=%s outcome=%s",
            self.scoreboard.rounds,
            player_move.token,
            computer_move.token,
            outcome.value,
        )
        return RoundResult(player_move, computer_move, outcome)

    def finish(self) -> ScoreBoard:
        """Terminate the session and emit the score summary."""
        self.state = SessionState.TERMINATED
        board = self.scoreboard
        for line in self._messages.summary:
            self._write_line(
                line.format(
                    player_wins=board.player_wins,
                    computer_wins=board.computer_wins,
                    ties=board.ties,
                )
            )
        logger.info(
            "Session finished after %d round(s): %d-%d-%d",
            board.rounds,
            board.player_wins,
            board.computer_wins,
            board.ties,
        )
        return board

    def run(self) -> ScoreBoard:
        while True:
            self.play_round()
            if not self.ask_continue():
                break
        return self.finish()
