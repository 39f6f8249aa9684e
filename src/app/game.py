from __future__ import annotations

import enum
import logging
import secrets
from typing import Callable

from commit_reveal import compute_commitment, generate_key
from help_table import format_help_table
from protocol import EXIT, HELP, InvalidInput, MoveSet, Round, Selection, parse_selection
from rules import build_outcome_table, winner

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input. Please enter a valid move number."

_VERDICTS = {
    "Win": "You win!",
    "Lose": "You lose!",
    "Draw": "It's a draw!",
}


class RoundState(enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    SHOW_HELP = "show_help"
    INVALID_INPUT = "invalid_input"
    RESOLVE = "resolve"
    EXIT = "exit"
    DONE = "done"


class RoundController:
    """Plays one commit-reveal round against the computer.

    The commitment is written before the first prompt, and the key is only
    disclosed after the outcome, as the last line of the round.
    """

    def __init__(
        self,
        move_set: MoveSet,
        *,
        read_line: Callable[[str], str] | None = None,
        write: Callable[[str], None] = print,
        pick_index: Callable[[int], int] = secrets.randbelow,
        key_factory: Callable[[], str] = generate_key,
        retry_invalid: bool = False,
    ) -> None:
        self.move_set = move_set
        self.table = build_outcome_table(move_set)
        self._read_line = read_line or input
        self._write = write
        self._pick_index = pick_index
        self._key_factory = key_factory
        self.retry_invalid = retry_invalid

        self._round: Round | None = None
        self._selection: Selection | None = None
        self._last_error: InvalidInput | None = None

    def play(self) -> Round | None:
        """Run the round; returns it once resolved, or None if the player exits."""
        rnd = self._open_round()
        self._write(f"HMAC: {rnd.commitment}")
        self._show_menu()

        handlers: dict[RoundState, Callable[[], RoundState]] = {
            RoundState.AWAITING_INPUT: self._on_awaiting_input,
            RoundState.SHOW_HELP: self._on_show_help,
            RoundState.INVALID_INPUT: self._on_invalid_input,
            RoundState.RESOLVE: self._on_resolve,
            RoundState.EXIT: self._on_exit,
        }
        state = RoundState.AWAITING_INPUT
        while state is not RoundState.DONE:
            logger.debug("round state: %s", state.value)
            state = handlers[state]()

        return rnd if rnd.resolved else None

    def _open_round(self) -> Round:
        computer_move = self.move_set.at(self._pick_index(len(self.move_set)))
        key = self._key_factory()
        rnd = Round(
            move_set=self.move_set,
            key=key,
            commitment=compute_commitment(computer_move, key),
            computer_move=computer_move,
        )
        self._round = rnd
        logger.debug("round opened with %d moves", len(self.move_set))
        return rnd

    def _show_menu(self) -> None:
        self._write("Available moves:")
        for number, move in enumerate(self.move_set, start=1):
            self._write(f"{number} - {move}")
        self._write("0 - exit")
        self._write("? - help")

    def _on_awaiting_input(self) -> RoundState:
        try:
            raw = self._read_line("Enter your move: ")
        except EOFError:
            return RoundState.EXIT

        try:
            selection = parse_selection(raw, len(self.move_set))
        except InvalidInput as exc:
            self._last_error = exc
            return RoundState.INVALID_INPUT

        if selection == EXIT:
            return RoundState.EXIT
        if selection == HELP:
            return RoundState.SHOW_HELP
        self._selection = selection
        return RoundState.RESOLVE

    def _on_show_help(self) -> RoundState:
        self._write(format_help_table(self.table))
        return RoundState.AWAITING_INPUT

    def _on_invalid_input(self) -> RoundState:
        error = self._last_error
        self._last_error = None
        if not self.retry_invalid:
            raise InvalidInput(INVALID_INPUT_MESSAGE) from error
        logger.debug("rejected selection: %s", error)
        self._write(INVALID_INPUT_MESSAGE)
        return RoundState.AWAITING_INPUT

    def _on_resolve(self) -> RoundState:
        rnd = self._round
        if rnd is None or not isinstance(self._selection, int):
            raise RuntimeError("no open round with a selected move to resolve")
        rnd.user_move = self.move_set.at(self._selection)
        rnd.outcome = winner(self.table, rnd.user_move, rnd.computer_move)

        self._write(f"Your move: {rnd.user_move}")
        self._write(f"Computer move: {rnd.computer_move}")
        self._write(_VERDICTS[rnd.outcome])
        self._write(f"HMAC key: {rnd.key}")
        return RoundState.DONE

    def _on_exit(self) -> RoundState:
        self._write("Goodbye!")
        return RoundState.DONE
