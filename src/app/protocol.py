from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Literal, Union

Outcome = Literal["Win", "Lose", "Draw"]

EXIT: Literal["exit"] = "exit"
HELP: Literal["help"] = "help"

# A parsed menu choice: exit, help, or the 0-based index of a move.
Selection = Union[Literal["exit"], Literal["help"], int]

MIN_MOVES = 3


class RpsError(Exception):
    """Base class for every error raised by the game modules."""


class InvalidConfiguration(RpsError):
    """The move set is too short, has an even count, or repeats a move."""


class InvalidInput(RpsError):
    """The player's menu selection could not be parsed or is out of range."""


class InvalidMove(RpsError):
    """A move outside the configured set was passed to the rules."""


class CryptoUnavailable(RpsError):
    """The secure random source or the MAC primitive is missing."""


@dataclass(frozen=True)
class MoveSet:
    moves: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "moves", tuple(self.moves))
        problem = _move_set_problem(self.moves)
        if problem is not None:
            raise InvalidConfiguration(problem)

    @classmethod
    def parse(cls, values: Iterable[str]) -> "MoveSet":
        return cls(moves=tuple(values))

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[str]:
        return iter(self.moves)

    def __contains__(self, move: object) -> bool:
        return move in self.moves

    def at(self, index: int) -> str:
        return self.moves[index]


def _move_set_problem(moves: tuple[str, ...]) -> str | None:
    if len(moves) < MIN_MOVES:
        return f"expected at least {MIN_MOVES} moves, got {len(moves)}"
    if len(moves) % 2 == 0:
        return f"expected an odd number of moves, got {len(moves)}"
    seen: set[str] = set()
    for move in moves:
        if move in seen:
            return f"duplicate move: {move!r}"
        seen.add(move)
    return None


@dataclass
class Round:
    move_set: MoveSet
    key: str
    commitment: str
    computer_move: str
    user_move: str | None = None
    outcome: Outcome | None = None

    @property
    def resolved(self) -> bool:
        return self.outcome is not None


def parse_selection(raw: str, size: int) -> Selection:
    """Turn a raw menu line into EXIT, HELP or a 0-based move index."""
    text = raw.strip()
    if text == "0":
        return EXIT
    if text == "?":
        return HELP
    if not (text.isascii() and text.isdigit()):
        raise InvalidInput(f"not a move number: {raw!r}")
    number = int(text)
    if not 1 <= number <= size:
        raise InvalidInput(f"move number out of range 1..{size}: {number}")
    return number - 1
