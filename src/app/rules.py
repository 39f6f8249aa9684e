"""Win/lose/draw rules for an odd-sized, cyclically ordered move set.

Each move beats the (N-1)/2 moves that follow it in the cycle and loses to
the (N-1)/2 moves that precede it. With N odd every pair of distinct moves
gets exactly one direction.
"""

from __future__ import annotations

from typing import Sequence

from protocol import InvalidMove, MoveSet, Outcome


class OutcomeTable:
    """Immutable pairwise outcomes, indexed by each move's position."""

    __slots__ = ("_moves", "_positions", "_cells")

    def __init__(self, moves: tuple[str, ...], cells: tuple[tuple[Outcome | None, ...], ...]) -> None:
        self._moves = moves
        self._positions = {move: i for i, move in enumerate(moves)}
        self._cells = cells

    @property
    def moves(self) -> tuple[str, ...]:
        return self._moves

    @property
    def size(self) -> int:
        return len(self._moves)

    def index_of(self, move: str) -> int:
        try:
            return self._positions[move]
        except KeyError:
            raise InvalidMove(f"unknown move: {move!r}") from None

    def outcome(self, a: str, b: str) -> Outcome:
        i = self.index_of(a)
        k = self.index_of(b)
        if i == k:
            return "Draw"
        return self._cells[i][k] or "Draw"

    def beats(self, move: str) -> tuple[str, ...]:
        i = self.index_of(move)
        return tuple(m for k, m in enumerate(self._moves) if self._cells[i][k] == "Win")


def build_outcome_table(moves: MoveSet | Sequence[str]) -> OutcomeTable:
    move_set = moves if isinstance(moves, MoveSet) else MoveSet.parse(moves)
    names = move_set.moves
    size = len(names)
    half = size // 2

    cells: list[list[Outcome | None]] = [[None] * size for _ in range(size)]
    for i in range(size):
        for j in range(1, half + 1):
            k = (i + j) % size
            cells[i][k] = "Win"
            cells[k][i] = "Lose"

    return OutcomeTable(names, tuple(tuple(row) for row in cells))


def winner(table: OutcomeTable, a: str, b: str) -> Outcome:
    """Outcome of move ``a`` against move ``b`` from ``a``'s side."""
    return table.outcome(a, b)
