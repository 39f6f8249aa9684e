from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from help_table import build_help_grid, format_help_table  # type: ignore[import-not-found]  # noqa: E402
from rules import build_outcome_table  # type: ignore[import-not-found]  # noqa: E402

MOVES = ["rock", "paper", "scissors", "lizard", "spock"]


def test_grid_is_square_with_headers_in_order() -> None:
    grid = build_help_grid(build_outcome_table(MOVES))
    assert len(grid) == len(MOVES) + 1
    assert all(len(row) == len(MOVES) + 1 for row in grid)
    assert grid[0] == ["Moves", *MOVES]
    assert [row[0] for row in grid[1:]] == MOVES


def test_grid_diagonal_is_draw_and_cells_use_row_perspective() -> None:
    grid = build_help_grid(build_outcome_table(MOVES))
    for i in range(1, len(MOVES) + 1):
        assert grid[i][i] == "Draw"
    # rock (row 1) beats paper (column 2); paper (row 2) loses to rock (column 1)
    assert grid[1][2] == "Win"
    assert grid[2][1] == "Lose"


def test_format_help_table_aligns_columns() -> None:
    text = format_help_table(build_outcome_table(["rock", "paper", "scissors"]))
    lines = text.splitlines()
    table_lines = lines[1:]
    assert len({len(line) for line in table_lines}) == 1
    assert "| Moves    | rock | paper | scissors |" in lines
    assert "| rock     | Draw | Win   | Lose     |" in lines
