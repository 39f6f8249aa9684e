from __future__ import annotations

from rules import OutcomeTable

CORNER = "Moves"


def build_help_grid(table: OutcomeTable) -> list[list[str]]:
    moves = table.moves
    grid: list[list[str]] = [[CORNER, *moves]]
    for row_move in moves:
        grid.append([row_move, *(table.outcome(row_move, col_move) for col_move in moves)])
    return grid


def format_help_table(table: OutcomeTable) -> str:
    grid = build_help_grid(table)
    widths = [max(len(row[c]) for row in grid) for c in range(len(grid))]

    def render(row: list[str]) -> str:
        return "| " + " | ".join(f"{cell:{w}}" for cell, w in zip(row, widths)) + " |"

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    lines: list[str] = ["Results are for the row move played against the column move.", rule, render(grid[0]), rule]
    for row in grid[1:]:
        lines.append(render(row))
    lines.append(rule)
    return "\n".join(lines)
