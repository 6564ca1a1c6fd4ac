"""Grid puzzles: the dungeon's minimum health and counting islands."""

from __future__ import annotations

from collections.abc import Sequence


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health to cross the dungeon from top left to bottom right.

    Moves go right or down only; health must stay above zero. An empty dungeon needs 1.
    """
    if not dungeon or not dungeon[0]:
        return 1
    cols = len(dungeon[0])
    if any(len(row) != cols for row in dungeon):
        raise ValueError("dungeon rows must all have the same length")

    below: list[int] | None = None
    for row_values in reversed(dungeon):
        need = [0] * cols
        for col in reversed(range(cols)):
            options = []
            if below is not None:
                options.append(below[col])
            if col + 1 < cols:
                options.append(need[col + 1])
            after = min(options) if options else 0
            need[col] = max(after - row_values[col], 0)
        below = need
    assert below is not None
    return below[0] + 1


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of ``'1'`` cells joined up, down, left or right."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "1"
    }
    islands = 0
    while land:
        islands += 1
        pending = [land.pop()]
        while pending:
            r, c = pending.pop()
            for neighbour in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if neighbour in land:
                    land.remove(neighbour)
                    pending.append(neighbour)
    return islands