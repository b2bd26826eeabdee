"""The game state: moving the player, collecting coins and reaching the exit."""

from __future__ import annotations

import os
from collections.abc import Iterable
from enum import Enum
from typing import TextIO

from solong.mapfile import (
    COIN,
    EMPTY,
    EXIT,
    PLAYER,
    check_map,
    check_solvable,
    read_map,
    validate_map_path,
)
from solong.printf import printf

KEY_ESCAPE = 65307


class Direction(Enum):
    """A step on the grid as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


_KEY_DIRECTIONS = {
    119: Direction.UP,     # w
    115: Direction.DOWN,   # s
    97: Direction.LEFT,    # a
    100: Direction.RIGHT,  # d
}


class Game:
    """A running game on a validated, solvable map.

    Progress messages are written to ``out`` (stdout by default).
    """

    def __init__(self, rows: Iterable[str], out: TextIO | None = None) -> None:
        rows = list(rows)
        info = check_map(rows)
        check_solvable(rows, info)
        self.info = info
        self._grid = [list(row) for row in rows]
        self._out = out
        self.position = info.start
        self.coins = info.coins
        self.moves = 0
        self.won = False
        self.running = True

    @classmethod
    def from_file(cls, path: str | os.PathLike[str], out: TextIO | None = None) -> Game:
        """Load, validate and start a game from a ``.ber`` file."""
        validate_map_path(path)
        return cls(read_map(path), out)

    def _step_to(self, row: int, col: int) -> None:
        r, c = self.position
        self._grid[r][c] = EMPTY
        self._grid[row][col] = PLAYER
        self.position = (row, col)
        self.moves += 1
        printf("Number of moves made: %d\n", self.moves, stream=self._out)

    def move(self, direction: Direction) -> bool:
        """Try to move one tile; return whether the player moved.

        Walls stop the player, and the exit opens only once every coin is
        collected. Reaching the exit wins and closes the game.
        """
        if not self.running:
            raise RuntimeError("the game is closed")
        dr, dc = direction.value
        row, col = self.position[0] + dr, self.position[1] + dc
        target = self._grid[row][col]
        if target in (EMPTY, COIN):
            if target == COIN:
                self.coins -= 1
            self._step_to(row, col)
            return True
        if target == EXIT and self.coins == 0:
            self._step_to(row, col)
            printf("Congrats gamer, ya beat the game!\n", stream=self._out)
            self.won = True
            self.close()
            return True
        return False

    def handle_key(self, key: int) -> None:
        """React to a key code: w/a/s/d move, escape closes, others are ignored."""
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.move(direction)
        elif key == KEY_ESCAPE:
            self.close()

    def close(self) -> None:
        """End the game."""
        self.running = False

    def board(self) -> list[str]:
        """Return the current map rows."""
        return ["".join(row) for row in self._grid]