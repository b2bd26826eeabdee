"""Loading, validating and checking the solvability of ``.ber`` maps."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from solong.lines import read_lines
from solong.printf import sprintf
from solong.textutil import split

WALL = "1"
EMPTY = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
TILES = frozenset((WALL, EMPTY, COIN, EXIT, PLAYER))
MAP_SUFFIX = ".ber"

_FILLED = "F"
_OPEN_WALLS = "Maps wall/s uneven/open"
_BAD_COUNTS = "Invalid map, check your item count against rules!"
_IMPOSSIBLE = "Floodfill failed, this map is impossible"


class MapError(ValueError):
    """Raised when a map file or its contents break the rules."""


@dataclass(frozen=True)
class MapInfo:
    """What a map holds: item counts, key positions and its extent.

    ``width`` and ``depth`` are the largest column and row indices.
    """

    coins: int
    start: tuple[int, int]
    exit: tuple[int, int]
    players: int
    exits: int
    width: int
    depth: int


def validate_map_path(path: str | os.PathLike[str]) -> None:
    """Check that ``path`` names a readable file with the ``.ber`` suffix."""
    name = os.fspath(path)
    try:
        with open(name, "rb"):
            pass
    except OSError:
        raise MapError(f"File {name} doesn't exist!") from None
    if len(name) < len(MAP_SUFFIX) + 1:
        raise MapError("Len of file not possible")
    if not name.endswith(MAP_SUFFIX):
        raise MapError(f"File does not end in {MAP_SUFFIX}!")


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read the map rows from ``path``; blank lines are dropped."""
    return split("".join(read_lines(path)), "\n")


def is_valid_tile(char: str) -> bool:
    """Tell whether ``char`` is one of the tiles a map may contain."""
    return char in TILES


def check_borders(rows: Sequence[str]) -> None:
    """Ensure the map is rectangular and closed in by walls."""
    if not rows or not rows[0]:
        raise MapError(_OPEN_WALLS)
    width = len(rows[0])
    if any(tile != WALL for tile in rows[0]):
        raise MapError(_OPEN_WALLS)
    for row in rows:
        if len(row) != width or row[0] != WALL or row[-1] != WALL:
            raise MapError(_OPEN_WALLS)
    if any(tile != WALL for tile in rows[-1]):
        raise MapError(_OPEN_WALLS)


def catalog_map(rows: Sequence[str]) -> MapInfo:
    """Count the map's items, checking every tile and the item rules."""
    coins = players = exits = 0
    start = exit_at = (0, 0)
    for r, row in enumerate(rows):
        for c, tile in enumerate(row):
            if not is_valid_tile(tile):
                raise MapError(f"Invalid character in map: {tile}")
            if tile == COIN:
                coins += 1
            elif tile == PLAYER:
                start = (r, c)
                players += 1
            elif tile == EXIT:
                exit_at = (r, c)
                exits += 1
    if players != 1 or exits != 1 or coins < 1:
        raise MapError(_BAD_COUNTS)
    return MapInfo(
        coins=coins,
        start=start,
        exit=exit_at,
        players=players,
        exits=exits,
        width=len(rows[-1]) - 1,
        depth=len(rows) - 1,
    )


def check_map(rows: Sequence[str]) -> MapInfo:
    """Check the walls, then catalogue the map."""
    check_borders(rows)
    return catalog_map(rows)


def describe_map(rows: Sequence[str], info: MapInfo) -> str:
    """Return a printable summary of the map and its catalogue."""
    parts = ["This is le map!:\n"]
    parts.extend(sprintf("%s\n", row) for row in rows)
    parts.append("\nMap Info:\n")
    parts.append(sprintf("Collectible/s: %d\n", info.coins))
    parts.append(sprintf("Player/s: %d\nExit/s: %d\n", info.players, info.exits))
    parts.append(sprintf("Width: %d\nDepth: %d\n", info.width, info.depth))
    return "".join(parts)


def flood_fill(rows: Sequence[str], start: tuple[int, int], coins: int) -> bool:
    """Tell whether every coin and the exit can be reached from ``start``.

    The exit can be reached but not walked through, so coins lying only
    beyond it do not count as reachable. ``rows`` is left untouched.
    """
    grid = [list(row) for row in rows]
    remaining = coins
    reached_exit = False
    stack = [start]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        tile = grid[r][c]
        if tile in (WALL, _FILLED):
            continue
        if tile == EXIT:
            reached_exit = True
            continue
        if tile == COIN:
            remaining -= 1
        grid[r][c] = _FILLED
        stack.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return remaining == 0 and reached_exit


def check_solvable(rows: Sequence[str], info: MapInfo) -> None:
    """Raise :class:`MapError` unless the map can be completed."""
    if not flood_fill(rows, info.start, info.coins):
        raise MapError(_IMPOSSIBLE)