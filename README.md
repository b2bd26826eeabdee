# solong

A small engine for a tile-map puzzle game. The player walks a rectangular
map, picks up every collectible and then leaves through the exit.

Maps are plain text files with the `.ber` extension. Each line is one row of
the map, and every row must be the same length. Blank lines are dropped when
a map is read. These tiles are allowed:

| Tile | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `C`  | collectible  |
| `P`  | player start |
| `E`  | exit         |

A map is accepted only if:

- it is rectangular and closed in by walls on every side;
- it holds no tiles other than the ones above;
- it has exactly one player start, exactly one exit and at least one
  collectible;
- the exit and every collectible can be reached from the start. The exit
  cannot be walked through, so a collectible that lies only beyond it does
  not count as reachable.

## Loading and checking a map

```python
from solong.mapfile import (
    MapError,
    check_map,
    check_solvable,
    describe_map,
    read_map,
    validate_map_path,
)

try:
    validate_map_path("maps/level1.ber")
    rows = read_map("maps/level1.ber")
    info = check_map(rows)
    check_solvable(rows, info)
except MapError as error:
    print(error)
else:
    print(describe_map(rows, info))
```

- `validate_map_path(path)` checks that the file can be opened and that its
  name ends in `.ber`.
- `read_map(path)` reads the file and returns its non-empty rows as a list of
  strings.
- `check_map(rows)` checks the walls (`check_borders`) and then the tiles and
  item counts (`catalog_map`). It returns a frozen `MapInfo` with `coins`,
  `start`, `exit`, `players`, `exits`, `width` and `depth`. `width` and
  `depth` are the largest column and row indices.
- `check_solvable(rows, info)` runs `flood_fill` from the start and raises if
  the map cannot be finished. `flood_fill(rows, start, coins)` returns a
  bool and leaves `rows` untouched.
- `describe_map(rows, info)` returns a printable summary of the map and its
  contents as a string.

Each check raises `MapError`, a subclass of `ValueError`, when the map breaks
a rule. `is_valid_tile(char)` tells whether a single character is an allowed
tile.

## Playing

```python
from solong.game import Direction, Game

game = Game.from_file("maps/level1.ber")
game.move(Direction.RIGHT)
print("\n".join(game.board()))
```

`Game(rows, out=None)` takes map rows, checks them and makes sure they can be
solved. It raises `MapError` if they cannot. `Game.from_file(path, out=None)`
also checks the file name first. Progress messages go to `out`, which is
stdout by default.

- `move(direction)` returns `True` if the player moved. A move into a wall
  does nothing and returns `False`. A move onto floor or onto a collectible
  raises the move count and prints it. The exit only opens once every
  collectible has been taken. Stepping onto it prints a message, sets `won`
  and closes the game. A move after the game has closed raises
  `RuntimeError`.
- `handle_key(key)` takes X11 key codes: `w`, `a`, `s` and `d` move the player,
  Escape (65307) closes the game, and other keys are ignored.
- `close()` ends the game. `running` reports whether it is still open.
- `board()` returns the current rows. `position`, `coins` and `moves` hold
  the player's place, the collectibles left and the moves made.

## Helpers

The package also contains the small tools the game is built on:

- `solong.lines`: `LineReader(stream, buffer_size=42)` reads a text or binary
  stream one line at a time through a fixed-size buffer. It keeps the
  newlines and returns `None` at the end of input. It can also be iterated.
  `read_lines(path)` reads every line of a text file.
- `solong.printf`: `sprintf(template, *args)` and
  `printf(template, *args, stream=None)` handle the
  `%c %s %d %i %u %x %X %p %%` conversions. `printf` returns the number of
  characters written. `to_base(number, digits)` and
  `digit_count(number, base_size)` handle conversion between number bases.
- `solong.textutil`: classic string routines `atoi`, `atol`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr` and `strrchr`.

## What it does not do

The package has no graphics and no window. It draws no tiles and reads no
keyboard by itself, and it installs no command. To play, a program has to
feed key codes to `Game.handle_key` and show `Game.board()` in whatever way
suits it.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the project
directory.