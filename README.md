# solong

A small top-down puzzle game played on a grid of tiles. Walk the player
around the map, pick up every collectible, then step onto the exit to win.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
solong path/to/level.ber
```

The game loads its textures from an `assets/` directory in the current
working directory: `wall.xpm`, `floor.xpm`, `player.xpm`, `collectible.xpm`
and `exit.xpm`. If any of them cannot be loaded, the game prints which ones
failed and exits with status 1.

Controls:

| Key   | Action       |
|-------|--------------|
| W     | move up      |
| A     | move left    |
| S     | move down    |
| D     | move right   |
| Esc   | quit         |

Closing the window also quits. Every successful step is counted and the
count is printed on the terminal, as are messages when a collectible is
picked up. Walking onto the exit before all collectibles are taken is
refused; walking onto it afterwards prints a victory message and ends the
game.

## Map format

A map is a plain text file with the `.ber` extension. Each line is one row
of tiles:

| Char | Tile         |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

Example:

```
1111111
1P0C0E1
1111111
```

A map is accepted only if:

- every row has the same length (the map is rectangular);
- the outer border is made entirely of walls;
- it holds exactly one `P`, exactly one `E` and at least one `C`;
- it contains no other characters;
- every collectible can be reached from the start, and then the exit
  (the exit cannot be walked through while collectibles remain);
- it fits on the screen at 64 pixels per tile.

Otherwise the game prints `Error` followed by the reason and stops.

## Using it as a library

```python
from solong.validate import load_map, check_map_size
from solong.pathfinding import is_map_solvable
from solong.controls import Game, Key, Outcome

game_map = load_map("level.ber")       # raises solong.board.MapError
assert is_map_solvable(game_map)

width, height = check_map_size(game_map, 1920, 1080)  # window size in pixels

game = Game(game_map, output=lambda message: None)
outcome = game.handle_input(Key.D)     # an Outcome member
```

- `solong.board` holds `GameMap`, `MapError`, `count_lines`, `parse_map`
  and `validate_map`. `parse_map` reads a file without checking it;
  `validate_map` checks it, sets the player position and collectible count,
  and raises `MapError` for the first problem found.
- `solong.pathfinding` provides `flood_fill(game_map, x, y)` and
  `is_map_solvable(game_map)`; neither changes the map.
- `solong.validate` provides `validate_file`, `load_map` and
  `check_map_size`.
- `solong.controls` provides `Key`, `Outcome` (`NONE`, `MOVED`,
  `EXIT_LOCKED`, `VICTORY`, `QUIT`) and `Game`, whose `handle_input` applies
  one key press to the map and the move counter.
- `solong.app` provides `main`, `run`, `render_map`, `load_textures`,
  `tile_sprite` and `key_from_event`.

## What it does not do

The move counter is shown only on the terminal, not in the window. There
are no sounds, animations, enemies or saved games.

## Running the tests

```
pip install .[test]
pytest
```