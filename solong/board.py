"""Map model, parsing and structural validation for .ber maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Union

TILE_SIZE = 64

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

PathLike = Union[str, Path]


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map."""


@dataclass
class GameMap:
    """A rectangular grid of tiles with the player position and collectible count."""

    grid: List[List[str]] = field(default_factory=list)
    width: int = 0
    height: int = 0
    player_x: int = 0
    player_y: int = 0
    collectibles: int = 0

    def tile(self, x: int, y: int) -> str:
        """Return the tile character at column ``x`` and row ``y``."""
        return self.grid[y][x]

    def copy(self) -> "GameMap":
        """Return an independent copy whose grid can be changed freely."""
        return GameMap(
            grid=[list(row) for row in self.grid],
            width=self.width,
            height=self.height,
            player_x=self.player_x,
            player_y=self.player_y,
            collectibles=self.collectibles,
        )

    def rows(self) -> List[str]:
        """Return the grid as a list of strings."""
        return ["".join(row) for row in self.grid]


def _read_lines(path: PathLike) -> Iterator[str]:
    """Yield the lines of ``path`` with a single trailing newline removed."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"Impossible to open {path}") from exc
    if not text:
        return
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    yield from pieces


def count_lines(path: PathLike) -> int:
    """Return the number of lines in the file, counting a final unterminated line."""
    return sum(1 for _ in _read_lines(path))


def parse_map(path: PathLike) -> GameMap:
    """Read a map file into a :class:`GameMap` without validating it."""
    lines = list(_read_lines(path))
    return GameMap(
        grid=[list(line) for line in lines],
        width=len(lines[0]) if lines else 0,
        height=len(lines),
        collectibles=0,
    )


def _check_row(game_map: GameMap, y: int, counts: dict) -> None:
    last_row = game_map.height - 1
    last_col = game_map.width - 1
    for x, char in enumerate(game_map.grid[y]):
        on_border = y in (0, last_row) or x in (0, last_col)
        if on_border and char != WALL:
            raise MapError("The map is not enclosed")
        if char == PLAYER:
            counts[PLAYER] += 1
            game_map.player_x = x
            game_map.player_y = y
        elif char == EXIT:
            counts[EXIT] += 1
        elif char == COLLECTIBLE:
            counts[COLLECTIBLE] += 1
        elif char not in (FLOOR, WALL):
            raise MapError(f"Invalid character '{char}'")


def validate_map(game_map: GameMap) -> GameMap:
    """Check shape, walls and tile counts; set the player position and collectibles.

    Raises :class:`MapError` describing the first problem found.
    """
    counts = {PLAYER: 0, EXIT: 0, COLLECTIBLE: 0}
    for y, row in enumerate(game_map.grid):
        if len(row) != game_map.width:
            raise MapError("The map is not rectangular")
        _check_row(game_map, y, counts)
    game_map.collectibles = counts[COLLECTIBLE]
    if counts[PLAYER] != 1:
        raise MapError("There must be exactly 1 player")
    if counts[EXIT] != 1:
        raise MapError("There must be exactly 1 exit")
    if counts[COLLECTIBLE] < 1:
        raise MapError("There must be exactly 1 collectible")
    return game_map