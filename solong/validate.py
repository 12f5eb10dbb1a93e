"""File checks and the full load-and-validate pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple, Union

from .board import TILE_SIZE, GameMap, MapError, parse_map, validate_map
from .pathfinding import is_map_solvable

MAP_EXTENSION = ".ber"


def validate_file(filename: Union[str, Path]) -> Path:
    """Check the extension and that the file can be opened; return its path."""
    if not filename:
        raise MapError("No map file given")
    name = str(filename)
    if len(name) < len(MAP_EXTENSION) or not name.endswith(MAP_EXTENSION):
        raise MapError("The file must have a .ber extension")
    try:
        with open(name, "rb"):
            pass
    except OSError as exc:
        raise MapError(f"Impossible to open {name}") from exc
    return Path(name)


def load_map(filename: Union[str, Path]) -> GameMap:
    """Read, validate and check solvability of a map file."""
    path = validate_file(filename)
    game_map = validate_map(parse_map(path))
    if not is_map_solvable(game_map):
        raise MapError("The map is not solvable")
    return game_map


def check_map_size(
    game_map: GameMap, screen_width: int, screen_height: int
) -> Tuple[int, int]:
    """Return the window size in pixels, or raise if it exceeds the screen."""
    pixel_width = game_map.width * TILE_SIZE
    pixel_height = game_map.height * TILE_SIZE
    if pixel_width > screen_width or pixel_height > screen_height:
        raise MapError("Map size exceeds screen dimensions.")
    return pixel_width, pixel_height