"""Window, drawing and the command-line entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pygame

from .board import COLLECTIBLE, EXIT, FLOOR, PLAYER, TILE_SIZE, WALL, GameMap, MapError
from .controls import Game, Key, Outcome
from .validate import check_map_size, load_map

TEXTURE_FILES: Dict[str, str] = {
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "player": "player.xpm",
    "collectible": "collectible.xpm",
    "exit": "exit.xpm",
}

_EVENT_KEYS: Dict[int, Key] = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_ESCAPE: Key.ESC,
}


def tile_sprite(
    tile: str, x: int, y: int, player_x: int, player_y: int
) -> Tuple[str, ...]:
    """Return the names of the textures drawn, in order, for one tile."""
    sprites: List[str] = []
    if tile == FLOOR:
        sprites.append("floor")
    if tile == WALL:
        sprites.append("wall")
    elif tile == PLAYER or (x, y) == (player_x, player_y):
        sprites.append("player")
    elif tile == COLLECTIBLE:
        sprites.append("collectible")
    elif tile == EXIT:
        sprites.append("exit")
    return tuple(sprites)


def load_textures(directory: Union[str, Path]) -> Dict[str, pygame.Surface]:
    """Load every texture from ``directory``; raise OSError if any is missing."""
    textures: Dict[str, pygame.Surface] = {}
    failures: List[str] = []
    for name, filename in TEXTURE_FILES.items():
        path = Path(directory) / filename
        try:
            textures[name] = pygame.image.load(str(path))
        except (pygame.error, OSError):
            failures.append(f"Can't load {path}")
    if failures:
        raise OSError("\n".join(failures + ["Problem loading textures"]))
    return textures


def render_map(
    screen: pygame.Surface, textures: Dict[str, pygame.Surface], game_map: GameMap
) -> None:
    """Draw every tile of the map onto ``screen``."""
    for y, row in enumerate(game_map.grid):
        for x, tile in enumerate(row):
            for name in tile_sprite(
                tile, x, y, game_map.player_x, game_map.player_y
            ):
                screen.blit(textures[name], (x * TILE_SIZE, y * TILE_SIZE))


def key_from_event(event: pygame.event.Event) -> Optional[Key]:
    """Return the game key for a key-press event, or None."""
    if event.type != pygame.KEYDOWN:
        return None
    return _EVENT_KEYS.get(event.key)


def _error(message: str) -> None:
    print(f"Error\n{message}")


def run(game_map: GameMap, assets: Union[str, Path] = Path("assets")) -> int:
    """Open the window and play until victory or quit; return the exit status."""
    pygame.init()
    try:
        info = pygame.display.Info()
        try:
            size = check_map_size(game_map, info.current_w, info.current_h)
        except MapError as exc:
            _error(str(exc))
            return 0
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("so_long")
        try:
            textures = load_textures(assets)
        except OSError as exc:
            _error(str(exc))
            return 1
        game = Game(game_map)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                key = key_from_event(event)
                if key is None:
                    continue
                if game.handle_input(key) in (Outcome.VICTORY, Outcome.QUIT):
                    return 0
            render_map(screen, textures, game_map)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        _error("./so_long <map.ber>")
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        _error(str(exc))
        return 1
    return run(game_map, Path("assets"))


if __name__ == "__main__":
    sys.exit(main())