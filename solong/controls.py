"""Keyboard handling and player movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Dict, Tuple, Union

from .board import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    ESC = 65307


class Outcome(Enum):
    """What a key press led to."""

    NONE = "none"
    MOVED = "moved"
    EXIT_LOCKED = "exit_locked"
    VICTORY = "victory"
    QUIT = "quit"


_DELTAS: Dict[Key, Tuple[int, int]] = {
    Key.W: (0, -1),
    Key.S: (0, 1),
    Key.A: (-1, 0),
    Key.D: (1, 0),
}


@dataclass
class Game:
    """A game in progress: the map, the move counter and a message sink."""

    game_map: GameMap
    moves: int = 0
    output: Callable[[str], None] = print

    def can_move(self, x: int, y: int) -> bool:
        """Return True unless the tile at (x, y) is a wall."""
        return self.game_map.tile(x, y) != WALL

    def _move_player(self, x: int, y: int) -> None:
        game_map = self.game_map
        game_map.grid[game_map.player_y][game_map.player_x] = FLOOR
        game_map.grid[y][x] = PLAYER
        game_map.player_x = x
        game_map.player_y = y

    def handle_input(self, key: Union[Key, int]) -> Outcome:
        """Apply one key press and report what happened."""
        if key == Key.ESC:
            return Outcome.QUIT
        game_map = self.game_map
        dx, dy = _DELTAS.get(key, (0, 0))
        new_x = game_map.player_x + dx
        new_y = game_map.player_y + dy
        tile = game_map.tile(new_x, new_y)
        if tile == COLLECTIBLE:
            game_map.collectibles -= 1
            self.output(
                f"Collectible picked up! {game_map.collectibles} remaining"
            )
        if tile == EXIT:
            if game_map.collectibles > 0:
                self.output(
                    f"There are still {game_map.collectibles} collectibles left!"
                )
                return Outcome.EXIT_LOCKED
            self.output("🎉 Victory ! 🎉")
            return Outcome.VICTORY
        moved = (new_x, new_y) != (game_map.player_x, game_map.player_y)
        if self.can_move(new_x, new_y) and moved:
            self._move_player(new_x, new_y)
            self.moves += 1
            self.output(f"Number of moves: {self.moves}")
            return Outcome.MOVED
        return Outcome.NONE