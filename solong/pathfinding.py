"""Reachability checks for validated maps."""

from __future__ import annotations

from typing import Set, Tuple

from .board import COLLECTIBLE, EXIT, WALL, GameMap


def _inside(game_map: GameMap, x: int, y: int) -> bool:
    return 0 <= x < game_map.width and 0 <= y < game_map.height


def flood_fill(game_map: GameMap, x: int, y: int) -> bool:
    """Return True if every collectible and then the exit can be reached from (x, y).

    The exit blocks the way while collectibles remain. The map is not modified.
    """
    remaining = game_map.collectibles
    exit_found = False
    visited: Set[Tuple[int, int]] = set()
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not _inside(game_map, cx, cy) or (cx, cy) in visited:
            continue
        tile = game_map.tile(cx, cy)
        if tile == WALL:
            continue
        if tile == EXIT:
            exit_found = True
            if remaining > 0:
                continue
        if tile == COLLECTIBLE:
            remaining -= 1
        visited.add((cx, cy))
        if remaining == 0 and exit_found:
            return True
        stack.extend(
            [(cx, cy - 1), (cx, cy + 1), (cx - 1, cy), (cx + 1, cy)]
        )
    return False


def is_map_solvable(game_map: GameMap) -> bool:
    """Return True if the player can collect everything and reach the exit."""
    return flood_fill(game_map, game_map.player_x, game_map.player_y)