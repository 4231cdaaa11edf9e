"""Reading, validating and checking the solvability of tile maps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from solong.lines import read_lines
from solong.strbuild import split

EMPTY = "0"
WALL = "1"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "F"
PAINT = "A"

_BASE_TILES = frozenset((EMPTY, WALL, COLLECTIBLE, EXIT, PLAYER))
_EXIT_SEARCH_PASSABLE = frozenset((EMPTY, COLLECTIBLE, PLAYER, EXIT))
_COLLECT_SEARCH_PASSABLE = frozenset((EMPTY, COLLECTIBLE, PLAYER))

_SUCCESS_TEXT = "\nMap winnability checked successfully.\n\n"
_FAILURE_TEXT = (
    "\nError.\nWinnability system tried to paint map with 'A's.\n"
    "Player 'P' can't reach an exit 'E' or a collectable 'C'.\n\n"
)


class InvalidMapError(ValueError):
    """Raised when a map breaks one of the layout rules."""


@dataclass(frozen=True)
class MapInfo:
    """Counts of the special tiles of a valid map."""

    players: int
    exits: int
    collectibles: int


@dataclass(frozen=True)
class WinnabilityReport:
    """Outcome of the reachability check.

    ``painted`` is the map with every visited tile replaced by ``A`` and
    ``message`` the text describing the outcome, painted map included.
    """

    winnable: bool
    reachable_exits: int
    reachable_collectibles: int
    painted: tuple[str, ...]
    message: str


def read_map(path: str | PathLike[str]) -> list[str]:
    """Read a map file into its rows; blank lines are dropped."""
    with open(path, encoding="latin-1", newline="") as stream:
        text = "".join(read_lines(stream))
    return split(text, "\n")


def check_map(grid: Sequence[str], allow_enemies: bool = False) -> MapInfo:
    """Validate a map and count its special tiles.

    The map must be a non-square rectangle enclosed by walls, hold only
    known tiles (enemies only when ``allow_enemies``), exactly one player,
    exactly one exit and at least one collectible.
    """
    rows = list(grid)
    if not rows:
        raise InvalidMapError("map is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise InvalidMapError("map rows differ in length")
    if len(rows) == width:
        raise InvalidMapError("map must not be square")
    if set(rows[0]) != {WALL} or set(rows[-1]) != {WALL}:
        raise InvalidMapError("top and bottom rows must be walls")
    if any(row[0] != WALL or row[-1] != WALL for row in rows[1:]):
        raise InvalidMapError("map sides must be walls")

    allowed = _BASE_TILES | {ENEMY} if allow_enemies else _BASE_TILES
    players = exits = collectibles = 0
    for row in rows:
        for tile in row:
            if tile not in allowed:
                raise InvalidMapError(f"unknown tile {tile!r}")
            if tile == PLAYER:
                players += 1
            elif tile == EXIT:
                exits += 1
            elif tile == COLLECTIBLE:
                collectibles += 1

    if players != 1:
        raise InvalidMapError(f"map needs exactly one player, found {players}")
    if exits != 1:
        raise InvalidMapError(f"map needs exactly one exit, found {exits}")
    if collectibles == 0:
        raise InvalidMapError("map needs at least one collectible")
    return MapInfo(players, exits, collectibles)


def find_player(grid: Sequence[str]) -> tuple[int, int]:
    """Return the ``(x, y)`` of the player; the last one wins if several."""
    found: tuple[int, int] | None = None
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                found = (x, y)
    if found is None:
        raise InvalidMapError("map has no player")
    return found


def _flood(cells: list[list[str]], start: tuple[int, int], passable: frozenset[str], target: str) -> int:
    """Paint every tile reachable from ``start``; return how many ``target`` tiles were painted."""
    count = 0
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            continue
        tile = cells[y][x]
        if tile not in passable:
            continue
        if tile == target:
            count += 1
        cells[y][x] = PAINT
        stack.extend(((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)))
    return count


def check_winnable(grid: Sequence[str], info: MapInfo, allow_enemies: bool = False) -> WinnabilityReport:
    """Check that the player can reach every exit and every collectible.

    Exits are searched first, walking through every tile but walls and
    enemies. Only when all exits are reachable are collectibles searched,
    this time with the exit blocking the way.
    """
    rows = list(grid)
    if not allow_enemies and any(ENEMY in row for row in rows):
        raise InvalidMapError("map holds enemies but enemies are not allowed")
    start = find_player(rows)

    cells = [list(row) for row in rows]
    exits = _flood(cells, start, _EXIT_SEARCH_PASSABLE, EXIT)
    collectibles = 0
    winnable = False
    if exits == info.exits:
        cells = [list(row) for row in rows]
        collectibles = _flood(cells, start, _COLLECT_SEARCH_PASSABLE, COLLECTIBLE)
        winnable = collectibles == info.collectibles

    painted = tuple("".join(row) for row in cells)
    message = (_SUCCESS_TEXT if winnable else _FAILURE_TEXT) + format_grid(painted)
    return WinnabilityReport(winnable, exits, collectibles, painted, message)


def format_grid(grid: Sequence[str]) -> str:
    """Render rows one per line, followed by a blank line."""
    return "".join(f"{row}\n" for row in grid) + "\n"