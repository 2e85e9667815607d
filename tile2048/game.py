import copy
import logging
from dataclasses import dataclass

import numpy as np

from tile2048.config import SIZE, TILE_COUNT, EngineConfig
from tile2048.direction import Direction
from tile2048.errors import InternalInconsistency
from tile2048.outcome import MoveOutcome, OutcomeKind, SpawnOutcome
from tile2048.tracker import GameOverTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """Immutable copy of an engine's grid and score"""

    grid: tuple[tuple[int, ...], ...]
    score: int

    def tile(self, index: int) -> int:
        return self.grid[index // SIZE][index % SIZE]

    def __str__(self) -> str:
        return format_grid(self.grid)


def format_grid(grid) -> str:
    return "\n".join(" ".join(f"{int(v):4d}" for v in row) for row in grid)


def line_view(grid: np.ndarray, direction: Direction) -> np.ndarray:
    """
    Return a writable view of ``grid`` in which ``direction`` points left.

    Every row of the view is one line of the board with its target edge at
    index 0, so a single left-moving routine serves all four directions.
    """
    if direction is Direction.LEFT:
        return grid
    if direction is Direction.RIGHT:
        return grid[:, ::-1]
    if direction is Direction.UP:
        return grid.T
    return grid[::-1, :].T


def slide_line(line) -> tuple[int, list[int]]:
    """
    Push the tiles of ``line`` one step at a time towards index 0, merging
    equal neighbours. Works in place. Returns the score gained and the
    values of the merged tiles.

    The scan starts at the far end, so of three equal tiles the two farthest
    from the edge merge: [2, 2, 2, 0] becomes [2, 4, 0, 0]. This is the
    intended rule, not the classic [4, 2, 0, 0].
    """
    gained = 0
    merged = []
    x = len(line) - 1
    while x > 0:
        value = int(line[x])
        if value != 0:
            if line[x - 1] == 0:
                line[x - 1] = value
                line[x] = 0
            elif line[x - 1] == value:
                line[x - 1] = value * 2
                line[x] = 0
                gained += value * 2
                merged.append(value * 2)
                # the merged tile can't take part in another merge
                x -= 1
        x -= 1
    return gained, merged


def compact_line(line) -> bool:
    """Close the gaps between tiles in ``line``. Returns whether anything moved."""
    changed = False
    shifted = True
    while shifted:
        shifted = False
        for x in range(len(line) - 1):
            if line[x] == 0 and line[x + 1] != 0:
                line[x] = line[x + 1]
                line[x + 1] = 0
                shifted = True
                changed = True
    return changed


def move_grid(grid, direction: Direction) -> tuple[np.ndarray, int, list[int]]:
    """Apply a move to a copy of ``grid`` without spawning anything."""
    board = np.array(grid, dtype=np.int64)
    gained = 0
    merged = []
    for line in line_view(board, direction):
        line_gained, line_merged = slide_line(line)
        compact_line(line)
        gained += line_gained
        merged.extend(line_merged)
    return board, gained, merged


def _is_tile(value: int) -> bool:
    return value == 0 or (value >= 2 and value & (value - 1) == 0)


class GridEngine:
    """2048 rules engine: a 4x4 grid, a score and the move/spawn rules."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ):
        self.config = config or EngineConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.tracker = GameOverTracker()
        self._grid = np.zeros((SIZE, SIZE), dtype=np.int64)
        self._score = 0
        self.reset()

    @property
    def score(self) -> int:
        return self._score

    @property
    def state(self) -> list[list[int]]:
        return self._grid.tolist()

    @property
    def board(self) -> np.ndarray:
        return self._grid.copy()

    @property
    def is_over(self) -> bool:
        return self.tracker.game_over

    def tile(self, index: int) -> int:
        if not 0 <= index < TILE_COUNT:
            raise IndexError(f"tile index {index} out of range")
        return int(self._grid[index // SIZE, index % SIZE])

    def cell(self, row: int, col: int) -> int:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"cell ({row}, {col}) out of range")
        return int(self._grid[row, col])

    def snapshot(self) -> GameState:
        return GameState(tuple(tuple(row) for row in self.state), self._score)

    def reset(self) -> GameState:
        self._grid.fill(0)
        self._score = 0
        self.tracker.clear()
        if self.spawn().board_full:
            raise InternalInconsistency("no room for the first tile on an empty grid")
        logger.debug("new game\n%s", self)
        return self.snapshot()

    def load(self, grid, score: int = 0):
        """Replace the grid and score, e.g. to resume a known position."""
        board = np.array(grid, dtype=np.int64)
        if board.shape != (SIZE, SIZE):
            raise ValueError(f"grid must be {SIZE}x{SIZE}, got shape {board.shape}")
        bad = sorted({int(v) for v in board.flat if not _is_tile(int(v))})
        if bad:
            raise ValueError(f"not a tile value: {bad}")
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")
        self._grid[...] = board
        self._score = score
        self.tracker.clear()

    def spawn(self) -> SpawnOutcome:
        options = np.flatnonzero(self._grid == 0)
        if len(options) == 0:
            return SpawnOutcome()
        position = int(options[self.rng.integers(len(options))])
        value = 4 if self.rng.random() > self.config.spawn_rate else 2
        self._grid[position // SIZE, position % SIZE] = value
        return SpawnOutcome(position, value)

    def move(self, direction) -> MoveOutcome:
        """
        Play a move. The grid only changes when the outcome is MOVED, in which
        case exactly one new tile has been spawned.
        """
        direction = Direction.parse(direction)
        board, gained, merged = move_grid(self._grid, direction)

        if np.array_equal(board, self._grid):
            if (self._grid == 0).any():
                kind = OutcomeKind.REJECTED
            else:
                kind = OutcomeKind.BOARD_FULL
            outcome = MoveOutcome(kind, direction)
            self.tracker.record(outcome)
            logger.debug("%s: %s", direction, kind.value)
            return outcome

        self._grid[...] = board
        self._score += gained

        unsupported = tuple(v for v in merged if v > self.config.max_tile)
        if unsupported:
            logger.warning("no display mapping for tile value(s) %s", unsupported)

        spawn = self.spawn()
        if spawn.board_full:
            message = f"no room to spawn after a successful {direction!s} move"
            if self.config.strict:
                raise InternalInconsistency(message)
            logger.error(message)
            spawn = None

        outcome = MoveOutcome(OutcomeKind.MOVED, direction, gained, spawn, unsupported)
        self.tracker.record(outcome)
        logger.debug("%s: +%d (score %d)\n%s", direction, gained, self._score, self)
        return outcome

    def valid(self, direction) -> bool:
        board, _, _ = move_grid(self._grid, Direction.parse(direction))
        return not np.array_equal(board, self._grid)

    def valid_moves(self) -> list[Direction]:
        return [d for d in Direction if self.valid(d)]

    def alive(self) -> bool:
        return any(self.valid(d) for d in Direction)

    def clone(self) -> "GridEngine":
        return copy.deepcopy(self)

    def display(self):
        print(self)

    def __str__(self) -> str:
        return format_grid(self._grid)
