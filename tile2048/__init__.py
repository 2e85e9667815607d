from tile2048.config import SIZE, TILE_COUNT, EngineConfig
from tile2048.direction import Direction
from tile2048.errors import GameError, IllegalInput, InternalInconsistency
from tile2048.game import GameState, GridEngine, compact_line, format_grid, line_view, move_grid, slide_line
from tile2048.outcome import MoveOutcome, OutcomeKind, SpawnOutcome
from tile2048.tracker import GameOverTracker

__all__ = [
    "SIZE",
    "TILE_COUNT",
    "EngineConfig",
    "Direction",
    "GameError",
    "IllegalInput",
    "InternalInconsistency",
    "GameState",
    "GridEngine",
    "compact_line",
    "format_grid",
    "line_view",
    "move_grid",
    "slide_line",
    "MoveOutcome",
    "OutcomeKind",
    "SpawnOutcome",
    "GameOverTracker",
]
