import enum
from dataclasses import dataclass

from tile2048.direction import Direction


class OutcomeKind(enum.Enum):
    MOVED = "moved"
    # nothing moved but the board still has an empty cell
    REJECTED = "rejected"
    # nothing moved and there is no empty cell
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class SpawnOutcome:
    """Where a tile was placed. ``position`` is None when the board was full."""

    position: int | None = None
    value: int = 0

    @property
    def board_full(self) -> bool:
        return self.position is None


@dataclass(frozen=True)
class MoveOutcome:
    """Result of a single move.

    ``score_delta`` is the sum of the tiles created by merges. ``unsupported``
    lists merged values above the configured ceiling; the move still counts.
    ``spawn`` is None for rejected moves.
    """

    kind: OutcomeKind
    direction: Direction
    score_delta: int = 0
    spawn: SpawnOutcome | None = None
    unsupported: tuple[int, ...] = ()

    @property
    def moved(self) -> bool:
        return self.kind is OutcomeKind.MOVED

    @property
    def exceeds_ceiling(self) -> bool:
        return bool(self.unsupported)
