from tile2048.direction import Direction
from tile2048.outcome import MoveOutcome, OutcomeKind


class GameOverTracker:
    """Latest failed outcome per direction.

    A full board can still merge along some axis, so the game is only over
    once every direction has most recently reported BOARD_FULL. A successful
    move forgets everything.
    """

    def __init__(self):
        self._last: dict[Direction, OutcomeKind] = {}

    def record(self, outcome: MoveOutcome) -> bool:
        if outcome.moved:
            self._last.clear()
        else:
            self._last[outcome.direction] = outcome.kind
        return self.game_over

    def last(self, direction: Direction) -> OutcomeKind | None:
        return self._last.get(Direction.parse(direction))

    def clear(self):
        self._last.clear()

    @property
    def game_over(self) -> bool:
        return len(self._last) == len(Direction) and all(
            kind is OutcomeKind.BOARD_FULL for kind in self._last.values()
        )
