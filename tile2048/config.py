from dataclasses import dataclass

SIZE = 4
TILE_COUNT = SIZE * SIZE


@dataclass(frozen=True)
class EngineConfig:
    # chance that a spawned tile is a 2 rather than a 4
    spawn_rate: float = 0.9
    # largest tile the presentation layer has a label for
    max_tile: int = 4096
    # raise InternalInconsistency instead of only logging it
    strict: bool = True

    def __post_init__(self):
        if not 0.0 <= self.spawn_rate <= 1.0:
            raise ValueError(f"spawn_rate must be within [0, 1], got {self.spawn_rate}")
        if self.max_tile < 4 or self.max_tile & (self.max_tile - 1):
            raise ValueError(f"max_tile must be a power of two >= 4, got {self.max_tile}")
