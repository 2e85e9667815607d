import enum
import numbers

from tile2048.errors import IllegalInput


class Direction(enum.IntEnum):
    """Direction tiles slide in. Keys and gestures are mapped by the caller."""

    LEFT = 0
    DOWN = 1
    UP = 2
    RIGHT = 3

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept a Direction, its integer value or its name ("left", "UP")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise IllegalInput(value) from None
        # bool is an int, and 1.0 == 1; neither names a direction
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise IllegalInput(value)
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise IllegalInput(value) from None
