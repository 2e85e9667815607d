class GameError(Exception):
    """Base class for errors raised by the engine."""


class IllegalInput(GameError, ValueError):
    """A caller passed something that is not a direction."""

    def __init__(self, value):
        super().__init__(f"Illegal input received: {value!r}")
        self.value = value


class InternalInconsistency(GameError, RuntimeError):
    """The engine reached a state its own invariants rule out."""
