"""
Exceptions raised by the layout engine.
"""


class LayoutError(Exception):
    """Base class for all layout engine errors."""


class InvalidArgumentError(LayoutError, ValueError):
    """A missing, foreign or malformed argument was passed to the graph."""


class NotFoundError(LayoutError, KeyError):
    """A handle does not refer to a current member of the graph."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class ReentrantMutationError(LayoutError, RuntimeError):
    """The graph was mutated while a layout step was in progress."""
