"""Exceptions raised by the traversal and SCC engines."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A required argument (graph or source vertex) was ``None``.

    Raised before any visitation state is allocated or any handler hook
    is invoked.
    """


def require(value: object, msg: str) -> None:
    """Raise :class:`InvalidArgumentError` with *msg* if *value* is None."""
    if value is None:
        raise InvalidArgumentError(msg)
