"""Reusable case actions for tests."""

from collections.abc import Callable


def failing(message: str = "", error: type[Exception] = AssertionError) -> Callable[[], None]:
    """Build an action that raises ``error(message)``."""
    def action() -> None:
        if message:
            raise error(message)
        raise error()

    return action


def passing() -> None:
    """Action that always succeeds."""


def recorder(calls: list[str], label: str) -> Callable[[], None]:
    """Build an action that appends ``label`` to ``calls``."""
    def action() -> None:
        calls.append(label)

    return action
