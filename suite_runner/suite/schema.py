"""Suite tree data models.

Defines the cases, groups and forest built during registration,
plus the failure and result types produced while running them.
"""

import traceback
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Union

Action = Callable[[], Union[Awaitable[Any], Any]]

UNDEFINED_MESSAGE = "undefined"
NO_MESSAGE = "No message"


class RegistrationError(RuntimeError):
    """Raised when the registration lifecycle is misused."""


@dataclass(frozen=True)
class Case:
    """A single named test with one action."""
    name: str
    action: Action
    exclusive: bool = False


@dataclass(eq=False)
class Group:
    """A named, ordered container of cases and nested groups."""
    name: str
    children: list[Union[Case, "Group"]] = field(default_factory=list)
    setup_hooks: list[Action] = field(default_factory=list)
    exclusive: bool = False
    parent: Optional["Group"] = field(default=None, repr=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "exclusive" and not value and getattr(self, "exclusive", False):
            raise AttributeError("An exclusive group cannot be made non-exclusive.")
        super().__setattr__(name, value)

    def mark_exclusive(self) -> None:
        self.exclusive = True

    @property
    def cases(self) -> list[Case]:
        """Direct case children, in registration order."""
        return [c for c in self.children if isinstance(c, Case)]

    @property
    def groups(self) -> list["Group"]:
        """Direct group children, in registration order."""
        return [c for c in self.children if isinstance(c, Group)]

    @property
    def depth(self) -> int:
        """Nesting level; top-level groups are at depth 1."""
        level = 1
        node = self.parent
        while node is not None:
            level += 1
            node = node.parent
        return level


Node = Union[Case, Group]


@dataclass(frozen=True)
class Forest:
    """The ordered top-level cases and groups of a frozen registration."""
    children: tuple[Node, ...] = ()

    @property
    def cases(self) -> list[Case]:
        return [c for c in self.children if isinstance(c, Case)]

    @property
    def groups(self) -> list[Group]:
        return [c for c in self.children if isinstance(c, Group)]

    @property
    def total_cases(self) -> int:
        """Number of registered cases at any depth."""
        return sum(1 for _ in iter_cases(self.children))

    def __len__(self) -> int:
        return len(self.children)


def iter_cases(nodes):
    """Yield every case under ``nodes`` in depth-first order."""
    for node in nodes:
        if isinstance(node, Case):
            yield node
        else:
            yield from iter_cases(node.children)


def has_exclusive(nodes) -> bool:
    """Whether any node under ``nodes``, at any depth, is exclusive."""
    for node in nodes:
        if node.exclusive:
            return True
        if isinstance(node, Group) and has_exclusive(node.children):
            return True
    return False


@dataclass(frozen=True)
class Failure:
    """A failed hook or case action, with a guaranteed message."""
    message: str
    error_type: str
    details: str
    traceback: str = ""

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        message = str(exc)
        error_type = type(exc).__name__
        return cls(
            message=message or UNDEFINED_MESSAGE,
            error_type=error_type,
            details=f"{error_type}: {message or NO_MESSAGE}",
            traceback="".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            ),
        )


@dataclass
class FailureRecord:
    """One failed case, indexed in the order failures were observed."""
    index: int
    name: str
    message: str
    depth: int
    details: str
    traceback: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "name": self.name,
            "message": self.message,
            "details": self.details,
            "traceback": self.traceback,
        }


@dataclass(frozen=True)
class RunResult:
    """Pass/fail counts; a group's result is the sum of its children's."""
    passed: int = 0
    failed: int = 0

    def __add__(self, other: "RunResult") -> "RunResult":
        return RunResult(
            passed=self.passed + other.passed,
            failed=self.failed + other.failed,
        )

    @property
    def total(self) -> int:
        return self.passed + self.failed
