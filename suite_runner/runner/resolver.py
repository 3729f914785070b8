"""Filter resolver - decides which cases and groups run.

A single pass per node yields both whether the node is visible in the
report and which of its children are runnable. Runnability is computed
bottom-up, so a group is visible only when some case beneath it runs.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..suite.schema import Case, Forest, Group, has_exclusive


@dataclass
class Resolution:
    """Filtering outcome for one group (or the forest when group is None)."""
    group: Optional[Group]
    exclusive_mode: bool
    cases: list[Case] = field(default_factory=list)
    subgroups: list["Resolution"] = field(default_factory=list)

    @property
    def visible(self) -> bool:
        """Whether anything runs in this subtree."""
        return bool(self.cases) or any(sub.visible for sub in self.subgroups)

    @property
    def runnable_subgroups(self) -> list["Resolution"]:
        return [sub for sub in self.subgroups if sub.visible]


def _runnable_cases(cases: list[Case], exclusive_mode: bool) -> list[Case]:
    if exclusive_mode:
        return [c for c in cases if c.exclusive]
    return list(cases)


def resolve_group(group: Group, inherited: bool = False) -> Resolution:
    """Resolve a group and, recursively, its nested groups.

    Exclusive mode is active when the group is exclusive, an ancestor
    established it, or any direct child is exclusive.
    """
    exclusive_mode = (
        inherited
        or group.exclusive
        or any(child.exclusive for child in group.children)
    )
    return Resolution(
        group=group,
        exclusive_mode=exclusive_mode,
        cases=_runnable_cases(group.cases, exclusive_mode),
        subgroups=[resolve_group(sub, exclusive_mode) for sub in group.groups],
    )


def resolve_forest(forest: Forest) -> Resolution:
    """Resolve the whole forest.

    Exclusive mode for the run is active if any node at any depth is
    exclusive; every top-level group inherits it.
    """
    exclusive_mode = has_exclusive(forest.children)
    return Resolution(
        group=None,
        exclusive_mode=exclusive_mode,
        cases=_runnable_cases(forest.cases, exclusive_mode),
        subgroups=[resolve_group(g, exclusive_mode) for g in forest.groups],
    )


def count_runnable(resolution: Resolution) -> int:
    """Number of cases that will run under ``resolution``."""
    return len(resolution.cases) + sum(
        count_runnable(sub) for sub in resolution.subgroups
    )
