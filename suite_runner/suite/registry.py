"""Registration API for building suite trees.

A ``RegistrationContext`` accumulates the forest while host code calls
``define_group`` / ``define_case`` / ``define_setup``. Host test modules
usually call the module-level helpers (``describe``, ``it``,
``before_each``...), which forward to the currently active context.
"""

import inspect
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from .schema import Action, Case, Forest, Group, Node, RegistrationError

logger = logging.getLogger(__name__)


class RegistrationContext:
    """Collects groups, cases and setup hooks until frozen.

    Lifecycle: create, populate via the ``define_*`` calls, ``freeze()``,
    then hand the returned ``Forest`` to the executor.
    """

    def __init__(self):
        self._roots: list[Node] = []
        self._current: Optional[Group] = None
        self._forest: Optional[Forest] = None

    @property
    def frozen(self) -> bool:
        return self._forest is not None

    @property
    def current_group(self) -> Optional[Group]:
        """The group whose body is being registered, if any."""
        return self._current

    def define_group(
        self,
        name: str,
        body: Callable[[], None],
        *,
        exclusive: bool = False,
    ) -> Group:
        """Register a group and run its body against it.

        Args:
            name: Group name shown in the report.
            body: No-argument callable performing nested registrations.
            exclusive: Mark the group to run alone.

        Returns:
            The registered Group.

        Raises:
            RegistrationError: If the context is frozen or the body is async.
        """
        self._check_open()
        group = Group(name=name, exclusive=exclusive, parent=self._current)
        self._append(group)

        previous = self._current
        self._current = group
        try:
            outcome = body()
        finally:
            self._current = previous

        if inspect.isawaitable(outcome):
            if inspect.iscoroutine(outcome):
                outcome.close()
            raise RegistrationError(
                f"Group '{name}' body returned an awaitable; "
                "group bodies must register synchronously."
            )

        logger.debug("Registered group %r (%d children)", name, len(group.children))
        return group

    def define_group_exclusive(self, name: str, body: Callable[[], None]) -> Group:
        return self.define_group(name, body, exclusive=True)

    def define_case(self, name: str, action: Action, *, exclusive: bool = False) -> Case:
        """Register a case. The action is not called until the run."""
        self._check_open()
        case = Case(name=name, action=action, exclusive=exclusive)
        self._append(case)
        return case

    def define_case_exclusive(self, name: str, action: Action) -> Case:
        return self.define_case(name, action, exclusive=True)

    def define_setup(self, action: Action) -> None:
        """Attach a hook run before each direct case of the current group.

        Outside any group there is nothing to attach to and the call is
        ignored.
        """
        self._check_open()
        if self._current is None:
            logger.debug("Ignoring setup hook registered outside any group")
            return
        self._current.setup_hooks.append(action)

    def freeze(self) -> Forest:
        """Finish registration and return the forest. Idempotent."""
        if self._current is not None:
            raise RegistrationError(
                f"Cannot freeze while group '{self._current.name}' is open."
            )
        if self._forest is None:
            self._forest = Forest(children=tuple(self._roots))
            logger.debug("Froze registration with %d top-level nodes", len(self._forest))
        return self._forest

    def _append(self, node: Node) -> None:
        if self._current is not None:
            self._current.children.append(node)
        else:
            self._roots.append(node)

    def _check_open(self) -> None:
        if self.frozen:
            raise RegistrationError("Registration is frozen; no further definitions allowed.")


_active: Optional[RegistrationContext] = None
_default: Optional[RegistrationContext] = None


def get_context() -> RegistrationContext:
    """Return the active context, falling back to a process default."""
    global _default
    if _active is not None:
        return _active
    if _default is None:
        _default = RegistrationContext()
    return _default


@contextmanager
def activate(context: RegistrationContext) -> Iterator[RegistrationContext]:
    """Route the module-level helpers to ``context`` for the block."""
    global _active
    previous = _active
    _active = context
    try:
        yield context
    finally:
        _active = previous


def describe(name: str, body: Callable[[], None]) -> Group:
    return get_context().define_group(name, body)


def describe_only(name: str, body: Callable[[], None]) -> Group:
    return get_context().define_group_exclusive(name, body)


def it(name: str, action: Action) -> Case:
    return get_context().define_case(name, action)


def it_only(name: str, action: Action) -> Case:
    return get_context().define_case_exclusive(name, action)


def before_each(action: Action) -> None:
    get_context().define_setup(action)
