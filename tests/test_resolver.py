"""Tests for the filter resolver."""

from suite_runner.runner import count_runnable, resolve_forest, resolve_group
from suite_runner.suite import RegistrationContext

from .helpers import passing


def test_no_exclusive_runs_everything(context: RegistrationContext) -> None:
    """Without exclusive marks every case is runnable."""
    def body() -> None:
        context.define_case("b", passing)
        context.define_group("empty", lambda: None)

    context.define_case("a", passing)
    context.define_group("g", body)

    resolution = resolve_forest(context.freeze())

    assert resolution.exclusive_mode is False
    assert [c.name for c in resolution.cases] == ["a"]
    group = resolution.subgroups[0]
    assert group.visible
    assert [c.name for c in group.cases] == ["b"]
    assert not group.subgroups[0].visible
    assert [sub.group.name for sub in group.runnable_subgroups] == []
    assert count_runnable(resolution) == 2


def test_exclusive_case_activates_globally(context: RegistrationContext) -> None:
    """One exclusive case anywhere filters the whole forest."""
    def deep() -> None:
        context.define_case("skip", passing)
        context.define_case_exclusive("keep", passing)

    def middle() -> None:
        context.define_case("skip middle", passing)
        context.define_group("deep", deep)

    def unrelated() -> None:
        context.define_case("skip unrelated", passing)

    context.define_case("skip top", passing)
    context.define_group("middle", middle)
    context.define_group("unrelated", unrelated)

    resolution = resolve_forest(context.freeze())

    assert resolution.exclusive_mode is True
    assert resolution.cases == []
    middle_res, unrelated_res = resolution.subgroups
    assert middle_res.visible
    assert middle_res.cases == []
    assert [c.name for c in middle_res.subgroups[0].cases] == ["keep"]
    assert not unrelated_res.visible
    assert count_runnable(resolution) == 1


def test_visibility_recurses_through_empty_levels(context: RegistrationContext) -> None:
    """A group is visible when a runnable case sits several levels down."""
    def level_three() -> None:
        context.define_case_exclusive("deepest", passing)

    def level_two() -> None:
        context.define_group("three", level_three)

    def level_one() -> None:
        context.define_group("two", level_two)

    context.define_group("one", level_one)

    resolution = resolve_forest(context.freeze())
    one = resolution.subgroups[0]
    two = one.subgroups[0]
    three = two.subgroups[0]

    assert one.visible and two.visible and three.visible
    assert one.cases == [] and two.cases == []
    assert [c.name for c in three.cases] == ["deepest"]


def test_group_exclusive_mode_sources(context: RegistrationContext) -> None:
    """Own mark, inherited mode and an exclusive child each turn it on."""
    def with_exclusive_child() -> None:
        context.define_case("plain", passing)
        context.define_case_exclusive("marked", passing)

    def plain_body() -> None:
        context.define_case("plain", passing)

    marked_group = context.define_group_exclusive("marked group", plain_body)
    child_group = context.define_group("child", with_exclusive_child)
    plain_group = context.define_group("plain group", plain_body)

    own = resolve_group(marked_group)
    child = resolve_group(child_group)
    inherited = resolve_group(plain_group, inherited=True)
    free = resolve_group(plain_group)

    assert own.exclusive_mode and own.cases == []
    assert child.exclusive_mode and [c.name for c in child.cases] == ["marked"]
    assert inherited.exclusive_mode and not inherited.visible
    assert not free.exclusive_mode and [c.name for c in free.cases] == ["plain"]


def test_exclusive_cases_in_marked_group_run(context: RegistrationContext) -> None:
    """Inside an exclusive group only its exclusive cases are runnable."""
    def body() -> None:
        context.define_case("plain", passing)
        context.define_case_exclusive("marked", passing)

    context.define_case("outside", passing)
    context.define_group_exclusive("only", body)

    resolution = resolve_forest(context.freeze())

    assert resolution.cases == []
    assert [c.name for c in resolution.subgroups[0].cases] == ["marked"]
    assert count_runnable(resolution) == 1


def test_empty_forest_has_nothing_to_run(context: RegistrationContext) -> None:
    """An empty forest resolves to nothing runnable."""
    resolution = resolve_forest(context.freeze())

    assert not resolution.visible
    assert count_runnable(resolution) == 0
