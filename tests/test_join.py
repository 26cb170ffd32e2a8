import pytest

from smith_charts.rendering.join import JoinBatch, JoinPlan, plan_join, apply_join


def test_plan_join_grow():
    plan = plan_join(["a", "b"], [1, 2, 3, 4])
    assert plan.update == [(0, "a", 1), (1, "b", 2)]
    assert plan.enter == [(2, 3), (3, 4)]
    assert plan.exit == []


def test_plan_join_shrink():
    plan = plan_join(["a", "b", "c"], [9])
    assert plan.update == [(0, "a", 9)]
    assert plan.enter == []
    assert plan.exit == ["b", "c"]


def test_plan_join_from_empty():
    plan = plan_join([], [1, 2])
    assert plan == JoinPlan(enter=[(0, 1), (1, 2)], update=[], exit=[])


def test_plan_join_to_empty():
    plan = plan_join(["a"], [])
    assert plan == JoinPlan(enter=[], update=[], exit=["a"])


def test_apply_join_creates_updates_and_removes(surface):
    container = surface.append_group(surface.root())
    drawn = []

    def draw(element, datum):
        drawn.append((element.id, datum))

    first = apply_join(surface, container, [], [10, 20, 30], draw)
    assert len(first) == 3
    assert len(surface.paths_in(container)) == 3
    assert [datum for _, datum in drawn] == [10, 20, 30]

    drawn.clear()
    second = apply_join(surface, container, first, [40], draw)
    assert second == first[:1]
    assert drawn == [(first[0].id, 40)]
    assert surface.removed == [first[1].id, first[2].id]
    assert len(surface.paths_in(container)) == 1

    drawn.clear()
    third = apply_join(surface, container, second, [50, 60], draw)
    assert third[0] is second[0]
    assert len(third) == 2
    assert [datum for _, datum in drawn] == [50, 60]


def test_apply_join_keys_by_position(surface):
    container = surface.append_group(surface.root())
    bound = {}

    def draw(element, datum):
        bound[element.id] = datum

    elements = apply_join(surface, container, [], ["x", "y"], draw)
    reordered = apply_join(surface, container, elements, ["y", "x"], draw)
    assert reordered == elements
    assert bound[elements[0].id] == "y"
    assert bound[elements[1].id] == "x"


def test_apply_join_removes_new_elements_when_draw_fails(surface):
    container = surface.append_group(surface.root())
    first = apply_join(surface, container, [], [1], lambda element, datum: None)

    def draw(element, datum):
        if datum == 3:
            raise ValueError("bad datum")

    with pytest.raises(ValueError):
        apply_join(surface, container, first, [1, 2, 3], draw)
    assert surface.paths_in(container) == first


def test_join_batch_defers_removal_until_commit(surface):
    real = surface.append_group(surface.root())
    imag = surface.append_group(surface.root())
    old_real = apply_join(surface, real, [], [1, 2], lambda element, datum: None)

    batch = JoinBatch(surface)
    new_real = batch.join(real, old_real, [1], lambda element, datum: None)
    new_imag = batch.join(imag, [], [1, 2], lambda element, datum: None)
    assert surface.paths_in(real) == old_real
    assert len(surface.paths_in(imag)) == 2

    batch.commit()
    assert surface.paths_in(real) == new_real
    assert surface.paths_in(imag) == new_imag


def test_join_batch_rollback_restores_previous_elements(surface):
    real = surface.append_group(surface.root())
    imag = surface.append_group(surface.root())
    old_real = apply_join(surface, real, [], [1, 2], lambda element, datum: None)

    batch = JoinBatch(surface)
    batch.join(real, old_real, [1, 2, 3, 4], lambda element, datum: None)
    batch.join(imag, [], [1], lambda element, datum: None)
    batch.rollback()

    assert surface.paths_in(real) == old_real
    assert surface.paths_in(imag) == []
    assert len(surface.removed) == 3
