import pytest

from quantum_sched import InvalidInterval, UnitSnapshot, WorkUnit


def test_consume_partial_quantum_keeps_unit_running():
    unit = WorkUnit(unit_id=1, name="THREAD_1", runtime=25)
    assert unit.consume(10) == 10
    assert unit.runtime == 15


def test_consume_more_than_remaining_finishes_unit():
    unit = WorkUnit(unit_id=1, name="THREAD_1", runtime=5)
    assert unit.consume(10) == 5
    assert unit.runtime == 0


def test_consume_exact_remaining_returns_full_request():
    unit = WorkUnit(unit_id=1, name="THREAD_1", runtime=10)
    assert unit.consume(10) == 10
    assert unit.runtime == 0


def test_consume_on_finished_unit_returns_zero():
    unit = WorkUnit(unit_id=1, name="THREAD_1", runtime=0)
    assert unit.consume(3) == 0
    assert unit.runtime == 0


def test_zero_interval_is_rejected_without_state_change():
    unit = WorkUnit(unit_id=2, name="THREAD_2", runtime=7)
    with pytest.raises(InvalidInterval, match="invalid scheduling interval"):
        unit.consume(0)
    assert unit.runtime == 7


def test_negative_runtime_rejected():
    with pytest.raises(ValueError):
        WorkUnit(unit_id=1, name="bad", runtime=-1)


def test_str_renders_id_name_runtime_lines():
    unit = WorkUnit(unit_id=3, name="THREAD_3", runtime=21)
    assert str(unit) == "id: 3\nname: THREAD_3\nruntime: 21"


def test_unit_id_limited_to_small_unsigned_range():
    WorkUnit(unit_id=255, name="last", runtime=1)
    with pytest.raises(ValueError):
        WorkUnit(unit_id=256, name="too_big", runtime=1)
    with pytest.raises(ValueError):
        WorkUnit(unit_id=-1, name="negative", runtime=1)


def test_work_unit_has_no_instance_dict():
    unit = WorkUnit(unit_id=1, name="THREAD_1", runtime=4)
    assert not hasattr(unit, "__dict__")


def test_snapshot_is_detached_from_later_consumption():
    unit = WorkUnit(unit_id=4, name="THREAD_4", runtime=30)
    seen = unit.snapshot()
    unit.consume(10)

    assert seen == UnitSnapshot(unit_id=4, name="THREAD_4", runtime=30)
    assert unit.snapshot().runtime == 20
