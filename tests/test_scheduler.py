import pytest

from scheduler import CarPosition, Direction, ScanScheduler, get_scheduler


def position(floor, direction, floor_count=5):
    return CarPosition(current_floor=floor, direction=direction, floor_count=floor_count)


def test_scan_keeps_direction_mid_shaft():
    scheduler = ScanScheduler()
    assert scheduler.next_direction(position(3, Direction.UP)) is Direction.UP
    assert scheduler.next_direction(position(3, Direction.DOWN)) is Direction.DOWN


def test_scan_reverses_only_at_extremes():
    scheduler = ScanScheduler()
    assert scheduler.next_direction(position(5, Direction.UP)) is Direction.DOWN
    assert scheduler.next_direction(position(1, Direction.DOWN)) is Direction.UP
    # Already heading away from the extreme
    assert scheduler.next_direction(position(5, Direction.DOWN)) is Direction.DOWN
    assert scheduler.next_direction(position(1, Direction.UP)) is Direction.UP


def test_single_floor_shaft_flips_every_call():
    scheduler = ScanScheduler()
    assert scheduler.next_direction(position(1, Direction.UP, floor_count=1)) is Direction.DOWN
    assert scheduler.next_direction(position(1, Direction.DOWN, floor_count=1)) is Direction.UP


def test_direction_reversed():
    assert Direction.UP.reversed() is Direction.DOWN
    assert Direction.DOWN.reversed() is Direction.UP


def test_get_scheduler_is_case_insensitive():
    assert isinstance(get_scheduler("SCAN"), ScanScheduler)


def test_get_scheduler_unknown_name():
    with pytest.raises(ValueError, match="Unknown scheduler"):
        get_scheduler("look")
