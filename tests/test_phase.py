import pytest

from pomostatus.phase import Done, Idle, Rest, Work, compute_phase, format_phase, phase_progress
from pomostatus.scheduler import Config

CONFIG = Config(work_duration=1500, rest_duration=300)


def test_no_start_time_is_idle():
    for now in (0, 600, 10**9):
        assert compute_phase(None, now, CONFIG) == Idle()


def test_work_remaining_counts_down_to_boundary():
    previous = None
    for elapsed in range(0, 1501, 50):
        phase = compute_phase(0, elapsed, CONFIG)
        assert phase == Work(remaining=1500 - elapsed)
        if previous is not None:
            assert phase.remaining <= previous
        previous = phase.remaining


def test_work_boundary_is_inclusive():
    assert compute_phase(100, 1600, CONFIG) == Work(remaining=0)
    assert compute_phase(100, 1601, CONFIG) == Rest(remaining=299)


def test_rest_remaining_is_measured_from_total():
    for elapsed in (1501, 1600, 1799):
        assert compute_phase(0, elapsed, CONFIG) == Rest(remaining=1800 - elapsed)


def test_done_is_terminal():
    for elapsed in (1800, 1801, 3600, 10**6):
        assert compute_phase(0, elapsed, CONFIG) == Done()


def test_clock_going_backwards_clamps_to_zero_elapsed():
    assert compute_phase(1000, 400, CONFIG) == Work(remaining=1500)


def test_zero_rest_goes_straight_to_done():
    config = Config(work_duration=60, rest_duration=0)
    assert compute_phase(0, 60, config) == Work(remaining=0)
    assert compute_phase(0, 61, config) == Done()


@pytest.mark.parametrize(
    "now, expected",
    [
        (600, "W:15m"),
        (1600, "R: 3m"),
        (1801, "READY"),
        (1455, "W:45s"),
        (1500, "W: 0s"),
        (1741, "R:59s"),
    ],
)
def test_status_lines_for_default_schedule(now, expected):
    assert format_phase(compute_phase(0, now, Config.default())) == expected


def test_idle_text():
    assert format_phase(Idle()) == "no pomodoro running"
    assert format_phase(Idle(), compact=True) == ">----"


def test_compact_mode_only_changes_idle_and_done():
    assert format_phase(Done(), compact=True) == ">DONE"
    assert format_phase(Work(remaining=900), compact=True) == "W:15m"
    assert format_phase(Rest(remaining=45), compact=True) == "R:45s"


def test_minutes_are_truncated():
    assert format_phase(Work(remaining=119)) == "W: 1m"
    assert format_phase(Work(remaining=60)) == "W: 1m"
    assert format_phase(Work(remaining=59)) == "W:59s"


def test_phase_progress():
    assert phase_progress(Idle(), CONFIG) == 0.0
    assert phase_progress(Work(remaining=1500), CONFIG) == 0.0
    assert phase_progress(Work(remaining=750), CONFIG) == pytest.approx(0.5)
    assert phase_progress(Rest(remaining=75), CONFIG) == pytest.approx(0.75)
    assert phase_progress(Done(), CONFIG) == 1.0
