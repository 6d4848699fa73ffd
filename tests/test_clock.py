from __future__ import annotations

import threading
import time
from datetime import datetime, timezone

import pytest

from worldclock.cities import DEFAULT_CITIES
from worldclock.clock import format_local_time, snapshot
from worldclock.scheduler import PeriodicTask


INSTANT = datetime(2024, 1, 15, 19, 7, 9, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("zone", "expected"),
    [
        ("America/Puerto_Rico", "3:07:09 PM"),
        ("Europe/Paris", "8:07:09 PM"),
        ("Asia/Tokyo", "4:07:09 AM"),
        ("Australia/Sydney", "6:07:09 AM"),
        ("Europe/Moscow", "10:07:09 PM"),
    ],
)
def test_format_local_time_medium_twelve_hour(zone, expected) -> None:
    assert format_local_time(zone, INSTANT) == expected


def test_format_local_time_midnight_and_noon() -> None:
    assert format_local_time("Europe/Paris", datetime(2024, 1, 15, 23, 0, 0, tzinfo=timezone.utc)) == "12:00:00 AM"
    assert format_local_time("Europe/Paris", datetime(2024, 1, 15, 11, 0, 5, tzinfo=timezone.utc)) == "12:00:05 PM"


def test_format_local_time_treats_naive_as_utc() -> None:
    assert format_local_time("Asia/Tokyo", INSTANT.replace(tzinfo=None)) == "4:07:09 AM"


def test_snapshot_covers_every_city() -> None:
    times = snapshot(DEFAULT_CITIES)

    assert set(times) == {city.name for city in DEFAULT_CITIES}
    assert all(value for value in times.values())


def test_snapshot_uses_a_single_instant() -> None:
    times = snapshot(DEFAULT_CITIES, INSTANT)

    assert times == {
        "SanJuan": "3:07:09 PM",
        "Paris": "8:07:09 PM",
        "Tokyo": "4:07:09 AM",
        "Sydney": "6:07:09 AM",
        "Moscow": "10:07:09 PM",
    }


def _wait_until(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def test_periodic_task_runs_until_stopped() -> None:
    calls = []
    task = PeriodicTask(0.01, lambda: calls.append(1))
    task.start()

    assert _wait_until(lambda: len(calls) >= 3)
    assert task.stop() is True
    seen = len(calls)
    time.sleep(0.05)

    assert len(calls) == seen
    assert task.runs == seen
    assert not task.running


def test_periodic_task_stop_is_idempotent() -> None:
    task = PeriodicTask(0.01, lambda: None)
    task.start()

    assert task.stop() is True
    assert task.stop() is False


def test_periodic_task_cannot_start_twice() -> None:
    task = PeriodicTask(0.5, lambda: None)
    task.start()
    try:
        with pytest.raises(RuntimeError):
            task.start()
    finally:
        task.stop()


def test_periodic_task_keeps_running_after_callback_error() -> None:
    calls = []

    def callback() -> None:
        calls.append(1)
        if len(calls) == 1:
            raise ValueError("boom")

    task = PeriodicTask(0.01, callback)
    task.start()
    try:
        assert _wait_until(lambda: len(calls) >= 3)
    finally:
        task.stop()


def test_periodic_task_can_stop_itself() -> None:
    stopped = threading.Event()
    holder = {}

    def callback() -> None:
        holder["task"].stop()
        stopped.set()

    task = PeriodicTask(0.01, callback)
    holder["task"] = task
    task.start()

    assert stopped.wait(2.0)
    time.sleep(0.05)
    assert task.runs == 1


def test_periodic_task_skips_missed_runs() -> None:
    clock = {"now": 0.0}
    calls = []

    def slow_callback() -> None:
        calls.append(clock["now"])
        if len(calls) == 1:
            clock["now"] += 1.2

    task = PeriodicTask(0.5, slow_callback, time_func=lambda: clock["now"])
    task.start()
    try:
        assert _wait_until(lambda: len(calls) >= 1)
        time.sleep(0.1)
        # The run due at 1.0 was missed while the first run overran, so it is not replayed.
        assert calls == [0.0]
    finally:
        task.stop()


def test_periodic_task_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        PeriodicTask(0, lambda: None)
