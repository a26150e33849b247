"""Tests for the next-frame callback queue."""

from starlanes.ui.frames import FrameScheduler


def test_callbacks_run_once_with_frame_time():
    scheduler = FrameScheduler()
    calls = []
    scheduler.schedule_frame(calls.append)
    assert scheduler.run_frame(16.0) == 1
    assert scheduler.run_frame(32.0) == 0
    assert calls == [16.0]


def test_handles_are_unique():
    scheduler = FrameScheduler()
    handles = {scheduler.schedule_frame(lambda now: None) for _ in range(10)}
    assert len(handles) == 10
    assert scheduler.pending == 10


def test_cancelled_callback_never_fires():
    scheduler = FrameScheduler()
    calls = []
    handle = scheduler.schedule_frame(calls.append)
    scheduler.cancel_frame(handle)
    assert not scheduler.is_scheduled(handle)
    scheduler.run_frame(1.0)
    assert calls == []


def test_cancel_unknown_or_none_is_noop():
    scheduler = FrameScheduler()
    scheduler.cancel_frame(None)
    scheduler.cancel_frame(12345)
    assert not scheduler.is_scheduled(None)


def test_reschedule_waits_for_next_frame():
    scheduler = FrameScheduler()
    frames = []

    def tick(now):
        frames.append(now)
        if len(frames) < 3:
            scheduler.schedule_frame(tick)

    scheduler.schedule_frame(tick)
    scheduler.run_frame(1.0)
    assert frames == [1.0]
    scheduler.run_frame(2.0)
    scheduler.run_frame(3.0)
    scheduler.run_frame(4.0)
    assert frames == [1.0, 2.0, 3.0]


def test_callback_can_cancel_a_later_one_in_the_same_frame():
    scheduler = FrameScheduler()
    calls = []
    handles = {}

    def first(now):
        calls.append("first")
        scheduler.cancel_frame(handles["second"])

    handles["first"] = scheduler.schedule_frame(first)
    handles["second"] = scheduler.schedule_frame(lambda now: calls.append("second"))
    assert scheduler.run_frame(0.0) == 1
    assert calls == ["first"]
