import pytest

from touchflow.handler import (
    DeviceInfo,
    DeviceType,
    EventType,
    GestureControllerDelegate,
    GestureDirection,
    GestureType,
    InputDevice,
    InputEvent,
    swipe_percentage,
)
from touchflow.swipe import SwipeHandler, SwipeState


class Recorder(GestureControllerDelegate):
    def __init__(self):
        self.events = []

    def on_gesture_begin(self, gesture):
        self.events.append(("begin", gesture))

    def on_gesture_update(self, gesture):
        self.events.append(("update", gesture))

    def on_gesture_end(self, gesture):
        self.events.append(("end", gesture))


@pytest.fixture
def device():
    return InputDevice(
        name="pad",
        gesture_capable=True,
        info=DeviceInfo(
            start_threshold=10.0,
            finish_threshold_horizontal=100.0,
            finish_threshold_vertical=100.0,
        ),
    )


def update(device, dx=0.0, dy=0.0, fingers=3):
    return InputEvent(
        EventType.GESTURE_SWIPE_UPDATE, device=device, dx=dx, dy=dy, fingers=fingers
    )


def end(device):
    return InputEvent(EventType.GESTURE_SWIPE_END, device=device)


def test_state_reset():
    state = SwipeState(started=True, delta_x=5.0, fingers=3)
    state.reset()
    assert state == SwipeState()


def test_below_threshold_reports_nothing(device):
    recorder = Recorder()
    handler = SwipeHandler(recorder)
    handler.handle_begin(InputEvent(EventType.GESTURE_SWIPE_BEGIN, device=device))
    handler.handle_update(update(device, dx=5.0))
    assert recorder.events == []
    assert handler.state.delta_x == 5.0
    assert handler.state.started is False


def test_passing_threshold_begins_gesture(device):
    recorder = Recorder()
    handler = SwipeHandler(recorder)
    handler.handle_update(update(device, dx=5.0))
    handler.handle_update(update(device, dx=10.0, fingers=4))
    assert len(recorder.events) == 1
    kind, gesture = recorder.events[0]
    assert kind == "begin"
    assert gesture.type is GestureType.SWIPE
    assert gesture.direction is GestureDirection.RIGHT
    assert gesture.fingers == 4
    assert gesture.device_type is DeviceType.TOUCHPAD
    assert gesture.elapsed_time == 0
    assert gesture.percentage == pytest.approx(
        swipe_percentage(device.info, GestureDirection.RIGHT, 15.0, 0.0)
    )


def test_direction_up(device):
    recorder = Recorder()
    handler = SwipeHandler(recorder)
    handler.handle_update(update(device, dy=-20.0))
    assert recorder.events[0][1].direction is GestureDirection.UP


def test_updates_after_begin(device):
    recorder = Recorder()
    handler = SwipeHandler(recorder)
    handler.handle_update(update(device, dx=-20.0))
    handler.handle_update(update(device, dx=-30.0))
    kinds = [kind for kind, _ in recorder.events]
    assert kinds == ["begin", "update"]
    gesture = recorder.events[1][1]
    assert gesture.direction is GestureDirection.LEFT
    assert gesture.elapsed_time >= 0
    assert gesture.percentage == pytest.approx(
        swipe_percentage(device.info, GestureDirection.LEFT, -50.0, 0.0)
    )
    assert recorder.events[0][1].percentage < gesture.percentage


def test_end_reports_and_resets(device):
    recorder = Recorder()
    handler = SwipeHandler(recorder)
    handler.handle_update(update(device, dy=50.0, fingers=3))
    handler.handle_end(end(device))
    kinds = [kind for kind, _ in recorder.events]
    assert kinds == ["begin", "end"]
    assert recorder.events[1][1].direction is GestureDirection.DOWN
    assert recorder.events[1][1].fingers == 3
    assert handler.state == SwipeState()


def test_end_without_start_reports_nothing(device):
    recorder = Recorder()
    handler = SwipeHandler(recorder)
    handler.handle_update(update(device, dx=1.0))
    handler.handle_end(end(device))
    assert recorder.events == []
    assert handler.state == SwipeState()


def test_percentage_capped(device):
    recorder = Recorder()
    handler = SwipeHandler(recorder)
    handler.handle_update(update(device, dx=1000.0))
    assert recorder.events[0][1].percentage == 100.0


def test_device_without_info_uses_defaults():
    recorder = Recorder()
    handler = SwipeHandler(recorder)
    bare = InputDevice(name="pad")
    handler.handle_update(update(bare, dx=150.0))
    assert recorder.events == []
    handler.handle_update(update(bare, dx=100.0))
    assert recorder.events[0][0] == "begin"