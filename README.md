# touchflow

touchflow turns the motion of fingers on a touchpad or touchscreen into
gestures: swipes, pinches and multi-finger taps. Each gesture is reported
as a `Gesture` carrying its type, direction, finger count, device type,
how far its animation has progressed (0–100) and the milliseconds since
it began.

You feed the package `InputEvent` objects and it reports gestures to a
controller object of your own.

## Modules

- `touchflow.handler`: the shared model and maths.
  - Model: `Gesture`, `GestureType`, `GestureDirection`, `DeviceType`,
    `DeviceInfo`, `InputDevice`, `InputEvent`, `EventType`,
    `GestureControllerDelegate`, `Handler`.
  - Functions: `get_device_info`, `timestamp_ms`, `elapsed_ms`,
    `swipe_direction`, `swipe_percentage`, `pinch_percentage`.
- `touchflow.device_handler`: `DeviceHandler.handle_device_added` works
  out thresholds for a gesture- or touch-capable device from its size
  and stores them on `device.info`. The calculations are in
  `mm_to_dpi`, `touchpad_thresholds` and `touchscreen_thresholds`.
  Start or finish thresholds given to the handler (anything but `-1`)
  override the computed ones. If the size is unknown or zero, the
  `DeviceInfo` defaults are used (200, 2500, 2500).
- `touchflow.swipe`: `SwipeHandler`, touchpad swipes. A swipe begins
  once its accumulated motion passes the start threshold.
- `touchflow.pinch`: `PinchHandler`, touchpad pinches. A pinch begins on
  its first update.
- `touchflow.touch`: `TouchHandler`, touchscreen swipes, pinches and
  taps. A tap is two or more fingers lifted within `TAP_TIME_MS`
  (150 ms).
- `touchflow.gatherer`: `EventGatherer` dispatches an iterable of events
  to the handlers. `GestureGatherer` is the abstract base. The
  `open_restricted` function opens a device node and raises
  `RuntimeError` with advice about the `input` group when access is
  denied.
- `touchflow.args`: `parse_args`, `Args`, `version_text`, `help_text`,
  `print_version`, `print_help`.
- `touchflow.logger`: `Logger`, `LogLevel`, and the module-level
  `configure`, `get_logger`, `error`, `warning`, `info`, `debug`.
- `touchflow.color`: `Color`, `ColorType`.
- `touchflow.paths`: `home_path`, `user_config_dir`, `user_config_file`,
  `user_lock_file`, `system_config_file`, `create_user_config_dir`.
- `touchflow.client_lock`: `ClientLock`, `AlreadyRunningError`.
- `touchflow.strings`: `split`, `ltrim`, `rtrim`, `trim`, `to_lower`.

## Receiving gestures

```python
from touchflow.gatherer import EventGatherer
from touchflow.handler import EventType, InputDevice, InputEvent, GestureControllerDelegate


class Printer(GestureControllerDelegate):
    def on_gesture_begin(self, gesture):
        print("begin", gesture)

    def on_gesture_update(self, gesture):
        print("update", gesture)

    def on_gesture_end(self, gesture):
        print("end", gesture)


pad = InputDevice(name="pad", gesture_capable=True, size_mm=(100.0, 60.0))
events = [
    InputEvent(EventType.DEVICE_ADDED, device=pad),
    InputEvent(EventType.GESTURE_SWIPE_BEGIN, device=pad),
    InputEvent(EventType.GESTURE_SWIPE_UPDATE, device=pad, dx=400.0, fingers=3),
    InputEvent(EventType.GESTURE_SWIPE_UPDATE, device=pad, dx=400.0, fingers=3),
    InputEvent(EventType.GESTURE_SWIPE_END, device=pad),
]
EventGatherer(Printer(), events, -1, -1).run()
```

The last two arguments are `start_threshold` and `finish_threshold`;
`-1` means "work it out from the device". Events of type `OTHER` are
ignored, and `TOUCH_CANCEL` is handled like `TOUCH_UP`.

## Gesture maths

```python
from touchflow.handler import DeviceInfo, GestureDirection, pinch_percentage, swipe_direction, swipe_percentage

swipe_direction(30.0, 5.0)  # GestureDirection.RIGHT
swipe_percentage(DeviceInfo(), GestureDirection.RIGHT, 1550.0, 0.0)  # 50.0
pinch_percentage(GestureDirection.IN, 0.5)  # 50.0
```

## Command-line arguments

`parse_args(argv)` takes the arguments without the program name and
understands these options:

- `--daemon [start_threshold finish_threshold]`
- `--client`
- `--debug` / `-d`
- `--quiet` / `-q`
- `--version` / `-v`
- `--help` / `-h`

Client mode is the default when `--daemon` is absent. The thresholds are
only taken when both numbers follow `--daemon`; otherwise both stay `-1`.
`--version` and `--help` print their text and set `Args.exit`.

## Logging

`configure(debug, quiet)` creates the shared logger. Only the first call
has an effect. Errors go to standard error and other levels to standard
output. Debug messages are off unless `debug` is set, and `quiet`
silences everything.

## Single client instance

`ClientLock` takes an exclusive, non-blocking lock on a file, creating
the file and its directory if needed. With no path it uses
`user_lock_file()` (`~/.config/touchflow/.touchflow.lock`). It raises
`AlreadyRunningError` when another holder has the lock.

```python
from touchflow.client_lock import ClientLock

with ClientLock():
    ...
```

## Colours

`Color` accepts `"RRGGBB"` or `"#RRGGBB"` and exposes `rgb()` with
components between 0 and 1. For a value it cannot parse, and for
`"auto"`, it keeps the default grey (0.6, 0.6, 0.6).

```python
from touchflow.color import Color, ColorType

Color("#ff8000", ColorType.BACKGROUND).rgb()  # (1.0, 0.50196..., 0.0)
```

## What the package does not do

- It installs no command and has no `main` function.
- It does not read input devices or talk to an input stack. Events must
  be supplied by the caller.
- It does not load configuration files; `touchflow.paths` only gives
  their locations.
- It performs no desktop actions (window management, key presses,
  animations).
- It has no daemon or client communication.