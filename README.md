# questbooth

A full-screen photo booth for touchscreens and kiosks. Each visitor goes
through a short quest before the picture is taken:

1. **Start** – tap *START PHOTO BOOTH* (or *EXIT* to close the booth).
2. **Choose Your Weapon** – one of four pictures.
3. **Choose Your Land** – one of four pictures.
4. **Choose Your Companion** – one of four pictures.
5. **Enter Your Name** – type a name and press *Next*.
6. **Camera** – press *Take Photo*; a three-second countdown runs, a camera
   symbol flashes for half a second, and the photo is captured and shown.
   Press *Retake* to go back to the preview or *Continue* to finish, which
   clears the session and returns to the start screen.

If the camera reports an error, the countdown is stopped and an "Error!"
notice is shown over the preview for three seconds.

## Installation

```
pip install .
```

The only third-party dependency is Pillow. The window is drawn with
tkinter, so the Python installation must include Tk.

## Running

```
questbooth
```

Options:

| Option | Meaning |
| --- | --- |
| `--resources DIR` | directory holding the choice pictures (default: `./resources`) |
| `--photos DIR` | directory under which the `PhotoBooth` folder is created (default: `~/Pictures`) |
| `--windowed` | open a normal window instead of going full screen |

### Choice pictures

The choice screens look in the resources directory for twelve images named
after their category and position:

```
weapon1.jpg … weapon4.jpg
land1.jpg … land4.jpg
companion1.jpg … companion4.jpg
```

Each is scaled to fit 150×150, keeping its aspect ratio. A missing or
unreadable image is logged as a warning and its button is left out; the rest
of the screen still works.

### Photos

The built-in mock camera draws a test photo – an 800×600 diagonal gradient
with circles, a "MOCK PHOTO" title and the capture time stamped in the
corner – one second after the countdown ends, and saves it as
`mock_photo_<YYYY-MM-DD_HH-MM-SS>.png` in a `PhotoBooth` folder under the
photos directory. If that folder cannot be created, the system temporary
directory is used instead.

## What it does not do

Only the mock camera is built in; no real camera is driven and no real
photographs are taken.

- `detect_best_camera()` in `questbooth.factory` reports `CameraType.PI_CAMERA`
  when `/proc/device-tree/model` or the host name mentions a Raspberry Pi,
  and `CameraType.MOCK_CAMERA` otherwise.
- `create_camera(CameraType.AUTO_DETECT)` always builds a `MockCamera`,
  logging a warning if something else was detected.
- `create_camera(CameraType.QT_CAMERA)` and
  `create_camera(CameraType.PI_CAMERA)` raise `CameraUnavailableError`.

Sessions are not stored anywhere: a visitor's choices, name and photo path
are kept in memory until *Continue* is pressed, and then dropped.

## Using the pieces from Python

The booth's logic runs without a window.

```python
from questbooth.booth import PhotoBooth, Screen

booth = PhotoBooth(photos_base="/tmp/booth")
booth.start_session()
booth.select_weapon("weapon2")
booth.select_land("land1")
booth.select_companion("companion4")
booth.submit_name("Ada")
assert booth.screen is Screen.CAMERA

delay = booth.take_photo()          # seconds until the first tick
while delay is not None:
    delay = booth.countdown_tick()  # 3, 2, 1, flash, then capture starts

booth.camera.finish_capture()       # the mock camera saves its test photo
print(booth.session.captured_photo_path)
print(booth.session.summary())

booth.return_to_start()
booth.shutdown()
```

- `questbooth.booth.PhotoBooth` holds the screen-to-screen flow
  (`start_session`, `select_weapon`, `select_land`, `select_companion`,
  `submit_name`, `take_photo`, `countdown_tick`, `retake`, `on_photo_ready`,
  `on_camera_error`, `return_to_start`, `shutdown`). Timed steps are driven
  from outside: whenever `next_tick_in` is not `None`, call
  `countdown_tick()` after that many seconds.
- `questbooth.booth.Screen` names the six screens; `choice_keys(category,
  count)` gives the image keys of a choice category.
- `questbooth.session.PhotoSessionData` is one visitor's data, with `clear()`
  and `summary()`.
- `questbooth.camera.Camera` is the camera interface. Results arrive through
  the `photo_ready`, `capture_error`, `preview_started` and `preview_stopped`
  signals (`Signal.connect`, `disconnect`, `emit`). A camera can be used as a
  context manager; it raises `CaptureError` if it fails to initialize.
- `questbooth.mockcamera.MockCamera` marks a capture as pending in
  `capture_photo()`; `finish_capture()` saves the photo, emits `photo_ready`
  and returns the path. `create_test_photo(now)` and
  `setup_photos_directory(base)` are available on their own.
- `questbooth.factory` has `CameraType`, `create_camera`,
  `detect_best_camera` and `camera_type_to_string`.
- `questbooth.app` has `load_choice_images(resource_dir, size)`, the
  tkinter `BoothWindow`, `parse_args` and `main`.

## Tests

```
pip install ".[test]"
pytest
```