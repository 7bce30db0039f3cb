"""The photo booth's screens, session handling and capture countdown."""

from __future__ import annotations

import enum
import logging
from typing import Any

from .camera import Camera
from .factory import CameraType, create_camera
from .session import PhotoSessionData

log = logging.getLogger(__name__)

COUNTDOWN_SECONDS = 3
TICK_INTERVAL = 1.0
FLASH_DELAY = 0.5
ERROR_DISPLAY_SECONDS = 3.0
FLASH_TEXT = "📸"
ERROR_TEXT = "Error!"

COUNTDOWN_STYLE = (
    "QLabel { color: white; background-color: rgba(0, 0, 0, 128); "
    "border-radius: 50px; font-size: 72px; font-weight: bold; "
    "min-width: 100px; min-height: 100px; }"
)
ERROR_STYLE = (
    "QLabel { color: red; background-color: rgba(255, 255, 255, 200); "
    "border-radius: 10px; font-size: 24px; font-weight: bold; padding: 10px; }"
)


class Screen(enum.IntEnum):
    START = 0
    WEAPON = 1
    LAND = 2
    COMPANION = 3
    NAME_ENTRY = 4
    CAMERA = 5


CHOICE_SCREENS = {
    Screen.WEAPON: ("Choose Your Weapon", "weapon", 4),
    Screen.LAND: ("Choose Your Land", "land", 4),
    Screen.COMPANION: ("Choose Your Companion", "companion", 4),
}


def choice_keys(category: str, count: int) -> list[str]:
    """The image keys of a choice category: ``category1`` to ``category<count>``."""
    return [f"{category}{number}" for number in range(1, count + 1)]


class _Step(enum.Enum):
    NONE = enum.auto()
    COUNTDOWN = enum.auto()
    FLASH = enum.auto()
    ERROR = enum.auto()


class PhotoBooth:
    """The booth's state: which screen is shown, the session, and the camera screen.

    Timed steps (countdown, flash, error message) are driven from outside:
    whenever ``next_tick_in`` is not None, call ``countdown_tick`` after that
    many seconds.
    """

    def __init__(self, camera: Camera | None = None, **camera_options: Any) -> None:
        if camera is None:
            camera = create_camera(CameraType.AUTO_DETECT, **camera_options)
        if not camera.initialize():
            log.warning("Failed to initialize camera, falling back to mock camera")
            camera = create_camera(CameraType.MOCK_CAMERA, **camera_options)
            if not camera.initialize():
                log.critical("Failed to initialize even mock camera!")
        self.camera = camera
        camera.photo_ready.connect(self.on_photo_ready)
        camera.capture_error.connect(self.on_camera_error)

        self.screen = Screen.START
        self.session: PhotoSessionData | None = None

        self.countdown_value = 0
        self.overlay_text = ""
        self.overlay_visible = False
        self.overlay_style = COUNTDOWN_STYLE

        self.preview_visible = True
        self.captured_visible = False
        self.captured_photo: Any = None
        self.take_photo_visible = True
        self.take_photo_enabled = True
        self.retake_visible = False
        self.continue_visible = False

        self.next_tick_in: float | None = None
        self._step = _Step.NONE

    # --- navigation -------------------------------------------------------

    def start_session(self) -> None:
        """Begin a new visitor's session and show the first choice."""
        self.session = PhotoSessionData()
        log.debug("New photo session started.")
        self.screen = Screen.WEAPON

    def select_weapon(self, weapon_id: str) -> None:
        log.debug("Weapon selected: %s", weapon_id)
        if self.session is not None:
            self.session.chosen_weapon_id = weapon_id
        self.screen = Screen.LAND

    def select_land(self, land_id: str) -> None:
        log.debug("Land selected: %s", land_id)
        if self.session is not None:
            self.session.chosen_land_id = land_id
        self.screen = Screen.COMPANION

    def select_companion(self, companion_id: str) -> None:
        log.debug("Companion selected: %s", companion_id)
        if self.session is not None:
            self.session.chosen_companion_id = companion_id
        self.screen = Screen.NAME_ENTRY

    def submit_name(self, name: str) -> None:
        """Record the visitor's name and move on to the camera screen."""
        if self.session is not None:
            self.session.user_name = name
            log.debug("Name entered: %s", name)
            log.debug("Session data collected: %s", self.session.summary())
        else:
            log.warning("submit_name called without an active session")
        self.screen = Screen.CAMERA
        self._start_camera_preview()

    def return_to_start(self) -> None:
        """Drop the current session and go back to the start screen."""
        if self.session is not None:
            log.debug("PhotoSessionData: %s destroyed.", self.session.summary())
        self.session = None
        self.continue_visible = False
        self.screen = Screen.START
        log.debug("Returned to start screen. Session data cleared.")

    # --- camera screen ----------------------------------------------------

    def take_photo(self) -> float | None:
        """Start the countdown; return the delay until the first tick."""
        log.debug("Take photo requested")
        self.countdown_value = COUNTDOWN_SECONDS
        self._show_overlay(str(self.countdown_value), COUNTDOWN_STYLE)
        self.take_photo_enabled = False
        self._schedule(_Step.COUNTDOWN, TICK_INTERVAL)
        return self.next_tick_in

    def countdown_tick(self) -> float | None:
        """Advance the pending timed step; return the delay until the next tick."""
        step = self._step
        if step is _Step.COUNTDOWN:
            self.countdown_value -= 1
            if self.countdown_value > 0:
                self.overlay_text = str(self.countdown_value)
                self._schedule(_Step.COUNTDOWN, TICK_INTERVAL)
            else:
                self._stop_countdown()
                self._show_overlay(FLASH_TEXT, self.overlay_style)
                self._schedule(_Step.FLASH, FLASH_DELAY)
        elif step is _Step.FLASH:
            self.overlay_visible = False
            self._schedule(_Step.NONE, None)
            self.camera.capture_photo()
        elif step is _Step.ERROR:
            self.overlay_visible = False
            self.overlay_style = COUNTDOWN_STYLE
            self._schedule(_Step.NONE, None)
        return self.next_tick_in

    def retake(self) -> None:
        log.debug("Retake requested")
        self._start_camera_preview()

    def on_photo_ready(self, photo: Any, file_path: str) -> None:
        """Show the captured photo and offer to retake or continue."""
        log.debug("Photo captured successfully: %s", file_path)
        if self.session is not None:
            self.session.captured_photo_path = file_path
        self.preview_visible = False
        self.captured_photo = photo
        self.captured_visible = True
        self.take_photo_visible = False
        self.retake_visible = True
        self.continue_visible = True

    def on_camera_error(self, message: str) -> None:
        """Show an error message for a few seconds."""
        log.warning("Camera error: %s", message)
        self._stop_countdown()
        self._show_overlay(ERROR_TEXT, ERROR_STYLE)
        self._schedule(_Step.ERROR, ERROR_DISPLAY_SECONDS)

    def shutdown(self) -> None:
        """Stop the preview and release the camera."""
        self._stop_countdown()
        self.camera.stop_preview()
        self.camera.cleanup()

    # --- helpers ----------------------------------------------------------

    def _start_camera_preview(self) -> None:
        self.camera.start_preview()
        self.preview_visible = True
        self.captured_visible = False
        self.take_photo_visible = True
        self.retake_visible = False

    def _stop_countdown(self) -> None:
        if self._step is _Step.COUNTDOWN:
            self._schedule(_Step.NONE, None)
        self.overlay_visible = False
        self.take_photo_enabled = True

    def _show_overlay(self, text: str, style: str) -> None:
        self.overlay_text = text
        self.overlay_style = style
        self.overlay_visible = True

    def _schedule(self, step: _Step, delay: float | None) -> None:
        self._step = step
        self.next_tick_in = delay