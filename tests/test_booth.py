from datetime import datetime

import pytest

from questbooth.booth import (
    COUNTDOWN_SECONDS,
    COUNTDOWN_STYLE,
    ERROR_DISPLAY_SECONDS,
    ERROR_STYLE,
    ERROR_TEXT,
    FLASH_DELAY,
    FLASH_TEXT,
    TICK_INTERVAL,
    PhotoBooth,
    Screen,
    choice_keys,
)
from questbooth.camera import Camera
from questbooth.mockcamera import MockCamera

FIXED = datetime(2024, 1, 2, 3, 4, 5)


class _FailingCamera(Camera):
    def initialize(self):
        return False

    def cleanup(self):
        pass

    def is_available(self):
        return False

    def start_preview(self):
        pass

    def stop_preview(self):
        pass

    def capture_photo(self):
        pass

    def cancel_capture(self):
        pass


@pytest.fixture
def booth(tmp_path):
    return PhotoBooth(camera=MockCamera(photos_base=tmp_path, clock=lambda: FIXED))


def _to_camera(booth):
    booth.start_session()
    booth.select_weapon("weapon2")
    booth.select_land("land3")
    booth.select_companion("companion1")
    booth.submit_name("Ada")


def _run_countdown(booth):
    delay = booth.take_photo()
    while delay is not None and booth.overlay_text != FLASH_TEXT:
        delay = booth.countdown_tick()
    return booth.countdown_tick()


def test_choice_keys():
    assert choice_keys("land", 2) == ["land1", "land2"]
    assert choice_keys("weapon", 0) == []


def test_initial_state(booth):
    assert booth.screen is Screen.START
    assert booth.session is None
    assert booth.camera.is_available()


def test_failing_camera_falls_back_to_mock(tmp_path):
    booth = PhotoBooth(camera=_FailingCamera(), photos_base=tmp_path)
    assert isinstance(booth.camera, MockCamera)
    assert booth.camera.is_available()


def test_navigation_records_choices(booth):
    booth.start_session()
    assert booth.screen is Screen.WEAPON
    booth.select_weapon("weapon2")
    assert booth.screen is Screen.LAND
    booth.select_land("land3")
    assert booth.screen is Screen.COMPANION
    booth.select_companion("companion1")
    assert booth.screen is Screen.NAME_ENTRY
    booth.submit_name("Ada")
    assert booth.screen is Screen.CAMERA
    session = booth.session
    assert (session.chosen_weapon_id, session.chosen_land_id) == ("weapon2", "land3")
    assert session.chosen_companion_id == "companion1"
    assert session.user_name == "Ada"
    assert booth.preview_visible and booth.take_photo_visible
    assert not booth.retake_visible


def test_selection_without_session_still_navigates(booth):
    booth.select_weapon("weapon1")
    assert booth.screen is Screen.LAND
    assert booth.session is None
    booth.submit_name("Ada")
    assert booth.screen is Screen.CAMERA
    assert booth.session is None


def test_countdown_sequence(booth):
    _to_camera(booth)
    assert booth.take_photo() == TICK_INTERVAL
    assert booth.overlay_text == str(COUNTDOWN_SECONDS)
    assert booth.overlay_visible
    assert not booth.take_photo_enabled
    seen = []
    delay = TICK_INTERVAL
    while booth.overlay_text != FLASH_TEXT:
        delay = booth.countdown_tick()
        seen.append(booth.countdown_value)
    assert seen == list(range(COUNTDOWN_SECONDS - 1, -1, -1))
    assert delay == FLASH_DELAY
    assert booth.take_photo_enabled
    assert booth.countdown_tick() is None
    assert not booth.overlay_visible
    assert booth.camera.capture_in_progress


def test_tick_without_pending_step_does_nothing(booth):
    assert booth.countdown_tick() is None
    assert booth.countdown_value == 0
    assert not booth.overlay_visible


def test_photo_ready_updates_session_and_buttons(booth):
    _to_camera(booth)
    _run_countdown(booth)
    path = booth.camera.finish_capture()
    assert path.exists()
    assert booth.session.captured_photo_path == str(path)
    assert booth.captured_photo.size == (800, 600)
    assert booth.captured_visible and not booth.preview_visible
    assert booth.retake_visible and booth.continue_visible
    assert not booth.take_photo_visible


def test_retake_restores_preview(booth):
    _to_camera(booth)
    _run_countdown(booth)
    booth.camera.finish_capture()
    booth.retake()
    assert booth.preview_visible and booth.take_photo_visible
    assert not booth.captured_visible and not booth.retake_visible


def test_return_to_start_clears_session(booth):
    _to_camera(booth)
    _run_countdown(booth)
    booth.camera.finish_capture()
    booth.return_to_start()
    assert booth.screen is Screen.START
    assert booth.session is None
    assert not booth.continue_visible


def test_camera_error_shows_and_clears_message(booth):
    _to_camera(booth)
    booth.camera.cleanup()
    delay = _run_countdown(booth)
    assert delay == ERROR_DISPLAY_SECONDS
    assert booth.overlay_text == ERROR_TEXT
    assert booth.overlay_style == ERROR_STYLE
    assert booth.overlay_visible
    assert booth.countdown_tick() is None
    assert not booth.overlay_visible
    assert booth.overlay_style == COUNTDOWN_STYLE


def test_error_during_countdown_stops_it(booth):
    _to_camera(booth)
    booth.take_photo()
    booth.on_camera_error("boom")
    assert booth.take_photo_enabled
    assert booth.overlay_text == ERROR_TEXT
    assert booth.next_tick_in == ERROR_DISPLAY_SECONDS


def test_shutdown_releases_camera(booth):
    booth.shutdown()
    assert not booth.camera.is_available()