import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from PIL import Image

from questbooth.mockcamera import (
    CAPTURING_TEXT,
    IDLE_TEXT,
    LIVE_TEXT,
    STOPPED_TEXT,
    MockCamera,
    create_test_photo,
    setup_photos_directory,
)

FIXED = datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture
def camera(tmp_path):
    return MockCamera(photos_base=tmp_path, clock=lambda: FIXED)


def _collect(camera):
    photos, errors = [], []
    camera.photo_ready.connect(lambda photo, path: photos.append((photo, path)))
    camera.capture_error.connect(errors.append)
    return photos, errors


def test_setup_photos_directory_creates_folder(tmp_path):
    directory = setup_photos_directory(tmp_path)
    assert directory == tmp_path / "PhotoBooth"
    assert directory.is_dir()


def test_setup_photos_directory_falls_back_to_temp(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    assert setup_photos_directory(blocker) == Path(tempfile.gettempdir())


def test_initialize_makes_camera_available(camera):
    assert camera.is_available() is False
    assert camera.initialize() is True
    assert camera.is_available() is True
    assert camera.preview_text == IDLE_TEXT
    assert camera.initialize() is True


def test_preview_states(camera):
    camera.start_preview()
    assert camera.preview_text is None
    camera.initialize()
    camera.start_preview()
    assert camera.preview_text == LIVE_TEXT
    camera.stop_preview()
    assert camera.preview_text == STOPPED_TEXT


def test_capture_without_initialize_reports_error(camera):
    photos, errors = _collect(camera)
    camera.capture_photo()
    assert errors == ["Mock camera not initialized"]
    assert photos == []
    assert camera.finish_capture() is None


def test_capture_saves_and_emits_photo(camera, tmp_path):
    photos, errors = _collect(camera)
    camera.initialize()
    camera.capture_photo()
    assert camera.capture_in_progress is True
    assert camera.preview_text == CAPTURING_TEXT
    path = camera.finish_capture()
    assert errors == []
    assert path == (tmp_path / "PhotoBooth" / "mock_photo_2024-01-02_03-04-05.png").absolute()
    assert path.is_file()
    assert len(photos) == 1
    photo, emitted_path = photos[0]
    assert emitted_path == str(path)
    assert photo.size == (800, 600)
    with Image.open(path) as saved:
        assert saved.size == (800, 600)
    assert camera.capture_in_progress is False


def test_finish_without_pending_capture_does_nothing(camera):
    photos, errors = _collect(camera)
    camera.initialize()
    assert camera.finish_capture() is None
    assert photos == [] and errors == []


def test_cancel_capture_drops_pending_and_cleans_up(camera):
    photos, _ = _collect(camera)
    camera.initialize()
    camera.capture_photo()
    camera.cancel_capture()
    assert camera.finish_capture() is None
    assert photos == []
    assert camera.is_available() is False


def test_save_failure_reports_error(camera, tmp_path):
    photos, errors = _collect(camera)
    camera.photos_directory = tmp_path / "missing" / "deeper"
    camera.initialize()
    camera.capture_photo()
    assert camera.finish_capture() is None
    assert errors == ["Failed to save mock photo"]
    assert photos == []


def test_create_test_photo_layout():
    photo = create_test_photo(FIXED)
    assert photo.size == (800, 600)
    assert photo.mode == "RGB"
    assert photo.getpixel((3, 3)) == (255, 255, 255)
    assert photo.getpixel((10, 10))[2] > photo.getpixel((790, 590))[2]