"""Choosing and building the camera back end."""

from __future__ import annotations

import enum
import logging
import socket
from pathlib import Path

from .camera import Camera, CaptureError
from .mockcamera import MockCamera

log = logging.getLogger(__name__)

DEVICE_MODEL_PATH = "/proc/device-tree/model"


class CameraType(enum.Enum):
    AUTO_DETECT = enum.auto()
    QT_CAMERA = enum.auto()
    PI_CAMERA = enum.auto()
    MOCK_CAMERA = enum.auto()


class CameraUnavailableError(CaptureError):
    """The requested camera back end is not available in this build."""


_NAMES = {
    CameraType.QT_CAMERA: "Qt Camera",
    CameraType.PI_CAMERA: "Raspberry Pi Camera",
    CameraType.MOCK_CAMERA: "Mock Camera",
    CameraType.AUTO_DETECT: "Auto Detect",
}


def camera_type_to_string(camera_type: object) -> str:
    return _NAMES.get(camera_type, "Unknown Camera")


def detect_best_camera(
    model_path: str | Path = DEVICE_MODEL_PATH, hostname: str | None = None
) -> CameraType:
    """Pick the camera type that suits the machine this runs on."""
    try:
        model = Path(model_path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        model = ""
    if "raspberry pi" in model.lower():
        log.debug("Detected Raspberry Pi via device tree: %s", model.strip())
        return CameraType.PI_CAMERA

    if hostname is None:
        hostname = socket.gethostname()
    if "raspberry" in hostname.lower():
        log.debug("Detected Raspberry Pi via hostname")
        return CameraType.PI_CAMERA

    log.debug("No platform-specific camera available, using mock camera")
    return CameraType.MOCK_CAMERA


def create_camera(camera_type: object = CameraType.AUTO_DETECT, **kwargs) -> Camera:
    """Build a camera of the given type; extra keyword arguments go to its constructor.

    Only the mock back end is built in: asking for another type explicitly
    raises CameraUnavailableError, while auto-detection falls back to the mock.
    """
    if not isinstance(camera_type, CameraType):
        log.warning("Unknown camera type, falling back to mock")
        return MockCamera(**kwargs)

    if camera_type is CameraType.AUTO_DETECT:
        detected = detect_best_camera()
        if detected is not CameraType.MOCK_CAMERA:
            log.warning(
                "%s is not available, falling back to mock", camera_type_to_string(detected)
            )
        log.debug('Creating camera of type: "Mock Camera"')
        return MockCamera(**kwargs)

    if camera_type is CameraType.MOCK_CAMERA:
        log.debug('Creating camera of type: "Mock Camera"')
        return MockCamera(**kwargs)

    raise CameraUnavailableError(f"{camera_type_to_string(camera_type)} is not available")