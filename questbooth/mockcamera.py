"""A camera that produces generated test photos instead of real ones."""

from __future__ import annotations

import logging
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable

from PIL import Image, ImageDraw, ImageFont

from .camera import Camera

log = logging.getLogger(__name__)

IDLE_TEXT = "📷 Mock Camera Preview\n\nClick 'Take Photo' to capture a test image"
IDLE_STYLE = "background-color: #2c3e50; color: white; font-size: 18px;"
LIVE_TEXT = "📷 Mock Camera - Live Preview\n\nReady to take photo!"
LIVE_STYLE = (
    "background-color: #34495e; color: white; font-size: 18px; border: 2px solid #3498db;"
)
STOPPED_TEXT = "📷 Mock Camera Preview\n\nPreview stopped"
CAPTURING_TEXT = "📸 Capturing..."
CAPTURING_STYLE = (
    "background-color: #e74c3c; color: white; font-size: 24px; font-weight: bold;"
)

PHOTO_SIZE = (800, 600)
_GRADIENT_START = (52, 152, 219)
_GRADIENT_END = (44, 62, 80)
_WHITE = (255, 255, 255)


def setup_photos_directory(base: str | Path | None = None) -> Path:
    """Create ``<base>/PhotoBooth`` and return it, or the temp dir on failure.

    ``base`` defaults to the user's Pictures directory.
    """
    root = Path(base) if base is not None else Path.home() / "Pictures"
    directory = root / "PhotoBooth"
    if directory.is_dir():
        log.debug("MockCamera: photos directory: %s", directory)
        return directory
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        log.warning("MockCamera: failed to create photos directory: %s", directory)
        return Path(tempfile.gettempdir())
    log.debug("MockCamera: created photos directory: %s", directory)
    return directory


def _font(size: int, bold: bool = False) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    names = ("arialbd.ttf", "Arial Bold.ttf", "DejaVuSans-Bold.ttf") if bold else (
        "arial.ttf", "Arial.ttf", "DejaVuSans.ttf")
    for name in names:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _diagonal_gradient(size: tuple[int, int], start, end) -> Image.Image:
    width, height = size
    denominator = width * width + height * height
    x_terms = [x * width for x in range(width)]
    mask_bytes = bytearray()
    for y in range(height):
        offset = y * height
        mask_bytes.extend(min(255, (x + offset) * 255 // denominator) for x in x_terms)
    mask = Image.frombytes("L", size, bytes(mask_bytes))
    return Image.composite(Image.new("RGB", size, end), Image.new("RGB", size, start), mask)


def create_test_photo(now: datetime | None = None) -> Image.Image:
    """Draw an 800x600 placeholder photo stamped with ``now``."""
    now = now or datetime.now()
    width, height = PHOTO_SIZE
    image = _diagonal_gradient(PHOTO_SIZE, _GRADIENT_START, _GRADIENT_END).convert("RGBA")

    overlay = Image.new("RGBA", PHOTO_SIZE, (0, 0, 0, 0))
    overlay_draw = ImageDraw.Draw(overlay)
    for x, y, diameter in ((100, 100, 150), (550, 350, 200), (200, 400, 100)):
        overlay_draw.ellipse(
            (x, y, x + diameter, y + diameter),
            fill=(255, 255, 255, 50),
            outline=(255, 255, 255, 100),
            width=2,
        )
    image = Image.alpha_composite(image, overlay).convert("RGB")

    draw = ImageDraw.Draw(image)
    title = "MOCK PHOTO\n\nPhoto Booth Test"
    title_font = _font(36, bold=True)
    left, top, right, bottom = draw.multiline_textbbox((0, 0), title, font=title_font, align="center")
    draw.multiline_text(
        ((width - (right - left)) / 2 - left, (height - (bottom - top)) / 2 - top),
        title,
        fill=_WHITE,
        font=title_font,
        align="center",
    )

    stamp = now.strftime("%Y-%m-%d %H:%M:%S")
    stamp_font = _font(16)
    _, stamp_top, _, stamp_bottom = draw.textbbox((0, 0), stamp, font=stamp_font)
    draw.text((20, height - 20 - stamp_bottom), stamp, fill=_WHITE, font=stamp_font)

    draw.rectangle((2, 2, width - 3, height - 3), outline=_WHITE, width=4)
    return image


class MockCamera(Camera):
    """A camera for development that saves generated photos to disk.

    ``capture_photo`` only marks a capture as pending; whoever drives the
    booth calls ``finish_capture`` after ``capture_delay`` seconds.
    """

    capture_delay = 1.0

    def __init__(
        self,
        photos_base: str | Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__()
        self.photos_directory = setup_photos_directory(photos_base)
        self._clock = clock
        self._initialized = False
        self._capture_pending = False
        self.preview_text: str | None = None
        self.preview_style: str | None = None

    @property
    def capture_in_progress(self) -> bool:
        return self._capture_pending

    def initialize(self) -> bool:
        if self._initialized:
            return True
        log.debug("MockCamera: initializing")
        self.preview_text = IDLE_TEXT
        self.preview_style = IDLE_STYLE
        self._capture_pending = False
        self._initialized = True
        return True

    def cleanup(self) -> None:
        log.debug("MockCamera: cleaning up")
        self._capture_pending = False
        self._initialized = False

    def is_available(self) -> bool:
        return self._initialized

    def start_preview(self) -> None:
        if not self._initialized:
            return
        log.debug("MockCamera: starting preview")
        self.preview_text = LIVE_TEXT
        self.preview_style = LIVE_STYLE

    def stop_preview(self) -> None:
        log.debug("MockCamera: stopping preview")
        if self.preview_text is not None:
            self.preview_text = STOPPED_TEXT
            self.preview_style = IDLE_STYLE

    def capture_photo(self) -> None:
        if not self._initialized:
            self.capture_error.emit("Mock camera not initialized")
            return
        log.debug("MockCamera: starting photo capture simulation")
        self.preview_text = CAPTURING_TEXT
        self.preview_style = CAPTURING_STYLE
        self._capture_pending = True

    def cancel_capture(self) -> None:
        log.debug("MockCamera: cancelling capture")
        self.cleanup()

    def finish_capture(self) -> Path | None:
        """Complete a pending capture: save a test photo and report it.

        Returns the saved path, or None if nothing was pending or saving failed.
        """
        if not self._capture_pending:
            return None
        self._capture_pending = False
        now = self._clock()
        photo = create_test_photo(now)
        path = (self.photos_directory / f"mock_photo_{now:%Y-%m-%d_%H-%M-%S}.png").absolute()
        try:
            photo.save(path)
        except OSError:
            log.warning("MockCamera: failed to save photo to %s", path)
            self.capture_error.emit("Failed to save mock photo")
            return None
        log.debug("MockCamera: photo saved to %s", path)
        self.photo_ready.emit(photo, str(path))
        return path