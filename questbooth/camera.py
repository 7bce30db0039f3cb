"""The camera interface shared by all camera back ends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class Signal:
    """A list of handlers called, in order, whenever the signal is emitted."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Remove a handler; raises ValueError if it was never connected."""
        self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)


class CaptureError(Exception):
    """Raised when a camera cannot be set up or used."""


class Camera(ABC):
    """A camera with a preview and single-shot capture.

    Results are reported through signals: ``photo_ready(photo, file_path)``,
    ``capture_error(message)``, ``preview_started()`` and ``preview_stopped()``.
    """

    def __init__(self) -> None:
        self.photo_ready = Signal()
        self.capture_error = Signal()
        self.preview_started = Signal()
        self.preview_stopped = Signal()

    @abstractmethod
    def initialize(self) -> bool:
        """Prepare the camera; return whether it is ready."""

    @abstractmethod
    def cleanup(self) -> None:
        """Release the camera."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the camera can be used now."""

    @abstractmethod
    def start_preview(self) -> None:
        """Start showing the live preview."""

    @abstractmethod
    def stop_preview(self) -> None:
        """Stop showing the live preview."""

    @abstractmethod
    def capture_photo(self) -> None:
        """Begin taking a photo; the result arrives via a signal."""

    @abstractmethod
    def cancel_capture(self) -> None:
        """Abandon a capture in progress."""

    def __enter__(self) -> "Camera":
        if not self.initialize():
            raise CaptureError(f"{type(self).__name__} failed to initialize")
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop_preview()
        self.cleanup()