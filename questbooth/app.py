"""The full-screen booth window and the command that starts it."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from PIL import Image, ImageOps

from .booth import CHOICE_SCREENS, ERROR_STYLE, PhotoBooth, Screen, choice_keys

log = logging.getLogger(__name__)

WINDOW_TITLE = "Qt Photo Booth"
ICON_SIZE = (150, 150)
PHOTO_VIEW_SIZE = (640, 480)
CHOICE_CATEGORIES = (("weapon", 4), ("land", 4), ("companion", 4))


def load_choice_images(
    resource_dir: str | Path, size: tuple[int, int] = ICON_SIZE
) -> dict[str, Image.Image]:
    """Load ``<key>.jpg`` for every choice key, scaled to fit ``size``.

    Images that are missing or unreadable are skipped with a warning.
    """
    directory = Path(resource_dir)
    images: dict[str, Image.Image] = {}
    for category, count in CHOICE_CATEGORIES:
        for key in choice_keys(category, count):
            path = directory / f"{key}.jpg"
            try:
                with Image.open(path) as image:
                    image.load()
                    images[key] = ImageOps.contain(image, size)
            except OSError:
                log.warning("Failed to load persistent image: %s for key: %s", path, key)
                continue
            log.debug("Loaded persistent image: %s as key: %s", path, key)
    return images


class BoothWindow:
    """A tkinter window showing the booth's screens."""

    def __init__(
        self,
        booth: PhotoBooth,
        images: dict[str, Image.Image] | None = None,
        fullscreen: bool = True,
    ) -> None:
        import tkinter as tk
        from PIL import ImageTk

        self._tk = tk
        self._image_tk = ImageTk
        self.booth = booth
        self._images = images or {}
        self._icon_refs: list[Any] = []
        self._photo_ref: Any = None
        self._tick_id: str | None = None
        self._finish_id: str | None = None

        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        if fullscreen:
            self.root.attributes("-fullscreen", True)
        self.root.protocol("WM_DELETE_WINDOW", self._exit)

        container = tk.Frame(self.root)
        container.pack(fill="both", expand=True)
        container.grid_rowconfigure(0, weight=1)
        container.grid_columnconfigure(0, weight=1)

        self._name_var = tk.StringVar()
        self._frames = {Screen.START: self._build_start(container)}
        for screen, (title, category, count) in CHOICE_SCREENS.items():
            self._frames[screen] = self._build_choice(container, title, category, count)
        self._frames[Screen.NAME_ENTRY] = self._build_name_entry(container)
        self._frames[Screen.CAMERA] = self._build_camera(container)
        for frame in self._frames.values():
            frame.grid(row=0, column=0, sticky="nsew")

        booth.camera.photo_ready.connect(self._on_camera_event)
        booth.camera.capture_error.connect(self._on_camera_event)
        self._refresh()

    def show_screen(self, screen: Screen) -> None:
        self._frames[screen].tkraise()
        if screen is Screen.NAME_ENTRY:
            self._name_entry.focus_set()

    def run(self) -> None:
        self.root.mainloop()

    # --- screens ----------------------------------------------------------

    def _build_start(self, parent):
        tk = self._tk
        frame = tk.Frame(parent, padx=50, pady=50)
        tk.Button(
            frame, text="START PHOTO BOOTH", font=("Arial", 24), width=20, height=2,
            command=self._on_start,
        ).pack(expand=True)
        tk.Button(
            frame, text="EXIT", font=("Arial", 16), width=8, height=2, command=self._exit
        ).pack(anchor="ne")
        return frame

    def _build_choice(self, parent, title: str, category: str, count: int):
        tk = self._tk
        frame = tk.Frame(parent, padx=50, pady=50)
        tk.Label(frame, text=title, font=("Arial", 28)).pack(pady=30)
        row = tk.Frame(frame)
        row.pack(expand=True)
        select = {
            "weapon": self.booth.select_weapon,
            "land": self.booth.select_land,
            "companion": self.booth.select_companion,
        }[category]
        for key in choice_keys(category, count):
            image = self._images.get(key)
            if image is None:
                log.warning("Image key not found: %s", key)
                continue
            icon = self._image_tk.PhotoImage(image)
            self._icon_refs.append(icon)
            tk.Button(
                row, image=icon, width=image.width + 30, height=image.height + 30,
                bd=2, relief="solid", command=lambda k=key: self._act(select, k),
            ).pack(side="left", padx=10)
        return frame

    def _build_name_entry(self, parent):
        tk = self._tk
        frame = tk.Frame(parent, padx=50, pady=50)
        font = ("Arial", 24)
        tk.Label(frame, text="Enter Your Name:", font=font).pack(pady=(100, 20))
        self._name_entry = tk.Entry(frame, textvariable=self._name_var, font=font, justify="center")
        self._name_entry.pack(fill="x", ipady=10)
        tk.Button(
            frame, text="Next", font=font, width=10,
            command=lambda: self._act(self.booth.submit_name, self._name_var.get()),
        ).pack(pady=20)
        return frame

    def _build_camera(self, parent):
        tk = self._tk
        frame = tk.Frame(parent, padx=20, pady=20)
        width, height = PHOTO_VIEW_SIZE
        stage = tk.Frame(
            frame, width=width, height=height, bg="black",
            highlightthickness=2, highlightbackground="#333333",
        )
        stage.pack(pady=10)
        stage.pack_propagate(False)
        self._preview_label = tk.Label(
            stage, bg="#2c3e50", fg="white", font=("Arial", 18), justify="center"
        )
        self._photo_label = tk.Label(stage, bg="black")
        self._overlay_label = tk.Label(stage)

        buttons = tk.Frame(frame)
        buttons.pack(pady=10)
        self._take_button = tk.Button(
            buttons, text="Take Photo", bg="#4CAF50", fg="white", font=("Arial", 18, "bold"),
            width=12, height=2, command=lambda: self._act(self.booth.take_photo),
        )
        self._retake_button = tk.Button(
            buttons, text="Retake", bg="#f44336", fg="white", font=("Arial", 18),
            width=10, height=2, command=lambda: self._act(self.booth.retake),
        )
        self._continue_button = tk.Button(
            buttons, text="Continue", bg="#2196F3", fg="white", font=("Arial", 18),
            width=10, height=2, command=self._on_continue,
        )
        return frame

    # --- actions ----------------------------------------------------------

    def _act(self, action, *args) -> None:
        action(*args)
        self._refresh()
        self._schedule_tick()

    def _on_start(self) -> None:
        self._name_var.set("")
        self._act(self.booth.start_session)

    def _on_continue(self) -> None:
        self._name_var.set("")
        self._act(self.booth.return_to_start)

    def _on_camera_event(self, *_args) -> None:
        self._refresh()
        self._schedule_tick()

    def _exit(self) -> None:
        self.root.destroy()

    def _schedule_tick(self) -> None:
        if self._tick_id is not None:
            self.root.after_cancel(self._tick_id)
            self._tick_id = None
        delay = self.booth.next_tick_in
        if delay is not None:
            self._tick_id = self.root.after(int(delay * 1000), self._tick)

    def _tick(self) -> None:
        self._tick_id = None
        self.booth.countdown_tick()
        camera = self.booth.camera
        finish = getattr(camera, "finish_capture", None)
        if finish is not None and getattr(camera, "capture_in_progress", False) and self._finish_id is None:
            delay = getattr(camera, "capture_delay", 1.0)
            self._finish_id = self.root.after(int(delay * 1000), self._finish_capture)
        self._refresh()
        self._schedule_tick()

    def _finish_capture(self) -> None:
        self._finish_id = None
        self.booth.camera.finish_capture()
        self._refresh()

    # --- drawing ----------------------------------------------------------

    def _refresh(self) -> None:
        booth = self.booth
        self.show_screen(booth.screen)

        text = getattr(booth.camera, "preview_text", None) or "Camera Preview"
        self._preview_label.config(text=text)
        if booth.preview_visible:
            self._preview_label.place(relwidth=1, relheight=1)
        else:
            self._preview_label.place_forget()

        photo = booth.captured_photo
        if booth.captured_visible and isinstance(photo, Image.Image):
            self._photo_ref = self._image_tk.PhotoImage(ImageOps.contain(photo, PHOTO_VIEW_SIZE))
            self._photo_label.config(image=self._photo_ref)
            self._photo_label.place(relwidth=1, relheight=1)
        else:
            self._photo_label.place_forget()

        if booth.overlay_visible:
            if booth.overlay_style == ERROR_STYLE:
                self._overlay_label.config(
                    text=booth.overlay_text, fg="red", bg="white", font=("Arial", 24, "bold")
                )
            else:
                self._overlay_label.config(
                    text=booth.overlay_text, fg="white", bg="#333333", font=("Arial", 72, "bold")
                )
            self._overlay_label.place(relx=0.5, rely=0.5, anchor="center")
            self._overlay_label.lift()
        else:
            self._overlay_label.place_forget()

        for column, (button, visible) in enumerate((
            (self._take_button, booth.take_photo_visible),
            (self._retake_button, booth.retake_visible),
            (self._continue_button, booth.continue_visible),
        )):
            if visible:
                button.grid(row=0, column=column, padx=10)
            else:
                button.grid_remove()
        self._take_button.config(state="normal" if booth.take_photo_enabled else "disabled")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="questbooth", description="Touch-screen photo booth.")
    parser.add_argument(
        "--resources", type=Path, default=Path("resources"),
        help="directory holding the choice images (default: ./resources)",
    )
    parser.add_argument(
        "--photos", type=Path, default=None,
        help="directory under which PhotoBooth/ is created (default: ~/Pictures)",
    )
    parser.add_argument("--windowed", action="store_true", help="do not go full screen")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    booth = PhotoBooth(photos_base=args.photos)
    images = load_choice_images(args.resources)
    window = BoothWindow(booth, images, fullscreen=not args.windowed)
    try:
        window.run()
    finally:
        booth.shutdown()
    return 0