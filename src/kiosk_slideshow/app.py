"""
Main application class for the kiosk slideshow.

This module defines the `SlideshowApp` class, the controller that owns the
slideshow state, the window, the canvas and the single transition timer.
Every transition (timer, keyboard, mouse) goes through `show_image`, which
decodes and draws the new image, updates the caption band and resets the
timer.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import messagebox
import logging
from pathlib import Path

from PIL import Image

from . import caption, config, controls, display, image_loader
from .config import Settings
from .exceptions.slideshow_errors import ImageDecodeError
from .manifest import ManifestEntry
from .state import SlideshowState

logger = logging.getLogger(__name__)

class SlideshowApp:
    """
    The slideshow controller.
    """

    def __init__(self, window: tk.Tk, settings: Settings, manifest: list[ManifestEntry]):
        self.window = window
        self.settings = settings
        self.manifest = manifest

        # Core state
        self.images: list[Path] = []
        self.state: SlideshowState | None = None
        self.after_id: str | None = None

        # Display state
        self._current_image: Image.Image | None = None
        self._current_photo_ref: tk.PhotoImage | None = None
        self._redraw_job: str | None = None
        self._resize_job: str | None = None

        # UI Elements
        self.canvas = tk.Canvas(self.window, bg=config.BACKGROUND_COLOR, highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.setup()

    def setup(self) -> None:
        """
        Perform the initial setup of the application.

        Lists the images of the content directory, sets up the fullscreen
        window, binds user controls and shows the first image. If no images
        are found, it displays an error and closes the window.

        Raises:
            ContentDirectoryError: If the content directory cannot be read.
        """
        self.images = image_loader.list_images(
            self.settings.content_directory,
            is_random_order=self.settings.is_random_order,
            seed=self.settings.random_seed,
        )
        if not self.images:
            messagebox.showerror("Error", "No valid images found in the content directory.")
            self.window.after(50, self.window.destroy)
            return

        self.state = SlideshowState(self.images)

        self.window.title(config.WINDOW_TITLE)
        self.window.geometry(f"{config.DEFAULT_WINDOW_WIDTH}x{config.DEFAULT_WINDOW_HEIGHT}")
        self.window.configure(bg=config.BACKGROUND_COLOR)
        self.window.attributes('-fullscreen', True)
        self.window.protocol("WM_DELETE_WINDOW", self.quit)

        controls.bind_controls(self)
        self.show_image(0)

    @property
    def current_index(self) -> int:
        return self.state.current_index if self.state else 0

    def show_image(self, index: int, step: int = 1) -> None:
        """
        Display the image at the given index and reset the timer.

        Images that cannot be decoded are logged and skipped, moving on in
        the direction given by `step`.

        Args:
            index: The index of the image to display; wrapped into range.
            step: The direction of travel, used to skip unreadable images.
        """
        if not self.state:
            return

        image_path = self.state.go_to(index)
        for _ in range(len(self.state)):
            logger.info(f"Showing image {self.state.current_index + 1}/{len(self.state)}: '{image_path}'")
            try:
                self._current_image = image_loader.decode_image(image_path)
                break
            except ImageDecodeError as e:
                logger.error(f"Error displaying image, skipping it: {e}")
                image_path = self.state.advance(step)
        else:
            logger.error("None of the images could be displayed, stopping the slideshow.")
            self.cancel_timer()
            self._current_image = None
            caption.clear_caption(self.canvas)
            display.display_error_message(self.canvas, "No image could be displayed")
            return

        self.redraw()
        self.reset_timer()

    def redraw(self) -> None:
        """
        Draw the current image and its caption band on the canvas.

        If the canvas has not been mapped yet, the draw is retried shortly.
        """
        if self._redraw_job:
            self.window.after_cancel(self._redraw_job)
            self._redraw_job = None
        if self._current_image is None:
            return

        canvas_width = self.canvas.winfo_width()
        canvas_height = self.canvas.winfo_height()
        if canvas_width <= 1 or canvas_height <= 1:
            self._redraw_job = self.window.after(100, self.redraw)
            return

        resized = display.resize_image(
            self._current_image, canvas_width, canvas_height, config.CAPTION_BAND_HEIGHT
        )
        self._current_photo_ref = display.display_static_image(self.canvas, resized)
        caption.update_caption(self)

    def reset_timer(self) -> None:
        """Cancel the pending transition, if any, and arm a new one."""
        self.cancel_timer()
        self.after_id = self.window.after(self.settings.slide_interval_ms, self.next_image_auto)
        logger.debug(f"Next transition in {self.settings.slide_interval}s")

    def cancel_timer(self) -> None:
        if self.after_id:
            self.window.after_cancel(self.after_id)
            self.after_id = None

    def next_image_auto(self) -> None:
        """Advance to the next image when the timer fires."""
        # The callback has already run, so there is nothing to cancel.
        self.after_id = None
        self.next_image()

    def next_image(self) -> None:
        """Advance to the next image, wrapping at the end."""
        if self.state:
            self.show_image(self.state.current_index + 1, step=1)

    def previous_image(self) -> None:
        """Go back to the previous image, wrapping at the start."""
        if self.state:
            self.show_image(self.state.current_index - 1, step=-1)

    def on_resize(self, event: tk.Event) -> None:
        """
        Handle the window resize event.

        To avoid excessive updates during resizing, the current image is
        redrawn after a short delay once resizing has stopped. The index and
        the timer are left alone.

        Args:
            event: The Tkinter event object.
        """
        if event.widget == self.window:
            if self._resize_job:
                self.window.after_cancel(self._resize_job)
            if event.width > 50 and event.height > 50:
                self._resize_job = self.window.after(250, self._redraw_after_resize)

    def _redraw_after_resize(self) -> None:
        self._resize_job = None
        self.redraw()

    def quit(self) -> None:
        """Cleanly shut down the application."""
        logger.info("Quit command received. Closing.")
        self.cancel_timer()
        for job in (self._redraw_job, self._resize_job):
            if job:
                self.window.after_cancel(job)
        self.window.destroy()

    def run(self) -> None:
        """Start the Tkinter main loop."""
        self.window.mainloop()
