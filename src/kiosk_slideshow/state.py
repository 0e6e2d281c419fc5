"""Slideshow position: a fixed image list and a wrapping current index."""

from __future__ import annotations

from pathlib import Path

from .exceptions.slideshow_errors import SlideshowError


class SlideshowState:
    """
    Ordered image list plus the index of the image on screen.

    The list is fixed once constructed. The index always stays within
    `[0, len(images))`, wrapping around at both ends.
    """

    def __init__(self, images: list[Path], current_index: int = 0):
        if not images:
            raise SlideshowError("A slideshow needs at least one image.")
        self.images: tuple[Path, ...] = tuple(images)
        self.current_index: int = current_index % len(self.images)

    def __len__(self) -> int:
        return len(self.images)

    @property
    def current_path(self) -> Path:
        return self.images[self.current_index]

    def go_to(self, index: int) -> Path:
        """Move to `index`, wrapped into range, and return the new current path."""
        self.current_index = index % len(self.images)
        return self.current_path

    def advance(self, step: int = 1) -> Path:
        """Move `step` images forward (negative for backward) and return the new current path."""
        return self.go_to(self.current_index + step)
