"""
Caption Band Module.

This module draws the caption overlay: a band across the bottom of the
canvas, filled with the configured color, holding the title and short
description of the current image from the manifest.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from . import config
from .manifest import ManifestEntry, find_entry

if TYPE_CHECKING:
    import tkinter as tk
    from .app import SlideshowApp

logger = logging.getLogger(__name__)

CAPTION_TAGS = ("caption_bg", "caption_text")


def caption_for(
    image_path: Path,
    entries: Sequence[ManifestEntry],
    enable_text: bool,
) -> ManifestEntry | None:
    """
    Selects the manifest entry to show as a caption.

    Returns:
        ManifestEntry | None: The entry matching `image_path` exactly, or None
                              when captions are disabled or nothing matches.
    """
    if not enable_text:
        return None
    return find_entry(entries, image_path)


def clear_caption(canvas: 'tk.Canvas') -> None:
    """Removes the caption band and its text from the canvas."""
    canvas.delete(*CAPTION_TAGS)


def draw_caption(canvas: 'tk.Canvas', entry: ManifestEntry, fill_color: str, text_color: str) -> None:
    """
    Draws the caption band for `entry` at the bottom of the canvas.

    Args:
        canvas (tk.Canvas): The canvas to draw on.
        entry (ManifestEntry): The caption to show.
        fill_color (str): Band background, as `#rrggbb`.
        text_color (str): Title and description color, as `#rrggbb`.
    """
    clear_caption(canvas)

    canvas_width = canvas.winfo_width()
    canvas_height = canvas.winfo_height()
    band_top = canvas_height - config.CAPTION_BAND_HEIGHT
    padding = config.CAPTION_PADDING

    canvas.create_rectangle(
        0, band_top, canvas_width, canvas_height,
        fill=fill_color, outline="", tags="caption_bg"
    )
    canvas.create_text(
        canvas_width // 2, band_top + padding,
        text=entry.title, fill=text_color, font=config.TITLE_FONT,
        anchor="n", justify="center", tags="caption_text"
    )
    canvas.create_text(
        padding * 2, band_top + padding * 2 + config.TITLE_FONT[1] * 2,
        text=entry.description, fill=text_color, font=config.DESCRIPTION_FONT,
        anchor="nw", justify="left", width=max(1, canvas_width - padding * 4),
        tags="caption_text"
    )


def update_caption(app: 'SlideshowApp') -> bool:
    """
    Shows or hides the caption band for the image currently on screen.

    Args:
        app (SlideshowApp): The running slideshow.

    Returns:
        bool: True if a caption is shown.
    """
    entry = caption_for(app.state.current_path, app.manifest, app.settings.enable_text)
    if entry is None:
        clear_caption(app.canvas)
        return False

    logger.debug(f"Showing caption '{entry.id}' for {entry.image_path}")
    draw_caption(app.canvas, entry, app.settings.fill_color, app.settings.text_color)
    return True
