"""
User Input and Event Handling Module.

This module binds keyboard and mouse events to the slideshow controller's
transitions.
"""

from __future__ import annotations

import tkinter as tk
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import SlideshowApp

logger = logging.getLogger(__name__)

def bind_controls(app: 'SlideshowApp'):
    """
    Binds all keyboard shortcuts and mouse events to their handler functions.

    Args:
        app (SlideshowApp): The slideshow controller.
    """
    # Navigation
    app.window.bind('<space>', lambda e: app.next_image())
    app.window.bind('<Right>', lambda e: app.next_image())
    app.window.bind('<Left>', lambda e: app.previous_image())
    app.window.bind('<Button-1>', lambda e: on_click(app, e))

    # Application Control
    app.window.bind('q', lambda e: app.quit())
    app.window.bind('Q', lambda e: app.quit())
    app.window.bind('<Escape>', lambda e: app.quit())

    # Window Resize Event
    app.window.bind('<Configure>', app.on_resize)

def on_click(app: 'SlideshowApp', event: tk.Event):
    logger.debug(f"Click at ({event.x}, {event.y}), advancing.")
    app.next_image()
