"""
Image Display Module.

This module handles rendering images on the Tkinter canvas: computing the
aspect-preserving fit above the caption band, resizing, and robustly
creating PhotoImage objects.
"""

import tkinter as tk
from PIL import Image, ImageTk
import logging
import io
import base64
import tempfile
import os
from typing import cast

logger = logging.getLogger(__name__)

def fit_dimensions(
    image_width: int,
    image_height: int,
    window_width: int,
    window_height: int,
    reserved_height: int = 0,
) -> tuple[int, int]:
    """
    Computes the size of an image scaled to fit a window, preserving aspect ratio.

    The image may be scaled up or down. A band of `reserved_height` pixels at the
    bottom of the window is kept free.

    Args:
        image_width (int): Original image width.
        image_height (int): Original image height.
        window_width (int): Available window width.
        window_height (int): Available window height, including the reserved band.
        reserved_height (int): Height kept free at the bottom of the window.

    Returns:
        tuple[int, int]: The scaled (width, height), each at least 1.

    Raises:
        ValueError: If the image has no pixels.
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Invalid original image dimensions ({image_width}x{image_height}).")

    available_height = window_height - reserved_height
    if window_width <= 0 or available_height <= 0:
        logger.warning(
            f"fit_dimensions: no room for the image in a {window_width}x{window_height} window "
            f"with {reserved_height}px reserved."
        )
        return 1, 1

    scale = min(window_width / image_width, available_height / image_height)
    return max(1, int(image_width * scale)), max(1, int(image_height * scale))

def resize_image(image: Image.Image, window_width: int, window_height: int, reserved_height: int = 0) -> Image.Image:
    """
    Resizes a PIL Image to fit the window above the reserved band, keeping its aspect ratio.

    Args:
        image (Image.Image): The decoded PIL Image.
        window_width (int): The window width.
        window_height (int): The window height.
        reserved_height (int): Height kept free at the bottom of the window.

    Returns:
        Image.Image: The resized PIL Image.
    """
    new_size = fit_dimensions(image.width, image.height, window_width, window_height, reserved_height)
    if new_size == image.size:
        return image
    return image.resize(new_size, Image.Resampling.BILINEAR)

def create_photoimage_robust(image: Image.Image) -> tk.PhotoImage | None:
    """
    Creates a tk.PhotoImage from an RGB PIL Image with fallbacks.

    Direct ImageTk conversion is tried first, then an in-memory PNG, then a
    temporary PNG file.

    Args:
        image (Image.Image): The PIL Image to convert.

    Returns:
        tk.PhotoImage | None: The created PhotoImage, or None if all methods fail.
    """
    if image.width <= 0 or image.height <= 0:
        logger.error(f"Invalid image dimensions: {image.width}x{image.height}")
        return None

    try:
        return cast(tk.PhotoImage, ImageTk.PhotoImage(image))
    except Exception as e1:
        logger.warning(f"ImageTk.PhotoImage failed: {e1}. Trying BytesIO fallback.")

        try:
            with io.BytesIO() as bio:
                image.save(bio, format='PNG')
                return tk.PhotoImage(data=base64.b64encode(bio.getvalue()))
        except Exception as e2:
            logger.warning(f"BytesIO fallback failed: {e2}. Trying temp file fallback.")

            try:
                with tempfile.NamedTemporaryFile(suffix='.png', delete=False) as tmp_file:
                    temp_path = tmp_file.name
                try:
                    image.save(temp_path, 'PNG')
                    return tk.PhotoImage(file=temp_path)
                finally:
                    os.unlink(temp_path)
            except Exception as e3:
                logger.error(f"All PhotoImage creation methods failed. Last error: {e3}")
                return None

def display_static_image(canvas: tk.Canvas, image: Image.Image) -> tk.PhotoImage | None:
    """
    Draws an image at the top center of the canvas.

    Args:
        canvas (tk.Canvas): The canvas to draw on.
        image (Image.Image): The already resized PIL image.

    Returns:
        tk.PhotoImage | None: The reference to the created PhotoImage, which the
                              caller must keep alive, or None on failure.
    """
    photo = create_photoimage_robust(image)
    canvas.delete("image", "error_text")
    if photo:
        canvas.create_image(
            canvas.winfo_width() // 2, 0,
            image=photo, anchor=tk.N, tags="image"
        )
    else:
        logger.error("Failed to create PhotoImage for static display.")
        display_error_message(canvas, "Error displaying image")
    return photo

def display_error_message(canvas: tk.Canvas, message: str) -> None:
    """Replaces the displayed image with a centered error message."""
    canvas.delete("image", "error_text")
    canvas.create_text(
        canvas.winfo_width() // 2, canvas.winfo_height() // 2,
        text=message, fill="red", font=("Helvetica", 16), tags="error_text"
    )
