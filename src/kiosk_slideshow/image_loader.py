"""
Image Discovery and Decoding Module.

This module is responsible for discovering image files in the content
directory, putting them in display order (path order, or a single random
permutation), and decoding a single file into an RGB Pillow image.
"""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path

from PIL import Image

from .config import SUPPORTED_IMAGE_EXTENSIONS
from .exceptions.slideshow_errors import ContentDirectoryError, ImageDecodeError

logger = logging.getLogger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise ContentDirectoryError(f"Cannot read '{error.filename}': {error.strerror}") from error


def list_images(root: str | Path, is_random_order: bool = False, seed: int | None = None) -> list[Path]:
    """
    Walk a directory recursively for supported image files.

    Paths keep the root exactly as given, so a relative root yields relative
    paths that can be compared against manifest entries.

    Args:
        root: The directory to walk.
        is_random_order: Shuffle the result once when True.
        seed: Seed for the shuffle. None seeds from system entropy.

    Returns:
        Image paths sorted by path, or shuffled when requested. Empty if the
        directory holds no supported images.

    Raises:
        ContentDirectoryError: If the directory is missing or unreadable.
    """
    root = Path(root)
    if not root.is_dir():
        raise ContentDirectoryError(f"The content directory '{root}' does not exist or is not a directory.")

    logger.info(f"Scanning for images in: {root}")

    found = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        for name in filenames:
            if name.startswith('.'):
                continue
            if name.lower().endswith(SUPPORTED_IMAGE_EXTENSIONS):
                found.append(Path(dirpath) / name)

    if not found:
        logger.warning(f"No images found in '{root}' with supported extensions.")
        return []

    # Initial sort is by full path, which is deterministic
    images = sorted(found)
    logger.info(f"Found {len(images)} images.")

    if is_random_order:
        images = shuffle_images(images, seed)
    return images


def shuffle_images(images: list[Path], seed: int | None = None) -> list[Path]:
    """
    Return a shuffled copy of the image list.

    Args:
        images: The image paths to shuffle.
        seed: Seed for the permutation. The same seed gives the same order.

    Returns:
        A new list; the input is left untouched.
    """
    shuffled = list(images)
    random.Random(seed).shuffle(shuffled)
    logger.info(f"Shuffled {len(shuffled)} images.")
    return shuffled


def decode_image(image_path: Path) -> Image.Image:
    """
    Open an image file and decode it into an RGB image.

    Only the first frame of animated files is used. Transparent areas are
    flattened onto the black window background.

    Args:
        image_path: The file to decode.

    Returns:
        The decoded RGB image.

    Raises:
        ImageDecodeError: If the file is missing or cannot be decoded.
    """
    try:
        with Image.open(image_path) as opened:
            opened.seek(0)
            image = opened.copy()
    except (FileNotFoundError, OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"Cannot decode '{image_path}': {e}") from e

    if image.width == 0 or image.height == 0:
        raise ImageDecodeError(f"Image '{image_path}' has no pixels ({image.width}x{image.height}).")

    if image.mode != 'RGB':
        logger.debug(f"Converting image from mode '{image.mode}' to 'RGB'.")
        if image.mode in ('RGBA', 'LA', 'PA') or 'transparency' in image.info:
            rgba = image.convert('RGBA')
            background = Image.new('RGB', rgba.size, (0, 0, 0))
            background.paste(rgba, mask=rgba.split()[-1])
            image = background
        else:
            image = image.convert('RGB')
    return image
