"""
Caption manifest loading.

The manifest is a YAML document listing the title and short description of
each image. It is read once at startup and looked up by exact image path
every time an image is shown.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

import yaml

from .exceptions.slideshow_errors import ManifestError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManifestEntry:
    """Caption metadata for a single image."""
    id: str
    title: str
    description: str
    image_path: str


def _entry_from_dict(item: Any, position: int) -> ManifestEntry:
    if not isinstance(item, dict):
        raise ManifestError(f"Manifest entry #{position + 1} must be a mapping, got {type(item).__name__}.")

    def text(key: str) -> str:
        value = item.get(key)
        return '' if value is None else str(value)

    entry = ManifestEntry(
        id=text('id'),
        title=text('title'),
        description=text('short_description'),
        image_path=text('image_path'),
    )
    if not entry.image_path:
        logger.warning(f"Manifest entry #{position + 1} (id '{entry.id}') has no image_path and will never match.")
    return entry


def load_manifest(manifest_path: str | Path) -> list[ManifestEntry]:
    """
    Load caption entries from a YAML manifest.

    The document is either a mapping with an `entries` list or a bare list
    of entries. Each entry holds `id`, `title`, `image_path` and
    `short_description`; missing fields default to empty strings.

    Args:
        manifest_path: Path to the manifest file.

    Returns:
        The entries in document order.

    Raises:
        ManifestError: If the file is missing, unreadable or malformed.
    """
    path = Path(manifest_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ManifestError(f"Cannot read manifest '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in manifest '{path}': {e}") from e

    if data is None:
        items = []
    elif isinstance(data, dict):
        items = data.get('entries') or []
    else:
        items = data

    if not isinstance(items, list):
        raise ManifestError(f"Manifest '{path}' must contain a list of entries.")

    entries = [_entry_from_dict(item, i) for i, item in enumerate(items)]
    logger.info(f"Loaded {len(entries)} manifest entries from {path}")
    return entries


def find_entry(entries: Sequence[ManifestEntry], image_path: str | Path) -> ManifestEntry | None:
    """Return the first entry whose image_path equals `image_path` exactly."""
    wanted = str(image_path)
    for entry in entries:
        if entry.image_path == wanted:
            return entry
    return None
