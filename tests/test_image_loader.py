# -*- coding: utf-8 -*-
"""
Unit tests for the image_loader module.

This module tests image discovery, filtering, ordering, shuffling and decoding.
"""

import random
from pathlib import Path

import pytest
from PIL import Image

from kiosk_slideshow.exceptions.slideshow_errors import ContentDirectoryError, ImageDecodeError
from kiosk_slideshow.image_loader import decode_image, list_images, shuffle_images

def test_list_images_filters_and_sorts(tmp_path: Path):
    """
    Test that only supported extensions are listed, sorted by path.
    """
    d = tmp_path / "images"
    sub_dir = d / "sub"
    sub_dir.mkdir(parents=True)

    (d / "b_image.jpg").touch()
    (d / "a_image.png").touch()
    (d / "d_image.BMP").touch()
    (d / "e_image.gif").touch()
    (sub_dir / "c_image.jpeg").touch()

    # Non-image and hidden files that should be ignored
    (d / "document.txt").touch()
    (d / "photo.webp").touch()
    (d / "photo.tiff").touch()
    (d / ".hidden_image.png").touch()

    images = list_images(d)

    assert images == [
        d / "a_image.png",
        d / "b_image.jpg",
        d / "d_image.BMP",
        d / "e_image.gif",
        sub_dir / "c_image.jpeg",
    ]

def test_list_images_is_stable(tmp_image_dir: Path):
    assert list_images(tmp_image_dir) == list_images(tmp_image_dir)

def test_list_images_logs_count(tmp_image_dir: Path, caplog_info):
    list_images(tmp_image_dir)

    assert f"Scanning for images in: {tmp_image_dir}" in caplog_info.text
    assert "Found 3 images." in caplog_info.text

def test_list_images_keeps_relative_root(tmp_image_dir: Path, monkeypatch):
    """
    Relative roots give relative paths, comparable to manifest entries.
    """
    monkeypatch.chdir(tmp_image_dir.parent)

    images = list_images("./content")

    assert [str(p) for p in images] == [
        str(Path("content") / "a.png"),
        str(Path("content") / "b.jpg"),
        str(Path("content") / "sub" / "c.gif"),
    ]

def test_list_images_no_shuffle_by_default(tmp_image_dir: Path):
    """Without random order the seed has no effect."""
    assert list_images(tmp_image_dir, seed=3) == sorted(list_images(tmp_image_dir))

def test_list_images_shuffles_with_seed(tmp_path: Path):
    """
    Test that random order applies one seeded permutation to the sorted list.
    """
    d = tmp_path / "many"
    d.mkdir()
    for i in range(20):
        (d / f"img_{i:02d}.png").touch()

    ordered = list_images(d)
    shuffled = list_images(d, is_random_order=True, seed=42)

    expected = list(ordered)
    random.Random(42).shuffle(expected)
    assert shuffled == expected
    assert sorted(shuffled) == ordered
    assert list_images(d, is_random_order=True, seed=42) == shuffled

def test_shuffle_images_leaves_input_untouched():
    images = [Path(f"{i}.png") for i in range(10)]
    original = list(images)

    shuffled = shuffle_images(images, seed=1)

    assert images == original
    assert sorted(shuffled) == sorted(original)

def test_list_images_from_non_existent_folder():
    """
    Test that a missing content directory is a fatal error.
    """
    with pytest.raises(ContentDirectoryError, match="does not exist"):
        list_images(Path("/path/to/non_existent_folder"))

def test_list_images_root_is_a_file(tmp_path: Path):
    f = tmp_path / "file.png"
    f.touch()

    with pytest.raises(ContentDirectoryError):
        list_images(f)

def test_list_images_from_empty_folder(tmp_path: Path, caplog):
    """
    Test behavior when the folder holds no supported images.
    """
    d = tmp_path / "empty_images"
    d.mkdir()
    (d / "document.txt").touch()

    images = list_images(d)

    assert images == []
    assert f"No images found in '{d}'" in caplog.text

def test_decode_image_rgb(tmp_image_dir: Path):
    image = decode_image(tmp_image_dir / "b.jpg")

    assert image.mode == 'RGB'
    assert image.size == (50, 100)

def test_decode_image_flattens_transparency_on_black(tmp_path: Path):
    path = tmp_path / "transparent.png"
    Image.new('RGBA', (4, 4), (255, 255, 255, 0)).save(path)

    image = decode_image(path)

    assert image.mode == 'RGB'
    assert image.getpixel((0, 0)) == (0, 0, 0)

def test_decode_image_palette(tmp_image_dir: Path):
    image = decode_image(tmp_image_dir / "sub" / "c.gif")

    assert image.mode == 'RGB'
    assert image.size == (20, 20)

def test_decode_missing_image(tmp_path: Path):
    with pytest.raises(ImageDecodeError, match="Cannot decode"):
        decode_image(tmp_path / "gone.png")

def test_decode_oversized_image(tmp_image_dir: Path, monkeypatch):
    """Images over Pillow's pixel limit are reported as undecodable."""
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

    with pytest.raises(ImageDecodeError, match="Cannot decode"):
        decode_image(tmp_image_dir / "a.png")

def test_decode_corrupt_image(tmp_path: Path):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"definitely not a jpeg")

    with pytest.raises(ImageDecodeError):
        decode_image(path)
