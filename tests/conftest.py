# -*- coding: utf-8 -*-
"""
Configuration and fixtures for pytest.

This module defines shared fixtures used across the test suite for the kiosk
slideshow. Fixtures include temporary content directories with real images,
YAML file writers, mocking of GUI components (Tkinter), and logging setup.
"""

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest
import yaml
from PIL import Image

@pytest.fixture
def tmp_image_dir(tmp_path: Path) -> Iterator[Path]:
    """
    Create a temporary content directory with a few small images.

    The directory holds 'a.png' and 'b.jpg' at the top level and 'c.gif' in
    a 'sub' subdirectory, plus a text file that must be ignored.

    Args:
        tmp_path (Path): The pytest fixture for creating temporary directories.

    Yields:
        Path: The path to the 'content' directory.
    """
    content_dir = tmp_path / "content"
    sub_dir = content_dir / "sub"
    sub_dir.mkdir(parents=True)

    Image.new('RGB', (100, 50), color='red').save(content_dir / "a.png", 'PNG')
    Image.new('RGB', (50, 100), color='green').save(content_dir / "b.jpg", 'JPEG')
    Image.new('P', (20, 20)).save(sub_dir / "c.gif", 'GIF')
    (content_dir / "notes.txt").write_text("not an image")

    yield content_dir

@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, object], Path]:
    """
    Provide a helper that dumps data to a YAML file under tmp_path.

    Returns:
        Callable: `write_yaml(name, data)` returning the written file path.
    """
    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f)
        return path
    return _write

@pytest.fixture
def patch_tk(mocker):
    """
    Patch the Tkinter module to avoid GUI instantiation during tests.

    This fixture patches 'tkinter.Tk' and 'tkinter.Canvas' to be MagicMock objects.
    This prevents actual windows from being created, which is essential for running
    tests in a headless environment.

    Args:
        mocker: The pytest-mock fixture.

    Returns:
        dict: A dictionary containing the mocked 'Tk' and 'Canvas' classes.
    """
    mock_tk = mocker.patch('tkinter.Tk', autospec=True)
    mock_canvas = mocker.patch('tkinter.Canvas', autospec=True)
    return {
        "Tk": mock_tk,
        "Canvas": mock_canvas,
    }

@pytest.fixture
def dummy_canvas(patch_tk):
    """
    Provide a dummy Tkinter Canvas instance sized 800x600.

    Args:
        patch_tk: The fixture that patches Tkinter.

    Returns:
        MagicMock: A mocked instance of a Tkinter Canvas.
    """
    canvas = patch_tk["Canvas"].return_value
    canvas.winfo_width.return_value = 800
    canvas.winfo_height.return_value = 600
    return canvas

@pytest.fixture
def caplog_info(caplog):
    """
    Set the logging level to INFO for the duration of a test.

    Args:
        caplog: The pytest fixture for capturing log output.

    Returns:
        LogCaptureFixture: The configured caplog fixture.
    """
    caplog.set_level(logging.INFO)
    return caplog
