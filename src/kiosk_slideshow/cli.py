"""
Command-Line Interface for the kiosk slideshow.

This module handles parsing of command-line arguments, sets up logging,
loads the configuration and caption manifest, and runs the slideshow.
"""

import argparse
import tkinter as tk
import logging
import coloredlogs
import sys
import importlib.metadata

from .app import SlideshowApp
from . import config
from .config import load_config
from .exceptions.slideshow_errors import SlideshowError
from .manifest import load_manifest

# Setup a dedicated logger for this application
logger = logging.getLogger(__name__)

def _package_version() -> str:
    try:
        return importlib.metadata.version('kiosk-slideshow')
    except importlib.metadata.PackageNotFoundError:
        # Running from a source checkout.
        return 'unknown'

def main():
    """
    The main entry point for the application.

    Parses command-line arguments, loads the configuration and manifest,
    sets up the fullscreen window and starts the slideshow.
    """
    parser = argparse.ArgumentParser(
        description="A fullscreen kiosk slideshow with captions.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
        help="Show the version number and exit."
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        default=config.DEFAULT_CONFIG_PATH,
        help=f"Path to the YAML configuration file. Default: {config.DEFAULT_CONFIG_PATH}"
    )
    parser.add_argument(
        "-l", "--log-level",
        type=str,
        default=config.DEFAULT_LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help=f"Set the logging level. Default: {config.DEFAULT_LOG_LEVEL}"
    )
    args = parser.parse_args()

    # --- Setup Logging ---
    log_level_upper = args.log_level.upper()
    logging.basicConfig(level=getattr(logging, log_level_upper, logging.INFO))
    coloredlogs.install(
        level=log_level_upper,
        fmt='%(asctime)s %(levelname)-8s %(name)s: %(message)s'
    )

    # --- Configuration ---
    try:
        settings = load_config(args.config)
        manifest = load_manifest(settings.manifest_path)
    except SlideshowError as e:
        logger.critical(f"Startup failed: {e}")
        sys.exit(1)

    # --- Application Initialization ---
    try:
        root = tk.Tk()
        # Hide the main window until the slideshow is ready
        root.withdraw()

        app = SlideshowApp(window=root, settings=settings, manifest=manifest)

        if app.images:
            root.deiconify()
            app.run()
        else:
            # The app itself shows an error message.
            logger.critical("Application startup failed, no images found.")
            sys.exit(1)

    except SlideshowError as e:
        logger.critical(f"Startup failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.critical(f"An unexpected error occurred: {e}", exc_info=True)
        sys.exit(1)

if __name__ == '__main__':
    main()
