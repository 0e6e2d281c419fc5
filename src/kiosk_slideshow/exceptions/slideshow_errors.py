"""
Domain-specific errors for the kiosk slideshow.

Startup problems (configuration, manifest, content directory) are raised as
subclasses of `SlideshowError` so the CLI can report them and exit, while
display-time decoding problems are raised as `ImageDecodeError` and handled
by the slideshow controller.
"""

class SlideshowError(Exception):
    """Base class for all slideshow domain errors.

    This exception should not be raised directly, except for invalid
    slideshow state. Subclass it for more specific error types.
    """


class ConfigError(SlideshowError):
    """Raised when the configuration file is missing or malformed."""


class ManifestError(SlideshowError):
    """Raised when the caption manifest is missing or malformed."""


class ContentDirectoryError(SlideshowError):
    """Raised when the content directory cannot be walked."""


class ImageDecodeError(SlideshowError):
    """Raised when an image file cannot be opened or decoded."""
