"""rcli - command-line toolbox for CSV conversion, passwords, base64 and text signing."""

__version__ = "0.1.0"
__author__ = "rcli Contributors"

from rcli.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
