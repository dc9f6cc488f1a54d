"""Utility functions and helpers."""

from .helpers import HelpersSurface, StringHelper, UrlHelper
from .logger import setup_logger
from .replace_vars import ReplaceVars

__all__ = ["HelpersSurface", "ReplaceVars", "StringHelper", "UrlHelper", "setup_logger"]
