"""Renderers for presenter plans.

All renderers implement the BaseRenderer protocol and only know about
PresenterPlan.
"""

from .base import BaseRenderer
from .cli_renderer import CLIRenderer
from .json_renderer import JSONRenderer

__all__ = ["BaseRenderer", "CLIRenderer", "JSONRenderer"]
