"""Head presenters: one tag (or small tag group) each.

With the registry system, presenters auto-register themselves using the
@registry.register decorator. This module auto-imports all presenter
modules to trigger their registration.
"""

import importlib
import pkgutil
from pathlib import Path

# Auto-import all presenter modules to trigger @registry.register decorators
_presenter_dir = Path(__file__).parent
for module_info in pkgutil.iter_modules([str(_presenter_dir)]):
    if not module_info.name.startswith("_") and module_info.name not in ("protocol", "base"):
        importlib.import_module(f".{module_info.name}", package=__name__)

__all__ = []
