"""Core components of the head pipeline.

This package contains the presenter registry, catalogue and selector, the
per-request context, extension points and the front-end coordinator.
"""

# Registry and catalogue first: presenter modules import them while the
# presenters package is being loaded by frontend.
from .registry import PresenterMetadata, PresenterRegistry, registry  # isort: skip
from .catalogue import CATALOGUE, PresenterCatalogue  # isort: skip
from .actions import ActionHub
from .ambient import QueryStack
from .config_manager import ConfigManager, GlobalConfig, Options, SiteOptions
from .context import (
    ContextMemoizer,
    PagePresentationProvider,
    PageRequest,
    PageType,
    PresentationContext,
    PresentationValues,
)
from .extensions import PRESENTER_IDS_FILTER, PRESENTERS_FILTER, ExtensionGateway
from .frontend import FrontEnd
from .host import ConfiguredHost, HostCapabilities, HostConfig
from .selector import OptionFlags, SelectionFlags, select_presenter_ids

__all__ = [
    "CATALOGUE",
    "PRESENTERS_FILTER",
    "PRESENTER_IDS_FILTER",
    "ActionHub",
    "ConfigManager",
    "ConfiguredHost",
    "ContextMemoizer",
    "ExtensionGateway",
    "FrontEnd",
    "GlobalConfig",
    "HostCapabilities",
    "HostConfig",
    "OptionFlags",
    "Options",
    "PagePresentationProvider",
    "PageRequest",
    "PageType",
    "PresentationContext",
    "PresentationValues",
    "PresenterCatalogue",
    "PresenterMetadata",
    "PresenterRegistry",
    "QueryStack",
    "SelectionFlags",
    "SiteOptions",
    "registry",
    "select_presenter_ids",
]
