"""Debug marker presenters that wrap our output in HTML comments."""

from ..core.catalogue import DEBUG_MARKER_CLOSE, DEBUG_MARKER_OPEN
from ..core.registry import registry
from .base import AbstractPresenter


class _DebugMarkerPresenter(AbstractPresenter):
    def get(self) -> bool:
        return bool(self.helpers.options.get("show_debug_marker", True))


@registry.register
class MarkerOpenPresenter(_DebugMarkerPresenter):
    """Opening comment naming the product that printed the tags below."""

    presenter_id = DEBUG_MARKER_OPEN
    name = "Debug marker (open)"
    description = "Opening HTML comment"

    def present(self) -> str:
        if not self.get():
            return ""
        helpers = self.helpers
        return (
            f"<!-- This site is optimized with {helpers.product_name} "
            f"v{helpers.product_version} - {helpers.product_url} -->"
        )


@registry.register
class MarkerClosePresenter(_DebugMarkerPresenter):
    """Closing comment."""

    presenter_id = DEBUG_MARKER_CLOSE
    name = "Debug marker (close)"
    description = "Closing HTML comment"

    def present(self) -> str:
        if not self.get():
            return ""
        return f"<!-- / {self.helpers.product_name}. -->"
