"""Extension points for adding and removing presenters.

Two filter points are exposed to third parties:

``frontend_presenter_ids``
    Receives the ordered list of presenter identifiers chosen for the page
    (for example ``["debug.marker_open", "title", ..., "schema",
    "debug.marker_close"]``) and returns the list to instantiate.
    Identifiers that no presenter is registered for are skipped later.

``frontend_presenters``
    Receives the ordered list of presenter instances and returns the list
    to render. Instances are not yet bound to the page; the coordinator
    binds every instance it gets back.

Callbacks run in registration order and each one gets the previous one's
return value. Results are not validated.
"""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

PRESENTER_IDS_FILTER = "frontend_presenter_ids"
PRESENTERS_FILTER = "frontend_presenters"

FilterCallback = Callable[[list[Any]], list[Any]]


class FilterChain:
    """Ordered chain of list -> list callbacks."""

    def __init__(self, name: str):
        self.name = name
        self._callbacks: list[FilterCallback] = []

    def add(self, callback: FilterCallback) -> FilterCallback:
        """
        Append a callback to the chain.

        Returns the callback so this can be used as a decorator.
        """
        self._callbacks.append(callback)
        return callback

    def remove(self, callback: FilterCallback) -> bool:
        """
        Remove the first registration of a callback.

        Returns:
            True if the callback was registered
        """
        try:
            self._callbacks.remove(callback)
        except ValueError:
            return False
        return True

    def apply(self, value: list[Any]) -> list[Any]:
        """Run every callback in registration order."""
        for callback in self._callbacks:
            value = callback(value)
        return value

    def __len__(self) -> int:
        return len(self._callbacks)


class ExtensionGateway:
    """
    The two named filter points of the head pipeline.

    Example:
        gateway = ExtensionGateway()

        @gateway.presenter_ids.add
        def add_verification(presenter_ids):
            return presenter_ids + ["my_addon.verification"]
    """

    def __init__(self):
        self.presenter_ids = FilterChain(PRESENTER_IDS_FILTER)
        self.presenters = FilterChain(PRESENTERS_FILTER)
        self._chains = {
            PRESENTER_IDS_FILTER: self.presenter_ids,
            PRESENTERS_FILTER: self.presenters,
        }

    def _chain(self, name: str) -> FilterChain:
        try:
            return self._chains[name]
        except KeyError:
            raise KeyError(f"Unknown extension point: {name}") from None

    def add_filter(self, name: str, callback: FilterCallback) -> FilterCallback:
        """Register a callback on a named extension point."""
        logger.debug(f"Adding filter to {name}: {getattr(callback, '__name__', callback)!r}")
        return self._chain(name).add(callback)

    def remove_filter(self, name: str, callback: FilterCallback) -> bool:
        """Unregister a callback from a named extension point."""
        return self._chain(name).remove(callback)

    def apply_filters(self, name: str, value: list[Any]) -> list[Any]:
        """Run a named extension point."""
        return self._chain(name).apply(value)
