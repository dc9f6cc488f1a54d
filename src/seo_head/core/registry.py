"""Presenter registry with auto-discovery and instantiation.

This module provides the central registry for all presenter plugins.
Presenters register themselves using the @registry.register decorator.
Identifiers that do not resolve to a registered presenter are a lookup
miss, never an import or reflection failure.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..presenters.protocol import PresenterPlugin

logger = logging.getLogger(__name__)


@dataclass
class PresenterMetadata:
    """Metadata about a registered presenter."""

    presenter_id: str
    name: str
    description: str
    plugin_class: "type[PresenterPlugin]"


class PresenterRegistry:
    """
    Central registry for all presenter plugins.

    Provides:
    - Auto-discovery via @registry.register decorator
    - Identifier -> factory lookup
    - Instantiation of identifier lists, skipping unknown identifiers

    Example:
        @registry.register
        class TitlePresenter(AbstractPresenter):
            presenter_id = "title"
            name = "Title"
            ...

        # Later:
        presenters = registry.instantiate(["title", "canonical"])
    """

    def __init__(self):
        self._plugins: dict[str, PresenterMetadata] = {}

    def register(self, plugin_class: "type[PresenterPlugin]") -> "type[PresenterPlugin]":
        """
        Register a presenter plugin.

        Can be used as decorator or called directly.

        Args:
            plugin_class: Presenter class to register

        Returns:
            Plugin class (for decorator usage)

        Raises:
            ValueError: If plugin is missing required attributes
        """
        required_attrs = ["presenter_id", "name", "description"]
        for attr in required_attrs:
            if not hasattr(plugin_class, attr):
                raise ValueError(
                    f"Presenter {plugin_class.__name__} missing required attribute: {attr}"
                )

        presenter_id = plugin_class.presenter_id

        if presenter_id in self._plugins:
            logger.warning(f"Presenter '{presenter_id}' already registered, overwriting")

        self._plugins[presenter_id] = PresenterMetadata(
            presenter_id=presenter_id,
            name=plugin_class.name,
            description=plugin_class.description,
            plugin_class=plugin_class,
        )
        logger.debug(f"Registered presenter: {presenter_id}")

        return plugin_class

    def unregister(self, presenter_id: str) -> None:
        """Remove a presenter from the registry (no-op when unknown)."""
        self._plugins.pop(presenter_id, None)

    def get(self, presenter_id: str) -> PresenterMetadata | None:
        """
        Get presenter metadata by ID.

        Args:
            presenter_id: Presenter ID

        Returns:
            Metadata if found, None otherwise
        """
        return self._plugins.get(presenter_id)

    def get_all(self) -> dict[str, PresenterMetadata]:
        """
        Get all registered presenters.

        Returns:
            Dictionary of presenter_id -> metadata
        """
        return self._plugins.copy()

    def get_all_ids(self) -> list[str]:
        """Get all registered presenter IDs in registration order."""
        return list(self._plugins.keys())

    def is_registered(self, presenter_id: object) -> bool:
        """Check whether an identifier resolves to a registered presenter."""
        return isinstance(presenter_id, str) and presenter_id in self._plugins

    def create(self, presenter_id: str) -> "PresenterPlugin | None":
        """
        Construct a fresh presenter for an identifier.

        Args:
            presenter_id: Presenter ID

        Returns:
            New presenter instance, or None when the identifier is unknown.
            Exceptions raised by the presenter's constructor propagate.
        """
        if not self.is_registered(presenter_id):
            return None
        return self._plugins[presenter_id].plugin_class()

    def instantiate(self, presenter_ids: Iterable[str]) -> "list[PresenterPlugin]":
        """
        Construct presenters for an ordered list of identifiers.

        Identifiers without a registered presenter (for example ones added by
        an extension for an add-on that is not installed) are skipped.

        Args:
            presenter_ids: Ordered presenter IDs

        Returns:
            Presenter instances, in the order of the surviving identifiers
        """
        presenters = []
        for presenter_id in presenter_ids:
            presenter = self.create(presenter_id)
            if presenter is None:
                logger.debug(f"Skipping unknown presenter: {presenter_id!r}")
                continue
            presenters.append(presenter)
        return presenters


# Global registry instance
registry = PresenterRegistry()
