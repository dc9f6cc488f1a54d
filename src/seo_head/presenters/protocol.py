"""Protocol definitions for head presenters.

This module defines the core protocols for the presenter plugin system.
All presenters must implement the PresenterPlugin protocol.
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class VerbosityLevel(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"
    DEBUG = "debug"

    def __ge__(self, other):
        """Allow >= comparison for verbosity filtering."""
        if not isinstance(other, VerbosityLevel):
            return NotImplemented
        levels = list(VerbosityLevel)
        return levels.index(self) >= levels.index(other)

    def __gt__(self, other):
        """Allow > comparison for verbosity filtering."""
        if not isinstance(other, VerbosityLevel):
            return NotImplemented
        levels = list(VerbosityLevel)
        return levels.index(self) > levels.index(other)


@runtime_checkable
class PresenterPlugin(Protocol):
    """
    Protocol that all presenter plugins must implement.

    A presenter renders one piece of page metadata, or nothing when the
    current page has no value for it. Instances are created fresh for every
    request and bound to the request's presentation before rendering.

    Example:
        @registry.register
        class CanonicalPresenter(AbstractPresenter):
            presenter_id = "canonical"
            name = "Canonical URL"
            description = "<link rel=canonical>"

            def get(self) -> str:
                return self.presentation.canonical

            def present(self) -> str:
                ...
    """

    # Required class attributes (metadata)
    presenter_id: str  # Catalogue identifier: "title", "open_graph.url"
    name: str  # Display name: "Title"
    description: str  # Short description

    # Bound by the coordinator before present() is called
    presentation: Any
    helpers: Any
    replace_vars: Any

    @abstractmethod
    def present(self) -> str:
        """
        Render the tag.

        Returns:
            Markup for this tag, or an empty string when not applicable
        """
        ...

    @abstractmethod
    def get(self) -> Any:
        """
        Get the raw value this presenter renders.

        Returns:
            Raw value taken from the bound presentation
        """
        ...
