"""Base classes for all presenters."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from markupsafe import escape

if TYPE_CHECKING:
    from ..core.context import PresentationValues
    from ..utils.helpers import HelpersSurface
    from ..utils.replace_vars import ReplaceVars


class AbstractPresenter(ABC):
    """
    Abstract base class for all head presenters.

    The coordinator binds ``presentation``, ``helpers`` and ``replace_vars``
    before calling ``present()``. A presenter is built fresh for each request
    and thrown away after rendering.
    """

    presenter_id: ClassVar[str]
    name: ClassVar[str]
    description: ClassVar[str]

    def __init__(self) -> None:
        self.presentation: "PresentationValues | None" = None
        self.helpers: "HelpersSurface | None" = None
        self.replace_vars: "ReplaceVars | None" = None

    @abstractmethod
    def present(self) -> str:
        """
        Render this presenter's markup.

        Returns:
            Markup, or an empty string when there is nothing to output
        """
        pass

    @abstractmethod
    def get(self) -> Any:
        """
        Get the raw value from the bound presentation.

        Returns:
            Value this presenter renders
        """
        pass

    def substitute(self, text: str) -> str:
        """Replace %%variables%% in text using the shared substitution helper."""
        if not text or self.replace_vars is None:
            return text
        return self.replace_vars.replace(text, self.presentation.variables)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.presenter_id!r}>"


class AbstractTagPresenter(AbstractPresenter):
    """
    Base class for presenters that output a single tag.

    Subclasses set ``key`` and ``tag_format`` and implement ``get()``.
    The value is escaped before being placed into the template.
    """

    key: ClassVar[str] = ""
    tag_format: ClassVar[str] = '<meta name="{key}" content="{value}" />'

    def present(self) -> str:
        value = self.get()
        if not value:
            return ""
        return self.tag_format.format(key=self.key, value=escape(value))


class MetaPropertyPresenter(AbstractTagPresenter):
    """Tag presenter for ``<meta property=...>`` tags (Open Graph and friends)."""

    tag_format: ClassVar[str] = '<meta property="{key}" content="{value}" />'


class LinkPresenter(AbstractTagPresenter):
    """Tag presenter for ``<link rel=... href=...>`` tags."""

    tag_format: ClassVar[str] = '<link rel="{key}" href="{value}" />'
