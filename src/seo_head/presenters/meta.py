"""Presenters for plain <meta name=...> tags."""

from ..core.catalogue import GOOGLEBOT, META_DESCRIPTION, ROBOTS
from ..core.registry import registry
from .base import AbstractTagPresenter


@registry.register
class MetaDescriptionPresenter(AbstractTagPresenter):
    """Meta description, with %%variables%% substituted and markup removed."""

    presenter_id = META_DESCRIPTION
    name = "Meta description"
    description = '<meta name="description">'
    key = "description"

    def get(self) -> str:
        text = self.substitute(self.presentation.meta_description)
        return self.helpers.string.strip_all_tags(text)


class _DirectivesPresenter(AbstractTagPresenter):
    def get(self) -> str:
        directives = getattr(self.presentation, self.key)
        return ", ".join(directive for directive in directives if directive)


@registry.register
class RobotsPresenter(_DirectivesPresenter):
    presenter_id = ROBOTS
    name = "Robots"
    description = '<meta name="robots">'
    key = "robots"


@registry.register
class GooglebotPresenter(_DirectivesPresenter):
    presenter_id = GOOGLEBOT
    name = "Googlebot"
    description = '<meta name="googlebot">'
    key = "googlebot"
