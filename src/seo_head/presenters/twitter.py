"""Twitter card presenters (twitter:*)."""

from ..core import catalogue
from ..core.registry import registry
from .base import AbstractTagPresenter


class _TwitterPresenter(AbstractTagPresenter):
    field_name = ""
    substitutes = False

    def get(self) -> str:
        value = getattr(self.presentation, self.field_name)
        if self.substitutes:
            value = self.helpers.string.strip_all_tags(self.substitute(value))
        return value


class _HandlePresenter(_TwitterPresenter):
    """Twitter handles are output with a leading @."""

    def get(self) -> str:
        handle = super().get().strip()
        if not handle:
            return ""
        return handle if handle.startswith("@") else f"@{handle}"


@registry.register
class CardPresenter(_TwitterPresenter):
    presenter_id = catalogue.TWITTER_CARD
    name = "Twitter card"
    description = "twitter:card"
    key = "twitter:card"
    field_name = "twitter_card"


@registry.register
class TitlePresenter(_TwitterPresenter):
    presenter_id = catalogue.TWITTER_TITLE
    name = "Twitter title"
    description = "twitter:title"
    key = "twitter:title"
    field_name = "twitter_title"
    substitutes = True


@registry.register
class DescriptionPresenter(_TwitterPresenter):
    presenter_id = catalogue.TWITTER_DESCRIPTION
    name = "Twitter description"
    description = "twitter:description"
    key = "twitter:description"
    field_name = "twitter_description"
    substitutes = True


@registry.register
class ImagePresenter(_TwitterPresenter):
    presenter_id = catalogue.TWITTER_IMAGE
    name = "Twitter image"
    description = "twitter:image"
    key = "twitter:image"
    field_name = "twitter_image"

    def get(self) -> str:
        base_url = self.helpers.options.get("base_url", "")
        return self.helpers.url.ensure_absolute(super().get(), base_url)


@registry.register
class CreatorPresenter(_HandlePresenter):
    presenter_id = catalogue.TWITTER_CREATOR
    name = "Twitter creator"
    description = "twitter:creator"
    key = "twitter:creator"
    field_name = "twitter_creator"


@registry.register
class SitePresenter(_HandlePresenter):
    presenter_id = catalogue.TWITTER_SITE
    name = "Twitter site"
    description = "twitter:site"
    key = "twitter:site"
    field_name = "twitter_site"
