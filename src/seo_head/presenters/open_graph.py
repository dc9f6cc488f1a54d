"""Open Graph presenters (og:*, article:*, fb:app_id)."""

from markupsafe import escape

from ..constants import HEAD_INDENT, HEAD_LINE_BREAK
from ..core import catalogue
from ..core.registry import registry
from .base import MetaPropertyPresenter


class _OpenGraphPresenter(MetaPropertyPresenter):
    field_name = ""
    substitutes = False  # Whether %%variables%% are replaced in the value

    def get(self) -> str:
        value = getattr(self.presentation, self.field_name)
        if self.substitutes:
            value = self.helpers.string.strip_all_tags(self.substitute(value))
        return value


@registry.register
class LocalePresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_LOCALE
    name = "OG locale"
    description = "og:locale"
    key = "og:locale"
    field_name = "open_graph_locale"


@registry.register
class TypePresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_TYPE
    name = "OG type"
    description = "og:type"
    key = "og:type"
    field_name = "open_graph_type"


@registry.register
class TitlePresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_TITLE
    name = "OG title"
    description = "og:title"
    key = "og:title"
    field_name = "open_graph_title"
    substitutes = True


@registry.register
class DescriptionPresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_DESCRIPTION
    name = "OG description"
    description = "og:description"
    key = "og:description"
    field_name = "open_graph_description"
    substitutes = True


@registry.register
class UrlPresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_URL
    name = "OG URL"
    description = "og:url"
    key = "og:url"
    field_name = "open_graph_url"

    def get(self) -> str:
        base_url = self.helpers.options.get("base_url", "")
        return self.helpers.url.ensure_absolute(super().get(), base_url)


@registry.register
class SiteNamePresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_SITE_NAME
    name = "OG site name"
    description = "og:site_name"
    key = "og:site_name"
    field_name = "open_graph_site_name"


@registry.register
class ArticlePublisherPresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_ARTICLE_PUBLISHER
    name = "Article publisher"
    description = "article:publisher"
    key = "article:publisher"
    field_name = "open_graph_article_publisher"


@registry.register
class ArticleAuthorPresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_ARTICLE_AUTHOR
    name = "Article author"
    description = "article:author"
    key = "article:author"
    field_name = "open_graph_article_author"


@registry.register
class ArticlePublishedTimePresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_ARTICLE_PUBLISHED_TIME
    name = "Article published time"
    description = "article:published_time"
    key = "article:published_time"
    field_name = "open_graph_article_published_time"


@registry.register
class ArticleModifiedTimePresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_ARTICLE_MODIFIED_TIME
    name = "Article modified time"
    description = "article:modified_time"
    key = "article:modified_time"
    field_name = "open_graph_article_modified_time"


@registry.register
class FbAppIdPresenter(_OpenGraphPresenter):
    presenter_id = catalogue.OG_FB_APP_ID
    name = "Facebook app ID"
    description = "fb:app_id"
    key = "fb:app_id"
    field_name = "open_graph_fb_app_id"


@registry.register
class ImagePresenter(MetaPropertyPresenter):
    """
    Presents every og:image of the page.

    Each image gets og:image plus og:image:width, og:image:height and
    og:image:type when known. Lines after the first are indented to line up
    inside the head.
    """

    presenter_id = catalogue.OG_IMAGE
    name = "OG image"
    description = "og:image (+ width, height, type)"
    key = "og:image"

    def get(self) -> list:
        return list(self.presentation.open_graph_images)

    def present(self) -> str:
        base_url = self.helpers.options.get("base_url", "")
        lines = []
        for image in self.get():
            url = self.helpers.url.ensure_absolute(image.url, base_url)
            if not url:
                continue
            lines.append(self.tag_format.format(key="og:image", value=escape(url)))
            for attr in ("width", "height", "type"):
                value = getattr(image, attr)
                if value:
                    lines.append(
                        self.tag_format.format(key=f"og:image:{attr}", value=escape(str(value)))
                    )
        return (HEAD_LINE_BREAK + HEAD_INDENT).join(lines)
