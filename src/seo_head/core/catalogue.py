"""Catalogue of presenter identifiers grouped into categories.

Category lists are ordered. The selector concatenates them in a fixed order
and never reorders the identifiers inside a category.
"""

from dataclasses import dataclass, fields

# Presenter identifiers
DEBUG_MARKER_OPEN = "debug.marker_open"
TITLE = "title"
META_DESCRIPTION = "meta_description"
ROBOTS = "robots"
GOOGLEBOT = "googlebot"
CANONICAL = "canonical"
REL_PREV = "rel_prev"
REL_NEXT = "rel_next"
OG_LOCALE = "open_graph.locale"
OG_TYPE = "open_graph.type"
OG_TITLE = "open_graph.title"
OG_DESCRIPTION = "open_graph.description"
OG_URL = "open_graph.url"
OG_SITE_NAME = "open_graph.site_name"
OG_ARTICLE_PUBLISHER = "open_graph.article_publisher"
OG_ARTICLE_AUTHOR = "open_graph.article_author"
OG_ARTICLE_PUBLISHED_TIME = "open_graph.article_published_time"
OG_ARTICLE_MODIFIED_TIME = "open_graph.article_modified_time"
OG_IMAGE = "open_graph.image"
OG_FB_APP_ID = "open_graph.fb_app_id"
TWITTER_CARD = "twitter.card"
TWITTER_TITLE = "twitter.title"
TWITTER_DESCRIPTION = "twitter.description"
TWITTER_IMAGE = "twitter.image"
TWITTER_CREATOR = "twitter.creator"
TWITTER_SITE = "twitter.site"
SCHEMA = "schema"
DEBUG_MARKER_CLOSE = "debug.marker_close"


@dataclass(frozen=True)
class PresenterCatalogue:
    """
    Ordered presenter identifier lists, one per category.

    ``open_graph_error`` and ``singular_only`` overlap other categories:
    they describe subsets used for error pages and for filtering
    non-singular pages.
    """

    base: tuple[str, ...]
    indexing_directives: tuple[str, ...]
    open_graph: tuple[str, ...]
    open_graph_error: tuple[str, ...]
    twitter_card: tuple[str, ...]
    singular_only: tuple[str, ...]
    closing: tuple[str, ...]

    @classmethod
    def category_names(cls) -> list[str]:
        """Get category names in catalogue order."""
        return [f.name for f in fields(cls)]

    def category(self, name: str) -> tuple[str, ...]:
        """
        Get the identifiers of a category.

        Raises:
            KeyError: If the category does not exist
        """
        if name not in self.category_names():
            raise KeyError(f"Unknown presenter category: {name}")
        return getattr(self, name)

    def categories_of(self, presenter_id: str) -> list[str]:
        """Get every category an identifier belongs to, in catalogue order."""
        return [name for name in self.category_names() if presenter_id in getattr(self, name)]

    def all_ids(self) -> list[str]:
        """Get every catalogued identifier once, in first-seen order."""
        seen: dict[str, None] = {}
        for name in self.category_names():
            for presenter_id in getattr(self, name):
                seen.setdefault(presenter_id, None)
        return list(seen)


CATALOGUE = PresenterCatalogue(
    base=(DEBUG_MARKER_OPEN, TITLE, META_DESCRIPTION, ROBOTS, GOOGLEBOT),
    indexing_directives=(CANONICAL, REL_PREV, REL_NEXT),
    open_graph=(
        OG_LOCALE,
        OG_TYPE,
        OG_TITLE,
        OG_DESCRIPTION,
        OG_URL,
        OG_SITE_NAME,
        OG_ARTICLE_PUBLISHER,
        OG_ARTICLE_AUTHOR,
        OG_ARTICLE_PUBLISHED_TIME,
        OG_ARTICLE_MODIFIED_TIME,
        OG_IMAGE,
        OG_FB_APP_ID,
    ),
    open_graph_error=(OG_LOCALE, OG_TITLE, OG_SITE_NAME),
    twitter_card=(
        TWITTER_CARD,
        TWITTER_TITLE,
        TWITTER_DESCRIPTION,
        TWITTER_IMAGE,
        TWITTER_CREATOR,
        TWITTER_SITE,
    ),
    singular_only=(
        OG_ARTICLE_AUTHOR,
        OG_ARTICLE_PUBLISHER,
        OG_ARTICLE_PUBLISHED_TIME,
        OG_ARTICLE_MODIFIED_TIME,
        TWITTER_CREATOR,
    ),
    closing=(SCHEMA, DEBUG_MARKER_CLOSE),
)
