"""Per-request presentation context and its memoizer.

The context bundles the page classification with the computed presentation
values. It is built once per request and shared, unchanged, by every
consumer of that request (full head output and the title filter).
"""

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    DEFAULT_OG_LOCALE,
    DEFAULT_ROBOTS,
    DEFAULT_SEPARATOR,
    DEFAULT_TITLE_TEMPLATE,
    DEFAULT_TWITTER_CARD_TYPE,
    NOINDEX_ROBOTS,
    SCHEMA_CONTEXT,
)
from .ambient import QueryStack

if TYPE_CHECKING:
    from .config_manager import OptionsStore

logger = logging.getLogger(__name__)


class PageType(Enum):
    """Kind of page being rendered."""

    POST_TYPE = "Post_Type"
    STATIC_HOME_PAGE = "Static_Home_Page"
    HOME_PAGE = "Home_Page"
    STATIC_POSTS_PAGE = "Static_Posts_Page"
    POST_TYPE_ARCHIVE = "Post_Type_Archive"
    TERM_ARCHIVE = "Term_Archive"
    AUTHOR_ARCHIVE = "Author_Archive"
    DATE_ARCHIVE = "Date_Archive"
    SEARCH_RESULT_PAGE = "Search_Result_Page"
    ERROR_PAGE = "Error_Page"
    FALLBACK = "Fallback"


# Pages with a single piece of content and an author
SINGULAR_PAGE_TYPES = frozenset({PageType.POST_TYPE, PageType.STATIC_HOME_PAGE})

# Pages that should never be indexed
NOINDEX_PAGE_TYPES = frozenset({PageType.ERROR_PAGE, PageType.SEARCH_RESULT_PAGE})


class OpenGraphImage(BaseModel):
    """A single og:image with optional dimensions."""

    model_config = ConfigDict(frozen=True)

    url: str
    width: int | None = None
    height: int | None = None
    type: str | None = None


class PresentationValues(BaseModel):
    """Computed head values for one page."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = ""
    meta_description: str = ""
    robots: tuple[str, ...] = DEFAULT_ROBOTS
    googlebot: tuple[str, ...] = ()
    canonical: str = ""
    rel_prev: str = ""
    rel_next: str = ""

    open_graph_locale: str = ""
    open_graph_type: str = ""
    open_graph_title: str = ""
    open_graph_description: str = ""
    open_graph_url: str = ""
    open_graph_site_name: str = ""
    open_graph_article_publisher: str = ""
    open_graph_article_author: str = ""
    open_graph_article_published_time: str = ""
    open_graph_article_modified_time: str = ""
    open_graph_images: tuple[OpenGraphImage, ...] = ()
    open_graph_fb_app_id: str = ""

    twitter_card: str = ""
    twitter_title: str = ""
    twitter_description: str = ""
    twitter_image: str = ""
    twitter_creator: str = ""
    twitter_site: str = ""

    schema_graph: tuple[dict[str, Any], ...] = ()

    # %%name%% substitution variables for this page
    variables: dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True)
class PresentationContext:
    """Page classification + presentation values for the current request."""

    page_type: PageType
    presentation: PresentationValues


@dataclass
class PageRequest:
    """
    One page request.

    Holds the raw page data the presentation is computed from, an opaque
    token identifying the request, the request's ambient query and the
    presentation context once it has been computed for this request.
    """

    page: Mapping[str, Any] = field(default_factory=dict)
    token: str = field(default_factory=lambda: uuid.uuid4().hex)
    query: QueryStack = field(default_factory=QueryStack)
    context: PresentationContext | None = field(default=None, repr=False, compare=False)


class PresentationProvider(Protocol):
    """Computes the presentation context for a request."""

    def compute(self, request: PageRequest) -> PresentationContext: ...


class PagePresentationProvider:
    """
    Builds presentation values from raw page data and site options.

    Page data keys mirror the PresentationValues fields; missing social
    values fall back to their plain counterparts (og:title -> title,
    og:url -> canonical and so on). ``page_title`` feeds the %%title%%
    variable of the site title template when no explicit ``title`` is given.
    """

    def __init__(self, options: "OptionsStore"):
        self.options = options

    def compute(self, request: PageRequest) -> PresentationContext:
        """
        Compute the context for a request.

        Raises:
            ValueError: If the page type is missing or unknown
            pydantic.ValidationError: If page values have the wrong shape
        """
        page = dict(request.page)
        raw_type = page.get("page_type")
        if raw_type is None:
            raise ValueError("Page data has no page_type")
        page_type = PageType(raw_type)

        values = self._build_values(page_type, page)
        logger.debug(f"Computed presentation for {page_type.value} (request {request.token})")
        return PresentationContext(page_type=page_type, presentation=values)

    def _build_values(self, page_type: PageType, page: dict[str, Any]) -> PresentationValues:
        options = self.options
        site_name = options.get("website_name", "") or ""
        separator = options.get("separator", DEFAULT_SEPARATOR) or DEFAULT_SEPARATOR

        variables = {
            "title": page.get("page_title", ""),
            "sitename": site_name,
            "sep": separator,
            "excerpt": page.get("meta_description", ""),
            "page_type": page_type.value,
        }
        variables.update(page.get("variables", {}))

        title = page.get("title") or options.get("title_template", DEFAULT_TITLE_TEMPLATE)
        description = page.get("meta_description", "")
        canonical = page.get("canonical", "")

        if page_type in NOINDEX_PAGE_TYPES or page.get("noindex"):
            robots = NOINDEX_ROBOTS
        else:
            robots = DEFAULT_ROBOTS

        images = page.get("open_graph_images")
        if images is None:
            default_image = options.get("og_default_image", "")
            images = [{"url": default_image}] if default_image else []

        open_graph_type = "article" if page_type is PageType.POST_TYPE else "website"

        data = {
            "robots": robots,
            "open_graph_locale": options.get("og_locale", DEFAULT_OG_LOCALE),
            "open_graph_type": open_graph_type,
            "open_graph_site_name": site_name,
            "open_graph_fb_app_id": options.get("fbadminapp", ""),
            "twitter_card": options.get("twitter_card_type", DEFAULT_TWITTER_CARD_TYPE),
            "twitter_site": options.get("twitter_site", ""),
            **page,
            "title": title,
            "open_graph_images": images,
            "variables": variables,
        }
        data.setdefault("open_graph_title", title)
        data.setdefault("open_graph_description", description)
        data.setdefault("open_graph_url", canonical)
        data.setdefault("twitter_title", data["open_graph_title"])
        data.setdefault("twitter_description", data["open_graph_description"])
        if "twitter_image" not in data and images:
            data["twitter_image"] = images[0]["url"]
        if "schema_graph" not in data:
            data["schema_graph"] = self._web_page_graph(canonical, page.get("page_title", ""))

        return PresentationValues(**data)

    @staticmethod
    def _web_page_graph(canonical: str, name: str) -> tuple[dict[str, Any], ...]:
        """Minimal WebPage node; empty without a canonical URL."""
        if not canonical:
            return ()
        node = {"@type": "WebPage", "@id": canonical, "url": canonical}
        if name:
            node["name"] = name
        return ({"@context": SCHEMA_CONTEXT, **node},)


class ContextMemoizer:
    """
    Computes the context of a request on first access.

    The computed context is kept on the request itself, so the memoizer
    holds no per-request state and can be shared by concurrent requests.
    Later calls for the same request return the identical object, however
    other requests are interleaved with it.
    """

    def __init__(self, provider: PresentationProvider):
        self.provider = provider

    def for_current_page(self, request: PageRequest) -> PresentationContext:
        """
        Get the context for a request, computing it on first access.

        Provider errors propagate and leave nothing cached.
        """
        if request.context is None:
            request.context = self.provider.compute(request)
        return request.context

    @staticmethod
    def clear(request: PageRequest) -> None:
        """Forget the context cached on a request."""
        request.context = None
