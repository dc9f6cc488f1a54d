"""Tests for presentation values and the per-request memoizer."""

import pytest

from seo_head.constants import DEFAULT_ROBOTS, NOINDEX_ROBOTS
from seo_head.core.config_manager import Options, SiteOptions
from seo_head.core.context import (
    ContextMemoizer,
    PagePresentationProvider,
    PageRequest,
    PageType,
    PresentationContext,
    PresentationValues,
)


class CountingProvider:
    """Provider that counts how often it computes."""

    def __init__(self, fail=False):
        self.calls = 0
        self.fail = fail

    def compute(self, request):
        self.calls += 1
        if self.fail:
            raise RuntimeError("provider failed")
        return PresentationContext(
            page_type=PageType(request.page["page_type"]),
            presentation=PresentationValues(title=request.page.get("title", "")),
        )


@pytest.fixture
def provider():
    options = Options(
        SiteOptions(
            website_name="Example",
            og_default_image="https://example.com/default.png",
            fbadminapp="12345",
            twitter_site="example",
        )
    )
    return PagePresentationProvider(options)


# ============================================================================
# Presentation Provider
# ============================================================================


class TestPagePresentationProvider:
    """Test computing presentation values from page data."""

    def test_page_type(self, provider):
        context = provider.compute(PageRequest(page={"page_type": "Term_Archive"}))
        assert context.page_type is PageType.TERM_ARCHIVE

    def test_missing_page_type(self, provider):
        with pytest.raises(ValueError, match="page_type"):
            provider.compute(PageRequest(page={}))

    def test_unknown_page_type(self, provider):
        with pytest.raises(ValueError):
            provider.compute(PageRequest(page={"page_type": "Nope"}))

    def test_title_from_template(self, provider):
        context = provider.compute(
            PageRequest(page={"page_type": "Post_Type", "page_title": "Hello"})
        )
        values = context.presentation
        assert values.title == "%%title%% %%sep%% %%sitename%%"
        assert values.variables["title"] == "Hello"
        assert values.variables["sitename"] == "Example"
        assert values.variables["sep"] == "-"

    def test_explicit_title_wins(self, provider):
        context = provider.compute(PageRequest(page={"page_type": "Post_Type", "title": "Own"}))
        assert context.presentation.title == "Own"

    def test_robots(self, provider):
        post = provider.compute(PageRequest(page={"page_type": "Post_Type"}))
        search = provider.compute(PageRequest(page={"page_type": "Search_Result_Page"}))
        hidden = provider.compute(PageRequest(page={"page_type": "Post_Type", "noindex": True}))

        assert post.presentation.robots == DEFAULT_ROBOTS
        assert search.presentation.robots == NOINDEX_ROBOTS
        assert hidden.presentation.robots == NOINDEX_ROBOTS

    def test_social_fallbacks(self, provider):
        context = provider.compute(
            PageRequest(
                page={
                    "page_type": "Post_Type",
                    "title": "Title",
                    "meta_description": "Description",
                    "canonical": "https://example.com/post/",
                }
            )
        )
        values = context.presentation
        assert values.open_graph_title == "Title"
        assert values.open_graph_description == "Description"
        assert values.open_graph_url == "https://example.com/post/"
        assert values.twitter_title == "Title"
        assert values.twitter_description == "Description"
        assert values.open_graph_type == "article"
        assert values.open_graph_site_name == "Example"
        assert values.open_graph_fb_app_id == "12345"
        assert values.twitter_site == "example"

    def test_default_image(self, provider):
        context = provider.compute(PageRequest(page={"page_type": "Home_Page"}))
        values = context.presentation
        assert [image.url for image in values.open_graph_images] == [
            "https://example.com/default.png"
        ]
        assert values.twitter_image == "https://example.com/default.png"
        assert values.open_graph_type == "website"

    def test_page_values_override_options(self, provider):
        context = provider.compute(
            PageRequest(page={"page_type": "Home_Page", "open_graph_locale": "cs_CZ"})
        )
        assert context.presentation.open_graph_locale == "cs_CZ"

    def test_schema_graph_needs_canonical(self, provider):
        without = provider.compute(PageRequest(page={"page_type": "Home_Page"}))
        with_url = provider.compute(
            PageRequest(
                page={
                    "page_type": "Home_Page",
                    "page_title": "Home",
                    "canonical": "https://example.com/",
                }
            )
        )
        assert without.presentation.schema_graph == ()
        node = with_url.presentation.schema_graph[0]
        assert node["@type"] == "WebPage"
        assert node["url"] == "https://example.com/"
        assert node["name"] == "Home"

    def test_values_are_frozen(self, provider):
        context = provider.compute(PageRequest(page={"page_type": "Home_Page"}))
        with pytest.raises(Exception):
            context.presentation.title = "changed"


# ============================================================================
# Memoizer
# ============================================================================


class TestContextMemoizer:
    """Test per-request memoization."""

    def test_computed_once_per_request(self):
        provider = CountingProvider()
        memoizer = ContextMemoizer(provider)
        request = PageRequest(page={"page_type": "Post_Type", "title": "A"})

        first = memoizer.for_current_page(request)
        second = memoizer.for_current_page(request)

        assert first is second
        assert provider.calls == 1

    def test_other_request_gets_its_own_context(self):
        provider = CountingProvider()
        memoizer = ContextMemoizer(provider)
        first = memoizer.for_current_page(
            PageRequest(page={"page_type": "Post_Type", "title": "A"})
        )
        second = memoizer.for_current_page(
            PageRequest(page={"page_type": "Post_Type", "title": "B"})
        )

        assert first is not second
        assert second.presentation.title == "B"
        assert provider.calls == 2

    def test_interleaved_requests_keep_identity(self):
        """A request keeps its context while other requests are served."""
        provider = CountingProvider()
        memoizer = ContextMemoizer(provider)
        request_a = PageRequest(page={"page_type": "Post_Type", "title": "A"})
        request_b = PageRequest(page={"page_type": "Term_Archive", "title": "B"})

        first_a = memoizer.for_current_page(request_a)
        first_b = memoizer.for_current_page(request_b)
        again_a = memoizer.for_current_page(request_a)
        again_b = memoizer.for_current_page(request_b)

        assert again_a is first_a
        assert again_b is first_b
        assert again_a.presentation.title == "A"
        assert provider.calls == 2

    def test_context_kept_on_request(self):
        memoizer = ContextMemoizer(CountingProvider())
        request = PageRequest(page={"page_type": "Post_Type"})

        context = memoizer.for_current_page(request)

        assert request.context is context
        assert "context" not in repr(request)

    def test_provider_error_propagates_and_nothing_cached(self):
        provider = CountingProvider(fail=True)
        memoizer = ContextMemoizer(provider)
        request = PageRequest(page={"page_type": "Post_Type"})

        with pytest.raises(RuntimeError, match="provider failed"):
            memoizer.for_current_page(request)
        assert request.context is None

        provider.fail = False
        memoizer.for_current_page(request)
        assert provider.calls == 2

    def test_clear(self):
        provider = CountingProvider()
        memoizer = ContextMemoizer(provider)
        request = PageRequest(page={"page_type": "Post_Type"})
        other = PageRequest(page={"page_type": "Post_Type"})

        memoizer.for_current_page(request)
        kept = memoizer.for_current_page(other)
        memoizer.clear(request)
        memoizer.for_current_page(request)

        assert provider.calls == 3
        assert memoizer.for_current_page(other) is kept

    def test_requests_get_distinct_tokens(self):
        assert PageRequest().token != PageRequest().token
