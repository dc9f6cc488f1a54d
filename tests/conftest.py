"""Shared fixtures for head pipeline tests."""

import pytest

from seo_head.core.config_manager import Options, SiteOptions
from seo_head.core.context import ContextMemoizer, PagePresentationProvider, PageRequest
from seo_head.core.frontend import FrontEnd
from seo_head.core.host import ConfiguredHost, HostConfig
from seo_head.utils.helpers import HelpersSurface
from seo_head.utils.replace_vars import ReplaceVars


class DictOptions(dict):
    """Mutable options store for tests that change settings mid-render."""


class StubHost:
    """Host whose answers can be changed between reads."""

    def __init__(self, theme_title_tag=False, permit_twitter=True):
        self.theme_title_tag = theme_title_tag
        self.permit_twitter = permit_twitter

    def theme_outputs_title_tag(self):
        return self.theme_title_tag

    def permits_twitter_card(self):
        return self.permit_twitter


@pytest.fixture
def site_options():
    """Site options with a site name and base URL."""
    return SiteOptions(website_name="Example", base_url="https://example.com")


@pytest.fixture
def build_front_end(site_options):
    """Factory for FrontEnd instances wired like the CLI wires them."""

    def build(options=None, host=None, **kwargs):
        options = options if options is not None else Options(site_options)
        host = host if host is not None else ConfiguredHost(HostConfig())
        memoizer = kwargs.pop("memoizer", None) or ContextMemoizer(
            PagePresentationProvider(options)
        )
        return FrontEnd(
            memoizer=memoizer,
            options=options,
            host=host,
            helpers=HelpersSurface(options=options),
            replace_vars=ReplaceVars(),
            **kwargs,
        )

    return build


@pytest.fixture
def post_request():
    """Request for a single post."""
    return PageRequest(
        page={
            "page_type": "Post_Type",
            "page_title": "Hello World",
            "meta_description": "A first post",
            "canonical": "https://example.com/hello-world/",
            "open_graph_article_author": "https://example.com/author/jane/",
            "open_graph_article_published_time": "2024-01-15T10:00:00+00:00",
            "twitter_creator": "jane",
            "open_graph_images": [
                {"url": "/uploads/hello.jpg", "width": 1200, "height": 630, "type": "image/jpeg"}
            ],
        }
    )


@pytest.fixture
def dict_options():
    """Factory for mutable options stores."""

    def build(**values):
        data = SiteOptions(website_name="Example").model_dump()
        data.update(values)
        return DictOptions(data)

    return build


@pytest.fixture
def stub_host():
    """Factory for hosts with changeable answers."""
    return StubHost
