"""Shared, read-only helpers handed to every presenter."""

import re
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from typing import Any
from urllib.parse import urljoin, urlparse

from ..constants import PRODUCT_NAME, PRODUCT_URL

_TAG_RE = re.compile(r"<[^>]*>")
_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


class StringHelper:
    """Text clean-up used by presenters."""

    @staticmethod
    def strip_all_tags(text: str) -> str:
        """Remove markup, including the content of script and style elements."""
        text = _SCRIPT_STYLE_RE.sub("", text)
        return _TAG_RE.sub("", text).strip()

    @staticmethod
    def standardize_whitespace(text: str) -> str:
        """Collapse whitespace runs to single spaces."""
        return _WHITESPACE_RE.sub(" ", text).strip()


class UrlHelper:
    """URL checks used by presenters."""

    @staticmethod
    def is_relative(url: str) -> bool:
        """True for URLs without a scheme and host (e.g. "/about")."""
        parsed = urlparse(url)
        return not parsed.scheme and not parsed.netloc

    def ensure_absolute(self, url: str, base_url: str) -> str:
        """Resolve a relative URL against the site's base URL."""
        if not url or not base_url or not self.is_relative(url):
            return url
        return urljoin(base_url.rstrip("/") + "/", url.lstrip("/"))


def get_product_version() -> str:
    """Installed package version, or "dev" when running from a checkout."""
    try:
        return version(PRODUCT_NAME)
    except PackageNotFoundError:
        return "dev"


@dataclass(frozen=True)
class HelpersSurface:
    """Bundle of helpers shared by all presenters of a request."""

    options: Any
    string: StringHelper = field(default_factory=StringHelper)
    url: UrlHelper = field(default_factory=UrlHelper)
    product_name: str = PRODUCT_NAME
    product_url: str = PRODUCT_URL
    product_version: str = field(default_factory=get_product_version)
