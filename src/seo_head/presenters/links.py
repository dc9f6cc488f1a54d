"""Indexing directive presenters (<link rel=...>)."""

from ..core.catalogue import CANONICAL, REL_NEXT, REL_PREV
from ..core.registry import registry
from .base import LinkPresenter


class _UrlLinkPresenter(LinkPresenter):
    field_name = ""

    def get(self) -> str:
        url = getattr(self.presentation, self.field_name)
        base_url = self.helpers.options.get("base_url", "")
        return self.helpers.url.ensure_absolute(url, base_url)


@registry.register
class CanonicalPresenter(_UrlLinkPresenter):
    presenter_id = CANONICAL
    name = "Canonical"
    description = '<link rel="canonical">'
    key = "canonical"
    field_name = "canonical"


@registry.register
class RelPrevPresenter(_UrlLinkPresenter):
    presenter_id = REL_PREV
    name = "Previous page"
    description = '<link rel="prev">'
    key = "prev"
    field_name = "rel_prev"


@registry.register
class RelNextPresenter(_UrlLinkPresenter):
    presenter_id = REL_NEXT
    name = "Next page"
    description = '<link rel="next">'
    key = "next"
    field_name = "rel_next"
