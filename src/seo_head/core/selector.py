"""Presenter selection: page type + settings -> ordered presenter identifiers."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ..constants import OPTION_FORCE_REWRITE_TITLE, OPTION_OPENGRAPH, OPTION_TWITTER
from .catalogue import CATALOGUE, TITLE, PresenterCatalogue
from .context import SINGULAR_PAGE_TYPES, PageType

if TYPE_CHECKING:
    from .config_manager import OptionsStore
    from .host import HostCapabilities

logger = logging.getLogger(__name__)


class Flags(Protocol):
    """Boolean settings read while selecting presenters."""

    opengraph: bool
    twitter_card: bool
    twitter_card_permitted: bool
    theme_outputs_title_tag: bool
    force_rewrite_title: bool


@dataclass(frozen=True)
class SelectionFlags:
    """Fixed snapshot of selection settings."""

    opengraph: bool = True
    twitter_card: bool = True
    twitter_card_permitted: bool = True
    theme_outputs_title_tag: bool = False
    force_rewrite_title: bool = False


class OptionFlags:
    """
    Live view of selection settings.

    Every attribute access reads the settings store or asks the host again.
    Nothing is snapshotted, so code that changes a setting between two reads
    of the same render (an extension callback, say) is observed by the
    later read.
    """

    def __init__(self, options: "OptionsStore", host: "HostCapabilities"):
        self._options = options
        self._host = host

    @property
    def opengraph(self) -> bool:
        return self._options.get(OPTION_OPENGRAPH, False) is True

    @property
    def twitter_card(self) -> bool:
        return self._options.get(OPTION_TWITTER, False) is True

    @property
    def twitter_card_permitted(self) -> bool:
        return self._host.permits_twitter_card() is not False

    @property
    def theme_outputs_title_tag(self) -> bool:
        return bool(self._host.theme_outputs_title_tag())

    @property
    def force_rewrite_title(self) -> bool:
        return bool(self._options.get(OPTION_FORCE_REWRITE_TITLE, False))

    def snapshot(self) -> SelectionFlags:
        """Read every flag once."""
        return SelectionFlags(
            opengraph=self.opengraph,
            twitter_card=self.twitter_card,
            twitter_card_permitted=self.twitter_card_permitted,
            theme_outputs_title_tag=self.theme_outputs_title_tag,
            force_rewrite_title=self.force_rewrite_title,
        )


def _without(presenter_ids: list[str], excluded) -> list[str]:
    """Set difference that keeps the order of the surviving identifiers."""
    excluded = set(excluded)
    return [presenter_id for presenter_id in presenter_ids if presenter_id not in excluded]


def presenter_ids_for_page_type(
    page_type: PageType,
    flags: Flags,
    catalogue: PresenterCatalogue = CATALOGUE,
) -> list[str]:
    """
    Compose category lists for a page type.

    Error pages get base, the Open Graph error subset (when Open Graph is
    enabled) and closing presenters. Every other page gets base, indexing
    directives, Open Graph, Twitter and closing presenters, minus the
    singular-only presenters unless the page is singular.

    Args:
        page_type: Page classification
        flags: Selection settings
        catalogue: Presenter catalogue to compose from

    Returns:
        Ordered presenter identifiers
    """
    if page_type is PageType.ERROR_PAGE:
        presenter_ids = list(catalogue.base)
        if flags.opengraph:
            presenter_ids += catalogue.open_graph_error
        return presenter_ids + list(catalogue.closing)

    presenter_ids = list(catalogue.base) + list(catalogue.indexing_directives)
    if flags.opengraph:
        presenter_ids += catalogue.open_graph
    if flags.twitter_card and flags.twitter_card_permitted:
        presenter_ids += catalogue.twitter_card
    presenter_ids += catalogue.closing

    if page_type not in SINGULAR_PAGE_TYPES:
        presenter_ids = _without(presenter_ids, catalogue.singular_only)

    return presenter_ids


def select_presenter_ids(
    page_type: PageType,
    flags: Flags,
    catalogue: PresenterCatalogue = CATALOGUE,
) -> list[str]:
    """
    Select the presenters needed for a page.

    Same inputs always give the same ordered list; the base selection never
    contains duplicates. The title presenter is dropped when the theme
    prints its own <title> tag, unless title rewriting is forced.

    Args:
        page_type: Page classification
        flags: Selection settings
        catalogue: Presenter catalogue to compose from

    Returns:
        Ordered presenter identifiers, before extension filters
    """
    presenter_ids = presenter_ids_for_page_type(page_type, flags, catalogue)

    if flags.theme_outputs_title_tag and not flags.force_rewrite_title:
        # The theme already prints a <title>, don't output a second one
        presenter_ids = _without(presenter_ids, [TITLE])

    logger.debug(f"Selected {len(presenter_ids)} presenter(s) for {page_type.value}")
    return presenter_ids
