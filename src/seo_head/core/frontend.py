"""Front-end head output.

Drives the presenter pipeline for a request:

    context (memoized) -> selection -> presenter id filters
        -> instantiation -> presenter filters -> bind + present

and offers the title filter, which reuses the same memoized context with
only the title presenter.
"""

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any, TextIO

from .. import presenters  # noqa: F401  # Triggers presenter registration
from ..constants import (
    AMP_HEAD_ACTION,
    AMP_HEAD_PRIORITY,
    HEAD_ACTION,
    HEAD_INDENT,
    HEAD_LINE_BREAK,
    PAGE_HEAD_ACTION,
    PAGE_HEAD_PRIORITY,
    PRESENT_HEAD_PRIORITY,
    TITLE_FILTER,
    TITLE_FILTER_PRIORITY,
)
from ..presenters.protocol import VerbosityLevel
from .actions import ActionHub
from .catalogue import CATALOGUE, TITLE, PresenterCatalogue
from .context import ContextMemoizer, PageRequest, PageType, PresentationContext
from .extensions import PRESENTER_IDS_FILTER, PRESENTERS_FILTER, ExtensionGateway
from .plan import PlanRow, PresenterPlan
from .registry import PresenterRegistry, registry
from .selector import Flags, OptionFlags, select_presenter_ids

if TYPE_CHECKING:
    from ..utils.helpers import HelpersSurface
    from ..utils.replace_vars import ReplaceVars
    from .config_manager import OptionsStore
    from .host import HostCapabilities

logger = logging.getLogger(__name__)


class FrontEnd:
    """
    Prints the SEO head of a page.

    One instance serves many requests; everything request-specific comes
    from the request being rendered and the context memoized on it.

    Example:
        front_end = FrontEnd(memoizer, options, host, helpers, replace_vars)
        front_end.register_hooks(actions)
        actions.do_action(PAGE_HEAD_ACTION, request, sys.stdout)
    """

    def __init__(
        self,
        memoizer: ContextMemoizer,
        options: "OptionsStore",
        host: "HostCapabilities",
        helpers: "HelpersSurface",
        replace_vars: "ReplaceVars",
        gateway: ExtensionGateway | None = None,
        presenter_registry: PresenterRegistry = registry,
        catalogue: PresenterCatalogue = CATALOGUE,
        title_presenter: Any = None,
        actions: ActionHub | None = None,
    ):
        self.memoizer = memoizer
        self.options = options
        self.host = host
        self.helpers = helpers
        self.replace_vars = replace_vars
        self.gateway = gateway or ExtensionGateway()
        self.registry = presenter_registry
        self.catalogue = catalogue
        self.title_presenter = title_presenter
        self.actions = actions or ActionHub()

    # ========================================================================
    # Hooks
    # ========================================================================

    def register_hooks(self, actions: ActionHub | None = None) -> None:
        """
        Hook head output into the host's actions.

        ``call_head`` runs on the host's page and AMP head actions,
        ``present_head`` runs first on our own head action, and
        ``title_filter`` replaces the text of the host's own <title> tag.
        """
        if actions is not None:
            self.actions = actions
        self.actions.add_action(PAGE_HEAD_ACTION, self.call_head, PAGE_HEAD_PRIORITY)
        self.actions.add_action(AMP_HEAD_ACTION, self.call_head, AMP_HEAD_PRIORITY)
        self.actions.add_action(HEAD_ACTION, self.present_head, PRESENT_HEAD_PRIORITY)
        self.actions.add_filter(TITLE_FILTER, self.title_filter, TITLE_FILTER_PRIORITY)

    def call_head(self, request: PageRequest, out: TextIO) -> None:
        """
        Fire the head action with the main query as current query.

        The query current before the call is restored afterwards, whatever
        the listeners did to it and whether or not they raised.
        """
        with request.query.preserved():
            request.query.reset()
            self.actions.do_action(HEAD_ACTION, request, out)

    # ========================================================================
    # Output
    # ========================================================================

    def filter_title(self, request: PageRequest) -> str:
        """
        Get the page title as bare text, for hosts that print <title> themselves.

        Uses the same memoized context as ``present_head``, so the text is
        identical to the content of the <title> tag printed there.

        Raises:
            LookupError: If no title presenter is injected or registered
        """
        presenter = self.title_presenter or self.registry.create(TITLE)
        if presenter is None:
            raise LookupError(f"No presenter registered for '{TITLE}'")
        context = self.memoizer.for_current_page(request)
        self._bind(presenter, context)
        return presenter.present(False)

    def title_filter(self, title: str, request: PageRequest) -> str:
        """
        Title filter callback: ignore the host's title and return ours.

        Registered on ``TITLE_FILTER``; hosts call
        ``actions.apply_filters(TITLE_FILTER, title, request)``.
        """
        return self.filter_title(request)

    def present_head(self, request: PageRequest, out: TextIO) -> None:
        """
        Write the output of every applicable presenter to ``out``.

        Each non-empty output goes on its own indented line; the block is
        surrounded by blank lines. Presenter errors propagate.
        """
        context = self.memoizer.for_current_page(request)
        presenters = self.get_presenters(context.page_type)

        out.write(HEAD_LINE_BREAK)
        for presenter in presenters:
            self._bind(presenter, context)
            output = presenter.present()
            if output:
                out.write(HEAD_INDENT + output + HEAD_LINE_BREAK)
        out.write(HEAD_LINE_BREAK + HEAD_LINE_BREAK)

    # ========================================================================
    # Presenter selection
    # ========================================================================

    def flags(self) -> Flags:
        """Live selection flags (every read goes to the store / host)."""
        return OptionFlags(self.options, self.host)

    def get_presenter_ids(self, page_type: PageType) -> list[str]:
        """
        Get the presenter identifiers that would run for a page type.

        This is exactly the list ``present_head`` instantiates: the
        selection after the ``frontend_presenter_ids`` filters.
        """
        presenter_ids = select_presenter_ids(page_type, self.flags(), self.catalogue)
        return self.gateway.apply_filters(PRESENTER_IDS_FILTER, presenter_ids)

    def get_presenters(self, page_type: PageType) -> list[Any]:
        """
        Get fresh presenter instances for a page type.

        Unknown identifiers are skipped; the ``frontend_presenters`` filters
        get the instances before they are bound.
        """
        presenters = self.registry.instantiate(self.get_presenter_ids(page_type))
        return self.gateway.apply_filters(PRESENTERS_FILTER, presenters)

    def explain(
        self,
        page_type: PageType,
        verbosity: VerbosityLevel = VerbosityLevel.NORMAL,
    ) -> PresenterPlan:
        """
        Describe which presenters a page type gets.

        Args:
            page_type: Page classification
            verbosity: VERBOSE or higher also lists catalogue entries that
                were not selected

        Returns:
            Presenter plan in output order
        """
        flags = OptionFlags(self.options, self.host).snapshot()
        presenter_ids = self.get_presenter_ids(page_type)

        plan = PresenterPlan(page_type=page_type.value, flags=asdict(flags))
        for presenter_id in presenter_ids:
            status = "run" if self.registry.is_registered(presenter_id) else "unresolved"
            plan.rows.append(
                PlanRow(
                    presenter_id=presenter_id,
                    categories=self.catalogue.categories_of(presenter_id),
                    status=status,
                )
            )

        if verbosity >= VerbosityLevel.VERBOSE:
            for presenter_id in self.catalogue.all_ids():
                if presenter_id not in presenter_ids:
                    plan.rows.append(
                        PlanRow(
                            presenter_id=presenter_id,
                            categories=self.catalogue.categories_of(presenter_id),
                            status="excluded",
                            verbosity=VerbosityLevel.VERBOSE,
                        )
                    )
        return plan

    def _bind(self, presenter: Any, context: PresentationContext) -> None:
        """Give a presenter the request's presentation and the shared helpers."""
        presenter.presentation = context.presentation
        presenter.helpers = self.helpers
        presenter.replace_vars = self.replace_vars
