"""Ambient request state that listeners may change while the head is printed."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

logger = logging.getLogger(__name__)


class QueryStack:
    """
    The request's "current query" and its main query.

    Templates and widgets may swap the current query while a page is being
    built. Code that fires head listeners wraps the call in ``preserved()``
    so whatever a listener does to the query is undone afterwards.
    """

    def __init__(self, main: Any = None):
        self.main = main
        self.current = main

    def replace(self, query: Any) -> None:
        """Make another query the current one."""
        self.current = query

    def reset(self) -> None:
        """Make the main query current again."""
        self.current = self.main

    @contextmanager
    def preserved(self) -> Iterator["QueryStack"]:
        """Save the current query and restore it on exit, even on error."""
        saved = self.current
        try:
            yield self
        finally:
            if self.current is not saved:
                logger.debug("Restoring query changed during head output")
            self.current = saved
