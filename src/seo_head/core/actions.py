"""Named actions and value filters with prioritised listeners."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..constants import DEFAULT_ACTION_PRIORITY

logger = logging.getLogger(__name__)


@dataclass
class _Listener:
    priority: int
    order: int
    callback: Callable[..., Any]


class ActionHub:
    """
    Dispatches named actions to listeners.

    Listeners run in ascending priority; listeners with the same priority
    run in the order they were added. Listener exceptions propagate.
    """

    def __init__(self):
        self._listeners: dict[str, list[_Listener]] = {}
        self._counter = 0

    def add_action(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_ACTION_PRIORITY,
    ) -> None:
        """Add a listener to an action."""
        self._counter += 1
        self._listeners.setdefault(name, []).append(_Listener(priority, self._counter, callback))

    def remove_action(self, name: str, callback: Callable[..., Any]) -> bool:
        """
        Remove every registration of a listener from an action.

        Returns:
            True if anything was removed
        """
        listeners = self._listeners.get(name, [])
        kept = [listener for listener in listeners if listener.callback != callback]
        self._listeners[name] = kept
        return len(kept) != len(listeners)

    def has_action(self, name: str, callback: Callable[..., Any] | None = None) -> bool:
        """Check whether an action has listeners (or this particular listener)."""
        listeners = self._listeners.get(name, [])
        if callback is None:
            return bool(listeners)
        return any(listener.callback == callback for listener in listeners)

    def do_action(self, name: str, *args: Any) -> None:
        """Call every listener of an action."""
        listeners = self._sorted(name)
        logger.debug(f"Action '{name}': {len(listeners)} listener(s)")
        for listener in listeners:
            listener.callback(*args)

    def add_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_ACTION_PRIORITY,
    ) -> None:
        """
        Add a value filter.

        Filters share the listener list of actions with the same name; a
        filter callback gets the current value first and returns the new one.
        """
        self.add_action(name, callback, priority)

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """
        Pass a value through every filter of a name.

        Args:
            name: Filter name
            value: Initial value
            *args: Extra arguments given to every callback after the value

        Returns:
            Value returned by the last callback (``value`` when there is none)
        """
        for listener in self._sorted(name):
            value = listener.callback(value, *args)
        return value

    def _sorted(self, name: str) -> list[_Listener]:
        return sorted(
            self._listeners.get(name, []),
            key=lambda entry: (entry.priority, entry.order),
        )
