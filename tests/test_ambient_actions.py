"""Tests for the ambient query and named actions."""

import pytest

from seo_head.core.actions import ActionHub
from seo_head.core.ambient import QueryStack


class TestQueryStack:
    """Test saving and restoring the current query."""

    def test_reset_returns_to_main(self):
        query = QueryStack(main="main")
        query.replace("loop")
        query.reset()
        assert query.current == "main"

    def test_preserved_restores(self):
        query = QueryStack(main="main")
        query.replace("loop")

        with query.preserved():
            query.reset()
            query.replace("widget")

        assert query.current == "loop"

    def test_preserved_restores_on_error(self):
        query = QueryStack(main="main")
        query.replace("loop")

        with pytest.raises(RuntimeError):
            with query.preserved():
                query.replace("widget")
                raise RuntimeError("listener failed")

        assert query.current == "loop"


class TestActionHub:
    """Test listener ordering and removal."""

    def test_priority_then_registration_order(self):
        hub = ActionHub()
        calls = []
        hub.add_action("head", lambda: calls.append("late"), 20)
        hub.add_action("head", lambda: calls.append("first-10"))
        hub.add_action("head", lambda: calls.append("early"), -5)
        hub.add_action("head", lambda: calls.append("second-10"))

        hub.do_action("head")

        assert calls == ["early", "first-10", "second-10", "late"]

    def test_arguments_passed(self):
        hub = ActionHub()
        received = []
        hub.add_action("head", lambda *args: received.append(args))
        hub.do_action("head", 1, "two")
        assert received == [(1, "two")]

    def test_unknown_action_is_noop(self):
        ActionHub().do_action("nothing")

    def test_remove_and_has(self):
        hub = ActionHub()

        def listener():
            pass

        hub.add_action("head", listener)
        assert hub.has_action("head")
        assert hub.has_action("head", listener)

        assert hub.remove_action("head", listener) is True
        assert hub.remove_action("head", listener) is False
        assert not hub.has_action("head")

    def test_listener_errors_propagate(self):
        hub = ActionHub()

        def boom():
            raise ValueError("boom")

        hub.add_action("head", boom)
        with pytest.raises(ValueError, match="boom"):
            hub.do_action("head")

    def test_filters_chain_values(self):
        hub = ActionHub()
        hub.add_filter("title", lambda title, suffix: f"{title} {suffix}", 20)
        hub.add_filter("title", lambda title, suffix: title.upper())

        assert hub.apply_filters("title", "hello", "world") == "HELLO world"

    def test_filter_without_callbacks_returns_value(self):
        assert ActionHub().apply_filters("title", "unchanged") == "unchanged"
