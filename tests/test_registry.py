"""Tests for the presenter registry.

Verifies that importing the package does not hit circular imports and that
identifier lookups are plain misses for unknown identifiers.
"""

import logging

import pytest

from seo_head.core.registry import PresenterRegistry
from seo_head.presenters.base import AbstractTagPresenter


class _StaticPresenter(AbstractTagPresenter):
    presenter_id = "test.static"
    name = "Static"
    description = "Static test tag"
    key = "test"

    def get(self):
        return "value"


class _BrokenPresenter(AbstractTagPresenter):
    presenter_id = "test.broken"
    name = "Broken"
    description = "Fails on construction"

    def __init__(self):
        raise RuntimeError("cannot build")

    def get(self):
        return ""


# ============================================================================
# Import Tests
# ============================================================================


class TestRegistryImports:
    """Test that the registry can be imported without circular dependencies."""

    def test_import_registry(self):
        from seo_head.core.registry import registry

        assert registry is not None

    def test_import_presenters_then_core(self):
        from seo_head import presenters  # noqa: F401
        from seo_head.core import FrontEnd

        assert FrontEnd is not None

    def test_import_cli(self):
        from seo_head.cli import app

        assert app is not None

    def test_presenters_registered(self):
        from seo_head.core.registry import registry

        assert len(registry.get_all()) >= 30


# ============================================================================
# Registration
# ============================================================================


class TestRegistration:
    """Test registering and looking up presenters."""

    def test_register_as_decorator(self):
        local = PresenterRegistry()
        returned = local.register(_StaticPresenter)

        assert returned is _StaticPresenter
        metadata = local.get("test.static")
        assert metadata.name == "Static"
        assert metadata.plugin_class is _StaticPresenter

    def test_missing_attribute(self):
        class NoId:
            name = "x"
            description = "y"

        with pytest.raises(ValueError, match="presenter_id"):
            PresenterRegistry().register(NoId)

    def test_duplicate_overwrites(self, caplog):
        caplog.set_level(logging.WARNING, logger="seo_head.core.registry")

        class Other(_StaticPresenter):
            pass

        local = PresenterRegistry()
        local.register(_StaticPresenter)
        local.register(Other)

        assert local.get("test.static").plugin_class is Other
        assert "already registered" in caplog.text

    def test_unregister(self):
        local = PresenterRegistry()
        local.register(_StaticPresenter)
        local.unregister("test.static")
        local.unregister("test.static")
        assert local.get_all_ids() == []

    def test_is_registered_rejects_non_strings(self):
        local = PresenterRegistry()
        local.register(_StaticPresenter)
        assert local.is_registered("test.static")
        assert not local.is_registered(None)
        assert not local.is_registered(42)


# ============================================================================
# Instantiation
# ============================================================================


class TestInstantiation:
    """Test building presenters from identifiers."""

    def test_create_unknown_is_none(self):
        assert PresenterRegistry().create("nope") is None

    def test_create_gives_fresh_instances(self):
        local = PresenterRegistry()
        local.register(_StaticPresenter)
        assert local.create("test.static") is not local.create("test.static")

    def test_instantiate_skips_unknown(self):
        local = PresenterRegistry()
        local.register(_StaticPresenter)

        presenters = local.instantiate(["unknown.a", "test.static", 7, "unknown.b"])

        assert len(presenters) == 1
        assert isinstance(presenters[0], _StaticPresenter)

    def test_instantiate_keeps_order(self):
        class Second(_StaticPresenter):
            presenter_id = "test.second"

        local = PresenterRegistry()
        local.register(_StaticPresenter)
        local.register(Second)

        presenters = local.instantiate(["test.second", "test.static"])
        assert [p.presenter_id for p in presenters] == ["test.second", "test.static"]

    def test_constructor_errors_propagate(self):
        local = PresenterRegistry()
        local.register(_BrokenPresenter)
        with pytest.raises(RuntimeError, match="cannot build"):
            local.instantiate(["test.broken"])
