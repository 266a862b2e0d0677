"""Unit tests for provider selection."""

import pytest

from campus.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from campus.util.di.base import ProviderBase
from campus.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class OrphanComponent(ProviderBase):
    """Mockable component with only a production implementation."""

    __mock_component__ = "persistence"


class ProdOrphanComponent(OrphanComponent):
    __is_mock__ = False


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert (
            get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        )

    def test_missing_implementation_raises(self):
        with pytest.raises(DependencyInjectionError, match="No mock implementation"):
            get_provider(OrphanComponent, use_mock=True)


class TestBuildTestContainer:
    """Tests for the test container builder."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})  # type: ignore[arg-type]
