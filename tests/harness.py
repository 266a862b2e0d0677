"""Test harness for unit, integration and E2E tests.

Integration runs assume a Postgres instance is reachable with the
configured DATABASE__URL. Settings are loaded from environment variables.
"""

import httpx
import pytest_asyncio

from campus.config import Settings
from campus.domain.value import UserId
from campus.interface.api.app import create_app
from campus.util.di import Component
from campus.util.jwt import create_token
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container and yields
    a request-scoped child container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_toggle(unit_env):
            like_service = await unit_env.get(LikeService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


class ApiEnvironment:
    """An app wired to a test container, with an async HTTP client."""

    def __init__(self, container, client: httpx.AsyncClient, settings: Settings):
        self.container = container
        self.client = client
        self.settings = settings

    def auth_headers(self, user_id: UserId, handle: str = "tester") -> dict[str, str]:
        """Cookie header for a signed-in user."""
        token = create_token(str(user_id), handle, self.settings.auth)
        return {"Cookie": f"auth_token={token}"}


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for E2E fixtures yielding an `ApiEnvironment`.

    Repositories are reachable through `env.container` for seeding, and
    requests go through `env.client`.
    """

    @pytest_asyncio.fixture
    async def _api_environment():
        container = build_test_container(unmock=unmock or set())
        settings = await container.get(Settings)
        app = create_app(settings=settings, container=container)

        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            yield ApiEnvironment(container, client, settings)

        await container.close()

    return _api_environment
