"""Coordinator construction from settings."""

import httpx

from campus.adapter.toggle.client import HttpToggleClient
from campus.config import Settings
from campus.domain.service.toggle_coordinator import ToggleCoordinator
from campus.domain.value import UserId


def create_http_coordinator(
    settings: Settings,
    path_template: str,
    auth_token: str | None,
    actor: UserId | None,
    http_client: httpx.AsyncClient | None = None,
) -> ToggleCoordinator:
    """Build a coordinator that toggles through the campus API.

    Args:
        settings: Application settings (API base URL, toggle timeout)
        path_template: Toggle endpoint with a `{key}` placeholder
        auth_token: Session token of the acting user
        actor: ID of the acting user
        http_client: Optional shared HTTP client

    Returns:
        Coordinator with the configured request timeout
    """
    client = HttpToggleClient(
        base_url=settings.api.base_url,
        path_template=path_template,
        auth_token=auth_token,
        actor=actor,
        http_client=http_client,
    )
    return ToggleCoordinator(
        client, timeout=settings.toggles.request_timeout_seconds
    )
