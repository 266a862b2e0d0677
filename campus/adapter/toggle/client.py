"""Remote toggle clients.

`ServiceToggleClient` calls an authoritative domain service in the same
process. `HttpToggleClient` calls the API's toggle endpoints over HTTP.
"""

from typing import Awaitable, Callable, Hashable
from uuid import UUID

import httpx
import logfire

from campus.adapter.error import RemoteToggleError
from campus.domain.model.toggle import ToggleResult
from campus.domain.service.toggle_coordinator import RemoteToggleClient
from campus.domain.value import UserId

ToggleFunction = Callable[[UUID, UserId], Awaitable[ToggleResult]]


class ServiceToggleClient(RemoteToggleClient):
    """In-process client bound to one actor and one toggle operation.

    Example:
        client = ServiceToggleClient(user_id, like_service.toggle_post_like)
    """

    def __init__(self, actor: UserId | None, toggle: ToggleFunction) -> None:
        self.actor = actor
        self.toggle = toggle

    def current_actor(self) -> UserId | None:
        return self.actor

    async def send_toggle(self, key: Hashable, actor: UserId) -> ToggleResult:
        return await self.toggle(UUID(str(key)), actor)


class HttpToggleClient(RemoteToggleClient):
    """Toggle client for the campus HTTP API."""

    def __init__(
        self,
        base_url: str,
        path_template: str,
        auth_token: str | None,
        actor: UserId | None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize HTTP toggle client.

        Args:
            base_url: API base URL, e.g. http://localhost:8000
            path_template: Endpoint path with a `{key}` placeholder,
                e.g. /posts/{key}/like
            auth_token: Session token sent as the auth_token cookie
            actor: ID of the user the token belongs to
            http_client: Shared client; a short-lived one is used per
                request when omitted
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.path_template = path_template
        self.auth_token = auth_token
        self.actor = actor
        self.http_client = http_client
        self.timeout = timeout

    def current_actor(self) -> UserId | None:
        if not self.auth_token:
            return None
        return self.actor

    async def send_toggle(self, key: Hashable, actor: UserId) -> ToggleResult:
        """POST to the toggle endpoint for `key`.

        Raises:
            RemoteToggleError: On transport failure, an error status, or an
                unreadable body
        """
        url = self.base_url + self.path_template.format(key=key)
        headers: dict[str, str] = {}
        if self.auth_token:
            headers["Cookie"] = f"auth_token={self.auth_token}"

        try:
            if self.http_client is not None:
                response = await self._post(self.http_client, url, headers)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, url, headers)
        except httpx.HTTPError as e:
            logfire.error("HTTP error during toggle", url=url, error=str(e))
            raise RemoteToggleError(f"HTTP error during toggle: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Toggle request failed",
                url=url,
                actor=str(actor),
                status_code=response.status_code,
                response=response.text,
            )
            raise RemoteToggleError(
                f"Toggle request failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            return ToggleResult(active=bool(data["active"]), count=int(data["count"]))
        except (ValueError, KeyError, TypeError) as e:
            raise RemoteToggleError(
                f"Malformed toggle response: {e}", status_code=response.status_code
            ) from e

    async def _post(
        self, client: httpx.AsyncClient, url: str, headers: dict[str, str]
    ) -> httpx.Response:
        return await client.post(url, headers=headers, timeout=self.timeout)
