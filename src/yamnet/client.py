"""Async API client for the Yammer REST service."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from yamnet.const import (
    API_BASE,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    GROUP_MEMBERSHIPS_ENDPOINT,
    USERS_ENDPOINT,
)

if TYPE_CHECKING:
    from yamnet.auth import AbstractAuth
from yamnet.exceptions import ResponseParseError, TransportError
from yamnet.models import User, UserSort
from yamnet.response_handler import ResponseErrorHandler

_LOGGER = logging.getLogger(__name__)


def _parse_user(entry: dict[str, Any]) -> User:
    """Build a User from its JSON representation."""
    return User(
        user_id=entry["id"],
        name=entry.get("name", ""),
        full_name=entry.get("full_name", ""),
        email=entry.get("email"),
        job_title=entry.get("job_title"),
        state=entry.get("state", "active"),
        web_url=entry.get("web_url"),
    )


def _include_params(
    include_followed: bool,
    include_subscribed_tags: bool,
    include_groups: bool,
) -> dict[str, str]:
    """Return query parameters for the optional user relations."""
    params: dict[str, str] = {}
    if include_followed:
        params["include_followed_users"] = "true"
    if include_subscribed_tags:
        params["include_followed_tags"] = "true"
    if include_groups:
        params["include_group_memberships"] = "true"
    return params


class YamNetClient:
    """Async client for the Yammer REST API.

    Use as an async context manager to manage the underlying aiohttp session::

        async with YamNetClient(auth) as client:
            me = await client.get_current_user()

    Non-2xx responses are classified by a ResponseErrorHandler and the
    resulting ApiError is raised.
    """

    def __init__(
        self,
        auth: AbstractAuth,
        session: aiohttp.ClientSession | None = None,
        *,
        base_url: str = API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        handler: ResponseErrorHandler | None = None,
    ) -> None:
        self._auth = auth
        self._external_session = session is not None
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._handler = handler or ResponseErrorHandler()

    async def __aenter__(self) -> YamNetClient:
        """Enter the async context manager, creating a session if needed."""
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self

    async def __aexit__(self, *exc: object) -> None:
        """Exit the async context manager, closing the session if we own it."""
        if not self._external_session and self._session:
            await self._session.close()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an authenticated HTTP request and return parsed JSON.

        Args:
            method: HTTP method (GET, POST, DELETE).
            path: API path relative to the base URL.
            params: Optional query parameters.
            json: Optional JSON body.

        Returns:
            Parsed JSON response, or None if the body is empty or a non-2xx
            response was not classified as an error.

        Raises:
            RuntimeError: If the client is used outside a context manager
                without providing a session.
            ApiError: If the response is classified as an error.
            TransportError: If no response was received.
        """
        if self._session is None:
            msg = (
                "No aiohttp session available. "
                "Use the client as an async context manager or provide a session."
            )
            raise RuntimeError(msg)

        token = await self._auth.get_token()

        headers: dict[str, str] = {
            "Authorization": f"Bearer {token}",
            **DEFAULT_HEADERS,
        }
        url = f"{self._base_url}{path}"

        try:
            async with self._session.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                timeout=self._timeout,
            ) as response:
                _LOGGER.debug("%s %s -> %s", method, url, response.status)

                if response.status < 200 or response.status >= 300:
                    error = await self._handler.classify(response)
                    if error is not None:
                        raise error
                    return None

                body = await response.read()
                if not body:
                    return None
                try:
                    result: Any = await response.json(content_type=None)
                except (ValueError, RecursionError) as exc:
                    text = body.decode("utf-8", errors="replace")
                    raise ResponseParseError(response.status, text) from exc
                return result
        except (asyncio.TimeoutError, aiohttp.ClientError) as exc:
            msg = f"{method} {url} failed: {exc}"
            raise TransportError(msg) from exc

    # ------------------------------------------------------------------
    # Generic verbs
    # ------------------------------------------------------------------

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET *path* and return the parsed JSON body."""
        return await self._request("GET", path, params=params)

    async def post(
        self,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """POST to *path* and return the parsed JSON body."""
        return await self._request("POST", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, str] | None = None) -> Any:
        """DELETE *path* and return the parsed JSON body."""
        return await self._request("DELETE", path, params=params)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_users(
        self,
        page: int = 0,
        letter: str = "",
        sort: UserSort | None = None,
        reverse: bool = False,
    ) -> list[User]:
        """Fetch users in the network.

        Args:
            page: 1-based page of 50 users; 0 for the first page.
            letter: Only users whose username starts with this letter.
            sort: Sort by message or follower count instead of by name.
            reverse: Return results in reverse order.
        """
        params: dict[str, str] = {}
        if page > 0:
            params["page"] = str(page)
        if letter:
            params["letter"] = letter
        if sort is not None:
            params["sort_by"] = sort.value
        if reverse:
            params["reverse"] = "true"

        data: list[dict[str, Any]] | None = await self.get(
            f"{USERS_ENDPOINT}.json", params=params
        )
        return [_parse_user(entry) for entry in data or []]

    async def get_user(
        self,
        user_id: int,
        include_followed: bool = False,
        include_subscribed_tags: bool = False,
        include_groups: bool = False,
    ) -> User | None:
        """Fetch a user by id."""
        params = _include_params(include_followed, include_subscribed_tags, include_groups)
        data: dict[str, Any] | None = await self.get(
            f"{USERS_ENDPOINT}/{user_id}.json", params=params
        )
        return _parse_user(data) if data else None

    async def get_group_users(self, group_id: int, page: int = 0) -> list[User]:
        """Fetch users who belong to a group.

        Args:
            group_id: The group id.
            page: 1-based page of 50 users; 0 for the first page.
        """
        params: dict[str, str] = {}
        if page > 0:
            params["page"] = str(page)
        data: dict[str, Any] | None = await self.get(
            f"{USERS_ENDPOINT}/in_group/{group_id}.json", params=params
        )
        if not data:
            return []
        return [_parse_user(entry) for entry in data.get("users", [])]

    async def get_user_by_email(
        self,
        email: str,
        include_followed: bool = False,
        include_subscribed_tags: bool = False,
        include_groups: bool = False,
    ) -> User | None:
        """Fetch the first user registered with *email*."""
        params = _include_params(include_followed, include_subscribed_tags, include_groups)
        params["email"] = email
        data: list[dict[str, Any]] | None = await self.get(
            f"{USERS_ENDPOINT}/by_email.json", params=params
        )
        if not data:
            return None
        return _parse_user(data[0])

    async def get_current_user(
        self,
        include_followed: bool = False,
        include_subscribed_tags: bool = False,
        include_groups: bool = False,
    ) -> User | None:
        """Fetch the user the token belongs to."""
        params = _include_params(include_followed, include_subscribed_tags, include_groups)
        data: dict[str, Any] | None = await self.get(
            f"{USERS_ENDPOINT}/current.json", params=params
        )
        return _parse_user(data) if data else None

    async def suspend_user(self, user_id: int) -> None:
        """Suspend a user (soft delete)."""
        await self.delete(f"{USERS_ENDPOINT}/{user_id}.json")

    async def delete_user(self, user_id: int) -> None:
        """Permanently delete a user."""
        await self.delete(f"{USERS_ENDPOINT}/{user_id}.json", params={"delete": "true"})

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    async def join_group(self, group_id: int) -> None:
        """Make the current user join a group."""
        await self.post(
            f"{GROUP_MEMBERSHIPS_ENDPOINT}.json", params={"group_id": str(group_id)}
        )

    async def leave_group(self, group_id: int) -> None:
        """Make the current user leave a group."""
        await self.delete(
            f"{GROUP_MEMBERSHIPS_ENDPOINT}.json", params={"group_id": str(group_id)}
        )
