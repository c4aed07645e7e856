"""Bearer-token authentication for the AWX API."""

from __future__ import annotations

from collections.abc import Generator

import httpx


class BearerTokenAuth(httpx.Auth):
    """Authenticate with an OAuth2 personal access token."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request
