"""Remote request executor for the AWX REST API."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from awx_reconciler.client.auth import BearerTokenAuth
from awx_reconciler.client.errors import (
    ConfigurationError,
    DecodeError,
    NotFoundError,
    RemoteError,
    TransportError,
)
from awx_reconciler.config.constants import DEFAULT_API_BASE, DEFAULT_PAGE_SIZE
from awx_reconciler.config.models import ConnectionProfile
from awx_reconciler.models.common import ListResponse

logger = logging.getLogger(__name__)


class RequestExecutor:
    """Synchronous JSON client for the AWX API.

    Not safe for concurrent use; one instance serves sequential operations.
    """

    def __init__(self, profile: ConnectionProfile) -> None:
        if not profile.host or not profile.token:
            raise ConfigurationError("host and token must be provided")
        self.profile = profile
        self.base_url = f"{profile.host}{DEFAULT_API_BASE}"
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=BearerTokenAuth(profile.token),
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RequestExecutor:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> dict[str, Any]:
        if response.status_code >= 400:
            if response.status_code == 404:
                raise NotFoundError(response.text)
            raise RemoteError(response.status_code, response.text)
        if not response.content:
            return {}
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Invalid JSON from {response.request.url}: {exc}") from exc
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object from {response.request.url}, "
                f"got {type(data).__name__}"
            )
        return data

    def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Issue one request and return the decoded JSON object."""
        content = json.dumps(body) if body is not None else None
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, content=content, params=params)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request to {self.profile.host} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise TransportError(
                f"Invalid URL for AWX at {self.profile.host}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Cannot reach AWX at {self.profile.host}: {exc}"
            ) from exc
        return self._handle_response(response)

    def get(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, body: dict[str, Any] | None = None, **kwargs: Any) -> dict[str, Any]:
        return self.request("POST", path, body, **kwargs)

    def put(self, path: str, body: dict[str, Any] | None = None, **kwargs: Any) -> dict[str, Any]:
        return self.request("PUT", path, body, **kwargs)

    def patch(self, path: str, body: dict[str, Any] | None = None, **kwargs: Any) -> dict[str, Any]:
        return self.request("PATCH", path, body, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return self.request("DELETE", path, **kwargs)

    def list_records(
        self, path: str, *, page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[dict[str, Any]]:
        """Fetch every record of a list endpoint, following ``next`` links."""
        records: list[dict[str, Any]] = []
        data = self.get(path, params={"page_size": page_size})
        while True:
            try:
                page = ListResponse.model_validate(data)
            except PydanticValidationError as exc:
                raise DecodeError(f"Malformed list response from {path}: {exc}") from exc
            records.extend(page.results)
            if not page.next:
                break
            # next is a server-relative path that already carries the API prefix
            data = self.get(str(httpx.URL(self.profile.host).join(page.next)))
        return records
