from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol

import httpx

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    async def get(self, url: str, params: Mapping[str, Any]) -> dict[str, Any]: ...


class HttpNavigator:
    """
    Issues listing navigation requests over HTTP and returns the decoded page
    payload. Transport and HTTP errors propagate to the caller; there is no
    retry.
    """

    def __init__(self, client: httpx.AsyncClient, token: Optional[str] = None):
        self.client = client
        self.headers = {"Accept": "application/json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    async def get(self, url: str, params: Mapping[str, Any]) -> dict[str, Any]:
        logger.debug("GET %s params=%s", url, dict(params))
        response = await self.client.get(url, params=dict(params), headers=self.headers)
        response.raise_for_status()
        return response.json()
