"""Adapter de busca baseado em httpx."""

from __future__ import annotations

from typing import Any

import httpx

from bomba_core.domain.contracts import FetchFailure, FetchResult, FetchSuccess, PageFetcher


class HttpxPageFetcher(PageFetcher):
    """Implementação de ``PageFetcher`` usando um cliente httpx síncrono.

    O cliente é compartilhado entre chamadas apenas para reaproveitar conexões.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def fetch(self, url: str) -> FetchResult:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            return FetchFailure(url=url, status_code=None, cause=exc)

        status_code = int(response.status_code)
        if not 200 <= status_code < 300:
            return FetchFailure(url=url, status_code=status_code)

        return FetchSuccess(url=url, content=response.text)


def build_client(
    *,
    user_agent: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Cria o cliente compartilhado do processo; redirecionamentos são seguidos."""

    headers = {"User-Agent": user_agent} if user_agent else None
    return httpx.Client(headers=headers, transport=transport, follow_redirects=True)
