"""Async HTTP client shared by the catalog adapters.

Requests go through an ``httpx_retries`` transport, are spaced out by an
``aiolimiter`` limiter and, when a cache is configured, are served from a hishel
SQLite cache. Only ``GET`` is exposed: catalog adapters never write upstream.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage, FilterPolicy
from hishel import Response as HishelCacheResponse
from hishel._policies import BaseFilter
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from dupefinder.config.storage import get_storage_config

if TYPE_CHECKING:
    from types import TracebackType

    from dupefinder.config.http_resilience import (
        CacheConfig,
        ResilienceConfig,
        RetryPolicy,
        ShouldCacheHook,
    )


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        backoff_jitter=policy.backoff_jitter,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
    )


def build_async_client(config: ResilienceConfig) -> httpx.AsyncClient:
    """Create the underlying httpx client, cached when ``config.cache`` is enabled."""

    transport = RetryTransport(retry=build_retry(config.retry))
    headers = dict(config.default_headers or {})
    base_url = config.base_url or ""

    cache = config.cache
    if cache is None or not cache.enabled:
        return httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=config.timeout_seconds,
            transport=transport,
        )
    return AsyncCacheClient(
        base_url=base_url,
        headers=headers,
        timeout=config.timeout_seconds,
        transport=transport,
        storage=_cache_storage(cache),
        policy=_cache_policy(cache.should_cache),
    )


class ResilientClient:
    """Rate limited ``GET`` client; use as an async context manager."""

    def __init__(self, config: ResilienceConfig) -> None:
        self.config = config
        self._limiter = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit is not None
            else None
        )
        self._client = build_async_client(config)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(
        self,
        url: httpx.URL | str,
        *,
        params: httpx.QueryParams | None = None,
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._client.get(url, params=params)
        async with self._limiter:
            return await self._client.get(url, params=params)


class _JsonPayloadFilter(BaseFilter[HishelCacheResponse]):
    """Store a response only if ``predicate`` accepts its decoded JSON body."""

    def __init__(self, predicate: ShouldCacheHook) -> None:
        self._predicate = predicate

    def needs_body(self) -> bool:
        return True

    def apply(self, item: HishelCacheResponse, body: bytes | None) -> bool:  # noqa: ARG002
        if body is None:
            return True
        try:
            payload = json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError):
            return False
        return bool(self._predicate(payload))


def _cache_storage(config: CacheConfig) -> AsyncSqliteStorage:
    if config.backend == "sqlite":
        database_path = config.sqlite_path or str(get_storage_config().http_cache_path())
    elif config.backend == "memory":
        database_path = ":memory:"
    else:
        raise ValueError(f"Unsupported cache backend: {config.backend}")
    return AsyncSqliteStorage(
        database_path=database_path,
        default_ttl=config.default_ttl_seconds,
        refresh_ttl_on_access=config.refresh_ttl_on_access,
    )


def _cache_policy(predicate: ShouldCacheHook | None) -> FilterPolicy | None:
    if predicate is None:
        return None
    return FilterPolicy(response_filters=[_JsonPayloadFilter(predicate)])
