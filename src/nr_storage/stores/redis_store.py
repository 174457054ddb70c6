"""RedisStore — networked storage backend using ``redis.asyncio``."""

from __future__ import annotations

import logging
import re

from redis.asyncio import Redis
from redis.asyncio.retry import Retry
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from nr_storage.config import RedisConfig
from nr_storage.exceptions import StoreError
from nr_storage.stores.base import DocumentStore

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(prefix: str) -> str:
    """Escape redis ``MATCH`` metacharacters so *prefix* matches literally."""
    return _GLOB_SPECIAL.sub(r"\\\1", prefix)


class RedisStore(DocumentStore):
    """Store backed by a single redis connection pool.

    Parameters:
        config: Connection parameters.  Defaults to ``localhost:6379/0``.
        client: Pre-built client to use instead of creating one from
                *config*.  Useful for testing.
    """

    def __init__(self, config: RedisConfig | None = None, client: Redis | None = None) -> None:
        self._config = config or RedisConfig()
        self._client = client

    def _build_client(self) -> Redis:
        config = self._config
        options = config.client_options()
        options.setdefault("retry", Retry(config.backoff(), config.reconnect_attempts))
        options.setdefault("retry_on_error", [RedisConnectionError, RedisTimeoutError])
        if config.url:
            return Redis.from_url(config.url, **options)
        return Redis(
            host=config.host,
            port=config.port,
            db=config.db,
            username=config.username,
            password=config.password,
            **options,
        )

    def _require_client(self, operation: str) -> Redis:
        if self._client is None:
            raise StoreError(operation, "not connected")
        return self._client

    async def connect(self) -> None:
        if self._client is None:
            self._client = self._build_client()
        try:
            await self._client.ping()
        except RedisError as exc:
            raise StoreError("connect", str(exc)) from exc
        logger.debug("Connected to redis")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ── DocumentStore protocol ───────────────────────────────

    async def get(self, key: str) -> bytes | None:
        client = self._require_client("get")
        try:
            value = await client.get(key)
        except RedisError as exc:
            raise StoreError("get", str(exc)) from exc
        if isinstance(value, str):
            return value.encode("utf-8")
        return value

    async def set(self, key: str, value: bytes) -> None:
        client = self._require_client("set")
        try:
            await client.set(key, value)
        except RedisError as exc:
            raise StoreError("set", str(exc)) from exc

    async def keys(self, prefix: str) -> list[str]:
        client = self._require_client("keys")
        result: list[str] = []
        try:
            async for key in client.scan_iter(match=escape_glob(prefix) + "*"):
                result.append(key.decode("utf-8") if isinstance(key, bytes) else key)
        except RedisError as exc:
            raise StoreError("keys", str(exc)) from exc
        # SCAN may report a key more than once.
        return list(dict.fromkeys(result))
