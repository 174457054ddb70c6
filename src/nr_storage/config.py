"""Settings accepted by :meth:`NodeRedStorage.init`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from redis.backoff import AbstractBackoff


def default_reconnect_strategy(retries: int) -> float:
    """Delay in milliseconds before reconnect attempt *retries*."""
    return min(retries * 50, 500)


class ReconnectBackoff(AbstractBackoff):
    """Adapts a ``retries -> milliseconds`` callable to redis-py's backoff API."""

    def __init__(self, strategy: Callable[[int], float] = default_reconnect_strategy) -> None:
        self._strategy = strategy

    def reset(self) -> None:
        pass

    def compute(self, failures: int) -> float:
        return self._strategy(failures) / 1000


class StoreConfig(BaseModel):
    """Which document store backend to use.

    Attributes:
        type: ``"redis"``, ``"memory"`` or ``"sqlite"``.
        path: Database file for the sqlite backend.
    """

    type: Literal["redis", "memory", "sqlite"] = "redis"
    path: str = ""


class RedisConfig(BaseModel):
    """Connection parameters for the redis backend.

    Unknown keys are kept and handed to the redis client as-is.

    Attributes:
        url: ``redis://`` URL.  Takes precedence over host/port/db.
        reconnect_strategy: ``retries -> delay ms``.  Defaults to
            :func:`default_reconnect_strategy`.
        reconnect_attempts: Retries per command before the error surfaces.
    """

    model_config = ConfigDict(extra="allow")

    url: str | None = None
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    username: str | None = None
    password: str | None = None
    reconnect_strategy: Callable[[int], float] | None = None
    reconnect_attempts: int = 10

    def client_options(self) -> dict[str, Any]:
        """Extra keyword arguments for the redis client."""
        return dict(self.model_extra or {})

    def backoff(self) -> ReconnectBackoff:
        return ReconnectBackoff(self.reconnect_strategy or default_reconnect_strategy)


class StorageSettings(BaseModel):
    """Top-level settings.

    Attributes:
        store: Backend selection.
        redis: Redis connection parameters (ignored by other backends).
        debug: Log every storage call at DEBUG level.
    """

    store: StoreConfig = Field(default_factory=StoreConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
    debug: bool = False
