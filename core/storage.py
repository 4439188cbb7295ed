"""Redis-backed answer store for persistent onboarding sessions.

Scalars are plain string keys (GET/SET), collected lists are Redis lists
(RPUSH/LRANGE). Everything is cleared with FLUSHDB once the operator has
answered the recap.
"""

import logging
import time
from typing import Any, Callable

import redis
from redis.backoff import ExponentialBackoff, NoBackoff
from redis.retry import Retry

from core.settings import get_setting

logger = logging.getLogger(__name__)

# Per-command retries, enabled once PING succeeds. Before that connect_store
# owns every attempt so max_attempts is the real number of connects.
_COMMAND_RETRIES = 3


class StorageError(Exception):
    """A store command failed after the client-level retries."""


class StorageUnavailableError(StorageError):
    """The store could not be reached within the configured attempts / time."""


class RedisStore:
    """Scalar and list access over one Redis database, with optional key namespace."""

    def __init__(self, client: redis.Redis, namespace: str = "") -> None:
        self._client = client
        self._namespace = (namespace or "").strip()

    def _ns(self, key: str) -> str:
        return f"{self._namespace}:{key}" if self._namespace else key

    def _call(self, command: str, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return fn(*args)
        except redis.RedisError as e:
            raise StorageError(f"Redis {command} failed: {e}") from e

    def ping(self) -> bool:
        return bool(self._call("PING", self._client.ping))

    def get_scalar(self, key: str, default: str = "") -> str:
        """Return the stored value for key, or default when missing or empty."""
        value = self._call("GET", self._client.get, self._ns(key))
        return value or default

    def set_scalar(self, key: str, value: str) -> bool:
        return bool(self._call("SET", self._client.set, self._ns(key), value))

    def append_to_list(self, key: str, value: str) -> int:
        """RPUSH value. Returns the new list length."""
        return int(self._call("RPUSH", self._client.rpush, self._ns(key), value))

    def read_list(self, key: str, start: int = 0, end: int = -1) -> list[str]:
        """LRANGE with inclusive end, -1 meaning the last item."""
        return list(self._call("LRANGE", self._client.lrange, self._ns(key), start, end))

    def trim_list(self, key: str, start: int, end: int) -> None:
        """Keep only items start..end (inclusive). An empty range deletes the key."""
        self._call("LTRIM", self._client.ltrim, self._ns(key), start, end)

    def delete(self, key: str) -> int:
        return int(self._call("DEL", self._client.delete, self._ns(key)))

    def flush_all(self) -> bool:
        """Clear every key of the configured database."""
        return bool(self._call("FLUSHDB", self._client.flushdb))

    def enable_command_retries(self, retry: Retry) -> None:
        """Let the client retry failed commands on its own from now on."""
        self._client.set_retry(retry)

    def close(self) -> None:
        self._client.close()


def _backoff(settings: dict[str, Any]) -> ExponentialBackoff:
    return ExponentialBackoff(
        cap=float(get_setting(settings, "storage.backoff_cap", 3.0)),
        base=float(get_setting(settings, "storage.backoff_base", 0.1)),
    )


def build_client(settings: dict[str, Any]) -> redis.Redis:
    """Create a Redis client from settings["storage"]. Does not connect yet.

    The client starts without command retries; connect_store enables them
    once the server has answered.
    """
    cfg = settings.get("storage", {})
    return redis.Redis(
        host=cfg.get("host", "localhost"),
        port=int(cfg.get("port", 6379)),
        db=int(cfg.get("db", 0)),
        socket_timeout=float(cfg.get("socket_timeout", 5.0)),
        socket_connect_timeout=float(cfg.get("socket_timeout", 5.0)),
        decode_responses=True,
        retry=Retry(NoBackoff(), 0),
        retry_on_error=[redis.ConnectionError, redis.TimeoutError],
    )


def connect_store(
    settings: dict[str, Any],
    client: redis.Redis | None = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> RedisStore:
    """Return a RedisStore once the server answers PING.

    Retries with exponential backoff, capped by storage.max_attempts and
    storage.max_retry_seconds. Raises StorageUnavailableError when either
    budget is exhausted.
    """
    max_attempts = int(get_setting(settings, "storage.max_attempts", 20))
    max_retry_seconds = float(get_setting(settings, "storage.max_retry_seconds", 3600))
    backoff = _backoff(settings)
    store = RedisStore(
        client or build_client(settings),
        namespace=get_setting(settings, "storage.namespace", ""),
    )
    host = get_setting(settings, "storage.host", "localhost")
    port = get_setting(settings, "storage.port", 6379)

    started = clock()
    last_error: Exception | None = None
    for attempt in range(1, max_attempts + 1):
        try:
            store.ping()
            logger.info("Connected to Redis at %s:%s (attempt %d)", host, port, attempt)
            store.enable_command_retries(Retry(backoff, _COMMAND_RETRIES))
            return store
        except StorageError as e:
            last_error = e
            logger.warning(
                "Redis at %s:%s unreachable (attempt %d/%d): %s",
                host, port, attempt, max_attempts, e,
            )
        if attempt == max_attempts:
            break
        delay = backoff.compute(attempt)
        if clock() - started + delay > max_retry_seconds:
            logger.error("Redis retry time exhausted after %d attempts", attempt)
            break
        sleep(delay)

    raise StorageUnavailableError(
        f"Cannot reach Redis at {host}:{port}: {last_error}"
    )
