"""Cache store probe backed by redis-py `PING`."""

import logging
from typing import Any, Callable, Final

import redis
from redis.exceptions import RedisError

from bigdemo.config import ConfigValueProvider
from bigdemo.domain import StatusInfo

from .interfaces import CacheProbePort

logger = logging.getLogger(__name__)

REDIS_URL_VARIABLE: Final[str] = "REDIS_URL"


class RedisCacheProbeService(CacheProbePort):
    """Cache probe issuing one `PING` through a short-lived client."""

    def __init__(
        self,
        config_provider: ConfigValueProvider,
        timeout_seconds: float = 3.0,
        client_factory: Callable[..., Any] | None = None,
    ):
        """Initialize cache probe service.

        Args:
            config_provider: Source of the `REDIS_URL` value.
            timeout_seconds: Socket connect and read deadline in seconds.
            client_factory: Optional replacement for `redis.Redis.from_url`.

        Raises:
            ValueError: Raised when dependencies or timeout are invalid.
        """

        if config_provider is None:
            raise ValueError("config_provider must not be None")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self._config_provider = config_provider
        self._timeout_seconds = timeout_seconds
        self._client_factory = client_factory or redis.Redis.from_url

    def cache_check_status(self) -> StatusInfo:
        """Verify cache connectivity with a bounded `PING`.

        Returns:
            StatusInfo: Not-configured, unreachable or healthy status.

        Raises:
            RuntimeError: This implementation captures client failures in the status.
        """

        redis_url = self._config_provider.config_get_value(REDIS_URL_VARIABLE)
        if not redis_url:
            return StatusInfo.not_configured(f"{REDIS_URL_VARIABLE} not set")

        try:
            client = self._client_factory(
                redis_url,
                socket_connect_timeout=self._timeout_seconds,
                socket_timeout=self._timeout_seconds,
            )
        except ValueError as error:
            logger.warning("Invalid %s: %s", REDIS_URL_VARIABLE, error)
            return StatusInfo.unreachable(f"Invalid URL: {error}")

        try:
            client.ping()
        except (RedisError, OSError) as error:
            logger.warning("Cache ping failed: %s", error)
            return StatusInfo.unreachable(f"Ping failed: {error}")
        finally:
            client.close()

        return StatusInfo.healthy()
