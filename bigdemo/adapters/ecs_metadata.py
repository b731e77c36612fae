"""ECS task metadata endpoint adapter implementation."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Final

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from bigdemo.config import ConfigValueProvider
from bigdemo.domain import ContainerInfo, MetadataFetchResult, OrchestratorMetadata

from .interfaces import MetadataAdapterPort

logger = logging.getLogger(__name__)

METADATA_URI_VARIABLE: Final[str] = "ECS_CONTAINER_METADATA_URI_V4"


class _ContainerPayload(BaseModel):
    """Container entry of the `/task` response; absent or null fields become empty."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    image_id: str = Field(default="", alias="ImageID")
    name: str = Field(default="", alias="Name")

    @field_validator("image_id", "name", mode="before")
    @classmethod
    def _default_null_text(cls, value: Any) -> Any:
        return "" if value is None else value


class _TaskPayload(BaseModel):
    """Subset of the `/task` response rendered by the status page."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    availability_zone: str = Field(default="", alias="AvailabilityZone")
    containers: list[_ContainerPayload] = Field(default_factory=list, alias="Containers")

    @field_validator("availability_zone", mode="before")
    @classmethod
    def _default_null_zone(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("containers", mode="before")
    @classmethod
    def _default_null_containers(cls, value: Any) -> Any:
        return [] if value is None else value

    def payload_to_domain(self) -> OrchestratorMetadata:
        return OrchestratorMetadata(
            availability_zone=self.availability_zone,
            containers=tuple(
                ContainerInfo(image_id=container.image_id, name=container.name) for container in self.containers
            ),
        )


# A top-level JSON `null` decodes to an empty payload.
_TASK_PAYLOAD_ADAPTER: Final[TypeAdapter[_TaskPayload | None]] = TypeAdapter(_TaskPayload | None)


class EcsTaskMetadataAdapter(MetadataAdapterPort):
    """Adapter reading `<ECS_CONTAINER_METADATA_URI_V4>/task` with one bounded GET."""

    def __init__(
        self,
        config_provider: ConfigValueProvider,
        timeout_seconds: float = 3.0,
        transport: httpx.BaseTransport | None = None,
        clock: Callable[[], float] | None = None,
    ):
        """Initialize ECS task metadata adapter.

        Args:
            config_provider: Source of the metadata base URI.
            timeout_seconds: Total deadline for the request and body read in seconds.
            transport: Optional httpx transport, used by tests.
            clock: Optional monotonic clock; defaults to `time.monotonic`.

        Raises:
            ValueError: Raised when dependencies or timeout are invalid.
        """

        if config_provider is None:
            raise ValueError("config_provider must not be None")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self._config_provider = config_provider
        self._timeout_seconds = timeout_seconds
        self._transport = transport
        self._clock = clock or time.monotonic

    def adapter_fetch_metadata(self) -> MetadataFetchResult:
        """Fetch and decode task metadata within one total deadline.

        The HTTP status code is not inspected; any response body is decoded.

        Returns:
            MetadataFetchResult: Metadata on success, failure reason otherwise.

        Raises:
            RuntimeError: This implementation captures client failures in the result.
        """

        metadata_uri = self._config_provider.config_get_value(METADATA_URI_VARIABLE)
        if not metadata_uri:
            return MetadataFetchResult(metadata=None, error=f"{METADATA_URI_VARIABLE} not set")

        task_url = f"{metadata_uri.rstrip('/')}/task"
        try:
            response_body = self._adapter_read_task_body(task_url)
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            logger.warning("Task metadata fetch from %s failed: %s", task_url, error)
            return MetadataFetchResult(metadata=None, error=f"Failed to fetch: {error}")

        try:
            payload = _TASK_PAYLOAD_ADAPTER.validate_json(response_body) or _TaskPayload()
        except ValidationError as error:
            logger.warning("Task metadata from %s could not be decoded: %s", task_url, error)
            return MetadataFetchResult(metadata=None, error=f"Failed to parse JSON: {error}")

        return MetadataFetchResult(metadata=payload.payload_to_domain(), error=None)

    def _adapter_read_task_body(self, task_url: str) -> bytes:
        """Stream the task response body, stopping once the deadline has passed.

        httpx timeouts apply per phase and restart with every received chunk,
        so elapsed time is also checked between chunks.

        Args:
            task_url: Absolute `/task` endpoint URL.

        Returns:
            bytes: Complete response body.

        Raises:
            httpx.TimeoutException: Raised when the deadline passes before the body is complete.
            httpx.HTTPError: Raised for transport failures.
        """

        deadline = self._clock() + self._timeout_seconds
        response_body = bytearray()
        with httpx.Client(timeout=self._timeout_seconds, transport=self._transport) as client:
            with client.stream("GET", task_url) as response:
                for chunk in response.iter_bytes():
                    response_body.extend(chunk)
                    if self._clock() > deadline:
                        raise httpx.ReadTimeout(
                            f"response not completed within {self._timeout_seconds:g} seconds",
                            request=response.request,
                        )
        return bytes(response_body)
