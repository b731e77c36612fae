"""Regression tests for ECS task metadata adapter fetch and decode behavior."""

from __future__ import annotations

import json
import time

import httpx

from bigdemo.adapters import EcsTaskMetadataAdapter
from bigdemo.config import MappingConfigValueProvider
from bigdemo.domain import ContainerInfo

_METADATA_URI = "http://169.254.170.2/v4/abc123"


def _build_adapter(handler=None, metadata_uri: str | None = _METADATA_URI) -> EcsTaskMetadataAdapter:
    values = {} if metadata_uri is None else {"ECS_CONTAINER_METADATA_URI_V4": metadata_uri}
    return EcsTaskMetadataAdapter(
        config_provider=MappingConfigValueProvider(values),
        timeout_seconds=3.0,
        transport=httpx.MockTransport(handler) if handler is not None else None,
    )


def test_adapters_ecs_reports_unset_metadata_uri() -> None:
    """Return exact not-set error without issuing a request.

    Returns:
        None: Assertions validate not-configured result.

    Raises:
        AssertionError: Raised when result differs.
    """

    result = _build_adapter(metadata_uri=None).adapter_fetch_metadata()

    assert result.metadata is None
    assert result.error == "ECS_CONTAINER_METADATA_URI_V4 not set"


def test_adapters_ecs_decodes_task_payload_and_ignores_unknown_fields() -> None:
    """Decode zone and containers from `/task` and ignore extra fields.

    Returns:
        None: Assertions validate decoded metadata.

    Raises:
        AssertionError: Raised when decoded metadata differs.
    """

    requested_urls: list[str] = []
    payload = {
        "Cluster": "demo",
        "AvailabilityZone": "us-east-1a",
        "Containers": [
            {"Name": "web", "ImageID": "sha256:abc", "DockerId": "123"},
            {"Name": "sidecar", "ImageID": "sha256:def"},
        ],
    }

    def _handler(request: httpx.Request) -> httpx.Response:
        requested_urls.append(str(request.url))
        return httpx.Response(200, content=json.dumps(payload).encode("utf-8"))

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.error is None
    assert result.metadata is not None
    assert result.metadata.availability_zone == "us-east-1a"
    assert result.metadata.containers == (
        ContainerInfo(image_id="sha256:abc", name="web"),
        ContainerInfo(image_id="sha256:def", name="sidecar"),
    )
    assert requested_urls == [f"{_METADATA_URI}/task"]


def test_adapters_ecs_defaults_missing_and_null_fields() -> None:
    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"Containers": [{"Name": "web"}, {"Name": None, "ImageID": None}]})

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.metadata is not None
    assert result.metadata.availability_zone == ""
    assert result.metadata.containers == (
        ContainerInfo(image_id="", name="web"),
        ContainerInfo(image_id="", name=""),
    )


def test_adapters_ecs_treats_null_containers_as_empty() -> None:
    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"AvailabilityZone": "eu-west-1b", "Containers": None})

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.metadata is not None
    assert result.metadata.containers == ()


def test_adapters_ecs_reports_parse_failure_for_invalid_json() -> None:
    """Return parse error when the body is not JSON.

    Returns:
        None: Assertions validate parse-failure result.

    Raises:
        AssertionError: Raised when result differs.
    """

    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>not json</html>")

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.metadata is None
    assert result.error is not None
    assert result.error.startswith("Failed to parse JSON:")


def test_adapters_ecs_reports_parse_failure_for_wrong_field_types() -> None:
    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"AvailabilityZone": 42, "Containers": "web"})

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.metadata is None
    assert result.error is not None
    assert result.error.startswith("Failed to parse JSON:")


def test_adapters_ecs_reports_fetch_failure_on_connection_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.metadata is None
    assert result.error == "Failed to fetch: connection refused"


def test_adapters_ecs_reports_fetch_failure_on_timeout() -> None:
    """Map transport timeouts to fetch failures.

    Returns:
        None: Assertions validate timeout result.

    Raises:
        AssertionError: Raised when result differs.
    """

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.metadata is None
    assert result.error == "Failed to fetch: timed out"


def test_adapters_ecs_decodes_body_regardless_of_status_code() -> None:
    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"AvailabilityZone": "us-east-1c"})

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.metadata is not None
    assert result.metadata.availability_zone == "us-east-1c"


def test_adapters_ecs_strips_trailing_slash_from_base_uri() -> None:
    requested_paths: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requested_paths.append(request.url.path)
        return httpx.Response(200, json={})

    _build_adapter(_handler, metadata_uri=f"{_METADATA_URI}/").adapter_fetch_metadata()

    assert requested_paths == ["/v4/abc123/task"]


def test_adapters_ecs_treats_null_body_as_empty_metadata() -> None:
    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"null")

    result = _build_adapter(_handler).adapter_fetch_metadata()

    assert result.error is None
    assert result.metadata is not None
    assert result.metadata.availability_zone == ""
    assert result.metadata.containers == ()


def test_adapters_ecs_stops_reading_body_once_deadline_passes() -> None:
    """Abort a trickling body at the total deadline instead of per-chunk timeouts.

    Returns:
        None: Assertions validate deadline handling.

    Raises:
        AssertionError: Raised when the body is read past the deadline.
    """

    ticks = iter(float(second) for second in range(1000))
    sent_chunks: list[int] = []

    def _trickle_body():
        for index in range(100):
            sent_chunks.append(index)
            yield b" "

    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=_trickle_body())

    adapter = EcsTaskMetadataAdapter(
        config_provider=MappingConfigValueProvider({"ECS_CONTAINER_METADATA_URI_V4": _METADATA_URI}),
        timeout_seconds=3.0,
        transport=httpx.MockTransport(_handler),
        clock=lambda: next(ticks),
    )

    result = adapter.adapter_fetch_metadata()

    assert result.metadata is None
    assert result.error == "Failed to fetch: response not completed within 3 seconds"
    assert len(sent_chunks) == 4


def test_adapters_ecs_slow_body_returns_within_deadline() -> None:
    def _slow_body():
        for _ in range(10):
            time.sleep(0.1)
            yield b" "

    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=_slow_body())

    adapter = EcsTaskMetadataAdapter(
        config_provider=MappingConfigValueProvider({"ECS_CONTAINER_METADATA_URI_V4": _METADATA_URI}),
        timeout_seconds=0.25,
        transport=httpx.MockTransport(_handler),
    )

    started_at = time.monotonic()
    result = adapter.adapter_fetch_metadata()
    elapsed_seconds = time.monotonic() - started_at

    assert result.error is not None
    assert result.error.startswith("Failed to fetch:")
    assert elapsed_seconds < 0.8
