"""Tests for domain model invariants."""

import pytest

from bigdemo.domain import CONNECTED_MESSAGE, MetadataFetchResult, OrchestratorMetadata, StatusInfo


def test_domain_status_info_rejects_connected_without_present() -> None:
    """Reject a status claiming connectivity for an unconfigured dependency.

    Returns:
        None: Assertions validate the invariant.

    Raises:
        AssertionError: Raised when the invalid state is accepted.
    """

    with pytest.raises(ValueError, match="requires present"):
        StatusInfo(present=False, connected=True, message="impossible")


def test_domain_status_info_constructors_cover_three_states() -> None:
    not_configured = StatusInfo.not_configured("REDIS_URL not set")
    unreachable = StatusInfo.unreachable("Ping failed: refused")
    healthy = StatusInfo.healthy()

    assert (not_configured.present, not_configured.connected) == (False, False)
    assert (unreachable.present, unreachable.connected) == (True, False)
    assert (healthy.present, healthy.connected) == (True, True)
    assert healthy.message == CONNECTED_MESSAGE


def test_domain_metadata_fetch_result_requires_exactly_one_outcome() -> None:
    """Reject results carrying both or neither of metadata and error.

    Returns:
        None: Assertions validate mutual exclusion.

    Raises:
        AssertionError: Raised when an ambiguous result is accepted.
    """

    metadata = OrchestratorMetadata(availability_zone="us-east-1a", containers=())

    with pytest.raises(ValueError):
        MetadataFetchResult(metadata=None, error=None)
    with pytest.raises(ValueError):
        MetadataFetchResult(metadata=metadata, error="Failed to fetch")

    assert MetadataFetchResult(metadata=metadata, error=None).metadata == metadata
