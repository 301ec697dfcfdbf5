"""Unit tests for timestamp formatting."""
from __future__ import annotations

import pytest

from forwarddate.utils.dates import format_timestamp


@pytest.mark.unit
def test_format_epoch() -> None:
    assert format_timestamp(0) == "Thursday, January 01, 1970 at 00:00:00 UTC"


@pytest.mark.unit
def test_format_known_timestamp() -> None:
    assert format_timestamp(1690000000) == "Saturday, July 22, 2023 at 04:26:40 UTC"


@pytest.mark.unit
def test_format_before_epoch() -> None:
    assert format_timestamp(-1) == "Wednesday, December 31, 1969 at 23:59:59 UTC"


@pytest.mark.unit
def test_format_is_deterministic() -> None:
    assert format_timestamp(1700000000) == format_timestamp(1700000000)


@pytest.mark.unit
@pytest.mark.parametrize("timestamp", [10**12, -(10**12), 10**20, 2**63])
def test_format_out_of_range_returns_none(timestamp: int) -> None:
    assert format_timestamp(timestamp) is None
