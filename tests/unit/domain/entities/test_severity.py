from __future__ import annotations

import pytest

from healthboard.domain.entities.severity import (
    TRACKED_CHANNELS,
    Channel,
    SeverityBucket,
)


def test_buckets_are_ordered_from_best_to_worst() -> None:
    ranks = [bucket.rank for bucket in SeverityBucket]
    assert ranks == [0, 1, 2, 3, 4]


def test_worst_picks_highest_rank() -> None:
    worst = SeverityBucket.worst(
        SeverityBucket.GOOD, SeverityBucket.CRITICAL, SeverityBucket.EXCELLENT
    )
    assert worst is SeverityBucket.CRITICAL


def test_worst_requires_a_bucket() -> None:
    with pytest.raises(ValueError):
        SeverityBucket.worst()


@pytest.mark.parametrize(
    ("total", "expected"),
    [
        (100, SeverityBucket.EXCELLENT),
        (90, SeverityBucket.EXCELLENT),
        (89, SeverityBucket.GOOD),
        (70, SeverityBucket.GOOD),
        (69, SeverityBucket.WARNING),
        (50, SeverityBucket.WARNING),
        (49, SeverityBucket.CRITICAL),
        (25, SeverityBucket.CRITICAL),
        (24, SeverityBucket.OVERLOAD),
        (0, SeverityBucket.OVERLOAD),
    ],
)
def test_from_score_bands(total: int, expected: SeverityBucket) -> None:
    assert SeverityBucket.from_score(total) is expected


def test_style_tokens() -> None:
    assert SeverityBucket.EXCELLENT.label == "Excellent"
    assert SeverityBucket.EXCELLENT.color == "success"
    assert SeverityBucket.OVERLOAD.icon == "x-circle"


def test_tracked_channels() -> None:
    assert TRACKED_CHANNELS == (Channel.API, Channel.DATABASE, Channel.NETWORK)
    assert Channel("db") is Channel.DATABASE
