"""Threshold-based severity classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Tuple

from healthboard.domain.entities.severity import (
    Channel,
    MetricKey,
    Resource,
    SeverityBucket,
)

_GRADED = (
    SeverityBucket.EXCELLENT,
    SeverityBucket.GOOD,
    SeverityBucket.WARNING,
    SeverityBucket.CRITICAL,
)


@dataclass(frozen=True)
class ThresholdTable:
    """
    Upper bounds for the four best buckets of one channel.

    A value at or below ``bounds[i]`` falls in the i-th bucket; anything
    above the last bound is an overload.
    """

    bounds: Tuple[float, float, float, float]
    unit: str = "ms"

    def __post_init__(self) -> None:
        if len(self.bounds) != len(_GRADED):
            raise ValueError(
                f"Expected {len(_GRADED)} thresholds, got {len(self.bounds)}"
            )
        if any(lower >= upper for lower, upper in zip(self.bounds, self.bounds[1:])):
            raise ValueError(f"Thresholds must be strictly ascending: {self.bounds}")

    @classmethod
    def of(cls, bounds: Sequence[float], unit: str = "ms") -> "ThresholdTable":
        return cls(bounds=tuple(float(bound) for bound in bounds), unit=unit)  # type: ignore[arg-type]

    def bucket_for(self, value: float) -> SeverityBucket:
        for bound, bucket in zip(self.bounds, _GRADED):
            if value <= bound:
                return bucket
        return SeverityBucket.OVERLOAD


DEFAULT_THRESHOLDS: Dict[MetricKey, ThresholdTable] = {
    Channel.API: ThresholdTable.of((100, 300, 500, 1000)),
    Channel.DATABASE: ThresholdTable.of((50, 100, 200, 500)),
    Channel.NETWORK: ThresholdTable.of((100, 250, 500, 1000)),
    Resource.CPU: ThresholdTable.of((30, 50, 70, 90), unit="%"),
    Resource.MEMORY: ThresholdTable.of((40, 60, 75, 90), unit="%"),
}


class SeverityClassifier:
    """Maps a raw metric value onto a severity bucket.

    Pure: the result depends only on the channel, the value and the
    thresholds given at construction. A missing value is the worst case.
    """

    def __init__(self, thresholds: Optional[Mapping[MetricKey, ThresholdTable]] = None):
        table = dict(DEFAULT_THRESHOLDS)
        if thresholds:
            table.update(thresholds)
        self._thresholds = table

    def thresholds_for(self, key: MetricKey) -> ThresholdTable:
        try:
            return self._thresholds[key]
        except KeyError:
            raise ValueError(f"No thresholds configured for '{key}'") from None

    def classify(self, key: MetricKey, value: Optional[float]) -> SeverityBucket:
        if value is None:
            return SeverityBucket.OVERLOAD
        return self.thresholds_for(key).bucket_for(value)
