"""Domain services package."""

from .issue_detector import detect_issues
from .score_aggregator import ScoreAggregator
from .severity_classifier import DEFAULT_THRESHOLDS, SeverityClassifier, ThresholdTable

__all__ = [
    "DEFAULT_THRESHOLDS",
    "ScoreAggregator",
    "SeverityClassifier",
    "ThresholdTable",
    "detect_issues",
]
