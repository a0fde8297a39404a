"""Data models for the BGP peering check."""

from bgp_peering_check.models.classification import ClassificationResult
from bgp_peering_check.models.collector import PeerObservation, RouteCollector
from bgp_peering_check.models.threshold import RangeError, ThresholdPair, ThresholdRange
from bgp_peering_check.models.verdict import PerfSample, Status, Verdict

__all__ = [
    "ClassificationResult",
    "PeerObservation",
    "RouteCollector",
    "RangeError",
    "ThresholdPair",
    "ThresholdRange",
    "PerfSample",
    "Status",
    "Verdict",
]
