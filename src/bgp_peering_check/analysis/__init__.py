"""Analysis utilities for the BGP peering check."""

from bgp_peering_check.analysis.composer import VerdictComposer
from bgp_peering_check.analysis.path_analysis import PathKind, PeeringClassifier
from bgp_peering_check.analysis.thresholds import evaluate

__all__ = ["PeeringClassifier", "PathKind", "VerdictComposer", "evaluate"]
