"""AS path classification against an expected origin and peer set."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from bgp_peering_check.models.classification import ClassificationResult
from bgp_peering_check.models.collector import RouteCollector

logger = logging.getLogger(__name__)


class PathKind(str, Enum):
    """How an observed AS path relates to the expected peerings."""

    EXPECTED = "expected"
    UNEXPECTED = "unexpected"
    FISHY = "fishy"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class PathClassification:
    """Classification of a single AS path.

    Attributes:
        kind: Category of the path
        asn: Peer AS for expected/unexpected paths, the trailing AS for
            fishy paths, None for malformed paths
    """

    kind: PathKind
    asn: int | None = None


def _as_number(token: str) -> int | None:
    if token.isascii() and token.isdigit():
        return int(token)
    return None


def tokenize_path(as_path: str) -> list[str]:
    """Split an AS path string into its whitespace separated tokens."""
    return as_path.split()


def find_peer(tokens: list[str], origin_asn: int) -> int | None:
    """Find the AS directly in front of the trailing run of origin ASes.

    For ``["3356", "174", "15169", "15169"]`` with origin 15169 the run is
    the last two tokens and the peer is 174. Origin tokens must match the
    origin exactly, so a zero-padded "015169" does not extend the run.

    Args:
        tokens: AS path tokens, origin last.
        origin_asn: Expected origin AS.

    Returns:
        The peer AS, or None if the path does not end in the origin or
        nothing numeric precedes the origin run.
    """
    origin = str(origin_asn)
    index = len(tokens) - 1
    while index >= 0 and tokens[index] == origin:
        index -= 1

    if index == len(tokens) - 1 or index < 0:
        return None
    return _as_number(tokens[index])


class PeeringClassifier:
    """Classifier for looking-glass AS paths.

    A path is valid when it ends in one or more repetitions of the origin
    AS preceded by a peer AS. Valid paths through a configured peer are
    counted; valid paths through any other AS are unexpected peers. All
    other paths are fishy announcements, keyed by the last AS of the path
    (which is the origin itself when nothing precedes the origin run).
    """

    def __init__(self, origin_asn: int, expected_peers: Iterable[int]):
        """Initialize the classifier.

        Args:
            origin_asn: Expected origin AS.
            expected_peers: Peer ASes allowed to carry the announcement.
        """
        self.origin_asn = origin_asn
        self.expected_peers = list(expected_peers)
        self._expected = set(self.expected_peers)

    def classify(self, as_path: str) -> PathClassification:
        """Classify a single AS path.

        Args:
            as_path: Space-separated AS path, origin last.

        Returns:
            PathClassification for the path.
        """
        tokens = tokenize_path(as_path)

        peer = find_peer(tokens, self.origin_asn)
        if peer is not None:
            if peer in self._expected:
                return PathClassification(PathKind.EXPECTED, peer)
            return PathClassification(PathKind.UNEXPECTED, peer)

        trailing = _as_number(tokens[-1]) if tokens else None
        if trailing is not None:
            return PathClassification(PathKind.FISHY, trailing)

        return PathClassification(PathKind.MALFORMED)

    def classify_collectors(self, collectors: Iterable[RouteCollector]) -> ClassificationResult:
        """Classify every path seen by every collector.

        Args:
            collectors: Looking-glass snapshot.

        Returns:
            ClassificationResult with counts for every expected peer.
        """
        result = ClassificationResult.for_peers(self.expected_peers)

        for collector in collectors:
            for observation in collector.observations:
                classification = self.classify(observation.as_path)

                if classification.kind == PathKind.EXPECTED:
                    result.path_counts[classification.asn] += 1
                elif classification.kind == PathKind.UNEXPECTED:
                    result.unexpected_peers.setdefault(classification.asn, set()).add(
                        collector.name
                    )
                elif classification.kind == PathKind.FISHY:
                    result.fishy_announcements.setdefault(classification.asn, set()).add(
                        collector.name
                    )
                else:
                    logger.debug(
                        "Ignoring malformed AS path %r at %s", observation.as_path, collector.name
                    )

        return result
