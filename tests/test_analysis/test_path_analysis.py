"""Tests for AS path classification."""

import pytest

from bgp_peering_check.analysis.path_analysis import (
    PathClassification,
    PathKind,
    PeeringClassifier,
    find_peer,
    tokenize_path,
)
from bgp_peering_check.models.collector import PeerObservation, RouteCollector


def make_collector(name: str, *paths: str) -> RouteCollector:
    """Build a collector with the given AS paths."""
    return RouteCollector(
        name=name,
        location="Amsterdam, Netherlands",
        observations=tuple(PeerObservation(as_path=p) for p in paths),
    )


class TestFindPeer:
    """Tests for find_peer."""

    def test_single_origin_after_peer(self):
        """Test peer directly in front of the origin."""
        assert find_peer(tokenize_path("3356 65010 65001"), 65001) == 65010

    def test_prepended_origin(self):
        """Test that origin prepending is skipped."""
        assert find_peer(tokenize_path("65020 65001 65001 65001"), 65001) == 65020

    def test_wrong_trailing_as(self):
        """Test path not ending in the origin."""
        assert find_peer(tokenize_path("65010 65002"), 65001) is None

    def test_origin_only(self):
        """Test path consisting of the origin alone."""
        assert find_peer(tokenize_path("65001"), 65001) is None
        assert find_peer(tokenize_path("65001 65001"), 65001) is None

    def test_empty_path(self):
        """Test empty path."""
        assert find_peer([], 65001) is None

    def test_non_numeric_peer(self):
        """Test AS set in front of the origin."""
        assert find_peer(tokenize_path("3356 {65010,65011} 65001"), 65001) is None

    def test_zero_padded_origin_is_not_origin(self):
        """Test that a zero-padded token does not extend the origin run."""
        assert find_peer(tokenize_path("65010 065001"), 65001) is None


class TestPeeringClassifier:
    """Tests for PeeringClassifier."""

    @pytest.fixture
    def classifier(self):
        """Classifier for origin 65001 with two expected peers."""
        return PeeringClassifier(65001, [65010, 65020])

    def test_expected_peer(self, classifier):
        """Test valid path through an expected peer."""
        assert classifier.classify("65010 65001") == PathClassification(PathKind.EXPECTED, 65010)

    def test_expected_peer_with_prepending(self, classifier):
        """Test valid path with origin prepending."""
        result = classifier.classify("1299 65020 65001 65001")
        assert result == PathClassification(PathKind.EXPECTED, 65020)

    def test_unexpected_peer(self, classifier):
        """Test valid path through a peer that is not configured."""
        assert classifier.classify("65099 65001") == PathClassification(PathKind.UNEXPECTED, 65099)

    def test_fishy_wrong_origin(self, classifier):
        """Test that a path ending in another AS is fishy, keyed by that AS."""
        assert classifier.classify("65010 65002") == PathClassification(PathKind.FISHY, 65002)

    def test_fishy_origin_only(self, classifier):
        """Test that an origin-only path is fishy, keyed by the origin."""
        assert classifier.classify("65001") == PathClassification(PathKind.FISHY, 65001)
        assert classifier.classify("65001 65001") == PathClassification(PathKind.FISHY, 65001)

    def test_fishy_as_set_before_origin(self, classifier):
        """Test that a non-numeric token before the origin run is fishy."""
        result = classifier.classify("3356 {65010,65011} 65001")
        assert result == PathClassification(PathKind.FISHY, 65001)

    def test_malformed_empty(self, classifier):
        """Test that an empty path is malformed."""
        assert classifier.classify("").kind == PathKind.MALFORMED
        assert classifier.classify("   ").kind == PathKind.MALFORMED

    def test_malformed_trailing_garbage(self, classifier):
        """Test that a non-numeric trailing token is malformed."""
        result = classifier.classify("65010 65001 {65003}")
        assert result == PathClassification(PathKind.MALFORMED)

    def test_extra_whitespace(self, classifier):
        """Test that tabs and repeated spaces separate tokens."""
        assert classifier.classify("  65010\t 65001  ").kind == PathKind.EXPECTED

    def test_origin_substring_is_not_origin(self, classifier):
        """Test that an AS containing the origin digits is not the origin."""
        assert classifier.classify("65010 165001") == PathClassification(PathKind.FISHY, 165001)

    def test_zero_padded_origin_is_fishy(self, classifier):
        """Test that a zero-padded origin is not accepted as the origin."""
        assert classifier.classify("65010 065001") == PathClassification(PathKind.FISHY, 65001)


class TestClassifyCollectors:
    """Tests for the classification pass over a snapshot."""

    def test_scenario_with_unexpected_peer(self):
        """Test one collector with expected, prepended and unexpected paths."""
        classifier = PeeringClassifier(65001, [65010, 65020])
        collectors = [make_collector("rrc00", "65010 65001", "65020 65001 65001", "65099 65001")]

        result = classifier.classify_collectors(collectors)

        assert result.path_counts == {65010: 1, 65020: 1}
        assert result.unexpected_peers == {65099: {"rrc00"}}
        assert result.fishy_announcements == {}
        assert result.total_paths == 2

    def test_fishy_recorded_per_collector(self):
        """Test fishy announcement collectors are collected per AS."""
        classifier = PeeringClassifier(65001, [65010])
        collectors = [
            make_collector("rrc00", "65010 65002"),
            make_collector("rrc01", "3356 65002", "65010 65001"),
            make_collector("rrc00", "174 65002"),
        ]

        result = classifier.classify_collectors(collectors)

        assert result.fishy_announcements == {65002: {"rrc00", "rrc01"}}
        assert result.path_counts == {65010: 1}

    def test_unobserved_peer_has_zero_count(self):
        """Test that every expected peer is present in the counts."""
        classifier = PeeringClassifier(65001, [65010, 65020, 65030])
        result = classifier.classify_collectors([make_collector("rrc00", "65010 65001")])

        assert result.path_counts == {65010: 1, 65020: 0, 65030: 0}

    def test_counts_across_collectors(self):
        """Test counts are summed across collectors."""
        classifier = PeeringClassifier(65001, [65010, 65020])
        collectors = [
            make_collector("rrc00", "65010 65001", "3356 65020 65001"),
            make_collector("rrc01", "65010 65001", "65010 65001 65001"),
        ]

        result = classifier.classify_collectors(collectors)

        assert result.path_counts == {65010: 3, 65020: 1}
        assert result.total_paths == 4

    def test_total_excludes_unexpected_and_fishy(self):
        """Test the total only counts expected peers."""
        classifier = PeeringClassifier(65001, [65010])
        collectors = [
            make_collector("rrc00", "65010 65001", "65099 65001", "65010 65002", "65001"),
        ]

        result = classifier.classify_collectors(collectors)

        assert result.total_paths == 1
        assert result.unexpected_peers == {65099: {"rrc00"}}
        assert result.fishy_announcements == {65002: {"rrc00"}, 65001: {"rrc00"}}

    def test_malformed_paths_are_dropped(self):
        """Test malformed paths leave no trace in the result."""
        classifier = PeeringClassifier(65001, [65010])
        result = classifier.classify_collectors([make_collector("rrc00", "", "foo bar")])

        assert result.path_counts == {65010: 0}
        assert result.fishy_announcements == {}
        assert result.unexpected_peers == {}

    def test_idempotent(self):
        """Test classifying the same snapshot twice gives equal results."""
        classifier = PeeringClassifier(65001, [65010, 65020])
        collectors = (
            make_collector("rrc00", "65010 65001", "65099 65001", "65010 65002"),
            make_collector("rrc03", "65020 65001"),
        )

        assert classifier.classify_collectors(collectors) == classifier.classify_collectors(
            collectors
        )

    def test_empty_snapshot(self):
        """Test no collectors at all."""
        classifier = PeeringClassifier(65001, [65010])
        result = classifier.classify_collectors([])

        assert result.path_counts == {65010: 0}
        assert result.total_paths == 0
