"""Result of classifying looking-glass AS paths."""

from dataclasses import dataclass, field


@dataclass
class ClassificationResult:
    """Tallies from one classification pass over all collectors.

    Attributes:
        path_counts: Valid announcements per expected peer AS. Every
            expected peer is present, possibly with a count of 0.
        fishy_announcements: AS -> collector names where a path did not
            end at the origin through a distinct peer
        unexpected_peers: Peer AS not in the expected set -> collector names
            where it delivered an otherwise valid announcement
    """

    path_counts: dict[int, int] = field(default_factory=dict)
    fishy_announcements: dict[int, set[str]] = field(default_factory=dict)
    unexpected_peers: dict[int, set[str]] = field(default_factory=dict)

    @classmethod
    def for_peers(cls, peers: list[int]) -> "ClassificationResult":
        """Create an empty result with a zero count for every expected peer."""
        return cls(path_counts={asn: 0 for asn in peers})

    @property
    def total_paths(self) -> int:
        """Sum of valid announcements over the expected peers."""
        return sum(self.path_counts.values())

    def to_dict(self) -> dict:
        """Convert result to dictionary for JSON serialization."""
        return {
            "path_counts": {str(asn): count for asn, count in self.path_counts.items()},
            "total_paths": self.total_paths,
            "fishy_announcements": {
                str(asn): sorted(collectors)
                for asn, collectors in sorted(self.fishy_announcements.items())
            },
            "unexpected_peers": {
                str(asn): sorted(collectors)
                for asn, collectors in sorted(self.unexpected_peers.items())
            },
        }
