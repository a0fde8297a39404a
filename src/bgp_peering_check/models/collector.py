"""Route collector snapshot models from the RIPE Stat looking glass."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PeerObservation:
    """A single AS path seen by a route collector.

    Attributes:
        as_path: Space-separated AS numbers, origin last (e.g., "3356 15169")
        peer: Address of the collector peer that reported the path
        asn_origin: Origin AS as reported by the looking glass
    """

    as_path: str
    peer: str | None = None
    asn_origin: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "PeerObservation":
        """Create a PeerObservation from a looking-glass peer entry."""
        asn_origin = data.get("asn_origin")
        return cls(
            as_path=str(data.get("as_path", "")),
            peer=data.get("peer"),
            asn_origin=str(asn_origin) if asn_origin is not None else None,
        )


@dataclass(frozen=True)
class RouteCollector:
    """Snapshot of one route collector for the queried prefix.

    Attributes:
        name: Collector identifier (e.g., "RRC00")
        location: Human readable location label
        observations: AS paths in the order the looking glass returned them
    """

    name: str
    location: str = ""
    observations: tuple[PeerObservation, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        """Return the collector name with its location, if known."""
        if self.location:
            return f"{self.name} ({self.location})"
        return self.name

    @classmethod
    def from_dict(cls, data: dict) -> "RouteCollector":
        """Create a RouteCollector from a looking-glass ``rrcs`` entry."""
        return cls(
            name=str(data.get("rrc", "unknown")),
            location=data.get("location") or "",
            observations=tuple(
                PeerObservation.from_dict(peer) for peer in data.get("peers", [])
            ),
        )
