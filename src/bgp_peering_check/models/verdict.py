"""Verdict model: overall status, message and performance data."""

from dataclasses import dataclass, field
from enum import Enum

from bgp_peering_check.models.threshold import ThresholdPair


class Status(str, Enum):
    """Monitoring status levels."""

    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

    @property
    def exit_code(self) -> int:
        """Conventional monitoring-plugin exit code."""
        exit_codes = {
            Status.OK: 0,
            Status.WARNING: 1,
            Status.CRITICAL: 2,
            Status.UNKNOWN: 3,
        }
        return exit_codes[self]

    @property
    def severity(self) -> int:
        """Rank used when merging statuses (CRITICAL > WARNING > UNKNOWN > OK)."""
        ranks = {
            Status.OK: 0,
            Status.UNKNOWN: 1,
            Status.WARNING: 2,
            Status.CRITICAL: 3,
        }
        return ranks[self]

    @classmethod
    def worst(cls, statuses: list["Status"]) -> "Status":
        """Return the most severe status, OK if there are none."""
        return max(statuses, key=lambda s: s.severity, default=cls.OK)


@dataclass(frozen=True)
class PerfSample:
    """A named performance data value.

    Attributes:
        label: Metric name (e.g., "AS3356" or "total")
        value: Observed value
        thresholds: Ranges rendered alongside the value
        minimum: Lower bound of the metric
    """

    label: str
    value: int
    thresholds: ThresholdPair = field(default_factory=ThresholdPair)
    minimum: int = 0

    def render(self) -> str:
        """Render in monitoring-plugin perfdata syntax."""
        warning = str(self.thresholds.warning) if self.thresholds.warning else ""
        critical = str(self.thresholds.critical) if self.thresholds.critical else ""
        return f"'{self.label}'={self.value};{warning};{critical};{self.minimum};"


@dataclass
class Verdict:
    """Outcome of a single check run.

    Attributes:
        status: Most severe status among all findings
        messages: Ordered message fragments
        perfdata: Performance samples for the metrics sink
    """

    status: Status
    messages: list[str] = field(default_factory=list)
    perfdata: list[PerfSample] = field(default_factory=list)

    DELIMITER = "; "

    @property
    def message(self) -> str:
        """All message fragments joined by the fixed delimiter."""
        return self.DELIMITER.join(self.messages)

    @property
    def exit_code(self) -> int:
        """Process exit code for the overall status."""
        return self.status.exit_code

    @classmethod
    def failure(cls, message: str, status: Status = Status.UNKNOWN) -> "Verdict":
        """Create a verdict for a run that could not complete."""
        return cls(status=status, messages=[message])

    def to_dict(self) -> dict:
        """Convert verdict to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "message": self.message,
            "messages": list(self.messages),
            "perfdata": [
                {
                    "label": sample.label,
                    "value": sample.value,
                    "min": sample.minimum,
                    "warning": str(sample.thresholds.warning or ""),
                    "critical": str(sample.thresholds.critical or ""),
                }
                for sample in self.perfdata
            ],
        }
