"""Compose classification and threshold findings into a single verdict."""

from bgp_peering_check.analysis.thresholds import evaluate
from bgp_peering_check.models.classification import ClassificationResult
from bgp_peering_check.models.threshold import ThresholdPair
from bgp_peering_check.models.verdict import PerfSample, Status, Verdict


def _collector_list(collectors: set[str]) -> str:
    return ", ".join(sorted(collectors))


class VerdictComposer:
    """Builds the Verdict for one check run.

    Message order:
    1. Fishy announcements, by AS (CRITICAL)
    2. Unexpected peers, by AS (CRITICAL)
    3. Per-peer threshold breaches, in configured peer order
    4. Total threshold breach
    5. Path count summary for every expected peer, by AS (OK)
    """

    def __init__(
        self,
        peer_thresholds: dict[int, ThresholdPair],
        total_thresholds: ThresholdPair | None = None,
    ):
        """Initialize the composer.

        Args:
            peer_thresholds: Threshold pair per expected peer, in configured order.
            total_thresholds: Threshold pair for the total path count.
        """
        self.peer_thresholds = peer_thresholds
        self.total_thresholds = total_thresholds or ThresholdPair()

    def compose(self, result: ClassificationResult) -> Verdict:
        """Compose the verdict for a classification result.

        Args:
            result: Tallies from the classification pass.

        Returns:
            Verdict with merged status, ordered messages and perfdata.
        """
        findings: list[tuple[Status, str]] = []

        for asn, collectors in sorted(result.fishy_announcements.items()):
            seen_at = _collector_list(collectors)
            findings.append((Status.CRITICAL, f"fishy announcement from AS{asn} at {seen_at}"))

        for asn, collectors in sorted(result.unexpected_peers.items()):
            seen_at = _collector_list(collectors)
            findings.append((Status.CRITICAL, f"unexpected peer AS{asn} at {seen_at}"))

        for asn, thresholds in self.peer_thresholds.items():
            if not thresholds.is_set:
                continue
            count = result.path_counts.get(asn, 0)
            status = evaluate(count, thresholds)
            if status != Status.OK:
                findings.append((status, f"path count AS{asn}={count}"))

        total = result.total_paths
        if self.total_thresholds.is_set:
            status = evaluate(total, self.total_thresholds)
            if status != Status.OK:
                findings.append((status, f"total path count={total}"))

        summary = ", ".join(
            f"{count} via AS{asn}" for asn, count in sorted(result.path_counts.items())
        )
        findings.append((Status.OK, summary))

        return Verdict(
            status=Status.worst([status for status, _ in findings]),
            messages=[message for _, message in findings],
            perfdata=self.perfdata(result),
        )

    def perfdata(self, result: ClassificationResult) -> list[PerfSample]:
        """Performance samples for every expected peer plus the total."""
        samples = [
            PerfSample(
                label=f"AS{asn}",
                value=result.path_counts.get(asn, 0),
                thresholds=thresholds,
            )
            for asn, thresholds in self.peer_thresholds.items()
        ]
        samples.append(
            PerfSample(label="total", value=result.total_paths, thresholds=self.total_thresholds)
        )
        return samples
