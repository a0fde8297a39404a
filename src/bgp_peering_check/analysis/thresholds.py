"""Threshold evaluation for path counts."""

from bgp_peering_check.models.threshold import ThresholdPair
from bgp_peering_check.models.verdict import Status


def evaluate(value: float, thresholds: ThresholdPair) -> Status:
    """Grade a value against a warning/critical pair.

    The critical range is checked first, so a value outside it is
    CRITICAL whatever the warning range says. Unset ranges never alert.

    Args:
        value: Observed value.
        thresholds: Warning and critical ranges.

    Returns:
        OK, WARNING or CRITICAL.
    """
    if thresholds.critical is not None and thresholds.critical.alerts(value):
        return Status.CRITICAL
    if thresholds.warning is not None and thresholds.warning.alerts(value):
        return Status.WARNING
    return Status.OK
