"""Single check run: fetch, classify, evaluate, compose."""

import logging
from dataclasses import dataclass, field

from bgp_peering_check.analysis.composer import VerdictComposer
from bgp_peering_check.analysis.path_analysis import PeeringClassifier
from bgp_peering_check.config import Settings
from bgp_peering_check.models.classification import ClassificationResult
from bgp_peering_check.models.collector import RouteCollector
from bgp_peering_check.models.verdict import Verdict
from bgp_peering_check.sources.base import LookingGlassError
from bgp_peering_check.sources.ripe_stat import RipeStatClient

logger = logging.getLogger(__name__)


@dataclass
class CheckRun:
    """Everything produced by one check run.

    Attributes:
        verdict: Final status, message and perfdata
        collectors: Looking-glass snapshot (empty if the fetch failed)
        result: Classification tallies (None if the fetch failed)
    """

    verdict: Verdict
    collectors: tuple[RouteCollector, ...] = field(default_factory=tuple)
    result: ClassificationResult | None = None


def client_from_settings(settings: Settings) -> RipeStatClient:
    """Create a looking-glass client from settings."""
    return RipeStatClient(
        base_url=settings.base_url,
        timeout=settings.timeout,
        proxy=settings.proxy,
        verify_ssl=settings.verify_ssl,
        source_app=settings.source_app,
    )


def evaluate_snapshot(settings: Settings, collectors: tuple[RouteCollector, ...]) -> CheckRun:
    """Classify a snapshot and compose the verdict.

    Args:
        settings: Check settings.
        collectors: Looking-glass snapshot.

    Returns:
        CheckRun for the snapshot.
    """
    classifier = PeeringClassifier(settings.asn, settings.peers)
    result = classifier.classify_collectors(collectors)
    logger.debug(
        "AS%d: %d expected paths, %d fishy, %d unexpected",
        settings.asn,
        result.total_paths,
        len(result.fishy_announcements),
        len(result.unexpected_peers),
    )

    composer = VerdictComposer(settings.peer_thresholds, settings.total_thresholds)
    return CheckRun(verdict=composer.compose(result), collectors=collectors, result=result)


async def run_check(settings: Settings, client: RipeStatClient | None = None) -> CheckRun:
    """Run the check once.

    Fetch failures end the run with an UNKNOWN verdict; they are not retried.

    Args:
        settings: Check settings.
        client: Optional pre-built client (created from settings otherwise).

    Returns:
        CheckRun with the verdict.
    """
    client = client or client_from_settings(settings)

    try:
        async with client:
            collectors = await client.get_looking_glass(settings.prefix)
    except LookingGlassError as e:
        logger.debug("Looking glass query for %s failed: %s", settings.prefix, e)
        return CheckRun(verdict=Verdict.failure(str(e)))

    return evaluate_snapshot(settings, collectors)
