"""CLI entrypoint for the BGP peering check."""

import asyncio
import logging
import sys

import click
from dotenv import load_dotenv

from bgp_peering_check.analysis.path_analysis import PeeringClassifier
from bgp_peering_check.check import CheckRun, run_check
from bgp_peering_check.config import ConfigurationError, OutputFormat, load_settings
from bgp_peering_check.models.verdict import Verdict
from bgp_peering_check.output import OutputFormatter

logger = logging.getLogger("bgp_peering_check")


def configure_logging(verbose: int) -> None:
    """Configure logging to stderr (stdout carries the plugin output)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose >= 2 else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.version_option(package_name="bgp-peering-check")
@click.option("-a", "--asn", help="Expected origin AS number (e.g., 64496 or AS64496)")
@click.option("-p", "--prefix", help="IP prefix to check (e.g., 192.0.2.0/24)")
@click.option(
    "-P",
    "--peers",
    help="Comma-separated list of expected peer AS numbers",
)
@click.option(
    "-w",
    "--warning",
    help="Comma-separated per-peer warning ranges, in the same order as --peers",
)
@click.option(
    "-c",
    "--critical",
    help="Comma-separated per-peer critical ranges, in the same order as --peers",
)
@click.option("--total-warning", help="Warning range for the total path count")
@click.option("--total-critical", help="Critical range for the total path count")
@click.option(
    "-t",
    "--timeout",
    help="Request timeout in seconds (default: 15)",
)
@click.option("--proxy", help="HTTP(S) proxy URL")
@click.option(
    "--insecure",
    is_flag=True,
    default=None,
    help="Do not verify TLS certificates",
)
@click.option("--base-url", help="RIPE Stat data API base URL")
@click.option(
    "--output",
    "output_format",
    help="Output format: text or json (default: text)",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Show the collector table (-v) and debug logging (-vv)",
)
def main(
    asn: str | None,
    prefix: str | None,
    peers: str | None,
    warning: str | None,
    critical: str | None,
    total_warning: str | None,
    total_critical: str | None,
    timeout: str | None,
    proxy: str | None,
    insecure: bool | None,
    base_url: str | None,
    output_format: str | None,
    verbose: int,
):
    """Check that PREFIX is announced by ASN through the expected peers.

    Queries the RIPE Stat looking glass and counts, per expected peer, the
    paths that end in the origin AS. Paths through other peers and paths
    that do not end in the origin are CRITICAL. Ranges use the usual
    monitoring-plugin syntax (10, 10:, ~:10, 10:20, @10:20).

    Example:
        check-bgp-peering -a 64496 -p 192.0.2.0/24 -P 3356,174 -w 5:,5: -c 1:,1:

    Exit codes: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN.
    """
    # Load environment variables from .env file
    load_dotenv()
    configure_logging(verbose)

    settings_kwargs = {
        "asn": asn,
        "prefix": prefix,
        "peers": peers,
        "warning": warning,
        "critical": critical,
        "total_warning": total_warning,
        "total_critical": total_critical,
        "timeout": timeout,
        "proxy": proxy,
        "verify_ssl": False if insecure else None,
        "base_url": base_url,
        "output_format": output_format,
        "verbose": verbose or None,
    }

    try:
        settings = load_settings(**settings_kwargs)
    except ConfigurationError as e:
        verdict = Verdict.failure(f"Configuration error: {e}")
        output = OutputFormatter(
            format=OutputFormat.JSON if output_format == "json" else OutputFormat.TEXT
        )
        click.echo(output.render(CheckRun(verdict=verdict)))
        sys.exit(verdict.exit_code)

    output = OutputFormatter(format=settings.output_format, verbose=settings.verbose)

    try:
        run = asyncio.run(run_check(settings))
    except Exception as e:
        logger.debug("Check failed", exc_info=True)
        run = CheckRun(verdict=Verdict.failure(f"Check failed: {e}"))

    output.display_collectors(run, PeeringClassifier(settings.asn, settings.peers))
    click.echo(output.render(run))
    sys.exit(run.verdict.exit_code)


if __name__ == "__main__":
    main()
