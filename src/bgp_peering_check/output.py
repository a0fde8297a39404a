"""Output formatting and display utilities."""

import json

from rich.console import Console
from rich.table import Table

from bgp_peering_check.analysis.path_analysis import PathKind, PeeringClassifier
from bgp_peering_check.check import CheckRun
from bgp_peering_check.config import OutputFormat
from bgp_peering_check.models.verdict import Verdict

KIND_STYLES = {
    PathKind.EXPECTED: "green",
    PathKind.UNEXPECTED: "red",
    PathKind.FISHY: "bold red",
    PathKind.MALFORMED: "dim",
}


def format_plugin_line(verdict: Verdict, service: str = "BGP") -> str:
    """Format a verdict as a monitoring-plugin status line.

    Example:
        BGP OK - 12 via AS3356, 9 via AS174 | 'AS3356'=12;;;0; 'total'=21;;;0;
    """
    line = f"{service} {verdict.status.value} - {verdict.message}"
    if verdict.perfdata:
        line += " | " + " ".join(sample.render() for sample in verdict.perfdata)
    return line


class OutputFormatter:
    """Handles output of a check run.

    The status line (or JSON document) goes to stdout; the verbose
    collector view is rendered with Rich on stderr so it never mixes
    with what the monitoring system parses.
    """

    def __init__(self, format: OutputFormat = OutputFormat.TEXT, verbose: int = 0):
        """Initialize the formatter.

        Args:
            format: Output format mode.
            verbose: Verbosity level; 1 and above shows the collector table.
        """
        self.format = format
        self.verbose = verbose
        self.console = Console(stderr=True)

    def render(self, run: CheckRun) -> str:
        """Render the result of a run for stdout."""
        if self.format == OutputFormat.JSON:
            document = run.verdict.to_dict()
            if run.result is not None:
                document["classification"] = run.result.to_dict()
            return json.dumps(document, indent=2)
        return format_plugin_line(run.verdict)

    def display_collectors(self, run: CheckRun, classifier: PeeringClassifier) -> None:
        """Display every observed path and its classification.

        Args:
            run: Completed check run.
            classifier: Classifier used for the run.
        """
        if self.verbose < 1 or not run.collectors:
            return

        table = Table(title=f"Looking glass paths (origin AS{classifier.origin_asn})")
        table.add_column("Collector", style="bold")
        table.add_column("Peer", style="dim")
        table.add_column("AS Path")
        table.add_column("Reported origin", justify="right")
        table.add_column("Class")
        table.add_column("AS", justify="right")

        for collector in run.collectors:
            for observation in collector.observations:
                classification = classifier.classify(observation.as_path)
                style = KIND_STYLES[classification.kind]
                table.add_row(
                    collector.label,
                    observation.peer or "-",
                    observation.as_path,
                    observation.asn_origin or "-",
                    f"[{style}]{classification.kind.value}[/{style}]",
                    str(classification.asn) if classification.asn is not None else "-",
                )

        self.console.print(table)
