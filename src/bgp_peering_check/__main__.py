"""Allow running as ``python -m bgp_peering_check``."""

from bgp_peering_check.cli import main

main()
