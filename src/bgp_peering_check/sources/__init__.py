"""Looking-glass data sources."""

from bgp_peering_check.sources.base import (
    ApiStatusError,
    DataSource,
    LookingGlassError,
    TransportError,
    UnexpectedContentTypeError,
)
from bgp_peering_check.sources.ripe_stat import RipeStatClient

__all__ = [
    "ApiStatusError",
    "DataSource",
    "LookingGlassError",
    "RipeStatClient",
    "TransportError",
    "UnexpectedContentTypeError",
]
