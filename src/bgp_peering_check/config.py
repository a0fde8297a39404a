"""Configuration management using Pydantic settings."""

import ipaddress
from enum import Enum
from functools import cached_property
from typing import Annotated

from pydantic import Field, ValidationError, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from bgp_peering_check.models.threshold import ThresholdPair


class ConfigurationError(ValueError):
    """Raised when the check is configured inconsistently."""


class OutputFormat(str, Enum):
    """Output format options."""

    TEXT = "text"
    JSON = "json"


def _split_csv(value):
    if isinstance(value, str):
        if not value.strip():
            return []
        return [item.strip() for item in value.split(",")]
    return value


def _strip_as_prefix(value):
    # Accept "AS3356" as well as "3356"
    if isinstance(value, str):
        value = value.strip()
        if value[:2].upper() == "AS":
            return value[2:]
    return value


class Settings(BaseSettings):
    """Check settings loaded from environment and CLI.

    Settings are loaded in priority order:
    1. CLI arguments (highest priority)
    2. Environment variables (``BGP_CHECK_`` prefix)
    3. .env file
    4. Default values (lowest priority)

    List values may be given as comma-separated strings. Per-peer
    threshold lists are positional: the n-th range belongs to the n-th
    configured peer, and an empty entry leaves that peer unset.
    """

    model_config = SettingsConfigDict(
        env_prefix="BGP_CHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Check target
    asn: int = Field(
        gt=0,
        description="Expected origin AS number",
    )
    prefix: str = Field(
        description="IP prefix to check",
    )
    peers: Annotated[list[int], NoDecode] = Field(
        description="Expected peer AS numbers, in configuration order",
    )

    # Thresholds
    warning: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Per-peer warning ranges, aligned with peers",
    )
    critical: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Per-peer critical ranges, aligned with peers",
    )
    total_warning: str | None = Field(
        default=None,
        description="Warning range for the total path count",
    )
    total_critical: str | None = Field(
        default=None,
        description="Critical range for the total path count",
    )

    # RIPE Stat Settings
    base_url: str = Field(
        default="https://stat.ripe.net/data",
        description="RIPE Stat data API base URL",
    )
    source_app: str = Field(
        default="bgp-peering-check",
        description="sourceapp identifier sent to RIPE Stat",
    )
    timeout: float = Field(
        default=15.0,
        gt=0,
        description="Request timeout in seconds",
    )
    proxy: str | None = Field(
        default=None,
        description="HTTP(S) proxy URL",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates",
    )

    # Output Settings
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT,
        description="Output format (text or json)",
    )
    verbose: int = Field(
        default=0,
        ge=0,
        description="Verbosity level",
    )

    @field_validator("peers", "warning", "critical", mode="before")
    @classmethod
    def _parse_csv(cls, value, info: ValidationInfo):
        items = _split_csv(value)
        if info.field_name == "peers" and isinstance(items, list):
            items = [_strip_as_prefix(item) for item in items]
        return items

    @field_validator("asn", mode="before")
    @classmethod
    def _parse_asn(cls, value):
        return _strip_as_prefix(value)

    @field_validator("peers")
    @classmethod
    def _check_peers(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("at least one expected peer AS is required")
        duplicates = sorted({asn for asn in value if value.count(asn) > 1})
        if duplicates:
            raise ValueError(f"duplicate peer AS: {', '.join(map(str, duplicates))}")
        if any(asn <= 0 for asn in value):
            raise ValueError("peer AS numbers must be positive")
        return value

    @field_validator("prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        return str(ipaddress.ip_network(value.strip(), strict=False))

    @model_validator(mode="after")
    def _build_thresholds(self) -> "Settings":
        for option, ranges in (("warning", self.warning), ("critical", self.critical)):
            if len(ranges) > len(self.peers):
                raise ValueError(
                    f"{len(ranges)} {option} ranges given for {len(self.peers)} peers"
                )

        # Parse eagerly so malformed ranges fail validation
        self.peer_thresholds
        self.total_thresholds
        return self

    @cached_property
    def peer_thresholds(self) -> dict[int, ThresholdPair]:
        """Threshold pair for each expected peer AS."""
        return {
            asn: ThresholdPair.parse(
                self.warning[index] if index < len(self.warning) else None,
                self.critical[index] if index < len(self.critical) else None,
            )
            for index, asn in enumerate(self.peers)
        }

    @cached_property
    def total_thresholds(self) -> ThresholdPair:
        """Threshold pair for the total path count."""
        return ThresholdPair.parse(self.total_warning, self.total_critical)


def load_settings(**overrides) -> Settings:
    """Load settings with optional overrides.

    Args:
        **overrides: Keyword arguments to override settings.

    Returns:
        Settings instance.

    Raises:
        ConfigurationError: If the resulting settings are invalid.
    """
    try:
        return Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(details) from e
