"""Threshold range models in monitoring-plugin range syntax."""

import math
from dataclasses import dataclass


class RangeError(ValueError):
    """Raised when a threshold range string cannot be parsed."""


@dataclass(frozen=True)
class ThresholdRange:
    """A monitoring-plugin threshold range.

    Supported forms:
        ``10``     alert if value < 0 or > 10
        ``10:``    alert if value < 10
        ``~:10``   alert if value > 10
        ``10:20``  alert if value < 10 or > 20
        ``@10:20`` alert if 10 <= value <= 20

    Attributes:
        start: Lower bound (may be -inf)
        end: Upper bound (may be inf)
        invert: Alert when inside the range instead of outside
        text: The range as it was configured
    """

    start: float
    end: float
    invert: bool = False
    text: str = ""

    @classmethod
    def parse(cls, text: str) -> "ThresholdRange":
        """Parse a range string.

        Args:
            text: Range in monitoring-plugin syntax.

        Returns:
            ThresholdRange instance.

        Raises:
            RangeError: If the string is not a valid range.
        """
        spec = text.strip()
        if not spec:
            raise RangeError("Empty threshold range")

        invert = spec.startswith("@")
        body = spec[1:] if invert else spec
        if not body:
            raise RangeError(f"Invalid threshold range: {text!r}")

        if ":" in body:
            start_text, end_text = body.split(":", 1)
        else:
            start_text, end_text = "", body

        try:
            if start_text == "~":
                start = -math.inf
            else:
                start = _to_number(start_text) if start_text else 0.0
            end = _to_number(end_text) if end_text else math.inf
        except ValueError:
            raise RangeError(f"Invalid threshold range: {text!r}") from None

        if start > end:
            raise RangeError(f"Threshold range start exceeds end: {text!r}")

        return cls(start=start, end=end, invert=invert, text=spec)

    def alerts(self, value: float) -> bool:
        """Return True if the value should raise an alert for this range."""
        inside = self.start <= value <= self.end
        return inside if self.invert else not inside

    def __str__(self) -> str:
        return self.text


def _to_number(text: str) -> float:
    value = float(text)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(text)
    return value


@dataclass(frozen=True)
class ThresholdPair:
    """Warning and critical ranges for a single metric.

    Attributes:
        warning: Warning range, or None if unset
        critical: Critical range, or None if unset
    """

    warning: ThresholdRange | None = None
    critical: ThresholdRange | None = None

    @property
    def is_set(self) -> bool:
        """Return True if at least one of the ranges is configured."""
        return self.warning is not None or self.critical is not None

    @classmethod
    def parse(cls, warning: str | None, critical: str | None) -> "ThresholdPair":
        """Build a pair from optional range strings; blank means unset."""
        return cls(
            warning=ThresholdRange.parse(warning) if warning and warning.strip() else None,
            critical=ThresholdRange.parse(critical) if critical and critical.strip() else None,
        )
