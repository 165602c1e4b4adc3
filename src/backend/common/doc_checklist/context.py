from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .config import DEFAULT_OVERLAYS, Overlays
from .models import LoanApplication

DAYS_PER_YEAR = 365.25
DAYS_PER_MONTH = 30


@dataclass(frozen=True)
class RuleContext:
    application: LoanApplication
    as_of: date
    overlays: Overlays = field(default_factory=lambda: DEFAULT_OVERLAYS)

    def years_since(self, start: Optional[date]) -> Optional[float]:
        if start is None:
            return None
        return years_between(start, self.as_of)

    def months_since(self, start: Optional[date]) -> Optional[float]:
        if start is None:
            return None
        return (self.as_of - start).days / DAYS_PER_MONTH


def years_between(start: date, end: date) -> float:
    """Fractional years, unrounded; negative when `start` is after `end`."""
    return (end - start).days / DAYS_PER_YEAR
