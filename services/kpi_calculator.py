"""KPI calculation functionality."""
from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from config import AppConfig
from data import Ticket
from utils import TextNormalizer


@dataclass(frozen=True)
class KPISnapshot:
    """Summary counts over the displayed tickets."""

    total: int = 0
    pending: int = 0
    resolved: int = 0
    leve: int = 0
    moderada: int = 0
    critica: int = 0
    universe_total: Optional[int] = None


class KPICalculator:
    """Calculates key performance indicators."""

    def __init__(self, config: AppConfig):
        self.config = config

    def calculate_kpis(
        self, tickets: Sequence[Ticket], universe_total: Optional[int] = None
    ) -> KPISnapshot:
        """Compute main KPI metrics.

        ``total`` is the size of the displayed (already filtered) set;
        ``universe_total`` carries the unfiltered store count when known.
        """
        frame = self._build_frame(tickets)
        if frame.empty:
            return KPISnapshot(universe_total=universe_total)

        urgency = frame["urgency"].map(TextNormalizer.normalize)
        return KPISnapshot(
            total=int(len(frame)),
            pending=int(frame["status"].eq(self.config.PENDING_STATUS).sum()),
            resolved=int(frame["status"].eq(self.config.RESOLVED_STATUS).sum()),
            leve=int(urgency.eq("leve").sum()),
            moderada=int(urgency.eq("moderada").sum()),
            critica=int(self._build_critical_mask(frame["urgency"]).sum()),
            universe_total=universe_total,
        )

    @staticmethod
    def _build_frame(tickets: Sequence[Ticket]) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "status": [ticket.status for ticket in tickets],
                "urgency": [ticket.urgency for ticket in tickets],
            },
            dtype="object",
        )

    @staticmethod
    def _build_critical_mask(urgency: pd.Series) -> pd.Series:
        """Build boolean mask for every spelling of the critical tier."""
        return urgency.map(TextNormalizer.is_critical).astype(bool)
