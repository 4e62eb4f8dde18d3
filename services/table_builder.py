"""Table building functionality."""
from typing import TYPE_CHECKING, Any, Optional, Sequence

import pandas as pd

from config import AppConfig
from data import Ticket
from utils import UrgencyHelper

if TYPE_CHECKING:
    from pandas.io.formats.style import Styler


class TableBuilder:
    """Builds the ticket table shown in the dashboard."""

    def __init__(self, config: AppConfig):
        self.config = config
        self.urgency = UrgencyHelper(config)

    def build_ticket_table(self, tickets: Sequence[Ticket]) -> pd.DataFrame:
        """Build display table; every column is present on every row."""
        columns = list(self.config.TABLE_COLUMNS)
        table = pd.DataFrame(
            [ticket.to_record() for ticket in tickets],
            columns=columns,
            dtype="object",
        )
        if table.empty:
            return table.rename(columns=self.config.TABLE_COLUMNS)

        for column in ("fecha_creacion", "fecha_resolucion"):
            table[column] = table[column].map(self.format_timestamp)
        table["estado"] = table["estado"].map(self.format_status)
        for column in ("problema", "sector", "urgencia", "responsable"):
            table[column] = table[column].map(self.format_text)
        table["imagenes"] = table["imagenes"].map(self.format_link)

        return table.rename(columns=self.config.TABLE_COLUMNS)

    def style_ticket_table(self, table: pd.DataFrame) -> "Styler":
        """Colour urgency and status cells as pills by their display intent."""
        styler = table.style
        if table.empty:
            return styler
        urgency_column = self.config.TABLE_COLUMNS["urgencia"]
        status_column = self.config.TABLE_COLUMNS["estado"]
        return styler.apply(
            lambda column: column.map(self.urgency_style), subset=[urgency_column]
        ).apply(
            lambda column: column.map(self.status_style), subset=[status_column]
        )

    def urgency_style(self, value: Any) -> str:
        if value == self.config.PLACEHOLDER:
            return ""
        return self.config.INTENT_STYLES[self.urgency.intent(value)]

    def status_style(self, value: Any) -> str:
        intent = "ok" if value == self.config.RESOLVED_STATUS else "warn"
        return self.config.INTENT_STYLES[intent]

    def format_text(self, value: Any) -> str:
        if value is None or pd.isna(value) or not str(value).strip():
            return self.config.PLACEHOLDER
        return str(value)

    def format_link(self, value: Any) -> str:
        """Missing links show the placeholder instead of a blank cell."""
        if value is None or pd.isna(value) or not str(value).strip():
            return self.config.PLACEHOLDER
        return str(value).strip()

    def format_status(self, value: Any) -> str:
        """Anything not resolved is shown as pending."""
        if value == self.config.RESOLVED_STATUS:
            return self.config.RESOLVED_STATUS
        return self.config.PENDING_STATUS

    def format_timestamp(self, value: Any) -> str:
        """Format a store timestamp like ``12 mar 2024, 14:05``."""
        if value is None or pd.isna(value) or not str(value).strip():
            return self.config.PLACEHOLDER
        moment = self._to_local(value)
        if moment is None:
            return str(value)
        month = self.config.MONTH_ABBR_ES[moment.month]
        return f"{moment.day} {month} {moment.year}, {moment:%H:%M}"

    def _to_local(self, value: Any) -> Optional[pd.Timestamp]:
        moment = pd.to_datetime(value, errors="coerce")
        if moment is None or pd.isna(moment):
            return None
        if moment.tzinfo is None:
            return moment
        return moment.tz_convert(self.config.DISPLAY_TIMEZONE)
