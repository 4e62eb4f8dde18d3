"""CSV export of the visible ticket rows."""
import csv
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from config import AppConfig
from data import Ticket

LINE_BREAKS = r"\r\n|\r|\n"


@dataclass(frozen=True)
class CSVExport:
    """A ready-to-download CSV file."""

    filename: str
    content: str
    mime: str

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


class CSVExporter:
    """Builds CSV text from tickets.

    Every field is quoted, inner quotes are doubled and line breaks become a
    single space, so each line of the output is exactly one row.
    """

    MIME_TYPE = "text/csv; charset=utf-8"

    def __init__(self, config: AppConfig):
        self.config = config

    def encode(self, tickets: Sequence[Ticket]) -> str:
        """Encode tickets as CSV text with a fixed header row."""
        header = ",".join(self.config.EXPORT_COLUMNS)
        frame = self._build_export_frame(tickets)
        if frame.empty:
            return header

        body = frame.to_csv(
            index=False,
            header=False,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
        )
        if body.endswith("\n"):
            body = body[:-1]
        return header + "\n" + body

    def build_filename(self, day: Optional[date] = None) -> str:
        """Build export filename like ``mantenimiento_2024-05-01.csv``."""
        day = day or date.today()
        return f"{self.config.EXPORT_PREFIX}_{day.isoformat()}.csv"

    def build_export(self, tickets: Sequence[Ticket], day: Optional[date] = None) -> CSVExport:
        return CSVExport(
            filename=self.build_filename(day),
            content=self.encode(tickets),
            mime=self.MIME_TYPE,
        )

    def _build_export_frame(self, tickets: Sequence[Ticket]) -> pd.DataFrame:
        """Build the export table with one text column per exported field."""
        frame = pd.DataFrame(
            [ticket.to_record() for ticket in tickets],
            columns=self.config.EXPORT_COLUMNS,
            dtype="object",
        )
        frame = frame.fillna("")
        for column in frame.columns:
            frame[column] = frame[column].astype(str).str.replace(LINE_BREAKS, " ", regex=True)
        return frame
