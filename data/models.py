"""Ticket records and dashboard state values."""
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

# attribute -> store column
TICKET_COLUMNS: Dict[str, str] = {
    "id": "id",
    "created_at": "fecha_creacion",
    "created_by": "usuario_creacion",
    "problem": "problema",
    "sector": "sector",
    "urgency": "urgencia",
    "assignee": "responsable",
    "attachments_link": "imagenes",
    "status": "estado",
    "resolved_at": "fecha_resolucion",
    "resolved_by": "usuario_resolucion",
    "resolution_comment": "comentario_responsable",
}


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class Ticket:
    """Single maintenance request as returned by the store."""

    id: Optional[str] = None
    created_at: Optional[str] = None
    created_by: Optional[str] = None
    problem: Optional[str] = None
    sector: Optional[str] = None
    urgency: Optional[str] = None
    assignee: Optional[str] = None
    attachments_link: Optional[str] = None
    status: Optional[str] = None
    resolved_at: Optional[str] = None
    resolved_by: Optional[str] = None
    resolution_comment: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Ticket":
        """Build a ticket from a store row; missing fields become None, values are kept verbatim."""
        return cls(**{attr: _text(record.get(column)) for attr, column in TICKET_COLUMNS.items()})

    def to_record(self) -> Dict[str, Optional[str]]:
        """Return the ticket keyed by store column, in stable column order."""
        values = asdict(self)
        return {column: values[attr] for attr, column in TICKET_COLUMNS.items()}


@dataclass(frozen=True)
class FilterState:
    """Active filter selections; an empty string means "no filter"."""

    query: str = ""
    status: str = ""
    urgency: str = ""
    sector: str = ""
    assignee: str = ""

    def replace(self, **changes: str) -> "FilterState":
        return replace(self, **{name: value or "" for name, value in changes.items()})


@dataclass(frozen=True)
class SortState:
    column: str = "fecha_creacion"
    descending: bool = True

    def toggle(self, column: str) -> "SortState":
        """Same column flips direction; a new column starts descending."""
        if column == self.column:
            return SortState(column=column, descending=not self.descending)
        return SortState(column=column, descending=True)
