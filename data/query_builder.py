"""Translation of dashboard filters into store queries."""
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from config import AppConfig
from utils import TextNormalizer

from .models import FilterState, SortState


@dataclass(frozen=True)
class Predicate:
    """A single PostgREST filter: operator, column and value."""

    operator: str
    column: str
    value: Any


@dataclass(frozen=True)
class TicketQuery:
    """Store-independent description of a ticket fetch."""

    predicates: Tuple[Predicate, ...] = field(default_factory=tuple)
    order_column: str = "fecha_creacion"
    descending: bool = True
    limit: int = 1000

    def apply(self, request):
        """Apply filters, order and limit to a PostgREST request builder."""
        for predicate in self.predicates:
            if predicate.operator == "eq":
                request = request.eq(predicate.column, predicate.value)
            elif predicate.operator == "in":
                request = request.in_(predicate.column, list(predicate.value))
            elif predicate.operator == "ilike":
                request = request.ilike(predicate.column, predicate.value)
            else:
                raise ValueError(f"Unsupported operator: {predicate.operator}")
        return request.order(self.order_column, desc=self.descending).limit(self.limit)


class TicketQueryBuilder:
    """Builds ticket queries based on the active filters."""

    def __init__(self, config: AppConfig):
        self.config = config

    def build(self, filters: FilterState, sort: SortState) -> TicketQuery:
        """Build the query for the given filter and sort selections."""
        predicates: List[Predicate] = []
        predicates.extend(self.filter_by_status(filters.status))
        predicates.extend(self.filter_by_urgency(filters.urgency))
        predicates.extend(self.filter_by_sector(filters.sector))
        predicates.extend(self.filter_by_assignee(filters.assignee))
        predicates.extend(self.filter_by_text(filters.query))

        order_column = sort.column if sort.column in self.sortable_columns() else self.config.DEFAULT_SORT_COLUMN
        return TicketQuery(
            predicates=tuple(predicates),
            order_column=order_column,
            descending=sort.descending,
            limit=self.config.FETCH_LIMIT,
        )

    def sortable_columns(self) -> List[str]:
        return list(self.config.TABLE_COLUMNS)

    def filter_by_status(self, status: str) -> List[Predicate]:
        if not status:
            return []
        return [Predicate("eq", "estado", status)]

    def filter_by_urgency(self, urgency: str) -> List[Predicate]:
        """Critical tier matches every stored spelling, other tiers match exactly."""
        if not urgency:
            return []
        if TextNormalizer.is_critical(urgency):
            return [Predicate("in", "urgencia", tuple(self.config.CRITICAL_SPELLINGS))]
        return [Predicate("eq", "urgencia", urgency)]

    def filter_by_sector(self, sector: str) -> List[Predicate]:
        if not sector:
            return []
        return [Predicate("eq", "sector", sector)]

    def filter_by_assignee(self, assignee: str) -> List[Predicate]:
        if not assignee:
            return []
        return [Predicate("eq", "responsable", assignee)]

    def filter_by_text(self, query: str) -> List[Predicate]:
        """Case-insensitive substring match on the problem description."""
        text = (query or "").strip()
        if not text:
            return []
        return [Predicate("ilike", "problema", f"%{text}%")]
