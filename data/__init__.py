"""Data access module."""
from .change_listener import ChangeEvent, ChangeListener
from .models import TICKET_COLUMNS, FilterState, SortState, Ticket
from .query_builder import Predicate, TicketQuery, TicketQueryBuilder
from .repository import TicketQueryError, TicketRepository

__all__ = [
    "Ticket",
    "FilterState",
    "SortState",
    "TICKET_COLUMNS",
    "Predicate",
    "TicketQuery",
    "TicketQueryBuilder",
    "TicketRepository",
    "TicketQueryError",
    "ChangeEvent",
    "ChangeListener",
]
