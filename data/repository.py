"""Read-only access to the hosted ticket table."""
import asyncio
import logging
from typing import Awaitable, List, Optional, TypeVar

import httpx
from postgrest.exceptions import APIError

from config import DashboardError, StoreSettings

from .models import Ticket
from .query_builder import TicketQuery

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TicketQueryError(DashboardError):
    """A store query failed; ``message`` is shown to the user verbatim."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TicketRepository:
    """Runs ticket queries against the store through the supabase client."""

    def __init__(self, client, settings: StoreSettings):
        self.client = client
        self.settings = settings

    def _table(self):
        return self.client.schema(self.settings.schema).from_(self.settings.table_name)

    async def fetch(self, query: TicketQuery) -> List[Ticket]:
        """Fetch the rows matching ``query`` as tickets."""
        request = query.apply(self._table().select("*"))
        response = await self._execute(request.execute())
        rows = response.data or []
        logger.debug("Fetched %d rows from %s", len(rows), self.settings.qualified_table)
        return [Ticket.from_record(row) for row in rows]

    async def count_all(self) -> Optional[int]:
        """Count every row of the table, ignoring filters."""
        request = self._table().select("id", count="exact", head=True)
        response = await self._execute(request.execute())
        return response.count

    async def _execute(self, call: Awaitable[T]) -> T:
        try:
            if self.settings.query_timeout is None:
                return await call
            return await asyncio.wait_for(call, timeout=self.settings.query_timeout)
        except APIError as exc:
            raise TicketQueryError(exc.message or str(exc)) from exc
        except asyncio.TimeoutError as exc:
            raise TicketQueryError(
                f"La consulta superó el tiempo límite de {self.settings.query_timeout:g} s"
            ) from exc
        except httpx.HTTPError as exc:
            raise TicketQueryError(str(exc) or exc.__class__.__name__) from exc
