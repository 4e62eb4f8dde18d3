"""Dashboard state and fetch orchestration."""
import asyncio
import contextlib
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple, Union

from config import AppConfig
from data import (
    ChangeEvent,
    ChangeListener,
    FilterState,
    SortState,
    Ticket,
    TicketQueryBuilder,
    TicketQueryError,
    TicketRepository,
)
from services import CSVExport, CSVExporter, KPICalculator, KPISnapshot
from utils import FilterOptionsHelper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadingState:
    pass


@dataclass(frozen=True)
class ErrorState:
    message: str


@dataclass(frozen=True)
class ReadyState:
    tickets: Tuple[Ticket, ...] = field(default_factory=tuple)


ViewState = Union[LoadingState, ErrorState, ReadyState]


class DashboardController:
    """Owns filter, sort and view state for the maintenance dashboard.

    Every filter or sort change, manual refresh and change notification
    issues one fetch. Fetches are numbered; a response is applied only if
    no later fetch was issued in the meantime, so a slow earlier response
    never overwrites a newer one.
    """

    def __init__(
        self,
        config: AppConfig,
        repository: TicketRepository,
        listener: Optional[ChangeListener] = None,
        track_universe_total: bool = True,
    ):
        self.config = config
        self.repository = repository
        self.listener = listener
        self.track_universe_total = track_universe_total
        self.query_builder = TicketQueryBuilder(config)
        self.kpi_calculator = KPICalculator(config)
        self.csv_exporter = CSVExporter(config)
        self.options_helper = FilterOptionsHelper(config)

        self.filters = FilterState()
        self.sort = SortState(column=config.DEFAULT_SORT_COLUMN, descending=True)
        self.state: ViewState = LoadingState()
        self.universe_total: Optional[int] = None

        self._issued = 0
        self._events: Optional["asyncio.Queue[ChangeEvent]"] = None
        self._change_task: Optional[asyncio.Task] = None
        self._started = False
        self._stopped = False

    @property
    def issued_requests(self) -> int:
        return self._issued

    async def __aenter__(self) -> "DashboardController":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()

    async def start(self) -> None:
        """Subscribe to change notifications (once) and load the first page."""
        if self._started:
            return
        self._started = True
        if self.listener is not None:
            self._events = asyncio.Queue()
            await self.listener.start(self._events)
            self._change_task = asyncio.create_task(self.run_change_loop(self._events))
        await self.refresh()

    async def stop(self) -> None:
        """Tear the subscription down; repeated calls do nothing."""
        if self._stopped:
            return
        self._stopped = True
        if self.listener is not None:
            await self.listener.stop()
        task, self._change_task = self._change_task, None
        if task is not None:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def apply_filters(self, filters: FilterState) -> ViewState:
        """Replace the filter state; an actual change triggers one fetch."""
        if filters == self.filters:
            return self.state
        self.filters = filters
        return await self.refresh()

    async def set_filter(self, **changes: str) -> ViewState:
        return await self.apply_filters(self.filters.replace(**changes))

    async def toggle_sort(self, column: str) -> ViewState:
        if column not in self.query_builder.sortable_columns():
            raise ValueError(f"Columna no ordenable: {column}")
        self.sort = self.sort.toggle(column)
        return await self.refresh()

    async def refresh(self) -> ViewState:
        """Fetch with the current filters and sort; stale responses are dropped."""
        self._issued += 1
        request_id = self._issued
        query = self.query_builder.build(self.filters, self.sort)
        self.state = LoadingState()

        try:
            tickets = await self.repository.fetch(query)
        except TicketQueryError as exc:
            if self._is_current(request_id):
                logger.warning("Error al consultar tickets: %s", exc.message)
                self.state = ErrorState(exc.message)
            return self.state

        universe_total = await self._count_universe()
        if not self._is_current(request_id):
            logger.debug("Descartando respuesta %d, vigente %d", request_id, self._issued)
            return self.state

        self.state = ReadyState(tuple(tickets))
        self.universe_total = universe_total
        logger.info("Cargados %d tickets", len(tickets))
        return self.state

    async def run_change_loop(self, queue: "asyncio.Queue[ChangeEvent]") -> None:
        """Consume change notifications, one refresh per notification."""
        while True:
            event = await queue.get()
            try:
                logger.info("Cambio %s en la tabla, recargando", event.event_type)
                await self.refresh()
            except Exception:
                logger.exception("Fallo la recarga disparada por un cambio")
            finally:
                queue.task_done()

    def kpis(self) -> KPISnapshot:
        return self.kpi_calculator.calculate_kpis(self.visible_tickets(), self.universe_total)

    def visible_tickets(self) -> Tuple[Ticket, ...]:
        if isinstance(self.state, ReadyState):
            return self.state.tickets
        return ()

    def export_csv(self, day: Optional[date] = None) -> Optional[CSVExport]:
        """CSV of exactly the rows on screen; None unless data is ready."""
        if not isinstance(self.state, ReadyState):
            return None
        return self.csv_exporter.build_export(self.state.tickets, day)

    def filter_options(self) -> Dict[str, List[str]]:
        return self.options_helper.build_options(self.visible_tickets())

    def _is_current(self, request_id: int) -> bool:
        return request_id == self._issued

    async def _count_universe(self) -> Optional[int]:
        if not self.track_universe_total:
            return None
        try:
            return await self.repository.count_all()
        except TicketQueryError as exc:
            logger.warning("No se pudo contar el total de tickets: %s", exc.message)
            return None
