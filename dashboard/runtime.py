"""Background event loop that hosts the dashboard controller."""
import asyncio
import atexit
import logging
import threading
from typing import Awaitable, Callable, Optional, TypeVar

from supabase import acreate_client

from config import AppConfig, StoreSettings
from data import ChangeListener, TicketRepository

from .controller import DashboardController

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DashboardRuntime:
    """Runs the async controller on its own thread for the Streamlit script.

    The Streamlit script thread submits coroutines with :meth:`run`; every
    fetch and change notification is handled on the single loop thread.
    """

    def __init__(self, controller_factory: Callable[[], Awaitable[DashboardController]]):
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever, name="maint-dashboard-loop", daemon=True
        )
        self._thread.start()
        self._lock = threading.Lock()
        self._closed = False
        atexit.register(self.close)
        try:
            self.controller: DashboardController = self.run(controller_factory())
            self.run(self.controller.start())
        except BaseException:
            self.close()
            raise

    @classmethod
    def from_settings(cls, config: AppConfig, settings: StoreSettings) -> "DashboardRuntime":
        async def build_controller() -> DashboardController:
            client = await acreate_client(settings.url, settings.key)
            listener = ChangeListener(client, settings) if settings.enable_realtime else None
            return DashboardController(
                config,
                TicketRepository(client, settings),
                listener=listener,
                track_universe_total=settings.track_universe_total,
            )

        return cls(build_controller)

    def run(self, coro: Awaitable[T], timeout: Optional[float] = None) -> T:
        """Run a coroutine on the loop thread and wait for its result."""
        return asyncio.run_coroutine_threadsafe(coro, self._loop).result(timeout)

    def close(self) -> None:
        """Stop the controller and the loop; idempotent, also runs at exit."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        try:
            controller = getattr(self, "controller", None)
            if controller is not None:
                self.run(controller.stop(), timeout=5)
        except Exception:
            logger.warning("Error al detener el dashboard", exc_info=True)
        finally:
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join(timeout=5)
            if not self._thread.is_alive():
                self._loop.close()
            atexit.unregister(self.close)
