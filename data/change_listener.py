"""Realtime change notifications for the ticket table."""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from config import StoreSettings

logger = logging.getLogger(__name__)

CHANNEL_NAME = "mant-dashboard"


@dataclass(frozen=True)
class ChangeEvent:
    """An insert, update or delete reported by the store."""

    event_type: str
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "ChangeEvent":
        if not isinstance(payload, dict):
            return cls(event_type="*")
        data = payload.get("data") if isinstance(payload.get("data"), dict) else payload
        event_type = data.get("type") or data.get("eventType") or "*"
        return cls(event_type=str(event_type), payload=payload)


class ChangeListener:
    """Forwards ``postgres_changes`` notifications onto an asyncio queue."""

    def __init__(self, client, settings: StoreSettings):
        self.client = client
        self.settings = settings
        self._channel = None
        self._queue: Optional["asyncio.Queue[ChangeEvent]"] = None

    @property
    def active(self) -> bool:
        return self._channel is not None

    async def start(self, queue: "asyncio.Queue[ChangeEvent]") -> None:
        """Subscribe once; later calls while subscribed are ignored."""
        if self._channel is not None:
            return
        self._queue = queue
        channel = self.client.channel(CHANNEL_NAME)
        channel.on_postgres_changes(
            "*",
            callback=self._on_change,
            table=self.settings.table_name,
            schema=self.settings.schema,
        )
        self._channel = channel
        try:
            await channel.subscribe(self._on_status)
        except Exception:
            logger.warning("No se pudo suscribir a cambios de %s", self.settings.qualified_table, exc_info=True)
            self._channel = None
            try:
                await self.client.remove_channel(channel)
            except Exception:
                logger.warning("Error al descartar el canal de %s", self.settings.qualified_table, exc_info=True)
            return
        logger.info("Suscripto a cambios de %s", self.settings.qualified_table)

    async def stop(self) -> None:
        """Remove the channel; safe to call any number of times."""
        channel, self._channel = self._channel, None
        if channel is None:
            return
        try:
            await self.client.remove_channel(channel)
        except Exception:
            logger.warning("Error al cerrar la suscripción de %s", self.settings.qualified_table, exc_info=True)
        else:
            logger.info("Suscripción a %s cerrada", self.settings.qualified_table)

    def _on_change(self, payload: Any) -> None:
        if self._queue is None:
            return
        self._queue.put_nowait(ChangeEvent.from_payload(payload))

    def _on_status(self, status: Any, error: Optional[Exception] = None) -> None:
        state = str(getattr(status, "value", status))
        if state == "SUBSCRIBED":
            logger.debug("Canal %s activo", CHANNEL_NAME)
        elif error is not None or state in {"CHANNEL_ERROR", "TIMED_OUT"}:
            logger.warning("Suscripción %s en estado %s: %s", CHANNEL_NAME, state, error)
