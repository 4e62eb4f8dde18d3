import asyncio
from typing import Any, Dict, List, Optional

import pytest

from config import AppConfig, StoreSettings


class FakeResponse:
    def __init__(self, data: Optional[List[Dict[str, Any]]], count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeRequest:
    """Evaluates the PostgREST builder calls over in-memory rows."""

    def __init__(self, rows: List[Dict[str, Any]], log: List[tuple], error: Optional[Exception] = None):
        self.rows = list(rows)
        self.log = log
        self.error = error
        self._count = None
        self._head = False

    def select(self, *columns, count=None, head=None):
        self.log.append(("select", columns, count, head))
        self._count = count
        self._head = bool(head)
        return self

    def eq(self, column, value):
        self.log.append(("eq", column, value))
        self.rows = [row for row in self.rows if row.get(column) == value]
        return self

    def in_(self, column, values):
        self.log.append(("in", column, tuple(values)))
        self.rows = [row for row in self.rows if row.get(column) in values]
        return self

    def ilike(self, column, pattern):
        self.log.append(("ilike", column, pattern))
        needle = pattern.strip("%").lower()
        self.rows = [row for row in self.rows if needle in (row.get(column) or "").lower()]
        return self

    def order(self, column, desc=False):
        self.log.append(("order", column, desc))
        present = [row for row in self.rows if row.get(column) is not None]
        missing = [row for row in self.rows if row.get(column) is None]
        self.rows = sorted(present, key=lambda row: row[column], reverse=desc) + missing
        return self

    def limit(self, size):
        self.log.append(("limit", size))
        self.rows = self.rows[:size]
        return self

    async def execute(self):
        if self.error is not None:
            raise self.error
        count = len(self.rows) if self._count else None
        return FakeResponse(None if self._head else self.rows, count)


class FakeChannel:
    def __init__(self, topic: str):
        self.topic = topic
        self.subscriptions: List[Dict[str, Any]] = []
        self.subscribed = False

    def on_postgres_changes(self, event, callback, table="*", schema="public", filter=None):
        self.subscriptions.append({"event": event, "callback": callback, "table": table, "schema": schema})
        return self

    async def subscribe(self, callback=None):
        self.subscribed = True
        if callback is not None:
            callback("SUBSCRIBED", None)
        return self

    def emit(self, payload: Dict[str, Any]) -> None:
        for subscription in self.subscriptions:
            subscription["callback"](payload)


class FakeStoreClient:
    """Stands in for the supabase async client."""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None):
        self.rows = list(rows or [])
        self.log: List[tuple] = []
        self.schemas: List[str] = []
        self.tables: List[str] = []
        self.channels: List[FakeChannel] = []
        self.removed: List[FakeChannel] = []
        self.error: Optional[Exception] = None

    def schema(self, name):
        self.schemas.append(name)
        return self

    def from_(self, table):
        self.tables.append(table)
        return FakeRequest(self.rows, self.log, self.error)

    def channel(self, topic):
        channel = FakeChannel(topic)
        self.channels.append(channel)
        return channel

    async def remove_channel(self, channel):
        self.removed.append(channel)


class ControlledRepository:
    """Repository whose fetches complete only when the test resolves them."""

    def __init__(self, universe_total: Optional[int] = None):
        self.calls: List[Dict[str, Any]] = []
        self.universe_total = universe_total

    async def fetch(self, query):
        entry = {"query": query, "gate": asyncio.Event(), "result": None}
        self.calls.append(entry)
        await entry["gate"].wait()
        if isinstance(entry["result"], Exception):
            raise entry["result"]
        return entry["result"]

    def resolve(self, index: int, result) -> None:
        self.calls[index]["result"] = result
        self.calls[index]["gate"].set()

    async def count_all(self):
        return self.universe_total


@pytest.fixture
def config():
    return AppConfig()


@pytest.fixture
def settings():
    return StoreSettings(url="https://example.supabase.co", key="anon-key", track_universe_total=True)


@pytest.fixture
def store_rows():
    return [
        {
            "id": "1",
            "fecha_creacion": "2024-03-01T10:00:00+00:00",
            "usuario_creacion": "ana",
            "problema": "Pérdida de agua en baño",
            "sector": "Planta baja",
            "urgencia": "Leve",
            "responsable": "Luis",
            "estado": "Pendiente",
        },
        {
            "id": "2",
            "fecha_creacion": "2024-03-02T10:00:00+00:00",
            "usuario_creacion": "bruno",
            "problema": "Tablero eléctrico sin tapa",
            "sector": "Cocina",
            "urgencia": "Critica",
            "responsable": "Marta",
            "estado": "Resuelto",
            "fecha_resolucion": "2024-03-03T09:30:00+00:00",
            "usuario_resolucion": "marta",
            "comentario_responsable": "Se colocó tapa nueva",
        },
        {
            "id": "3",
            "fecha_creacion": "2024-03-04T08:15:00+00:00",
            "usuario_creacion": "carla",
            "problema": "Cortocircuito en cámara de frío",
            "sector": "Cocina",
            "urgencia": "Crítica",
            "estado": "Pendiente",
            "imagenes": "https://drive.example.com/folder/3",
        },
    ]


@pytest.fixture
def fake_client(store_rows):
    return FakeStoreClient(store_rows)
