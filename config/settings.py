"""Application configuration settings."""
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv


class DashboardError(Exception):
    """Base error for the maintenance dashboard."""


class ConfigurationError(DashboardError):
    """Raised when the store connection settings are incomplete."""


@dataclass
class AppConfig:
    """Configuration container for application settings."""

    FETCH_LIMIT: int = 1000
    DEFAULT_SORT_COLUMN: str = "fecha_creacion"
    PENDING_STATUS: str = "Pendiente"
    RESOLVED_STATUS: str = "Resuelto"
    CRITICAL_LABEL: str = "Crítica"
    STATUS_OPTIONS: List[str] = None
    URGENCY_OPTIONS: List[str] = None
    CRITICAL_SPELLINGS: Tuple[str, ...] = None
    EXPORT_COLUMNS: List[str] = None
    TABLE_COLUMNS: Dict[str, str] = None
    PLACEHOLDER: str = "—"
    EXPORT_PREFIX: str = "mantenimiento"
    REFRESH_SECONDS: int = 5
    DISPLAY_TIMEZONE: str = "America/Argentina/Buenos_Aires"
    MONTH_ABBR_ES: Dict[int, str] = None
    INTENT_STYLES: Dict[str, str] = None

    def __post_init__(self):
        if self.MONTH_ABBR_ES is None:
            self.MONTH_ABBR_ES = {
                1: "ene", 2: "feb", 3: "mar", 4: "abr", 5: "may", 6: "jun",
                7: "jul", 8: "ago", 9: "sept", 10: "oct", 11: "nov", 12: "dic",
            }

        if self.STATUS_OPTIONS is None:
            self.STATUS_OPTIONS = [self.PENDING_STATUS, self.RESOLVED_STATUS]

        if self.URGENCY_OPTIONS is None:
            self.URGENCY_OPTIONS = ["Leve", "Moderada", self.CRITICAL_LABEL]

        if self.CRITICAL_SPELLINGS is None:
            self.CRITICAL_SPELLINGS = (self.CRITICAL_LABEL, "Critica")

        if self.EXPORT_COLUMNS is None:
            self.EXPORT_COLUMNS = [
                "fecha_creacion", "usuario_creacion", "problema", "sector", "urgencia",
                "responsable", "imagenes", "estado", "fecha_resolucion",
                "usuario_resolucion", "comentario_responsable",
            ]

        if self.INTENT_STYLES is None:
            self.INTENT_STYLES = {
                "ok": "background-color: #dcfce7; color: #166534",
                "muted": "background-color: #f3f4f6; color: #374151",
                "warn": "background-color: #fee2e2; color: #991b1b; font-weight: 600",
            }

        if self.TABLE_COLUMNS is None:
            # store column -> table header, in display order
            self.TABLE_COLUMNS = {
                "fecha_creacion": "Creado",
                "problema": "Problema",
                "sector": "Sector",
                "urgencia": "Urgencia",
                "responsable": "Responsable",
                "estado": "Estado",
                "fecha_resolucion": "Resuelto",
                "imagenes": "Imágenes",
            }


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "si", "on"}


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} debe ser numérico, se recibió {raw!r}") from None
    return value if value > 0 else None


@dataclass(frozen=True)
class StoreSettings:
    """Connection settings for the hosted ticket store.

    Built once at startup and handed to the repository and the change
    listener; nothing reads the environment after that.
    """

    url: str
    key: str
    table_name: str = "asistente_mantenimiento"
    schema: str = "public"
    enable_realtime: bool = True
    enable_update_actions: bool = False
    query_timeout: Optional[float] = None
    track_universe_total: bool = True
    log_level: str = "INFO"

    @property
    def qualified_table(self) -> str:
        return f"{self.schema}.{self.table_name}"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "StoreSettings":
        """Read settings from the environment (and a local .env file)."""
        if dotenv:
            load_dotenv()

        url = os.getenv("SUPABASE_URL", "").strip()
        key = os.getenv("SUPABASE_KEY", "").strip()
        missing = [name for name, value in (("SUPABASE_URL", url), ("SUPABASE_KEY", key)) if not value]
        if missing:
            raise ConfigurationError("Faltan variables de entorno: " + ", ".join(missing))

        return cls(
            url=url,
            key=key,
            table_name=os.getenv("MAINT_TABLE_NAME", "asistente_mantenimiento").strip(),
            schema=os.getenv("MAINT_SCHEMA", "public").strip(),
            enable_realtime=_env_flag("MAINT_ENABLE_REALTIME", True),
            enable_update_actions=_env_flag("MAINT_ENABLE_UPDATE_ACTIONS", False),
            query_timeout=_env_float("MAINT_QUERY_TIMEOUT"),
            track_universe_total=_env_flag("MAINT_TRACK_UNIVERSE_TOTAL", True),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
