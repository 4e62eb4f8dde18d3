"""Utilidades de dominio para el dashboard de mantenimiento."""
from typing import Dict, Iterable, List, Optional

from config import AppConfig
from .text_normalizer import TextNormalizer


class UrgencyHelper:
    """Agrupa variantes de urgencia y asigna el estilo de visualización."""

    def __init__(self, config: AppConfig):
        self.config = config

    def canonical_label(self, value: Optional[str]) -> Optional[str]:
        """Map any spelling of a known tier to its canonical label."""
        normalized = TextNormalizer.normalize(value)
        if not normalized:
            return None
        if TextNormalizer.is_critical(normalized):
            return self.config.CRITICAL_LABEL
        for label in self.config.URGENCY_OPTIONS:
            if TextNormalizer.normalize(label) == normalized:
                return label
        return value.strip()

    @staticmethod
    def intent(value: Optional[str]) -> str:
        """Return ``warn`` for critical, ``muted`` for moderate, ``ok`` otherwise."""
        normalized = TextNormalizer.normalize(value) or ""
        if TextNormalizer.is_critical(normalized):
            return "warn"
        if normalized.startswith("mod"):
            return "muted"
        return "ok"


class FilterOptionsHelper:
    """Construye las opciones de los selectores a partir de las filas cargadas."""

    def __init__(self, config: AppConfig):
        self.config = config
        self.urgency = UrgencyHelper(config)

    def build_options(self, tickets: Iterable) -> Dict[str, List[str]]:
        tickets = list(tickets)
        return {
            "status": self._merge_options(self.config.STATUS_OPTIONS, (t.status for t in tickets)),
            "urgency": self._merge_options(
                self.config.URGENCY_OPTIONS,
                (self.urgency.canonical_label(t.urgency) for t in tickets),
            ),
            "sector": self._distinct_sorted(t.sector for t in tickets),
            "assignee": self._distinct_sorted(t.assignee for t in tickets),
        }

    @staticmethod
    def _distinct_sorted(values: Iterable[Optional[str]]) -> List[str]:
        """Distinct non-empty values, de-duplicated by normalized form."""
        seen: Dict[str, str] = {}
        for value in values:
            if value is None or not str(value).strip():
                continue
            text = str(value).strip()
            seen.setdefault(TextNormalizer.normalize(text), text)
        return sorted(seen.values(), key=lambda text: TextNormalizer.normalize(text))

    @classmethod
    def _merge_options(cls, fixed: List[str], values: Iterable[Optional[str]]) -> List[str]:
        """Fixed options first, then any extra value found in the data."""
        known = {TextNormalizer.normalize(option) for option in fixed}
        extra = [
            value for value in cls._distinct_sorted(values)
            if TextNormalizer.normalize(value) not in known
        ]
        return list(fixed) + extra
