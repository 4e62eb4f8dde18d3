"""Text normalization and cleaning utilities."""
import unicodedata
from typing import Any, Optional

CRITICAL_PREFIX = "crit"


class TextNormalizer:
    """Handles text normalization and cleaning operations."""

    @staticmethod
    def normalize(value: Any) -> Optional[str]:
        """Lowercase, accent-free form of a value; None stays None."""
        if value is None:
            return None
        text = TextNormalizer.fix_mojibake(str(value))
        text = TextNormalizer.remove_accents(text).strip().lower()
        return " ".join(text.split())

    @staticmethod
    def is_critical(value: Any) -> bool:
        """Return True for any spelling of the critical urgency tier."""
        normalized = TextNormalizer.normalize(value)
        return normalized is not None and normalized.startswith(CRITICAL_PREFIX)

    @staticmethod
    def remove_accents(value: str) -> str:
        """Drop combining marks after NFKD decomposition."""
        decomposed = unicodedata.normalize("NFKD", value)
        return "".join(ch for ch in decomposed if not unicodedata.combining(ch))

    @staticmethod
    def fix_mojibake(value: str) -> str:
        """Fix common mojibake sequences for Spanish accents."""
        replacements = {
            "\xc3\xa1": "á",  # Ã¡ -> á
            "\xc3\xa9": "é",  # Ã© -> é
            "\xc3\xad": "í",  # Ã­ -> í
            "\xc3\xb3": "ó",  # Ã³ -> ó
            "\xc3\xba": "ú",  # Ãº -> ú
            "\xc3\xb1": "ñ",  # Ã± -> ñ
            "\xc3\x93": "Ó",
            "\xc3\x9a": "Ú",
            "\xc3\x81": "Á",
            "\xc3\x89": "É",
            "\xc3\x91": "Ñ",
        }
        for bad, good in replacements.items():
            value = value.replace(bad, good)
        return value
