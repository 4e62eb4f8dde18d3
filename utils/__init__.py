"""Utility module."""
from .dashboard_helpers import FilterOptionsHelper, UrgencyHelper
from .text_normalizer import CRITICAL_PREFIX, TextNormalizer

__all__ = [
	"TextNormalizer",
	"CRITICAL_PREFIX",
	"FilterOptionsHelper",
	"UrgencyHelper",
]
