"""Dashboard module."""
from .controller import DashboardController, ErrorState, LoadingState, ReadyState, ViewState
from .orchestrator import DashboardOrchestrator
from .runtime import DashboardRuntime

__all__ = [
    "DashboardController",
    "DashboardOrchestrator",
    "DashboardRuntime",
    "LoadingState",
    "ErrorState",
    "ReadyState",
    "ViewState",
]
