"""
Streamlit app for the read-only maintenance ticket dashboard.

This is the main entry point for the application.
Run with: streamlit run app.py
"""
import logging

import streamlit as st

from config import AppConfig, ConfigurationError, StoreSettings, configure_logging
from dashboard import DashboardOrchestrator, DashboardRuntime

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def get_runtime(_config: AppConfig, settings: StoreSettings) -> DashboardRuntime:
    """One runtime (event loop, store client, subscription) per server process."""
    logger.info("Iniciando dashboard sobre %s", settings.qualified_table)
    return DashboardRuntime.from_settings(_config, settings)


class MaintenanceDashboardApp:
    """Main application class that coordinates all components."""

    def __init__(self):
        self.config = AppConfig()

    def run(self) -> None:
        """Run the main application."""
        st.set_page_config(page_title="Dashboard de Mantenimiento", page_icon="🔧", layout="wide")

        try:
            settings = StoreSettings.from_env()
        except ConfigurationError as exc:
            configure_logging()
            logger.error("Configuración inválida: %s", exc)
            st.error(str(exc))
            return

        configure_logging(settings.log_level)
        if settings.enable_update_actions:
            logger.warning("MAINT_ENABLE_UPDATE_ACTIONS está activo pero el dashboard es de solo lectura")

        runtime = get_runtime(self.config, settings)
        dashboard = DashboardOrchestrator(self.config, runtime)
        dashboard.ui_renderer.render_header(settings.qualified_table)
        dashboard.render_dashboard()


def main():
    """Application entry point."""
    app = MaintenanceDashboardApp()
    app.run()


if __name__ == "__main__":
    main()
