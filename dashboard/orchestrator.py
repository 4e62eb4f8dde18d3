"""Dashboard orchestration and coordination."""
from typing import Dict, List

import streamlit as st

from config import AppConfig
from data import FilterState
from services import TableBuilder
from ui import ChartRenderer, UIRenderer

from .controller import DashboardController, ErrorState, LoadingState
from .runtime import DashboardRuntime


class DashboardOrchestrator:
    """Orchestrates the entire dashboard rendering process."""

    def __init__(self, config: AppConfig, runtime: DashboardRuntime):
        self.config = config
        self.runtime = runtime
        self.table_builder = TableBuilder(config)
        self.chart_renderer = ChartRenderer(config)
        self.ui_renderer = UIRenderer()

    @property
    def controller(self) -> DashboardController:
        return self.runtime.controller

    def render_dashboard(self) -> None:
        """Render filters, then the live section that follows the store."""
        self._render_toolbar()
        filters = self._render_filters(self.controller.filter_options())
        if filters != self.controller.filters:
            self.runtime.run(self.controller.apply_filters(filters))

        self._render_sort_controls()

        live_section = st.fragment(run_every=self.config.REFRESH_SECONDS)(self._render_live_section)
        live_section()
        self.ui_renderer.render_footer()

    def _render_toolbar(self) -> None:
        col1, _ = st.columns([1, 5])
        with col1:
            if st.button("🔄 Recargar", key="reload"):
                self.runtime.run(self.controller.refresh())

    def _render_filters(self, options: Dict[str, List[str]]) -> FilterState:
        """Render filter controls and return selections."""
        current = self.controller.filters
        col_query, col_status, col_urgency, col_sector, col_assignee = st.columns([2, 1, 1, 1, 1])

        with col_query:
            query = st.text_input(
                "Buscar", value=current.query, placeholder="Buscar por problema…", key="filter_query"
            )
        with col_status:
            status = self._render_select("Estado", options["status"], current.status, "filter_status")
        with col_urgency:
            urgency = self._render_select("Urgencia", options["urgency"], current.urgency, "filter_urgency")
        with col_sector:
            sector = self._render_select("Sector", options["sector"], current.sector, "filter_sector")
        with col_assignee:
            assignee = self._render_select(
                "Responsable", options["assignee"], current.assignee, "filter_assignee"
            )

        return FilterState(
            query=query or "",
            status=status,
            urgency=urgency,
            sector=sector,
            assignee=assignee,
        )

    @staticmethod
    def _render_select(label: str, options: List[str], current: str, key: str) -> str:
        choices = [""] + list(options)
        if current and current not in choices:
            choices.append(current)
        return st.selectbox(
            label,
            choices,
            index=choices.index(current),
            format_func=lambda value: value or "Todos",
            key=key,
        )

    def _render_sort_controls(self) -> None:
        sort = self.controller.sort
        labels = self.config.TABLE_COLUMNS
        columns = list(labels)

        col_column, col_direction, _ = st.columns([2, 1, 3])
        with col_column:
            selected = st.selectbox(
                "Ordenar por",
                columns,
                index=columns.index(sort.column) if sort.column in columns else 0,
                format_func=lambda column: labels[column],
                key="sort_column",
            )
        with col_direction:
            arrow = "↓ desc" if sort.descending else "↑ asc"
            flip = st.button(arrow, key="sort_direction")

        target = selected if selected != sort.column else (sort.column if flip else None)
        if target is not None:
            self.runtime.run(self.controller.toggle_sort(target))
            st.rerun()

    def _render_live_section(self) -> None:
        """KPIs, chart, export and table from the controller's current state."""
        state = self.controller.state
        kpis = self.controller.kpis()

        self.ui_renderer.render_kpi_cards(kpis)
        self.chart_renderer.render_urgency_chart(kpis, chart_key="urgency_chart")

        export = self.controller.export_csv()
        st.download_button(
            "⬇️ Exportar CSV",
            data=export.data if export is not None else b"",
            file_name=export.filename if export is not None else "mantenimiento.csv",
            mime=export.mime if export is not None else "text/csv",
            disabled=export is None,
            key="export_csv",
        )

        if isinstance(state, LoadingState):
            self.ui_renderer.render_loading()
        elif isinstance(state, ErrorState):
            self.ui_renderer.render_error(state.message)
        else:
            table = self.table_builder.build_ticket_table(state.tickets)
            self.ui_renderer.render_ticket_table(table, self.table_builder.style_ticket_table(table))
