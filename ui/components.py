"""UI components rendering."""
from typing import Optional

import pandas as pd
import streamlit as st
from pandas.io.formats.style import Styler

from services import KPISnapshot

LINK_LABEL_PATTERN = r"https?://([^/?#]+)"


class UIRenderer:
    """Renders UI components."""

    @staticmethod
    def render_header(qualified_table: str) -> None:
        st.title("🔧 Dashboard de Mantenimiento")
        st.caption(f"Tabla: {qualified_table}")

    @staticmethod
    def render_kpi_cards(kpis: KPISnapshot) -> None:
        """Render KPI cards with a clean layout."""
        st.markdown(
            """
            <style>
            .kpi-card {
                background: #ffffff;
                padding: 16px;
                border-radius: 12px;
                border: 1px solid #e6e6e6;
                box-shadow: 0 1px 4px rgba(0,0,0,0.06);
            }
            .kpi-title { font-size: 14px; color: #6b6b6b; margin-bottom: 6px; }
            .kpi-subtitle { font-size: 11px; color: #9ca3af; }
            .kpi-value { font-size: 24px; font-weight: 700; color: #111827; }
            </style>
            """,
            unsafe_allow_html=True,
        )

        total_subtitle = None
        if kpis.universe_total is not None:
            total_subtitle = f"de {kpis.universe_total} en la tabla"

        cards = [
            ("Total", kpis.total, total_subtitle),
            ("Pendientes", kpis.pending, None),
            ("Resueltos", kpis.resolved, None),
            ("Leves", kpis.leve, None),
            ("Moderadas", kpis.moderada, None),
            ("Críticas", kpis.critica, None),
        ]
        for column, (title, value, subtitle) in zip(st.columns(len(cards)), cards):
            column.markdown(UIRenderer._kpi_card_html(title, value, subtitle), unsafe_allow_html=True)

    @staticmethod
    def _kpi_card_html(title: str, value: int, subtitle: Optional[str]) -> str:
        subtitle_html = f"<div class='kpi-subtitle'>{subtitle}</div>" if subtitle else ""
        return (
            f"<div class='kpi-card'><div class='kpi-title'>{title}</div>{subtitle_html}"
            f"<div class='kpi-value'>{value}</div></div>"
        )

    @staticmethod
    def render_ticket_table(table: pd.DataFrame, styler: Optional[Styler] = None) -> None:
        """Render the ticket table; real attachment URLs render as links."""
        if table.empty:
            st.info("Sin resultados")
            return
        st.dataframe(
            styler if styler is not None else table,
            hide_index=True,
            width="stretch",
            column_config={
                "Problema": st.column_config.TextColumn(width="large"),
                # host name for URLs; the placeholder does not match and shows as is
                "Imágenes": st.column_config.LinkColumn(display_text=LINK_LABEL_PATTERN),
            },
        )

    @staticmethod
    def render_loading() -> None:
        st.info("⏳ Cargando…")

    @staticmethod
    def render_error(message: str) -> None:
        st.error(message)

    @staticmethod
    def render_footer() -> None:
        st.caption(
            "Consejo: para seguridad, usa policies RLS en Supabase. La key ANON "
            "sigue siendo pública para cualquiera que acceda al dashboard."
        )
