"""Chart rendering functionality."""
from typing import Optional

import pandas as pd
import plotly.express as px
import streamlit as st

from config import AppConfig
from services import KPISnapshot

URGENCY_COLORS = {"Leve": "#16a34a", "Moderada": "#6b7280", "Crítica": "#ca8a04"}


class ChartRenderer:
    """Renders chart visualizations."""

    def __init__(self, config: AppConfig):
        self.config = config

    def build_urgency_data(self, kpis: KPISnapshot) -> pd.DataFrame:
        """Tickets per urgency tier, in tier order."""
        leve, moderada, critica = self.config.URGENCY_OPTIONS
        return pd.DataFrame(
            {
                "Urgencia": [leve, moderada, critica],
                "Tickets": [kpis.leve, kpis.moderada, kpis.critica],
            }
        )

    def render_urgency_chart(self, kpis: KPISnapshot, chart_key: Optional[str] = None):
        """Render a bar chart of tickets by urgency tier."""
        data = self.build_urgency_data(kpis)
        if data["Tickets"].sum() == 0:
            return None
        fig = px.bar(
            data,
            x="Urgencia",
            y="Tickets",
            color="Urgencia",
            color_discrete_map=URGENCY_COLORS,
            text="Tickets",
        )
        fig.update_layout(showlegend=False, height=260, margin=dict(l=10, r=10, t=10, b=10))
        fig.update_traces(textposition="outside", cliponaxis=False)
        st.plotly_chart(fig, width="stretch", key=chart_key)
        return fig
