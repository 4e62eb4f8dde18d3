import pytest

from data import Ticket
from services import KPISnapshot
from ui import ChartRenderer
from utils import FilterOptionsHelper, UrgencyHelper


@pytest.mark.parametrize(
    "value, label",
    [("critica", "Crítica"), ("CRÍTICA", "Crítica"), ("leve", "Leve"), ("Urgente ", "Urgente"), (None, None)],
)
def test_canonical_urgency_label(config, value, label):
    assert UrgencyHelper(config).canonical_label(value) == label


@pytest.mark.parametrize(
    "value, intent",
    [("Crítica", "warn"), ("Critica", "warn"), ("Moderada", "muted"), ("Leve", "ok"), (None, "ok")],
)
def test_urgency_intent(value, intent):
    assert UrgencyHelper.intent(value) == intent


def test_options_keep_fixed_values_first(config):
    tickets = [
        Ticket(status="En espera", urgency="Urgente", sector="cocina"),
        Ticket(status="Pendiente", urgency="Critica", sector="Cocina"),
    ]
    options = FilterOptionsHelper(config).build_options(tickets)
    assert options["status"] == ["Pendiente", "Resuelto", "En espera"]
    assert options["urgency"] == ["Leve", "Moderada", "Crítica", "Urgente"]
    assert options["sector"] == ["cocina"]
    assert options["assignee"] == []


def test_urgency_chart_data_follows_tiers(config):
    data = ChartRenderer(config).build_urgency_data(KPISnapshot(total=4, leve=1, moderada=1, critica=2))
    assert data["Urgencia"].tolist() == ["Leve", "Moderada", "Crítica"]
    assert data["Tickets"].tolist() == [1, 1, 2]
