from data import TICKET_COLUMNS, FilterState, SortState, Ticket


def test_from_record_tolerates_missing_fields():
    ticket = Ticket.from_record({"problema": "Luz quemada", "id": 42})
    assert ticket.problem == "Luz quemada"
    assert ticket.id == "42"
    assert ticket.status is None


def test_from_record_keeps_whitespace_verbatim():
    ticket = Ticket.from_record({"problema": "   ", "sector": " Cocina "})
    assert ticket.problem == "   "
    assert ticket.sector == " Cocina "


def test_to_record_keeps_column_order():
    record = Ticket(problem="x").to_record()
    assert list(record) == list(TICKET_COLUMNS.values())


def test_filter_state_replace():
    filters = FilterState()
    changed = filters.replace(sector="Cocina", urgency=None)
    assert changed == FilterState(sector="Cocina")
    assert filters == FilterState()


def test_sort_toggle():
    sort = SortState()
    assert sort.toggle("fecha_creacion") == SortState("fecha_creacion", False)
    assert sort.toggle("fecha_creacion").toggle("sector") == SortState("sector", True)
