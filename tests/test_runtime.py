from dashboard import DashboardController, DashboardRuntime, ReadyState
from data import ChangeListener, TicketRepository


def test_runtime_runs_controller_on_loop_thread(config, settings, fake_client):
    async def build_controller():
        return DashboardController(
            config, TicketRepository(fake_client, settings), ChangeListener(fake_client, settings)
        )

    runtime = DashboardRuntime(build_controller)
    try:
        assert isinstance(runtime.controller.state, ReadyState)
        runtime.run(runtime.controller.set_filter(status="Resuelto"), timeout=5)
        assert [ticket.id for ticket in runtime.controller.state.tickets] == ["2"]
    finally:
        runtime.close()

    assert len(fake_client.removed) == 1


def test_close_is_idempotent(config, settings, fake_client):
    async def build_controller():
        return DashboardController(
            config, TicketRepository(fake_client, settings), ChangeListener(fake_client, settings)
        )

    runtime = DashboardRuntime(build_controller)
    runtime.close()
    runtime.close()
    assert len(fake_client.removed) == 1
