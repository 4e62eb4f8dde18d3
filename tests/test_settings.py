import pytest

from config import ConfigurationError, StoreSettings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "SUPABASE_URL", "SUPABASE_KEY", "MAINT_TABLE_NAME", "MAINT_SCHEMA", "MAINT_ENABLE_REALTIME",
        "MAINT_ENABLE_UPDATE_ACTIONS", "MAINT_QUERY_TIMEOUT", "MAINT_TRACK_UNIVERSE_TOTAL", "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    clean_env.setenv("SUPABASE_URL", "https://demo.supabase.co")
    clean_env.setenv("SUPABASE_KEY", "anon")
    settings = StoreSettings.from_env(dotenv=False)
    assert settings.qualified_table == "public.asistente_mantenimiento"
    assert settings.enable_realtime is True
    assert settings.enable_update_actions is False
    assert settings.query_timeout is None
    assert settings.log_level == "INFO"


def test_overrides(clean_env):
    clean_env.setenv("SUPABASE_URL", "https://demo.supabase.co")
    clean_env.setenv("SUPABASE_KEY", "anon")
    clean_env.setenv("MAINT_SCHEMA", "mant")
    clean_env.setenv("MAINT_TABLE_NAME", "pedidos")
    clean_env.setenv("MAINT_ENABLE_REALTIME", "false")
    clean_env.setenv("MAINT_QUERY_TIMEOUT", "7.5")
    settings = StoreSettings.from_env(dotenv=False)
    assert settings.qualified_table == "mant.pedidos"
    assert settings.enable_realtime is False
    assert settings.query_timeout == 7.5


def test_missing_credentials(clean_env):
    with pytest.raises(ConfigurationError, match="SUPABASE_URL, SUPABASE_KEY"):
        StoreSettings.from_env(dotenv=False)


def test_invalid_timeout(clean_env):
    clean_env.setenv("SUPABASE_URL", "https://demo.supabase.co")
    clean_env.setenv("SUPABASE_KEY", "anon")
    clean_env.setenv("MAINT_QUERY_TIMEOUT", "pronto")
    with pytest.raises(ConfigurationError):
        StoreSettings.from_env(dotenv=False)
