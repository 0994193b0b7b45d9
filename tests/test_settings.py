from config import get_settings_module


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"
