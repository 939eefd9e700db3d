import app_settings


def test_load_settings_defaults(monkeypatch):
    for key in (
        "MEDISENSE_GEMINI_BASE",
        "MEDISENSE_GEMINI_MODEL",
        "MEDISENSE_DATA_PATH",
        "MEDISENSE_REQUEST_TIMEOUT",
        "MEDISENSE_PACING_DELAY",
        "MEDISENSE_DEBUG",
        "GEMINI_API_KEY",
        "API_KEY",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(app_settings, "_safe_secret", lambda key: None)

    settings = app_settings.load_settings()

    assert settings.gemini_base == app_settings.DEFAULT_GEMINI_BASE
    assert settings.gemini_model == "gemini-1.5-flash"
    assert settings.request_timeout == 30.0
    assert settings.pacing_delay == 0.4
    assert settings.seed_api_key is None
    assert settings.debug is False
    assert settings.data_path.endswith("store.json")


def test_load_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setattr(app_settings, "_safe_secret", lambda key: None)
    monkeypatch.setenv("MEDISENSE_GEMINI_BASE", "https://proxy.example/v1/")
    monkeypatch.setenv("MEDISENSE_DATA_PATH", str(tmp_path / "data.json"))
    monkeypatch.setenv("MEDISENSE_REQUEST_TIMEOUT", "not-a-number")
    monkeypatch.setenv("MEDISENSE_PACING_DELAY", "0")
    monkeypatch.setenv("MEDISENSE_DEBUG", "yes")
    monkeypatch.setenv("GEMINI_API_KEY", "  AIza-env  ")

    settings = app_settings.load_settings()

    assert settings.gemini_base == "https://proxy.example/v1"
    assert settings.data_path == str(tmp_path / "data.json")
    assert settings.request_timeout == 30.0
    assert settings.pacing_delay == 0.0
    assert settings.debug is True
    assert settings.seed_api_key == "AIza-env"


def test_secrets_take_precedence(monkeypatch):
    monkeypatch.setenv("MEDISENSE_GEMINI_MODEL", "from-env")
    monkeypatch.setattr(
        app_settings,
        "_safe_secret",
        lambda key: "from-secrets" if key == "MEDISENSE_GEMINI_MODEL" else None,
    )

    assert app_settings.load_settings().gemini_model == "from-secrets"
