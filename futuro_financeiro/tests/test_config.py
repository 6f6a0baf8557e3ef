from futuro_financeiro.config import Settings


def test_defaults():
    settings = Settings.from_env({})

    assert settings.history_limit == 10
    assert settings.cors_origins == ["http://localhost:5173"]
    assert settings.log_level == "INFO"


def test_environment_overrides():
    settings = Settings.from_env(
        {
            "FUTURO_HISTORY_PATH": "/tmp/hist.json",
            "FUTURO_HISTORY_LIMIT": "5",
            "FUTURO_CORS_ORIGINS": "http://a.test, http://b.test,",
            "FUTURO_LOG_LEVEL": "debug",
        }
    )

    assert settings.history_path == "/tmp/hist.json"
    assert settings.history_limit == 5
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"
