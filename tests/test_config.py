import pytest

from gamevault.config import load_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("JWT_SECRET", "RAWG_KEY", "ALLOWED_ORIGINS", "COOKIE_SECURE", "RAWG_BASE_URL", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("gamevault.config.load_dotenv", lambda: None)
    return monkeypatch


def test_missing_secret_aborts(clean_env):
    with pytest.raises(RuntimeError):
        load_settings()


def test_settings_from_environment(clean_env):
    clean_env.setenv("JWT_SECRET", "s")
    clean_env.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")
    clean_env.setenv("COOKIE_SECURE", "true")
    clean_env.setenv("RAWG_BASE_URL", "https://rawg.test/api/")
    clean_env.setenv("PORT", "8080")

    settings = load_settings()

    assert settings.jwt_secret == "s"
    assert settings.allowed_origins == ("http://a.test", "http://b.test")
    assert settings.cookie_secure is True
    assert settings.rawg_base_url == "https://rawg.test/api"
    assert settings.port == 8080
    assert settings.access_token_expire_minutes == 60


def test_settings_are_immutable(clean_env):
    clean_env.setenv("JWT_SECRET", "s")
    settings = load_settings()

    with pytest.raises(AttributeError):
        settings.jwt_secret = "other"


def test_default_origin_is_not_a_wildcard(clean_env):
    clean_env.setenv("JWT_SECRET", "s")

    assert load_settings().allowed_origins == ("http://localhost:5173",)
