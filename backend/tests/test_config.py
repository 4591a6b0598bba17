import pytest
from pydantic import ValidationError

from vitals_api.__main__ import main
from vitals_api.config import Settings, get_settings, parse_duration
from vitals_api.main import create_app


@pytest.fixture
def bare_env(monkeypatch, tmp_path):
    """No config in the environment and no .env file in the working directory."""
    for name in ("JWT_SECRET", "JWT_EXPIRES_IN", "DATABASE_URL", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.mark.parametrize(
    "value, expected",
    [(3600, 3600), ("90", 90), ("15m", 900), ("1h", 3600), ("7d", 604800), ("2w", 1209600), ("1H", 3600)],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "1y", "-5", "0", 0, True])
def test_parse_duration_rejects_bad_values(value):
    with pytest.raises(ValueError):
        parse_duration(value)


def test_settings_from_env(bare_env, monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "abc")
    monkeypatch.setenv("JWT_EXPIRES_IN", "30m")
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
    monkeypatch.setenv("PORT", "8080")

    settings = get_settings()

    assert settings.jwt_secret == "abc"
    assert settings.jwt_expires_in == 1800
    assert settings.port == 8080
    assert get_settings() is settings


def test_defaults(bare_env):
    settings = Settings(jwt_secret="abc", database_url="sqlite+aiosqlite:///./x.db")
    assert settings.jwt_expires_in == 3600
    assert settings.port == 5000
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("missing", ["JWT_SECRET", "DATABASE_URL"])
def test_missing_required_setting_fails(bare_env, monkeypatch, missing):
    monkeypatch.setenv("JWT_SECRET", "abc")
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
    monkeypatch.delenv(missing)

    with pytest.raises(ValidationError):
        Settings()


def test_create_app_fails_fast_without_config(bare_env):
    with pytest.raises(ValidationError):
        create_app()


def test_main_exits_nonzero_without_config(bare_env):
    assert main() == 1
