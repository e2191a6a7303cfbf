import logging

import pytest

from quill.settings import PROJECT_ROOT, Settings


@pytest.mark.unit
def test_settings_fails_fast_when_database_url_missing_in_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    # Prevent `load_dotenv()` from injecting a value from local `.env`.
    monkeypatch.setenv("DATABASE_URL", "")

    with pytest.raises(ValueError, match=r"DATABASE_URL.*production"):
        Settings.load()


@pytest.mark.unit
def test_settings_requires_secret_key_in_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("SECRET_KEY", "")

    with pytest.raises(ValueError, match="SECRET_KEY"):
        Settings.load()


@pytest.mark.unit
def test_settings_does_not_log_database_url_when_sqlite_fallback(monkeypatch, caplog) -> None:
    monkeypatch.setenv("FLASK_ENV", "development")
    monkeypatch.setenv("DATABASE_URL", "")

    caplog.set_level(logging.WARNING, logger="quill.settings")

    settings = Settings.load()

    assert settings.database_url.startswith("sqlite:///")
    assert "sqlite:" not in caplog.text
    assert str(PROJECT_ROOT) not in caplog.text


@pytest.mark.unit
def test_posts_admin_require_login_defaults_to_true() -> None:
    settings = Settings.load()

    assert settings.posts_admin_require_login is True
    assert settings.to_flask_config()["POSTS_ADMIN_REQUIRE_LOGIN"] is True


@pytest.mark.unit
def test_posts_admin_require_login_can_be_disabled(monkeypatch) -> None:
    monkeypatch.setenv("POSTS_ADMIN_REQUIRE_LOGIN", "false")

    assert Settings.load().to_flask_config()["POSTS_ADMIN_REQUIRE_LOGIN"] is False


@pytest.mark.unit
def test_testing_environment_sets_testing_flag() -> None:
    config = Settings.load().to_flask_config()

    assert config["TESTING"] is True
    assert config["DEBUG"] is False
    assert config["WTF_CSRF_ENABLED"] is False


@pytest.mark.unit
@pytest.mark.parametrize(
    ("env_name", "env_value"),
    [
        ("BCRYPT_LOG_ROUNDS", "2"),
        ("LOG_LEVEL", "VERBOSE"),
        ("LOG_BACKUP_COUNT", "-1"),
        ("PERMANENT_SESSION_LIFETIME", "0"),
    ],
)
def test_invalid_values_fail_validation(monkeypatch, env_name, env_value) -> None:
    monkeypatch.setenv(env_name, env_value)

    with pytest.raises(ValueError, match="配置校验失败"):
        Settings.load()
