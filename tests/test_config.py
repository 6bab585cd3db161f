import pytest

from passcheck.core.config import Setting, get_cors_origins, get_setting, get_year_range


def test_defaults(monkeypatch):
    for setting in Setting:
        monkeypatch.delenv(setting.value, raising=False)

    assert get_setting(Setting.HIBP_RANGE_URL) == "https://api.pwnedpasswords.com/range"
    assert get_setting(Setting.HIBP_ADD_PADDING) is True
    assert get_setting("MIN_LENGTH") == 8
    assert get_year_range() == (1900, 2029)


def test_env_overrides_are_coerced(monkeypatch):
    monkeypatch.setenv("YEAR_MAX", "2035")
    monkeypatch.setenv("HIBP_ADD_PADDING", "no")
    monkeypatch.setenv("BREACH_TIMEOUT_SECONDS", "3")

    assert get_setting(Setting.YEAR_MAX) == 2035
    assert get_setting(Setting.HIBP_ADD_PADDING) is False
    assert get_setting(Setting.BREACH_TIMEOUT_SECONDS) == 3.0


def test_blank_env_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PASSWORD_MAX_LENGTH", "  ")
    assert get_setting(Setting.PASSWORD_MAX_LENGTH) == 256


def test_invalid_value_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("YEAR_MIN", "nineteen hundred")
    with pytest.raises(RuntimeError):
        get_setting(Setting.YEAR_MIN)


def test_cors_origins(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    assert get_cors_origins() == ["https://a.example", "https://b.example"]
    monkeypatch.delenv("CORS_ORIGINS")
    assert "http://localhost:3000" in get_cors_origins()
