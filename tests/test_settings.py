import pytest

from pyffl.settings import DEFAULT_FANTASY_BASE_URL, DEFAULT_TIMEOUT, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "PYFFL_LEAGUE_ID",
        "PYFFL_ESPN_S2",
        "PYFFL_SWID",
        "PYFFL_FANTASY_BASE_URL",
        "PYFFL_SITE_BASE_URL",
        "PYFFL_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    settings = Settings.from_env()
    assert settings.league_id is None
    assert settings.fantasy_base_url == DEFAULT_FANTASY_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PYFFL_LEAGUE_ID", "336358")
    monkeypatch.setenv("PYFFL_ESPN_S2", "abc")
    monkeypatch.setenv("PYFFL_SWID", "{XYZ}")
    monkeypatch.setenv("PYFFL_TIMEOUT", "2.5")

    settings = Settings.from_env()

    assert settings.league_id == 336358
    assert (settings.espn_s2, settings.swid) == ("abc", "{XYZ}")
    assert settings.timeout == pytest.approx(2.5)


def test_invalid_values_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("PYFFL_LEAGUE_ID", "not-a-number")
    monkeypatch.setenv("PYFFL_TIMEOUT", "fast")

    settings = Settings.from_env()

    assert settings.league_id is None
    assert settings.timeout == DEFAULT_TIMEOUT
    assert "PYFFL_TIMEOUT" in caplog.text


def test_timeout_is_clamped(monkeypatch):
    monkeypatch.setenv("PYFFL_TIMEOUT", "0")
    assert Settings.from_env().timeout == pytest.approx(0.1)
