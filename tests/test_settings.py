import pytest
from pydantic import ValidationError

from iss_flyover.settings import Settings, get_settings


def test_get_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("IPIFY_URL", "IPWHOIS_URL", "ISS_FLYOVER_URL", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    assert get_settings() == Settings()


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IPIFY_URL", "http://ip.test")
    monkeypatch.setenv("IPWHOIS_URL", "http://geo.test")
    monkeypatch.setenv("ISS_FLYOVER_URL", "http://iss.test/json/")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")

    settings = get_settings()

    assert settings.ipify_url == "http://ip.test"
    assert settings.ipwhois_url == "http://geo.test"
    assert settings.iss_flyover_url == "http://iss.test/json/"
    assert settings.timeout_seconds == 2.5


def test_get_settings_rejects_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValidationError):
        get_settings()
