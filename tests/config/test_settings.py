import pydantic
import pytest

from config.settings import Settings


def test_defaults(monkeypatch):
    for name in ["ENVIRONMENT", "DEBUG", "LOG_LEVEL", "BANK_INITIAL_COINS", "BANK_STRICT"]:
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)
    assert settings.BANK_INITIAL_COINS == 10_000
    assert settings.BANK_STRICT is False
    assert settings.EFFECTIVE_LOG_LEVEL == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("bank_initial_coins", "250")
    monkeypatch.setenv("BANK_STRICT", "true")
    monkeypatch.setenv("DEBUG", "1")

    settings = Settings(_env_file=None)
    assert settings.BANK_INITIAL_COINS == 250
    assert settings.BANK_STRICT is True
    assert settings.EFFECTIVE_LOG_LEVEL == "DEBUG"


def test_negative_supply_rejected():
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None, BANK_INITIAL_COINS=-1)
