import pytest
from pydantic import ValidationError

from config import Settings


def test_defaults():
    settings = Settings()

    assert settings.farewell == "Bye!"
    assert settings.help_text == "The program evaluates basic arithmetic expressions"
    assert settings.prompt == ""
    assert settings.strict_tokens is False
    assert settings.log_level == "WARNING"
    assert settings.int_max_str_digits == 0


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("BIGCALC_STRICT_TOKENS", "true")
    monkeypatch.setenv("BIGCALC_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.strict_tokens is True
    assert settings.log_level == "DEBUG"


def test_misspelled_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("BIGCALC_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize("value", [-1, 1, 639])
def test_digit_limit_below_minimum_is_rejected(value):
    with pytest.raises(ValidationError):
        Settings(int_max_str_digits=value)


@pytest.mark.parametrize("value", [0, 640, 100_000])
def test_digit_limit_accepted(value):
    assert Settings(int_max_str_digits=value).int_max_str_digits == value
