"""Tests for configuration management."""
import pytest

import config.settings
from config.settings import Settings

ENV_VARS = (
    'SAMPLE_ACCOUNT_NUMBER',
    'SAMPLE_ACCOUNT_HOLDER',
    'SAMPLE_INITIAL_BALANCE',
    'SAMPLE_LOG_FILE',
    'SAMPLE_LOG_LEVEL',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Ignore any .env file and clear the sample variables."""
    monkeypatch.setattr(config.settings, 'load_dotenv', lambda: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    """Test that all default values are correctly set."""
    settings = Settings()

    assert settings.account_number == '123'
    assert settings.account_holder_name == 'Alice'
    assert settings.initial_balance == 100.0
    assert settings.log_file == 'sample_runner.log'
    assert settings.log_level == 'INFO'


def test_settings_load_without_env():
    """Loading with nothing set falls back to the defaults."""
    assert Settings.load() == Settings()


def test_settings_load(monkeypatch):
    """Test loading Settings from environment variables."""
    monkeypatch.setenv('SAMPLE_ACCOUNT_NUMBER', '999')
    monkeypatch.setenv('SAMPLE_ACCOUNT_HOLDER', 'Dave')
    monkeypatch.setenv('SAMPLE_INITIAL_BALANCE', '-12.5')
    monkeypatch.setenv('SAMPLE_LOG_FILE', 'other.log')
    monkeypatch.setenv('SAMPLE_LOG_LEVEL', 'debug')

    settings = Settings.load()

    assert settings.account_number == '999'
    assert settings.account_holder_name == 'Dave'
    assert settings.initial_balance == -12.5
    assert settings.log_file == 'other.log'
    assert settings.log_level == 'DEBUG'


def test_settings_load_invalid_balance(monkeypatch):
    """Test that loading fails when SAMPLE_INITIAL_BALANCE is not a number."""
    monkeypatch.setenv('SAMPLE_INITIAL_BALANCE', 'lots')

    with pytest.raises(ValueError, match="SAMPLE_INITIAL_BALANCE must be a number"):
        Settings.load()


def test_settings_load_invalid_log_level(monkeypatch):
    """Test that loading fails when SAMPLE_LOG_LEVEL is not a logging level."""
    monkeypatch.setenv('SAMPLE_LOG_LEVEL', 'verbose')

    with pytest.raises(ValueError, match="SAMPLE_LOG_LEVEL must be one of"):
        Settings.load()
