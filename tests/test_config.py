import pytest
from pydantic import ValidationError

from brdocs.config import CONFIG_ENV, ValidatorConfig, config_from_env, load_config


def test_defaults():
    cfg = load_config(None)
    assert cfg == ValidatorConfig()
    assert cfg.reject_repeated_digits is False
    assert cfg.format_errors == "raise"


def test_load_yaml(tmp_path):
    path = tmp_path / "brdocs.yaml"
    path.write_text("reject_repeated_digits: true\nformat_errors: invalid\n")
    cfg = load_config(path)
    assert cfg.reject_repeated_digits is True
    assert cfg.format_errors == "invalid"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == ValidatorConfig()


def test_bad_value_is_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("format_errors: ignore\n")
    with pytest.raises(ValidationError):
        load_config(path)


def test_config_from_env(tmp_path, monkeypatch):
    path = tmp_path / "brdocs.yaml"
    path.write_text("reject_repeated_digits: true\n")
    monkeypatch.setenv(CONFIG_ENV, str(path))
    assert config_from_env().reject_repeated_digits is True


def test_config_from_env_unset(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    assert config_from_env() == ValidatorConfig()
