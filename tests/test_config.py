import pytest
from pydantic import ValidationError
from chilerut import DEFAULT_MAX_LENGTH, RutConfig, load_config


def test_defaults():
    cfg = load_config(None)
    assert cfg.max_length == DEFAULT_MAX_LENGTH == 20
    assert cfg.group_digits is True


def test_load_yaml(tmp_path):
    path = tmp_path / "chilerut.yaml"
    path.write_text("max_length: 12\ngroup_digits: false\n")
    cfg = load_config(path)
    assert cfg == RutConfig(max_length=12, group_digits=False)


def test_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == RutConfig()


def test_env_var(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("max_length: 9\n")
    monkeypatch.setenv("CHILERUT_CONFIG", str(path))
    assert load_config().max_length == 9


def test_rejects_bad_values():
    with pytest.raises(ValidationError):
        RutConfig(max_length=1)
    with pytest.raises(ValidationError):
        RutConfig(unknown=True)
