# tests/test_config.py
import json

import pytest

from markov_textgen.core.errors import InvalidConfiguration
from markov_textgen.utils.config_manager import DEFAULTS, Config


def test_defaults_without_path():
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg.get("seed") == 20
    cfg.validate()


def test_missing_file_is_created_with_defaults(tmp_path):
    p = tmp_path / "config.json"
    Config(str(p))
    assert json.loads(p.read_text(encoding="utf8")) == DEFAULTS


def test_file_values_override_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"seed": None, "log_level": "info"}), encoding="utf8")
    cfg = Config(str(p)).validate()
    assert cfg.get("seed") is None
    assert cfg.get("log_level") == "info"
    assert cfg.get("encoding") == DEFAULTS["encoding"]


def test_bad_json_raises(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf8")
    with pytest.raises(InvalidConfiguration):
        Config(str(p))


def test_set_coerces_and_saves(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    cfg.set("seed", "4")
    cfg.set("strict_training", "true")
    assert cfg.get("seed") == 4
    assert cfg.get("strict_training") is True
    assert json.loads(p.read_text(encoding="utf8"))["seed"] == 4


def test_set_rejects_unknown_key_and_bad_value():
    cfg = Config()
    with pytest.raises(InvalidConfiguration):
        cfg.set("window_length", "3")
    with pytest.raises(InvalidConfiguration):
        cfg.set("seed", "many")


@pytest.mark.parametrize(
    "key, val",
    [
        ("seed", "x"),
        ("seed", True),
        ("strict_training", "false"),
        ("strict_training", 1),
        ("encoding", 8),
        ("encoding", "no-such-codec"),
        ("log_level", "LOUD"),
        ("log_level", None),
        ("log_path", 3),
    ],
)
def test_validate_rejects(key, val):
    cfg = Config()
    cfg.data[key] = val
    with pytest.raises(InvalidConfiguration):
        cfg.validate()
