# tests/test_config.py
import json

import pytest

from vote_muncher.utils.config_manager import DEFAULTS, Config, ConfigError


def test_defaults_without_file(tmp_path):
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg["online_max_distance"] == 2
    assert cfg.get("consolidate_max_distance") == 5
    # missing file -> defaults, nothing created
    missing = tmp_path / "missing.json"
    Config(str(missing))
    assert not missing.exists()


def test_set_coerces_to_default_type():
    cfg = Config()
    cfg.set("online_max_distance", "3")
    assert cfg["online_max_distance"] == 3


@pytest.mark.parametrize(
    "key, val",
    [("nope", 1), ("online_max_distance", "two"), ("consolidate_max_distance", -1), ("top", -5)],
)
def test_set_rejects(key, val):
    with pytest.raises(ConfigError):
        Config().set(key, val)


def test_load_and_save_roundtrip(tmp_path):
    p = tmp_path / "conf" / "vm.json"
    cfg = Config(str(p))
    cfg.set("top", 10, persist=True)
    assert json.loads(p.read_text(encoding="utf8"))["top"] == 10
    assert Config(str(p))["top"] == 10


def test_bad_files(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(broken))

    listy = tmp_path / "list.json"
    listy.write_text("[1, 2]", encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(listy))

    unknown = tmp_path / "unknown.json"
    unknown.write_text('{"theme": "dark"}', encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(unknown))


def test_save_needs_path():
    with pytest.raises(ConfigError):
        Config().save()


def test_show(capsys):
    Config().show()
    assert "online_max_distance" in capsys.readouterr().out
