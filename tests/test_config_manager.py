# tests/test_config_manager.py
import io
import json

from rich.console import Console

from markov_walker.utils.config_manager import DEFAULTS, Config


def test_creates_file_with_defaults(tmp_path):
    path = tmp_path / "cfg" / "config.json"
    cfg = Config(str(path))
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS
    assert cfg.get("walks") == 5


def test_set_converts_types(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert cfg.set("walks", "7")
    assert cfg.get("walks") == 7
    assert cfg.set("lowercase", "yes")
    assert cfg.get("lowercase") is True
    assert cfg.set("lowercase", "off")
    assert cfg.get("lowercase") is False
    assert cfg.set("seed", "12")
    assert cfg.get("seed") == 12
    assert cfg.set("seed", "none")
    assert cfg.get("seed") is None


def test_set_rejects_unknown_key_and_bad_value(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert not cfg.set("colour", "blue")
    assert not cfg.set("walks", "many")
    assert not cfg.set("lowercase", "maybe")
    assert cfg.get("walks") == 5


def test_values_persist(tmp_path):
    path = str(tmp_path / "config.json")
    Config(path).set("max_tokens", "9")
    assert Config(path).get("max_tokens") == 9


def test_corrupt_file_falls_back_to_defaults(tmp_path, log_to_tmp):
    path = tmp_path / "config.json"
    path.write_text("[1, 2", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert "ignoring unreadable" in log_to_tmp.read_text(encoding="utf-8")


def test_show_lists_keys(tmp_path):
    buf = io.StringIO()
    Config(str(tmp_path / "config.json")).show(Console(file=buf, width=120))
    out = buf.getvalue()
    for key in DEFAULTS:
        assert key in out
