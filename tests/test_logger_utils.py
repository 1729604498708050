# tests/test_logger_utils.py
import pytest

from markov_walker.utils.logger_utils import Log


def test_write_creates_folder_and_formats(log_to_tmp):
    Log.write("hello")
    Log.warning("careful")
    lines = log_to_tmp.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("INFO    | hello")
    assert "WARNING | careful" in lines[1]


def test_unknown_level_falls_back_to_info(log_to_tmp):
    Log.write("x", level="loud")
    assert "INFO    | x" in log_to_tmp.read_text(encoding="utf-8")


def test_echo_prints(log_to_tmp, capsys, monkeypatch):
    monkeypatch.setattr(Log, "use_color", False)
    Log.configure(echo=True)
    Log.error("boom")
    assert "ERROR   | boom" in capsys.readouterr().out


def test_time_block_records_metric(log_to_tmp):
    with Log.time_block("unit") as t:
        pass
    assert t.elapsed >= 0
    assert "unit done:" in log_to_tmp.read_text(encoding="utf-8")


def test_time_block_marks_failures(log_to_tmp):
    with pytest.raises(RuntimeError):
        with Log.time_block("unit"):
            raise RuntimeError("x")
    assert "unit failed:" in log_to_tmp.read_text(encoding="utf-8")
