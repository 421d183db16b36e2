"""Tests for _utils.py — display length, file checks, event log."""

import pytest

from gridtable import config
from gridtable._utils import (
    display_length,
    has_extension,
    is_csv_file,
    is_file,
    is_json_file,
    log_event,
    strip_ansi,
)


class TestDisplayLength:
    def test_plain(self):
        assert display_length("hello") == 5
        assert display_length("") == 0

    def test_escape_codes_ignored(self):
        assert strip_ansi("\033[1;31mred\033[0m") == "red"
        assert display_length("\033[1;31mred\033[0m") == 3


class TestFileChecks:
    @pytest.mark.parametrize("path", ["a.csv", "dir/b.CSV", "c.Csv"])
    def test_csv(self, path):
        assert is_csv_file(path)
        assert not is_json_file(path)

    def test_json(self):
        assert is_json_file("x.json")
        assert not is_json_file("x.json.bak")

    def test_has_extension(self):
        assert has_extension("a.tsv", {".tsv"})
        assert not has_extension("tsv", {".tsv"})

    def test_is_file(self, tmp_path):
        path = tmp_path / "f.csv"
        assert not is_file(path)
        path.write_text("x", encoding="utf-8")
        assert is_file(path)
        assert not is_file(tmp_path)


class TestLogEvent:
    def test_silent_by_default(self, capsys):
        log_event("x", a=1)
        assert capsys.readouterr().err == ""

    def test_enabled(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "LOG_ENABLED", True)
        log_event("file_written", path="a.csv")
        err = capsys.readouterr().err
        assert err.startswith("[GRIDTABLE] ")
        assert '"path": "a.csv"' in err
