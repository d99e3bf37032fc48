"""Tests for the console report."""

import sys

import pytest

import report


class TestReport:
    def test_prints_tables(self, survey_csv, capsys):
        assert report.run_report(str(survey_csv)) is True
        out = capsys.readouterr().out

        assert "Respondents: 7" in out
        assert "Lines too long" in out
        assert "66.7%" in out

    def test_floor(self, survey_csv, capsys):
        report.run_report(str(survey_csv), floor_level="not")
        out = capsys.readouterr().out
        assert "100.0%" in out

    def test_main_exits_on_load_error(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["report.py", str(tmp_path / "missing.csv")])
        with pytest.raises(SystemExit) as exc:
            report.main()
        assert exc.value.code == 1

    def test_main_exits_on_unknown_floor(self, survey_csv, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["report.py", str(survey_csv), "--floor", "impossible"])
        with pytest.raises(SystemExit) as exc:
            report.main()
        assert exc.value.code == 1
