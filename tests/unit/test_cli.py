"""Unit tests for the command-line entry point."""

import json
import pytest

from fortune_app.cli import build_parser, main
from fortune_app.persistence.input_store import InputStore, SqliteKeyValueStore


def _run_json(capsys, *argv) -> dict:
    assert main(["--json", "--current-month", "7", *argv]) == 0
    return json.loads(capsys.readouterr().out)


class TestCli:
    """Test suite for fortune_app.cli.main."""

    def test_pretty_output(self, capsys) -> None:
        exit_code = main([
            "--name", "山田 花子",
            "--birth-date", "1990-05-01",
            "--period", "today",
            "--current-month", "7",
        ])
        out = capsys.readouterr().out.splitlines()

        assert exit_code == 0
        assert out[0] == "山田 花子 さんの今日の運勢"
        assert out[1] == "吉"
        assert out[3] == "星座：牡牛座（テーマ：安心・豊かさ）"

    def test_json_output(self, capsys) -> None:
        data = _run_json(capsys, "--name", "Hanako", "--birth-date", "1990-05-01")
        assert data["name"] == "Hanako"
        assert data["result"]["periodLabel"] == "今日"
        assert data["result"]["level"] == "大吉"

    def test_year_month_day_arguments(self, capsys) -> None:
        data = _run_json(capsys, "--name", "Hanako", "--year", "1990", "--month", "5", "--day", "1")
        assert data["result"]["zodiac"] == "牡牛座"
        assert data["result"]["lifePathNumber"] == 7

    def test_no_result(self, capsys) -> None:
        data = _run_json(capsys, "--name", "Hanako", "--birth-date", "not-a-date")
        assert data["result"] is None

    def test_placeholder_text(self, capsys) -> None:
        assert main(["--name", "Hanako"]) == 0
        assert "まだ結果はひみつです。" in capsys.readouterr().out

    def test_current_month_applies_demotion(self, capsys) -> None:
        assert main([
            "--json", "--current-month", "3",
            "--name", "山田 花子", "--birth-date", "1990-05-01", "--period", "thisYear",
        ]) == 0
        assert json.loads(capsys.readouterr().out)["result"]["level"] == "中吉"

    def test_early_year_json_is_clean(self, capsys) -> None:
        """Seasonal and composition debug logs never reach stdout."""
        assert main([
            "--json", "--current-month", "3", "--period", "thisYear",
            "--name", "Hanako", "--birth-date", "1990-05-01",
        ]) == 0
        out = capsys.readouterr().out
        assert json.loads(out)["result"]["periodLabel"] == "今年"
        assert "Seasonal level adjustment" not in out
        assert "Fortune computed" not in out

    def test_debug_logs_go_to_stderr(self, capsys) -> None:
        assert main([
            "--json", "--log-level", "debug", "--current-month", "7",
            "--name", "Hanako", "--birth-date", "1990-05-01",
        ]) == 0
        assert json.loads(capsys.readouterr().out)["result"]["level"] == "大吉"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "foo"])
        assert exc_info.value.code == 2

    def test_period_help_lists_subtitles(self) -> None:
        help_text = build_parser().format_help()
        assert "1年を通したテーマ" in help_text

    def test_conflicting_date_arguments(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--birth-date", "1990-05-01", "--year", "1990"])
        assert exc_info.value.code == 2

    def test_unknown_period_rejected(self) -> None:
        with pytest.raises(SystemExit):
            main(["--period", "yesterday"])

    def test_invalid_config(self, tmp_path, capsys) -> None:
        (tmp_path / "fortune.yaml").write_text("output:\n  format: xml\n", encoding="utf-8")
        assert main(["--config-dir", str(tmp_path), "--name", "Hanako"]) == 1
        assert "Configuration error" in capsys.readouterr().err


class TestCliStore:
    """Test --store persistence of the last inputs."""

    def test_inputs_saved(self, tmp_path, capsys) -> None:
        db_path = tmp_path / "inputs.db"
        _run_json(capsys, "--store", str(db_path), "--name", "Hanako",
                  "--birth-date", "1990-05-01", "--period", "nextYear")

        saved = InputStore(SqliteKeyValueStore(str(db_path))).load()
        assert saved.name == "Hanako"
        assert (saved.birth_year, saved.birth_month, saved.birth_day) == ("1990", "5", "1")
        assert saved.period.value == "nextYear"
        assert saved.touched is True

    def test_inputs_restored(self, tmp_path, capsys) -> None:
        db_path = str(tmp_path / "inputs.db")
        first = _run_json(capsys, "--store", db_path, "--name", "Hanako",
                          "--birth-date", "1990-05-01", "--period", "tomorrow")
        second = _run_json(capsys, "--store", db_path)
        assert second == first

    def test_arguments_override_store(self, tmp_path, capsys) -> None:
        db_path = str(tmp_path / "inputs.db")
        _run_json(capsys, "--store", db_path, "--name", "Hanako", "--birth-date", "1990-05-01")
        data = _run_json(capsys, "--store", db_path, "--period", "thisYear")
        assert data["name"] == "Hanako"
        assert data["result"]["periodLabel"] == "今年"

    def test_store_error(self, tmp_path, capsys) -> None:
        assert main(["--store", str(tmp_path), "--name", "Hanako"]) == 1
        assert "Input store error" in capsys.readouterr().err
