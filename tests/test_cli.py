"""
Tests for the Typer command line front-end.
"""

import pytest
from typer.testing import CliRunner

from calendarmath.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command away from any real config.yaml."""
    monkeypatch.chdir(tmp_path)


class TestCommands:
    """One check per command."""

    def test_timestamp(self):
        result = runner.invoke(app, ["timestamp", "04 Dec 1995 00:12:00 UTC"])

        assert result.exit_code == 0
        assert "818035920000" in result.output

    def test_time(self):
        result = runner.invoke(app, ["time", "2023-06-01T08:20:55"])

        assert result.exit_code == 0
        assert "08:20:55" in result.output

    def test_day_name(self):
        result = runner.invoke(app, ["day-name", "2024-01-30T00:00:00.000Z"])

        assert result.exit_code == 0
        assert "Tuesday" in result.output

    def test_next_friday(self):
        result = runner.invoke(app, ["next-friday", "2024-02-16"])

        assert result.exit_code == 0
        assert "2024-02-23" in result.output

    def test_days_in_month(self):
        result = runner.invoke(app, ["days-in-month", "2", "2024"])

        assert result.exit_code == 0
        assert "29" in result.output

    def test_days_in_month_rejects_bad_month(self):
        result = runner.invoke(app, ["days-in-month", "13", "2024"])
        assert result.exit_code != 0

    def test_period_days(self):
        result = runner.invoke(app, ["period-days", "2024-02-01", "2024-02-12"])

        assert result.exit_code == 0
        assert "12" in result.output

    def test_in_period(self):
        result = runner.invoke(app, ["in-period", "2024-02-02", "2024-02-02", "2024-03-02"])

        assert result.exit_code == 0
        assert "True" in result.output

    def test_format(self):
        result = runner.invoke(app, ["format", "2024-02-01T15:00:00.000Z"])

        assert result.exit_code == 0
        assert "2/1/2024, 3:00:00 PM" in result.output

    def test_weekends(self):
        result = runner.invoke(app, ["weekends", "12", "2023"])

        assert result.exit_code == 0
        assert "10" in result.output

    def test_week_number(self):
        result = runner.invoke(app, ["week-number", "2024-01-31"])

        assert result.exit_code == 0
        assert "5" in result.output

    def test_friday_13th(self):
        result = runner.invoke(app, ["friday-13th", "2024-01-13"])

        assert result.exit_code == 0
        assert "2024-09-13" in result.output

    def test_quarter(self):
        result = runner.invoke(app, ["quarter", "2024-11-10"])

        assert result.exit_code == 0
        assert "4" in result.output

    def test_leap_year(self):
        result = runner.invoke(app, ["leap-year", "2022-03-01"])

        assert result.exit_code == 0
        assert "False" in result.output

    def test_schedule(self):
        result = runner.invoke(
            app, ["schedule", "01-01-2024", "15-01-2024", "--work", "1", "--off", "3"]
        )

        assert result.exit_code == 0
        for day in ["01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024"]:
            assert day in result.output
        assert "4 working day(s)" in result.output

    def test_month(self):
        result = runner.invoke(app, ["month", "2", "2024"])

        assert result.exit_code == 0
        assert "February 2024" in result.output
        assert "2024-09-13" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "calendarmath" in result.output


class TestErrors:
    """Invalid input exits with code 1."""

    def test_invalid_date(self):
        result = runner.invoke(app, ["day-name", "someday"])

        assert result.exit_code == 1
        assert "Invalid date" in result.output

    def test_invalid_schedule_bound(self):
        result = runner.invoke(app, ["schedule", "2024-01-01", "15-01-2024"])

        assert result.exit_code == 1
        assert "does not match" in result.output

    def test_empty_cycle(self):
        result = runner.invoke(
            app, ["schedule", "01-01-2024", "15-01-2024", "--work", "0", "--off", "0"]
        )
        assert result.exit_code == 1

    def test_missing_config_file(self, tmp_path):
        result = runner.invoke(app, ["day-name", "2024-01-30", "--config", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestConfigFile:
    """Commands honour the configuration file."""

    def test_timezone_from_config(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("timezone: America/New_York\n", encoding="utf-8")

        # Naive input is read as New York time, output is rendered in UTC
        result = runner.invoke(app, ["format", "2024-01-31T02:00:00", "--config", str(path)])

        assert result.exit_code == 0
        assert "1/31/2024, 7:00:00 AM" in result.output

    def test_show_config(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("timezone: Asia/Tokyo\n", encoding="utf-8")

        result = runner.invoke(app, ["show-config", "--config", str(path)])

        assert result.exit_code == 0
        assert "Asia/Tokyo" in result.output
