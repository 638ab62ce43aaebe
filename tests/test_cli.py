"""Tests for the gridcal CLI."""

import json

import pytest
from click.testing import CliRunner

from gridcal.cli import main
from gridcal.config import Config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Keep a real ~/.gridcal/gridcal.conf out of the tests."""
    config = Config()
    monkeypatch.setattr("gridcal.cli.load_config", lambda: config)
    return config


class TestShow:
    def test_prints_grid_json(self, runner):
        result = runner.invoke(main, ["show", "2012-12-03", "-n", "14", "-f", "0"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert list(data) == ["2012-12"]
        days = data["2012-12"]["days"]
        assert len(days) == 21
        assert days["2"]["is_extra"] is True
        assert days["3"]["is_extra"] is False

    def test_padding_flags(self, runner):
        result = runner.invoke(main, ["show", "2012-12-03", "-n", "14", "--no-prefill", "--no-postfill"])

        assert result.exit_code == 0
        days = json.loads(result.output)["2012-12"]["days"]
        assert list(days) == [str(d) for d in range(3, 17)]

    def test_month_filter(self, runner):
        result = runner.invoke(main, ["show", "2012-11-01", "-n", "92", "--month", "2012-12"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert list(data) == ["2012-11", "2012-12", "2013-01"]
        assert all(cell["is_extra"] for cell in data["2012-11"]["days"].values())

    def test_uses_config_defaults(self, runner, default_config):
        default_config.first_day_of_week = 1

        result = runner.invoke(main, ["show", "2012-12-03", "-n", "14"])

        days = json.loads(result.output)["2012-12"]["days"]
        assert list(days) == [str(d) for d in range(3, 17)]

    def test_invalid_grid_exits(self, runner):
        result = runner.invoke(main, ["show", "not-a-date", "-f", "9"])

        assert result.exit_code == 1
        assert "start_date" in result.output
        assert "first_day_of_week" in result.output


class TestHeader:
    def test_rotated(self, runner):
        result = runner.invoke(main, ["header", "-f", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "Tue Wed Thu Fri Sat Sun Mon"

    def test_default(self, runner):
        result = runner.invoke(main, ["header"])
        assert result.output.strip() == "Sun Mon Tue Wed Thu Fri Sat"

    def test_invalid(self, runner):
        result = runner.invoke(main, ["header", "-f", "9"])
        assert result.exit_code == 1
        assert "first_day_of_week" in result.output
