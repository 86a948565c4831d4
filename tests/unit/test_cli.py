"""Tests for the tax-calc CLI commands."""

import json

import pytest
from click.testing import CliRunner

from taxcalc.cli.__main__ import cli
from taxcalc.sdk import records


@pytest.fixture
def runner():
    return CliRunner()


class TestCalc:
    """Tests for `tax-calc calc`."""

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["calc", "50000", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["tax_year"] == "2025"
        assert data["federal_tax"] == pytest.approx(5914.00)
        assert data["social_security_tax"] == pytest.approx(3100.00)
        assert data["medicare_tax"] == pytest.approx(725.00)
        assert data["total_tax"] == pytest.approx(9739.00)
        assert data["annual_net_pay"] == pytest.approx(40261.00)
        assert data["marginal_rate"] == 0.22

    def test_text_output(self, runner):
        result = runner.invoke(cli, ["calc", "$50,000"])

        assert result.exit_code == 0, result.output
        assert "50,000.00" in result.output
        assert "5,914.00" in result.output
        assert "40,261.00" in result.output
        assert "774.25" in result.output

    def test_period_output(self, runner):
        result = runner.invoke(cli, ["calc", "50000", "--period", "weekly"])

        assert result.exit_code == 0
        assert result.output.strip() == "774.25"

    def test_period_json_output(self, runner):
        result = runner.invoke(cli, ["calc", "50000", "--period", "monthly", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["period"] == "monthly"
        assert data["net_pay"] == pytest.approx(40261.00 / 12)

    def test_negative_salary_after_double_dash(self, runner):
        result = runner.invoke(cli, ["calc", "--format", "json", "--", "-1000"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["annual_net_pay"] == pytest.approx(-923.5)

    def test_invalid_salary(self, runner):
        result = runner.invoke(cli, ["calc", "lots"])

        assert result.exit_code == 1
        assert "Invalid salary" in result.output

    def test_unknown_year(self, runner):
        result = runner.invoke(cli, ["calc", "50000", "--year", "1999"])

        assert result.exit_code == 1
        assert "No tax rules for year 1999" in result.output

    def test_year_option(self, runner):
        result = runner.invoke(cli, ["calc", "50000", "--year", "2024", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["tax_year"] == "2024"

    def test_verbose_flag(self, runner):
        result = runner.invoke(cli, ["-v", "calc", "50000", "--period", "yearly"])

        assert result.exit_code == 0
        assert "40,261.00" in result.output


class TestBrackets:
    """Tests for `tax-calc brackets`."""

    def test_json(self, runner):
        result = runner.invoke(cli, ["brackets", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data["federal_brackets"]) == 7
        assert data["federal_brackets"][-1]["max_earnings"] is None

    def test_text(self, runner):
        result = runner.invoke(cli, ["brackets"])

        assert result.exit_code == 0
        assert "11,925.00" in result.output
        assert "37.0%" in result.output


class TestRecordsCommands:
    """Tests for `tax-calc records ...`."""

    def test_add_then_calc(self, runner):
        added = runner.invoke(cli, ["records", "add", "50000", "--label", "Acme"])
        assert added.exit_code == 0
        record_id = added.output.strip()

        result = runner.invoke(cli, ["records", "calc", record_id, "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["id"] == record_id
        assert data["federal_tax"] == pytest.approx(5914.00)

    def test_calc_text_uses_label(self, runner):
        record_id = records.add_record(50000, label="Acme offer")

        result = runner.invoke(cli, ["records", "calc", record_id])

        assert result.exit_code == 0
        assert "Acme offer" in result.output
        assert "5,914.00" in result.output

    def test_calc_missing_record(self, runner):
        result = runner.invoke(cli, ["records", "calc", "deadbeef"])

        assert result.exit_code == 1
        assert "Record not found: deadbeef" in result.output

    def test_add_invalid_salary(self, runner):
        result = runner.invoke(cli, ["records", "add", "plenty"])

        assert result.exit_code == 1
        assert "Invalid salary" in result.output

    def test_list(self, runner):
        empty = runner.invoke(cli, ["records", "list"])
        assert "No records found." in empty.output

        record_id = records.add_record(85000, label="Globex")
        result = runner.invoke(cli, ["records", "list"])

        assert result.exit_code == 0
        assert record_id in result.output
        assert "85,000.00" in result.output
        assert "Globex" in result.output

    def test_list_json(self, runner):
        record_id = records.add_record(85000)

        result = runner.invoke(cli, ["records", "list", "--format", "json"])

        data = json.loads(result.output)
        assert [r["id"] for r in data] == [record_id]
        assert data[0]["data"]["salary"] == 85000.0

    def test_show(self, runner):
        record_id = records.add_record(85000, label="Globex")

        result = runner.invoke(cli, ["records", "show", record_id])

        assert result.exit_code == 0
        assert f"Record: {record_id}" in result.output
        assert "Label: Globex" in result.output

    def test_show_missing(self, runner):
        result = runner.invoke(cli, ["records", "show", "deadbeef"])

        assert result.exit_code == 1

    def test_remove(self, runner):
        record_id = records.add_record(85000)

        result = runner.invoke(cli, ["records", "remove", record_id])
        assert result.exit_code == 0
        assert records.get_record(record_id) is None

        again = runner.invoke(cli, ["records", "remove", record_id])
        assert again.exit_code == 1

    def test_remove_rejects_path_outside_records(self, runner, isolated_env):
        victim = isolated_env["data_dir"] / "victim.json"
        victim.parent.mkdir(parents=True, exist_ok=True)
        victim.write_text("{}")

        result = runner.invoke(cli, ["records", "remove", "../victim"])

        assert result.exit_code == 1
        assert "Invalid record ID" in result.output
        assert victim.exists()


class TestSettingsCommands:
    """Tests for `tax-calc settings ...`."""

    def test_tax_year_changes_default(self, runner):
        result = runner.invoke(cli, ["settings", "tax-year", "2024"])
        assert result.exit_code == 0

        calc = runner.invoke(cli, ["calc", "50000", "--format", "json"])
        assert json.loads(calc.output)["tax_year"] == "2024"

    def test_tax_year_rejects_unknown(self, runner):
        result = runner.invoke(cli, ["settings", "tax-year", "1999"])

        assert result.exit_code == 2
        assert "No tax rules for '1999'" in result.output

    def test_tax_year_clear(self, runner):
        runner.invoke(cli, ["settings", "tax-year", "2024"])

        result = runner.invoke(cli, ["settings", "tax-year", "--clear"])

        assert "Cleared tax_year" in result.output
        calc = runner.invoke(cli, ["calc", "50000", "--format", "json"])
        assert json.loads(calc.output)["tax_year"] == "2025"

    def test_data_dir(self, runner, tmp_path):
        target = tmp_path / "elsewhere"

        result = runner.invoke(cli, ["settings", "data-dir", str(target)])
        assert result.exit_code == 0

        record_id = records.add_record(1000)
        assert (target / "records" / f"{record_id}.json").exists()

    def test_show(self, runner):
        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 0
        assert "tax_year: 2025" in result.output
