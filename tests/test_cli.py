"""Tests for CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from takehome.cli.main import cli

GOLDEN = Path(__file__).parent / "golden"

_FEDERAL_2030 = """
standard_deduction:
  single: 20000
ordinary_brackets:
  single:
    - [10000, 0.10]
    - [null, 0.20]
payroll:
  base_rate: 0.062
  wage_base: 200000
  supplemental_rate: 0.0145
  surtax_rate: 0.009
"""


def _write_tables(directory: Path, jurisdictions: str) -> Path:
    (directory / "us_federal_2030.yaml").write_text(_FEDERAL_2030)
    (directory / "jurisdictions_2030.yaml").write_text(jurisdictions)
    return directory


class TestCalculate:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.4.0" in result.output

    def test_defaults_to_zero_income(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate"])
        assert result.exit_code == 0
        assert "Take-home pay: $0.00" in result.output

    def test_options(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", "--gross", "100000", "--state", "tx"])
        assert result.exit_code == 0
        assert "Single filer in Texas" in result.output
        assert "Federal tax:        $13,841.00  (marginal 22.00%)" in result.output
        assert "Take-home pay: $78,509.00 (78.51% of gross)" in result.output

    def test_disability_line_for_california(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", "--gross", "100000", "--state", "CA"])
        assert result.exit_code == 0
        assert "disability:       $1,100.00" in result.output
        assert "$71,954.91" in result.output

    def test_config_file_with_override(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["calculate", "--config", str(GOLDEN / "california_single.json"), "--state", "TX"],
        )
        assert result.exit_code == 0
        assert "$78,509.00" in result.output

    def test_output_file(self, tmp_path: Path) -> None:
        output_file = tmp_path / "result.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["calculate", "--gross", "100000", "--state", "TX", "--output", str(output_file)],
        )
        assert result.exit_code == 0
        assert output_file.exists()
        data = json.loads(output_file.read_text())
        assert data["net_income"] == "78509.00"
        assert data["jurisdiction"] == "TX"

    def test_unknown_state(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", "--gross", "1000", "--state", "ZZ"])
        assert result.exit_code == 2
        assert "unknown jurisdiction" in result.output

    def test_bad_amount(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", "--gross", "lots"])
        assert result.exit_code == 2
        assert "Invalid decimal" in result.output

    def test_bad_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.json"
        config.write_text('{"gross_income": "1", "salary": "2"}')
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", "--config", str(config)])
        assert result.exit_code == 1
        assert "salary" in result.output

    def test_missing_tax_year(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", "--gross", "1000", "--year", "2001"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCompare:
    def test_relocation(self, tmp_path: Path) -> None:
        output_file = tmp_path / "comparison.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "compare",
                str(GOLDEN / "california_single.json"),
                str(GOLDEN / "texas_single.json"),
                "--output",
                str(output_file),
            ],
        )
        assert result.exit_code == 0
        assert "Difference:   +$6,554.09 per year, +$546.17 per month" in result.output
        data = json.loads(output_file.read_text())
        assert data["comparison"]["net_difference"] == "6554.09"

    def test_reverse_has_no_plus_sign(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["compare", str(GOLDEN / "texas_single.json"), str(GOLDEN / "california_single.json")],
        )
        assert result.exit_code == 0
        assert "Difference:   $-6,554.09 per year" in result.output


class TestUtilities:
    def test_timeframes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["timeframes", "104000"])
        assert result.exit_code == 0
        assert "Bi-weekly:    $4,000.00" in result.output
        assert "Hourly:       $50.00" in result.output

    def test_timeframes_custom_week(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["timeframes", "104000", "--hours-per-week", "50", "--days-per-week", "4"]
        )
        assert result.exit_code == 0
        assert "Daily:        $500.00" in result.output
        assert "Hourly:       $40.00" in result.output

    def test_split(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["split", "8000", "2000", "1000"])
        assert result.exit_code == 0
        assert "Primary: $800.00 (80.00%)" in result.output
        assert "Partner: $200.00 (20.00%)" in result.output

    def test_split_custom(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["split", "1", "1", "1000", "--method", "custom:0.6"])
        assert result.exit_code == 0
        assert "Primary: $600.00 (60.00%)" in result.output

    def test_split_bad_method(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["split", "1", "1", "1000", "--method", "halves"])
        assert result.exit_code == 2
        assert "Invalid split method" in result.output

    def test_jurisdictions(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["jurisdictions"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 51
        texas = next(line for line in lines if line.startswith("TX"))
        assert "no income tax" in texas
        california = next(line for line in lines if line.startswith("CA"))
        assert "SDI" in california

    def test_rank(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["rank", "--gross", "100000", "--top", "3", "--workers", "1"]
        )
        assert result.exit_code == 0
        assert "Home: California, net $71,954.91" in result.output
        assert "  1. AK" in result.output
        assert "(+$6,554.09)" in result.output

    def test_rank_unknown_state(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["rank", "--gross", "100000", "--state", "ZZ"])
        assert result.exit_code == 1
        assert "Invalid jurisdiction" in result.output


class TestCustomTables:
    def test_compare_uses_tables_dir(self, tmp_path: Path) -> None:
        tables = _write_tables(tmp_path, "jurisdictions:\n  CA: {tax_type: flat, rate: 0.05}\n")
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "compare",
                str(GOLDEN / "california_single.json"),
                str(GOLDEN / "texas_single.json"),
                "--year",
                "2030",
                "--tables-dir",
                str(tables),
            ],
        )
        assert result.exit_code == 0
        assert "Base net:     $72,350.00" in result.output
        assert "Difference:   +$5,000.00 per year, +$416.67 per month" in result.output

    def test_rank_uses_tables_dir(self, tmp_path: Path) -> None:
        tables = _write_tables(tmp_path, "jurisdictions:\n  CA: {tax_type: flat, rate: 0.05}\n")
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "rank",
                "--gross",
                "100000",
                "--top",
                "3",
                "--year",
                "2030",
                "--tables-dir",
                str(tables),
                "--workers",
                "1",
            ],
        )
        assert result.exit_code == 0
        assert "Home: California, net $72,350.00" in result.output
        assert "(+$5,000.00)" in result.output

    def test_rank_reports_bad_tables(self, tmp_path: Path) -> None:
        tables = _write_tables(tmp_path, "jurisdictions:\n  AK: none\n")
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["rank", "--gross", "100000", "--year", "2030", "--tables-dir", str(tables)],
        )
        assert result.exit_code == 1
        assert "AK" in result.output
