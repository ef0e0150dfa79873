import json
from pathlib import Path

from typer.testing import CliRunner

from invest_core.cli import app


runner = CliRunner()
DATA = Path(__file__).parent / "data"


def test_cli_simulate_writes_payload(tmp_path: Path):
    out_path = tmp_path / "result.json"
    csv_path = tmp_path / "series.csv"

    result = runner.invoke(
        app,
        [
            "simulate",
            "--initial-capital",
            "0",
            "--monthly-contribution",
            "120",
            "--annual-rate",
            "3",
            "--years",
            "3",
            "--bracket",
            "moins-2000",
            "--csv",
            str(csv_path),
            "--out",
            str(out_path),
        ],
    )
    assert result.exit_code == 0, result.output
    assert out_path.exists()

    payload = json.loads(out_path.read_text())
    assert payload["final_total"] == 4525.75
    assert payload["total_contributed"] == 4320
    assert payload["total_gain"] == 205.75
    assert len(payload["series"]) == 37
    assert payload["recommendation"]["recommended_monthly_amount"] == 50
    assert payload["validation"] == {}
    assert payload["diagnostics"] == []

    lines = csv_path.read_text().strip().splitlines()
    assert lines[0] == "month,total,contributed"
    assert len(lines) == 38


def test_cli_simulate_clamps_and_reports(tmp_path: Path):
    out_path = tmp_path / "result.json"
    result = runner.invoke(
        app,
        ["simulate", "--annual-rate", "150", "--years", "0", "--out", str(out_path)],
    )
    assert result.exit_code == 0, result.output
    assert "Annual rate must be between 0 and 100" in result.output

    payload = json.loads(out_path.read_text())
    assert payload["parameters"]["annual_rate_percent"] == 100
    assert payload["parameters"]["years"] == 1
    assert set(payload["validation"]) == {"annual_rate_percent", "years"}
    assert len(payload["series"]) == 13


def test_cli_options_override_inputs_file(tmp_path: Path):
    out_path = tmp_path / "result.json"
    result = runner.invoke(
        app,
        ["simulate", "--inputs", str(DATA / "inputs.json"), "--years", "5", "--out", str(out_path)],
    )
    assert result.exit_code == 0, result.output

    payload = json.loads(out_path.read_text())
    assert payload["parameters"]["initial_capital"] == 1000
    assert payload["parameters"]["annual_rate_percent"] == 4.5
    assert payload["parameters"]["years"] == 5


def test_cli_simulate_yearly_table():
    result = runner.invoke(app, ["simulate", "--years", "2", "--yearly"])
    assert result.exit_code == 0, result.output
    assert "Yearly breakdown" in result.output


def test_cli_missing_inputs_file_is_bad_parameter(tmp_path: Path):
    result = runner.invoke(app, ["simulate", "--inputs", str(tmp_path / "missing.json")])
    assert result.exit_code != 0


def test_cli_recommend_and_unknown_bracket():
    result = runner.invoke(app, ["recommend", "--bracket", "4000-6000"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["recommended_monthly_amount"] == 750
    assert payload["percentage_of_income"] == 15

    unknown = runner.invoke(app, ["recommend", "--bracket", "unknown"])
    assert unknown.exit_code == 0
    assert "Income bracket not found: unknown" in unknown.output


def test_cli_brackets_table():
    result = runner.invoke(app, ["brackets"])
    assert result.exit_code == 0, result.output
    assert "Income brackets" in result.output


def test_cli_interactive_flow():
    result = runner.invoke(app, ["interactive"], input="2\n1000\n100\n5\n10\n")
    assert result.exit_code == 0, result.output
    assert "Final amount" in result.output
    assert "200 €/month" in result.output


def test_cli_ignores_unknown_keys_in_inputs_file(tmp_path: Path):
    inputs_path = tmp_path / "inputs.json"
    inputs_path.write_text(json.dumps({"sommeInitiale": 10, "note": "x"}))
    out_path = tmp_path / "result.json"

    result = runner.invoke(app, ["simulate", "--inputs", str(inputs_path), "--out", str(out_path)])
    assert result.exit_code == 0, result.output
    assert "Ignoring unknown input" in result.output
    assert "note" in result.output

    payload = json.loads(out_path.read_text())
    assert payload["parameters"]["initial_capital"] == 10
    assert payload["validation"] == {}
