import json
from pathlib import Path

import pytest

from invest_core.domain.models import SimulationParameters
from invest_core.io import config as config_io
from invest_core.services.pipeline import run_simulation
from invest_core.services.recommendation import resolve_recommendation
from invest_core.services.reports import yearly_breakdown
from invest_core.services.simulator import simulate

DATA = Path(__file__).parent / "data"


def test_yearly_breakdown_matches_series():
    result = simulate(SimulationParameters(initial_capital=0, monthly_contribution=120, annual_rate_percent=3, years=3))
    yearly = yearly_breakdown(result)

    assert list(yearly.columns) == ["year", "total", "contributed", "gain"]
    assert list(yearly["year"]) == [1, 2, 3]
    assert list(yearly["contributed"]) == [1440, 2880, 4320]
    assert list(yearly["total"]) == [result.series[m].cumulative_total for m in (12, 24, 36)]
    assert yearly["gain"].iloc[-1] == 205.75


def test_pipeline_from_json_inputs():
    raw = config_io.load_raw_inputs(DATA / "inputs.json")
    outcome = run_simulation(raw)

    assert outcome.errors == {}
    assert outcome.result.parameters == SimulationParameters(
        initial_capital=1000.0,
        monthly_contribution=150.0,
        annual_rate_percent=4.5,
        years=2,
        income_bracket_id="2000-4000",
    )
    assert outcome.result.total_contributed == 1000 + 150 * 24
    assert outcome.result.recommendation.recommended_monthly_amount == 300


def test_pipeline_reports_clamped_fields():
    outcome = run_simulation({"sommeInitiale": -50, "tauxAnnuel": "lots"})

    assert set(outcome.errors) == {"initial_capital", "annual_rate_percent"}
    assert outcome.result.parameters.initial_capital == 0
    assert outcome.result.final_total == outcome.result.total_contributed


def test_custom_bracket_table():
    brackets = config_io.load_bracket_table(DATA / "brackets.json")

    assert [b.id for b in brackets] == ["low", "high"]
    assert resolve_recommendation("high", brackets).recommended_monthly_amount == 1200
    outcome = run_simulation({"income_bracket_id": "low"}, brackets=brackets)
    assert outcome.result.recommendation.recommended_monthly_amount == 150


def test_bracket_table_with_gap_is_rejected(tmp_path: Path):
    path = tmp_path / "brackets.json"
    path.write_text(
        json.dumps(
            [
                {"id": "a", "min": 0, "max": 1000, "rate": 0.1},
                {"id": "b", "min": 1500, "max": 3000, "rate": 0.2},
            ]
        )
    )
    with pytest.raises(ValueError):
        config_io.load_bracket_table(path)


def test_inputs_must_be_an_object(tmp_path: Path):
    path = tmp_path / "inputs.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        config_io.load_raw_inputs(path)
