from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Tuple

from invest_core.domain.brackets import check_bracket_table
from invest_core.domain.models import IncomeBracket


def load_raw_inputs(path: str | Path) -> Dict[str, Any]:
    """Raw simulation inputs; values are validated later, not here."""
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object of inputs in {path}")
    return data


def load_bracket_table(path: str | Path) -> Tuple[IncomeBracket, ...]:
    data = _read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of brackets in {path}")
    brackets = tuple(
        IncomeBracket(
            id=str(item["id"]),
            label=str(item.get("label", item["id"])),
            min_income=float(item["min"]),
            max_income=float(item["max"]),
            recommended_savings_rate=float(item["rate"]),
        )
        for item in data
    )
    check_bracket_table(brackets)
    return brackets


def _read_json(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
