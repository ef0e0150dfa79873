from invest_core.services.pipeline import run_simulation  # noqa: F401
from invest_core.services.recommendation import resolve_recommendation  # noqa: F401
from invest_core.services.reports import yearly_breakdown  # noqa: F401
from invest_core.services.scheduling import SettlingScheduler  # noqa: F401
from invest_core.services.simulator import simulate  # noqa: F401
from invest_core.services.validation import validate_field, validate_inputs  # noqa: F401

__all__ = [
    "resolve_recommendation",
    "simulate",
    "validate_field",
    "validate_inputs",
    "run_simulation",
    "SettlingScheduler",
    "yearly_breakdown",
]
