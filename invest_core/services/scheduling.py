from __future__ import annotations

import time
from typing import Callable, Optional

from invest_core.domain.models import SimulationParameters, SimulationResult
from invest_core.services.simulator import simulate


class SettlingScheduler:
    """
    Runs a simulation only once input has settled for ``delay`` seconds.

    Every ``submit`` replaces the pending request and restarts the window, so a
    burst of rapid changes leads to a single run with the last parameters.
    Superseded requests are never started. Nothing runs in the background:
    the owner calls ``poll`` from its own loop.
    """

    def __init__(
        self,
        delay: float = 0.3,
        clock: Callable[[], float] = time.monotonic,
        runner: Callable[[SimulationParameters], SimulationResult] = simulate,
    ):
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self._clock = clock
        self._runner = runner
        self._pending: Optional[SimulationParameters] = None
        self._deadline = 0.0
        self.last_result: Optional[SimulationResult] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def submit(self, params: SimulationParameters) -> None:
        self._pending = params
        self._deadline = self._clock() + self.delay

    def cancel(self) -> None:
        self._pending = None

    def poll(self) -> Optional[SimulationResult]:
        if self._pending is None or self._clock() < self._deadline:
            return None
        return self.flush()

    def flush(self) -> Optional[SimulationResult]:
        if self._pending is None:
            return None
        params, self._pending = self._pending, None
        self.last_result = self._runner(params)
        return self.last_result
