"""
base.py — Run Ownership for Models
==================================
A model (array or graph) may be driven by at most ONE run at a time.
The run's handle is parked on the model for the duration of the run;
anybody else who tries to start a run, or to change the topology, while
it is parked gets a RunInProgressError.
"""

from typing import Any, Optional

from algotrace.errors import RunInProgressError


class RunGuardedModel:
    """Mixin holding the `active_run` slot shared by ArrayModel / GraphModel."""

    def __init__(self):
        self.active_run: Optional[Any] = None

    @property
    def is_busy(self) -> bool:
        return self.active_run is not None

    def claim(self, handle: Any) -> None:
        if self.active_run is not None:
            raise RunInProgressError(
                f"{type(self).__name__} already has an active run; wait for it or cancel it first."
            )
        self.active_run = handle

    def release(self, handle: Any) -> None:
        if self.active_run is handle:
            self.active_run = None

    def _ensure_idle(self) -> None:
        if self.active_run is not None:
            raise RunInProgressError(f"{type(self).__name__} cannot be modified during a run.")
