"""
trace.py — Step Trace & Run Handle
===================================
The StepTrace is the ONLY thing that advances an algorithm generator.
It pulls one StepEvent at a time, hands it to the subscriber, waits out
the pacing delay, and checks the RunHandle before pulling the next one.
Every `yield` in an algorithm is therefore a suspension point.

State machine of a RunHandle:
    IDLE     →  begin()   →  RUNNING
    RUNNING  →  (generator exhausted)  →  COMPLETED
    RUNNING  →  (cancel observed)      →  ABORTED

Cancellation is cooperative: cancel() only raises a flag.  The trace
notices it at the next suspension point, closes the generator (so no
further mutation or event can happen) and reports ABORTED.

Thread safety:
  A run executes on the caller's thread.  cancel() may be called from
  any thread or from inside the subscriber callback; it is a single
  boolean write.
"""

import time
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Generator, Iterator, Optional, Tuple

from algotrace.algorithms.step import StepEvent
from algotrace.config import resolve_delay
from algotrace.errors import RunInProgressError
from algotrace.logging import get_logger

logger = get_logger("engine.trace")


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunStatus(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    COMPLETED = "completed"
    ABORTED   = "aborted"


# ---------------------------------------------------------------------------
# RunHandle — owned by the caller, one per invocation
# ---------------------------------------------------------------------------
class RunHandle:
    """
    Attributes:
        status : Current RunStatus.
    """

    def __init__(self):
        self._cancelled: bool = False
        self.status: RunStatus = RunStatus.IDLE

    def cancel(self) -> None:
        """Request cancellation; honoured at the next suspension point."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def in_progress(self) -> bool:
        return self.status == RunStatus.RUNNING

    def begin(self) -> None:
        if self.in_progress:
            raise RunInProgressError("This RunHandle is already driving a run.")
        self.status = RunStatus.RUNNING

    def finish(self, status: RunStatus) -> None:
        self.status = status

    def __repr__(self) -> str:
        return f"RunHandle(status={self.status.value}, cancelled={self._cancelled})"


@contextmanager
def exclusive_run(model: Any, handle: RunHandle) -> Iterator[RunHandle]:
    """
    Park `handle` on `model` for the duration of the block.

    Raises RunInProgressError – before touching anything – if the model
    already has an active run or the handle is already running.
    """
    if handle.in_progress:
        raise RunInProgressError("This RunHandle is already driving a run.")
    model.claim(handle)
    try:
        handle.begin()
        yield handle
    finally:
        if handle.in_progress:
            # exception escaped the run
            handle.finish(RunStatus.ABORTED)
        model.release(handle)


# ---------------------------------------------------------------------------
# StepTrace
# ---------------------------------------------------------------------------
class StepTrace:
    """
    Attributes:
        on_event    : Callback(StepEvent) – receives every event, in order.
        handle      : RunHandle carrying the cancellation flag.
        delay       : Seconds slept after each delivered event.
        emitted     : Number of events delivered so far.
    """

    def __init__(
        self,
        on_event: Optional[Callable[[StepEvent], None]] = None,
        handle: Optional[RunHandle] = None,
        delay: Any = 0.0,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.on_event = on_event
        self.handle   = handle if handle is not None else RunHandle()
        self.delay    = resolve_delay(delay)
        self.emitted  = 0
        self._sleep   = sleep if sleep is not None else time.sleep

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------
    def emit(self, event: StepEvent) -> None:
        """Deliver synchronously, then pace."""
        self.emitted += 1
        if self.on_event is not None:
            self.on_event(event)
        if self.delay > 0:
            self._sleep(self.delay)

    def should_cancel(self) -> bool:
        return self.handle.cancelled

    # ------------------------------------------------------------------
    # Driving a generator
    # ------------------------------------------------------------------
    def drive(self, generator: Generator[StepEvent, None, Any]) -> Tuple[RunStatus, Any]:
        """
        Run `generator` to completion or cancellation.

        Returns (COMPLETED, generator return value) or (ABORTED, None).
        """
        if self.should_cancel():
            generator.close()
            return RunStatus.ABORTED, None

        while True:
            try:
                event = next(generator)
            except StopIteration as stop:
                return RunStatus.COMPLETED, stop.value

            self.emit(event)

            if self.should_cancel():
                generator.close()
                logger.debug("Cancellation observed after %d events (last: %r)", self.emitted, event)
                return RunStatus.ABORTED, None
