"""
errors.py — Exception Types
============================
Every error the engines raise on purpose derives from AlgotraceError so
collaborators can catch the whole family in one place.

    NotFoundError       – start node / edge endpoint is not in the graph
    RunInProgressError  – a model or RunHandle is already busy with a run
"""


class AlgotraceError(Exception):
    """Base class for engine errors."""


class NotFoundError(AlgotraceError, KeyError):
    """A node id the caller referenced does not exist in the graph."""

    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' is not in the graph")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class RunInProgressError(AlgotraceError, RuntimeError):
    """A second run was requested while one is still active."""


__all__ = ["AlgotraceError", "NotFoundError", "RunInProgressError"]
