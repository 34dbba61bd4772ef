from __future__ import annotations

import pytest

from algotrace import config as at_config
from algotrace.model import GraphModel

_ENV_KEYS = ("ALGOTRACE_LOG_LEVEL", "ALGOTRACE_SPEED", "ALGOTRACE_SEED")


@pytest.fixture
def runtime_env(monkeypatch: pytest.MonkeyPatch):
    """Clean ALGOTRACE_* environment; the cached RuntimeConfig is rebuilt on both sides."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    at_config.reset_runtime_config_cache()
    yield monkeypatch
    at_config.reset_runtime_config_cache()


@pytest.fixture
def diamond_graph() -> GraphModel:
    """A-B:1, B-C:2, A-C:4, C-D:1 – the worked example used across the suite."""
    return GraphModel.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 4), ("C", "D", 1)])


@pytest.fixture
def split_graph() -> GraphModel:
    """Two components {A, B} and {C, D} plus the isolated node E."""
    return GraphModel.from_edges([("A", "B", 1), ("C", "D", 2)], nodes=["A", "B", "C", "D", "E"])
