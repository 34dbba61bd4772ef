"""
logging.py — Logger Factory
===========================
Every module asks for its logger here instead of calling
`logging.getLogger` directly, so all of them hang off the single
`algotrace` logger that `config.runtime_config()` equips with a handler.

    logger = get_logger("engine.runner")     # → "algotrace.engine.runner"
    logger = get_logger()                    # → "algotrace"

The level comes from ALGOTRACE_LOG_LEVEL and is re-applied on every call,
so a logger fetched after `reset_runtime_config_cache()` picks up the new
setting.
"""

import logging
from typing import Optional

from algotrace.config import runtime_config

ROOT_LOGGER = "algotrace"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        full_name = ROOT_LOGGER
    elif name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        # already qualified, e.g. get_logger(__name__)
        full_name = name
    else:
        full_name = f"{ROOT_LOGGER}.{name}"

    logger = logging.getLogger(full_name)
    logger.setLevel(runtime_config().log_level)
    return logger


__all__ = ["ROOT_LOGGER", "get_logger"]
