from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "customer-api"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach one stream handler to the root logger.

    Safe to call more than once (tests build several apps); the handler is
    only added the first time, later calls just adjust the level.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
