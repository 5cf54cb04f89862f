from __future__ import annotations

import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure the root logger with a single stderr handler.

    Call this once, early, from a console entry point. Earlier root handlers
    are removed so repeated calls do not duplicate output.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    root.addHandler(handler)

    # request-per-line noise from the http stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
