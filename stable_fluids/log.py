"""Logging setup for the solver.

Quiet by default. Call ``enable(True)`` (or set STABLE_FLUIDS_DEBUG=1) to get
timestamped debug output from every module under the ``stable_fluids`` logger.
"""

import logging
import os

ROOT = "stable_fluids"
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def enable(flag=True, level=logging.DEBUG):
    lg = logging.getLogger(ROOT)
    if flag:
        if not any(isinstance(h, logging.StreamHandler) for h in lg.handlers):
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))
            lg.addHandler(h)
        lg.setLevel(level)
    else:
        lg.setLevel(logging.WARNING)


if os.getenv("STABLE_FLUIDS_DEBUG", "0") not in ("", "0"):
    enable(True)
