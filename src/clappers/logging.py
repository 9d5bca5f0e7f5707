# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Logging utilities for Clappers.

The library only logs through the ``clappers`` logger namespace and never
installs handlers on its own; :func:`configure_logging` is for applications
(and the bundled CLI) that want rich-formatted output on stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "clappers"

__all__ = [
    "get_logger",
    "configure_logging",
]


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(
    verbosity: int = 0, *, use_color: Optional[bool] = None
) -> logging.Logger:
    """Attach a single rich handler to the ``clappers`` logger.

    ``verbosity`` 0 shows warnings and errors, 1 adds info, 2 or more adds
    debug traces of registration and scanning.
    """
    logger = get_logger()
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    if use_color is None:
        use_color = sys.stderr.isatty()

    console = Console(stderr=True, no_color=not use_color)
    handler = RichHandler(console=console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
