# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Clappers package

Command line argument parsing that stays out of the way: declare flags,
single-value and multiple-value arguments by name (``"h|help"`` style
aliases), parse, then read values back by any alias. Everything that is not
claimed by a declared argument ends up in the leftovers.
"""

from ._version import __version__
from .errors import (
    ClappersError,
    ConfigError,
    DuplicateDeclarationError,
    InvalidDeclarationError,
    RegistryFrozenError,
)
from .parser import Clappers
from .registry import ArgumentKind, ArgumentName, Registry
from .scanner import ParseResult, Scanner, scan

__all__ = [
    "__version__",
    "Clappers",
    "ArgumentKind",
    "ArgumentName",
    "Registry",
    "ParseResult",
    "Scanner",
    "scan",
    "ClappersError",
    "ConfigError",
    "DuplicateDeclarationError",
    "InvalidDeclarationError",
    "RegistryFrozenError",
]
