# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Fluent builder and alias-aware getters.

Example::

    clappers = (
        Clappers.build()
        .add_flags(["h|help", "v|verbose"])
        .add_singles(["o|output"])
        .add_multiples(["i|input", "I", "L"])
        .parse()
    )
    if clappers.get_flag("help"):
        ...
    output = clappers.get_single("output")

Values are always strings; converting them is up to the caller.
"""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from .registry import ArgumentKind, Registry
from .scanner import ParseResult, scan

__all__ = ["Clappers"]


class Clappers:
    def __init__(self, registry: Optional[Registry] = None) -> None:
        self._registry = registry if registry is not None else Registry()
        self._result: Optional[ParseResult] = None

    @classmethod
    def build(cls) -> "Clappers":
        return cls()

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def result(self) -> Optional[ParseResult]:
        return self._result

    def add_flags(self, specs: Iterable[str]) -> "Clappers":
        self._registry.register_many(ArgumentKind.FLAG, specs)
        return self

    def add_singles(self, specs: Iterable[str]) -> "Clappers":
        self._registry.register_many(ArgumentKind.SINGLE, specs)
        return self

    def add_multiples(self, specs: Iterable[str]) -> "Clappers":
        self._registry.register_many(ArgumentKind.MULTIPLE, specs)
        return self

    def parse(self, argv: Optional[Sequence[str]] = None) -> "Clappers":
        """Classify ``argv`` (default ``sys.argv[1:]``).

        The registry is frozen first; declaring more names afterwards raises
        :class:`~clappers.errors.RegistryFrozenError`.
        """
        tokens = list(argv) if argv is not None else sys.argv[1:]
        self._registry.freeze()
        self._result = scan(self._registry, tokens)
        return self

    def get_flag(self, name: str) -> bool:
        key = self._registry.canonical(name, ArgumentKind.FLAG)
        if key is None or self._result is None:
            return False
        return self._result.flag(key)

    def get_single(self, name: str) -> str:
        key = self._registry.canonical(name, ArgumentKind.SINGLE)
        if key is None or self._result is None:
            return ""
        return self._result.single(key)

    def get_multiple(self, name: str) -> List[str]:
        key = self._registry.canonical(name, ArgumentKind.MULTIPLE)
        if key is None or self._result is None:
            return []
        return list(self._result.multiple(key))

    def get_leftovers(self) -> List[str]:
        if self._result is None:
            return []
        return list(self._result.leftovers)
