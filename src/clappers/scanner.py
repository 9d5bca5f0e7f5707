# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Single-pass classification of command-line tokens.

The scanner walks the tokens once, left to right. Each token is either the
``--`` boundary, a declared name, a value for the single or multiple argument
currently being filled, or a leftover. Unknown dash-prefixed tokens are not
errors: they are treated like any other value token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from .logging import get_logger
from .registry import LEFTOVER_MARKER, ArgumentKind, Registry

log = get_logger("scanner")

__all__ = [
    "Idle",
    "AwaitingSingle",
    "AccumulatingMultiple",
    "ScanState",
    "ParseResult",
    "Scanner",
    "scan",
]


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class AwaitingSingle:
    key: str


@dataclass(frozen=True, slots=True)
class AccumulatingMultiple:
    key: str


ScanState = Union[Idle, AwaitingSingle, AccumulatingMultiple]

IDLE = Idle()


def _empty_mapping() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one scan, keyed by canonical names only."""

    flags: Mapping[str, bool] = field(default_factory=_empty_mapping)
    singles: Mapping[str, str] = field(default_factory=_empty_mapping)
    multiples: Mapping[str, Tuple[str, ...]] = field(
        default_factory=_empty_mapping
    )
    leftovers: Tuple[str, ...] = ()

    def flag(self, key: str) -> bool:
        return self.flags.get(key, False)

    def single(self, key: str) -> str:
        return self.singles.get(key, "")

    def multiple(self, key: str) -> Tuple[str, ...]:
        return self.multiples.get(key, ())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "flags": dict(self.flags),
            "singles": dict(self.singles),
            "multiples": {k: list(v) for k, v in self.multiples.items()},
            "leftovers": list(self.leftovers),
        }


class Scanner:
    """Classify one token list against a registry.

    A scanner holds the transient state of a single pass; :meth:`scan` resets
    it, so an instance can be reused but not shared between threads.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry
        self._reset()

    def _reset(self) -> None:
        self._state: ScanState = IDLE
        self._leftover_mode = False
        self._flags: Dict[str, bool] = {
            k: False for k in self._registry.keys(ArgumentKind.FLAG)
        }
        self._singles: Dict[str, str] = {
            k: "" for k in self._registry.keys(ArgumentKind.SINGLE)
        }
        self._multiples: Dict[str, List[str]] = {
            k: [] for k in self._registry.keys(ArgumentKind.MULTIPLE)
        }
        self._leftovers: List[str] = []

    @property
    def state(self) -> ScanState:
        return self._state

    def scan(self, tokens: Iterable[str]) -> ParseResult:
        self._reset()
        count = 0
        for token in tokens:
            self.feed(token)
            count += 1
        result = self._finish()
        log.debug(
            "Scanned %d token(s): %d flag(s) set, %d leftover(s)",
            count,
            sum(result.flags.values()),
            len(result.leftovers),
        )
        return result

    def feed(self, token: str) -> None:
        if self._leftover_mode:
            self._leftovers.append(token)
            return
        if token == LEFTOVER_MARKER:
            self._leftover_mode = True
            self._state = IDLE
            return

        name = self._registry.lookup(token)
        if name is None:
            self._take_value(token)
        elif name.kind is ArgumentKind.FLAG:
            self._flags[name.key] = True
            self._state = IDLE
        elif name.kind is ArgumentKind.SINGLE:
            # Last occurrence wins, even when it ends up without a value.
            self._singles[name.key] = ""
            self._state = AwaitingSingle(name.key)
        else:
            self._multiples.setdefault(name.key, [])
            self._state = AccumulatingMultiple(name.key)

    def _take_value(self, token: str) -> None:
        state = self._state
        if isinstance(state, AwaitingSingle):
            self._singles[state.key] = token
            self._state = IDLE
        elif isinstance(state, AccumulatingMultiple):
            self._multiples[state.key].append(token)
        else:
            self._leftovers.append(token)

    def _finish(self) -> ParseResult:
        return ParseResult(
            flags=MappingProxyType(dict(self._flags)),
            singles=MappingProxyType(dict(self._singles)),
            multiples=MappingProxyType(
                {k: tuple(v) for k, v in self._multiples.items()}
            ),
            leftovers=tuple(self._leftovers),
        )


def scan(registry: Registry, tokens: Iterable[str]) -> ParseResult:
    return Scanner(registry).scan(tokens)
