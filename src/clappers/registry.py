# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Declared argument names and alias resolution.

A declaration string such as ``"h|help"`` declares one argument with two
spellings. The first spelling is the canonical key; every spelling resolves to
it. Spellings are stored bare (without dashes) and are unique across all kinds.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import duplicate_declaration, invalid_declaration, registry_frozen
from .logging import get_logger

log = get_logger("registry")

ALIAS_SEPARATOR = "|"
LEFTOVER_MARKER = "--"

__all__ = [
    "ArgumentKind",
    "ArgumentName",
    "Registry",
    "parse_declaration",
    "ALIAS_SEPARATOR",
    "LEFTOVER_MARKER",
]


class ArgumentKind(enum.Enum):
    FLAG = "flag"
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True, slots=True)
class ArgumentName:
    key: str
    kind: ArgumentKind
    spellings: Tuple[str, ...]
    declaration: str

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self.spellings[1:]


def parse_declaration(kind: ArgumentKind, declaration: str) -> ArgumentName:
    """Split a ``short|long`` declaration into an :class:`ArgumentName`.

    Empty pieces are ignored and repeated spellings collapse, so ``"h|"``
    declares just ``h``. Spellings may not start with a dash or contain
    whitespace since they could never be matched on the command line.
    """
    if not isinstance(declaration, str):
        raise invalid_declaration(repr(declaration), "expected a string")
    spellings: List[str] = []
    for piece in declaration.split(ALIAS_SEPARATOR):
        if not piece:
            continue
        if piece.startswith("-"):
            raise invalid_declaration(
                declaration, f"'{piece}' must be declared without dashes"
            )
        if any(ch.isspace() for ch in piece):
            raise invalid_declaration(
                declaration, f"'{piece}' contains whitespace"
            )
        if piece not in spellings:
            spellings.append(piece)
    if not spellings:
        raise invalid_declaration(declaration, "no name given")
    return ArgumentName(
        key=spellings[0],
        kind=kind,
        spellings=tuple(spellings),
        declaration=declaration,
    )


class Registry:
    """Map every declared spelling to its canonical :class:`ArgumentName`."""

    def __init__(self) -> None:
        self._names: Dict[str, ArgumentName] = {}
        self._spellings: Dict[str, ArgumentName] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Registry":
        self._frozen = True
        return self

    def register(self, kind: ArgumentKind, declaration: str) -> ArgumentName:
        return self.register_many(kind, [declaration])[0]

    def register_many(
        self, kind: ArgumentKind, declarations: Iterable[str]
    ) -> List[ArgumentName]:
        """Register a batch of declarations of one kind.

        The batch is checked as a whole before anything is stored, so a
        collision anywhere in it leaves the registry exactly as it was.
        """
        declarations = list(declarations)
        if self._frozen:
            raise registry_frozen(", ".join(map(str, declarations)))

        staged: Dict[str, ArgumentName] = {}
        names: List[ArgumentName] = []
        for declaration in declarations:
            name = parse_declaration(kind, declaration)
            for spelling in name.spellings:
                existing = self._spellings.get(spelling) or staged.get(spelling)
                if existing is not None:
                    raise duplicate_declaration(
                        spelling,
                        existing.key,
                        existing.kind.value,
                        declaration,
                    )
                staged[spelling] = name
            names.append(name)

        self._spellings.update(staged)
        for name in names:
            self._names[name.key] = name
            log.debug(
                "Registered %s '%s' (spellings: %s)",
                name.kind.value,
                name.key,
                ", ".join(name.spellings),
            )
        return names

    def lookup(self, token: str) -> Optional[ArgumentName]:
        """Resolve a command-line token to a declared name.

        Only tokens with one or two leading dashes can be names; either dash
        count is accepted for every spelling. Anything else, including a bare
        word equal to a declared spelling, returns ``None``.
        """
        if not token.startswith("-"):
            return None
        stripped = token[1:]
        if stripped.startswith("-"):
            stripped = stripped[1:]
        if not stripped:
            return None
        return self._spellings.get(stripped)

    def canonical(
        self, name: str, kind: Optional[ArgumentKind] = None
    ) -> Optional[str]:
        """Return the canonical key for a bare spelling, or ``None``."""
        entry = self._spellings.get(name)
        if entry is None or (kind is not None and entry.kind is not kind):
            return None
        return entry.key

    def get(self, key: str) -> Optional[ArgumentName]:
        return self._names.get(key)

    def names(self, kind: Optional[ArgumentKind] = None) -> List[ArgumentName]:
        return [
            n for n in self._names.values() if kind is None or n.kind is kind
        ]

    def keys(self, kind: ArgumentKind) -> List[str]:
        return [n.key for n in self.names(kind)]

    def __contains__(self, spelling: object) -> bool:
        return spelling in self._spellings

    def __len__(self) -> int:
        return len(self._names)
