# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Declarations file loading (JSON/YAML).

A declarations file lists the argument names of each kind::

    flags: ["h|help", "v|verbose"]
    singles: ["o|output"]
    multiples: ["i|input", "I"]

All three keys are optional.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import config_error
from .parser import Clappers

_SECTIONS = ("flags", "singles", "multiples")

__all__ = ["Declarations", "load_declarations", "parse_declarations"]


@dataclass
class Declarations:
    flags: List[str] = field(default_factory=list)
    singles: List[str] = field(default_factory=list)
    multiples: List[str] = field(default_factory=list)

    def extend(self, other: "Declarations") -> "Declarations":
        return Declarations(
            flags=self.flags + other.flags,
            singles=self.singles + other.singles,
            multiples=self.multiples + other.multiples,
        )

    def apply(self, clappers: Clappers) -> Clappers:
        return (
            clappers.add_flags(self.flags)
            .add_singles(self.singles)
            .add_multiples(self.multiples)
        )


def load_declarations(path: str | Path) -> Declarations:
    p = Path(path)
    if not p.exists():
        raise config_error(f"declarations file not found: {p}", {"path": str(p)})
    text = p.read_text(encoding="utf-8")
    try:
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise config_error(
            f"cannot parse declarations file {p}: {exc}", {"path": str(p)}
        ) from exc
    if data is None:
        data = {}
    return parse_declarations(data, source=str(p))


def parse_declarations(data: Any, *, source: str = "<memory>") -> Declarations:
    if not isinstance(data, dict):
        raise config_error(
            "root of declarations must be a mapping", {"source": source}
        )
    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        raise config_error(
            f"unknown declaration section(s): {', '.join(map(str, unknown))}",
            {"source": source},
        )
    sections: Dict[str, List[str]] = {}
    for name in _SECTIONS:
        entries = data.get(name) or []
        if not isinstance(entries, list) or not all(
            isinstance(e, str) for e in entries
        ):
            raise config_error(
                f"'{name}' must be a list of declaration strings",
                {"source": source, "section": name},
            )
        sections[name] = list(entries)
    return Declarations(**sections)
