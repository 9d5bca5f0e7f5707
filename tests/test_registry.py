# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Tests for declaration parsing and alias resolution."""

import pytest

from clappers.errors import (
    E_DUP_DECLARATION,
    DuplicateDeclarationError,
    InvalidDeclarationError,
    RegistryFrozenError,
)
from clappers.registry import ArgumentKind, Registry, parse_declaration


def test_declaration_short_and_long():
    name = parse_declaration(ArgumentKind.FLAG, "h|help")
    assert name.key == "h"
    assert name.spellings == ("h", "help")
    assert name.aliases == ("help",)


def test_declaration_long_only_is_canonical():
    name = parse_declaration(ArgumentKind.SINGLE, "output")
    assert name.key == "output"
    assert name.aliases == ()


def test_declaration_ignores_empty_pieces_and_repeats():
    assert parse_declaration(ArgumentKind.FLAG, "h|").spellings == ("h",)
    assert parse_declaration(ArgumentKind.FLAG, "|help").key == "help"
    assert parse_declaration(ArgumentKind.FLAG, "h|h|help").spellings == (
        "h",
        "help",
    )


@pytest.mark.parametrize(
    "bad", ["", "|", "-h", "h|--help", "my name", "h | help", " help"]
)
def test_declaration_rejects_unusable_names(bad):
    with pytest.raises(InvalidDeclarationError):
        parse_declaration(ArgumentKind.FLAG, bad)


def test_lookup_accepts_one_or_two_dashes_for_any_spelling():
    reg = Registry()
    reg.register(ArgumentKind.FLAG, "h|help")
    for token in ("-h", "--h", "-help", "--help"):
        entry = reg.lookup(token)
        assert entry is not None
        assert entry.key == "h"
        assert entry.kind is ArgumentKind.FLAG


def test_lookup_never_matches_bare_or_over_dashed_tokens():
    reg = Registry()
    reg.register(ArgumentKind.FLAG, "h|help")
    assert reg.lookup("h") is None
    assert reg.lookup("help") is None
    assert reg.lookup("---help") is None
    assert reg.lookup("-") is None
    assert reg.lookup("--") is None
    assert reg.lookup("-x") is None


def test_duplicate_across_kinds_fails_and_keeps_existing_entries():
    reg = Registry()
    reg.register(ArgumentKind.FLAG, "h|help")
    with pytest.raises(DuplicateDeclarationError) as info:
        reg.register(ArgumentKind.SINGLE, "x|help")
    assert info.value.code == E_DUP_DECLARATION
    assert info.value.context["existing_key"] == "h"
    assert reg.lookup("-h").kind is ArgumentKind.FLAG
    assert reg.lookup("--help").key == "h"
    # The failed declaration left nothing behind.
    assert reg.lookup("-x") is None
    assert len(reg) == 1


def test_batch_registration_is_all_or_nothing():
    reg = Registry()
    reg.register(ArgumentKind.FLAG, "v")
    with pytest.raises(DuplicateDeclarationError):
        reg.register_many(ArgumentKind.MULTIPLE, ["i|input", "I", "v"])
    assert "i" not in reg
    assert "I" not in reg
    assert reg.keys(ArgumentKind.MULTIPLE) == []


def test_duplicate_within_one_batch():
    reg = Registry()
    with pytest.raises(DuplicateDeclarationError):
        reg.register_many(ArgumentKind.FLAG, ["o|out", "out"])
    assert len(reg) == 0


def test_canonical_resolves_aliases_by_kind():
    reg = Registry()
    reg.register_many(ArgumentKind.FLAG, ["R|recursive"])
    reg.register_many(ArgumentKind.SINGLE, ["o|output"])
    assert reg.canonical("recursive") == "R"
    assert reg.canonical("R", ArgumentKind.FLAG) == "R"
    assert reg.canonical("output", ArgumentKind.FLAG) is None
    assert reg.canonical("missing") is None


def test_keys_keep_declaration_order():
    reg = Registry()
    reg.register_many(ArgumentKind.MULTIPLE, ["i|input", "I", "L"])
    assert reg.keys(ArgumentKind.MULTIPLE) == ["i", "I", "L"]


def test_frozen_registry_rejects_new_declarations():
    reg = Registry()
    reg.register(ArgumentKind.FLAG, "v")
    reg.freeze()
    assert reg.frozen
    with pytest.raises(RegistryFrozenError):
        reg.register(ArgumentKind.FLAG, "q")
    assert reg.lookup("-v") is not None
