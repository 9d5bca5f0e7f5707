# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Tests for loading declarations from YAML and JSON files."""

import json

import pytest
import yaml

from clappers import Clappers
from clappers.config import Declarations, load_declarations, parse_declarations
from clappers.errors import E_CONFIG, ConfigError


def write_yaml(path, content):
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(content, f)


def test_load_yaml(tmp_path):
    path = tmp_path / "args.yaml"
    write_yaml(
        path,
        {
            "flags": ["h|help", "v"],
            "singles": ["o|output"],
            "multiples": ["i|input"],
        },
    )
    decl = load_declarations(path)
    assert decl.flags == ["h|help", "v"]
    assert decl.singles == ["o|output"]
    assert decl.multiples == ["i|input"]


def test_load_json_with_missing_sections(tmp_path):
    path = tmp_path / "args.json"
    path.write_text(json.dumps({"flags": ["l"]}), encoding="utf-8")
    decl = load_declarations(path)
    assert decl == Declarations(flags=["l"])


def test_empty_yaml_gives_no_declarations(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_declarations(path) == Declarations()


def test_apply_registers_every_kind():
    decl = Declarations(flags=["v"], singles=["o|output"], multiples=["i"])
    clappers = decl.apply(Clappers.build()).parse(["-v", "--output", "x", "-i", "a"])
    assert clappers.get_flag("v")
    assert clappers.get_single("o") == "x"
    assert clappers.get_multiple("i") == ["a"]


def test_extend_appends_in_order():
    merged = Declarations(flags=["a"]).extend(Declarations(flags=["b"], singles=["s"]))
    assert merged.flags == ["a", "b"]
    assert merged.singles == ["s"]


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError) as info:
        load_declarations(tmp_path / "nope.yaml")
    assert info.value.code == E_CONFIG


def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("flags: [h|help\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_declarations(path)


@pytest.mark.parametrize(
    "data",
    [
        ["h|help"],
        {"flag": ["h"]},
        {"flags": "h|help"},
        {"singles": [1, 2]},
    ],
)
def test_invalid_structure(data):
    with pytest.raises(ConfigError):
        parse_declarations(data)
