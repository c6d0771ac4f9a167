"""Unit tests for shared helpers (agent_scaffold.utils)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from agent_scaffold.utils import (
    is_non_empty_dir,
    load_mapping,
    print_error,
    print_summary_table,
    write_file,
)


pytestmark = pytest.mark.unit


class TestLoadMapping:
    def test_json(self, tmp_path: Path):
        path = tmp_path / "a.json"
        path.write_text(json.dumps({"agentName": "X"}), encoding="utf-8")
        assert load_mapping(path) == {"agentName": "X"}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
    def test_yaml(self, tmp_path: Path, suffix):
        path = tmp_path / f"a{suffix}"
        path.write_text("agentName: X\nfeatures:\n  - a2a\n", encoding="utf-8")
        assert load_mapping(path) == {"agentName": "X", "features": ["a2a"]}

    def test_unsupported_extension(self, tmp_path: Path):
        path = tmp_path / "a.toml"
        path.write_text("x = 1", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported"):
            load_mapping(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "a.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_mapping(path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "a.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_mapping(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "a.yaml"
        path.write_text("a: [unclosed", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_mapping(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_mapping(tmp_path / "missing.json")


class TestFileHelpers:
    def test_write_file_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c.txt"
        write_file(target, "hello")
        assert target.read_text(encoding="utf-8") == "hello"

    def test_is_non_empty_dir(self, tmp_path: Path):
        assert not is_non_empty_dir(tmp_path / "missing")
        assert not is_non_empty_dir(tmp_path)
        (tmp_path / "f").write_text("x", encoding="utf-8")
        assert is_non_empty_dir(tmp_path)
        assert not is_non_empty_dir(tmp_path / "f")


class TestConsoleHelpers:
    def test_summary_table(self, capsys):
        print_summary_table({"Agent": "Demo"}, title="Scaffold")
        out = capsys.readouterr().out
        assert "Demo" in out
        assert "Scaffold" in out

    def test_summary_table_with_brackets(self, capsys):
        print_summary_table({"Agent": "Agent [/x]", "Tag": "Agent [v2]"})
        out = capsys.readouterr().out
        assert "Agent [/x]" in out
        assert "Agent [v2]" in out

    def test_error_with_brackets(self, capsys):
        print_error("bad value [type=missing]")
        assert "[type=missing]" in capsys.readouterr().out
