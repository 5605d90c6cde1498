"""
test_ts_parser.py - ParserManager file parsing and the source-file walker.

Tests:
    1. parse_file parses a readable file and returns None otherwise.
    2. Repeated parses of the same file give fresh, equal trees.
    3. walk_source_files honours extensions and excluded directories.
"""

from __future__ import annotations

import os

from intl_extract.models import DEFAULT_EXCLUDE_DIRS, ProjectConfig
from intl_extract.ts_parser import ParserManager, walk_source_files


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write(path, content: str = "const x = 1;\n") -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return str(path)


def _names(paths: list[str]) -> list[str]:
    return sorted(os.path.basename(p) for p in paths)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestParseFile:

    def test_parses_readable_file(self, tmp_path):
        fp = _write(tmp_path / "App.tsx", "const a = <FormattedMessage id='x' />;\n")
        tree = ParserManager().parse_file(fp)
        assert tree is not None
        assert tree.root_node.type == "program"

    def test_missing_file_returns_none(self, tmp_path):
        assert ParserManager().parse_file(str(tmp_path / "nope.tsx")) is None

    def test_directory_returns_none(self, tmp_path):
        assert ParserManager().parse_file(str(tmp_path)) is None

    def test_each_parse_is_fresh(self, tmp_path):
        fp = _write(tmp_path / "App.tsx")
        pm = ParserManager()
        t1 = pm.parse_file(fp)
        _write(tmp_path / "App.tsx", "const x = 2;\nconst y = 3;\n")
        t2 = pm.parse_file(fp)
        assert t1 is not t2
        assert t2.root_node.named_child_count == 2

    def test_parse_source_accepts_str_and_bytes(self):
        pm = ParserManager()
        src = "const x = 1;"
        from_str = pm.parse_source(src).root_node
        from_bytes = pm.parse_source(src.encode("utf-8")).root_node
        assert from_str.type == from_bytes.type == "program"
        assert from_str.end_byte == from_bytes.end_byte


class TestWalkSourceFiles:

    def test_defaults(self, tmp_path):
        _write(tmp_path / "src" / "App.tsx")
        _write(tmp_path / "src" / "util.js")
        _write(tmp_path / "src" / "README.md", "# docs\n")
        _write(tmp_path / "node_modules" / "lib" / "index.ts")
        _write(tmp_path / ".vscode" / "settings.ts")
        assert _names(walk_source_files(str(tmp_path))) == ["App.tsx", "util.js"]

    def test_empty_extensions_match_nothing(self, tmp_path):
        _write(tmp_path / "App.tsx")
        assert walk_source_files(str(tmp_path), extensions=[]) == []

    def test_empty_exclusions_walk_everything(self, tmp_path):
        _write(tmp_path / "dist" / "bundle.js")
        assert _names(walk_source_files(str(tmp_path), exclude_dirs=[])) == ["bundle.js"]

    def test_single_file_root(self, tmp_path):
        fp = _write(tmp_path / "App.tsx")
        assert walk_source_files(fp) == [fp]
        assert walk_source_files(fp, extensions=[".ts"]) == []

    def test_config_defaults_match_walker_defaults(self):
        assert ProjectConfig().exclude_patterns == list(DEFAULT_EXCLUDE_DIRS)
        assert ".idea" in DEFAULT_EXCLUDE_DIRS and ".vscode" in DEFAULT_EXCLUDE_DIRS
