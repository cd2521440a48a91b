"""Unit tests for method lookup, comment and declaration extraction."""

from __future__ import annotations

import logging
from pathlib import Path

from smartci.adapters.codeigniter.method_locator import (
    clean_block_comment_line,
    extract_comment,
    extract_declaration,
    find_method_in_file,
    find_method_in_lines,
)
from smartci.core.config import SmartCIConfig
from smartci.core.models import MethodInfo


class TestFindMethodInLines:
    def test_docblock_example(self) -> None:
        lines = [
            "/**",
            " * Fetch user by id",
            " */",
            "function get_user($id)",
            "{",
        ]

        info = find_method_in_lines(lines, "get_user")

        assert info is not None
        assert info.line == 3
        assert info.character == len("function ")
        assert info.comment == "Fetch user by id"
        assert "function get_user($id)" in info.declaration
        assert "{" in info.declaration

    def test_case_insensitive_match(self) -> None:
        lines = ["<?php", "    public function GetUser($id) {"]

        info = find_method_in_lines(lines, "getuser")

        assert info is not None
        assert info.line == 1
        # The name is not found verbatim on the line
        assert info.character == 0

    def test_first_definition_wins(self) -> None:
        lines = ["function run() {", "}", "function run() {", "}"]

        info = find_method_in_lines(lines, "run")

        assert info is not None
        assert info.line == 0

    def test_prefix_name_does_not_match(self) -> None:
        lines = ["function get_user_by_id($id) {"]

        assert find_method_in_lines(lines, "get_user") is None

    def test_method_name_is_not_a_pattern(self) -> None:
        lines = ["function a1b() {"]

        assert find_method_in_lines(lines, "a.b") is None

    def test_missing_method(self) -> None:
        assert find_method_in_lines(["<?php", "class Foo {}"], "bar") is None


class TestExtractComment:
    def test_block_comment_with_blank_lines_between(self) -> None:
        lines = ["/**", " * Summary", " *", " * @return int", " */", "", "", "function f() {"]

        assert extract_comment(lines, 7) == "Summary\n@return int"

    def test_single_line_block_comment(self) -> None:
        lines = ["/** Quick summary */", "function f() {"]

        assert extract_comment(lines, 1) == "Quick summary"

    def test_plain_block_comment(self) -> None:
        lines = ["/*", "  plain text", "*/", "function f() {"]

        assert extract_comment(lines, 3) == "plain text"

    def test_unterminated_block_collects_to_top(self) -> None:
        lines = ["stray line", " * orphan */", "function f() {"]

        assert extract_comment(lines, 2) == "stray line\norphan"

    def test_slash_comments_in_order(self) -> None:
        lines = ["$x = 1;", "// first", "// second", "function f() {"]

        assert extract_comment(lines, 3) == "first\nsecond"

    def test_slash_comments_stop_at_other_line(self) -> None:
        lines = ["// unrelated", "$x = 1;", "// only this", "function f() {"]

        assert extract_comment(lines, 3) == "only this"

    def test_hash_comments(self) -> None:
        lines = ["# one", "#two", "function f() {"]

        assert extract_comment(lines, 2) == "one\ntwo"

    def test_code_above_means_no_comment(self) -> None:
        lines = ["/** doc */", "$x = 1;", "function f() {"]

        assert extract_comment(lines, 2) == ""

    def test_first_line(self) -> None:
        assert extract_comment(["function f() {"], 0) == ""

    def test_only_blank_lines_above(self) -> None:
        assert extract_comment(["", "   ", "function f() {"], 2) == ""


class TestCleanBlockCommentLine:
    def test_strips_delimiters_and_decoration(self) -> None:
        assert clean_block_comment_line("/**") == ""
        assert clean_block_comment_line("* @param int $id") == "@param int $id"
        assert clean_block_comment_line("*/") == ""
        assert clean_block_comment_line("/* inline */") == "inline"


class TestExtractDeclaration:
    def test_single_line_with_brace(self) -> None:
        lines = ["    public function f($a) {", "        return $a;", "    }"]

        assert extract_declaration(lines, 0) == "public function f($a) {"

    def test_multi_line_parameters(self) -> None:
        lines = [
            "    public function lookup(",
            "        $id,",
            "        $fallback = null",
            "    ) {",
            "        return $id;",
        ]

        assert extract_declaration(lines, 0) == "public function lookup( $id, $fallback = null ) {"

    def test_brace_on_next_line(self) -> None:
        lines = ["public function f($a)", "{", "return $a;"]

        assert extract_declaration(lines, 0) == "public function f($a) {"

    def test_return_type_before_brace_line(self) -> None:
        lines = ["public function f(", "$a", "): int", "{"]

        assert extract_declaration(lines, 0) == "public function f( $a ): int {"

    def test_runaway_declaration_is_capped(self) -> None:
        lines = ["function f("] + [f"$arg{i}," for i in range(1, 16)]

        declaration = extract_declaration(lines, 0)

        assert "$arg10," in declaration
        assert "$arg11," not in declaration
        assert len(declaration.split(" ")) == 12

    def test_custom_cap(self) -> None:
        lines = ["function f("] + [f"$arg{i}," for i in range(1, 16)]

        assert extract_declaration(lines, 0, max_extra_lines=2) == "function f( $arg1, $arg2,"

    def test_end_of_file_without_brace(self) -> None:
        lines = ["abstract public function f($a);"]

        assert extract_declaration(lines, 0) == "abstract public function f($a);"


class TestFindMethodInFile:
    def test_docblock_method(self, foo_model_path: Path, config: SmartCIConfig) -> None:
        info = find_method_in_file(foo_model_path, "bar_baz", config)

        assert info == MethodInfo(
            line=7,
            character=20,
            comment="Compute baz\n@param int $n",
            declaration="public function bar_baz($n) {",
        )

    def test_slash_comment_method(self, foo_model_path: Path, config: SmartCIConfig) -> None:
        info = find_method_in_file(foo_model_path, "fetch_all", config)

        assert info is not None
        assert info.comment == "Fetch every row\nordered by id"

    def test_hash_comment_method(self, foo_model_path: Path, config: SmartCIConfig) -> None:
        info = find_method_in_file(foo_model_path, "hashed", config)

        assert info is not None
        assert info.comment == "Hash style comment"
        assert info.declaration == "public function hashed() {"

    def test_crlf_line_endings(self, tmp_path: Path, config: SmartCIConfig) -> None:
        model = tmp_path / "Crlf_model.php"
        model.write_bytes(b"<?php\r\n// Windows file\r\nfunction go($x) {\r\n}\r\n")

        info = find_method_in_file(model, "go", config)

        assert info is not None
        assert info.line == 2
        assert info.comment == "Windows file"
        assert info.declaration == "function go($x) {"

    def test_method_not_in_file(self, foo_model_path: Path, config: SmartCIConfig) -> None:
        assert find_method_in_file(foo_model_path, "missing", config) is None

    def test_unreadable_file_yields_empty_info(
        self, tmp_path: Path, config: SmartCIConfig, caplog
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="smartci.adapters.codeigniter.method_locator"):
            info = find_method_in_file(tmp_path, "anything", config)

        assert info == MethodInfo.empty()
        assert info.is_empty
        assert "Failed to read model file" in caplog.text

    def test_uses_configured_line_limit(self, tmp_path: Path) -> None:
        config = SmartCIConfig(_env_file=None, declaration_line_limit=1)
        model = tmp_path / "Long_model.php"
        model.write_text("function f(\n$a,\n$b\n) {\n", encoding="utf-8")

        info = find_method_in_file(model, "f", config)

        assert info is not None
        assert info.declaration == "function f( $a,"
