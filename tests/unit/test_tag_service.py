"""Unit tests for tag record formatting and file blocks."""

from __future__ import annotations

import pytest

from goetags.errors import SourceParseError
from goetags.services.go_parser import Declaration, DeclarationKind
from goetags.services.source_service import UNAVAILABLE_ANCHOR, SourceLine, build_line_index
from goetags.services.tag_service import (
    FileTagBlock,
    TagRecord,
    build_file_block,
    format_tag,
    locate_anchor,
    qualify_name,
    tag_file,
    tag_source,
)


def _decl(name, kind=DeclarationKind.FUNCTION, line=1, receiver=None, package="p"):
    return Declaration(
        name=name,
        kind=kind,
        package_name=package,
        line=line,
        column=1,
        receiver_type=receiver,
    )


class TestAnchor:
    def test_anchor_ends_one_past_identifier(self):
        line = SourceLine("func (r *T) M() {}\n", 0)
        assert locate_anchor(line, "M") == "func (r *T) M("

    def test_first_occurrence_wins(self):
        line = SourceLine("var a, b int\n", 0)
        assert locate_anchor(line, "a") == "var"

    def test_missing_identifier_uses_whole_line(self):
        line = SourceLine("func   Other() {}\n", 0)
        assert locate_anchor(line, "Missing") == "func   Other() {}"

    def test_anchor_never_includes_terminator(self):
        assert locate_anchor(SourceLine("\tB\n", 0), "B") == "\tB"
        assert locate_anchor(SourceLine("\tB\r\n", 0), "B") == "\tB"
        assert locate_anchor(SourceLine("var x", 0), "x") == "var x"


class TestQualifiedName:
    def test_package_prefix_for_non_methods(self):
        assert qualify_name(_decl("T", DeclarationKind.TYPE)) == "p.T"
        assert qualify_name(_decl("v", DeclarationKind.VARIABLE), full_tag=True) == "p.v"

    def test_receiver_prefix_for_methods(self):
        method = _decl("M", DeclarationKind.METHOD, receiver="T")
        assert qualify_name(method) == "T.M"
        assert qualify_name(method, full_tag=True) == "p.T.M"


class TestFormatTag:
    def test_offset_is_line_start_offset(self):
        lines = build_line_index("package p\n\ntype T struct{}\n")
        record = format_tag(_decl("T", DeclarationKind.TYPE, line=3), lines)
        assert record == TagRecord("type T ", "p.T", 3, 11)
        assert record.serialize() == "type T \x7fp.T\x013,11\n"

    def test_line_outside_index_uses_sentinel(self):
        lines = build_line_index("package p\n")
        record = format_tag(_decl("F", line=42), lines)
        assert record.anchor_text == UNAVAILABLE_ANCHOR
        assert record.byte_offset == 0
        assert record.line == 42
        assert record.qualified_name == "p.F"


class TestFileBlock:
    def test_header_length_matches_records(self):
        block = FileTagBlock(
            "a.go",
            [TagRecord("/* é */ func F(", "p.F", 3, 15), TagRecord("var x", "p.x", 4, 30)],
        )
        data = block.to_bytes()
        header, _, body = data.partition(b"\n")[2].partition(b"\n")
        assert data.startswith(b"\f\na.go,")
        assert int(header.split(b",")[-1]) == len(body)
        assert block.byte_length == len(body)
        assert block.byte_length > len(body.decode("utf-8"))

    def test_block_without_records(self):
        assert FileTagBlock("empty.go").to_bytes() == b"\f\nempty.go,0\n"

    def test_build_file_block_keeps_declaration_order(self):
        lines = build_line_index("package p\nfunc B() {}\nfunc A() {}\n")
        block = build_file_block(
            "x.go",
            [_decl("B", line=2), _decl("A", line=3)],
            lines,
        )
        assert [record.qualified_name for record in block.records] == ["p.B", "p.A"]


class TestTagSource:
    def test_method_tags(self):
        source = b"package p\n\ntype T struct{}\n\nfunc (r *T) M() {}\n"
        block = tag_source("t.go", source)
        assert [r.qualified_name for r in block.records] == ["p.T", "T.M"]
        full = tag_source("t.go", source, full_tag=True)
        assert [r.qualified_name for r in full.records] == ["p.T", "p.T.M"]

    def test_multi_name_var_same_line_and_offset(self):
        source = b"package p\n\nvar alpha, beta int\n"
        records = tag_source("v.go", source).records
        assert len(records) == 2
        assert {(r.line, r.byte_offset) for r in records} == {(3, 11)}
        assert [r.anchor_text for r in records] == ["var alpha,", "var alpha, beta "]

    def test_unicode_offsets_and_byte_length(self):
        source = "package p\n// ü\n/* é */ func F() {}\n".encode("utf-8")
        block = tag_source("u.go", source)
        record = block.records[0]
        assert record.anchor_text == "/* é */ func F("
        assert record.byte_offset == 15
        expected = "/* é */ func F(\x7fp.F\x013,15\n"
        assert block.to_bytes() == f"\f\nu.go,{len(expected.encode())}\n{expected}".encode()

    def test_parse_error_propagates(self):
        with pytest.raises(SourceParseError):
            tag_source("bad.go", b"package p\nfunc (\n")

    def test_tag_file_reads_disk(self, tmp_path):
        path = tmp_path / "main.go"
        path.write_text("package main\n\nfunc main() {}\n")
        block = tag_file(path)
        assert block.file_path == str(path)
        assert block.records[0].serialize() == "func main(\x7fmain.main\x013,14\n"

    def test_tag_file_missing(self, tmp_path):
        with pytest.raises(OSError):
            tag_file(tmp_path / "nope.go")

    def test_tag_file_unopenable_name_is_os_error(self):
        with pytest.raises(OSError) as excinfo:
            tag_file("bad\x00.go")
        assert excinfo.value.strerror == "embedded null byte"

    def test_line_directive_does_not_remap_lines(self):
        source = b"package p\n\n//line foo.go:1000\nfunc F() {}\n"
        record = tag_source("d.go", source).records[0]
        assert record.line == 4
        assert record.anchor_text == "func F("
        assert record.byte_offset == 30
