"""Tests for the recursive descent parser."""

import logging
import re

import pytest

from stylemix import parse
from stylemix.errors import ParseError
from stylemix.nodes import Declaration, Keyword, MixinCall, Positional, Rule, Stylesheet


def first_call(source: str) -> MixinCall:
    rule = parse(source).children[0]
    assert isinstance(rule, Rule)
    call = rule.children[0]
    assert isinstance(call, MixinCall)
    return call


class TestStructure:
    def test_empty_source(self) -> None:
        assert parse("") == Stylesheet()

    def test_rule_with_declaration(self) -> None:
        sheet = parse(".a { color: red; }")
        assert sheet.children == (Rule(".a", [Declaration("color", "red")]),)

    def test_nested_rule(self) -> None:
        sheet = parse(".a { color: red; &:hover { color: blue; } }")
        rule = sheet.children[0]
        assert rule.children == (
            Declaration("color", "red"),
            Rule("&:hover", [Declaration("color", "blue")]),
        )

    def test_empty_rule(self) -> None:
        assert parse(".block {}").children == (Rule(".block"),)

    def test_top_level_statements(self) -> None:
        sheet = parse("color: red;\nbold();")
        assert sheet.children == (Declaration("color", "red"), MixinCall("bold"))

    def test_multiple_rules_keep_order(self) -> None:
        sheet = parse(".a {} .b {} .c {}")
        assert [rule.selector for rule in sheet.children] == [".a", ".b", ".c"]

    def test_stylesheet_location_spans_source(self) -> None:
        source = ".a { color: red; }"
        sheet = parse(source, source_file="a.mcss")
        assert sheet.location.end_offset == len(source)
        assert sheet.location.source_file == "a.mcss"


class TestDeclarations:
    def test_value_kept_verbatim(self) -> None:
        decl = parse(".a { font-family: 'Open Sans',  Arial; }").children[0].children[0]
        assert decl == Declaration("font-family", "'Open Sans',  Arial")

    def test_numeric_value_kept_as_written(self) -> None:
        decl = parse(".a { width: 10; }").children[0].children[0]
        assert decl.value == "10"

    def test_value_with_colon(self) -> None:
        decl = parse(".a { background: url(http://x/a.png); }").children[0].children[0]
        assert decl == Declaration("background", "url(http://x/a.png)")

    @pytest.mark.parametrize("prop", ["--main-color", "$gap", "-webkit-transition", "_hack"])
    def test_property_name_forms(self, prop: str) -> None:
        decl = parse(f".a {{ {prop}: 1px; }}").children[0].children[0]
        assert decl.property == prop

    def test_location(self) -> None:
        decl = parse(".a {\n  color: red;\n}").children[0].children[0]
        assert (decl.location.lineno, decl.location.col_offset) == (2, 3)


class TestArguments:
    def test_no_arguments(self) -> None:
        assert first_call(".a { clearfix(); }") == MixinCall("clearfix", Positional())

    def test_numbers(self) -> None:
        call = first_call(".a { margin(1, 2.5, -3, .4); }")
        assert call.arguments == Positional((1, 2.5, -3, 0.4))
        assert isinstance(call.arguments[0], int)

    def test_strings_and_units(self) -> None:
        call = first_call(".a { border(top, #fff, 5px, 20%); }")
        assert call.arguments == Positional(("top", "#fff", "5px", "20%"))

    def test_multi_word_argument(self) -> None:
        call = first_call(".a { font('Open Sans'   Arial sans-serif, 5); }")
        assert call.arguments.values == ("'Open Sans' Arial sans-serif", 5)

    def test_quoted_argument_keeps_quotes_and_commas(self) -> None:
        call = first_call(".a { content('a, b'); }")
        assert call.arguments.values == ("'a, b'",)

    def test_nested_call_argument(self) -> None:
        call = first_call(".a { background(rgba(0, 0, 0, .5), no-repeat); }")
        assert call.arguments.values == ("rgba(0, 0, 0, .5)", "no-repeat")

    def test_variable_argument(self) -> None:
        call = first_call(".a { spacedBlock($margin, 10); }")
        assert call.arguments.values == ("$margin", 10)

    def test_keyword_arguments_keep_order(self) -> None:
        call = first_call(".a { margin(top: 1, bottom: 4, right: 2, left: 3); }")
        assert call.arguments == Keyword((("top", 1), ("bottom", 4), ("right", 2), ("left", 3)))

    def test_keyword_value_with_spaces(self) -> None:
        call = first_call(".a { border(bottom: 1px solid #ccc); }")
        assert call.arguments == Keyword((("bottom", "1px solid #ccc"),))

    def test_mixed_arguments_collapse_to_keywords(self) -> None:
        call = first_call(".a { margin(1, top: 2, 3, left: 4); }")
        assert call.arguments == Keyword((("top", 2), ("left", 4)))

    def test_mixed_arguments_log_dropped_values(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="stylemix.parser"):
            first_call(".a { margin(1, top: 2); }")
        (record,) = caplog.records
        assert record.getMessage() == "1:6: ignoring 1 positional argument(s) in keyword call to 'margin'"

    def test_call_location(self) -> None:
        call = first_call(".a {\n\n    hidden();\n}")
        assert (call.location.lineno, call.location.col_offset) == (3, 5)


class TestParseErrors:
    @pytest.mark.parametrize(
        ("source", "message"),
        [
            (".a { color: red;", "unterminated block '.a'"),
            ("}", "unexpected '}'"),
            (".a { color: red; } }", "unexpected '}'"),
            (".a { 1abc: red; }", "invalid property name '1abc'"),
            (".a { color: ; }", "missing value for property 'color'"),
            (".a { margin(1, , 2); }", "empty argument in call to 'margin'"),
            (".a { margin(1,); }", "empty argument in call to 'margin'"),
            (".a { margin(top: ); }", "missing value for argument 'top'"),
            (".a { margin(top: 1, top: 2); }", "duplicate argument 'top'"),
        ],
    )
    def test_malformed(self, source: str, message: str) -> None:
        with pytest.raises(ParseError, match=re.escape(message)):
            parse(source)

    def test_error_carries_position(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(".a {\n  color: red;\n  margin(top: 1, top: 2);\n}", source_file="x.mcss")
        err = exc_info.value
        assert (err.lineno, err.col_offset, err.source_file) == (3, 3, "x.mcss")

    def test_first_error_aborts(self) -> None:
        with pytest.raises(ParseError, match="invalid statement"):
            parse(".a { foo; }\n.b { bar; }")

    def test_unterminated_block_points_at_opener(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("\n.a {\n  .b {\n    color: red;\n  }\n")
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (2, 1)
