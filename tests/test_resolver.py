"""Tests for mixin resolution."""

import logging

import pytest

from stylemix import parse
from stylemix.config import CompileConfig
from stylemix.errors import MixinError
from stylemix.mixins import MixinContext, create_catalog
from stylemix.nodes import Declaration, MixinCall, Rule, Stylesheet, iter_mixin_calls
from stylemix.resolver import MixinWarning, Resolution, Resolver, resolve


def resolve_source(source: str, mixins=None) -> Resolution:
    return Resolver(create_catalog(mixins)).resolve(parse(source))


class TestExpansion:
    def test_replaces_call_with_declarations(self) -> None:
        resolution = resolve_source(".a { hidden(); }")
        assert resolution.stylesheet == Stylesheet(
            [Rule(".a", [Declaration("visibility", "hidden")])]
        )
        assert resolution.warnings == ()

    def test_splices_in_place(self) -> None:
        resolution = resolve_source(".a { color: red; size(1, 2); top: 0; }")
        assert resolution.stylesheet.children[0].children == (
            Declaration("color", "red"),
            Declaration("width", 1),
            Declaration("height", 2),
            Declaration("top", "0"),
        )

    def test_top_level_call(self) -> None:
        resolution = resolve_source("bold();")
        assert resolution.stylesheet.children == (Declaration("font-weight", "bold"),)

    def test_nested_rules_resolved(self) -> None:
        resolution = resolve_source(".a { &:hover { show(); } }")
        hover = resolution.stylesheet.children[0].children[0]
        assert hover == Rule("&:hover", [Declaration("display", "inherit")])

    def test_emitted_rule_kept(self) -> None:
        resolution = resolve_source(".a { clearfix(); }")
        (after,) = resolution.stylesheet.children[0].children
        assert isinstance(after, Rule)
        assert after.selector == "&:after"

    def test_no_calls_left(self) -> None:
        resolution = resolve_source(".a { row(); column(spaced, 3); &:hover { hide(); } }")
        assert list(iter_mixin_calls(resolution.stylesheet)) == []

    def test_input_not_modified(self) -> None:
        sheet = parse(".a { hidden(); }")
        Resolver().resolve(sheet)
        assert sheet.children[0].children == (MixinCall("hidden"),)

    def test_locations_kept(self) -> None:
        resolution = resolve_source("\n.a { color: red; }")
        rule = resolution.stylesheet.children[0]
        assert rule.location.lineno == 2
        assert rule.children[0].location.lineno == 2

    def test_module_level_resolve(self) -> None:
        resolution = resolve(parse(".a { italic(); }"))
        assert resolution.stylesheet.children[0].children == (Declaration("font-style", "italic"),)


class TestRewalk:
    def test_emitted_rule_calls_resolved(self) -> None:
        def hover_hidden(ctx, args):
            return Rule("&:hover", [MixinCall("hidden")])

        resolution = resolve_source(".a { hoverHidden(); }", {"hoverHidden": hover_hidden})
        (hover,) = resolution.stylesheet.children[0].children
        assert hover == Rule("&:hover", [Declaration("visibility", "hidden")])

    def test_emitted_call_resolved(self) -> None:
        def emphasis(ctx, args):
            return [MixinCall("bold"), MixinCall("italic")]

        resolution = resolve_source(".a { emphasis(); }", {"emphasis": emphasis})
        assert resolution.stylesheet.children[0].children == (
            Declaration("font-weight", "bold"),
            Declaration("font-style", "italic"),
        )

    def test_unknown_call_in_expansion_warns(self) -> None:
        def broken(ctx, args):
            return MixinCall("missing")

        resolution = resolve_source(".a { broken(); }", {"broken": broken})
        assert [w.message for w in resolution.warnings] == ["unknown mixin: missing"]


class TestContext:
    def test_selector_and_node(self) -> None:
        seen: list[MixinContext] = []

        def probe(ctx, args):
            seen.append(ctx)

        resolve_source(".a, .b { &:hover { probe(1); } } probe();", {"probe": probe})
        nested, top = seen
        assert nested.selector == ".a:hover, .b:hover"
        assert nested.node == MixinCall("probe", nested.node.arguments)
        assert nested.node.arguments.values == (1,)
        assert top.selector is None

    def test_selector_inside_emitted_rule(self) -> None:
        seen: list[str | None] = []

        def after(ctx, args):
            return Rule("&:after", [MixinCall("probe")])

        def probe(ctx, args):
            seen.append(ctx.selector)

        resolve_source(".a { after(); }", {"after": after, "probe": probe})
        assert seen == [".a:after"]

    def test_config_reaches_mixins(self) -> None:
        config = CompileConfig.from_dict({"theme": {"grid": {"columns": 4}}})
        resolution = Resolver(config=config).resolve(parse(".a { column(1); }"))
        assert Declaration("width", "25%") in resolution.stylesheet.children[0].children


class TestUnknownMixins:
    def test_warning_and_removal(self) -> None:
        resolution = resolve_source(".a { nope(#fff); color: red; hidden(); }")
        assert resolution.stylesheet.children[0].children == (
            Declaration("color", "red"),
            Declaration("visibility", "hidden"),
        )
        (warning,) = resolution.warnings
        assert isinstance(warning, MixinWarning)
        assert warning.message == "unknown mixin: nope"
        assert warning.node.name == "nope"
        assert str(warning) == "1:6: unknown mixin: nope"

    def test_warnings_in_document_order(self) -> None:
        resolution = resolve_source("one(); .a { two(); &:b { three(); } } four();")
        assert [w.node.name for w in resolution.warnings] == ["one", "two", "three", "four"]

    def test_warning_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="stylemix.resolver"):
            resolve_source(".a { nope(); }")
        assert any("unknown mixin: nope" in record.message for record in caplog.records)
        assert all(record.name == "stylemix.resolver" for record in caplog.records)

    def test_warning_without_location(self) -> None:
        warning = MixinWarning("unknown mixin: x", MixinCall("x"))
        assert str(warning) == "unknown mixin: x"


class TestFailures:
    def test_mixin_exception_propagates(self) -> None:
        def explode(ctx, args):
            raise RuntimeError("kaboom")

        with pytest.raises(RuntimeError, match="kaboom"):
            resolve_source(".a { explode(); }", {"explode": explode})

    def test_unsupported_return_value(self) -> None:
        def bad(ctx, args):
            return 42

        with pytest.raises(MixinError, match="Mixin 'bad': returned unsupported value of type int"):
            resolve_source(".a { bad(); }", {"bad": bad})

    def test_builtin_argument_error_propagates(self) -> None:
        with pytest.raises(ValueError, match="Mixin 'display'"):
            resolve_source(".a { display(); }")


class TestDeterminism:
    def test_same_input_same_output(self) -> None:
        source = ".a { spacedBlock(3, 20); nope(); row(); }"
        first = resolve_source(source)
        second = resolve_source(source)
        assert first.stylesheet == second.stylesheet
        assert [w.message for w in first.warnings] == [w.message for w in second.warnings]

    def test_resolver_reusable(self) -> None:
        resolver = Resolver()
        sheet = parse(".a { nope(); }")
        assert len(resolver.resolve(sheet).warnings) == 1
        assert len(resolver.resolve(sheet).warnings) == 1
