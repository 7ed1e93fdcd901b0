"""Tests for ContextVar-based compile configuration and themes.

Validates defaults, dict loading in the host option shape, thread
isolation and context manager behavior.
"""

from threading import Thread

import pytest

from stylemix import process
from stylemix.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from stylemix.theme import DEFAULT_THEME, Theme


class TestCompileConfigDataclass:
    def test_default_values(self) -> None:
        config = CompileConfig()
        assert config.default_unit == "rem"
        assert config.line_height_unit == "em"
        assert config.indent == "\t"
        assert config.theme is DEFAULT_THEME

    def test_immutability(self) -> None:
        config = CompileConfig()
        with pytest.raises(AttributeError):
            config.default_unit = "px"  # type: ignore[misc]


class TestConfigFromDict:
    def test_units_group(self) -> None:
        config = CompileConfig.from_dict({"units": {"default": "px", "lineHeight": "%"}})
        assert config.default_unit == "px"
        assert config.line_height_unit == "%"

    def test_snake_case_line_height(self) -> None:
        config = CompileConfig.from_dict({"units": {"line_height": "px"}})
        assert config.line_height_unit == "px"
        assert config.default_unit == "rem"

    def test_flat_fields(self) -> None:
        config = CompileConfig.from_dict({"default_unit": "em", "indent": "  "})
        assert config.default_unit == "em"
        assert config.indent == "  "

    def test_theme_dict(self) -> None:
        config = CompileConfig.from_dict({"theme": {"grid": {"columns": 16}}})
        assert config.theme.grid_columns == 16

    def test_unknown_keys_ignored(self) -> None:
        assert CompileConfig.from_dict({"mixins": {}, "bogus": 1}) == CompileConfig()


class TestContextVarFunctions:
    def test_get_returns_default(self) -> None:
        assert get_compile_config() == CompileConfig()

    def test_set_and_reset(self) -> None:
        set_compile_config(CompileConfig(default_unit="px"))
        assert get_compile_config().default_unit == "px"
        reset_compile_config()
        assert get_compile_config().default_unit == "rem"

    def test_context_manager_restores(self) -> None:
        with compile_config_context(CompileConfig(default_unit="px")):
            assert get_compile_config().default_unit == "px"
        assert get_compile_config().default_unit == "rem"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with compile_config_context(CompileConfig(default_unit="px")):
                raise RuntimeError("boom")
        assert get_compile_config().default_unit == "rem"

    def test_active_config_used_by_process(self) -> None:
        with compile_config_context(CompileConfig(default_unit="px")):
            css = process(".a { size(10); }").css
        assert css == ".a {\n\twidth: 10px;\n\theight: 10px;\n}"

    def test_thread_isolation(self) -> None:
        seen: dict[str, str] = {}

        def worker(name: str, unit: str) -> None:
            set_compile_config(CompileConfig(default_unit=unit))
            seen[name] = process(".a { size(1); }").css

        threads = [Thread(target=worker, args=(f"t{unit}", unit)) for unit in ("px", "em", "vw")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert seen["tpx"].count("1px") == 2
        assert seen["tem"].count("1em") == 2
        assert seen["tvw"].count("1vw") == 2
        assert get_compile_config().default_unit == "rem"


class TestTheme:
    def test_defaults(self) -> None:
        theme = Theme()
        assert theme.border_color == "#d8d8d8"
        assert theme.font_weight_bold == "bold"
        assert theme.grid_columns == 12
        assert theme.grid_margin == "2%"
        assert theme.block_margin_bottom == 2

    def test_from_dict_flat(self) -> None:
        assert Theme.from_dict({"border_color": "#000"}).border_color == "#000"

    def test_from_dict_nested(self) -> None:
        theme = Theme.from_dict(
            {
                "colors": {"border": "#111"},
                "font": {"bold": 700},
                "grid": {"columns": 16, "margin": "3%"},
                "block": {"marginBottom": 4},
            }
        )
        assert theme == Theme(
            border_color="#111",
            font_weight_bold=700,
            grid_columns=16,
            grid_margin="3%",
            block_margin_bottom=4,
        )

    def test_from_dict_ignores_unknown(self) -> None:
        assert Theme.from_dict({"colors": {"text": "#333"}, "spacing": 3}) == Theme()
