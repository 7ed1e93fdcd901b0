"""Shared fixtures for stylemix tests."""

import pytest

from stylemix.config import CompileConfig, reset_compile_config
from stylemix.mixins import MixinContext, create_default_catalog
from stylemix.theme import Theme


@pytest.fixture(autouse=True)
def _isolated_compile_config():
    """Every test starts and ends with the default compile config."""
    reset_compile_config()
    yield
    reset_compile_config()


@pytest.fixture
def ctx() -> MixinContext:
    """Context for calling built-in mixins directly."""
    return MixinContext(create_default_catalog(), CompileConfig())


@pytest.fixture
def themed_ctx():
    """Factory for a context with a customized theme."""

    def _make(**theme_fields) -> MixinContext:
        config = CompileConfig(theme=Theme(**theme_fields))
        return MixinContext(create_default_catalog(), config)

    return _make
