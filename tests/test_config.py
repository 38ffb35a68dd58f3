"""Tests for ContextVar-based render configuration.

Validates thread isolation, context manager behavior, and how render()
picks up the active config.
"""

import sys
from threading import Thread

import pytest

from ramitas import (
    RenderConfig,
    get_render_config,
    render,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from ramitas.config import max_depth_limit
from ramitas.errors import DepthLimitError


class TestRenderConfigDataclass:
    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.escape is True
        assert config.max_depth == 128

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.escape = False  # type: ignore[misc]

    def test_invalid_max_depth(self) -> None:
        with pytest.raises(ValueError):
            RenderConfig(max_depth=0)

    def test_max_depth_capped_by_recursion_limit(self) -> None:
        with pytest.raises(ValueError, match="recursion limit"):
            RenderConfig(max_depth=sys.getrecursionlimit())
        assert RenderConfig(max_depth=max_depth_limit()).max_depth == max_depth_limit()

    def test_unbounded_depth_allowed(self) -> None:
        assert RenderConfig(max_depth=None).max_depth is None

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = RenderConfig.from_dict({"escape": False, "theme": "dark"})
        assert config == RenderConfig(escape=False)


class TestContextAccessors:
    def setup_method(self) -> None:
        reset_render_config()

    def teardown_method(self) -> None:
        reset_render_config()

    def test_set_and_reset(self) -> None:
        set_render_config(RenderConfig(escape=False))
        assert get_render_config().escape is False
        reset_render_config()
        assert get_render_config() == RenderConfig()

    def test_context_manager_restores(self) -> None:
        with render_config_context(RenderConfig(max_depth=4)):
            assert get_render_config().max_depth == 4
        assert get_render_config().max_depth == 128

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with render_config_context(RenderConfig(escape=False)):
                raise RuntimeError("boom")
        assert get_render_config().escape is True

    def test_nested_contexts(self) -> None:
        with render_config_context(RenderConfig(max_depth=10)):
            with render_config_context(RenderConfig(max_depth=5)):
                assert get_render_config().max_depth == 5
            assert get_render_config().max_depth == 10


class TestRenderUsesConfig:
    def test_escape_from_config(self) -> None:
        with render_config_context(RenderConfig(escape=False)):
            assert render(["p", "<b>"]) == "<p><b></p>"
        assert render(["p", "<b>"]) == "<p>&lt;b&gt;</p>"

    def test_explicit_escape_wins(self) -> None:
        with render_config_context(RenderConfig(escape=False)):
            assert render(["p", "<b>"], escape=True) == "<p>&lt;b&gt;</p>"

    def test_max_depth_from_config(self) -> None:
        tree: list = ["div"]
        for _ in range(5):
            tree = ["div", tree]
        with render_config_context(RenderConfig(max_depth=3)):
            with pytest.raises(DepthLimitError):
                render(tree)
        assert render(tree).count("<div>") == 6

    def test_deepest_allowed_limit_raises_depth_error(self) -> None:
        limit = max_depth_limit()
        tree: list = ["i"]
        for _ in range(limit + 10):
            tree = ["i", tree]
        with render_config_context(RenderConfig(max_depth=limit)):
            with pytest.raises(DepthLimitError):
                render(tree)


class TestThreadIsolation:
    def test_config_is_thread_local(self) -> None:
        results: dict[str, bool] = {}

        def worker() -> None:
            results["escape"] = get_render_config().escape

        with render_config_context(RenderConfig(escape=False)):
            t = Thread(target=worker)
            t.start()
            t.join()

        assert results["escape"] is True
