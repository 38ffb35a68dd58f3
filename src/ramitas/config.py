"""ContextVar-based render configuration for Ramitas.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Callers that pass ``escape=None`` to ``render()`` pick up the active config.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from ramitas.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(escape=False)):
        html = render(["p", "<b>trusted</b>"])

"""

import sys
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

DEFAULT_MAX_DEPTH = 128


def max_depth_limit() -> int:
    """Largest max_depth that fails with DepthLimitError, not RecursionError."""
    return sys.getrecursionlimit() // 4


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        escape: Escape untrusted text and attribute values when a call
            does not say otherwise
        max_depth: Maximum markup tree nesting before DepthLimitError is
            raised; None disables the guard. Capped at a quarter of the
            interpreter recursion limit (250 by default), since building a
            raw tree takes about three stack frames per level

    """

    escape: bool = True
    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth is None:
            return
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive or None, got {self.max_depth}")
        limit = max_depth_limit()
        if self.max_depth > limit:
            raise ValueError(
                f"max_depth={self.max_depth} exceeds {limit}, the deepest tree the "
                "current recursion limit can build"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({"escape": False, "theme": "x"})
            >>> config.escape
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(max_depth=8)):
        ...     html = render(tree)

    """
    token = _render_config.set(config)
    try:
        yield
    finally:
        _render_config.reset(token)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "max_depth_limit",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
