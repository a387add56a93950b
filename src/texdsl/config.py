"""ContextVar-based render configuration for texdsl.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is read by the tree renderer and by ``Document.render_to_stream``
whenever no explicit config is passed.

Usage:
    from texdsl.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(indent_unit="\\t")):
        text = doc.render_to_string()

    # Or set it for the current context
    set_render_config(RenderConfig(indent_unit="    "))
    try:
        text = doc.render_to_string()
    finally:
        reset_render_config()

"""

import codecs
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from texdsl.errors import ConfigError


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        indent_unit: Whitespace added per nesting level (two spaces by default)
        encoding: Codec used when rendering to a binary stream

    """

    indent_unit: str = "  "
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.indent_unit.strip(" \t"):
            raise ConfigError("indent_unit", f"{self.indent_unit!r} must contain only spaces and tabs")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigError("encoding", f"unknown codec {self.encoding!r}") from None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({"indent_unit": "\\t", "unknown_key": 1})
            >>> config.indent_unit
            '\\t'

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
    """Get current render configuration (context-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: RenderConfig to use within the context.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
