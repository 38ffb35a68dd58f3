"""Attribute serialization for Ramitas.

Flattens an attribute mapping into ``name="value"`` tokens:

- Nested mappings produce dash-joined names at every level::

    {"data": {"foo": {"bar": "baz"}}}  ->  data-foo-bar="baz"

- Lists and tuples are joined with single spaces after dropping ``None``,
  ``False`` and empty-string entries::

    {"class": ["foo", None, "", "bar"]}  ->  class="foo bar"

- Everything else is stringified. ``None`` becomes an empty value.

Insertion order is preserved exactly. Attribute names are not escaped.

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

from collections.abc import Mapping
from typing import Any

from ramitas.escape import to_text
from ramitas.utils.logger import get_logger

logger = get_logger(__name__)

_SCALAR_TYPES = (str, int, float)


def _is_blank(value: Any) -> bool:
    """True for list entries that are dropped from joined values."""
    if value is None or value is False:
        return True
    return not (value.__html__() if hasattr(value, "__html__") else str(value))


def _value_text(name: str, value: Any, escape: bool) -> str:
    if value is None:
        return ""
    if not isinstance(value, _SCALAR_TYPES) and not hasattr(value, "__html__"):
        logger.debug(
            "Stringifying %s value for attribute %r", type(value).__name__, name
        )
    return to_text(value, escape)


def _flatten(
    attrs: Mapping[Any, Any], prefix: str | None, escape: bool, out: list[str]
) -> None:
    for key, value in attrs.items():
        name = str(key) if prefix is None else f"{prefix}-{key}"
        if isinstance(value, Mapping):
            _flatten(value, name, escape, out)
        elif isinstance(value, (list, tuple)):
            joined = " ".join(
                _value_text(name, item, escape) for item in value if not _is_blank(item)
            )
            out.append(f'{name}="{joined}"')
        else:
            out.append(f'{name}="{_value_text(name, value, escape)}"')


def serialize_attributes(attrs: Mapping[Any, Any] | None, escape: bool = True) -> list[str]:
    """Flatten an attribute mapping into ``name="value"`` tokens.

    Args:
        attrs: Attribute mapping, possibly nested; None is treated as empty
        escape: Escape values that are not marked safe

    Returns:
        Tokens in insertion order

    Example:
        >>> serialize_attributes({"data": {"id": 1}, "class": ["a", "b"]})
        ['data-id="1"', 'class="a b"']
    """
    out: list[str] = []
    if attrs:
        _flatten(attrs, None, escape, out)
    return out


def render_attributes(attrs: Mapping[Any, Any] | None, escape: bool = True) -> str:
    """Flatten an attribute mapping into a single space-separated string."""
    return " ".join(serialize_attributes(attrs, escape))


__all__ = ["render_attributes", "serialize_attributes"]
