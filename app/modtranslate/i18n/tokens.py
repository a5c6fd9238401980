"""Token source normalization and placeholder substitution.

Token sources are normalized once, at the call boundary, into a canonical
tuple of ``(name, value)`` string pairs. Supported sources:

- a mapping (``{"name": "Abigail"}``)
- an iterable of ``(name, value)`` pairs
- a dataclass, NamedTuple or pydantic model (fields act as token names)
- any other object with public attributes (``vars()`` acts as the mapping)

Placeholders use ``{{name}}`` syntax. Whitespace inside the braces is ignored
and names match case-insensitively. Placeholders without a matching token are
left in the text verbatim.
"""

import dataclasses
import re
from collections.abc import Iterable, Mapping
from enum import Enum
from functools import singledispatch
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel

from modtranslate.i18n.errors import ConfigurationError

TokenPairs = Tuple[Tuple[str, str], ...]

TOKEN_PATTERN = re.compile(r"\{\{\s*([\w.\-]+)\s*\}\}")


@singledispatch
def normalize_tokens(source: Any) -> Optional[TokenPairs]:
    """Normalize a token source into canonical name/value pairs.

    Args:
        source: Mapping, iterable of pairs, dataclass, NamedTuple, pydantic
            model, or plain object. ``None`` means "no tokens".

    Returns:
        Tuple of ``(name, value)`` pairs, or None if source is None.

    Raises:
        ConfigurationError: If the source cannot be read as flat name/value
            pairs or a value is not a scalar.
    """
    if isinstance(source, (str, bytes, bytearray)):
        raise ConfigurationError(
            f"Token source must be a mapping, pairs, or a record, not {type(source).__name__}"
        )

    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        return _to_pairs(
            (f.name, getattr(source, f.name)) for f in dataclasses.fields(source)
        )

    if _is_named_tuple(source):
        return _to_pairs(source._asdict().items())

    if isinstance(source, Iterable):
        return _to_pairs(_iter_pairs(source))

    if hasattr(source, "__dict__"):
        return _to_pairs(
            (name, value)
            for name, value in vars(source).items()
            if not name.startswith("_")
        )

    raise ConfigurationError(
        f"Token source of type {type(source).__name__} has no token names"
    )


@normalize_tokens.register(type(None))
def _(source: None) -> None:
    return None


@normalize_tokens.register(Mapping)
def _(source: Mapping) -> TokenPairs:
    return _to_pairs(source.items())


@normalize_tokens.register(BaseModel)
def _(source: BaseModel) -> TokenPairs:
    return _to_pairs(source.model_dump().items())


def interpolate(text: str, tokens: Optional[TokenPairs]) -> str:
    """Replace ``{{name}}`` placeholders in text with token values.

    Args:
        text: Raw translation text.
        tokens: Normalized token pairs (may be None or empty).

    Returns:
        Text with every matched placeholder substituted.
    """
    if not tokens or "{{" not in text:
        return text

    lookup = token_lookup(tokens)

    def _replace(match: "re.Match[str]") -> str:
        return lookup.get(match.group(1).lower(), match.group(0))

    return TOKEN_PATTERN.sub(_replace, text)


def token_lookup(tokens: TokenPairs) -> Dict[str, str]:
    """Build a case-insensitive name -> value lookup (last name wins)."""
    return {name.strip().lower(): value for name, value in tokens}


def _iter_pairs(source: Iterable):
    for item in source:
        if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
            raise ConfigurationError(
                f"Token pairs must be (name, value) items, got {item!r}"
            )
        pair = tuple(item)
        if len(pair) != 2:
            raise ConfigurationError(
                f"Token pairs must have exactly two items, got {len(pair)}"
            )
        yield pair


def _to_pairs(items) -> TokenPairs:
    pairs = []
    for name, value in items:
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"Token name must be a non-empty string: {name!r}")
        pairs.append((name, _render_value(name, value)))
    return tuple(pairs)


def _render_value(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return str(value)
    if _is_non_scalar(value):
        raise ConfigurationError(
            f"Token '{name}' has a non-scalar value of type {type(value).__name__}"
        )
    return str(value)


def _is_named_tuple(source: Any) -> bool:
    return isinstance(source, tuple) and hasattr(source, "_asdict")


def _is_non_scalar(value: Any) -> bool:
    if isinstance(value, (Mapping, bytes, bytearray, BaseModel)):
        return True
    if dataclasses.is_dataclass(value):
        return True
    if isinstance(value, Iterable):
        return True
    # anything that would be read as a record at the top level
    return any(not name.startswith("_") for name in getattr(value, "__dict__", ()))
