"""Typed encoding and decoding of configuration values.

A :class:`ConfigCodec` pairs a :class:`~cfgseek.formats.ConfigFormat` with a
target type, giving the loader the two operations it needs:
``decode(bytes) -> T`` and ``encode(T) -> bytes``.

Supported target types:

- ``Box`` (the default): attribute access on nested mappings
- ``dict``
- dataclass types, built field by field from their type hints so nested
  dataclasses and tuple fields come back as they were written
- any class exposing ``from_dict(data)`` / ``to_dict()``
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from typing import Any, Generic, TypeVar, Union, get_args, get_origin, get_type_hints

from box import Box

from cfgseek.exceptions import DecodeError, EncodeError
from cfgseek.formats import ConfigFormat

T = TypeVar("T")

_UNION_TYPES = (Union, types.UnionType)


def _plain(data: Any) -> Any:
    if isinstance(data, Mapping):
        return {key: _plain(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_plain(item) for item in data]
    return data


def to_data(value: Any) -> Any:
    """Convert a configuration value into plain serializable data.

    Args:
        value: A Box, mapping, dataclass instance, or object with ``to_dict()``.

    Returns:
        Nested dicts, lists and scalars.

    Raises:
        TypeError: If the value has no structural representation.
    """
    if isinstance(value, Box):
        return _plain(value.to_dict())
    if isinstance(value, Mapping):
        return _plain(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _plain(dataclasses.asdict(value))
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return _plain(to_dict())
    raise TypeError(f"Cannot serialize config value of type {type(value).__name__}")


def _convert(hint: Any, value: Any) -> Any:
    """Shape decoded ``value`` after the field annotation ``hint``."""
    origin = get_origin(hint)
    args = get_args(hint)

    if origin in _UNION_TYPES:
        members = [arg for arg in args if arg is not type(None)]
        if value is None or len(members) != 1:
            return value
        return _convert(members[0], value)

    if isinstance(hint, type) and dataclasses.is_dataclass(hint) and isinstance(value, Mapping):
        return _build_dataclass(hint, value)

    if isinstance(value, list):
        if hint is tuple:
            return tuple(value)
        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return tuple(_convert(args[0], item) for item in value)
            if len(args) == len(value):
                return tuple(_convert(arg, item) for arg, item in zip(args, value))
            return tuple(value)
        if origin is list and args:
            return [_convert(args[0], item) for item in value]

    if origin is dict and len(args) == 2 and isinstance(value, Mapping):
        return {key: _convert(args[1], item) for key, item in value.items()}

    return value


def _build_dataclass(target: type[T], data: Mapping[Any, Any]) -> T:
    try:
        hints = get_type_hints(target)
    except NameError:
        # Unresolvable forward references: build from the raw data.
        hints = {}
    skipped = {field.name for field in dataclasses.fields(target) if not field.init}  # type: ignore[arg-type]
    kwargs = {key: _convert(hints.get(key, Any), value) for key, value in data.items() if key not in skipped}
    return target(**kwargs)


def from_data(target: type[T], data: Any) -> T:
    """Build a ``target`` instance from decoded data.

    Raises:
        DecodeError: If the data does not fit the target type.
    """
    if not isinstance(data, Mapping):
        raise DecodeError(f"Expected a mapping at top level, got {type(data).__name__}")

    try:
        if isinstance(target, type) and issubclass(target, Box):
            return target(data)  # type: ignore[return-value]
        if target is dict:
            return dict(data)  # type: ignore[return-value]
        from_dict = getattr(target, "from_dict", None)
        if callable(from_dict):
            return from_dict(data)  # type: ignore[no-any-return]
        if dataclasses.is_dataclass(target):
            return _build_dataclass(target, data)
        return target(**data)
    except (TypeError, ValueError, KeyError) as exc:
        raise DecodeError(f"Cannot build {getattr(target, '__name__', target)!s} from config data: {exc}") from exc


class ConfigCodec(Generic[T]):
    """Structural encoding capability for a single target type.

    Args:
        fmt: On-disk format.
        target: Type produced by :meth:`decode`. Defaults to ``Box``.

    Examples:
        >>> from cfgseek.formats import JsonFormat
        >>> codec = ConfigCodec(JsonFormat())
        >>> codec.decode(b'{"server": {"port": 8080}}').server.port
        8080
    """

    def __init__(self, fmt: ConfigFormat, target: type[T] | None = None) -> None:
        self.format = fmt
        self.target: type[Any] = target if target is not None else Box

    def decode(self, raw: bytes) -> T:
        """Decode file content into the target type.

        Raises:
            DecodeError: On syntax errors or data that does not fit the target.
        """
        return from_data(self.target, self.format.decode(raw))

    def encode(self, value: T) -> bytes:
        """Encode a value into file content.

        Raises:
            EncodeError: If the value has no structural form or holds data the
                format cannot represent.
        """
        try:
            data = to_data(value)
        except TypeError as exc:
            raise EncodeError(str(exc)) from exc
        return self.format.encode(data)

    def __repr__(self) -> str:
        return f"ConfigCodec(format={self.format.name!r}, target={self.target.__name__})"


__all__ = [
    "ConfigCodec",
    "from_data",
    "to_data",
]
