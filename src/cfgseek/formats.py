"""Serialization formats for configuration files.

A format turns bytes into plain data (dicts, lists, scalars) and back.
It knows nothing about target types; see :mod:`cfgseek.codec` for that.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml

from cfgseek.exceptions import DecodeError, EncodeError


@runtime_checkable
class ConfigFormat(Protocol):
    """Protocol for on-disk configuration formats.

    Implementations must be pure and deterministic: ``decode(encode(x)) == x``
    for every value the format supports.
    """

    name: str
    suffixes: tuple[str, ...]

    def decode(self, raw: bytes) -> Any:
        """Parse raw file content.

        Raises:
            DecodeError: If the content is not valid for this format.
        """
        ...

    def encode(self, data: Any) -> bytes:
        """Serialize plain data to file content.

        Raises:
            EncodeError: If the data holds values this format cannot represent.
        """
        ...


class JsonFormat:
    """JSON files, pretty-printed with two-space indentation."""

    name = "json"
    suffixes = (".json",)

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def decode(self, raw: bytes) -> Any:
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DecodeError(f"Invalid JSON: {exc}") from exc

    def encode(self, data: Any) -> bytes:
        try:
            text = json.dumps(data, indent=self.indent, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"Cannot encode as JSON: {exc}") from exc
        return text.encode("utf-8")


class YamlFormat:
    """YAML files, loaded with ``yaml.safe_load``.

    An empty document decodes to ``None``.
    """

    name = "yaml"
    suffixes = (".yml", ".yaml")

    def decode(self, raw: bytes) -> Any:
        try:
            return yaml.safe_load(raw.decode("utf-8"))
        except (UnicodeDecodeError, yaml.YAMLError) as exc:
            raise DecodeError(f"Invalid YAML: {exc}") from exc

    def encode(self, data: Any) -> bytes:
        try:
            text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
        except yaml.YAMLError as exc:
            raise EncodeError(f"Cannot encode as YAML: {exc}") from exc
        return text.encode("utf-8")


_FORMATS: dict[str, ConfigFormat] = {
    "json": JsonFormat(),
    "yaml": YamlFormat(),
}
_FORMATS["yml"] = _FORMATS["yaml"]

DEFAULT_FORMAT = _FORMATS["json"]


def get_format(name: str) -> ConfigFormat:
    """Look up a registered format by name.

    Args:
        name: Format name (``json``, ``yaml`` or ``yml``), case-insensitive.

    Raises:
        ValueError: If no format is registered under that name.
    """
    try:
        return _FORMATS[name.lower()]
    except KeyError:
        choices = ", ".join(sorted(_FORMATS))
        raise ValueError(f"Unsupported config format '{name}'. Choose from: {choices}") from None


def format_for_path(path: str | Path) -> ConfigFormat:
    """Pick a format from a file suffix.

    Files without a known suffix are treated as JSON.

    Examples:
        >>> format_for_path("app.yml").name
        'yaml'
        >>> format_for_path("apprc").name
        'json'
    """
    suffix = Path(path).suffix.lower()
    for fmt in _FORMATS.values():
        if suffix in fmt.suffixes:
            return fmt
    return DEFAULT_FORMAT


__all__ = [
    "DEFAULT_FORMAT",
    "ConfigFormat",
    "JsonFormat",
    "YamlFormat",
    "format_for_path",
    "get_format",
]
