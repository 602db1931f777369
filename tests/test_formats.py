"""Tests for cfgseek.formats and cfgseek.codec."""

# pylint: disable=missing-function-docstring

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import pytest
from box import Box

from cfgseek.codec import ConfigCodec, from_data, to_data
from cfgseek.exceptions import DecodeError, EncodeError
from cfgseek.formats import (
    DEFAULT_FORMAT,
    ConfigFormat,
    JsonFormat,
    YamlFormat,
    format_for_path,
    get_format,
)


@dataclass
class Endpoint:
    host: str
    ports: list[int] = field(default_factory=list)


@dataclass
class Listener:
    port: int
    tags: tuple[str, ...] = ()


@dataclass
class Service:
    name: str
    listener: Listener
    backup: Listener | None = None
    replicas: list[Listener] = field(default_factory=list)
    weights: tuple[int, int] = (1, 1)


# ============================================================================
# Formats
# ============================================================================


class TestJsonFormat:
    """Tests for JsonFormat."""

    def test_encode_is_pretty_without_trailing_newline(self) -> None:
        assert JsonFormat().encode({"name": "Daniel", "age": 32}) == b'{\n  "name": "Daniel",\n  "age": 32\n}'

    def test_encode_keeps_unicode(self) -> None:
        assert JsonFormat().encode({"city": "Orléans"}).decode("utf-8") == '{\n  "city": "Orléans"\n}'

    def test_decode(self) -> None:
        assert JsonFormat().decode(b'{"a": [1, 2]}') == {"a": [1, 2]}

    @pytest.mark.parametrize("raw", [b"", b"{not json", b"\xff\xfe"], ids=["empty", "syntax", "bad-utf8"])
    def test_decode_errors(self, raw: bytes) -> None:
        with pytest.raises(DecodeError):
            JsonFormat().decode(raw)

    @pytest.mark.parametrize("value", [datetime(2024, 1, 1), {1, 2}], ids=["datetime", "set"])
    def test_encode_unsupported_value(self, value: Any) -> None:
        with pytest.raises(EncodeError, match="Cannot encode as JSON"):
            JsonFormat().encode({"when": value})


class TestYamlFormat:
    """Tests for YamlFormat."""

    def test_decode(self) -> None:
        assert YamlFormat().decode(b"a:\n  b: [1, 2]\n") == {"a": {"b": [1, 2]}}

    def test_empty_document_is_none(self) -> None:
        assert YamlFormat().decode(b"") is None

    def test_encode_keeps_key_order(self) -> None:
        assert YamlFormat().encode({"z": 1, "a": 2}) == b"z: 1\na: 2\n"

    def test_decode_error(self) -> None:
        with pytest.raises(DecodeError, match="Invalid YAML"):
            YamlFormat().decode(b"a: [1, 2\n")

    def test_encode_unsupported_value(self) -> None:
        with pytest.raises(EncodeError, match="Cannot encode as YAML"):
            YamlFormat().encode({"handle": object()})

    def test_encode_dates(self) -> None:
        assert YamlFormat().encode({"when": datetime(2024, 1, 1)}) == b"when: 2024-01-01 00:00:00\n"


def test_formats_satisfy_protocol() -> None:
    assert isinstance(JsonFormat(), ConfigFormat)
    assert isinstance(YamlFormat(), ConfigFormat)


@pytest.mark.parametrize(
    "name, expected",
    [("json", "json"), ("JSON", "json"), ("yaml", "yaml"), ("yml", "yaml")],
)
def test_get_format(name: str, expected: str) -> None:
    assert get_format(name).name == expected


def test_get_format_unknown() -> None:
    with pytest.raises(ValueError, match="Choose from"):
        get_format("ini")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("app.json", "json"),
        ("app.yml", "yaml"),
        ("app.YAML", "yaml"),
        ("apprc", "json"),
        ("app.conf", "json"),
    ],
)
def test_format_for_path(path: str, expected: str) -> None:
    assert format_for_path(path).name == expected


def test_default_format_is_json() -> None:
    assert DEFAULT_FORMAT.name == "json"


# ============================================================================
# Codec
# ============================================================================


class TestToData:
    """Tests for to_data()."""

    def test_box(self) -> None:
        data = to_data(Box({"a": {"b": 1}}))
        assert data == {"a": {"b": 1}}
        assert type(data["a"]) is dict

    def test_dataclass(self) -> None:
        assert to_data(Endpoint(host="db", ports=[5432])) == {"host": "db", "ports": [5432]}

    def test_tuples_become_lists(self) -> None:
        assert to_data({"a": (1, 2)}) == {"a": [1, 2]}

    def test_unsupported(self) -> None:
        with pytest.raises(TypeError, match="Cannot serialize"):
            to_data(42)

    def test_dataclass_type_is_not_a_value(self) -> None:
        with pytest.raises(TypeError):
            to_data(Endpoint)


class TestFromData:
    """Tests for from_data()."""

    def test_box(self) -> None:
        value = from_data(Box, {"a": {"b": 1}})
        assert value.a.b == 1

    def test_dict(self) -> None:
        assert from_data(dict, {"a": 1}) == {"a": 1}

    def test_dataclass(self) -> None:
        assert from_data(Endpoint, {"host": "db"}) == Endpoint(host="db")

    def test_missing_field(self) -> None:
        with pytest.raises(DecodeError, match="Cannot build Endpoint"):
            from_data(Endpoint, {"ports": [1]})

    def test_unknown_field(self) -> None:
        with pytest.raises(DecodeError, match="Cannot build Endpoint"):
            from_data(Endpoint, {"host": "db", "user": "admin"})

    def test_nested_dataclass(self) -> None:
        data = {
            "name": "api",
            "listener": {"port": 80, "tags": ["public"]},
            "backup": {"port": 8080},
            "replicas": [{"port": 81}, {"port": 82}],
            "weights": [2, 3],
        }

        value = from_data(Service, data)

        assert value == Service(
            name="api",
            listener=Listener(port=80, tags=("public",)),
            backup=Listener(port=8080),
            replicas=[Listener(port=81), Listener(port=82)],
            weights=(2, 3),
        )

    def test_optional_nested_dataclass_left_empty(self) -> None:
        value = from_data(Service, {"name": "api", "listener": {"port": 80}, "backup": None})
        assert value.backup is None
        assert value.listener == Listener(port=80)

    def test_nested_mismatch(self) -> None:
        with pytest.raises(DecodeError, match="Cannot build Service"):
            from_data(Service, {"name": "api", "listener": {"host": "db"}})

    @pytest.mark.parametrize("data", [None, [1, 2], "text", 3])
    def test_top_level_must_be_mapping(self, data: Any) -> None:
        with pytest.raises(DecodeError, match="Expected a mapping"):
            from_data(Box, data)


class TestConfigCodec:
    """Tests for ConfigCodec."""

    def test_defaults_to_box(self) -> None:
        codec = ConfigCodec(JsonFormat())
        assert codec.target is Box
        assert codec.decode(b'{"server": {"port": 8080}}').server.port == 8080

    def test_encode_then_decode_dataclass(self) -> None:
        codec = ConfigCodec(YamlFormat(), Endpoint)
        value = Endpoint(host="db", ports=[1, 2])
        assert codec.decode(codec.encode(value)) == value

    @pytest.mark.parametrize("fmt", [JsonFormat(), YamlFormat()], ids=["json", "yaml"])
    def test_encode_then_decode_nested_dataclass(self, fmt: ConfigFormat) -> None:
        codec = ConfigCodec(fmt, Service)
        value = Service(
            name="api",
            listener=Listener(port=443, tags=("tls", "public")),
            replicas=[Listener(port=444)],
            weights=(5, 1),
        )

        assert codec.decode(codec.encode(value)) == value

    def test_encode_unsupported_value(self) -> None:
        with pytest.raises(EncodeError, match="Cannot serialize"):
            ConfigCodec(JsonFormat()).encode(42)  # type: ignore[arg-type]

    def test_encode_value_the_format_rejects(self) -> None:
        with pytest.raises(EncodeError):
            ConfigCodec(JsonFormat(), dict).encode({"when": datetime(2024, 1, 1)})

    def test_syntax_error_is_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            ConfigCodec(JsonFormat(), Endpoint).decode(b"{")

    def test_repr(self) -> None:
        assert repr(ConfigCodec(YamlFormat(), Endpoint)) == "ConfigCodec(format='yaml', target=Endpoint)"
