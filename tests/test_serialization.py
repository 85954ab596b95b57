"""
Tests for YAML/JSON text round-trips and the example user type.

These tests ensure values survive value -> node -> text -> node -> value
using the helpers in `yamlconv.serialization`.
"""

import math
from typing import Dict, List, Tuple

import yaml

from yamlconv.examples import Endpoint, build_example_services, install
from yamlconv.registry import Registry
from yamlconv.serialization import from_json, from_yaml, to_yaml
from yamlconv.types import Array, Char, Float32, Int8, UInt16


def build_sample_config():
    return {
        "name": "edge",
        "ports": [80, 443],
        "ratio": 0.75,
        "scale": 2.0,
        "enabled": True,
        "blob": b"\x00\x01binary\xff",
    }


def test_yaml_roundtrip_of_typed_values():
    type_ = Dict[str, List[Tuple[Int8, Float32]]]
    value = {"a": [(1, 0.5), (-128, 2.0)], "b": []}
    assert from_yaml(to_yaml(value, type_), type_) == (value, True)


def test_float_text_disambiguated():
    text = to_yaml([5.0, 5])
    assert "5." in text
    assert from_yaml(text, List[float]) == ([5.0, 5.0], True)
    assert from_yaml(text, List[int]).ok is False


def test_integral_floats_read_back_as_floats_by_plain_yaml():
    assert yaml.safe_load(to_yaml(10.0)) == 10.0
    assert type(yaml.safe_load(to_yaml(10.0))) is float
    loaded = yaml.safe_load(to_yaml([150000.0, 1e300, 1e-7]))
    assert loaded == [150000.0, 1e300, 1e-7]
    assert all(type(item) is float for item in loaded)


def test_special_floats_through_text():
    value, ok = from_yaml(to_yaml([math.inf, -math.inf, math.nan]), List[float])
    assert ok
    assert value[0] == math.inf
    assert value[1] == -math.inf
    assert math.isnan(value[2])


def test_mixed_map_through_text():
    config = build_sample_config()
    text = to_yaml(config)
    assert from_yaml(text, Dict[str, str]).ok is False
    assert from_yaml(text, Dict[str, int]).ok is False


def test_binary_through_text():
    data = bytes(range(256))
    assert from_yaml(to_yaml(data), bytes) == (data, True)


def test_fixed_array_and_char():
    assert from_yaml("[a, b, c]", Array[Char, 3]) == (["a", "b", "c"], True)
    assert from_yaml("[a, bc, d]", Array[Char, 3]).ok is False


def test_json_input():
    value, ok = from_json('{"ports": [80, 8080], "hosts": ["a", "b"]}', Dict[str, List[str]])
    assert ok
    assert value == {"ports": ["80", "8080"], "hosts": ["a", "b"]}
    assert from_json('{"ports": [80, 70000]}', Dict[str, List[UInt16]]).ok is False


def test_empty_document_is_null():
    assert from_yaml("", None) == (None, True)


def test_example_services_roundtrip():
    registry = install(Registry())
    services = build_example_services()
    type_ = Dict[str, List[Endpoint]]
    text = to_yaml(services, type_, registry)
    assert from_yaml(text, type_, registry) == (services, True)


def test_example_endpoint_defaults():
    registry = install(Registry())
    value, ok = from_yaml("host: example.org\nport: 0x50\n", Endpoint, registry)
    assert ok
    assert value == Endpoint(host="example.org", port=80, tls=False, tags=[])
    assert type(value.port) is int


def test_example_endpoint_rejects_bad_port():
    registry = install(Registry())
    assert from_yaml("host: h\nport: 70000\n", Endpoint, registry).ok is False
    assert from_yaml("host: h\n", Endpoint, registry).ok is False
    assert from_yaml("host: h\nport: 1\nextra: x\n", Endpoint, registry).ok is False


def test_install_is_idempotent():
    registry = Registry()
    assert install(install(registry)) is registry
