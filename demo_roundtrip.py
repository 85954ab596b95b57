#!/usr/bin/env python3
"""
Demo: typed values through YAML text and back.

Encodes a small service map, prints the YAML, then decodes it into
strictly typed targets to show grammar and range checks.
"""

from typing import Dict, List

from yamlconv import UInt8, decode, load
from yamlconv.examples import Endpoint, build_example_services, install
from yamlconv.registry import default_registry
from yamlconv.serialization import from_yaml, to_yaml


def main():
    install(default_registry)
    services = build_example_services()
    services_type = Dict[str, List[Endpoint]]

    print("=" * 80)
    print("ROUND-TRIP DEMO")
    print("=" * 80)

    text = to_yaml(services, services_type)
    print(text)

    restored, ok = from_yaml(text, services_type)
    print(f"Decoded back: ok={ok}, equal={restored == services}")

    print("\n" + "-" * 80)
    for raw in ("42", "0o52", "0x2a", "-0x2a", "300", "5."):
        value, ok = decode(load(raw), UInt8)
        print(f"{raw!r:>8} as UInt8 -> ok={ok!s:<5} value={value}")

    print("\n" + "-" * 80)
    print(to_yaml([5.0, 0.1, float("inf"), float("nan")]))


if __name__ == "__main__":
    main()
