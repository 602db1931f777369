"""
Basic Configuration Loading
============================

This example searches two directories for ``app.yml`` and reads the first
match, falling back to a default when neither has it.

Features covered:
- Building a request with ``ConfigFile`` chained calls
- Priority order between search directories
- Provenance of the loaded value
"""
# pylint: disable=invalid-name
# Reason: Example files use numbered naming convention (01_basic_usage.py)

import tempfile
from pathlib import Path

from cfgseek import ConfigFile


def main() -> None:
    """Load the same file name from two candidate directories."""
    print("=" * 60)
    print("Basic Configuration Loading Example")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        user_dir = Path(tmp) / "user"
        system_dir = Path(tmp) / "system"
        system_dir.mkdir()
        (system_dir / "app.yml").write_text("app:\n  name: system\n  port: 8080\n", encoding="utf-8")

        loaded = ConfigFile("app.yml").directory(user_dir).directory(system_dir).read()
        print(f"\nApp Name: {loaded.value.app.name}")
        print(f"Port: {loaded.value.app.port}")
        print(f"Source: {loaded.source.value} ({loaded.path})")

        # A file in the higher-priority directory wins
        user_dir.mkdir()
        (user_dir / "app.yml").write_text("app:\n  name: user\n  port: 9090\n", encoding="utf-8")

        loaded = ConfigFile("app.yml").directory(user_dir).directory(system_dir).read()
        print(f"\nApp Name: {loaded.value.app.name}")
        print(f"Source: {loaded.source.value} ({loaded.path})")

        # Nothing found anywhere: the default is returned as-is
        loaded = ConfigFile("other.yml").directory(user_dir).default({"app": {"name": "fallback"}}).read()
        print(f"\nApp Name: {loaded.value['app']['name']}")
        print(f"Source: {loaded.source.value}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
