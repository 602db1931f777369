"""
Materializing a Default
=======================

When no directory holds the file, ``create_file_if_not_found()`` writes the
default into the first search directory so the next run finds it.

Features covered:
- Dataclass targets
- File creation in the highest-priority directory
- Second read picks up the created file
"""
# pylint: disable=invalid-name

import tempfile
from dataclasses import dataclass
from pathlib import Path

from cfgseek import ConfigFile


@dataclass
class PersonConfig:
    """Example target type."""

    name: str
    age: int


def main() -> None:
    """Create person.json on first run, read it back on the second."""
    print("=" * 60)
    print("Materializing a Default Example")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        config_dir = Path(tmp) / "people"
        default = PersonConfig(name="Daniel", age=32)

        first = ConfigFile("person.json").directory(config_dir).default(default).create_file_if_not_found().read()
        print(f"\nFirst run: {first.source.value} -> {first.path}")
        print(first.path.read_text(encoding="utf-8"))

        second = ConfigFile("person.json").directory(config_dir).default(default).create_file_if_not_found().read()
        print(f"\nSecond run: {second.source.value} -> {second.value}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
