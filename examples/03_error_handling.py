"""
Error Handling
==============

This example shows the typed errors raised by a read.

Features covered:
- NoConfigAndNoDefaultError handling
- MalformedConfigError (a broken file is never replaced by the default)
- InvalidRequestError (creation requested without a default)
- Catching every cfgseek error with CfgseekError
"""
# pylint: disable=invalid-name

import tempfile
from pathlib import Path

from cfgseek import (
    CfgseekError,
    ConfigFile,
    InvalidRequestError,
    MalformedConfigError,
    NoConfigAndNoDefaultError,
)


def example_not_found(tmp: Path) -> None:
    """Demonstrate a missing file without default."""
    print("\n📍 Example 1: Not Found, No Default")
    print("-" * 60)

    try:
        ConfigFile("missing.json").directory(tmp).read()
    except NoConfigAndNoDefaultError as e:
        print("✅ Caught NoConfigAndNoDefaultError:")
        print(f"   {e}")


def example_malformed(tmp: Path) -> None:
    """Demonstrate a malformed file with a valid default."""
    print("\n📍 Example 2: Malformed File")
    print("-" * 60)

    (tmp / "broken.json").write_text("{not json", encoding="utf-8")
    try:
        ConfigFile("broken.json").directory(tmp).default({"ok": True}).read()
    except MalformedConfigError as e:
        print("✅ Caught MalformedConfigError:")
        print(f"   path={e.path}")
        print(f"   cause={e.cause}")


def example_invalid_request(tmp: Path) -> None:
    """Demonstrate creation without a default."""
    print("\n📍 Example 3: Invalid Request")
    print("-" * 60)

    try:
        ConfigFile("app.json").directory(tmp).create_file_if_not_found().read()
    except InvalidRequestError as e:
        print("✅ Caught InvalidRequestError:")
        print(f"   {e}")


def example_catch_all(tmp: Path) -> None:
    """Demonstrate catching all cfgseek errors."""
    print("\n📍 Example 4: Catch All CfgseekError")
    print("-" * 60)

    try:
        ConfigFile("missing.json").directory(tmp).read()
    except CfgseekError as e:
        print("✅ Caught generic CfgseekError:")
        print(f"   Type: {type(e).__name__}")


def main() -> None:
    """Run all error handling examples."""
    print("=" * 60)
    print("Error Handling Examples")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp_name:
        tmp = Path(tmp_name)
        example_not_found(tmp)
        example_malformed(tmp)
        example_invalid_request(tmp)
        example_catch_all(tmp)

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
