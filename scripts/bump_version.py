#!/usr/bin/env python3
"""
Bump the tinystore version in pyproject.toml and tinystore/__init__.py.

Usage:
    python scripts/bump_version.py <new_version>

Example:
    python scripts/bump_version.py 0.2.0
"""

import argparse
import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

VERSION_FILES = [
    (ROOT / "pyproject.toml", r'^version\s*=\s*".*?"$', 'version = "{}"'),
    (ROOT / "tinystore" / "__init__.py", r'^__version__\s*=\s*".*?"$', '__version__ = "{}"'),
]


def replace_version(path: Path, pattern: str, template: str, new_version: str) -> None:
    """Rewrite the first line of `path` matching `pattern`, or exit."""
    if not path.exists():
        print(f"Error: {path} not found")
        sys.exit(1)

    content = path.read_text()
    if not re.search(pattern, content, re.MULTILINE):
        print(f"Error: Could not find version pattern in {path}")
        sys.exit(1)

    updated = re.sub(
        pattern, template.format(new_version), content, count=1, flags=re.MULTILINE
    )
    path.write_text(updated)
    print(f"Updated {path.relative_to(ROOT)} to {new_version}")


def validate_version_format(version: str) -> bool:
    return bool(re.match(r"^\d+\.\d+\.\d+$", version))


def main():
    parser = argparse.ArgumentParser(description="Bump version in tinystore project")
    parser.add_argument("version", help="New version number (format: x.y.z)")
    args = parser.parse_args()

    if not validate_version_format(args.version):
        print(f"Error: Invalid version format '{args.version}'. Expected format: x.y.z")
        sys.exit(1)

    for path, pattern, template in VERSION_FILES:
        replace_version(path, pattern, template, args.version)
    print(f"\nVersion successfully bumped to {args.version}")


if __name__ == "__main__":
    main()
