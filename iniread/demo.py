"""Small demonstration of loading INI text and querying it."""

from __future__ import annotations

import argparse
import sys

from iniread.parser import IniContext, IniError

DEMO_CONTENT = (
    "\n"
    "[section1]\n"
    "  key1 = value1  \n"
    "key2=value2\n"
    ";\n"
    "; Regular comment\n"
    "[section2]\n"
    "keyA=valueA\n"
    "emptyKey=\n"
)


def main(argv: list[str] | None = None) -> int:
    """Parse the built-in sample and print a few lookups."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        ctx = IniContext(DEMO_CONTENT)
    except IniError:
        print("Initialization failed", file=sys.stderr)
        return 1

    has_section1 = "Yes" if ctx.has_section("section1") else "No"
    has_section3 = "Yes" if ctx.has_section("section3") else "No"
    print(f"Section1 exists: {has_section1}")
    print(f"Section3 exists: {has_section3}")
    value = ctx.get_value("section1", "key1", 256)
    if value is not None:
        print(f"section1.key1 = '{value}'")
    empty_has_value = "Yes" if ctx.has_value("section2", "emptyKey") else "No"
    print(f"emptyKey has value: {empty_has_value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())