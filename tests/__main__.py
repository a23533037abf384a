#!/usr/bin/env python3
"""
Test runner for steer-stream-sdk.

This module allows running the test suite using:
    python -m tests

Arguments are passed through to pytest.
"""

import sys
from pathlib import Path

import pytest


def main():
    """Run the test suite using pytest."""
    tests_dir = Path(__file__).parent

    args = [
        str(tests_dir),
        "-v",
        "--tb=short",
    ]

    # User-provided arguments replace the defaults
    if len(sys.argv) > 1:
        args = sys.argv[1:]

    exit_code = pytest.main(args)

    if exit_code == 0:
        print("\n✅ All tests passed!")
    else:
        print(f"\n❌ Tests failed with exit code: {exit_code}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
