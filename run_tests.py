#!/usr/bin/env python
"""Test runner for Steer Stream SDK."""

import sys
import subprocess
import argparse


def main():
    """Run tests with various options."""
    parser = argparse.ArgumentParser(description="Run Steer Stream SDK tests")
    parser.add_argument("--unit", action="store_true", help="Run unit tests only")
    parser.add_argument("--integration", action="store_true", help="Run integration tests only")
    parser.add_argument("--coverage", action="store_true", help="Generate coverage report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args()

    cmd = ["pytest"]

    if args.unit:
        cmd.append("tests/unit")
    elif args.integration:
        cmd.extend(["tests/integration", "-m", "integration"])

    if args.verbose:
        cmd.append("-vv")

    if args.coverage:
        cmd.extend([
            "--cov=steer_stream_sdk",
            "--cov-report=term-missing",
            "--cov-report=html"
        ])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=".")

    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
