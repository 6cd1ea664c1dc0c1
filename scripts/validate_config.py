#!/usr/bin/env python3
"""
Validate the 'staticsite' context of cdk.json files against the bundled schema.

Usage:
    python scripts/validate_config.py cdk.json
    python scripts/validate_config.py --schema other.schema.json cdk.json site.json
"""
import argparse
import sys

from static_site.configs.schema import validate_files


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    ap.add_argument("--schema", default=None, help="schema file (defaults to the bundled one)")
    ap.add_argument("files", nargs="+")
    args = ap.parse_args(argv)
    return 0 if validate_files(args.files, args.schema) else 1


if __name__ == "__main__":
    sys.exit(main())
