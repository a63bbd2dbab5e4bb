#!/usr/bin/env python3
"""
Regenerate test fixtures from current nflag implementation.

Usage:
    python scripts/regenerate_fixtures.py [fixture_name]

If fixture_name is provided, only that fixture is regenerated.
Otherwise, all fixtures are regenerated.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from nflag import run


FIXTURES_DIR = Path(__file__).parent.parent / "test" / "fixtures"


def regenerate_fixture(fixture_dir: Path) -> None:
    """Regenerate a fixture (args.json -> expected.json)."""
    args_file = fixture_dir / "args.json"

    if not args_file.exists():
        print(f"  Skipping {fixture_dir.name}: no args.json")
        return

    args = json.loads(args_file.read_text())
    exit_code, output = run(args)

    expected = {"exit_code": exit_code, "stderr": output}
    (fixture_dir / "expected.json").write_text(json.dumps(expected, indent=2) + "\n")

    print(f"  {fixture_dir.name}: exit {exit_code}")


def main() -> int:
    """Main entry point."""
    target = sys.argv[1] if len(sys.argv) > 1 else None

    print("Regenerating fixtures...")

    for fixture_dir in sorted(FIXTURES_DIR.iterdir()):
        if not fixture_dir.is_dir():
            continue

        if target and fixture_dir.name != target:
            continue

        regenerate_fixture(fixture_dir)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
