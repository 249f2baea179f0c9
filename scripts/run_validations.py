#!/usr/bin/env python3
"""
Run source validations over every known survey export and print a clear report.

Usage (from project root):
  python scripts/run_validations.py
  python scripts/run_validations.py --source SYEP.csv --source BGC.csv
  python scripts/run_validations.py --json report.json

Validations: source loadable, row count, header convention, catalog question coverage.
"""
import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

from survey_analytics import config
from survey_analytics.validations import run_all_validations


def main():
    parser = argparse.ArgumentParser(description="Run validations over survey exports")
    parser.add_argument("--source", action="append", help="Source CSV name (repeatable, default: all known)")
    parser.add_argument("--json", type=str, default="", help="Write full report to this JSON file")
    parser.add_argument("--min-rows", type=int, default=1, help="Min rows required per source (default 1)")
    args = parser.parse_args()

    sources = args.source or config.get_available_sources()
    run_at = datetime.now(timezone.utc).isoformat()
    print("=" * 60)
    print("SOURCE VALIDATIONS")
    print("=" * 60)
    print(f"Run at: {run_at}")
    print(f"CSV root: {config.CSV_ROOT}\n")

    report = {"run_at": run_at, "sources": {}}
    failed_sources = []
    for source in sources:
        results = run_all_validations(source, min_rows=args.min_rows)
        passed = sum(1 for r in results if r.get("passed"))
        print(f"{config.get_friendly_name(source)} ({source})")
        print("-" * 40)
        for r in results:
            status = "PASS" if r.get("passed") else "FAIL"
            symbol = "✓" if r.get("passed") else "✗"
            print(f"  {symbol} [{status}] {r['name']}: {r['message']}")
        print(f"  {passed}/{len(results)} passed\n")
        if passed != len(results):
            failed_sources.append(source)
        report["sources"][source] = {"passed": passed, "total": len(results), "results": results}

    print("SUMMARY")
    print("-" * 40)
    print(f"  Sources: {len(sources) - len(failed_sources)}/{len(sources)} passed all validations")
    if failed_sources:
        print(f"  Failing: {', '.join(failed_sources)}")
    print("=" * 60)

    if args.json:
        out_path = Path(args.json)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w") as f:
            json.dump(report, f, indent=2, default=str)
        print(f"Report written to {out_path}")

    return 0 if not failed_sources else 1


if __name__ == "__main__":
    sys.exit(main())
