#!/usr/bin/env python3
"""
Check ledger integrity and export ballot results.

Usage:
    python ledger_audit.py ledger.duckdb                     # Integrity report
    python ledger_audit.py ledger.duckdb --export out.csv    # Report + results CSV
    python ledger_audit.py ledger.duckdb --log-file          # Also log to logs/
    python ledger_audit.py                                   # Uses BALLOT_DB_PATH
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from loguru import logger  # noqa: E402

from app.repositories import connect_read_only  # noqa: E402
from audit import results_frame, validate_ledger, write_results_csv  # noqa: E402
from settings import DB_PATH  # noqa: E402
from settings.logging import setup_logging  # noqa: E402


def run_validation(db_path: str) -> bool:
    """Print the integrity report for a ledger database."""
    conn = connect_read_only(db_path)
    result = validate_ledger(conn)
    results = results_frame(conn)
    conn.close()

    print("\n" + "=" * 60)
    print("LEDGER INTEGRITY REPORT")
    print("=" * 60)
    print(f"  Voters: {result['stats']['voters']:,}")
    print(f"  Ballots: {result['stats']['ballots']:,}")
    print(f"  Votes: {result['stats']['votes']:,}")
    print(f"  Votes by unregistered voters: {result['stats']['votes_by_unregistered']:,}")

    if results.height:
        print()
        print(results.select("ballot_id", "option", "count", "total_votes"))

    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ Tallies consistent")
    else:
        print("❌ Tally mismatch found")
    print("=" * 60 + "\n")

    return result["valid"]


def main():
    args = sys.argv[1:]

    log_file = "--log-file" in args
    args = [a for a in args if a != "--log-file"]
    setup_logging(level="INFO", to_file=log_file)

    export_path = None
    if "--export" in args:
        i = args.index("--export")
        if i + 1 >= len(args):
            print(__doc__)
            sys.exit(1)
        export_path = args[i + 1]
        args = args[:i] + args[i + 2 :]

    db_path = args[0] if args else DB_PATH
    if db_path == ":memory:" or not Path(db_path).exists():
        logger.error("Ledger database not found: {}", db_path)
        print(__doc__)
        sys.exit(1)

    logger.info("Auditing {}", db_path)
    valid = run_validation(db_path)

    if export_path:
        conn = connect_read_only(db_path)
        write_results_csv(conn, export_path)
        conn.close()

    sys.exit(0 if valid else 2)


if __name__ == "__main__":
    main()
