import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))
from database import session_scope  # noqa: E402
from payments_migration import migrate_coach_payments  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Link coach payments to their user accounts")
    parser.add_argument("--dry-run", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    with session_scope() as db:
        result = migrate_coach_payments(db, dry_run=args.dry_run)
    print(
        f"Migrated {result['migrated']} of {result['found']} payments"
        f" ({result['skipped']} skipped){' [dry run]' if args.dry_run else ''}"
    )


if __name__ == "__main__":
    main()
