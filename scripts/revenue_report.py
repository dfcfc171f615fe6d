import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))
from database import session_scope  # noqa: E402
from revenue import resolve_period, summarize_revenue  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Print gateway commission and net revenue")
    parser.add_argument("--range", dest="date_range", default="30", help='days to look back, or "ytd"')
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    start, end = resolve_period(args.date_range)
    with session_scope() as db:
        summary = summarize_revenue(db, start, end)

    print(f"FY {summary['financial_year']}  {start:%Y-%m-%d} .. {end:%Y-%m-%d}")
    for payment_type, totals in summary["by_type"].items():
        print(
            f"  {payment_type:<24} {totals['count']:>5}  gross ₹{totals['total_gross']}"
            f"  commission ₹{totals['total_commission']}  net ₹{totals['total_net']}"
        )
    print(
        f"Total {summary['count']} payments: gross ₹{summary['total_gross']}"
        f"  commission ₹{summary['total_commission']}  net ₹{summary['total_net']}"
    )


if __name__ == "__main__":
    main()
