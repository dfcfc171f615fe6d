import logging
import re
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.orm import Session

from finance import calculate_bulk_commission, quantize_cents, to_decimal
from financial_year import get_financial_year_label
from models import Payment, PaymentStatus

logger = logging.getLogger(__name__)

DEFAULT_RANGE_DAYS = 30
_LEADING_INT = re.compile(r"[+-]?\d+")


def resolve_period(date_range: Optional[str], now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Translate a dashboard range (``"ytd"`` or a number of days) into bounds.

    ``"ytd"`` starts on 1 January of the current calendar year. A number is
    read from its leading digits (``"7abc"`` is 7 days, ``"1.5"`` is 1 day);
    anything else, or a non-positive count, falls back to the last 30 days.
    """
    now = now or datetime.utcnow()
    value = str(date_range or "").strip().lower()
    if value == "ytd":
        return datetime(now.year, 1, 1), now
    match = _LEADING_INT.match(value)
    days = int(match.group()) if match else DEFAULT_RANGE_DAYS
    if days <= 0:
        days = DEFAULT_RANGE_DAYS
    try:
        return now - timedelta(days=days), now
    except OverflowError:
        return datetime.min, now


def calculate_revenue_growth(current: Any, previous: Any) -> Decimal:
    """Percent change from ``previous`` to ``current``, rounded to 2 places."""
    curr = to_decimal(current) or Decimal("0")
    prev = to_decimal(previous) or Decimal("0")
    if prev > 0:
        growth = (curr - prev) / prev * 100
        return quantize_cents(growth)
    return Decimal("100") if curr > 0 else Decimal("0")


def summarize_revenue(db: Session, period_start: datetime, period_end: datetime) -> Dict[str, Any]:
    """Gross, gateway commission and net revenue of successful payments.

    Args:
        db: Database session.
        period_start: Start of the window (inclusive).
        period_end: End of the window (inclusive).

    Returns:
        A dict with overall ``total_gross``/``total_commission``/``total_net``,
        the payment ``count``, a ``by_type`` breakdown keyed by payment type and
        the window bounds. Commission is charged on each aggregate, so the
        per-type commissions need not add up to the overall one.
    """
    payments = (
        db.query(Payment)
        .filter(
            Payment.status == PaymentStatus.SUCCESS.value,
            Payment.created_at >= period_start,
            Payment.created_at <= period_end,
        )
        .order_by(Payment.created_at)
        .all()
    )

    grouped: Dict[str, list] = {}
    for payment in payments:
        grouped.setdefault(payment.payment_type or "OTHER", []).append(payment)

    by_type = {}
    for payment_type, items in sorted(grouped.items()):
        by_type[payment_type] = {"count": len(items), **calculate_bulk_commission(items)}

    summary = {
        "period_start": period_start,
        "period_end": period_end,
        "financial_year": get_financial_year_label(period_end),
        "count": len(payments),
        "by_type": by_type,
        **calculate_bulk_commission(payments),
    }
    logger.info(
        "Revenue %s..%s: %d payments, gross %s, net %s",
        period_start.date(),
        period_end.date(),
        summary["count"],
        summary["total_gross"],
        summary["total_net"],
    )
    return summary
