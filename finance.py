import os
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Dict, Iterable, Optional

# Razorpay charges 2% plus 18% GST on the commission (~2.36%); 2.5% is used
# as a rounded-up approximation.
COMMISSION_RATE = Decimal(os.getenv("GATEWAY_COMMISSION_RATE", "0.025"))

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
# Beyond float range; treated like infinity.
MAX_EXPONENT = 308


def to_decimal(value: Any) -> Optional[Decimal]:
    """Coerce a loosely typed amount to ``Decimal``.

    ``None`` and blank strings count as ``0``. Booleans, unparsable strings,
    NaN, infinities and magnitudes past 1e308 are invalid and yield ``None``;
    magnitudes below 1e-308 count as ``0``.
    Floats go through ``str()`` so ``0.3`` stays ``Decimal('0.3')``.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        if not value.strip():
            return Decimal("0")
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not amount.is_finite() or amount.adjusted() > MAX_EXPONENT:
        return None
    if amount.adjusted() < -MAX_EXPONENT:
        return Decimal("0")
    return amount


def quantize_cents(value: Decimal) -> Decimal:
    """Round half-up to the cent, widening precision for very large values."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _positive_amount(amount: Any) -> Optional[Decimal]:
    value = to_decimal(amount)
    if value is None or value <= 0:
        return None
    return value


def calculate_commission(amount: Any) -> Decimal:
    """Gateway commission on ``amount``, rounded half-up to the cent.

    Missing, non-numeric, zero or negative amounts give ``0.00``.
    """
    value = _positive_amount(amount)
    if value is None:
        return ZERO
    return quantize_cents(value * COMMISSION_RATE)


def calculate_net_revenue(amount: Any) -> Decimal:
    """Amount left after the gateway commission has been withheld."""
    value = _positive_amount(amount)
    if value is None:
        return ZERO
    return quantize_cents(value - calculate_commission(value))


def commission_breakdown(amount: Any) -> Dict[str, Decimal]:
    value = _positive_amount(amount)
    return {
        "gross": quantize_cents(value) if value is not None else ZERO,
        "commission": calculate_commission(value),
        "net_revenue": calculate_net_revenue(value),
    }


def _transaction_amount(transaction: Any) -> Decimal:
    if isinstance(transaction, dict):
        raw = transaction.get("amount")
    else:
        raw = getattr(transaction, "amount", None)
    value = to_decimal(raw)
    return value if value is not None else Decimal("0")


def calculate_bulk_commission(transactions: Optional[Iterable[Any]] = None) -> Dict[str, Decimal]:
    """Aggregate gross, commission and net over a batch of transactions.

    Commission is charged once on the summed gross, not per transaction, so
    ``[0.3, 0.3, 0.3]`` yields ``0.02`` rather than ``3 * 0.01``.
    """
    total_gross = sum(
        (_transaction_amount(t) for t in transactions or ()), Decimal("0")
    )
    total_commission = calculate_commission(total_gross)
    total_net = total_gross - total_commission
    return {
        "total_gross": quantize_cents(total_gross),
        "total_commission": total_commission,
        "total_net": quantize_cents(total_net),
    }
