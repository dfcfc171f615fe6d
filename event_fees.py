"""Resolve which fee an event shows to a given viewer.

An event carries two fee concepts:

* the event fee (``fees`` on some records, ``event_fee`` on others), shown to
  everyone by default;
* the student registration fee (``student_fee_enabled`` +
  ``student_fee_amount``), which only admin-created events can charge and
  which replaces the event fee when the viewer is a student.
"""

from decimal import Decimal
from enum import Enum as PyEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from finance import to_decimal

CURRENCY_SYMBOL = "₹"
FREE_LABEL = "Free"


class FeeKind(str, PyEnum):
    EVENT = "EVENT"
    STUDENT_REGISTRATION = "STUDENT_REGISTRATION"

    @property
    def display_name(self) -> str:
        if self is FeeKind.STUDENT_REGISTRATION:
            return "Registration fee"
        return "Event fee"


class FeeInfo(BaseModel):
    amount: Decimal = Decimal("0")
    is_free: bool = Field(True, alias="isFree")
    kind: FeeKind = FeeKind.EVENT
    label: str = FREE_LABEL

    model_config = ConfigDict(populate_by_name=True, frozen=True)


_CAMEL_KEYS = {
    "created_by_admin": "createdByAdmin",
    "student_fee_enabled": "studentFeeEnabled",
    "student_fee_amount": "studentFeeAmount",
    "event_fee": "eventFee",
    "fees": "fees",
}


def _field(event: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an object, accepting camelCase keys."""
    if event is None:
        return None
    camel = _CAMEL_KEYS.get(name, name)
    if isinstance(event, dict):
        value = event.get(name)
        return value if value is not None else event.get(camel)
    value = getattr(event, name, None)
    return value if value is not None else getattr(event, camel, None)


def format_amount(amount: Decimal) -> str:
    """Plain number: ``200`` for ``200.00``, ``99.5`` for ``99.50``."""
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount.normalize(), "f")


def get_event_fee_info(event: Any, user_role: Any) -> FeeInfo:
    is_student = str(user_role or "").upper() == "STUDENT"

    student_fee_amount = to_decimal(_field(event, "student_fee_amount")) or Decimal("0")
    has_student_fee = (
        is_student
        and bool(_field(event, "created_by_admin"))
        and bool(_field(event, "student_fee_enabled"))
        and student_fee_amount > 0
    )

    # ``fees`` wins whenever it is set, even to 0.
    raw_event_fee = _field(event, "fees")
    if raw_event_fee is None:
        raw_event_fee = _field(event, "event_fee")
    event_fee_amount = to_decimal(raw_event_fee)

    amount = student_fee_amount if has_student_fee else event_fee_amount
    is_free = not (amount is not None and amount > 0)
    if is_free:
        amount = Decimal("0")

    return FeeInfo(
        amount=amount,
        is_free=is_free,
        kind=FeeKind.STUDENT_REGISTRATION if has_student_fee else FeeKind.EVENT,
        label=FREE_LABEL if is_free else f"{CURRENCY_SYMBOL}{format_amount(amount)}",
    )
