import logging
from typing import Dict

from sqlalchemy.orm import Session

from models import Payment, RoleEnum

logger = logging.getLogger(__name__)


def migrate_coach_payments(db: Session, dry_run: bool = False) -> Dict[str, int]:
    """Backfill ``user_id``/``user_type`` on payments recorded against a coach.

    Older payments only reference ``coach_id``. Each one whose coach has a
    linked user gets that user and ``user_type = "COACH"``; the others are
    left untouched and reported as skipped.

    Args:
        db: Database session.
        dry_run: Count what would change without committing.

    Returns:
        ``{"found": ..., "migrated": ..., "skipped": ...}``
    """
    payments = (
        db.query(Payment)
        .filter(Payment.coach_id.isnot(None), Payment.user_id.is_(None))
        .order_by(Payment.id)
        .all()
    )
    logger.info("Found %d payments to migrate", len(payments))

    migrated = skipped = 0
    try:
        for payment in payments:
            coach = payment.coach
            if coach is None or coach.user_id is None:
                logger.warning("No user found for coach of payment %s", payment.id)
                skipped += 1
                continue
            payment.user_id = coach.user_id
            payment.user_type = RoleEnum.COACH.value
            db.add(payment)
            migrated += 1
            logger.info("Migrated payment %s for coach %s", payment.id, coach.name)

        if dry_run:
            db.rollback()
        else:
            db.commit()
    except Exception:
        db.rollback()
        logger.exception("Payment migration failed")
        raise

    return {"found": len(payments), "migrated": migrated, "skipped": skipped}
