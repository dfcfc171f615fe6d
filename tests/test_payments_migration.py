import os
import sys
import pathlib
from decimal import Decimal

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from database import Base, SessionLocal, engine  # noqa: E402
from models import Coach, Payment, RoleEnum, User  # noqa: E402
from payments_migration import migrate_coach_payments  # noqa: E402


def setup_function(function):
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def seed(db):
    user = User(email="coach@example.com", role=RoleEnum.COACH)
    other = User(email="student@example.com", role=RoleEnum.STUDENT)
    linked = Coach(name="Linked Coach", user=user)
    orphan = Coach(name="Orphan Coach")
    db.add_all([user, other, linked, orphan])
    db.flush()
    payments = [
        Payment(coach_id=linked.id, amount=Decimal("2999.00"), payment_type="SUBSCRIPTION"),
        Payment(coach_id=orphan.id, amount=Decimal("2999.00"), payment_type="SUBSCRIPTION"),
        Payment(coach_id=linked.id, user_id=other.id, user_type="STUDENT", amount=Decimal("10.00")),
        Payment(amount=Decimal("50.00")),
    ]
    db.add_all(payments)
    db.commit()
    return user, other, [p.id for p in payments]


def test_migrate_coach_payments():
    db = SessionLocal()
    user, other, ids = seed(db)

    result = migrate_coach_payments(db)

    assert result == {"found": 2, "migrated": 1, "skipped": 1}
    migrated = db.get(Payment, ids[0])
    assert migrated.user_id == user.id
    assert migrated.user_type == "COACH"
    assert db.get(Payment, ids[1]).user_id is None
    untouched = db.get(Payment, ids[2])
    assert untouched.user_id == other.id
    assert untouched.user_type == "STUDENT"

    assert migrate_coach_payments(db) == {"found": 1, "migrated": 0, "skipped": 1}
    db.close()


def test_dry_run_does_not_commit():
    db = SessionLocal()
    _, _, ids = seed(db)

    result = migrate_coach_payments(db, dry_run=True)

    assert result == {"found": 2, "migrated": 1, "skipped": 1}
    db.expire_all()
    payment = db.get(Payment, ids[0])
    assert payment.user_id is None
    assert payment.user_type is None
    db.close()
