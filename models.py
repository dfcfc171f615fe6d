from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from database import Base
from finance import calculate_commission, calculate_net_revenue


class RoleEnum(str, PyEnum):
    ADMIN = "ADMIN"
    STUDENT = "STUDENT"
    COACH = "COACH"
    INSTITUTE = "INSTITUTE"
    CLUB = "CLUB"
    EVENT_INCHARGE = "EVENT_INCHARGE"


class PaymentStatus(str, PyEnum):
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(120), unique=True, nullable=False)
    role = Column(Enum(RoleEnum), default=RoleEnum.STUDENT, nullable=False)


class Coach(Base):
    __tablename__ = "coaches"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"))
    name = Column(String(100), nullable=False)

    user = relationship("User")
    payments = relationship("Payment", back_populates="coach")


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True)
    name = Column(String(150), nullable=False)
    created_by_admin = Column(Boolean, default=False)
    event_fee = Column(Numeric(10, 2))
    student_fee_enabled = Column(Boolean, default=False)
    student_fee_amount = Column(Numeric(10, 2), default=0)

    @property
    def fees(self):
        # Some listings expose the event fee under ``fees``.
        return self.event_fee


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"))
    user_type = Column(String(30))
    coach_id = Column(Integer, ForeignKey("coaches.id"))
    payment_type = Column(String(50))
    amount = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), default=PaymentStatus.PENDING.value)
    created_at = Column(DateTime, default=datetime.utcnow)

    coach = relationship("Coach", back_populates="payments")

    @property
    def commission(self):
        return calculate_commission(self.amount)

    @property
    def net_revenue(self):
        return calculate_net_revenue(self.amount)
