# models/payment.py
from sqlalchemy import Column, Integer, String, Numeric, Date, Text, DateTime, func
from .base import Base


class Payment(Base):
     """
     Payment model - one rent payment (or expected payment) for a tenant.

     tenant_name and unit are free-text copies taken when the payment is
     entered; they are not kept in sync with tenants or units.
     """
     __tablename__ = "payments"

     id = Column(Integer, primary_key=True, autoincrement=True)
     tenant_name = Column(String(200), nullable=False)
     unit = Column(String(50), nullable=True)

     amount = Column(Numeric(12, 2), nullable=True)
     status = Column(String(50), default="Pending", nullable=False, index=True)  # Paid, Pending, Overdue
     payment_date = Column(Date, nullable=True, index=True)
     notes = Column(Text, nullable=True)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<Payment(id={self.id}, amount={self.amount}, status='{self.status}')>"
