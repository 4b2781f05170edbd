# models.py
# Role: SQLAlchemy ORM models for the finance ledger domain.
#       Category groups transactions under a unique title; Transaction is a
#       single income or outcome entry that may reference one Category.

import uuid
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Numeric,
    String,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import relationship

from db import Base

INCOME = "income"
OUTCOME = "outcome"
TRANSACTION_TYPES = (INCOME, OUTCOME)

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Round an amount (int, float, str or Decimal) to cents."""
    if isinstance(value, float):
        # via str so 0.1 -> Decimal("0.1"), not its binary expansion
        value = str(value)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


class Category(Base):
    """
    A named grouping for transactions (e.g. "Salary", "Housing").

    Categories are created lazily, the first time a transaction references
    a title that does not exist yet.
    """

    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("title", name="uq_categories_title"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    title = Column(String, nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    transactions = relationship("Transaction", back_populates="category")

    def __repr__(self) -> str:
        return f"<Category {self.title!r}>"


class Transaction(Base):
    """
    ORM model representing a single financial transaction.

    `value` is always a non-negative magnitude with cent precision (Decimal);
    the sign comes from `type` (income adds to the balance, outcome
    subtracts from it).
    """

    __tablename__ = "transactions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    title = Column(String, nullable=False)

    value = Column(Numeric(12, 2), nullable=False)

    type = Column(Enum(*TRANSACTION_TYPES, name="transaction_type"), nullable=False)

    # Nullable: deleting a category leaves its transactions uncategorized
    category_id = Column(
        Uuid,
        ForeignKey(
            "categories.id",
            name="fk_transactions_category_id",
            onupdate="CASCADE",
            ondelete="SET NULL",
        ),
        nullable=True,
    )
    category = relationship("Category", back_populates="transactions")

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<Transaction {self.title!r} {self.type} {self.value}>"
