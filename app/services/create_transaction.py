# app/services/create_transaction.py
#
# Single-transaction creation: balance check, category resolution, insert.

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from app.errors import InsufficientBalanceError
from app.logger import setup_logger
from app.repositories import CategoryRepository, TransactionRepository
from models import Transaction, OUTCOME, to_money

logger = setup_logger(__name__)


class CreateTransactionService:
    """
    Create one transaction, refusing outcomes the current balance can't cover.

    The category (when new) and the transaction are committed together; if
    anything fails the session is rolled back and the error re-raised.

    Note: the balance check is only as strong as the database isolation
    level. Two concurrent outcomes can both pass it.
    """

    def __init__(
        self,
        db: Session,
        transactions: Optional[TransactionRepository] = None,
        categories: Optional[CategoryRepository] = None,
    ):
        self.db = db
        self.transactions = transactions or TransactionRepository(db)
        self.categories = categories or CategoryRepository(db)

    def execute(self, title: str, value: Decimal | float, type: str, category: str) -> Transaction:
        value = to_money(value)
        balance = self.transactions.get_balance()

        if type == OUTCOME and value > balance["total"]:
            logger.info(
                f"[create] Rejected outcome {title!r}: value={value} balance={balance['total']}"
            )
            raise InsufficientBalanceError(value=value, balance=balance["total"])

        try:
            transaction_category = self.categories.find_by_title(category)
            if transaction_category is None:
                transaction_category = self.categories.create(category)
                logger.info(f"[create] New category {category!r}")

            transaction = self.transactions.create(
                title=title,
                value=value,
                type=type,
                category=transaction_category,
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(transaction)
        logger.info(f"[create] {transaction.type} {transaction.title!r} {transaction.value}")
        return transaction
