# app/repositories.py
# Role: Category and transaction stores.
#       Thin wrappers over a SQLAlchemy Session; they add and flush but never
#       commit. The calling service owns the unit of work.

from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session, joinedload

from models import Category, Transaction, INCOME, OUTCOME, to_money


class CategoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_title(self, title: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.title == title).first()

    def find_by_titles(self, titles: Iterable[str]) -> List[Category]:
        """
        Fetch every category whose title is in `titles` with one IN query.
        """
        distinct_titles = list(dict.fromkeys(titles))
        if not distinct_titles:
            return []
        return (
            self.db.query(Category)
            .filter(Category.title.in_(distinct_titles))
            .all()
        )

    def create(self, title: str) -> Category:
        category = Category(title=title)
        self.db.add(category)
        self.db.flush()
        return category

    def create_many(self, titles: Iterable[str]) -> List[Category]:
        categories = [Category(title=title) for title in titles]
        if categories:
            self.db.add_all(categories)
            self.db.flush()
        return categories

    def list_all(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.title).all()


class TransactionRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_balance(self) -> Dict[str, Decimal]:
        """
        Sum incomes and outcomes across all stored transactions.

        Returns:
            {"income": ..., "outcome": ..., "total": income - outcome}, as Decimal cents
        """
        income, outcome = self.db.query(
            func.coalesce(
                func.sum(case((Transaction.type == INCOME, Transaction.value), else_=0)),
                0,
            ).label("income"),
            func.coalesce(
                func.sum(case((Transaction.type == OUTCOME, Transaction.value), else_=0)),
                0,
            ).label("outcome"),
        ).one()

        income = to_money(income)
        outcome = to_money(outcome)
        return {"income": income, "outcome": outcome, "total": income - outcome}

    def create(
        self,
        title: str,
        value: Decimal,
        type: str,
        category: Optional[Category] = None,
    ) -> Transaction:
        transaction = Transaction(title=title, value=to_money(value), type=type, category=category)
        self.db.add(transaction)
        self.db.flush()
        return transaction

    def create_many(self, transactions: List[Transaction]) -> List[Transaction]:
        """
        Insert already-built Transaction objects in one flush, keeping order.
        """
        if transactions:
            self.db.add_all(transactions)
            self.db.flush()
        return transactions

    def list_all(self) -> List[Transaction]:
        return (
            self.db.query(Transaction)
            .options(joinedload(Transaction.category))
            .order_by(Transaction.created_at)
            .all()
        )
