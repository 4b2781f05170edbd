# app/services/import_transactions.py
#
# CSV bulk import: parse -> validate -> resolve categories -> insert -> cleanup.

import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.logger import setup_logger
from app.repositories import CategoryRepository, TransactionRepository
from app.services.csv_import import parse_value, read_transaction_rows
from models import Category, Transaction, TRANSACTION_TYPES, to_money

logger = setup_logger(__name__)


@dataclass
class ImportCandidate:
    title: str
    type: str
    value: Decimal
    category: Optional[str]


class ImportTransactionsService:
    """
    Import every valid row of a CSV file as a transaction.

    - Rows missing title, type or value are skipped without error.
    - Rows with an unknown type or a non-numeric / negative value are skipped
      with a warning.
    - Categories are looked up in one query; missing ones are created in one
      batch. Each transaction gets the category matching its own title.
    - Categories and transactions are committed together; the source file is
      deleted only after a successful commit.
    - No balance check is done here: imported outcomes may push the balance
      below zero.
    """

    def __init__(
        self,
        db: Session,
        transactions: Optional[TransactionRepository] = None,
        categories: Optional[CategoryRepository] = None,
        chunk_size: Optional[int] = None,
    ):
        self.db = db
        self.transactions = transactions or TransactionRepository(db)
        self.categories = categories or CategoryRepository(db)
        self.chunk_size = chunk_size

    def collect_candidates(self, file_path: str) -> List[ImportCandidate]:
        candidates: List[ImportCandidate] = []

        for line_no, row in enumerate(
            read_transaction_rows(file_path, chunk_size=self.chunk_size), start=2
        ):
            if not row.has_required_fields():
                logger.debug(f"[import] Line {line_no}: missing title/type/value, skipped")
                continue

            if row.type not in TRANSACTION_TYPES:
                logger.warning(f"[import] Line {line_no}: unknown type {row.type!r}, skipped")
                continue

            value = parse_value(row.value)
            if value is None or value < 0:
                logger.warning(f"[import] Line {line_no}: invalid value {row.value!r}, skipped")
                continue

            candidates.append(
                ImportCandidate(
                    title=row.title,
                    type=row.type,
                    value=to_money(value),
                    category=row.category or None,
                )
            )

        return candidates

    def resolve_categories(self, titles: List[str]) -> Dict[str, Category]:
        """
        Return {title: Category} for every title, creating the missing ones
        in a single batch insert.
        """
        existing = self.categories.find_by_titles(titles)
        existing_titles = {category.title for category in existing}

        # Distinct, first-seen order
        missing_titles = [
            title for title in dict.fromkeys(titles) if title not in existing_titles
        ]
        created = self.categories.create_many(missing_titles)
        if created:
            logger.info(f"[import] Created {len(created)} new categories")

        return {category.title: category for category in [*created, *existing]}

    def execute(self, file_path: str) -> List[Transaction]:
        logger.info(f"[import] Reading {file_path}")

        candidates = self.collect_candidates(file_path)
        category_titles = [c.category for c in candidates if c.category]

        try:
            available = self.resolve_categories(category_titles)

            created = self.transactions.create_many(
                [
                    Transaction(
                        title=candidate.title,
                        type=candidate.type,
                        value=candidate.value,
                        category=available.get(candidate.category) if candidate.category else None,
                    )
                    for candidate in candidates
                ]
            )
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"[import] ERROR during DB insert for {file_path}: {e!r}")
            raise

        os.remove(file_path)

        logger.info(f"[import] Imported {len(created)} transactions from {file_path}")
        return created
