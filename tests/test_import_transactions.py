import os
from decimal import Decimal

import pytest

from app.repositories import CategoryRepository, TransactionRepository
from app.services.create_transaction import CreateTransactionService
from app.services.import_transactions import ImportTransactionsService
from models import Category, Transaction


def test_import_creates_transactions_and_categories(db, write_csv):
    path = write_csv(
        "Salary, income, 5000, Salary",
        "Rent, outcome, 1200, Housing",
    )

    created = ImportTransactionsService(db).execute(path)

    assert [tx.title for tx in created] == ["Salary", "Rent"]
    assert [tx.type for tx in created] == ["income", "outcome"]
    assert [tx.value for tx in created] == [5000, 1200]
    assert db.query(Transaction).count() == 2
    assert sorted(c.title for c in CategoryRepository(db).list_all()) == ["Housing", "Salary"]
    assert not os.path.exists(path)


def test_each_transaction_gets_its_own_category(db, write_csv):
    path = write_csv(
        "Salary,income,5000,Salary",
        "Rent,outcome,1200,Housing",
        "Groceries,outcome,80,Food",
        "Dinner,outcome,40,Food",
    )

    created = ImportTransactionsService(db).execute(path)

    assert [tx.category.title for tx in created] == ["Salary", "Housing", "Food", "Food"]
    assert created[2].category_id == created[3].category_id
    assert db.query(Category).count() == 3


def test_rows_missing_required_fields_are_skipped(db, write_csv):
    path = write_csv(
        "Coffee,outcome,,Food",
        ",income,10,Gifts",
        "Book,,15,Leisure",
        "Salary,income,5000,Salary",
    )

    created = ImportTransactionsService(db).execute(path)

    assert [tx.title for tx in created] == ["Salary"]
    assert db.query(Transaction).count() == 1
    assert [c.title for c in CategoryRepository(db).list_all()] == ["Salary"]


def test_rows_with_invalid_type_or_value_are_skipped(db, write_csv):
    path = write_csv(
        "Refund,transfer,10,Misc",
        "Lunch,outcome,abc,Food",
        "Loan,outcome,-50,Debt",
        "Salary,income,5000,Salary",
    )

    created = ImportTransactionsService(db).execute(path)

    assert [tx.title for tx in created] == ["Salary"]


def test_existing_categories_are_not_duplicated(db, write_csv):
    CategoryRepository(db).create("Food")
    db.commit()
    path = write_csv(
        "Groceries,outcome,80,Food",
        "Salary,income,5000,Salary",
        "Bonus,income,300,Salary",
    )

    created = ImportTransactionsService(db).execute(path)

    assert db.query(Category).count() == 2
    assert created[0].category.title == "Food"
    assert created[1].category_id == created[2].category_id


def test_empty_category_leaves_transaction_uncategorized(db, write_csv):
    path = write_csv("Gift,income,50,")

    created = ImportTransactionsService(db).execute(path)

    assert created[0].category is None
    assert db.query(Category).count() == 0


def test_import_does_not_check_balance(db, write_csv):
    path = write_csv("Rent,outcome,1200,Housing")

    ImportTransactionsService(db).execute(path)

    assert TransactionRepository(db).get_balance()["total"] == -1200


def test_header_only_file_imports_nothing(db, write_csv):
    path = write_csv()

    created = ImportTransactionsService(db).execute(path)

    assert created == []
    assert not os.path.exists(path)


def test_small_chunks_keep_parse_order(db, write_csv):
    rows = [f"Item {i},income,{i},Cat {i % 2}" for i in range(1, 8)]
    path = write_csv(*rows)

    created = ImportTransactionsService(db, chunk_size=2).execute(path)

    assert [tx.title for tx in created] == [f"Item {i}" for i in range(1, 8)]
    assert [tx.category.title for tx in created] == [f"Cat {i % 2}" for i in range(1, 8)]


def test_missing_file_raises_before_persisting(db, tmp_path):
    with pytest.raises(FileNotFoundError):
        ImportTransactionsService(db).execute(str(tmp_path / "nope.csv"))

    assert db.query(Transaction).count() == 0


class FailingTransactionRepository(TransactionRepository):
    def create_many(self, transactions):
        raise RuntimeError("insert failed")


def test_failed_insert_rolls_back_and_keeps_file(db, write_csv):
    path = write_csv("Salary,income,5000,Salary")
    service = ImportTransactionsService(db, transactions=FailingTransactionRepository(db))

    with pytest.raises(RuntimeError, match="insert failed"):
        service.execute(path)

    assert os.path.exists(path)
    assert db.query(Category).count() == 0
    assert db.query(Transaction).count() == 0


def test_import_after_manual_creation_shares_categories(db, write_csv):
    CreateTransactionService(db).execute(
        title="Salary", value=5000, type="income", category="Salary"
    )
    path = write_csv("Bonus,income,300,Salary")

    created = ImportTransactionsService(db).execute(path)

    assert db.query(Category).count() == 1
    assert created[0].category.title == "Salary"


def test_short_first_row_does_not_drop_later_rows(db, write_csv):
    path = write_csv(
        "Gift,income,50",
        "Salary,income,5000,Salary",
        "Rent,outcome,1200,Housing",
    )

    created = ImportTransactionsService(db).execute(path)

    assert [tx.title for tx in created] == ["Gift", "Salary", "Rent"]
    assert created[0].category is None
    assert [tx.category.title for tx in created[1:]] == ["Salary", "Housing"]


def test_cent_amounts_are_stored_exactly(db, write_csv):
    path = write_csv(
        "Refund,income,0.30,Misc",
        "Coffee,outcome,0.10,Food",
        "Tea,outcome,0.20,Food",
    )

    ImportTransactionsService(db).execute(path)

    assert TransactionRepository(db).get_balance()["total"] == Decimal("0.00")
