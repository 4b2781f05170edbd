# routes_transactions.py
"""
Routes for listing and creating transactions.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from app.deps import get_db, templates
from app.repositories import TransactionRepository
from app.schemas import TransactionCreate, TransactionList, TransactionOut
from app.services.create_transaction import CreateTransactionService

router = APIRouter()


@router.get("/transactions", response_model=TransactionList)
def list_transactions(db: Session = Depends(get_db)):
    """
    All stored transactions (with their category) plus the current balance.
    """
    repo = TransactionRepository(db)
    return {
        "transactions": repo.list_all(),
        "balance": repo.get_balance(),
    }


@router.post("/transactions", response_model=TransactionOut, status_code=201)
def create_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
):
    """
    Create one transaction. Outcomes larger than the balance are rejected
    with 400 (see InsufficientBalanceError handler in main.py).
    """
    service = CreateTransactionService(db)
    return service.execute(
        title=payload.title,
        value=payload.value,
        type=payload.type,
        category=payload.category,
    )


@router.get("/transactions/page", response_class=HTMLResponse)
def transactions_page(
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Show all transactions and the balance as an HTML table.
    """
    repo = TransactionRepository(db)
    return templates.TemplateResponse(
        request,
        "transactions.html",
        {
            "transactions": repo.list_all(),
            "balance": repo.get_balance(),
        },
    )
