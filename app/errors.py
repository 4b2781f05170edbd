# app/errors.py
# Role: Application exceptions. The HTTP layer (main.py) turns any
#       FinanceLedgerError into a JSON error response with its status_code.

from decimal import Decimal
from typing import Any, Dict, Optional


class FinanceLedgerError(Exception):
    """Base exception for all finance ledger errors."""

    status_code = 400

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code


class InsufficientBalanceError(FinanceLedgerError):
    """Raised when an outcome transaction is larger than the current balance."""

    def __init__(self, value: Decimal, balance: Decimal):
        super().__init__(
            "You do not have enough balance",
            details={"value": value, "balance": balance},
        )


class InvalidImportFileError(FinanceLedgerError):
    """Raised when an uploaded import file is rejected before parsing."""
