# main.py
# Role: Application entry point for the finance ledger.
#       Initializes the FastAPI app, creates database tables (dev setups),
#       registers the error handler and all route modules.

"""
Main FastAPI app for the personal finance ledger.

Here we only:
- create the FastAPI app
- create DB tables when AUTO_CREATE_TABLES is on
- translate application errors into JSON responses
- include route modules
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import config
from db import Base, engine
from app.errors import FinanceLedgerError
from app.logger import setup_logger
from app.routes_root import router as root_router
from app.routes_transactions import router as transactions_router
from app.routes_upload import router as upload_router

logger = setup_logger(__name__)


# -------------------------------------------------------------------
# App & DB setup
# -------------------------------------------------------------------

# Create database tables (only if they don't exist yet).
# Managed databases should run `alembic upgrade head` and set AUTO_CREATE_TABLES=0.
if config.AUTO_CREATE_TABLES:
    Base.metadata.create_all(bind=engine)

# FastAPI application instance
app = FastAPI(title="Finance Ledger")


@app.exception_handler(FinanceLedgerError)
async def finance_ledger_error_handler(request: Request, exc: FinanceLedgerError):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": exc.message},
    )


# -------------------------------------------------------------------
# Include routers
# -------------------------------------------------------------------

# Root / health
app.include_router(root_router)

# Transactions list, creation, HTML overview
app.include_router(transactions_router)

# CSV import
app.include_router(upload_router)
