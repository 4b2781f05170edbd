# app/deps.py
# Role: Shared application-level dependencies.
#       Provides the Jinja2 templates loader and the standard SQLAlchemy
#       database session dependency.

"""
Shared dependencies for the finance ledger app.
"""

import os
from typing import Generator

from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from db import SessionLocal

# Jinja2 templates loader (used by HTML-rendering routes)
TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session and ensures it is closed.

    Typical usage in routes:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
