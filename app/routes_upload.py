# routes_upload.py
"""
Route for the CSV import flow: save upload to disk -> import -> file removed.
"""

import os
import uuid
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from app.deps import get_db
from app.errors import InvalidImportFileError
from app.logger import setup_logger
from app.schemas import TransactionOut
from app.services.import_transactions import ImportTransactionsService
import config

logger = setup_logger(__name__)

router = APIRouter()


def save_upload(file: UploadFile, contents: bytes) -> str:
    """
    Write an uploaded CSV into UPLOAD_DIR under a random name and return its path.
    """
    filename = file.filename or ""
    if not filename.lower().endswith(".csv"):
        raise InvalidImportFileError(
            f"Invalid file type: {filename!r}. Only .csv files are supported.",
            details={"filename": filename},
        )

    os.makedirs(config.UPLOAD_DIR, exist_ok=True)
    file_location = os.path.join(config.UPLOAD_DIR, f"{uuid.uuid4().hex}.csv")

    with open(file_location, "wb") as f:
        f.write(contents)

    return file_location


@router.post(
    "/transactions/import",
    response_model=List[TransactionOut],
    status_code=201,
)
def import_transactions(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
):
    """
    Import transactions from an uploaded CSV file.

    The file is deleted by the import service once the rows are committed;
    on failure it stays in UPLOAD_DIR for inspection.
    """
    file_location = save_upload(file, file.file.read())
    logger.info(f"[upload] Saved {file.filename!r} as {file_location}")

    service = ImportTransactionsService(db)
    return service.execute(file_location)
