"""
app/api/dependencies.py

Shared FastAPI dependencies for request validation.
"""

from __future__ import annotations

from fastapi import Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.config import CSVImportSettings, get_csv_import_settings
from app.domain.errors import UnknownEntityKindError
from app.domain.import_policies import EntityImportPolicy, get_policy
from app.repositories.entity_repository import EntityRepository, SQLAlchemyEntityRepository
from db.session import get_db

CSV_CONTENT_TYPES = {
    "text/csv",
    "application/csv",
    "application/vnd.ms-excel",
}


def get_csv_upload(file: UploadFile = File(...)) -> UploadFile:
    """
    Validate that the uploaded file is a CSV by extension or MIME type.
    """

    filename = (file.filename or "").strip().lower()
    content_type = (file.content_type or "").strip().lower()

    is_csv_filename = filename.endswith(".csv")
    is_csv_content_type = content_type in CSV_CONTENT_TYPES

    if not is_csv_filename and not is_csv_content_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only CSV files are allowed.",
        )

    return file


def get_csv_text(
    file: UploadFile = Depends(get_csv_upload),
    settings: CSVImportSettings = Depends(get_csv_import_settings),
) -> str:
    """
    Read the upload into memory and decode it, enforcing the configured size limit.
    """

    try:
        raw = file.file.read(settings.max_upload_bytes + 1)
    finally:
        file.file.close()

    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"CSV file exceeds {settings.max_upload_bytes} bytes.",
        )

    try:
        return raw.decode(settings.encoding)
    except UnicodeDecodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"CSV must be {settings.encoding} encoded.",
        ) from exc


def get_import_policy(kind: str) -> EntityImportPolicy:
    """
    Resolve the ``{kind}`` path parameter to its import policy.
    """

    try:
        return get_policy(kind)
    except UnknownEntityKindError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


def get_entity_repository(
    policy: EntityImportPolicy = Depends(get_import_policy),
    db: Session = Depends(get_db),
) -> EntityRepository:
    return SQLAlchemyEntityRepository(
        db,
        kind=policy.kind,
        external_id_field=policy.external_id_field,
    )
