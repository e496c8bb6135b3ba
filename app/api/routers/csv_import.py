"""
app/api/routers/csv_import.py

CSV import and template HTTP endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.dependencies import get_csv_text, get_entity_repository, get_import_policy
from app.domain.errors import HeaderValidationError
from app.domain.import_policies import EntityImportPolicy
from app.repositories.entity_repository import EntityRepository
from app.schemas.csv_import import ImportResultResponse
from app.services.csv_import_service import CSVImportService, get_csv_import_service
from app.services.template_service import generate_template, template_filename

router = APIRouter(prefix="/imports", tags=["imports"])


@router.post("/{kind}", response_model=ImportResultResponse)
def import_csv(
    text: str = Depends(get_csv_text),
    policy: EntityImportPolicy = Depends(get_import_policy),
    repository: EntityRepository = Depends(get_entity_repository),
    import_service: CSVImportService = Depends(get_csv_import_service),
) -> ImportResultResponse:
    """
    Import one CSV file of companies, stores or jobs.
    """

    try:
        result = import_service.import_csv(text=text, policy=policy, repository=repository)
    except HeaderValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.to_dict(),
        ) from exc

    return ImportResultResponse.from_result(result)


@router.get("/{kind}/template")
def download_template(
    policy: EntityImportPolicy = Depends(get_import_policy),
) -> Response:
    """
    Download the CSV template for one entity kind.
    """

    return Response(
        content=generate_template(policy),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{template_filename(policy)}"'},
    )
