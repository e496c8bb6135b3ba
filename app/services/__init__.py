"""
app/services package marker.
"""

from app.services.csv_import_service import CSVImportService, get_csv_import_service
from app.services.partner_sync_service import PartnerSyncService
from app.services.reconciler import RecordReconciler, Resolution
from app.services.template_service import generate_template, template_filename

__all__ = [
    "CSVImportService",
    "generate_template",
    "get_csv_import_service",
    "PartnerSyncService",
    "RecordReconciler",
    "Resolution",
    "template_filename",
]
