"""
app/services/template_service.py

Downloadable CSV import templates.
"""

from __future__ import annotations

import csv
import io

from app.domain.import_policies import EntityImportPolicy


def generate_template(policy: EntityImportPolicy) -> str:
    """
    Return a localized header row plus one sample row for ``policy``'s kind.

    The local id column is left out: a template row describes a new entity.
    """

    columns = [spec for spec in policy.columns if spec.field != policy.local_id_field]

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([spec.label for spec in columns])
    writer.writerow([spec.sample for spec in columns])
    return buffer.getvalue()


def template_filename(policy: EntityImportPolicy) -> str:
    return f"{policy.kind}_template.csv"
