"""
Run a back-office CSV import from the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from app.config import get_csv_import_settings
from app.domain.errors import HeaderValidationError
from app.domain.import_policies import POLICIES, get_policy
from app.repositories.entity_repository import SQLAlchemyEntityRepository
from app.services.csv_import_service import get_csv_import_service
from app.services.template_service import generate_template
from db.session import SessionLocal


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Import companies, stores or jobs from a CSV file.")
    parser.add_argument("kind", choices=sorted(POLICIES), help="Entity kind to import.")
    parser.add_argument("path", nargs="?", default=None, help="CSV file to import.")
    parser.add_argument(
        "--template",
        action="store_true",
        help="Print the CSV template for the kind instead of importing.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    policy = get_policy(args.kind)

    if args.template:
        sys.stdout.write(generate_template(policy))
        return 0

    if args.path is None:
        parser.error("path is required unless --template is given")

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    text = Path(args.path).read_text(encoding=get_csv_import_settings().encoding)
    service = get_csv_import_service()
    with SessionLocal() as db:
        repository = SQLAlchemyEntityRepository(
            db,
            kind=policy.kind,
            external_id_field=policy.external_id_field,
        )
        try:
            result = service.import_csv(text=text, policy=policy, repository=repository)
        except HeaderValidationError as exc:
            print(json.dumps(exc.to_dict(), ensure_ascii=False, indent=2), file=sys.stderr)
            return 2

    payload = {
        "createdCount": result.created_count,
        "updatedCount": result.updated_count,
        "totalRows": result.total_rows,
        "errors": result.errors,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0 if not result.row_errors else 1


if __name__ == "__main__":
    raise SystemExit(main())
