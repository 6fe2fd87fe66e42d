"""
Partner directory loading.
Reads the partner catalog from a JSON export of the directory table.
"""
import json
from pathlib import Path

from pydantic import ValidationError

from converta.core.exceptions import DataSourceError, ParsingError
from converta.models.partners import Partner
from converta.utils.logging import get_logger

logger = get_logger(__name__)

VERIFIED_STATUS = "verified"


def load_partner_catalog(path: str | Path, verified_only: bool = False) -> list[Partner]:
    """
    Load partners from a JSON file.

    Expected JSON format:
    [
        {
            "id": "p-001",
            "name": "Partner Name",
            "description": "What they do",
            "category": "legal",
            "specialties": ["company formation", "contracts"],
            "location": "London, UK",
            "verification_status": "verified"
        },
        ...
    ]

    Records that fail validation are skipped with a warning.

    Args:
        path: Path to the JSON catalog
        verified_only: Keep only partners whose verification status is "verified"

    Returns:
        List of Partner objects in file order

    Raises:
        DataSourceError: If the file cannot be read
        ParsingError: If the file is not a JSON array
    """
    catalog_path = Path(path)
    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        logger.error("partner_catalog_unreadable", file=str(catalog_path), error=str(e))
        raise DataSourceError(f"Cannot read partner catalog {catalog_path}: {e}") from e

    try:
        records = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Partner catalog is not valid JSON: {e}", source=str(catalog_path)) from e

    if not isinstance(records, list):
        raise ParsingError("Partner catalog must be a JSON array", source=str(catalog_path))

    partners = []
    skipped = 0
    for index, record in enumerate(records):
        try:
            partner = Partner.model_validate(record)
        except ValidationError as e:
            skipped += 1
            logger.warning("partner_record_invalid", index=index, error=str(e))
            continue
        if verified_only and partner.verification_status != VERIFIED_STATUS:
            continue
        partners.append(partner)

    logger.info(
        "partner_catalog_loaded",
        file=str(catalog_path),
        count=len(partners),
        skipped=skipped,
        verified_only=verified_only
    )
    return partners
