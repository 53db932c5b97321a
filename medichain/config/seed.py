"""
Seed records written by InitLedger.

The built-in records reproduce the ledger's historical starting inventory. A
deployment can replace them with a JSON file holding a list of medicine
objects that use the stored member names.
"""

import json
import logging

from pydantic import ValidationError

from medichain.core.medicine import Medicine

logger = logging.getLogger(__name__)


DEFAULT_SEED_MEDICINES = [
    {
        "name": "Amoxicilina",
        "concentration": "250mg/5ml",
        "form": "Jarabe",
        "expiration": "31/12/2023",
        "quantity": "100",
        "code": "1234567"
    },
    {
        "name": "Ibuprofeno",
        "concentration": "400mg",
        "form": "Tableta",
        "expiration": "31/12/2024",
        "quantity": "100",
        "code": "1234567"
    },
]


class SeedDataError(Exception):
    """Raised when seed records cannot be loaded"""
    pass


def load_seed_medicines(path: str | None = None) -> list[Medicine]:
    """
    Load seed records.

    Args:
        path: JSON file with a list of medicine objects; None selects the built-in records

    Returns:
        Seed medicines in the order they will be keyed

    Raises:
        SeedDataError: If the file cannot be read or an entry is not a valid medicine
    """
    if path is None:
        return [Medicine(**entry) for entry in DEFAULT_SEED_MEDICINES]

    try:
        with open(path, "r", encoding="utf-8") as f:
            entries = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SeedDataError(f"Cannot read seed file {path}: {e}") from e

    if not isinstance(entries, list):
        raise SeedDataError(f"Seed file {path} must contain a JSON list")

    medicines = []
    for index, entry in enumerate(entries):
        try:
            medicines.append(Medicine.model_validate(entry))
        except ValidationError as e:
            raise SeedDataError(f"Invalid seed entry {index} in {path}: {e}") from e

    logger.info(f"Loaded {len(medicines)} seed medicines from {path}")
    return medicines
