"""
Loading of Khmer name datasets from JSON files.

A dataset file is a JSON array of objects using the camelCase record keys:

    [
      {
        "givenName": "ដារា",
        "surname": "អ៊ូច",
        "gender": "male",
        "romanizedGiven": "Dara",
        "romanizedSurname": "Ouch",
        "meaning": "Star",
        "origin": "Pali",
        "category": "modern",
        "isPopular": true
      }
    ]

The bundled dataset lives next to this module as khmer_names.json.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ..core.exceptions import LoadError
from .store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent / "khmer_names.json"

FALLBACK_NAMES = [
    {
        "givenName": "ដារា",
        "surname": "អ៊ូច",
        "gender": "male",
        "romanizedGiven": "Dara",
        "romanizedSurname": "Ouch",
        "meaning": "Star",
        "origin": "Pali",
        "category": "modern",
        "isPopular": True,
    },
]


def load_records(path: Optional[Union[str, Path]] = None) -> RecordStore:
    """
    Load a dataset file into a RecordStore.

    Args:
        path: JSON file to read; defaults to the bundled dataset

    Returns:
        RecordStore holding every record in file order

    Raises:
        LoadError: The file is missing, is not a JSON array, or holds an
            invalid record
    """
    filepath = Path(path) if path is not None else DEFAULT_DATA_PATH

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise LoadError(f"Failed to load Khmer names data from {filepath}: {e}") from e

    if not isinstance(data, list):
        raise LoadError(f"Expected a JSON array of names in {filepath}, got {type(data).__name__}")

    for position, item in enumerate(data):
        if not isinstance(item, dict):
            raise LoadError(f"Entry {position} in {filepath} is not an object")

    try:
        store = RecordStore.from_dicts(data)
    except ValidationError as e:
        raise LoadError(f"Invalid name record in {filepath}: {e}") from e

    logger.info(f"Loaded {len(store)} names from {filepath}")
    return store


def fallback_store() -> RecordStore:
    """Store holding the small built-in fallback list."""
    return RecordStore.from_dicts(FALLBACK_NAMES)


def load_records_or_fallback(path: Optional[Union[str, Path]] = None) -> RecordStore:
    """Load a dataset, falling back to the built-in names on LoadError."""
    try:
        return load_records(path)
    except LoadError as e:
        logger.warning(f"Failed to load names, using default names instead: {e}")
        return fallback_store()
