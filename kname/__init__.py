"""
kname - Khmer name generation library

Filter, sample and search Khmer personal names in native script and
romanized form, with diacritic-insensitive matching of romanized variants.
"""

from .core.schema import Gender, NameRecord, FilterCriteria
from .core.exceptions import KnameError, EmptyResultError, InsufficientCandidatesError, LoadError
from .core.generator import Generator, GeneratorConfig, GeneratorStatistics
from .data.store import RecordStore
from .data.loader import load_records, load_records_or_fallback
from .utils.similarity import SimilarityEngine, are_similar, edit_distance

__version__ = "0.1.0"
__all__ = [
    "Gender",
    "NameRecord",
    "FilterCriteria",
    "KnameError",
    "EmptyResultError",
    "InsufficientCandidatesError",
    "LoadError",
    "Generator",
    "GeneratorConfig",
    "GeneratorStatistics",
    "RecordStore",
    "load_records",
    "load_records_or_fallback",
    "SimilarityEngine",
    "are_similar",
    "edit_distance",
]
