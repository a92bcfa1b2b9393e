"""Core components for the kname library."""

from .schema import Gender, NameRecord, FilterCriteria
from .exceptions import KnameError, EmptyResultError, InsufficientCandidatesError, LoadError
from .generator import Generator, GeneratorConfig, GeneratorStatistics

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
]
