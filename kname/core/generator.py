"""
Khmer Name Generator

Composes filtering, sampling and result caching over an injected RecordStore
to answer single-name, multi-name and search requests.

Example usage:

    from kname import FilterCriteria, Generator, GeneratorConfig, load_records

    generator = Generator(load_records(), GeneratorConfig(seed=42))
    name = generator.generate_one(FilterCriteria(gender="female"))
    names = generator.generate_many(3, FilterCriteria.popular())
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from .cache import ResultCache, make_cache_key
from .exceptions import EmptyResultError
from .filters import FilterCompiler, ScoreFunction, default_popularity_score
from .sampler import Sampler
from .schema import FilterCriteria, Gender, NameRecord
from ..data.store import RecordStore
from ..utils.similarity import DEFAULT_SIMILARITY_THRESHOLD, SimilarityEngine

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Tunable generator behaviour."""
    popularity_score: ScoreFunction = default_popularity_score
    max_cache_size: int = 100
    seed: Optional[int] = None  # Seed for reproducible sampling


@dataclass
class GeneratorStatistics:
    """Counts describing the loaded dataset."""
    total: int
    by_gender: Dict[str, int]
    popular_count: int
    by_category: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "total": self.total,
            "by_gender": dict(self.by_gender),
            "popular_count": self.popular_count,
            "by_category": dict(self.by_category),
        }


class Generator:
    """Random name generation and search over a RecordStore."""

    def __init__(
        self,
        store: RecordStore,
        config: Optional[GeneratorConfig] = None,
        sampler: Optional[Sampler] = None,
    ):
        """
        Initialize the generator.

        Args:
            store: Loaded name dataset
            config: Generator configuration (defaults to GeneratorConfig())
            sampler: Sampler to draw with; built from config.seed if None
        """
        self.store = store
        self.config = config or GeneratorConfig()
        self.filter_compiler = FilterCompiler(self.config.popularity_score)
        self.sampler = sampler or Sampler(seed=self.config.seed)
        self.cache: ResultCache[Tuple[NameRecord, ...]] = ResultCache(self.config.max_cache_size)

    @property
    def name_count(self) -> int:
        return len(self.store)

    def generate_one(self, criteria: Optional[FilterCriteria] = None) -> NameRecord:
        """
        Pick one random name matching criteria.

        Raises:
            EmptyResultError: No name matches criteria
        """
        candidates = self._candidates(criteria)
        return self.sampler.draw_one(candidates)

    def generate_many(
        self,
        count: int,
        criteria: Optional[FilterCriteria] = None,
        unique: bool = True,
    ) -> List[NameRecord]:
        """
        Pick count random names matching criteria.

        Results are cached per (count, criteria, unique), so repeating a
        request returns the same names until the cache is cleared or the
        entry is evicted.

        Args:
            count: Number of names to return
            criteria: Filter constraints, or None for any name
            unique: Return pairwise distinct names when True

        Returns:
            List of count names

        Raises:
            EmptyResultError: No name matches criteria
            InsufficientCandidatesError: unique is True and fewer than count
                names match
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        key = make_cache_key(count, criteria, unique)

        def compute() -> Tuple[NameRecord, ...]:
            candidates = self._candidates(criteria)
            return tuple(self.sampler.draw_many(candidates, count, unique))

        return list(self.cache.get_or_compute(key, compute))

    def search(self, criteria: FilterCriteria, limit: int = 0) -> List[NameRecord]:
        """
        Return names matching criteria in dataset order.

        Args:
            criteria: Filter constraints
            limit: Maximum number of results; 0 returns every match
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        matches = self.store.select(self.filter_compiler.compile(criteria))
        if limit > 0:
            return matches[:limit]
        return matches

    def find_similar(
        self,
        name: str,
        criteria: Optional[FilterCriteria] = None,
        threshold: int = DEFAULT_SIMILARITY_THRESHOLD,
        limit: int = 0,
    ) -> List[NameRecord]:
        """
        Find names whose romanized given name or full romanized name is
        within threshold edits of name, ignoring case and diacritics.

        Closest matches come first.
        """
        engine = SimilarityEngine(threshold=threshold)
        scored = []
        for position, record in enumerate(self.store.select(self.filter_compiler.compile(criteria))):
            d = min(
                engine.distance(name, record.romanized_given),
                engine.distance(name, record.romanized_name),
            )
            if d <= threshold:
                scored.append((d, position, record))
        scored.sort(key=lambda item: (item[0], item[1]))
        matches = [record for _, _, record in scored]
        if limit > 0:
            return matches[:limit]
        return matches

    def random_name_pair(
        self,
        criteria: Optional[FilterCriteria] = None,
        romanized: bool = False,
    ) -> Dict[str, str]:
        """
        Combine the given name of one random record with the surname of
        another, both drawn independently under criteria.
        """
        given = self.generate_one(criteria)
        family = self.generate_one(criteria)
        if romanized:
            return {"given_name": given.romanized_given, "surname": family.romanized_surname}
        return {"given_name": given.given_name, "surname": family.surname}

    def all_names(self) -> List[NameRecord]:
        return list(self.store)

    def names_by_gender(self, gender: Union[Gender, str]) -> List[NameRecord]:
        """Names usable for gender, unisex names included."""
        return self.search(FilterCriteria(gender=gender))

    def popular_names(self) -> List[NameRecord]:
        return self.search(FilterCriteria.popular())

    def statistics(self) -> GeneratorStatistics:
        """
        Count names by gender, popularity and category.

        Gender counts match names_by_gender, so unisex names also count
        towards male and female.
        """
        categories = Counter(record.category for record in self.store if record.category is not None)
        return GeneratorStatistics(
            total=len(self.store),
            by_gender={gender.value: len(self.names_by_gender(gender)) for gender in Gender},
            popular_count=sum(1 for record in self.store if record.is_popular),
            by_category=dict(categories),
        )

    def clear_cache(self) -> None:
        """Drop every cached multi-name result."""
        self.cache.clear()
        logger.info("Generation cache cleared")

    def _candidates(self, criteria: Optional[FilterCriteria]) -> List[NameRecord]:
        candidates = self.store.select(self.filter_compiler.compile(criteria))
        if not candidates:
            raise EmptyResultError(f"No names match the given filter criteria: {criteria}")
        return candidates
