"""Compilation of filter criteria into record predicates."""

from typing import Callable, List, Optional

from .schema import FilterCriteria, Gender, NameRecord

Predicate = Callable[[NameRecord], bool]
ScoreFunction = Callable[[NameRecord], int]


def default_popularity_score(record: NameRecord) -> int:
    """Score popular names 100 and everything else 0."""
    return 100 if record.is_popular else 0


def _match_all(record: NameRecord) -> bool:
    return True


class FilterCompiler:
    """Turns a FilterCriteria into a single predicate over NameRecord."""

    def __init__(self, score_fn: Optional[ScoreFunction] = None):
        """
        Initialize the compiler.

        Args:
            score_fn: Popularity scoring function used by min_popularity_score
        """
        self.score_fn = score_fn or default_popularity_score

    def compile(self, criteria: Optional[FilterCriteria]) -> Predicate:
        """
        Build a predicate that ANDs every constraint present in criteria.

        Args:
            criteria: Filter constraints, or None for no filtering

        Returns:
            Callable returning True for matching records
        """
        if criteria is None:
            return _match_all

        checks: List[Predicate] = []

        if criteria.gender is not None:
            gender = criteria.gender
            # Unisex names satisfy any gendered request
            checks.append(lambda r: r.gender == gender or r.gender == Gender.UNISEX)

        if criteria.origin is not None:
            origin = criteria.origin
            checks.append(lambda r: r.origin == origin)

        if criteria.category is not None:
            category = criteria.category
            checks.append(lambda r: r.category == category)

        if criteria.popular_only:
            checks.append(lambda r: r.is_popular)

        if criteria.exact_meaning is not None:
            exact = criteria.exact_meaning.lower()
            checks.append(lambda r: r.meaning is not None and r.meaning.lower() == exact)

        if criteria.meaning_contains is not None:
            fragment = criteria.meaning_contains.lower()
            checks.append(lambda r: r.meaning is not None and fragment in r.meaning.lower())

        if criteria.starts_with is not None:
            prefix = criteria.starts_with.lower()
            checks.append(lambda r: r.romanized_name.lower().startswith(prefix))

        if criteria.min_popularity_score is not None:
            minimum = criteria.min_popularity_score
            score_fn = self.score_fn
            checks.append(lambda r: r.is_popular and score_fn(r) >= minimum)

        if criteria.allowed_categories is not None:
            allowed = criteria.allowed_categories
            checks.append(lambda r: r.category is not None and r.category in allowed)

        if not checks:
            return _match_all

        def predicate(record: NameRecord) -> bool:
            return all(check(record) for check in checks)

        return predicate


def compile_filter(
    criteria: Optional[FilterCriteria],
    score_fn: Optional[ScoreFunction] = None,
) -> Predicate:
    """Shortcut for FilterCompiler(score_fn).compile(criteria)."""
    return FilterCompiler(score_fn).compile(criteria)
