"""Read-only holder for a loaded name dataset."""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple

from ..core.schema import NameRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """Immutable, ordered collection of NameRecord values."""

    def __init__(self, records: Iterable[NameRecord]):
        """
        Initialize the store.

        Args:
            records: Already validated records; order is preserved
        """
        self._records: Tuple[NameRecord, ...] = tuple(records)
        logger.info(f"RecordStore initialized with {len(self._records)} names")

    @classmethod
    def from_dicts(cls, items: Iterable[Dict[str, Any]]) -> "RecordStore":
        """Build a store from camelCase record dictionaries."""
        return cls(NameRecord.from_dict(item) for item in items)

    @property
    def records(self) -> Tuple[NameRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[NameRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> NameRecord:
        return self._records[index]

    def select(self, predicate: Callable[[NameRecord], bool]) -> List[NameRecord]:
        """Scan the store once and return matching records in store order."""
        return [record for record in self._records if predicate(record)]
