"""Diacritic folding and edit-distance matching for romanized Khmer names."""

import re
from typing import Dict, Iterable, List, Optional

# Accented Latin letters seen in romanized Khmer, mapped to their base letter
DIACRITICS_MAP: Dict[str, str] = {
    'á': 'a', 'à': 'a', 'â': 'a', 'ä': 'a', 'ǎ': 'a',
    'é': 'e', 'è': 'e', 'ê': 'e', 'ë': 'e', 'ě': 'e',
    'í': 'i', 'ì': 'i', 'î': 'i', 'ï': 'i', 'ǐ': 'i',
    'ó': 'o', 'ò': 'o', 'ô': 'o', 'ö': 'o', 'ǒ': 'o',
    'ú': 'u', 'ù': 'u', 'û': 'u', 'ü': 'u', 'ǔ': 'u',
    'ý': 'y', 'ỳ': 'y', 'ŷ': 'y', 'ÿ': 'y',
}

DEFAULT_SIMILARITY_THRESHOLD = 2

_KHMER_PATTERN = re.compile(r"[\u1780-\u17FF]")


def remove_diacritics(text: str) -> str:
    """Replace each mapped accented character with its base letter."""
    return "".join(DIACRITICS_MAP.get(char, char) for char in text)


def normalize(text: str) -> str:
    """Lowercase text, then fold diacritics. Unmapped characters pass through."""
    return remove_diacritics(text.lower())


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Uses two rolling rows sized by the shorter string, so memory is
    O(min(len(a), len(b))).

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character insertions, deletions and
        substitutions turning a into b
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    current = [0] * (len(b) + 1)

    for i, char_a in enumerate(a):
        current[0] = i + 1
        for j, char_b in enumerate(b):
            cost = 0 if char_a == char_b else 1
            current[j + 1] = min(
                current[j] + 1,       # insertion
                previous[j + 1] + 1,  # deletion
                previous[j] + cost,   # substitution
            )
        previous, current = current, previous

    return previous[len(b)]


def are_similar(a: str, b: str, threshold: int = DEFAULT_SIMILARITY_THRESHOLD) -> bool:
    """True if the normalized forms of a and b are within threshold edits."""
    return edit_distance(normalize(a), normalize(b)) <= threshold


def capitalize_words(text: str) -> str:
    """Capitalize each space-separated word: 'DARA ouch' -> 'Dara Ouch'."""
    return " ".join(
        word[0].upper() + word[1:].lower() if word else word
        for word in text.split(" ")
    )


def contains_khmer_script(text: str) -> bool:
    """True if text has at least one character in the Khmer block U+1780-U+17FF."""
    return _KHMER_PATTERN.search(text) is not None


class SimilarityEngine:
    """Fuzzy matcher for romanized name variants."""

    def __init__(
        self,
        threshold: int = DEFAULT_SIMILARITY_THRESHOLD,
        diacritics: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the engine.

        Args:
            threshold: Maximum edit distance between similar names
            diacritics: Replacement folding table (defaults to DIACRITICS_MAP)
        """
        if threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {threshold}")
        self.threshold = threshold
        self.diacritics = diacritics if diacritics is not None else DIACRITICS_MAP

    def normalize(self, text: str) -> str:
        return "".join(self.diacritics.get(char, char) for char in text.lower())

    def distance(self, a: str, b: str) -> int:
        """Edit distance between the normalized forms of a and b."""
        return edit_distance(self.normalize(a), self.normalize(b))

    def are_similar(self, a: str, b: str) -> bool:
        return self.distance(a, b) <= self.threshold

    def find_similar(self, query: str, candidates: Iterable[str]) -> List[str]:
        """
        Find candidates similar to query, closest first.

        Ties keep the order of candidates.
        """
        scored = []
        for position, candidate in enumerate(candidates):
            d = self.distance(query, candidate)
            if d <= self.threshold:
                scored.append((d, position, candidate))
        scored.sort()
        return [candidate for _, _, candidate in scored]
