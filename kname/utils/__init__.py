"""String utilities for romanized Khmer names."""

from .similarity import SimilarityEngine, are_similar, capitalize_words, edit_distance, normalize

__all__ = ["SimilarityEngine", "are_similar", "capitalize_words", "edit_distance", "normalize"]
