"""Tests for the FIFO result cache."""

import pytest

from kname.core.cache import ResultCache, make_cache_key
from kname.core.schema import FilterCriteria, Gender


class TestCacheKey:
    """Test canonical key derivation."""

    def test_unset_criteria_use_null(self):
        key = make_cache_key(3, None, True)
        assert key == "[3, null, null, null, false, null, null, null, null, null, true]"
        assert make_cache_key(3, FilterCriteria(), True) == key

    def test_literal_values_differ_from_unset(self):
        unset = make_cache_key(2, FilterCriteria(), True)
        assert make_cache_key(2, FilterCriteria(origin="any"), True) != unset
        assert make_cache_key(2, FilterCriteria(category="null"), True) != unset
        assert make_cache_key(2, FilterCriteria(meaning_contains="none"), True) != unset

    def test_separators_in_values_do_not_collide(self):
        joined = make_cache_key(1, FilterCriteria(allowed_categories={"a,b"}), True)
        split = make_cache_key(1, FilterCriteria(allowed_categories={"a", "b"}), True)
        assert joined != split

        a = make_cache_key(1, FilterCriteria(origin="x|y"), True)
        b = make_cache_key(1, FilterCriteria(origin="x", category="y"), True)
        assert a != b

    def test_equal_requests_share_key(self):
        a = FilterCriteria(gender="female", allowed_categories=["royal", "modern"])
        b = FilterCriteria(gender=Gender.FEMALE, allowed_categories={"modern", "royal"})
        assert a is not b
        assert make_cache_key(5, a, True) == make_cache_key(5, b, True)

    def test_case_insensitive_fields_fold(self):
        a = FilterCriteria(starts_with="Ou", meaning_contains="STAR")
        b = FilterCriteria(starts_with="ou", meaning_contains="star")
        assert make_cache_key(2, a, True) == make_cache_key(2, b, True)

    def test_different_requests_differ(self):
        base = make_cache_key(2, FilterCriteria(gender="male"), True)
        assert base != make_cache_key(3, FilterCriteria(gender="male"), True)
        assert base != make_cache_key(2, FilterCriteria(gender="female"), True)
        assert base != make_cache_key(2, FilterCriteria(gender="male"), False)
        assert base != make_cache_key(2, FilterCriteria(gender="male", origin="Pali"), True)
        assert base != make_cache_key(2, FilterCriteria(gender="male", min_popularity_score=0), True)

    def test_empty_category_set_differs_from_unset(self):
        assert make_cache_key(1, FilterCriteria(allowed_categories=set()), True) != make_cache_key(1, None, True)


class TestResultCache:
    """Test ResultCache class."""

    def test_get_miss(self):
        cache = ResultCache()
        assert cache.get("missing") is None
        assert len(cache) == 0

    def test_put_and_get(self):
        cache = ResultCache()
        cache.put("a", ("x",))
        assert cache.get("a") == ("x",)
        assert "a" in cache
        assert len(cache) == 1

    def test_default_capacity(self):
        assert ResultCache().capacity == 100

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ResultCache(capacity=0)

    def test_never_exceeds_capacity(self):
        cache = ResultCache(capacity=5)
        for i in range(20):
            cache.put(f"k{i}", i)
            assert len(cache) <= 5

    def test_evicts_first_inserted(self):
        cache = ResultCache(capacity=3)
        for key in ("a", "b", "c"):
            cache.put(key, key.upper())

        cache.put("d", "D")

        assert cache.get("a") is None
        assert cache.keys() == ("b", "c", "d")
        for key in ("b", "c", "d"):
            assert cache.get(key) == key.upper()

    def test_reads_do_not_refresh_order(self):
        cache = ResultCache(capacity=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)
        assert "a" not in cache
        assert "b" in cache

    def test_re_put_keeps_position(self):
        cache = ResultCache(capacity=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 10)
        assert cache.get("a") == 10
        assert len(cache) == 2

        cache.put("c", 3)
        assert "a" not in cache
        assert cache.keys() == ("b", "c")

    def test_clear(self):
        cache = ResultCache(capacity=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.clear()
        assert len(cache) == 0
        assert cache.keys() == ()

        # Order tracking is reset as well
        cache.put("c", 3)
        cache.put("d", 4)
        assert cache.keys() == ("c", "d")

    def test_get_or_compute_computes_once(self):
        cache = ResultCache()
        calls = []

        def compute():
            calls.append(1)
            return ("value",)

        assert cache.get_or_compute("k", compute) == ("value",)
        assert cache.get_or_compute("k", compute) == ("value",)
        assert len(calls) == 1

    def test_get_or_compute_failure_stores_nothing(self):
        cache = ResultCache()

        def compute():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            cache.get_or_compute("k", compute)
        assert "k" not in cache
        assert len(cache) == 0
