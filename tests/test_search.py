import pytest

from glycoseq.search import (
    BinarySearch,
    BucketSearch,
    Point,
    Searcher,
    ToleranceBy,
)

PEAKS = [
    (113.0671, 254.9),
    (204.0867, 1200.0),
    (366.1395, 800.0),
    (528.1923, 310.0),
    (661.5, 50.0),
    (700.3, 90.0),
    (1020.4, 20.0),
]


def peak_points():
    return [Point(mz, (mz, intensity)) for mz, intensity in PEAKS]


def value_points(values):
    return [Point(v, v) for v in values]


def test_bucket_search_spectrum_case():
    searcher = BucketSearch(ToleranceBy.PPM, 200)
    searcher.init(peak_points())
    searcher.add(Point(662.0826, (662.0826, 2.0)))
    result = searcher.search(662.0826)
    assert (662.0826, 2.0) in result
    assert searcher.match(113.0671)


def test_binary_search_spectrum_case():
    searcher = BinarySearch(ToleranceBy.PPM, 200)
    searcher.init(peak_points())
    assert searcher.search(662.0826) == []
    assert searcher.match(113.0671)


def test_binary_search_ppm_collects_all_matches():
    searcher = BinarySearch(ToleranceBy.PPM, 200)
    searcher.init(value_points([900.0, 662.1, 113.0671, 662.0, 200.0]))
    assert sorted(searcher.search(662.0826)) == [662.0, 662.1]


def test_binary_search_dalton():
    searcher = BinarySearch(ToleranceBy.DALTON, 0.01)
    searcher.init(value_points([100.0, 100.005, 100.02, 200.0]))
    assert sorted(searcher.search(100.0)) == [100.0, 100.005]
    assert not searcher.match(150.0)
    assert searcher.match(200.001)


def test_binary_search_presorted():
    searcher = BinarySearch(ToleranceBy.DALTON, 0.5)
    searcher.init(value_points([1.0, 2.0, 3.0, 4.0]), presorted=True)
    assert searcher.search(3.2) == [3.0]


def test_binary_search_empty():
    searcher = BinarySearch(ToleranceBy.DALTON, 0.5)
    assert searcher.search(3.0) == []
    assert searcher.match(3.0) is False


def test_is_match_uses_base_for_ppm():
    searcher = BinarySearch(ToleranceBy.PPM, 10)
    assert searcher.is_match(100.0, 100.001, 1_000_000.0)
    assert not searcher.is_match(100.0, 100.01, 100.0)
    assert searcher.is_match(100.0, 100.0005, 100.0)


def test_is_match_dalton_is_strict():
    searcher = BucketSearch(ToleranceBy.DALTON, 0.5)
    assert searcher.is_match(10.0, 10.25, 10.0)
    assert not searcher.is_match(10.0, 10.5, 10.0)


def test_bucket_search_dalton():
    searcher = BucketSearch(ToleranceBy.DALTON, 0.01)
    searcher.init(value_points([100.0, 100.005, 100.02, 200.0]))
    assert sorted(searcher.search(100.0)) == [100.0, 100.005]
    assert searcher.search(200.0) == [200.0]
    assert searcher.match(100.02)
    assert not searcher.match(150.0)


def test_bucket_search_out_of_range():
    searcher = BucketSearch(ToleranceBy.DALTON, 0.01)
    searcher.init(value_points([100.0, 200.0]))
    assert searcher.search(5000.0) == []
    assert searcher.search(1.0) == []
    assert searcher.match(5000.0) is False


def test_bucket_add_outside_range_is_dropped():
    searcher = BucketSearch(ToleranceBy.DALTON, 0.1)
    searcher.init(value_points([10.0, 20.0]))
    searcher.add(Point(5000.0, 5000.0))
    assert searcher.search(5000.0) == []
    searcher.add(Point(15.0, 15.0))
    assert searcher.search(15.0) == [15.0]


def test_bucket_index_monotonic():
    searcher = BucketSearch(ToleranceBy.PPM, 20)
    searcher.init(value_points([300.0, 500.0, 1500.0]))
    indexes = [searcher.index(v) for v in (300.0, 500.0, 1500.0)]
    assert indexes == sorted(indexes)
    assert indexes[0] >= 0


def test_bucket_ppm_finds_every_loaded_value():
    values = [113.0671, 204.0867, 366.1395, 528.1923, 1020.4]
    searcher = BucketSearch(ToleranceBy.PPM, 10)
    searcher.init(value_points(values))
    for value in values:
        assert value in searcher.search(value)


def test_bucket_empty_init():
    searcher = BucketSearch(ToleranceBy.PPM, 10)
    searcher.init([])
    assert searcher.search(100.0) == []
    assert not searcher.match(100.0)


def test_bucket_rejects_non_positive_tolerance():
    with pytest.raises(ValueError):
        BucketSearch(ToleranceBy.DALTON, 0)


def test_bucket_ppm_rejects_small_values():
    searcher = BucketSearch(ToleranceBy.PPM, 10)
    with pytest.raises(ValueError):
        searcher.init(value_points([0.5, 100.0]))


def test_plain_searcher_finds_nothing():
    searcher = Searcher()
    searcher.init(value_points([1.0]))
    assert searcher.search(1.0) == []
    assert searcher.match(1.0) is False


def test_point_ordering():
    assert Point(1.0, "a") < Point(2.0, "b")
    assert not Point(3.0, "a") < Point(2.0, "b")