import random

from cses_kit.sorting import apartments, distinct_count, ferris_wheel_gondolas


def test_apartments_worked_example():
    assert apartments([60, 45, 80, 60], [30, 60, 75], 5) == 2


def test_apartments_never_exceeds_smaller_side():
    rng = random.Random(7)
    for _ in range(50):
        people = [rng.randint(1, 100) for _ in range(rng.randint(0, 10))]
        flats = [rng.randint(1, 100) for _ in range(rng.randint(0, 10))]
        result = apartments(people, flats, rng.randint(0, 10))
        assert 0 <= result <= min(len(people), len(flats))


def test_apartments_huge_tolerance_matches_everyone_possible():
    people = [5, 90, 40, 13]
    flats = [100, 1, 50]
    assert apartments(people, flats, 1000) == len(flats)


def test_apartments_far_apart_matches_nobody():
    assert apartments([1, 2, 3], [100, 200], 5) == 0


def test_apartments_order_does_not_matter():
    people = [60, 45, 80, 60, 12, 33]
    flats = [30, 60, 75, 14, 47]
    expected = apartments(people, flats, 3)
    rng = random.Random(1)
    for _ in range(10):
        rng.shuffle(people)
        rng.shuffle(flats)
        assert apartments(people, flats, 3) == expected


def test_distinct_count_all_distinct():
    values = [4, 9, 1, 7, 3]
    assert distinct_count(values) == len(values)


def test_distinct_count_ignores_duplicates():
    values = [2, 3, 2, 2, 3, 8]
    assert distinct_count(values * 3) == distinct_count(values)
    assert distinct_count([5] * 10) == distinct_count([5])


def test_distinct_count_empty():
    assert distinct_count([]) == 0


def test_ferris_wheel_worked_example():
    assert ferris_wheel_gondolas([7, 2, 3, 9], 10) == 3


def test_ferris_wheel_bounds():
    rng = random.Random(3)
    for _ in range(50):
        weights = [rng.randint(1, 50) for _ in range(rng.randint(1, 12))]
        result = ferris_wheel_gondolas(weights, 50)
        assert (len(weights) + 1) // 2 <= result <= len(weights)


def test_ferris_wheel_no_pairs_fit():
    weights = [6, 7, 8, 9]
    assert ferris_wheel_gondolas(weights, 10) == len(weights)


def test_ferris_wheel_empty():
    assert ferris_wheel_gondolas([], 10) == 0