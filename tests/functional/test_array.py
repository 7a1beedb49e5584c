import pytest
from paradigm.core.monoid import monoid_string, monoid_sum
from paradigm.functional import array, option
from paradigm.functional.function import flow, pipe


@pytest.fixture
def location_countries():
    return {1: ["NZ"], 2: ["MY"], 3: ["CN", "TW", "HK"]}


@pytest.fixture
def country_names():
    return {
        "NZ": "New Zealand",
        "MY": "Malaysia",
        "CN": "China",
        "TW": "Taiwan",
        "HK": "Hong Kong",
    }


def test_map_and_chain(location_countries, country_names):
    countries_of = lambda location_id: location_countries.get(location_id, [])

    names = pipe(
        [2, 3],
        array.chain(countries_of),
        array.map(country_names.get),
    )

    assert names == ["Malaysia", "China", "Taiwan", "Hong Kong"]


def test_chain_with_unknown_key_contributes_nothing(location_countries):
    countries_of = lambda location_id: location_countries.get(location_id, [])
    assert array.chain(countries_of)([1, 99]) == ["NZ"]


def test_map_does_not_mutate_input():
    xs = [1, 2, 3]
    ys = array.map(lambda x: x * 2)(xs)
    assert ys == [2, 4, 6]
    assert xs == [1, 2, 3]
    assert ys is not xs


def test_accepts_any_iterable():
    assert array.map(str)(range(3)) == ["0", "1", "2"]
    assert array.filter(lambda x: x % 2)(x for x in range(5)) == [1, 3]


def test_filter_map():
    parse = lambda s: option.some(int(s)) if s.isdigit() else option.none()
    assert array.filter_map(parse)(["1", "x", "3"]) == [1, 3]


def test_reduce_and_fold_map():
    assert array.reduce(10, lambda acc, x: acc - x)([1, 2, 3]) == 4
    assert array.fold_map(monoid_sum)(len)(["ab", "c", ""]) == 3
    assert array.fold_map(monoid_string)(str)([1, 2, 3]) == "123"
    assert array.fold_map(monoid_sum)(len)([]) == 0


def test_head_and_lookup():
    assert array.head([5, 6]) == option.some(5)
    assert array.head([]) == option.none()
    assert array.lookup(1)([5, 6]) == option.some(6)
    assert array.lookup(2)([5, 6]) == option.none()
    assert array.lookup(-1)([5, 6]) == option.none()


def test_flow_over_arrays(location_countries, country_names):
    countries_of = lambda location_id: location_countries.get(location_id, [])
    names_for = flow(array.chain(countries_of), array.map(country_names.get))
    assert names_for([1]) == ["New Zealand"]
