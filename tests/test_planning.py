from itertools import permutations

import pytest

from disasterprep.planning import is_covered, make_symmetric, place_emergency_supplies

DONT_BE_GREEDY = make_symmetric(
    {
        "A": {"B"},
        "B": {"C", "D"},
        "C": {"D"},
        "D": {"F", "G"},
        "E": {"F"},
        "F": {"G"},
    }
)


def _grid():
    grid = {}
    rows = "ABCDEF"
    for r, row in enumerate(rows):
        for col in range(1, 7):
            name = f"{row}{col}"
            grid.setdefault(name, set())
            if r + 1 < len(rows):
                grid[name].add(f"{rows[r + 1]}{col}")
            if col < 6:
                grid[name].add(f"{row}{col + 1}")
    return make_symmetric(grid)


def test_negative_count_is_an_error():
    with pytest.raises(ValueError):
        place_emergency_supplies({}, -137)


def test_no_cities():
    assert place_emergency_supplies({}, 0) == set()
    assert place_emergency_supplies({}, 137) == set()


def test_one_city():
    network = make_symmetric({"Solipsist": set()})
    assert place_emergency_supplies(network, 0) is None
    assert place_emergency_supplies(network, 1) == {"Solipsist"}
    assert place_emergency_supplies(network, 2) == {"Solipsist"}


def test_two_linked_cities():
    network = make_symmetric({"A": {"B"}, "B": set()})
    assert place_emergency_supplies(network, 0) is None
    one = place_emergency_supplies(network, 1)
    assert one is not None and len(one) == 1 and one <= {"A", "B"}
    two = place_emergency_supplies(network, 2)
    assert two is not None and len(two) <= 2 and two <= {"A", "B"}


def test_two_linked_cities_from_one_entry():
    network = make_symmetric({"A": {"B"}})
    assert place_emergency_supplies(network, 0) is None
    one = place_emergency_supplies(network, 1)
    assert one is not None and len(one) == 1 and one <= {"A", "B"}


def test_four_disconnected_cities():
    network = make_symmetric({"A": set(), "B": set(), "C": set(), "D": set()})
    for budget in range(4):
        assert place_emergency_supplies(network, budget) is None
    assert place_emergency_supplies(network, 4) == {"A", "B", "C", "D"}


def test_ethene_every_ordering():
    for cities in permutations("ABCDEF"):
        network = make_symmetric(
            {
                cities[2]: {cities[0], cities[1], cities[3]},
                cities[3]: {cities[4], cities[5]},
            }
        )
        assert place_emergency_supplies(network, 2) == {cities[2], cities[3]}
        assert place_emergency_supplies(network, 1) is None


def test_six_in_a_line_every_ordering():
    for cities in permutations("ABCDEF"):
        network = {
            cities[i]: {cities[i - 1], cities[i + 1]} for i in range(1, len(cities) - 1)
        }
        network = make_symmetric(network)
        chosen = place_emergency_supplies(network, 2)
        assert chosen is not None
        assert chosen == {cities[1], cities[4]}
        assert place_emergency_supplies(network, 1) is None


def test_dont_be_greedy():
    assert place_emergency_supplies(DONT_BE_GREEDY, 0) is None
    assert place_emergency_supplies(DONT_BE_GREEDY, 1) is None
    assert place_emergency_supplies(DONT_BE_GREEDY, 2) == {"B", "F"}


def test_dont_be_greedy_every_ordering():
    for cities in permutations("ABCDEFG"):
        network = make_symmetric(
            {
                cities[1]: {cities[0], cities[2], cities[5]},
                cities[2]: {cities[3], cities[5], cities[6]},
                cities[3]: {cities[4], cities[6]},
            }
        )
        assert place_emergency_supplies(network, 2) == {cities[1], cities[3]}
        assert place_emergency_supplies(network, 1) is None


def test_grid_stress():
    grid = _grid()
    locations = place_emergency_supplies(grid, 10)
    assert locations is not None
    assert len(locations) <= 10
    assert all(is_covered(city, grid, locations) for city in grid)


def test_result_covers_everything_and_respects_budget():
    for budget in range(2, 8):
        chosen = place_emergency_supplies(DONT_BE_GREEDY, budget)
        assert chosen is not None
        assert len(chosen) <= budget
        assert all(is_covered(city, DONT_BE_GREEDY, chosen) for city in DONT_BE_GREEDY)


def test_make_symmetric_adds_reverse_roads():
    result = make_symmetric({"A": {"B", "C"}})
    assert result == {"A": {"B", "C"}, "B": {"A"}, "C": {"A"}}


def test_make_symmetric_leaves_source_untouched():
    source = {"A": {"B"}}
    make_symmetric(source)
    assert source == {"A": {"B"}}


def test_is_covered():
    network = make_symmetric({"A": {"B"}, "C": set()})
    assert is_covered("A", network, {"A"})
    assert is_covered("B", network, {"A"})
    assert not is_covered("C", network, {"A"})
    assert not is_covered("Z", network, {"A"})