"""Console demo: find the fewest cities needed to cover a road network."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Mapping

from disasterprep.console import get_yes_or_no, make_file_selection
from disasterprep.parser import load_disaster
from disasterprep.planning import place_emergency_supplies

PROBLEM_SUFFIX = ".dst"
DEFAULT_DIRECTORY = "res/"


def solve_optimally(network: Mapping[str, Iterable[str]]) -> set[str]:
    """Return a smallest set of cities that covers the whole network.

    Uses binary search over the number of cities allowed.
    """
    low, high = 0, len(network)

    result: set[str] = set()
    found = place_emergency_supplies(network, high)
    if found is not None:
        result = found

    while low < high:
        mid = low + (high - low) // 2
        found = place_emergency_supplies(network, mid)
        if found is not None:
            high = mid
            result = found
        else:
            low = mid + 1

    return result


def pluralize(count: int, singular: str, plural: str) -> str:
    """Return the count followed by the word form that suits it."""
    return f"{count} {singular if count == 1 else plural}"


def describe_network(network: Mapping[str, Iterable[str]]) -> str:
    """Return a readable listing of every city and its neighbours."""
    lines = [
        f"This transportation grid has {pluralize(len(network), 'city', 'cities')}."
    ]
    for city in sorted(network):
        neighbors = sorted(set(network[city]))
        lines.append(
            f"  The city {city} is adjacent to "
            f"{pluralize(len(neighbors), 'city', 'cities')}."
        )
        lines.extend(f"    {neighbor}" for neighbor in neighbors)
    return "\n".join(lines)


def describe_solution(cities: Iterable[str]) -> str:
    """Return a readable listing of the cities chosen for supplies."""
    chosen = sorted(set(cities))
    lines = [
        f"You need to stockpile in {pluralize(len(chosen), 'city', 'cities')} "
        "to provide coverage."
    ]
    lines.extend(f"  {city}" for city in chosen)
    return "\n".join(lines)


def _run_once(directory: str) -> None:
    path = make_file_selection(PROBLEM_SUFFIX, directory)
    try:
        with open(path, encoding="utf-8") as handle:
            scenario = load_disaster(handle)
    except OSError as exc:
        raise RuntimeError("Can't open the chosen file.") from exc

    print(describe_network(scenario.network))
    print(
        "Running your code to find the fewest number of cities needed... ",
        end="",
        flush=True,
    )
    cities = solve_optimally(scenario.network)
    print("done!")
    print(describe_solution(cities))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive disaster-planning demo."""
    parser = argparse.ArgumentParser(description="Disaster planning demo.")
    parser.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_DIRECTORY,
        help="directory holding scenario files",
    )
    args = parser.parse_args(argv)

    print("Disaster Planning")
    while True:
        _run_once(args.directory)
        if not get_yes_or_no("Try another demo file? "):
            break

    print()
    print("Exiting...")
    return 0