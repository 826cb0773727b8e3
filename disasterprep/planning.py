"""Choosing cities to stockpile emergency supplies in a road network.

A city is covered when it holds supplies itself or is joined by a road to a
city that does.  The search below finds a set of at most a given number of
cities that covers every city in the network, or reports that none exists.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import AbstractSet

RoadNetwork = Mapping[str, Iterable[str]]


def place_emergency_supplies(
    road_network: RoadNetwork, num_cities: int
) -> set[str] | None:
    """Return at most ``num_cities`` cities covering the network, or None.

    Every city is expected to be a key of ``road_network`` and roads are
    expected to run both ways.  Raises ValueError if ``num_cities`` is
    negative.
    """
    if num_cities < 0:
        raise ValueError("Number of cities must be non-negative.")

    closed: dict[str, frozenset[str]] = {
        city: frozenset(road_network[city]) | {city} for city in road_network
    }

    def reach(city: str) -> frozenset[str]:
        return closed.get(city, frozenset((city,)))

    failed: set[tuple[frozenset[str], int]] = set()

    def search(uncovered: frozenset[str], budget: int) -> frozenset[str] | None:
        if not uncovered:
            return frozenset()
        if budget == 0:
            return None
        state = (uncovered, budget)
        if state in failed:
            return None

        # No choice of `budget` cities can cover more than the sum of the
        # largest gains available right now.
        gains = sorted(
            (len(reach(city) & uncovered) for city in closed), reverse=True
        )
        if sum(gains[:budget]) < len(uncovered):
            failed.add(state)
            return None

        # The most constrained uncovered city must be covered by something
        # in its own neighbourhood; try each such option.
        target = min(uncovered, key=lambda city: (len(reach(city)), city))
        options = sorted(
            reach(target),
            key=lambda city: (-len(reach(city) & uncovered), city),
        )
        for choice in options:
            rest = search(uncovered - reach(choice), budget - 1)
            if rest is not None:
                return rest | {choice}

        failed.add(state)
        return None

    found = search(frozenset(closed), num_cities)
    return None if found is None else set(found)


def make_symmetric(source: RoadNetwork) -> dict[str, set[str]]:
    """Return a copy of the network in which every road runs both ways."""
    result: dict[str, set[str]] = {city: set(links) for city, links in source.items()}
    for origin, links in source.items():
        for dest in links:
            result.setdefault(origin, set()).add(dest)
            result.setdefault(dest, set()).add(origin)
    return result


def is_covered(
    city: str, road_network: RoadNetwork, supply_locations: AbstractSet[str]
) -> bool:
    """Return whether ``city`` holds supplies or neighbours a city that does."""
    if city in supply_locations:
        return True
    return any(
        neighbor in supply_locations for neighbor in road_network.get(city, ())
    )