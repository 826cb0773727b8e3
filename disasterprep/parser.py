"""Reading disaster-planning scenarios from their text format.

Each data line has the form::

    City Name (X, Y): Neighbour One, Neighbour Two

Blank lines and lines starting with ``#`` are ignored.  Roads may be listed
in one direction only; the reverse direction is added after reading.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

_CITY_PATTERN = re.compile(
    r"([A-Za-z0-9 .\-]+)\(\s*(-?[0-9]+(?:\.[0-9]+)?)\s*,\s*(-?[0-9]+(?:\.[0-9]+)?)\s*\)"
)


class DisasterFormatError(ValueError):
    """Raised when a scenario file cannot be understood."""


@dataclass
class DisasterTest:
    """A road network together with where each city should be drawn."""

    network: dict[str, set[str]] = field(default_factory=dict)
    city_locations: dict[str, tuple[float, float]] = field(default_factory=dict)


def _parse_city(city_info: str, result: DisasterTest) -> str:
    match = _CITY_PATTERN.fullmatch(city_info.strip())
    if match is None:
        raise DisasterFormatError(
            "Can't parse this data; is it city info? " + city_info
        )

    name = match.group(1).strip()
    if not name:
        raise DisasterFormatError("City names can't be empty.")

    result.city_locations[name] = (float(match.group(2)), float(match.group(3)))
    result.network[name] = set()
    return name


def _parse_links(city_name: str, links: str, result: DisasterTest) -> None:
    if not links.strip():
        result.network[city_name] = set()
        return

    outgoing = result.network.setdefault(city_name, set())
    for dest in links.split(","):
        clean_name = dest.strip()
        if not clean_name:
            raise DisasterFormatError("Blank name in list of outgoing cities?")
        if clean_name in outgoing:
            raise DisasterFormatError("City appears twice in outgoing list?")
        outgoing.add(clean_name)


def _parse_city_line(line: str, result: DisasterTest) -> None:
    if line.count(":") != 1:
        raise DisasterFormatError(
            "Each data line should have exactly one colon on it."
        )
    city_info, links = line.split(":")
    name = _parse_city(city_info, result)
    _parse_links(name, links, result)


def _add_reverse_edges(result: DisasterTest) -> None:
    forward = [(source, sorted(dests)) for source, dests in sorted(result.network.items())]
    for source, dests in forward:
        for dest in dests:
            if dest not in result.network:
                raise DisasterFormatError(
                    f"Outgoing link found to nonexistent city '{dest}'"
                )
            result.network[dest].add(source)


def _validate_locations(result: DisasterTest) -> None:
    seen: dict[tuple[float, float], str] = {}
    for name in sorted(result.city_locations):
        location = result.city_locations[name]
        if location in seen:
            raise DisasterFormatError(
                f"{name} is at the same location as {seen[location]}"
            )
        seen[location] = name


def load_disaster(source: Iterable[str] | str) -> DisasterTest:
    """Read a scenario from a text stream, an iterable of lines or a string.

    Raises DisasterFormatError if the data is malformed.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    result = DisasterTest()

    for raw in lines:
        line = raw.rstrip("\n")
        if not line.strip() or line.startswith("#"):
            continue
        _parse_city_line(line, result)

    _add_reverse_edges(result)
    _validate_locations(result)
    return result