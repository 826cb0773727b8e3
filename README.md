# disasterprep

Decide where to stockpile emergency supplies on a road network so that every
city either holds supplies or is linked by a single road to a city that does,
using no more than a given number of stockpiles.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Placing supplies

```python
from disasterprep.planning import make_symmetric, place_emergency_supplies

roads = make_symmetric({
    "A": {"B"},
    "B": {"C", "D"},
    "C": {"D"},
    "D": {"F", "G"},
    "E": {"F"},
    "F": {"G"},
})

print(place_emergency_supplies(roads, 1))          # None: one city is not enough
print(sorted(place_emergency_supplies(roads, 2)))  # ['B', 'F']
```

In `disasterprep.planning`:

- `place_emergency_supplies(road_network, num_cities)` returns a set of at
  most `num_cities` cities that covers every city, or `None` when no such set
  exists. A negative count raises `ValueError`. Every city should be a key of
  the mapping and roads should run both ways.
- `make_symmetric(source)` returns a copy of a network with every road added
  in both directions.
- `is_covered(city, road_network, supply_locations)` tells whether one city
  holds supplies or neighbours a city that does.

`disasterprep.demo.solve_optimally(network)` binary-searches over the number
of stockpiles and returns a smallest covering set.

## Network files

Networks are stored as `.dst` text files, one city per line:

```
# name (x, y) : neighbour, neighbour, ...
Alpha (0, 0) : Beta
Beta (1, 2) :
```

Blank lines and lines starting with `#` are skipped. Each data line must hold
exactly one colon. Roads only need to be listed in one direction; the reverse
direction is added on loading.

`disasterprep.parser.load_disaster(source)` reads a file object, an iterable
of lines or a string and returns a `DisasterTest` with two fields: `network`
(city name to set of neighbours) and `city_locations` (city name to an
`(x, y)` tuple). Malformed input raises `DisasterFormatError` (a
`ValueError`): unparsable city entries, blank or repeated neighbour names,
links to cities that are not defined, and two cities at the same location.

## Command line

```
disasterprep [directory]
```

Lists the `.dst` files in `directory` (`res/` by default), asks you to pick
one by number, prints its road network, prints the fewest cities needed to
cover it, and asks whether to try another file.

The prompts come from `disasterprep.console`: `make_selection_from(title,
options)`, `make_file_selection(suffix, directory)` and
`get_yes_or_no(prompt)`.

## Other modules

- `disasterprep.layout`: `compute_geometry(test, canvas_width,
  canvas_height)` fits a scenario's city locations into a canvas, keeping the
  aspect ratio, and returns a `Geometry` (or `None` when the canvas is too
  small or there are no cities); `Geometry.to_physical(x, y)` maps a point to
  canvas coordinates. `shorthand_for(name)` gives a label of at most three
  characters, and `city_state(city, network, selected)` returns a
  `CityState` (`UNCOVERED`, `COVERED_INDIRECTLY`, `COVERED_DIRECTLY`).
- `disasterprep.shift`: `Day` and the ordered, immutable `Shift(day,
  start_hour, end_hour, value)` with `length()` and `overlaps(other)`;
  `overlaps_with(one, two)` does the same as a function. A shift that ends
  before it starts raises `ValueError`.
- `disasterprep.schedule_view`: `standard_shifts()` (the week's shifts, each
  worth 0), `hour_to_string(hour)`, `assign_subcolumns(shifts)` for placing
  shifts side by side in a calendar, `hour_range(shifts)`,
  `total_profit(shifts)`, `total_length(shifts)` and
  `randomize_profits(shifts, rng)`.
- `disasterprep.color`: `Color(red, green, blue)` with `from_hex`,
  `from_hsv`, `random`, `to_rgb`, `to_html` and named colours such as
  `Color.WHITE` and `Color.GRAY`.
- `disasterprep.font`: the immutable `Font` with `FontFamily` and
  `FontStyle`, copy-with methods `with_family`, `with_style`, `with_size`,
  `with_color`, and `library_string()` giving a `Family-STYLE-size` string.

## What is not included

The package draws nothing: the layout, calendar, colour and font helpers only
compute values, and there is no graphical window. It also has no solver that
picks the most valuable set of shifts; the shift modules describe and lay out
shifts only.