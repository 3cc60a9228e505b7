# advent23

Solvers for a season of daily programming puzzles. Each puzzle is a module of
the `advent23` package. The module has plain functions that take the text of a
puzzle input, and a command that reads an input file and prints the answer.
Only the standard library is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Every command takes an optional path to an input file. Without one it reads
the default file named below from the current directory. If the file cannot be
read, the command prints `Cannot read '<file>'` and stops.

| Command                 | Default file | Options |
|-------------------------|--------------|---------|
| `advent23-trebuchet`    | `input1.txt` (`input2.txt` with `--spelled`) | `--spelled`: spelled-out digits such as `one` also count |
| `advent23-cubes`        | `input1.txt` (`input2.txt` with `--power`) | `--power`: sum the powers of the minimum cube sets |
| `advent23-gear-ratios`  | `input1.txt` | `--gears`: sum gear ratios instead of part numbers |
| `advent23-scratchcards` | `input1.txt` | `--copies`: count cards won as copies instead of points |
| `advent23-seed-maps`    | `input1.txt` | `--ranges`: read the seed line as (start, length) pairs |
| `advent23-boat-race`    | `input1.txt` | |
| `advent23-camel-cards`  | `input1.txt` | `--jokers`: treat `J` as a joker |
| `advent23-wasteland`    | `input1.txt` | `--ghosts`: walk from every node ending in `A` at once |
| `advent23-mirage`       | `input1.txt` | |
| `advent23-aplenty`      | `input1.txt` | `--combinations`: count accepted rating combinations |
| `advent23-pulses`       | `input1.txt` | `--presses N`, `--watch`: report low sends by multi-input conjunctions, `--graph`: draw the network |
| `advent23-step-counter` | `input.txt`  | `--steps N`, `--infinite`: tile the map endlessly |
| `advent23-sand-slabs`   | `input.txt`  | |
| `advent23-slab-chain`   | `input.txt`  | `--safe`: count safe bricks instead, `--resimulate`: drop the whole stack again for each brick |
| `advent23-hail-paths`   | `input.txt`  | `--low X`, `--high X`: bounds of the test area |
| `advent23-rock-throw`   | `input.txt`  | |
| `advent23-long-walk`    | `input.txt`  | `--hike`: treat slopes as ordinary paths |
| `advent23-snowverload`  | `input.txt`  | |

Without options `advent23-pulses` presses the button 1000 times; with
`--watch` it presses 9999 times. `advent23-step-counter` takes 64 steps, or
26501365 steps with `--infinite`.

For example:

```
advent23-camel-cards --jokers input.txt
advent23-sand-slabs input.txt
```

### Graph files

Some commands also write a Graphviz file into the current directory. They then
try to turn it into a PDF with the Graphviz tools:

- `advent23-wasteland` without `--ghosts` writes `graph.dot` and runs `neato`.
- `advent23-aplenty` without `--combinations` writes `graph.dot` and runs `dot`.
- `advent23-pulses --graph` writes `graph.dot` and runs `neato`.
- `advent23-sand-slabs` writes `graph2.dot` and runs `dot`.
- `advent23-long-walk` writes `graph.dot` and runs `dot`, or, with `--hike`,
  writes `graph2.dot` and runs `neato`.
- `advent23-snowverload` writes `graph.dot` and runs `neato`.

Graphviz is not installed with this package. If it is missing, the command
reports that and still prints its answer.

## Library use

The same work can be done from Python:

```python
from advent23 import trebuchet, camel_cards, mirage

text = "1abc2\npqr3stu8vwx\n"
print(trebuchet.sum_calibration(text, spelled=False))   # 50

hands = "32T3K 765\nT55J5 684\n"
print(camel_cards.total_winnings(hands, jokers=True))

print(mirage.predict([0, 3, 6, 9, 12, 15]))              # (-3, 18)
```

The main entry points of each module are:

- `trebuchet`: `calibration_value`, `spelled_calibration_value`, `sum_calibration`
- `cubes`: `parse_game`, `is_possible`, `minimum_set`, `sum_possible_ids`, `sum_powers`
- `gear_ratios`: `part_numbers`, `sum_part_numbers`, `gear_ratios`, `sum_gear_ratios`
- `scratchcards`: `Card` (with `matches()` and `points()`), `parse_cards`,
  `total_points`, `total_cards`
- `seed_maps`: `RangeMap` (with `map_value` and `map_ranges`), `parse_almanac`,
  `lowest_location`, `lowest_location_ranges`
- `boat_race`: `ways_to_win`, `product_of_ways`
- `camel_cards`: `HandType`, `hand_type`, `hand_type_with_jokers`, `total_winnings`
- `wasteland`: `parse_network`, `steps_to_zzz`, `ghost_cycles`, `ghost_steps`, `network_dot`
- `mirage`: `predict`, `extrapolation_sums`
- `aplenty`: `Rule`, `Workflow`, `parse_system`, `is_accepted`, `accepted_rating_sum`,
  `count_combinations`, `accepted_combinations`, `workflow_dot`
- `pulses`: `ModuleKind`, `PulseNetwork` (with `press()`), `parse_network`,
  `pulse_product`, `low_conjunctions`, `network_dot`
- `step_counter`: `parse_garden`, `reachable_exactly`, `count_plots`, `count_infinite_plots`
- `sand_slabs`: `Brick`, `Support`, `parse_bricks`, `settle`, `disintegratable`,
  `count_disintegratable`, `brick_name`, `stack_dot`
- `slab_chain`: `fall`, `chain_reaction_total`, `count_disintegratable_by_resimulation`,
  `chain_reaction_total_by_resimulation`
- `hail_paths`: `Hailstone`, `parse_hailstones`, `path_intersection`, `count_crossings`
- `rock_throw`: `rock_trajectory`, `position_sum`. These use exact fractions, so the
  result is an `int` when it is whole.
- `long_walk`: `Junction`, `find_junctions`, `longest_downhill`, `longest_hike`,
  `longest_path`, `junction_dot`
- `snowverload`: `parse_components`, `edge_tally`, `split_product`, `component_dot`

Malformed input raises `ValueError`.

The `*_dot` functions return Graphviz DOT text. They do not render it.