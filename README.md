# aocsolve

Solvers for a set of daily programming puzzles. Each day has its own module:
`aocsolve.day01` to `aocsolve.day14`, `aocsolve.day17`, `aocsolve.day18` and
`aocsolve.day19`. Every module takes the whole puzzle input as a string.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

Each day module has `part_1`. Every module except `day14` also has `part_2`.
Both take the full puzzle text as input. Most answers come back as integers.
`day17.part_1` returns the program output as a comma-separated string, and
`day18.part_2` returns the blocking byte as `"x,y"`.

```python
from pathlib import Path

from aocsolve import day01, day11

text = Path("input.txt").read_text()
print(day01.part_1(text))
print(day01.part_2(text))

print(day11.part_1("125 17"))  # 55312
```

The helper functions are public, so you can look at the steps in between:

```python
from aocsolve import day07

equations = day07.parse_input("190: 10 19\n83: 17 5")
ops = [day07.Operator.ADD, day07.Operator.MULTIPLY]
print([day07.is_equation_valid(eq, ops) for eq in equations])  # [True, False]
```

Some days take sizes or counts as parameters. Use these to run the small
example puzzles:

- `day14.solve_with_input(text, dim, times)`, where `dim` is a
  `day14.Dimensions(width, height)`.
- `day18.steps_to_exit(text, bytes_to_apply, dim)` and
  `day18.first_blocking_byte(text, bytes_to_apply, dim)`, where `dim` is a
  `day18.Dimensions(width, height)`.

Days 5, 13, 17 and 19 have inputs made of blocks separated by a blank line.
Both `\n` and `\r\n` line endings are accepted.

If the input is malformed, the functions raise `ValueError`.

### Day 14, second half

`day14` has no `part_2`. Use `day14.find_christmas_tree(robots, dim)` instead.
It is an endless generator. It yields `(seconds, positions)` for each moment
when most robots gather in the centre of the room.
`day14.render_positions(positions, dim)` draws one of these moments as text,
so you can check it yourself:

```python
from aocsolve import day14

robots = day14.parse_input(text)
seconds, positions = next(day14.find_christmas_tree(robots, day14.ROOM))
print(seconds)
print(day14.render_positions(positions, day14.ROOM))
```

## What it does not do

The package is a library only. It has no command-line program and does not
read input files or fetch puzzle inputs. You load the text yourself and pass
it in. Days 15, 16 and 20 have no solver in this package.

## Running the tests

```
pytest
```