# philosim

A simulation of the dining philosophers problem. Philosophers sit at a round
table with one fork between each pair of neighbours. Each philosopher runs in
its own thread and repeats the same steps: take two forks, eat, sleep, think.
The thread that started the simulation then acts as the monitor. If a
philosopher goes longer than `time_to_die` milliseconds without starting a
meal, the monitor reports the death and the simulation ends.

## Installation

```
pip install .
```

## Usage

```
philosim number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same command is also available as `python -m philosim.cli`.

All times are in milliseconds. Every argument must be a positive integer of
at most 10 digits and no larger than 2147483647. Leading whitespace and
leading `+` signs are accepted.

If the optional fifth argument is given, the simulation stops quietly once
every philosopher has eaten that many times.

Example:

```
philosim 5 800 200 200 7
```

Each event is printed on its own line as the milliseconds since the start,
the philosopher's number (counting from 1), and the event:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
```

The events are `has taken a fork`, `is eating`, `is sleeping`, `is thinking`
and `died`. Nothing is printed after a death.

With a single philosopher there is only one fork: he takes it, waits
`time_to_die` milliseconds, dies, and the command exits with status 1.
No threads are started in that case.

When the arguments are wrong, the command prints `Error: wrong number of
arguments` or `Error: invalid input` and exits with status 1. Otherwise a run
with two or more philosophers exits with status 0, whether it ended by a death
or because everyone had eaten enough.

## Using it as a library

```python
import sys

from philosim.parsing import parse_args, ArgumentError
from philosim.simulation import Table

try:
    config = parse_args(["4", "410", "200", "200", "3"])
except ArgumentError as exc:
    print(exc)
else:
    Table(config, sys.stdout).run()
```

- `parse_args(args)` takes the arguments without the program name and returns
  a `Config` with the fields `philosophers`, `time_to_die`, `time_to_eat`,
  `time_to_sleep` and `meals` (`None` when no meal count was given). It raises
  `ArgumentError` (a `ValueError`) when the input is invalid. `parse_number`
  checks a single argument the same way.
- `Table(config, out)` sets up the forks and philosophers and writes its event
  lines to `out` (standard output when `out` is `None`).
- `Table.run()` starts the philosopher threads, monitors them until the
  simulation ends and joins them. It returns `True` for a normal run and
  `False` for the single-philosopher case. `start()`, `monitor()` and `join()`
  perform these steps one at a time; `stop()` ends the run and `ended()`
  tells whether it has ended.

## Running the tests

```
pip install .[test]
pytest
```