# nocsim

A small cycle-based simulator of packet traffic on a square 2D-mesh
network-on-chip. Every router has north, east, south and west input and
output buffers; packets are routed dimension-ordered (first along X, then
along Y) and stall whenever the next buffer is full.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running a simulation

```
nocsim SIZE BUFFER_CAPACITY INJECTION_RATE TIMESTEPS DEBUGINFO
```

- `SIZE` – side of the mesh, at least 2 (3 gives a 3x3 mesh of 9 routers)
- `BUFFER_CAPACITY` – packets each buffer can hold, from 1 to 16
- `INJECTION_RATE` – probability, from 0 to 1.0, that a router creates a
  new packet at each timestep
- `TIMESTEPS` – number of simulation steps, at least 1
- `DEBUGINFO` – nonzero to record the busy flags of every buffer slot of
  every router after each step, `0` for the plain event log

For example:

```
nocsim 4 8 0.3 1000 0
```

Numbers are read leniently: only the leading numeric part of each
argument counts, and an argument with none is taken as 0. When fewer than
five arguments are given or one is out of range, a usage message is
printed and the command exits with status 1.

The step-by-step log of the run is written to the file `noc_output` in the
current directory (the file is opened, and so emptied, before the
arguments are checked). A summary goes to standard output: packets
injected and delivered, success rate, average and maximum latency,
packets that stalled, and injections that failed because every input
buffer of the source router was full. The "injected" count includes those
failed injections.

## Using it from Python

```python
import random
import sys

from nocsim.simulation import Simulation
from nocsim.stats import average_latency, total_delivered

sim = Simulation(size=3, capacity=4, injection_rate=0.5,
                 log=sys.stdout, rng=random.Random(1))
sim.run(100, False)

print(total_delivered(sim.packets), average_latency(sim.packets))
```

`Simulation` raises `ValueError` for a size below 1 or a capacity outside
1–16. When `log` is omitted the log goes to an in-memory `io.StringIO`;
when `rng` is omitted a fresh `random.Random` is used. Besides `run`, a
simulation can be driven with `step(timestep)`, or with `inject(timestep)`
and `move()` separately. After a run, `sim.packets` holds every `Packet`,
`sim.packets_created` their number and `sim.failed_to_inject` the failed
injections.

The helpers in `nocsim.stats` take any iterable of `nocsim.packet.Packet`
objects:

- `average_latency` – mean latency of delivered packets, NaN when none
  were delivered
- `max_latency` – largest latency of a delivered packet, as an integer
- `total_delivered` – number of delivered packets
- `total_stalled` – number of packets that stalled at least once

Lower-level pieces are also available: `calculate_x_steps` and
`calculate_y_steps` in `nocsim.packet`, and `Router`, `Direction`,
`find_free_slot` and `output_direction` in `nocsim.router`.