"""Command-line entry point for the mesh network simulator."""

from __future__ import annotations

import random
import re
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from .router import MAX_BUFFER_CAPACITY
from .simulation import Simulation
from .stats import average_latency, max_latency, total_delivered, total_stalled

OUTPUT_FILE = "noc_output"

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class _Arguments:
    size: int
    capacity: int
    injection_rate: float
    timesteps: int
    debug: bool


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def usage() -> str:
    """Return the usage text."""
    return (
        "\n\n"
        "Usage: ./[executable] [size] [buffer_capacity] [injection_rate] [timesteps] [debuginfo]\n"
        "size: 2D-mesh size. For example, 3 for a 3x3 2D-mesh\n"
        f"buffer_capacity: the amount of packets a buffer can store. Max is {MAX_BUFFER_CAPACITY}\n"
        "injection_rate: the probability each router will create a new packet at each new "
        "timestep. Must be a float number from 0 to 1.0\n"
        "timesteps: total simulation steps\n"
        "debuginfo: 1 for extra debug info, 0 for simple readable output\n"
        "\n\n"
    )


def parse_args(argv: Sequence[str]) -> _Arguments:
    """Parse the five positional arguments; raise ValueError when any is invalid."""
    if len(argv) < 5:
        raise ValueError("expected five arguments")
    size = _leading_int(argv[0])
    capacity = _leading_int(argv[1])
    injection_rate = _leading_float(argv[2])
    timesteps = _leading_int(argv[3])
    debug = _leading_int(argv[4]) != 0

    if size < 2:
        raise ValueError(f"mesh size must be at least 2, got {size}")
    if capacity > MAX_BUFFER_CAPACITY or capacity < 1:
        raise ValueError(f"buffer capacity out of range: {capacity}")
    if injection_rate > 1.0 or injection_rate < 0:
        raise ValueError(f"injection rate out of range: {injection_rate}")
    if timesteps < 1:
        raise ValueError(f"timesteps must be at least 1, got {timesteps}")

    return _Arguments(size, capacity, injection_rate, timesteps, debug)


def _success_rate(delivered: int, created: int) -> float:
    return 100 * delivered / created if created else float("nan")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulator from command-line arguments and print summary statistics."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        log = open(OUTPUT_FILE, "w", encoding="utf-8")
    except OSError as exc:
        print(f"Failed to open file: {exc}", file=sys.stderr)
        return 1

    with log:
        try:
            options = parse_args(args)
        except ValueError:
            print(usage(), end="")
            return 1
        simulation = Simulation(
            options.size, options.capacity, options.injection_rate, log, random.Random()
        )
        simulation.run(options.timesteps, options.debug)

    packets = simulation.packets
    created = simulation.packets_created
    delivered = total_delivered(packets)
    print("STATS-----------------------------------------------------")
    print(f"In total, {created} packets have been injected")
    print(f"Out of those packets, {delivered} have been succesfully delivered")
    print(f"That equals a success rate of {_success_rate(delivered, created):.2f}")
    print(f"Average latency is: {average_latency(packets):.2f}")
    print(f"Max latency is: {max_latency(packets)}")
    print(f"Out of total packets injected, {total_stalled(packets)} have experienced stall")
    print(f"In total, {simulation.failed_to_inject} packets have failed to be injected")
    print(f"To see the detailed simulation, check {OUTPUT_FILE} file")
    return 0


if __name__ == "__main__":
    sys.exit(main())