"""Mesh routers with directional input and output buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Sequence

MAX_BUFFER_CAPACITY = 16


class Direction(IntEnum):
    """Direction in which a packet leaves a router."""

    WEST = 0
    NORTH = 1
    EAST = 2
    SOUTH = 3


def _empty_buffer() -> List[int]:
    return [0] * MAX_BUFFER_CAPACITY


def find_free_slot(buffer: Sequence[int], capacity: int) -> Optional[int]:
    """Return the index of the first free slot within capacity, or None."""
    return next((i for i, busy in enumerate(buffer[:capacity]) if busy == 0), None)


def output_direction(
    xsteps: int, ysteps: int, xdirection: int, ydirection: int
) -> Optional[Direction]:
    """Return the direction a packet must leave in next, or None when it has arrived."""
    if xsteps != 0:
        if xdirection == 1:
            return Direction.EAST
        return Direction.WEST
    if ysteps != 0:
        if ydirection > 0:
            return Direction.SOUTH
        if ydirection < 0:
            return Direction.NORTH
        return Direction.WEST
    return None


@dataclass
class Router:
    """A router holding four input and four output buffers of busy flags."""

    north_output: List[int] = field(default_factory=_empty_buffer)
    east_output: List[int] = field(default_factory=_empty_buffer)
    south_output: List[int] = field(default_factory=_empty_buffer)
    west_output: List[int] = field(default_factory=_empty_buffer)
    north_input: List[int] = field(default_factory=_empty_buffer)
    east_input: List[int] = field(default_factory=_empty_buffer)
    south_input: List[int] = field(default_factory=_empty_buffer)
    west_input: List[int] = field(default_factory=_empty_buffer)

    def input_buffer(self, direction: Direction) -> List[int]:
        """Return the input buffer that receives a packet travelling in direction."""
        return {
            Direction.WEST: self.east_input,
            Direction.NORTH: self.south_input,
            Direction.EAST: self.west_input,
            Direction.SOUTH: self.north_input,
        }[Direction(direction)]

    def output_buffer(self, direction: Direction) -> List[int]:
        """Return the output buffer that sends a packet in direction."""
        return {
            Direction.WEST: self.west_output,
            Direction.NORTH: self.north_output,
            Direction.EAST: self.east_output,
            Direction.SOUTH: self.south_output,
        }[Direction(direction)]

    def input_buffers(self) -> tuple[List[int], List[int], List[int], List[int]]:
        """Return the input buffers in north, east, south, west order."""
        return self.north_input, self.east_input, self.south_input, self.west_input

    def format_slot(self, slot: int) -> str:
        """Describe the busy flags of every buffer at one slot index."""
        return (
            f"NI: {self.north_input[slot]}, EI: {self.east_input[slot]}, "
            f"SI: {self.south_input[slot]}, WI: {self.west_input[slot]}, "
            f"NO: {self.north_output[slot]}, EO: {self.east_output[slot]}, "
            f"SO: {self.south_output[slot]}, WO: {self.west_output[slot]}"
        )