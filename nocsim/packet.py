"""Packets travelling through the mesh and XY routing step counts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

Slot = Tuple[List[int], int]
"""A reference to one slot of a router buffer: the buffer list and an index."""


@dataclass
class Packet:
    """State of a single packet in the network."""

    id: int = 0
    start_point: int = 0
    finish_point: int = 0
    location: int = 0
    previous_location: int = 0
    xsteps: int = 0
    ysteps: int = 0
    xdir: int = 0
    ydir: int = 0
    hops: int = 0
    latency: float = 0.0
    stall: bool = False
    delivered: bool = False
    in_input_buffer: bool = False
    output_buffer: Optional[int] = 0
    slot: Optional[Slot] = None
    previous_slot: Optional[Slot] = None


def calculate_x_steps(start: int, finish: int, dimension: int) -> tuple[int, int]:
    """Return the horizontal hop count and direction (+1 right, -1 left)."""
    column = start % dimension
    target = finish % dimension
    direction = 1 if target > column else -1
    return abs(target - column), direction


def calculate_y_steps(start: int, finish: int, dimension: int) -> tuple[int, int]:
    """Return the vertical hop count and the index offset of one hop (+/-dimension)."""
    row = start // dimension
    target = finish // dimension
    direction = dimension if target > row else -dimension
    return abs(target - row), direction