"""Time-stepped simulation of packets crossing a 2D mesh of routers."""

from __future__ import annotations

import io
import random
from typing import List, Optional, TextIO

from .packet import Packet, Slot, calculate_x_steps, calculate_y_steps
from .router import MAX_BUFFER_CAPACITY, Router, find_free_slot, output_direction


def _release(slot: Optional[Slot]) -> None:
    if slot is not None:
        buffer, index = slot
        buffer[index] = 0


class Simulation:
    """A size x size mesh of routers with XY-routed packets.

    Every router may inject a packet on each timestep with probability
    ``injection_rate``; packets then advance one buffer stage per step.
    Progress is written as text to ``log``.
    """

    def __init__(
        self,
        size: int,
        capacity: int,
        injection_rate: float,
        log: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if size < 1:
            raise ValueError(f"mesh size must be at least 1, got {size}")
        if not 1 <= capacity <= MAX_BUFFER_CAPACITY:
            raise ValueError(
                f"buffer capacity must be between 1 and {MAX_BUFFER_CAPACITY}, got {capacity}"
            )
        self.size = size
        self.capacity = capacity
        self.injection_rate = injection_rate
        self.log: TextIO = log if log is not None else io.StringIO()
        self.rng = rng if rng is not None else random.Random()
        self.routers: List[Router] = [Router() for _ in range(size * size)]
        self.packets: List[Packet] = []
        self.failed_to_inject = 0

    @property
    def packets_created(self) -> int:
        """Number of injection attempts, failed ones included."""
        return len(self.packets)

    def _write(self, text: str) -> None:
        self.log.write(text)

    def inject(self, timestep: int) -> None:
        """Give every router one chance to inject a new packet."""
        self._write("-----------------------\n")
        self._write(f"Timestep: {timestep}\n")
        total = len(self.routers)

        for start, router in enumerate(self.routers):
            if self.rng.random() > self.injection_rate:
                continue
            finish = self.rng.randrange(total)

            # A failed injection still takes a packet number; the blank
            # packet left in its place counts in the statistics.
            packet = Packet()
            packet_id = len(self.packets)
            self.packets.append(packet)

            free = [
                (buffer, index)
                for buffer in router.input_buffers()
                if (index := find_free_slot(buffer, self.capacity)) is not None
            ]
            if not free:
                self._write(f"Injection failed due to stall at {start} router\n")
                self.failed_to_inject += 1
                continue

            # West is preferred, then south, east and north.
            buffer, index = free[-1]
            packet.id = packet_id
            packet.start_point = start
            packet.finish_point = finish
            packet.location = start
            packet.in_input_buffer = True
            buffer[index] = 1
            packet.slot = (buffer, index)
            packet.previous_slot = packet.slot

            if start == finish:
                packet.delivered = True
                buffer[index] = 0

            packet.xsteps, packet.xdir = calculate_x_steps(start, finish, self.size)
            packet.ysteps, packet.ydir = calculate_y_steps(start, finish, self.size)

            self._write(
                f"Created packet with id: {packet.id}, start point: {start}, end point: {finish}\n"
            )

    def _advance_from_output(self, packet: Packet) -> None:
        if packet.xsteps > 0:
            packet.previous_location = packet.location
            packet.location += packet.xdir
        elif packet.ysteps > 0:
            packet.previous_location = packet.location
            packet.location += packet.ydir
        else:
            packet.delivered = True
            _release(packet.slot)
            _release(packet.previous_slot)
            return

        if packet.slot is not None:
            packet.previous_slot = packet.slot
        buffer = self.routers[packet.location].input_buffer(packet.output_buffer)
        packet.slot = (buffer, 0)
        packet.latency += 1.0

        index = find_free_slot(buffer, self.capacity)
        if index is not None:
            packet.slot = (buffer, index)
            self._write(
                f"Packet ID: {packet.id} moves from previous location : "
                f"({packet.previous_location}) to location: ({packet.location})\n"
            )
            buffer[index] = 1
            packet.in_input_buffer = True
            _release(packet.previous_slot)
            if packet.xsteps > 0:
                packet.xsteps -= 1
            elif packet.ysteps > 0:
                packet.ysteps -= 1
        else:
            self._write(f"ID: {packet.id} We have stall. Added latency\n")
            packet.location = packet.previous_location
            packet.stall = True

    def _advance_from_input(self, packet: Packet) -> None:
        if packet.location == packet.finish_point:
            packet.delivered = True
            self._write(
                f"Packet ID: {packet.id} succesfully delivered after {packet.latency:.1f} latency!\n"
            )
            _release(packet.slot)
            return

        if packet.slot is not None:
            packet.previous_slot = packet.slot
        buffer = self.routers[packet.location].output_buffer(packet.output_buffer)
        packet.slot = (buffer, 0)
        packet.latency += 1.0

        index = find_free_slot(buffer, self.capacity)
        if index is not None:
            packet.slot = (buffer, index)
            self._write(
                f"Packet ID: {packet.id} moves from input buffer to output buffer at {packet.location}\n"
            )
            buffer[index] = 1
            packet.in_input_buffer = False
            _release(packet.previous_slot)
        else:
            self._write(f"ID: {packet.id} We have stall. Added latency.\n")
            packet.stall = True

    def move(self) -> None:
        """Advance every undelivered packet by one buffer stage."""
        for packet in self.packets:
            packet.xsteps, packet.xdir = calculate_x_steps(
                packet.location, packet.finish_point, self.size
            )
            packet.ysteps, packet.ydir = calculate_y_steps(
                packet.location, packet.finish_point, self.size
            )
            packet.output_buffer = output_direction(
                packet.xsteps, packet.ysteps, packet.xdir, packet.ydir
            )
            if packet.delivered:
                continue
            if packet.in_input_buffer:
                self._advance_from_input(packet)
            else:
                self._advance_from_output(packet)

    def step(self, timestep: int) -> None:
        """Inject new packets, then move the existing ones."""
        self.inject(timestep)
        self.move()

    def run(self, timesteps: int, debug: bool = False) -> None:
        """Run the given number of timesteps, dumping buffer state when debug is set."""
        for timestep in range(timesteps):
            self.step(timestep)
            if debug:
                for number, router in enumerate(self.routers):
                    for slot in range(self.capacity):
                        self._write(
                            f"Router {number}, slot {slot} | {router.format_slot(slot)}\n"
                        )