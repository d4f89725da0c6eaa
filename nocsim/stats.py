"""Summary statistics over simulated packets."""

from __future__ import annotations

from typing import Iterable

from .packet import Packet


def average_latency(packets: Iterable[Packet]) -> float:
    """Mean latency of delivered packets; NaN when none were delivered."""
    latencies = [p.latency for p in packets if p.delivered]
    if not latencies:
        return float("nan")
    return sum(latencies) / len(latencies)


def max_latency(packets: Iterable[Packet]) -> int:
    """Largest latency among delivered packets, truncated to an integer."""
    result = 0
    for packet in packets:
        if packet.delivered and packet.latency > result:
            result = int(packet.latency)
    return result


def total_delivered(packets: Iterable[Packet]) -> int:
    """Number of delivered packets."""
    return sum(1 for p in packets if p.delivered)


def total_stalled(packets: Iterable[Packet]) -> int:
    """Number of packets that stalled at least once."""
    return sum(1 for p in packets if p.stall)