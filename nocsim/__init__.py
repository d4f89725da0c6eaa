"""Cycle-based simulator of packet traffic on a 2D-mesh network-on-chip."""

__version__ = "0.1.0"

__all__ = ["packet", "router", "stats", "simulation", "cli"]