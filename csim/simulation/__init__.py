"""Simulation package shim.

Exposes the Simulation driver and its configuration at `csim.simulation`
so callers can write `from csim.simulation import Simulation`.
"""
from .config import SimulationConfig
from .simulation import Simulation

__all__ = ["Simulation", "SimulationConfig"]
