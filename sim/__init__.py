"""Node simulator for local testing."""

from .sim import ISim, Sim

__all__ = ["ISim", "Sim"]
