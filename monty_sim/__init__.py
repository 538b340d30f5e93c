"""Monty Hall Simulator

A tiny, readable simulator of the Monty Hall switching puzzle.
Uses NumPy for seeded, reproducible trials.
"""

__version__ = "0.1.0"
