"""
Configuration & Global Constants
================================
This module serves as the central registry for numeric defaults shared by
the geometry routines and the logging setup.

Exports:
    LOGGER_NAME (str): Root logger namespace of the package.
    TOLERANCE (float): Default relative tolerance for tangency and coincidence tests.
"""

LOGGER_NAME: str = "circleintersections"

# Tangency and coincidence tests compare distances against TOLERANCE * max(1, r1 + r2)
TOLERANCE: float = 1e-9
