"""
Robot Configuration Package
============================

Centralized configuration for the delta robot kinematics.
All parameters are organized into logical modules:

- physical: Reference robot dimensions and joint limits
- solver: Numeric type and solver defaults

Usage:
    from robot_config import physical, solver

    # Or import specific values
    from robot_config.physical import BASE_SIDE, LOWER_LEG_LENGTH
    from robot_config.solver import DEFAULT_DTYPE
"""

# Import all submodules for convenient access
from . import physical
from . import solver

__version__ = '1.0.0'
__all__ = ['physical', 'solver']
