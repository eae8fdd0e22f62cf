"""
Delta Kinematics Module

Closed-form inverse and forward position kinematics for a 3-DOF delta
parallel robot with revolute inputs and parallelogram lower legs.

Modules:
    - delta_solver: Engine (use DeltaKinematics for IK/FK on pose batches)
    - delta_geometry: Anchor geometry and ±120° frame rotations
    - delta_leg: Single-leg joint angle solver
    - delta_intersection: Three-sphere trilateration for FK
    - delta_types: Dimensions, pose and trajectory data
    - delta_status: Result codes
"""

from .delta_solver import DeltaKinematics
from .delta_geometry import DeltaGeometry, rotate_by_matrix, ROTZ120, MROTZ120
from .delta_leg import calculate_angle
from .delta_intersection import (calculate_knee_points,
                                 three_spheres_intersection,
                                 three_spheres_intersection_level)
from .delta_types import DeltaGeometricDim, DeltaVector, DeltaTrajectory
from .delta_status import KinematicsStatus

__all__ = [
    'DeltaKinematics',
    'DeltaGeometry',
    'rotate_by_matrix',
    'ROTZ120',
    'MROTZ120',
    'calculate_angle',
    'calculate_knee_points',
    'three_spheres_intersection',
    'three_spheres_intersection_level',
    'DeltaGeometricDim',
    'DeltaVector',
    'DeltaTrajectory',
    'KinematicsStatus'
]
