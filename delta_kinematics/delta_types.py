#!/usr/bin/env python3
"""
Delta Types Module

Plain data passed between the caller and the kinematics engine:
robot dimensions, pose buffers and trajectory elements.
"""

from dataclasses import dataclass, field
from typing import Tuple

from robot_config import physical as phys_config


@dataclass(frozen=True)
class DeltaGeometricDim:
    """
    Delta robot geometric dimensions and constraints.

    Attributes:
        sb: Base equilateral triangle side [mm]
        sp: Platform equilateral triangle side [mm]
        L: Upper leg length [mm]
        l: Lower leg parallelogram length [mm]
        h: Lower leg parallelogram width [mm] (stored, not used by the solvers)
        max_neg_angle: Most negative arm angle, knee above the base plane [deg]
        min_parallelogram_angle: Limit introduced by the universal joints [deg]
    """

    sb: float
    sp: float
    L: float
    l: float
    h: float
    max_neg_angle: float
    min_parallelogram_angle: float

    @classmethod
    def from_config(cls) -> 'DeltaGeometricDim':
        """Reference robot dimensions from robot_config.physical."""
        return cls(
            sb=phys_config.BASE_SIDE,
            sp=phys_config.PLATFORM_SIDE,
            L=phys_config.UPPER_LEG_LENGTH,
            l=phys_config.LOWER_LEG_LENGTH,
            h=phys_config.PARALLELOGRAM_WIDTH,
            max_neg_angle=phys_config.MAX_NEGATIVE_ANGLE,
            min_parallelogram_angle=phys_config.MIN_PARALLELOGRAM_ANGLE
        )


@dataclass
class DeltaVector:
    """
    TCP position and joint angles of one pose.

    IK reads x, y, z and writes phi1..phi3. FK reads phi1..phi3 and
    writes x, y, z. Angles are in degrees, negative above the base plane.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    phi1: float = 0.0
    phi2: float = 0.0
    phi3: float = 0.0

    @property
    def cartesian(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def joints(self) -> Tuple[float, float, float]:
        return (self.phi1, self.phi2, self.phi3)

    def clear(self):
        """Zero all six fields."""
        self.x = self.y = self.z = 0.0
        self.phi1 = self.phi2 = self.phi3 = 0.0


@dataclass
class DeltaTrajectory:
    """
    One element of a trajectory: TCP position, velocity and acceleration.

    Only pos is ever read or written by the engine.
    """

    pos: DeltaVector = field(default_factory=DeltaVector)
    vel: DeltaVector = field(default_factory=DeltaVector)
    accel: DeltaVector = field(default_factory=DeltaVector)
