#!/usr/bin/env python3
"""
Kinematics Status Module

Result codes reported by the leg solver, the trilateration solvers and the
engine. Solver failures are returned, never raised.
"""

from enum import IntEnum


class KinematicsStatus(IntEnum):
    """Outcome of a single-pose IK or FK solve."""

    SUCCESS = 0

    # Inverse kinematics
    LEG_UNREACHABLE = 1
    UNIVERSAL_JOINT_LIMIT_EXCEEDED = 2
    DIRECTION_CONSTRAINT_VIOLATED = 3
    MAX_NEGATIVE_ANGLE_EXCEEDED = 4

    # Forward kinematics
    DEGENERATE_GEOMETRY = 5
    NO_REAL_SOLUTION = 6
    SINGULAR_CONFIGURATION = 7

    @property
    def ok(self) -> bool:
        return self is KinematicsStatus.SUCCESS
