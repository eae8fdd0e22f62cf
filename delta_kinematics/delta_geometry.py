#!/usr/bin/env python3
"""
Delta Geometry Module

Fixed anchor geometry derived from the robot dimensions, and the ±120°
rotations about the vertical axis used to express every leg in the frame
of leg 1.

Base frame: origin at the centre of the base triangle, z up, leg 1 on the
-y side. Platform frame: origin at the TCP, axes parallel to the base frame.
"""

import warnings

import numpy as np

from robot_config import solver as solver_config
from .delta_types import DeltaGeometricDim

_C = solver_config.ROTATION_120_COS
_S = solver_config.ROTATION_120_SIN

# Rotation about z by +120°
ROTZ120 = np.array([
    [_C, -_S, 0.0],
    [_S, _C, 0.0],
    [0.0, 0.0, 1.0]
])
ROTZ120.flags.writeable = False

# Rotation about z by -120°
MROTZ120 = np.array([
    [_C, _S, 0.0],
    [-_S, _C, 0.0],
    [0.0, 0.0, 1.0]
])
MROTZ120.flags.writeable = False


def resolve_dtype(dtype=None) -> np.dtype:
    """
    Normalise a dtype argument to one of the supported floating dtypes.

    Raises:
        TypeError: If dtype is not in robot_config.solver.SUPPORTED_DTYPES
    """
    if dtype is None:
        dtype = solver_config.DEFAULT_DTYPE
    resolved = np.dtype(dtype)
    if resolved not in solver_config.SUPPORTED_DTYPES:
        raise TypeError(f"Kinematics requires float32 or float64, got {resolved}")
    return resolved


def rotate_by_matrix(point: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """
    Rotate a 3D point by a 3x3 rotation matrix.

    The result keeps the dtype of point.

    Args:
        point: Point [x, y, z]
        matrix: Rotation matrix, typically ROTZ120 or MROTZ120

    Returns:
        Rotated point
    """
    point = np.asarray(point)
    return (matrix.astype(point.dtype, copy=False) @ point).astype(point.dtype, copy=False)


def _frozen(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.flags.writeable = False
    return arr


class DeltaGeometry:
    """
    Immutable anchor geometry of a delta robot.

    Attributes:
        wb: Planar distance from base frame to near base side [mm]
        ub: Planar distance from base frame to a base vertex [mm]
        wp: Planar distance from platform frame to near platform side [mm]
        up: Planar distance from platform frame to a platform vertex [mm]
        Pp1, Pp2, Pp3: Platform-fixed U-joint virtual connections (platform frame)
        B1, B2, B3: Fixed-base revolute joint points
        b1, b2, b3: Fixed-base vertices
    """

    def __init__(self, dim: DeltaGeometricDim, dtype=None):
        self.dim = dim
        self.dtype = resolve_dtype(dtype)
        real = self.dtype.type

        for name in ('sb', 'sp', 'L', 'l'):
            if not getattr(dim, name) > 0:
                warnings.warn(
                    f"Delta dimension {name}={getattr(dim, name)} is not positive. "
                    f"Every pose will be unreachable."
                )

        self.sb = real(dim.sb)
        self.sp = real(dim.sp)
        self.L = real(dim.L)
        self.l = real(dim.l)
        self.h = real(dim.h)
        self.max_neg_angle = real(dim.max_neg_angle)
        self.min_parallelogram_angle = real(dim.min_parallelogram_angle)

        self.sqrt3 = np.sqrt(real(3.0))
        self.hsqrt3 = self.sqrt3 / real(2.0)

        self.wb = self.sqrt3 / real(6.0) * self.sb
        self.ub = self.sqrt3 / real(3.0) * self.sb
        self.wp = self.sqrt3 / real(6.0) * self.sp
        self.up = self.sqrt3 / real(3.0) * self.sp

        wb, ub, wp, up = self.wb, self.ub, self.wp, self.up
        half_sb = self.sb / real(2.0)
        half_sp = self.sp / real(2.0)

        self.B1 = _frozen([0.0, -wb, 0.0], self.dtype)
        self.B2 = _frozen([self.hsqrt3 * wb, wb / real(2.0), 0.0], self.dtype)
        self.B3 = _frozen([-self.hsqrt3 * wb, wb / real(2.0), 0.0], self.dtype)

        self.Pp1 = _frozen([0.0, -up, 0.0], self.dtype)
        self.Pp2 = _frozen([half_sp, -wp, 0.0], self.dtype)
        self.Pp3 = _frozen([-half_sp, -wp, 0.0], self.dtype)

        self.b1 = _frozen([half_sb, -wb, 0.0], self.dtype)
        self.b2 = _frozen([0.0, -ub, 0.0], self.dtype)
        self.b3 = _frozen([-half_sb, -wb, 0.0], self.dtype)

        self.rotz120 = _frozen(ROTZ120, self.dtype)
        self.mrotz120 = _frozen(MROTZ120, self.dtype)
        self._sealed = True

    def __setattr__(self, name, value):
        if getattr(self, '_sealed', False):
            raise AttributeError(f"DeltaGeometry is immutable, cannot set {name!r}")
        super().__setattr__(name, value)

    def leg_platform_point(self, position: np.ndarray, leg: int) -> np.ndarray:
        """
        Platform joint point of a leg expressed in the frame of leg 1.

        The TCP position is rotated by -120° (leg 2) or +120° (leg 3) about z
        and offset by Pp1, so every leg can be solved against b1.

        Args:
            position: TCP position [x, y, z] in the base frame
            leg: Leg index, 1, 2 or 3

        Returns:
            Platform joint point in the leg-1 frame
        """
        p = np.asarray(position, dtype=self.dtype)
        if leg == 2:
            p = rotate_by_matrix(p, self.mrotz120)
        elif leg == 3:
            p = rotate_by_matrix(p, self.rotz120)
        elif leg != 1:
            raise ValueError(f"Leg index must be 1, 2 or 3, got {leg}")
        return p + self.Pp1
