#!/usr/bin/env python3
"""
Delta Intersection Module

Forward kinematics by trilateration. Each knee point is the centre of a
sphere of radius l (lower leg length); the platform centre lies on all
three spheres. The platform offsets are folded into the knee points, so
the intersection is the TCP position directly.

Two solvers:
    - three_spheres_intersection: knees at different heights
    - three_spheres_intersection_level: all knees at the same height

Each yields up to two candidates. A candidate is accepted if it lies below
the base plane and the validate callable (an IK round trip) accepts it.
"""

from typing import Callable, Optional, Tuple

import numpy as np

from .delta_geometry import DeltaGeometry
from .delta_status import KinematicsStatus

Validator = Callable[[np.ndarray], bool]
IntersectionResult = Tuple[KinematicsStatus, Optional[np.ndarray]]


def calculate_knee_points(geometry: DeltaGeometry,
                          phi1, phi2, phi3) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Calculate the knee points of all legs, shifted by the platform offsets.

    Args:
        geometry: Robot anchor geometry
        phi1, phi2, phi3: Joint angles [deg]

    Returns:
        Tuple (A1, A2, A3) of sphere centres in the base frame
    """
    real = geometry.dtype.type
    L = geometry.L
    wb, wp, up = geometry.wb, geometry.wp, geometry.up
    hsp = geometry.sp / real(2.0)
    half = real(0.5)

    t1, t2, t3 = (np.radians(real(phi)) for phi in (phi1, phi2, phi3))
    r2 = wb + L * np.cos(t2)
    r3 = wb + L * np.cos(t3)

    A1 = np.array([0.0, -wb - L * np.cos(t1) + up, -L * np.sin(t1)], dtype=geometry.dtype)
    A2 = np.array([geometry.hsqrt3 * r2 - hsp, half * r2 - wp, -L * np.sin(t2)], dtype=geometry.dtype)
    A3 = np.array([-geometry.hsqrt3 * r3 + hsp, half * r3 - wp, -L * np.sin(t3)], dtype=geometry.dtype)
    return A1, A2, A3


def _accept(candidate: np.ndarray, validate: Validator) -> bool:
    # The platform always hangs below the base plane
    if not candidate[2] < 0.0:
        return False
    return validate(candidate)


def _select(candidates, validate: Validator) -> IntersectionResult:
    for candidate in candidates:
        if _accept(candidate, validate):
            return KinematicsStatus.SUCCESS, candidate
    return KinematicsStatus.SINGULAR_CONFIGURATION, None


def three_spheres_intersection(A1: np.ndarray,
                               A2: np.ndarray,
                               A3: np.ndarray,
                               l,
                               validate: Validator) -> IntersectionResult:
    """
    Intersect three spheres whose centres are at different heights.

    Subtracting sphere 1 and sphere 2 from sphere 3 gives two planes; their
    intersection line x(y), z(y) is substituted into sphere 1, leaving a
    quadratic in y. The +sqrt root is tried before the -sqrt root.

    Args:
        A1, A2, A3: Sphere centres
        l: Sphere radius (lower leg length)
        validate: Callable returning True if a candidate passes IK

    Returns:
        Tuple of (status, position): position is [x, y, z] on SUCCESS,
        otherwise None
    """
    dtype = A1.dtype
    real = dtype.type
    two = real(2.0)
    l = real(l)

    a11, a12, a13 = two * (A3 - A1)
    if a13 == 0.0:
        return KinematicsStatus.DEGENERATE_GEOMETRY, None
    a21, a22, a23 = two * (A3 - A2)
    if a23 == 0.0:
        return KinematicsStatus.DEGENERATE_GEOMETRY, None

    A3_pow2 = np.dot(A3, A3)
    b1 = A3_pow2 - np.dot(A1, A1)
    b2 = A3_pow2 - np.dot(A2, A2)

    a1 = a11 / a13 - a21 / a23
    a2 = a12 / a13 - a22 / a23
    a3 = b2 / a23 - b1 / a13
    if a1 == 0.0:
        return KinematicsStatus.DEGENERATE_GEOMETRY, None

    # x = a4*y + a5, z = a6*y + a7
    a4 = -a2 / a1
    a5 = -a3 / a1
    a6 = (-a21 * a4 - a22) / a23
    a7 = (b2 - a21 * a5) / a23

    a = a4 * a4 + real(1.0) + a6 * a6
    if a == 0.0:
        return KinematicsStatus.DEGENERATE_GEOMETRY, None
    b = two * a4 * (a5 - A1[0]) - two * A1[1] + two * a6 * (a7 - A1[2])
    c = a5 * (a5 - two * A1[0]) + a7 * (a7 - two * A1[2]) + np.dot(A1, A1) - l * l

    delta = b * b - real(4.0) * a * c
    if delta < 0.0:
        return KinematicsStatus.NO_REAL_SOLUTION, None
    root = np.sqrt(delta)

    candidates = []
    for y in ((-b + root) / (two * a), (-b - root) / (two * a)):
        candidates.append(np.array([a4 * y + a5, y, a6 * y + a7], dtype=dtype))

    return _select(candidates, validate)


def three_spheres_intersection_level(A1: np.ndarray,
                                     A2: np.ndarray,
                                     A3: np.ndarray,
                                     l,
                                     validate: Validator) -> IntersectionResult:
    """
    Intersect three spheres whose centres share the same height.

    The radical planes are vertical, so x and y follow from a 2x2 linear
    system and z from a quadratic around the common knee height. The root
    above the knees (z1) is tried before the one below (z2).

    Args:
        A1, A2, A3: Sphere centres with equal z
        l: Sphere radius (lower leg length)
        validate: Callable returning True if a candidate passes IK

    Returns:
        Tuple of (status, position): position is [x, y, z] on SUCCESS,
        otherwise None
    """
    dtype = A1.dtype
    real = dtype.type
    two = real(2.0)
    l = real(l)

    zn = A1[2]
    a = two * (A3[0] - A1[0])
    b = two * (A3[1] - A1[1])
    d = two * (A3[0] - A2[0])
    e = two * (A3[1] - A2[1])
    A3_pow2 = A3[0] * A3[0] + A3[1] * A3[1]
    c = A3_pow2 - A1[0] * A1[0] - A1[1] * A1[1]
    f = A3_pow2 - A2[0] * A2[0] - A2[1] * A2[1]

    denom = a * e - b * d
    if denom == 0.0:
        return KinematicsStatus.DEGENERATE_GEOMETRY, None
    x = (c * e - b * f) / denom
    y = (a * f - c * d) / denom

    B = -two * zn
    C = zn * zn - l * l + (x - A1[0]) * (x - A1[0]) + (y - A1[1]) * (y - A1[1])
    delta = B * B - real(4.0) * C
    if delta < 0.0:
        return KinematicsStatus.NO_REAL_SOLUTION, None
    root = np.sqrt(delta)

    z1 = (-B + root) / two
    z2 = (-B - root) / two
    candidates = [np.array([x, y, z], dtype=dtype) for z in (z1, z2)]

    return _select(candidates, validate)
