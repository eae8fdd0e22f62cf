#!/usr/bin/env python3
"""
Delta Leg Module

Single-leg inverse problem: the upper arm (length L) and the parallelogram
(length l) form a two-link chain between the base anchor B and the
platform joint point P. Both points are given in the frame of leg 1, where
the arm swings in the yz plane and the parallelogram offset runs along x.
"""

from typing import Optional, Tuple

import numpy as np

from .delta_status import KinematicsStatus


def calculate_angle(B: np.ndarray,
                    P: np.ndarray,
                    L,
                    l,
                    max_neg_angle,
                    min_parallelogram_angle) -> Tuple[KinematicsStatus, Optional[np.floating]]:
    """
    Calculate the joint angle of one leg.

    Args:
        B: Base anchor [x, y, z] in the leg-1 frame
        P: Platform joint point [x, y, z] in the leg-1 frame
        L: Upper leg length
        l: Lower leg parallelogram length
        max_neg_angle: Most negative allowed joint angle [deg]
        min_parallelogram_angle: Universal joint limit [deg]

    Returns:
        Tuple of (status, phi): phi is the joint angle in degrees when
        status is SUCCESS, otherwise None
    """
    P = np.asarray(P)
    B = np.asarray(B, dtype=P.dtype)
    real = P.dtype.type
    L = real(L)
    l = real(l)

    # Projection of the parallelogram on the yz plane
    lyz = l * l - P[0] * P[0]
    if lyz <= 0.0:
        return KinematicsStatus.LEG_UNREACHABLE, None
    lyz = np.sqrt(lyz)

    # Universal joint range
    if P[0] != 0.0:
        if np.degrees(np.arctan(lyz / np.abs(P[0]))) < min_parallelogram_angle:
            return KinematicsStatus.UNIVERSAL_JOINT_LIMIT_EXCEEDED, None

    # B -> P reduced to the yz plane
    vector_bp = np.array([P[1] - B[1], P[2] - B[2]], dtype=P.dtype)

    # Platform joint must sit below the base anchor
    if vector_bp[1] >= 0.0:
        return KinematicsStatus.DIRECTION_CONSTRAINT_VIOLATED, None

    d = np.sqrt(vector_bp[0] * vector_bp[0] + vector_bp[1] * vector_bp[1])

    # Triangle L, lyz, d must close
    if d >= lyz + L or d <= np.abs(lyz - L):
        return KinematicsStatus.LEG_UNREACHABLE, None

    alpha = real(180.0) + np.degrees(np.arctan2(vector_bp[1], vector_bp[0]))

    # Cosine theorem
    cos_beta = (L * L + d * d - lyz * lyz) / (real(2.0) * L * d)
    beta = np.degrees(np.arccos(np.clip(cos_beta, real(-1.0), real(1.0))))

    phi = alpha - beta
    if phi < max_neg_angle:
        return KinematicsStatus.MAX_NEGATIVE_ANGLE_EXCEEDED, None

    return KinematicsStatus.SUCCESS, phi
