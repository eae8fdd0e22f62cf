import math

import numpy as np
import pytest

from delta_kinematics import KinematicsStatus, calculate_angle

L = 200.0
l = 530.0
MAX_NEG = -5.0
MIN_PARALLELOGRAM = 55.0
ORIGIN = np.array([0.0, 0.0, 0.0])


def solve(P, max_neg=MAX_NEG, min_parallelogram=MIN_PARALLELOGRAM, B=ORIGIN):
    return calculate_angle(B, np.array(P, dtype=np.float64), L, l, max_neg, min_parallelogram)


def expected_phi(P, B=ORIGIN):
    lyz = math.sqrt(l * l - P[0] * P[0])
    vy, vz = P[1] - B[1], P[2] - B[2]
    d = math.hypot(vy, vz)
    alpha = 180.0 + math.degrees(math.atan2(vz, vy))
    beta = math.degrees(math.acos((L * L + d * d - lyz * lyz) / (2 * L * d)))
    return alpha - beta


def test_straight_below_anchor():
    status, phi = solve([0.0, 0.0, -500.0])

    assert status is KinematicsStatus.SUCCESS
    assert phi == pytest.approx(90.0 - math.degrees(math.acos(9100.0 / 200000.0)))


@pytest.mark.parametrize("P", [
    [100.0, 0.0, -500.0],
    [-100.0, 50.0, -450.0],
    [30.0, 150.0, -600.0],
])
def test_matches_closed_form(P):
    status, phi = solve(P)

    assert status is KinematicsStatus.SUCCESS
    assert phi == pytest.approx(expected_phi(P))


def test_offset_anchor():
    B = np.array([330.0, -190.0, 0.0])
    P = [0.0, -52.0, -500.0]
    status, phi = solve(P, B=B)

    assert status is KinematicsStatus.SUCCESS
    assert phi == pytest.approx(expected_phi(P, B))


def test_arm_fully_stretched_is_unreachable():
    # d == lyz + L
    status, phi = solve([0.0, 0.0, -730.0])
    assert status is KinematicsStatus.LEG_UNREACHABLE
    assert phi is None


def test_arm_fully_folded_is_unreachable():
    # d == |lyz - L|
    status, phi = solve([0.0, 0.0, -330.0])
    assert status is KinematicsStatus.LEG_UNREACHABLE
    assert phi is None


def test_just_inside_triangle_limits():
    assert solve([0.0, 0.0, -729.9])[0] is KinematicsStatus.SUCCESS
    assert solve([0.0, 0.0, -330.1], max_neg=-180.0)[0] is KinematicsStatus.SUCCESS


@pytest.mark.parametrize("px", [530.0, 600.0, -600.0])
def test_lateral_offset_beyond_parallelogram(px):
    status, phi = solve([px, 0.0, -500.0])
    assert status is KinematicsStatus.LEG_UNREACHABLE
    assert phi is None


@pytest.mark.parametrize("px", [400.0, -400.0])
def test_universal_joint_limit(px):
    status, phi = solve([px, 0.0, -500.0])
    assert status is KinematicsStatus.UNIVERSAL_JOINT_LIMIT_EXCEEDED
    assert phi is None


def test_universal_joint_limit_is_configurable():
    assert solve([400.0, 0.0, -500.0], min_parallelogram=30.0)[0] is KinematicsStatus.SUCCESS


@pytest.mark.parametrize("pz", [0.0, 10.0])
def test_joint_above_anchor(pz):
    status, phi = solve([0.0, 0.0, pz])
    assert status is KinematicsStatus.DIRECTION_CONSTRAINT_VIOLATED
    assert phi is None


def test_max_negative_angle():
    # Knee ends up well above the base plane (about -48.5°)
    status, phi = solve([0.0, -600.0, -100.0])
    assert status is KinematicsStatus.MAX_NEGATIVE_ANGLE_EXCEEDED
    assert phi is None

    status, phi = solve([0.0, -600.0, -100.0], max_neg=-90.0)
    assert status is KinematicsStatus.SUCCESS
    assert phi == pytest.approx(expected_phi([0.0, -600.0, -100.0]))
    assert phi < -5.0


def test_float32_input_gives_float32_angle():
    P = np.array([0.0, 0.0, -500.0], dtype=np.float32)
    status, phi = calculate_angle(ORIGIN, P, np.float32(L), np.float32(l),
                                  np.float32(MAX_NEG), np.float32(MIN_PARALLELOGRAM))

    assert status is KinematicsStatus.SUCCESS
    assert isinstance(phi, np.float32)
    assert phi == pytest.approx(expected_phi([0.0, 0.0, -500.0]), abs=1e-3)
