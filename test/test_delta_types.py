import dataclasses

import pytest

from delta_kinematics import DeltaGeometricDim, DeltaTrajectory, DeltaVector, KinematicsStatus
from robot_config import physical as phys_config


def test_dimensions_from_config():
    dim = DeltaGeometricDim.from_config()

    assert (dim.sb, dim.sp, dim.L, dim.l, dim.h) == (660.0, 90.0, 200.0, 530.0, 70.0)
    assert dim.max_neg_angle == -5.0
    assert dim.min_parallelogram_angle == 55.0
    assert dim.l == phys_config.LOWER_LEG_LENGTH


def test_dimensions_are_frozen():
    dim = DeltaGeometricDim.from_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        dim.L = 100.0


def test_vector_views_and_clear():
    v = DeltaVector(1.0, 2.0, -3.0, 4.0, 5.0, 6.0)

    assert v.cartesian == (1.0, 2.0, -3.0)
    assert v.joints == (4.0, 5.0, 6.0)

    v.clear()
    assert v == DeltaVector()


def test_trajectory_elements_are_independent():
    first = DeltaTrajectory()
    second = DeltaTrajectory()
    first.pos.x = 10.0

    assert second.pos.x == 0.0
    assert first.vel is not first.pos


def test_status_codes():
    assert KinematicsStatus.SUCCESS == 0
    assert KinematicsStatus.SUCCESS.ok
    assert not KinematicsStatus.LEG_UNREACHABLE.ok
    assert len(KinematicsStatus) == 8
