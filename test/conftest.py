import numpy as np
import pytest

from delta_kinematics import DeltaGeometricDim, DeltaKinematics


@pytest.fixture
def dim():
    """Reference robot: sb=660, sp=90, L=200, l=530, h=70, -5°, 55°."""
    return DeltaGeometricDim.from_config()


@pytest.fixture
def robot(dim):
    return DeltaKinematics(dim)


@pytest.fixture
def robot32(dim):
    return DeltaKinematics(dim, dtype=np.float32)
