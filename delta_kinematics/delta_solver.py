#!/usr/bin/env python3
"""
Delta Kinematics Solver - Engine
=================================
Inverse and forward position kinematics for a delta parallel robot with
revolute inputs and parallelogram lower legs.

Both batch calls mutate caller-owned DeltaVector buffers in place and
return 0 on success or 1 as soon as one pose fails. On an IK failure the
angles of legs already solved for that pose stay written.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .delta_geometry import DeltaGeometry
from .delta_intersection import (calculate_knee_points,
                                 three_spheres_intersection,
                                 three_spheres_intersection_level)
from .delta_leg import calculate_angle
from .delta_status import KinematicsStatus
from .delta_types import DeltaGeometricDim, DeltaVector

logger = logging.getLogger(__name__)


class DeltaKinematics:
    """
    Delta robot IPK and FPK engine.

    The engine holds only the immutable geometry, so one instance can be
    shared between threads as long as each pose is handled by one caller.
    """

    def __init__(self, dim: DeltaGeometricDim, dtype=None):
        """
        Initialize the engine.

        Args:
            dim: Robot dimensions and joint limits
            dtype: Floating point type of all computations
                   (default robot_config.solver.DEFAULT_DTYPE)
        """
        self.geometry = DeltaGeometry(dim, dtype)
        self.dtype = self.geometry.dtype

        logger.debug(
            'DeltaKinematics ready: sb=%s sp=%s L=%s l=%s dtype=%s',
            dim.sb, dim.sp, dim.L, dim.l, self.dtype
        )

    # -------------------------------------------------------------------------
    # Inverse kinematics
    # -------------------------------------------------------------------------

    def ipk_status(self, vector: DeltaVector) -> KinematicsStatus:
        """
        Solve IK for one pose.

        Reads vector.x/y/z and writes vector.phi1, phi2, phi3 in leg order,
        stopping at the first leg that fails.

        Returns:
            SUCCESS or the failure of the first unsolvable leg
        """
        geo = self.geometry
        position = np.array([vector.x, vector.y, vector.z], dtype=self.dtype)

        for leg, field_name in ((1, 'phi1'), (2, 'phi2'), (3, 'phi3')):
            platform_point = geo.leg_platform_point(position, leg)
            status, phi = calculate_angle(
                geo.b1, platform_point, geo.L, geo.l,
                geo.max_neg_angle, geo.min_parallelogram_angle
            )
            if not status.ok:
                return status
            setattr(vector, field_name, phi)

        return KinematicsStatus.SUCCESS

    def calculate_ipk(self, vectors: Sequence[DeltaVector], num: Optional[int] = None) -> int:
        """
        Inverse position kinematics for a batch of poses.

        Only joint coordinates are changed.

        Args:
            vectors: Pose buffers, mutated in place
            num: Number of poses to solve (default len(vectors))

        Returns:
            1 if a position was unreachable, 0 on success
        """
        return self._run_batch(self.ipk_status, vectors, num, 'IPK')

    # -------------------------------------------------------------------------
    # Forward kinematics
    # -------------------------------------------------------------------------

    def fpk_status(self, vector: DeltaVector) -> KinematicsStatus:
        """
        Solve FK for one pose.

        Reads vector.phi1..phi3 and writes vector.x, y, z only on success.

        Returns:
            SUCCESS or the trilateration failure
        """
        A1, A2, A3 = calculate_knee_points(self.geometry, vector.phi1, vector.phi2, vector.phi3)

        if A1[2] == A2[2] and A2[2] == A3[2]:
            solver = three_spheres_intersection_level
        else:
            solver = three_spheres_intersection

        status, position = solver(A1, A2, A3, self.geometry.l, self._round_trip)
        if not status.ok:
            return status

        vector.x, vector.y, vector.z = position
        return KinematicsStatus.SUCCESS

    def calculate_fpk(self, vectors: Sequence[DeltaVector], num: Optional[int] = None) -> int:
        """
        Forward position kinematics for a batch of poses.

        Only cartesian coordinates are changed.

        Args:
            vectors: Pose buffers, mutated in place
            num: Number of poses to solve (default len(vectors))

        Returns:
            1 if a position was unreachable or singular, 0 on success
        """
        return self._run_batch(self.fpk_status, vectors, num, 'FPK')

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _round_trip(self, candidate: np.ndarray) -> bool:
        """Check an FK candidate by solving IK on a scratch pose."""
        scratch = DeltaVector(x=candidate[0], y=candidate[1], z=candidate[2])
        return self.ipk_status(scratch).ok

    def _run_batch(self, solve_one, vectors, num, label: str) -> int:
        if num is None:
            num = len(vectors)

        for i in range(num):
            status = solve_one(vectors[i])
            if not status.ok:
                logger.debug('%s failed for pose %d: %s', label, i, status.name)
                return 1

        return 0
