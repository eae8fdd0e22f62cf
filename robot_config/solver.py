"""
Solver Parameters
=================
Defaults for the inverse and forward position kinematics solvers.
"""

import numpy as np

# =============================================================================
# NUMERIC TYPE
# =============================================================================

DEFAULT_DTYPE = np.float64
"""Floating point type used when an engine is built without a dtype"""

SUPPORTED_DTYPES = (np.float32, np.float64)
"""Floating point types the solvers are written for"""

# =============================================================================
# FRAME ROTATION
# =============================================================================

ROTATION_120_COS = -0.5
"""cos(120°), entry of the leg-to-leg rotation matrices"""

ROTATION_120_SIN = 0.866025403784439
"""sin(120°), entry of the leg-to-leg rotation matrices"""
