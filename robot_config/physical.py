"""
Robot Physical Parameters
=========================
Geometric dimensions and joint limits of the reference delta robot.

This is the MASTER SOURCE for the reference robot used by the examples
and tests. Solvers take their dimensions from a DeltaGeometricDim, which
can be built from these values with DeltaGeometricDim.from_config().
"""

# =============================================================================
# TRIANGLE DIMENSIONS (mm)
# =============================================================================

BASE_SIDE = 660.0
"""Side of the fixed-base equilateral triangle (660mm)"""

PLATFORM_SIDE = 90.0
"""Side of the moving-platform equilateral triangle (90mm)"""

# =============================================================================
# LEG DIMENSIONS (mm)
# =============================================================================

UPPER_LEG_LENGTH = 200.0
"""Upper arm length, revolute joint to knee (200mm)"""

LOWER_LEG_LENGTH = 530.0
"""Lower leg parallelogram length, knee to platform (530mm)"""

PARALLELOGRAM_WIDTH = 70.0
"""Lower leg parallelogram width (70mm), stored only"""

# =============================================================================
# JOINT LIMITS (degrees)
# =============================================================================

MAX_NEGATIVE_ANGLE = -5.0
"""Most negative arm angle allowed (knee above the fixed-base plane)"""

MIN_PARALLELOGRAM_ANGLE = 55.0
"""Minimum parallelogram angle imposed by the universal joints"""
