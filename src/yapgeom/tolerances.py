"""Shared tolerances and coordinate-space names for yapgeom.

Like ``epsilon`` in yapCAD, these are module-level "constants".
Redefine them at your peril.
"""

from __future__ import annotations

# Name of the space that untagged geometry lives in.
GLOBAL_SPACE = "global"

# Prefix of the generated local space name of an unnamed frame.
LOCAL_SPACE = "local"

# Prefix of the generated local space name of an unnamed sketch plane.
SKETCH_SPACE = "sketch"

# Accepted deviation of |d|^2 from 1 when a direction is built directly.
UNIT_LENGTH_TOLERANCE = 1e-9

# Default tolerance for frame/sketch plane orthonormality checks.
ORTHONORMAL_TOLERANCE = 1e-9

# Relative threshold below which three points are treated as collinear
# when computing a circumcenter.
DEGENERATE_TRIANGLE_TOLERANCE = 1e-12
