# MIT License (see LICENSE)
"""
Simulation constants.

Units are whatever the host uses for positions (typically pixels) and
seconds for time. The y axis points down, so a positive gravity pulls
particles towards larger y.
"""
from __future__ import annotations

# Gravity magnitude applied to every free particle, in units/s².
GRAVITY: float = 20.0

# Constraint relaxation sweeps per frame.
DEFAULT_ITERATIONS: int = 10

# Adjacent particles closer than this are treated as coincident and their
# constraint is skipped for the sweep. The correction (d - rest) / d is
# undefined at d = 0 and would write non-finite values into both positions.
MIN_DISTANCE: float = 1e-9
