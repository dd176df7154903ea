"""One-dimensional shallow water solver.

Explicit finite-volume time marching for depth ``h`` and momentum ``hu`` with
pluggable flux kernels, timestep strategies, boundary conditions and initial
conditions.
"""

__version__ = "0.1.0"
