"""geometry_fitting.core.constants

Numeric constants shared by the fitting solvers.
"""

# Threshold for floating-point equality tests on scatter sums, eigenvalues
# and singular values. Used unchanged by every solver.
EPS = 1e-8
