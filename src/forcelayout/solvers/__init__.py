"""
Layout Solver Engine
====================
Time-stepping of the layout: force evaluation followed by integration.

Note: This package should be pure Python/NumPy and should NOT import PyVista.
"""
from forcelayout.solvers.integrator import Integrator
from forcelayout.solvers.solver import LayoutSolver, RelaxationResult

__all__ = ["Integrator", "LayoutSolver", "RelaxationResult"]
