"""The Lie groups SO(2) and SE(2) with their tangent spaces and Jacobians, and residual helpers for estimation."""

__version__ = "0.1.0"
__all__ = ["so2", "se2", "factors"]