"""A 3D Gauss-Markov mobility model with memory, variability and bounds."""

__version__ = "0.1.0"
__all__ = ["geometry", "model", "randomvars"]