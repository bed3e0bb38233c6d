"""Molecular integrals over contracted Cartesian Gaussian basis functions."""

__version__ = "0.1.0"

__all__ = ["constants", "mat2d", "basis", "gaussian", "int1e", "int2e", "molecule"]