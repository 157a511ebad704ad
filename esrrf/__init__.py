"""Radial gradient convergence super-resolution of 16-bit TIFF image stacks."""

__version__ = "0.1.0"