"""A dining-philosophers simulation and a minimal interactive shell."""

__version__ = "0.1.0"