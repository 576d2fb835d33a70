"""Classic searching, sorting, dynamic programming, graph and data-structure routines."""

__version__ = "0.1.0"
__all__ = ["searching", "sorting", "dynamic", "graphs", "structures"]