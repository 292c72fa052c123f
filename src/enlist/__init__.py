"""ENLIST

A small service layer for user registration. Every upstream failure is
normalized into one coded application error and one uniform response shape.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
