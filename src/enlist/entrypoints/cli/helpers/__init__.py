"""CLI helpers for ENLIST.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji→ASCII fallbacks, and the NAME=LEVEL logger-level parser.
"""

from .messages import error, success, warn

__all__ = ["error", "warn", "success"]
