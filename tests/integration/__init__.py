"""Integration tests.

Purpose
- Exercise the composition root and the real in-memory adapters together.

Guidelines
- Build the application with `bootstrap()`; avoid test doubles here.
- Marked 'integration' automatically by the root conftest.
"""
