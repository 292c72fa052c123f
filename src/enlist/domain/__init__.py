"""Domain layer for ENLIST.

Contains business rules and value types: the registration data model,
application codes, and the coded error used to signal failure uniformly.
This package is deliberately technology-agnostic.

Dependency rule: do not import from `enlist.adapters` or `enlist.entrypoints`.
"""
