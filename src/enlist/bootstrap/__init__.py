"""Bootstrap (composition root) for ENLIST.

Assembles the application at runtime: wires the in-memory adapters, the
structured logger and the error channel into the registration workflow,
injects the workflow into service-layer handlers, builds the message bus and
reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `enlist.adapters`, `enlist.service_layer`,
  `enlist.interfaces`, `enlist.domain`, and `enlist.config`.
- Inner layers must not import `enlist.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""
