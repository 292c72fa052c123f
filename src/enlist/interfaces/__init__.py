"""Interfaces (application boundary) for ENLIST.

Defines framework-free application contracts: ABCs for the collaborators the
registration workflow depends on (user repository, newsletter service,
structured logger, error channel, ID generator, redactor) and the small
tagged `Outcome` type they return. Business rules stay out of this package.

Dependency rule: may import `enlist.domain` value types only. It may be
imported by `enlist.service_layer`, `enlist.adapters`, and `enlist.bootstrap`.
"""
